import sys
import time
import importlib
import traceback
from pathlib import Path
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """ansi colour codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """an assertion failure, as opposed to an unexpected exception in the code under test."""
    pass


# --- public api ---

def test(description: str) -> Callable:
    """register a zero-argument function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """call func and require it to raise error_type. returns the caught error for further checks."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)}")


def run(title: str = "test run", verbose: bool = False) -> int:
    """run every registered test, print a report and return the number of failures."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []
    for test_item in _suite_state['tests']:
        description = test_item['description']
        error: Optional[str] = None
        try:
            test_item['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()

        _suite_state['results'].append({'passed': error is None, 'description': description, 'error': error})
        if error is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    failed = _print_summary(start_time)
    # registered tests are consumed so several suites can run in one process
    _suite_state['tests'] = []
    return failed


def _print_summary(start_time: float) -> int:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']
    total = len(results)
    failed = sum(1 for r in results if not r['passed'])
    colour = _c.ok if failed == 0 else _c.fail

    print(f"\n{colour}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {total - failed}{_c.reset}, {_c.fail}failed: {failed}{_c.reset}")
    print(f"{colour}---------------{_c.reset}\n")
    return failed


def main(test_dir: str = 'underbar_tests') -> None:
    """import every *_tests.py module in test_dir and run each as its own suite."""
    root = Path(__file__).resolve().parent
    sys.path.insert(0, str(root / test_dir))
    # test modules import `suite`, which is a different module object from __main__
    registry = importlib.import_module('suite')
    failed = 0
    for path in sorted((root / test_dir).glob('*_tests.py')):
        importlib.import_module(path.stem)
        failed += registry.run(title=path.stem, verbose='-v' in sys.argv)
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
