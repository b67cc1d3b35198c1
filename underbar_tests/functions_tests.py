import threading
import suite
from underbar import once, memoize, delay, Once, Memoized, configure, get_settings, reset
from underbar.config import json_key

assert_that = suite.assert_that


# --- once ---

@suite.test("once calls through a single time and repeats the first result")
def test_once_basic():
    calls = []

    def add(a, b):
        calls.append((a, b))
        return a + b

    add_once = once(add)
    results = [add_once(1, 2), add_once(10, 20), add_once(b=5, a=5)]
    assert_that(calls == [(1, 2)], f"underlying function should run once, ran {calls}")
    assert_that(results == [3, 3, 3], f"every call returns the first result, got {results}")


@suite.test("once remembers a none result")
def test_once_none_result():
    counter = {'n': 0}

    @once
    def init():
        counter['n'] += 1

    init(); init(); init()
    assert_that(counter['n'] == 1, f"a none result still counts as called, ran {counter['n']} times")


@suite.test("once keeps the wrapped function's metadata")
def test_once_metadata():
    @once
    def setup():
        """prepare things"""
        return 1

    assert_that(isinstance(setup, Once), "decorator returns a Once wrapper")
    assert_that(setup.__name__ == 'setup' and setup.__doc__ == 'prepare things', "name and doc are copied")


@suite.test("once works as a method and receives the instance")
def test_once_method():
    class Service:
        def __init__(self, name):
            self.name = name

        @once
        def connect(self):
            return f"connected:{self.name}"

    first, second = Service('a'), Service('b')
    assert_that(first.connect() == 'connected:a', "instance is passed as the first argument")
    # state lives on the wrapper, so it is shared by every instance
    assert_that(second.connect() == 'connected:a', "later calls return the first result")


@suite.test("separate once wrappers have separate state")
def test_once_independent():
    a, b = once(lambda: 'a'), once(lambda: 'b')
    assert_that((a(), b()) == ('a', 'b'), "wrappers should not share results")


# --- memoize ---

@suite.test("memoize computes once per distinct argument list")
def test_memoize_basic():
    calls = []

    @memoize
    def square(x):
        calls.append(x)
        return x * x

    results = [square(3), square(3), square(4), square(3)]
    assert_that(results == [9, 9, 16, 9], f"got {results}")
    assert_that(calls == [3, 4], f"each distinct argument computed once, got {calls}")
    assert_that(isinstance(square, Memoized), "decorator returns a Memoized wrapper")


@suite.test("memoize treats equal serialisations as the same call")
def test_memoize_equal_serialisation():
    calls = []

    @memoize
    def describe(options):
        calls.append(options)
        return len(options)

    describe({'a': 1, 'b': 2})
    describe({'b': 2, 'a': 1})
    assert_that(len(calls) == 1, f"key order should not matter, called {len(calls)} times")


@suite.test("memoize caches none results")
def test_memoize_none():
    calls = []

    @memoize
    def lookup(key):
        calls.append(key)
        return None

    lookup('x'); lookup('x')
    assert_that(calls == ['x'], f"a none result is still cached, got {calls}")


@suite.test("memoize distinguishes keyword arguments")
def test_memoize_kwargs():
    calls = []

    @memoize
    def scale(x, factor=1):
        calls.append((x, factor))
        return x * factor

    assert_that(scale(2, factor=3) == 6 and scale(2, factor=3) == 6, "repeat call is cached")
    assert_that(scale(2) == 2, "different kwargs compute again")
    assert_that(len(calls) == 2, f"got {calls}")


@suite.test("memoize accepts a custom key function")
def test_memoize_custom_key():
    calls = []

    @memoize(key_function=lambda args, kwargs: str(args[0]).lower())
    def greet(name):
        calls.append(name)
        return f"hello {name}"

    assert_that(greet('Ann') == 'hello Ann', "first call computes")
    assert_that(greet('ANN') == 'hello Ann', "same key returns the stored result")
    assert_that(calls == ['Ann'], f"got {calls}")


@suite.test("memoize uses the configured key function")
def test_memoize_configured_key():
    try:
        configure(key_function=lambda args, kwargs: 'same')
        calls = []
        constant = memoize(lambda x: calls.append(x) or x)
        assert_that(constant(1) == 1 and constant(2) == 1, "every call shares one key")
        assert_that(calls == [1], f"got {calls}")
    finally:
        reset()


@suite.test("default key serialises arguments deterministically")
def test_json_key():
    assert_that(json_key((1, 'a'), {}) == json_key((1, 'a'), {}), "stable for equal input")
    assert_that(json_key(({'b': 1, 'a': 2},), {}) == json_key(({'a': 2, 'b': 1},), {}), "dict keys are sorted")
    assert_that(json_key((1,), {}) != json_key(('1',), {}), "types are kept apart")


@suite.test("memoize accepts dicts whose keys mix types")
def test_memoize_mixed_keys():
    calls = []

    @memoize
    def size(mapping):
        calls.append(mapping)
        return len(mapping)

    assert_that(size({1: 'a', 'b': 2}) == 2, "mixed key types should not break the cache key")
    assert_that(size({'b': 2, 1: 'a'}) == 2, "same mapping in another order")
    assert_that(len(calls) == 1, f"both calls share one key, called {len(calls)} times")
    assert_that(json_key(({1: {2: 'x', 'y': 3}},), {}) == json_key(({1: {'y': 3, 2: 'x'}},), {}), "nested dicts too")


# --- delay ---

@suite.test("delay hands the call to the configured scheduler")
def test_delay_fake_scheduler():
    scheduled = []
    calls = []
    try:
        configure(scheduler=lambda callback, duration_ms: scheduled.append((callback, duration_ms)))
        result = delay(lambda a, b: calls.append((a, b)), 500, 'a', 'b')
        assert_that(result is None, "delay returns nothing")
        assert_that(calls == [], "nothing runs before the scheduler fires")
        assert_that(len(scheduled) == 1 and scheduled[0][1] == 500, f"got {scheduled}")
        scheduled[0][0]()
        assert_that(calls == [('a', 'b')], f"arguments are forwarded, got {calls}")
    finally:
        reset()


@suite.test("delay runs the call later on the default timer")
def test_delay_timer():
    fired = threading.Event()
    received = []

    def callback(value):
        received.append(value)
        fired.set()

    delay(callback, 10, 'payload')
    assert_that(fired.wait(timeout=5), "the delayed call should fire")
    assert_that(received == ['payload'], f"got {received}")


# --- config ---

@suite.test("configure validates names and callables")
def test_configure_validation():
    try:
        suite.assert_raises(ValueError, configure, colour='blue')
        suite.assert_raises(TypeError, configure, scheduler=5)
        suite.assert_raises(TypeError, configure, key_function='json')
        assert_that(configure(random_state=3).random_state == 3, "valid settings are applied")
        assert_that(get_settings().random_state == 3, "get_settings sees the update")
    finally:
        reset()
    assert_that(get_settings().random_state is None, "reset restores defaults")


if __name__ == "__main__":
    suite.run(title="underbar function decorator tests")
