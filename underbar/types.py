from typing import (
    TypeVar, Generic, Callable, Iterable, Iterator, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# a visitor receives (value, position, collection) and may accept fewer args
Visitor = Callable[..., Any]
Predicate = Callable[..., bool]
Combiner = Callable[..., U]
KeySelector = Union[str, Callable[[T], K], None]
KeyFunction = Callable[[Tuple[Any, ...], Dict[str, Any]], str]
Scheduler = Callable[[Callable[[], Any], float], Any]


class _Missing:
    """marker for 'no argument supplied' where none is a legitimate value"""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


# --- errors ---

class UnderbarError(Exception):
    """base class for errors raised by underbar itself."""
    pass


class MissingMethodError(UnderbarError, AttributeError):
    """raised by invoke when an element has no callable method of the requested name."""

    def __init__(self, element: Any, name: str):
        super().__init__(f"{type(element).__name__!s} object has no callable method '{name}'")
        # set after init, which resets attributeerror.name
        self.element = element
        self.name = name


# --- invoke targets ---

class SharedCallable(Generic[T, U]):
    """one callable applied to every element, the element passed first"""

    def __init__(self, func: Callable[..., U]):
        self.func = func

    def call(self, element: T, args: Tuple[Any, ...]) -> U:
        return self.func(element, *args)

    def __repr__(self) -> str:
        return f"SharedCallable(func={getattr(self.func, '__name__', self.func)!r})"


class NamedMethod(Generic[T, U]):
    """a method looked up by name on each element"""

    def __init__(self, name: str):
        self.name = name

    def call(self, element: T, args: Tuple[Any, ...]) -> U:
        method = getattr(element, self.name, None)
        if not callable(method):
            raise MissingMethodError(element, self.name)
        return method(*args)

    def __repr__(self) -> str:
        return f"NamedMethod(name={self.name!r})"


Invocation = Union[SharedCallable, NamedMethod]


def as_invocation(method: Union[str, Callable, Invocation, None]) -> Optional[Invocation]:
    """resolve a method name, a callable or an existing invocation to one variant.
    anything else resolves to none, which invoke maps to none results."""
    if isinstance(method, (SharedCallable, NamedMethod)):
        return method
    if isinstance(method, str):
        return NamedMethod(method)
    if callable(method):
        return SharedCallable(method)
    return None
