from __future__ import annotations
import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping as _Mapping, Sequence as _Sequence
from functools import partial
from ..types import *

# returned by a visitor to end an each() walk early
STOP = object()

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def is_sequence(obj: Any) -> bool:
    return isinstance(obj, _Sequence) and not isinstance(obj, (str, bytes, bytearray))


def is_mapping(obj: Any) -> bool:
    return isinstance(obj, _Mapping)


# --- walkers ---

class Walker(ABC):
    """uniform (position, value) traversal over one container shape"""

    def __init__(self, collection):
        self.collection = collection

    @abstractmethod
    def positions(self) -> Iterator[Tuple[Any, Any]]:
        """yield (position, value) pairs in walk order"""
        pass


class SequenceWalker(Walker):
    def positions(self) -> Iterator[Tuple[int, Any]]:
        return enumerate(self.collection)


class MappingWalker(Walker):
    def positions(self) -> Iterator[Tuple[Any, Any]]:
        collection = self.collection
        for key in collection:
            yield key, collection[key]


def walker_for(collection: Any) -> Optional[Walker]:
    """the single shape dispatch; none for anything that is not a collection"""
    if is_sequence(collection):
        return SequenceWalker(collection)
    if is_mapping(collection):
        return MappingWalker(collection)
    return None


# --- callable helpers ---

def _positional_capacity(func: Callable) -> Optional[int]:
    """how many positional args func takes; none means any number"""
    if isinstance(func, type):
        # a class used as a visitor is a converter such as int or str; it gets the value only
        return 1
    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # some builtins expose no signature; give them the value only
        return 1
    count = 0
    for parameter in parameters:
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in _POSITIONAL:
            count += 1
    return count


def adapt(func: Callable, context: Any = MISSING) -> Callable:
    """
    bind an explicit context as the first argument (when given) and trim the
    visit triple down to what func accepts, so `lambda x: ...` works anywhere.
    """
    if context is not MISSING:
        func = partial(func, context)
    capacity = _positional_capacity(func)
    if capacity is None:
        return func
    return lambda *args: func(*args[:capacity])


def identity(value: T) -> T:
    return value


def property_of(name: str) -> Callable[[Any], Any]:
    """getter for a named field; none when the element lacks it"""
    def getter(item):
        if is_mapping(item):
            return item.get(name)
        return getattr(item, name, None)
    getter.__name__ = f"property_of_{name}"
    return getter


# --- iteration core ---

def each(collection: Any, visit: Visitor, context: Any = MISSING) -> None:
    """
    call visit(value, position, collection) for every element.
    sequences walk indexes in ascending order, mappings walk their keys.
    anything else is silently ignored. a visitor may return STOP to end the walk.
    """
    walker = walker_for(collection)
    if walker is None:
        return
    visit = adapt(visit, context)
    for position, value in walker.positions():
        if visit(value, position, collection) is STOP:
            break


def index_of(sequence: Any, target: Any) -> int:
    """first index whose element equals target, -1 when absent"""
    if not is_sequence(sequence):
        return -1
    found = [-1]

    def check(item, index):
        if item == target:
            found[0] = index
            return STOP

    each(sequence, check)
    return found[0]


def _count(n: Any) -> Optional[int]:
    """n as a count, or none when it is not an integer (bools included)"""
    if isinstance(n, bool) or not isinstance(n, int):
        return None
    return n


def first(sequence: Any, n: Optional[int] = None) -> Any:
    """first element, or a list of the first n elements"""
    if not is_sequence(sequence):
        return None
    n = _count(n)
    if n is None:
        return sequence[0] if len(sequence) else None
    return list(sequence[:max(n, 0)])


def last(sequence: Any, n: Optional[int] = None) -> Any:
    """last element, or a list of the last n elements"""
    if not is_sequence(sequence):
        return None
    n = _count(n)
    if n is None:
        return sequence[-1] if len(sequence) else None
    length = len(sequence)
    if n >= length:
        return list(sequence)
    return list(sequence[length - max(n, 0):])
