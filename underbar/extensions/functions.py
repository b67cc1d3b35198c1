from __future__ import annotations
import logging
from dataclasses import dataclass, field
from functools import partial, update_wrapper
from ..types import *
from .. import config

logger = logging.getLogger(__name__)


@dataclass
class OnceState:
    called: bool = False
    result: Any = None


class Once(Generic[T]):
    """
    wrapper that calls through to func on its first invocation only.
    every later call, whatever its arguments, returns that first result.
    """

    def __init__(self, func: Callable[..., T]):
        self._func = func
        self._name = getattr(func, '__name__', repr(func))
        self._state = OnceState()
        update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> T:
        state = self._state
        if not state.called:
            state.result = self._func(*args, **kwargs)
            state.called = True
        return state.result

    def __get__(self, instance, owner=None):
        # used as a method the instance becomes the first argument; state stays per wrapper
        if instance is None:
            return self
        return partial(self, instance)

    def __repr__(self) -> str:
        return f"Once(func={self._name!r}, called={self._state.called})"


@dataclass
class MemoTable:
    entries: Dict[str, Any] = field(default_factory=dict)


class Memoized(Generic[T]):
    """
    wrapper caching func's result per distinct argument list.
    arguments are reduced to a string by a key function (json by default),
    so two calls whose arguments serialise the same share one result.
    """

    def __init__(self, func: Callable[..., T], key_function: Optional[KeyFunction] = None):
        self._func = func
        self._name = getattr(func, '__name__', repr(func))
        self._key_function = key_function
        self._table = MemoTable()
        update_wrapper(self, func)

    def _key(self, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> str:
        key_function = self._key_function or config.get_settings().key_function
        return key_function(args, kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> T:
        key = self._key(args, kwargs)
        entries = self._table.entries
        if key not in entries:
            logger.debug(f"memoize miss for {self._name}: {key}")
            entries[key] = self._func(*args, **kwargs)
        return entries[key]

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return partial(self, instance)

    def __repr__(self) -> str:
        return f"Memoized(func={self._name!r}, entries={len(self._table.entries)})"


def once(func: Callable[..., T]) -> Once[T]:
    """decorator: run func at most once and remember its result"""
    return Once(func)


def memoize(func: Optional[Callable[..., T]] = None, *,
            key_function: Optional[KeyFunction] = None) -> Union[Memoized[T], Callable[[Callable[..., T]], Memoized[T]]]:
    """
    decorator: cache func's results by argument list.
    usable bare (@memoize) or with a custom key (@memoize(key_function=...)).
    """
    if func is None:
        return lambda f: Memoized(f, key_function)
    return Memoized(func, key_function)


def delay(func: Callable[..., Any], wait_ms: float, *args: Any, **kwargs: Any) -> None:
    """
    schedule func(*args, **kwargs) to run once, no earlier than wait_ms from now.
    fire and forget: nothing is returned and the call cannot be cancelled.
    """
    scheduler = config.get_settings().scheduler
    logger.debug(f"scheduling {getattr(func, '__name__', func)!r} in {wait_ms}ms")
    scheduler(lambda: func(*args, **kwargs), wait_ms)
