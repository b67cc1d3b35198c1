from __future__ import annotations
from collections.abc import MutableMapping
from ..types import *
from .core import each


def extend(target: T, *sources: Any) -> T:
    """
    copy every key of every source onto target, in source order.
    later sources win over earlier ones and over keys already on target.
    returns target itself, not a copy.

    ex: extend({'a': 1}, {'b': 2}, {'a': 3}) -> {'a': 3, 'b': 2}
    """
    if not isinstance(target, MutableMapping):
        return target

    def assign(value, key):
        target[key] = value

    for source in sources:
        each(source, assign)
    return target


def defaults(target: T, *sources: Any) -> T:
    """like extend, but only fills keys that target does not have yet"""
    if not isinstance(target, MutableMapping):
        return target

    def fill(value, key):
        if key not in target:
            target[key] = value

    for source in sources:
        each(source, fill)
    return target
