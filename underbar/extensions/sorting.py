from __future__ import annotations
from ..types import *
from .core import identity, property_of, is_sequence, is_mapping
from .derived import map_


def _key_selector(selector: KeySelector) -> Callable[[Any], Any]:
    if isinstance(selector, str):
        return property_of(selector)
    if callable(selector):
        return selector
    return identity


def _merge(left: List[Tuple[Any, Any]], right: List[Tuple[Any, Any]]) -> List[Tuple[Any, Any]]:
    """
    two-pointer merge of (key, item) runs. the left head wins ties, which keeps
    the sort stable, and a none key always loses to a defined one.
    """
    result = []
    i, j = 0, 0
    while i < len(left) and j < len(right):
        left_key, right_key = left[i][0], right[j][0]
        if right_key is None or (left_key is not None and left_key <= right_key):
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1

    result.extend(left[i:])
    result.extend(right[j:])
    return result


def _merge_sort(keyed: List[Tuple[Any, Any]]) -> List[Tuple[Any, Any]]:
    if len(keyed) <= 1:
        return keyed
    mid = len(keyed) // 2
    return _merge(_merge_sort(keyed[:mid]), _merge_sort(keyed[mid:]))


def sort_by(collection: Any, key_selector: KeySelector = None) -> List[Any]:
    """
    stable sort by a property name, a key function, or the elements themselves.
    elements whose key is none go to the end, in their original order.
    mappings sort their values; anything else sorts to an empty list.

    ex: sort_by([{'k': 2}, {}, {'k': 1}], 'k') -> [{'k': 1}, {'k': 2}, {}]
    """
    if not (is_sequence(collection) or is_mapping(collection)):
        return []
    key = _key_selector(key_selector)
    # each key is computed once up front rather than on every comparison
    keyed = map_(collection, lambda item: (key(item), item))
    return [item for _, item in _merge_sort(keyed)]
