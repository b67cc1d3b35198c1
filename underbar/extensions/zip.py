from __future__ import annotations
from ..types import *
from .core import is_sequence


def zip_(*sequences: Any) -> List[Tuple[Any, ...]]:
    """
    group the i-th elements of every sequence into tuples, padding with none.
    unlike the builtin zip the result is as long as the longest input,
    wherever that input sits in the argument list.

    ex: zip_(['a', 'b', 'c'], [1, 2]) -> [('a', 1), ('b', 2), ('c', None)]
    """
    columns = [sequence if is_sequence(sequence) else () for sequence in sequences]
    longest = max((len(column) for column in columns), default=0)
    return [tuple(column[i] if i < len(column) else None for column in columns)
            for i in range(longest)]
