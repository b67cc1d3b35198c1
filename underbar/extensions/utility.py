from __future__ import annotations
import numpy as np
from ..types import *
from .. import config
from .core import is_sequence


def shuffle(sequence: Any, random_state: Optional[int] = None) -> List[Any]:
    """
    a new list with the elements in uniformly random order (fisher-yates).
    the input is left as it was. pass random_state, or set it through
    config.configure, for a reproducible order.
    """
    if not is_sequence(sequence):
        return []
    seed = random_state if random_state is not None else config.get_settings().random_state
    rng = np.random.default_rng(seed)

    working = list(sequence)
    n = len(working)
    for i in range(n):
        # numpy's high bound is exclusive, so j is drawn from [i, n)
        j = int(rng.integers(i, n))
        working[i], working[j] = working[j], working[i]
    return working


def flatten(nested: Any) -> List[Any]:
    """
    every non-sequence leaf of an arbitrarily nested sequence, depth first,
    left to right. strings count as leaves. a bare leaf flattens to [leaf].
    """
    output = []
    # explicit stack so nesting depth is not bounded by the recursion limit
    stack = [nested]
    while stack:
        item = stack.pop()
        if is_sequence(item):
            # pushed right to left so the leftmost child pops first
            stack.extend(reversed(list(item)))
        else:
            output.append(item)
    return output
