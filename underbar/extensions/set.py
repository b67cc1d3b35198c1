from __future__ import annotations
from ..types import *
from .core import each, is_sequence


class MembershipLedger(Generic[T]):
    """
    records, per distinct value, the set of sources it was seen in.
    hashable values are tracked in a dict; unhashable ones (lists, dicts)
    fall back to an equality scan so they can still be deduplicated.
    first-seen order is preserved for both.
    """

    def __init__(self):
        self._hashed: Dict[Any, Set[int]] = {}
        self._unhashed: List[Tuple[Any, Set[int]]] = []
        self._order: List[Tuple[bool, Any]] = []

    def _find_unhashed(self, value: Any) -> Optional[Set[int]]:
        for seen, sources in self._unhashed:
            if seen == value:
                return sources
        return None

    def sources_of(self, value: Any) -> Optional[Set[int]]:
        try:
            return self._hashed.get(value)
        except TypeError:
            return self._find_unhashed(value)

    def mark(self, value: Any, source: int) -> None:
        try:
            sources = self._hashed.get(value)
            if sources is None:
                sources = self._hashed[value] = set()
                self._order.append((True, value))
        except TypeError:
            sources = self._find_unhashed(value)
            if sources is None:
                sources = set()
                self._unhashed.append((value, sources))
                self._order.append((False, value))
        sources.add(source)

    def __contains__(self, value: Any) -> bool:
        return self.sources_of(value) is not None

    def __iter__(self) -> Iterator[Tuple[Any, Set[int]]]:
        for hashed, value in self._order:
            yield value, (self._hashed[value] if hashed else self._find_unhashed(value))

    def __len__(self) -> int:
        return len(self._order)


def intersection(*sequences: Any) -> List[Any]:
    """
    values present in every argument, each listed once in first-seen order.
    ex: intersection([1, 2, 3], [2, 3, 4], [2, 3, 5]) -> [2, 3]
    an argument that is not a sequence contributes nothing, so the result is empty.
    """
    ledger = MembershipLedger()

    def record(sequence, index):
        if is_sequence(sequence):
            each(sequence, lambda item: ledger.mark(item, index))

    each(sequences, record)
    wanted = len(sequences)
    return [value for value, sources in ledger if len(sources) == wanted]
