"""
Composable ordering rules.

An ``Ordering`` is an ordered chain of single-field ``SortKey`` rules. Comparison
walks the chain and returns the first non-zero result, so each key can be tested
on its own and the chain as a whole can be handed to ``sorted`` via ``as_key``.
"""

import math
from dataclasses import dataclass
from functools import cmp_to_key
from operator import attrgetter
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple


def total_order(value: Any) -> Any:
    """Float keys rank -0.0 below 0.0, matching how institutions tell them apart."""
    if isinstance(value, float):
        return (value, math.copysign(1.0, value))
    if isinstance(value, int):
        return (value, 1.0)
    return value


@dataclass(frozen=True)
class SortKey:
    """A single-field ordering rule."""

    name: str
    extractor: Callable[[Any], Any]
    descending: bool = False

    def compare(self, left: Any, right: Any) -> int:
        """Return -1, 0 or 1 comparing two items on this key."""
        a, b = total_order(self.extractor(left)), total_order(self.extractor(right))
        result = (a > b) - (a < b)
        return -result if self.descending else result

    def reversed(self) -> 'SortKey':
        return SortKey(self.name, self.extractor, not self.descending)


def ascending(name: str, extractor: Optional[Callable[[Any], Any]] = None) -> SortKey:
    """Ascending rule on ``extractor``; defaults to reading attribute ``name``."""
    return SortKey(name, extractor or attrgetter(name), descending=False)


def descending(name: str, extractor: Optional[Callable[[Any], Any]] = None) -> SortKey:
    """Descending rule on ``extractor``; defaults to reading attribute ``name``."""
    return SortKey(name, extractor or attrgetter(name), descending=True)


class Ordering:
    """Lexicographic composition of sort keys."""

    def __init__(self, keys: Iterable[SortKey] = ()):
        self._keys: Tuple[SortKey, ...] = tuple(keys)

    @property
    def keys(self) -> Tuple[SortKey, ...]:
        return self._keys

    def then(self, key: SortKey) -> 'Ordering':
        """Return a new ordering that breaks ties with ``key``."""
        return Ordering(self._keys + (key,))

    def reversed(self) -> 'Ordering':
        return Ordering(key.reversed() for key in self._keys)

    def compare(self, left: Any, right: Any) -> int:
        for key in self._keys:
            result = key.compare(left, right)
            if result:
                return result
        return 0

    def as_key(self) -> Callable[[Any], Any]:
        """Adapt the ordering for ``sorted`` and ``list.sort``."""
        return cmp_to_key(self.compare)

    def is_sorted(self, items: Sequence[Any]) -> bool:
        """Check that every adjacent pair is in order."""
        return all(self.compare(items[i], items[i + 1]) <= 0 for i in range(len(items) - 1))

    def describe(self) -> str:
        return ", ".join(f"{key.name} {'DESC' if key.descending else 'ASC'}" for key in self._keys)

    def __repr__(self) -> str:
        return f"Ordering({self.describe()})"


ENROLLMENT_ASC_RATING_DESC = (
    Ordering()
    .then(ascending('enrollment_count'))
    .then(descending('rating'))
)
