"""
Insertion-ordered set of strings.

Backs every list-of-strings field of the profile (skills, technologies,
responsibilities). Membership is case-sensitive: "Go" and "go" are distinct.
"""

from typing import Iterable, Iterator, List, Optional, Set


class OrderedSet:
    """
    Ordered list plus a membership set.

    Usage:
        skills = OrderedSet(["Python"])
        skills.add("Go")        # True
        skills.add("Python")    # False, already present
        skills.to_list()        # ["Python", "Go"]
    """

    def __init__(self, values: Optional[Iterable[str]] = None):
        self._items: List[str] = []
        self._members: Set[str] = set()
        for value in values or []:
            self.add(value)

    def add(self, value: str) -> bool:
        """Append value if absent. Returns True when it was added."""
        if value in self._members:
            return False
        self._items.append(value)
        self._members.add(value)
        return True

    def discard(self, value: str) -> bool:
        """Remove value if present. Returns True when it was removed."""
        if value not in self._members:
            return False
        self._members.remove(value)
        self._items.remove(value)
        return True

    def to_list(self) -> List[str]:
        return list(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedSet):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"OrderedSet({self._items!r})"


def dedupe(values: Iterable[str]) -> List[str]:
    """Drop repeated entries, keeping the first occurrence of each."""
    return OrderedSet(values).to_list()
