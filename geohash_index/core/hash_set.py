"""
Collections of geohashes and geohash ranges.
"""
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from geohash_index.core import geohash as gh
from geohash_index.core.point import Point
from geohash_index.utils.exceptions import InvalidGeohashError


Member = Union[str, Tuple[str, str]]


class HashSet:
    """
    An ordered collection of geohashes or inclusive geohash ranges.

    A range is a (first, last) pair of codes of the same length; it
    covers every code between them in lexical order. Members are only
    ever appended: no sorting, no de-duplication.

    Example:
        >>> region = HashSet()
        >>> region.add("drt2")
        >>> region.add_range("drt3h", "drt3z")
        >>> region.export()
        ['drt2', ('drt3h', 'drt3z')]
    """

    def __init__(self, members: Optional[Iterable[Member]] = None):
        self._members: List[Member] = []
        for member in members or ():
            if isinstance(member, str):
                self.add(member)
            else:
                first, last = member
                self.add_range(first, last)

    def add(self, geohash: str) -> None:
        self._members.append(geohash)

    def add_range(self, first: str, last: str) -> None:
        """Append the inclusive range of codes from `first` to `last`."""
        if len(first) != len(last):
            raise InvalidGeohashError(
                f"Range endpoints must have the same length, got {first!r} and {last!r}"
            )
        self._members.append((first, last))

    def add_set(self, other: "HashSet") -> None:
        self._members.extend(other._members)

    def contains(self, point: Point) -> bool:
        """
        True if the point falls within one of the member boxes.

        Ranges are scanned code by code from first to last.
        """
        return any(gh.contains(code, point) for code in self.codes())

    def codes(self) -> Iterator[str]:
        """Yield every geohash the members cover, ranges expanded, in member order."""
        for member in self._members:
            if isinstance(member, tuple):
                first, last = member
                code = first
                while code is not None and code <= last:
                    yield code
                    code = gh.increment(code)
            else:
                yield member

    def export(self) -> List[Member]:
        """
        Return the members as a list.

        Plain codes are strings; ranges are (first, last) tuples. This is
        the region descriptor handed to a range-scan index.
        """
        return list(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"HashSet({self._members!r})"
