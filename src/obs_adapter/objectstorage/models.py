"""Value types shared by the OBS client wrapper and the listing loop."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional


@dataclass(frozen=True)
class ObjectEntry:
    """A single object entry from a listing page.

    Attributes:
        key: Full object key
        size: Object size in bytes, when the store reports it
        last_modified: Last modification time, when the store reports it
    """

    key: str
    size: int = 0
    last_modified: Optional[datetime] = None


@dataclass(frozen=True)
class ListingPage:
    """One response from a delimiter-aware listing request."""

    contents: tuple[ObjectEntry, ...] = ()
    common_prefixes: tuple[str, ...] = ()
    is_truncated: bool = False
    next_marker: Optional[str] = None


@dataclass(frozen=True)
class ListingResult:
    """Every object key and common prefix gathered across all listing pages.

    Unpacks like a pair, so ``objects, prefixes = storage.list_objects(...)``
    works.
    """

    objects: tuple[str, ...]
    common_prefixes: tuple[str, ...]
    pages: int = 1

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return iter((self.objects, self.common_prefixes))
