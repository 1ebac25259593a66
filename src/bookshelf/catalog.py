"""
In-memory book catalog served by the GraphQL API
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class BookRecord:
    """A single book entry."""

    title: str | None
    author: str | None


@dataclass(frozen=True)
class Catalog:
    """Immutable, ordered collection of book records.

    Built once at startup and handed to resolvers through the GraphQL context.
    """

    books: tuple[BookRecord, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[BookRecord]) -> "Catalog":
        return cls(books=tuple(records))

    def __iter__(self) -> Iterator[BookRecord]:
        return iter(self.books)

    def __len__(self) -> int:
        return len(self.books)


DEFAULT_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(title="吾輩は猫である", author="夏目漱石"),
    BookRecord(title="走れメロス", author="太宰治"),
)


def default_catalog() -> Catalog:
    """Build the catalog the server exposes when none is supplied."""
    return Catalog(books=DEFAULT_BOOKS)
