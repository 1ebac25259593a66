"""
Book GraphQL type definitions
"""

import strawberry

from ...catalog import BookRecord


@strawberry.type
class Book:
    """A book in the catalog."""

    title: str | None
    author: str | None

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(title=record.title, author=record.author)
