"""
Book resolvers for GraphQL API
"""

import strawberry

from ...catalog import Catalog
from ..types.book import Book


def resolve_books(info: strawberry.Info) -> list[Book]:
    """Return every book in the catalog, in catalog order.

    Args:
        info: GraphQL info context carrying the catalog

    Returns:
        List of Book objects
    """
    catalog: Catalog = info.context["catalog"]
    return [Book.from_record(record) for record in catalog]
