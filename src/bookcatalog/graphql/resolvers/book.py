from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog import BookCatalog
from ...logging import get_logger

if TYPE_CHECKING:
    from ..types.book import Book

logger = get_logger(__name__)


def get_catalog_from_info(info: strawberry.Info) -> BookCatalog:
    """Get the request's catalog from the GraphQL context."""
    catalog = info.context.get("catalog")
    if catalog is None:
        raise RuntimeError("GraphQL context has no catalog")
    return catalog


# Query resolvers
async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in catalog order."""
    from ..types.book import Book as BookType

    catalog = get_catalog_from_info(info)
    return [BookType.from_model(book) for book in catalog.list_books()]


async def resolve_book_by_id(info: strawberry.Info, book_id: str) -> Book | None:
    """
    Resolve a book by its id.

    A missing book resolves to null rather than an error.
    """
    from ..types.book import Book as BookType

    catalog = get_catalog_from_info(info)
    book = catalog.get_book_by_id(book_id)
    if book is None:
        logger.info("Book not found", book_id=book_id)
        return None

    return BookType.from_model(book)


# Mutation resolvers
async def add_book(info: strawberry.Info, title: str, author: str) -> Book:
    """Append a book to the catalog and return it."""
    from ..types.book import Book as BookType

    catalog = get_catalog_from_info(info)
    try:
        book = catalog.add_book(title, author)
    except Exception as e:
        logger.error("Failed to add book", title=title, author=author, error=str(e))
        raise

    return BookType.from_model(book)
