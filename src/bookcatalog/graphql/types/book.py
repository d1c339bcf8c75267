"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...catalog.models import Book as BookModel


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID
    title: str
    author: str

    @classmethod
    def from_model(cls, book: "BookModel") -> "Book":
        """Convert a catalog entry to its GraphQL type."""
        return cls(id=strawberry.ID(book.id), title=book.title, author=book.author)


@strawberry.input
class BookInput:
    """Input for adding a new book."""

    title: str
    author: str
