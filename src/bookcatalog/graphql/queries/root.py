"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Book

GREETING = "Hello world!"


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def hello(self) -> str | None:
        """Get the greeting."""
        return GREETING

    @strawberry.field
    async def books(self, info: strawberry.Info) -> list[Book]:
        """Get all books in catalog order."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)

    @strawberry.field(name="getBookById")
    async def get_book_by_id(
        self,
        info: strawberry.Info,
        id: strawberry.ID | None = None,
        book_id: strawberry.ID | None = None,
    ) -> Book | None:
        """Get a book by ID. `id` and `bookId` are interchangeable."""
        from ..resolvers.book import resolve_book_by_id

        lookup = id if id is not None else book_id
        if lookup is None:
            return None

        return await resolve_book_by_id(info, str(lookup))
