"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.book import Book, BookInput


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook")
    async def add_book(
        self,
        info: strawberry.Info,
        title: str | None = None,
        author: str | None = None,
        data: BookInput | None = None,
    ) -> Book:
        """Add a book. Accepts flat `title`/`author` or a `data` input object."""
        from ..resolvers.book import add_book

        if data is not None:
            title, author = data.title, data.author
        if title is None or author is None:
            raise ValueError("addBook requires title and author")

        return await add_book(info, title, author)
