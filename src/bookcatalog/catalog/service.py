"""
In-memory book catalog.
"""

import threading
from collections.abc import Iterable, Iterator

from ..logging import get_logger
from .errors import CatalogError
from .models import Book

logger = get_logger(__name__)


class BookCatalog:
    """
    Ordered in-memory collection of books.

    Books are kept in insertion order. New ids are derived from the id of
    the last entry plus one, so the seed must already be in ascending id
    order for ids to stay unique (see ``seed_data.validate_seed_books``).
    """

    def __init__(self, books: Iterable[Book] | None = None):
        self._books: list[Book] = list(books or [])
        self._lock = threading.Lock()

    def list_books(self) -> list[Book]:
        """
        List all books in insertion order.

        Returns:
            A new list; mutating it does not affect the catalog
        """
        with self._lock:
            return list(self._books)

    def get_book_by_id(self, book_id: str) -> Book | None:
        """
        Get the first book whose id equals ``book_id``.

        Args:
            book_id: Id to look up, compared as a plain string

        Returns:
            Book or None if no entry matches
        """
        with self._lock:
            for book in self._books:
                if book.id == book_id:
                    return book
        return None

    def add_book(self, title: str, author: str) -> Book:
        """
        Append a new book with a freshly assigned id.

        Args:
            title: Book title, accepted as given
            author: Book author, accepted as given

        Returns:
            The newly created book

        Raises:
            CatalogError: If the last entry's id is not an integer
        """
        with self._lock:
            book = Book(id=self._next_id(), title=title, author=author)
            self._books.append(book)
            size = len(self._books)

        logger.info("Book added", book_id=book.id, catalog_size=size)
        return book

    def next_id(self) -> str:
        """Return the id the next added book would receive."""
        with self._lock:
            return self._next_id()

    def _next_id(self) -> str:
        if not self._books:
            last_id = 0
        else:
            last = self._books[-1].id
            try:
                last_id = int(last, 10)
            except ValueError as e:
                raise CatalogError(f"Cannot derive next id from non-numeric id '{last}'") from e
        return str(last_id + 1)

    def __len__(self) -> int:
        """Return the number of books in the catalog."""
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        """Iterate over a snapshot of the catalog."""
        return iter(self.list_books())

    def __contains__(self, book_id: object) -> bool:
        """Check if a book with the given id exists."""
        return isinstance(book_id, str) and self.get_book_by_id(book_id) is not None
