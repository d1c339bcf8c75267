"""
Seed data for catalog initialization.

The catalog starts from ``DEFAULT_SEED_BOOKS`` unless a JSON seed file is
configured. A seed file holds an array of ``{"id", "title", "author"}``
objects.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..logging import get_logger
from .errors import SeedDataError
from .models import Book
from .service import BookCatalog

logger = get_logger(__name__)

DEFAULT_SEED_BOOKS: tuple[Book, ...] = (
    Book(id="0", title="The Awakening", author="Kate Chopin"),
    Book(id="1", title="City of Glass", author="Paul Auster"),
)

_INTEGER_ID = re.compile(r"-?[0-9]+")
_books_adapter = TypeAdapter(list[Book])


def validate_seed_books(books: Sequence[Book]) -> None:
    """
    Check that seed ids are integers in strictly increasing order.

    The catalog derives new ids from the last entry, so this ordering is
    what keeps ids unique after any number of additions.

    Raises:
        SeedDataError: If an id is non-numeric, duplicated or out of order
    """
    previous: int | None = None
    for position, book in enumerate(books):
        if not _INTEGER_ID.fullmatch(book.id):
            raise SeedDataError(f"Seed book at position {position} has non-numeric id '{book.id}'")
        value = int(book.id)
        if previous is not None and value <= previous:
            raise SeedDataError(
                f"Seed ids must be strictly increasing: '{book.id}' follows '{previous}'"
            )
        previous = value


def load_seed_books(path: str | Path) -> list[Book]:
    """
    Load seed books from a JSON file.

    Args:
        path: Path to a JSON array of book objects

    Returns:
        Validated list of books in file order

    Raises:
        SeedDataError: If the file is unreadable, malformed or invalid
    """
    seed_path = Path(path)
    try:
        raw = seed_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedDataError(f"Cannot read seed file {seed_path}: {e}") from e

    try:
        books = _books_adapter.validate_json(raw)
    except ValidationError as e:
        raise SeedDataError(f"Invalid seed file {seed_path}: {e}") from e

    validate_seed_books(books)
    logger.debug("Seed file loaded", path=str(seed_path), count=len(books))
    return books


def create_catalog(seed_path: str | Path | None = None) -> BookCatalog:
    """
    Create a catalog seeded from ``seed_path`` or the default seed.

    Args:
        seed_path: Optional JSON seed file

    Returns:
        A new BookCatalog owning its own copy of the seed
    """
    if seed_path:
        books = load_seed_books(seed_path)
    else:
        books = list(DEFAULT_SEED_BOOKS)

    logger.info(
        "Catalog seeded",
        source=str(seed_path) if seed_path else "default",
        count=len(books),
    )
    return BookCatalog(books)
