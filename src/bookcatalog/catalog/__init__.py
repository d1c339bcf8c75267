"""
Book catalog module
"""

from .errors import CatalogError, SeedDataError
from .models import Book
from .seed_data import DEFAULT_SEED_BOOKS, create_catalog, load_seed_books
from .service import BookCatalog

__all__ = [
    "Book",
    "BookCatalog",
    "CatalogError",
    "DEFAULT_SEED_BOOKS",
    "SeedDataError",
    "create_catalog",
    "load_seed_books",
]
