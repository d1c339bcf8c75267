"""Exceptions raised by the book catalog."""


class CatalogError(Exception):
    """Base class for catalog failures."""

    pass


class SeedDataError(CatalogError):
    """Raised when seed data cannot be loaded or violates catalog invariants."""

    pass
