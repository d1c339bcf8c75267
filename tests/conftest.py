"""
Shared pytest fixtures and configuration for all tests.
"""

import json
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from bookcatalog.catalog import BookCatalog, create_catalog


@pytest.fixture
def catalog() -> BookCatalog:
    """Provide a catalog seeded with the default books."""
    return create_catalog()


@pytest.fixture
def mock_info(catalog: BookCatalog) -> MagicMock:
    """Create a mock GraphQL info object whose context holds the catalog."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "catalog": catalog}
    return info


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """Write a valid three-book seed file and return its path."""
    path = tmp_path / "books.json"
    path.write_text(
        json.dumps(
            [
                {"id": "10", "title": "Kindred", "author": "Octavia E. Butler"},
                {"id": "11", "title": "Beloved", "author": "Toni Morrison"},
                {"id": "15", "title": "Invisible Cities", "author": "Italo Calvino"},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
