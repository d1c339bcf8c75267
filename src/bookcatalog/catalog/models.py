"""Pydantic models for catalog entries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """A single catalog entry.

    Instances are frozen: the catalog hands out its own records, so callers
    must not be able to change an id or title in place.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    author: str
