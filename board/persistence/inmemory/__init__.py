"""In-memory document store for testing."""

from .store import (
    InMemoryCollection,
    InMemoryCommandCursor,
    InMemoryCursor,
    InMemoryDatabase,
)

__all__ = [
    "InMemoryCollection",
    "InMemoryCommandCursor",
    "InMemoryCursor",
    "InMemoryDatabase",
]
