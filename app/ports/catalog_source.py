"""Catalog source port: where the initial book records come from."""

from abc import ABC, abstractmethod

from app.domain.models import Book


class CatalogSourcePort(ABC):
    """Abstraction for loading the startup catalog."""

    @abstractmethod
    async def load(self) -> list[Book]:
        """Return the seed books in catalog order."""
        ...
