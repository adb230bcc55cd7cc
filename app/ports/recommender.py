"""Recommender port: abstract interface for the recommendation engine."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from app.domain.models import Book


class RecommenderPort(ABC):
    """Abstraction for the book recommendation engine."""

    @abstractmethod
    def recommend(self, books: Sequence[Book]) -> list[Book]:
        """Return the recommended books chosen from ``books``."""
        ...
