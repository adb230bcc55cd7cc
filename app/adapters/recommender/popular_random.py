import logging
import random
from collections.abc import Sequence

from app.domain.models import Book
from app.ports.recommender import RecommenderPort
from app.services.recommendation import (
    DEFAULT_POPULAR_COUNT,
    DEFAULT_TOTAL_COUNT,
    select_recommendations,
)

logger = logging.getLogger(__name__)


class PopularRandomRecommender(RecommenderPort):
    """
    Top books by checkout count, topped up with a random sample.

    Pass a seeded ``random.Random`` to make the random half reproducible.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        popular_count: int = DEFAULT_POPULAR_COUNT,
        total_count: int = DEFAULT_TOTAL_COUNT,
    ) -> None:
        if total_count <= 0 or not 0 <= popular_count <= total_count:
            raise ValueError(
                f"Invalid counts: popular_count={popular_count}, total_count={total_count}"
            )
        self._rng = rng or random.Random()
        self._popular_count = popular_count
        self._total_count = total_count

    def recommend(self, books: Sequence[Book]) -> list[Book]:
        result = select_recommendations(
            books,
            self._rng,
            popular_count=self._popular_count,
            total_count=self._total_count,
        )
        logger.info(
            "Recommended %d books (%d popular) from %d candidates",
            len(result),
            self._popular_count,
            len(books),
        )
        return result
