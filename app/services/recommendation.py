"""
Recommendation selection: a deterministic popular half plus a random half.

The selector is a pure function over a sequence of books and an injected
random source, so callers can seed it for reproducible output.
"""

import random
from collections.abc import Sequence

from app.domain.errors import InsufficientCatalogError, RecommendationConsistencyError
from app.domain.models import Book

DEFAULT_POPULAR_COUNT = 5
DEFAULT_TOTAL_COUNT = 10


def rank_by_popularity(books: Sequence[Book]) -> list[Book]:
    """Most checked out first; equal counts ordered by ascending id."""
    return sorted(books, key=lambda b: (-b.checkout_count, b.id))


def select_recommendations(
    books: Sequence[Book],
    rng: random.Random,
    popular_count: int = DEFAULT_POPULAR_COUNT,
    total_count: int = DEFAULT_TOTAL_COUNT,
) -> list[Book]:
    """
    Pick ``total_count`` distinct books.

    The first ``popular_count`` are the top of the popularity ranking. The
    rest are drawn uniformly from the remaining books using ``rng``.

    Raises:
        ValueError: the counts are out of range.
        InsufficientCatalogError: fewer than ``total_count`` distinct ids.
        RecommendationConsistencyError: the result broke its post-condition.
    """
    if total_count <= 0 or not 0 <= popular_count <= total_count:
        raise ValueError(
            f"Invalid counts: popular_count={popular_count}, total_count={total_count}"
        )

    unique_ids = {b.id for b in books}
    if len(unique_ids) < total_count:
        raise InsufficientCatalogError(total_count, len(unique_ids))

    selected_ids: set[int] = set()
    popular: list[Book] = []
    for book in rank_by_popularity(books):
        if len(popular) >= popular_count:
            break
        if book.id not in selected_ids:
            popular.append(book)
            selected_ids.add(book.id)

    remainder = [b for b in books if b.id not in selected_ids]
    rng.shuffle(remainder)

    picked: list[Book] = []
    for book in remainder:
        if len(popular) + len(picked) >= total_count:
            break
        if book.id not in selected_ids:
            picked.append(book)
            selected_ids.add(book.id)

    result = popular + picked
    if len(result) != total_count or len({b.id for b in result}) != total_count:
        raise RecommendationConsistencyError(
            f"Generated {len(result)} recommendations, expected {total_count} distinct books."
        )
    return result
