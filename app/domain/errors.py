"""Domain errors raised by the catalog and recommendation services."""


class CatalogError(Exception):
    """Base class for every catalog failure. ``code`` names the kind."""

    code = "catalog_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BookNotFoundError(CatalogError):
    code = "not_found"

    def __init__(self, book_id: int) -> None:
        super().__init__(f"No book with id {book_id} found.")
        self.book_id = book_id


class DuplicateBookError(CatalogError):
    code = "duplicate_book"

    def __init__(self, book_id: int) -> None:
        super().__init__(f"A book with id {book_id} is already in the catalog.")
        self.book_id = book_id


class NoCopyAvailableError(CatalogError):
    code = "no_copy_available"

    def __init__(self, book_id: int, action: str = "check out") -> None:
        super().__init__(f"No copy available to {action} for book with id {book_id}.")
        self.book_id = book_id


class NoMatchingReturnError(CatalogError):
    code = "no_matching_return"

    def __init__(self, book_id: int, due_date: str) -> None:
        super().__init__(
            f"Book with id {book_id} has no outstanding copy due on {due_date}."
        )
        self.book_id = book_id
        self.due_date = due_date


class InsufficientCatalogError(CatalogError):
    code = "insufficient_catalog"

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Not enough unique books (need at least {required}, have {available})."
        )
        self.required = required
        self.available = available


class RecommendationConsistencyError(CatalogError):
    """Selector post-condition failed. Indicates a bug, not bad input."""

    code = "internal_consistency"


class CatalogLoadError(CatalogError):
    code = "catalog_load_failed"
