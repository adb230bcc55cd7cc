"""Local filesystem catalog source (JSON seed file)."""

import json
import logging
from pathlib import Path

import aiofiles
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from app.domain.errors import CatalogLoadError
from app.domain.models import Book
from app.ports.catalog_source import CatalogSourcePort

logger = logging.getLogger(__name__)


class BookRecord(BaseModel):
    """
    One book as stored in the seed file.

    Keys may be camelCase (``shelvingLocation``) or snake_case
    (``shelving_location``). The checkout counter is stored as
    ``amountOfTimesCheckedOut``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str = ""
    authors: list[str] = Field(default_factory=list)
    language: str = ""
    shelving_location: str = ""
    publication_date: str = ""
    publisher: str = ""
    subjects: list[str] = Field(default_factory=list)
    copies_available: int = 1
    total_copies: int = 1
    checkout_count: int = Field(default=0, alias="amountOfTimesCheckedOut")
    return_dates: list[str] | None = None

    def to_book(self) -> Book:
        fields = self.model_dump(exclude={"return_dates"})
        return Book(**fields, return_dates=list(self.return_dates or []))


class LocalCatalogSource(CatalogSourcePort):
    """Read the startup catalog from a JSON array on the local filesystem."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    async def load(self) -> list[Book]:
        """
        Parse the seed file into books.

        A missing file yields an empty catalog. Unparseable content raises
        CatalogLoadError so the service refuses to start on bad data.
        """
        if not self._path.exists():
            logger.warning("Catalog file not found: %s (starting empty)", self._path)
            return []

        async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
            raw = await f.read()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(f"Invalid JSON in {self._path}: {exc}") from exc
        if not isinstance(data, list):
            raise CatalogLoadError(f"Expected a JSON array of books in {self._path}")

        try:
            books = [BookRecord.model_validate(item).to_book() for item in data]
        except ValidationError as exc:
            raise CatalogLoadError(f"Invalid book record in {self._path}: {exc}") from exc

        logger.info("Loaded %d books from %s", len(books), self._path)
        return books
