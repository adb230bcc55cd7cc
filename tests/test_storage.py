"""Tests for loading the seed catalog from disk."""

import json
from pathlib import Path

import pytest

from app.adapters.storage.local import LocalCatalogSource
from app.config import DEFAULT_CATALOG_PATH
from app.domain.catalog import Catalog
from app.domain.errors import CatalogLoadError


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


async def test_load_camel_case_records(tmp_path: Path):
    path = _write(
        tmp_path / "books.json",
        [
            {
                "id": 7,
                "title": "Kindred",
                "authors": ["Octavia E. Butler"],
                "shelvingLocation": "Stacks B-2",
                "publicationDate": "1979-06-01",
                "amountOfTimesCheckedOut": 4,
                "copiesAvailable": 1,
                "returnDates": ["2024-01-01"],
                "totalCopies": 2,
            }
        ],
    )

    (book,) = await LocalCatalogSource(path).load()

    assert book.id == 7
    assert book.shelving_location == "Stacks B-2"
    assert book.publication_date == "1979-06-01"
    assert book.checkout_count == 4
    assert book.return_dates == ["2024-01-01"]
    assert (book.copies_available, book.total_copies) == (1, 2)


async def test_load_snake_case_records_and_defaults(tmp_path: Path):
    path = _write(
        tmp_path / "books.json",
        [{"id": 1, "title": "A", "checkout_count": 2}, {"id": 2, "return_dates": None}],
    )

    first, second = await LocalCatalogSource(path).load()

    assert first.checkout_count == 2
    assert second.title == ""
    assert second.return_dates == []
    assert (second.copies_available, second.total_copies) == (1, 1)


async def test_missing_file_yields_empty_catalog(tmp_path: Path):
    assert await LocalCatalogSource(tmp_path / "absent.json").load() == []


async def test_invalid_json(tmp_path: Path):
    path = tmp_path / "books.json"
    path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        await LocalCatalogSource(path).load()


async def test_non_array_document(tmp_path: Path):
    path = _write(tmp_path / "books.json", {"id": 1})
    with pytest.raises(CatalogLoadError):
        await LocalCatalogSource(path).load()


async def test_invalid_record(tmp_path: Path):
    path = _write(tmp_path / "books.json", [{"title": "no id"}])
    with pytest.raises(CatalogLoadError):
        await LocalCatalogSource(path).load()


async def test_bundled_seed_file_loads():
    books = await LocalCatalogSource(DEFAULT_CATALOG_PATH).load()
    catalog = Catalog(books)
    assert len(catalog) >= 10
