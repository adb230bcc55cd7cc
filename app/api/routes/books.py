"""Book inventory and lending routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from app.api.dependencies import get_catalog_service
from app.api.schemas import (
    BookResponse,
    BookUpdateRequest,
    CheckoutResponse,
    ErrorResponse,
    ReturnRequest,
)
from app.services.catalog import CatalogService

router = APIRouter(tags=["Books"])

NOT_FOUND = {404: {"model": ErrorResponse}}
CONFLICT = {409: {"model": ErrorResponse}}


@router.get("/", response_class=PlainTextResponse)
@router.get("/index", response_class=PlainTextResponse)
async def index() -> str:
    return (
        "Welcome to the home page! In order to make an API call direct your "
        "browser or HTTP client to an endpoint."
    )


@router.get("/book/{book_id}", response_model=BookResponse, responses=NOT_FOUND)
async def get_book(
    book_id: int,
    service: CatalogService = Depends(get_catalog_service),
) -> BookResponse:
    """Return the details of a single book."""
    return BookResponse.model_validate(service.get_book(book_id))


@router.put(
    "/book/{book_id}",
    response_model=BookResponse,
    responses=NOT_FOUND,
)
async def update_book(
    book_id: int,
    data: BookUpdateRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> BookResponse:
    """
    Replace a book record by id.

    The stored book is swapped for the submitted record as a whole; fields
    left out of the body fall back to their defaults.
    """
    if data.id != book_id:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Body id does not match path id",
        )
    return BookResponse.model_validate(service.update_book(data.to_book()))


@router.get("/books/available", response_model=list[BookResponse])
async def list_available_books(
    service: CatalogService = Depends(get_catalog_service),
) -> list[BookResponse]:
    """List every book with at least one copy on the shelf."""
    return [BookResponse.model_validate(b) for b in service.list_available()]


@router.patch("/book/{book_id}/add", response_model=BookResponse, responses=NOT_FOUND)
async def add_copy(
    book_id: int,
    service: CatalogService = Depends(get_catalog_service),
) -> BookResponse:
    return BookResponse.model_validate(service.add_copy(book_id))


@router.patch(
    "/book/{book_id}/remove",
    response_model=BookResponse,
    responses={**NOT_FOUND, **CONFLICT},
)
async def remove_copy(
    book_id: int,
    service: CatalogService = Depends(get_catalog_service),
) -> BookResponse:
    return BookResponse.model_validate(service.remove_copy(book_id))


@router.patch(
    "/checkout",
    response_model=CheckoutResponse,
    responses={**NOT_FOUND, **CONFLICT},
)
async def checkout(
    book_id: int = Query(..., alias="id"),
    service: CatalogService = Depends(get_catalog_service),
) -> CheckoutResponse:
    """Check out one copy; the response carries the copy's due date."""
    book, due_date = service.checkout(book_id)
    return CheckoutResponse(book=BookResponse.model_validate(book), due_date=due_date)


@router.patch(
    "/book/{book_id}/return",
    response_model=BookResponse,
    responses={**NOT_FOUND, **CONFLICT},
)
async def return_copy(
    book_id: int,
    data: ReturnRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> BookResponse:
    return BookResponse.model_validate(service.return_copy(book_id, data.due_date))


@router.get(
    "/books/recommendation",
    response_model=list[BookResponse],
    responses={500: {"model": ErrorResponse}},
)
async def get_recommendations(
    service: CatalogService = Depends(get_catalog_service),
) -> list[BookResponse]:
    """Most popular books followed by a random selection of the rest."""
    return [BookResponse.model_validate(b) for b in service.recommend()]
