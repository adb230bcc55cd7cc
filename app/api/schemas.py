"""Pydantic request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.domain.models import Book


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    authors: list[str]
    language: str
    shelving_location: str
    publication_date: str
    publisher: str
    subjects: list[str]
    copies_available: int
    total_copies: int
    checkout_count: int
    return_dates: list[str]
    has_multiple_authors: bool


class BookUpdateRequest(BaseModel):
    """Full replacement record for an existing book."""

    id: int
    title: str = ""
    authors: list[str] = Field(default_factory=list)
    language: str = ""
    shelving_location: str = ""
    publication_date: str = ""
    publisher: str = ""
    subjects: list[str] = Field(default_factory=list)
    copies_available: int = Field(default=1, ge=0)
    total_copies: int = Field(default=1, ge=0)
    checkout_count: int = Field(default=0, ge=0)
    return_dates: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_copy_counts(self) -> "BookUpdateRequest":
        if self.copies_available > self.total_copies:
            raise ValueError("copies_available must not exceed total_copies")
        if len(self.return_dates) != self.total_copies - self.copies_available:
            raise ValueError(
                "return_dates must hold one due date per checked-out copy"
            )
        return self

    def to_book(self) -> Book:
        return Book(**self.model_dump())


class CheckoutResponse(BaseModel):
    book: BookResponse
    due_date: str


class ReturnRequest(BaseModel):
    due_date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")


class ErrorResponse(BaseModel):
    detail: str
    code: str
