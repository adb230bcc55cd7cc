"""Book entity: copy counts, checkout history and their transitions."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from functools import total_ordering

LOAN_PERIOD = timedelta(days=14)


@total_ordering
@dataclass(eq=False)
class Book:
    """
    A catalog entry tracked for availability and demand.

    Attributes:
        id:                Unique key within a catalog. Never changes.
        copies_available:  Copies on the shelf right now.
        total_copies:      Copies owned, on the shelf or checked out.
        checkout_count:    Number of successful checkouts, ever.
        return_dates:      One ISO due date per copy currently checked out.

    The remaining attributes are descriptive metadata and are never touched
    by the inventory operations.
    """

    id: int
    title: str = ""
    authors: list[str] = field(default_factory=list)
    language: str = ""
    shelving_location: str = ""
    publication_date: str = ""
    publisher: str = ""
    subjects: list[str] = field(default_factory=list)
    copies_available: int = 1
    total_copies: int = 1
    checkout_count: int = 0
    return_dates: list[str] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.id < other.id

    def __str__(self) -> str:
        return f"({self.id})\t{self.title}"

    @property
    def has_multiple_authors(self) -> bool:
        return len(self.authors) > 1

    def has_available_copies(self) -> bool:
        """True when at least one copy is on the shelf. Zero means exhausted."""
        return self.copies_available > 0

    def checkout(self, today: date | None = None, loan_period: timedelta = LOAN_PERIOD) -> str | None:
        """
        Check out one copy.

        Returns the ISO due date (``today + loan_period``) or ``None`` when no
        copy is available, in which case nothing changes.
        """
        if self.copies_available <= 0:
            return None
        due = (today or date.today()) + loan_period
        due_date = due.isoformat()
        self.copies_available -= 1
        self.checkout_count += 1
        self.return_dates.append(due_date)
        return due_date

    def return_copy(self, due_date: str) -> bool:
        """Return the copy due on ``due_date``. False if no copy matches."""
        try:
            self.return_dates.remove(due_date)
        except ValueError:
            return False
        self.copies_available += 1
        return True

    def add_copy(self) -> None:
        self.total_copies += 1
        self.copies_available += 1

    def remove_copy(self) -> bool:
        """Retire one shelved copy. Checked-out copies cannot be removed."""
        if self.total_copies > 0 and self.copies_available > 0:
            self.total_copies -= 1
            self.copies_available -= 1
            return True
        return False
