import itertools
import logging
import random
import string
import time
from datetime import date, datetime, timezone

import pandas as pd

from inventory.dates import build_date, days_left, status_text, to_date
from inventory.errors import (
    BookNotFoundError,
    InvalidBookError,
    InvalidBorrowError,
    NoCopiesAvailableError,
)
from inventory.hashing import ABSENT, HashTable
from inventory.searching import search_books, search_borrowings
from inventory.sorting import DEFAULT_SORT, available_copies, sort_books

logger = logging.getLogger(__name__)

HASH_TABLE_SIZE = 193  # prime; the table never grows
MAX_VISIBLE_BOOKS = 12
DUE_SOON_DAYS = 2

# In-memory store, reset by seed_data() or clear()
inventory = HashTable(size=HASH_TABLE_SIZE)

_BASE36 = string.digits + string.ascii_lowercase
_id_sequence = itertools.count(1)


def _base36(n: int) -> str:
    digits = []
    while True:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
        if n == 0:
            return "".join(reversed(digits))


def create_id() -> str:
    """BK-<timestamp in base 36>-<sequence>; the sequence keeps ids unique within a millisecond."""
    return f"BK-{_base36(int(time.time() * 1000))}-{next(_id_sequence)}"


def _whole_copies(copies) -> int:
    if isinstance(copies, str):
        copies = copies.strip()
    try:
        count = int(copies)
    except (TypeError, ValueError, OverflowError):
        raise InvalidBookError(f"copies must be a whole number, got {copies!r}") from None
    if not isinstance(copies, str) and count != copies:
        raise InvalidBookError(f"copies must be a whole number, got {copies!r}")
    return count


def add_book(title, author, copies, table=inventory) -> dict:
    """Validate and insert a new book under a fresh id. Returns the stored record."""
    title = str(title or "").strip()
    author = str(author or "").strip()
    copies = _whole_copies(copies)
    if not title or not author or copies < 1:
        raise InvalidBookError("Please fill out all fields with valid data.")

    book_id = create_id()
    record = {
        "id": book_id,
        "title": title,
        "author": author,
        "total_copies": copies,
        "borrowers": [],
    }
    table.set(book_id, record)
    logger.debug("added %s %r (%d copies)", book_id, title, copies)
    return record


def borrow_book(book_id, student, due_date, table=inventory, now=None) -> dict:
    """
    Check out one copy of book_id to student.
    The stored record is copied, updated, and committed back with set().
    """
    student = str(student or "").strip()
    if not student or not due_date:
        raise InvalidBorrowError("Please complete every field.")

    book = table.get(book_id)
    if book is ABSENT:
        raise BookNotFoundError(book_id)
    if available_copies(book) <= 0:
        raise NoCopiesAvailableError(book_id, book["title"])

    try:
        due = to_date(due_date).isoformat()
    except ValueError:
        raise InvalidBorrowError(f"due date must be YYYY-MM-DD, got {due_date!r}") from None

    now = now or datetime.now(timezone.utc)
    updated = dict(book)
    updated["borrowers"] = book["borrowers"] + [{
        "student": student,
        "due_date": due,
        "borrowed_at": now.isoformat(),
    }]
    table.set(book_id, updated)
    logger.debug("%s borrowed by %s, due %s", book_id, student, due_date)
    return updated


def return_book(book_id, student, table=inventory) -> bool:
    """Drop every borrowing of book_id held by student. Unknown books are ignored."""
    book = table.get(book_id)
    if book is ABSENT:
        return False
    remaining = [b for b in book["borrowers"] if b["student"] != student]
    if len(remaining) == len(book["borrowers"]):
        return False
    updated = dict(book)
    updated["borrowers"] = remaining
    table.set(book_id, updated)
    logger.debug("%s returned by %s", book_id, student)
    return True


def list_books(term="", sort_option=DEFAULT_SORT, table=inventory, limit=MAX_VISIBLE_BOOKS):
    """
    Books sorted by sort_option and filtered by title/author.
    Without a search term only the first `limit` rows are returned.
    Returns (rows, hidden) where hidden is the number of rows left out.
    """
    books = sort_books(table.values(), sort_option)
    rows = search_books(books, term)
    if not (term or "").strip() and limit is not None:
        hidden = max(len(rows) - limit, 0)
        rows = rows[:limit]
    else:
        hidden = 0
    return [dict(b, available=available_copies(b)) for b in rows], hidden


def all_borrowings(table=inventory) -> list:
    rows = []
    for book in table.values():
        for borrow in book["borrowers"]:
            rows.append({
                "book_id": book["id"],
                "title": book["title"],
                "student": borrow["student"],
                "due_date": borrow["due_date"],
            })
    return rows


def list_borrowings(term="", table=inventory, today=None) -> list:
    rows = []
    for row in search_borrowings(all_borrowings(table), term):
        left = days_left(row["due_date"], today)
        rows.append(dict(
            row,
            days_left=left,
            status_text=status_text(left),
            due_soon=left <= DUE_SOON_DAYS,
        ))
    return rows


def calculate_stats(table=inventory) -> dict:
    books = table.values()
    total_copies = sum(b["total_copies"] for b in books)
    borrowed = sum(len(b["borrowers"]) for b in books)
    students = {borrow["student"] for b in books for borrow in b["borrowers"]}
    return {
        "total_copies": total_copies,
        "borrowed": borrowed,
        "available": total_copies - borrowed,
        "active_students": len(students),
    }


SEED_TITLES = [
    "Data Structures in C",
    "Data Structures in Java",
    "Introduction to Algorithms",
    "Operating System Concepts",
    "Database System Concepts",
    "Computer Networks",
    "Clean Code",
    "Design Patterns",
    "Discrete Mathematics",
    "Artificial Intelligence Basics",
    "Machine Learning Essentials",
    "Computer Architecture",
    "Theory of Computation",
    "Compiler Design",
    "Probability and Statistics",
    "Web Technologies",
    "Object Oriented Programming",
    "Python for Data Science",
    "Linear Algebra",
    "Numerical Methods",
]

SEED_AUTHORS = [
    "Reema Thareja",
    "Robert Lafore",
    "Cormen et al.",
    "Silberschatz et al.",
    "Kurose & Ross",
    "Robert C. Martin",
    "Erich Gamma",
    "Rosen et al.",
    "Stuart Russell",
    "Christopher Bishop",
    "Hennessy & Patterson",
    "Hopcroft & Ullman",
    "Aho et al.",
    "Jay L. Devore",
    "Narasimha Karumanchi",
    "Bjarne Stroustrup",
    "Guido van Rossum",
    "Gilbert Strang",
    "William H. Press",
    "Ian Goodfellow",
]

SEED_BOOK_COUNT = 68

# (student, days until due) for the first books in table order
SEED_BORROWINGS = [
    ("Riya Patel", 5),
    ("Manoj Singh", 2),
    ("Ishaan Verma", 10),
    ("Ananya Gupta", 7),
    ("Karan Mehta", 3),
]


def seed_data(table=inventory, rng=None, today=None) -> None:
    """Replace the inventory with demo titles and a few active borrowings."""
    rng = rng or random.Random()
    today = today or date.today()
    table.clear()

    for i in range(SEED_BOOK_COUNT):
        base = SEED_TITLES[i % len(SEED_TITLES)]
        title = f"{base} Vol-{i // len(SEED_TITLES) + 1}"
        author = SEED_AUTHORS[i % len(SEED_AUTHORS)]
        add_book(title, author, rng.randint(1, 4), table=table)

    books = table.values()
    for book, (student, offset) in zip(books, SEED_BORROWINGS):
        borrow_book(book["id"], student, build_date(offset, today), table=table)

    logger.info("seeded %d books", len(books))


def import_books(records, table=inventory) -> list:
    """
    Accepts dicts with keys title, author, copies.
    Malformed rows are skipped. Returns the stored records.
    """
    added = []
    for rec in records:
        try:
            added.append(add_book(rec.get("title"), rec.get("author"), rec.get("copies"), table=table))
        except InvalidBookError as e:
            logger.warning("skipping book row %r: %s", rec, e)
    return added


def import_books_frame(frame: pd.DataFrame, table=inventory) -> list:
    frame = frame.rename(columns=lambda c: str(c).strip().lower())
    required = {"title", "author", "copies"}
    missing = required - set(frame.columns)
    if missing:
        raise ValueError(f"book table must contain columns: {sorted(missing)}")
    subset = frame[["title", "author", "copies"]].astype(object)
    records = subset.where(subset.notna(), None).to_dict(orient="records")
    return import_books(records, table=table)
