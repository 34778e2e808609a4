"""
Sorting utilities.
"""

import unicodedata

SORT_OPTIONS = ("title-asc", "title-desc", "available-desc", "available-asc")
DEFAULT_SORT = "title-asc"


def available_copies(book: dict) -> int:
    return book.get("total_copies", 0) - len(book.get("borrowers", []))


def _title_key(book: dict) -> str:
    # accents and case are ignored: "Éclair" sorts with "eclair"
    text = unicodedata.normalize("NFKD", str(book.get("title", "")))
    return "".join(c for c in text if not unicodedata.combining(c)).casefold()


def sort_books(books: list, option: str = DEFAULT_SORT) -> list:
    """
    Sort by title or by available copies. Unknown options fall back to 'title-asc'.
    Availability ties are broken by title ascending.
    Returns a new sorted list.
    """
    if option == "title-desc":
        return sorted(books, key=_title_key, reverse=True)
    if option == "available-desc":
        return sorted(books, key=lambda b: (-available_copies(b), _title_key(b)))
    if option == "available-asc":
        return sorted(books, key=lambda b: (available_copies(b), _title_key(b)))
    return sorted(books, key=_title_key)
