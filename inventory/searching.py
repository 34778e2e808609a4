"""
Searching utilities.
- matches_search: multi-word partial match that ignores spaces in the text
- search_books filters on title or author, search_borrowings on title or student
"""

import re
from typing import List

_WHITESPACE = re.compile(r"\s+")


def matches_search(text, term: str) -> bool:
    """
    Every word of term must appear in text, either as-is or in the text
    with its whitespace removed ("datastructures" matches "Data Structures").
    Case-insensitive. An empty term matches everything.
    """
    term = (term or "").strip().lower()
    if not term:
        return True
    base = str(text).lower()
    compact = _WHITESPACE.sub("", base)
    return all(word in base or word in compact for word in term.split())


def search_books(books: List[dict], term: str) -> List[dict]:
    if not (term or "").strip():
        return list(books)
    return [
        b for b in books
        if matches_search(b.get("title", ""), term) or matches_search(b.get("author", ""), term)
    ]


def search_borrowings(rows: List[dict], term: str) -> List[dict]:
    if not (term or "").strip():
        return list(rows)
    return [
        r for r in rows
        if matches_search(r.get("title", ""), term) or matches_search(r.get("student", ""), term)
    ]
