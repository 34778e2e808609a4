"""
Due-date helpers. Dates travel as ISO strings ("2026-03-05") inside book records.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union

DateLike = Union[str, date]


def to_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # timestamps keep only their date part
    if "T" in text:
        text = text.split("T", 1)[0]
    return date.fromisoformat(text)


def format_date(value: DateLike) -> str:
    """Readable form of a date, e.g. 'Mar 5, 2026'."""
    d = to_date(value)
    return f"{d.strftime('%b')} {d.day}, {d.year}"


def days_left(value: DateLike, today: Optional[date] = None) -> int:
    """Whole days until the due date; negative once overdue."""
    today = today or date.today()
    return (to_date(value) - today).days


def build_date(offset: int, today: Optional[date] = None) -> str:
    """ISO date string offset days from today."""
    today = today or date.today()
    return (today + timedelta(days=offset)).isoformat()


def status_text(days: int) -> str:
    if days < 0:
        return f"{abs(days)} days overdue"
    return f"{days} days left"
