from datetime import date

import library
from inventory.hashing import HashTable
from inventory.reports import FRAME_COLUMNS, borrowed_report_pdf, inventory_frame


def make_table():
    table = HashTable(size=library.HASH_TABLE_SIZE)
    a = library.add_book("Clean Code", "Robert C. Martin", 3, table=table)
    library.add_book("Linear Algebra", "Gilbert Strang", 1, table=table)
    library.borrow_book(a["id"], "Riya Patel", "2026-10-24", table=table)
    library.borrow_book(a["id"], "Zoë Ünal", "2026-10-18", table=table)
    return table


def test_inventory_frame():
    frame = inventory_frame(make_table())
    assert list(frame.columns) == FRAME_COLUMNS
    assert len(frame) == 2
    clean = frame[frame["title"] == "Clean Code"].iloc[0]
    assert clean["borrowed"] == 2
    assert clean["available"] == 1
    assert frame["total_copies"].sum() == 4


def test_inventory_frame_empty():
    frame = inventory_frame(HashTable(7))
    assert frame.empty
    assert list(frame.columns) == FRAME_COLUMNS


def test_borrowed_report_pdf():
    pdf = borrowed_report_pdf(make_table(), today=date(2026, 10, 19), compress=False)
    assert isinstance(pdf, bytes)
    assert pdf.startswith(b"%PDF")
    assert b"Borrowed books as of Oct 19, 2026" in pdf
    assert b"Riya Patel" in pdf
    assert b"Clean Code" in pdf
    assert b"Oct 24, 2026" in pdf
    assert b"5 days left" in pdf
    assert b"Oct 18, 2026" in pdf
    assert b"1 days overdue" in pdf
    # the unborrowed title has no row
    assert b"Linear Algebra" not in pdf


def test_borrowed_report_pdf_without_borrowings():
    table = HashTable(7)
    library.add_book("Linear Algebra", "Gilbert Strang", 1, table=table)
    pdf = borrowed_report_pdf(table, today=date(2026, 10, 19), compress=False)
    assert pdf.startswith(b"%PDF")
    assert b"Student" in pdf
    assert b"Due Date" in pdf
    assert b"days" not in pdf
    assert b"Linear Algebra" not in pdf
