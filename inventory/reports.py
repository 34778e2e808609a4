"""
Tabular and PDF views of the inventory.
Both are built in memory; nothing is written to disk.
"""

from datetime import date
from typing import Optional

import pandas as pd
from fpdf import FPDF

from inventory.dates import days_left, format_date, status_text
from inventory.sorting import available_copies

FRAME_COLUMNS = ["id", "title", "author", "total_copies", "borrowed", "available"]


def inventory_frame(hash_table) -> pd.DataFrame:
    rows = []
    for book in hash_table.values():
        rows.append({
            "id": book["id"],
            "title": book["title"],
            "author": book["author"],
            "total_copies": book["total_copies"],
            "borrowed": len(book["borrowers"]),
            "available": available_copies(book),
        })
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def _latin1(text) -> str:
    # core PDF fonts only cover latin-1
    return str(text).encode("latin-1", "replace").decode("latin-1")


def borrowed_report_pdf(hash_table, today: Optional[date] = None, compress: bool = True) -> bytes:
    today = today or date.today()
    rows = []
    for book in hash_table.values():
        for borrow in book["borrowers"]:
            rows.append((borrow["student"], book["title"], borrow["due_date"]))
    rows.sort(key=lambda r: (r[2], r[0].casefold()))

    pdf = FPDF()
    pdf.set_compression(compress)
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()
    pdf.set_font("Helvetica", size=12)
    pdf.cell(0, 10, f"Borrowed books as of {format_date(today)}", new_x="LMARGIN", new_y="NEXT", align="C")
    pdf.ln(4)

    col_widths = [45, 70, 30, 40]
    headers = ["Student", "Book", "Due Date", "Status"]
    for i, h in enumerate(headers):
        pdf.cell(col_widths[i], 8, h, border=1)
    pdf.ln()

    for student, title, due in rows:
        pdf.cell(col_widths[0], 8, _latin1(student)[:25], border=1)
        pdf.cell(col_widths[1], 8, _latin1(title)[:38], border=1)
        pdf.cell(col_widths[2], 8, format_date(due), border=1)
        pdf.cell(col_widths[3], 8, status_text(days_left(due, today)), border=1)
        pdf.ln()

    return bytes(pdf.output())
