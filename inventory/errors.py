"""
Errors raised by the library inventory.
The hash table itself never raises for a missing key; these cover
requests the inventory refuses.
"""


class LibraryError(Exception):
    """Base class for inventory errors."""


class InvalidBookError(LibraryError, ValueError):
    pass


class BookNotFoundError(LibraryError, LookupError):
    def __init__(self, book_id):
        super().__init__(f"Book not found in the inventory: {book_id}")
        self.book_id = book_id


class NoCopiesAvailableError(LibraryError):
    def __init__(self, book_id, title=None):
        super().__init__(f"No copies available for {title or book_id} right now.")
        self.book_id = book_id


class InvalidBorrowError(LibraryError, ValueError):
    pass
