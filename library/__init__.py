"""
Library-Package für Katalog und Ausleihe.

Dieses Package enthält:
- Die Datenmodelle (`Book`, `Borrower`)
- Die Verwaltung von Katalog und Ausleihen (`library.manager.LibraryManager`)
"""

from .models import Book, Borrower
from .exceptions import LibraryError, DuplicateIsbnError, DuplicateBorrowerError

__all__ = ["Book", "Borrower", "LibraryError", "DuplicateIsbnError", "DuplicateBorrowerError"]
