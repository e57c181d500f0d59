"""Exceptions für die Katalog- und Ausleihverwaltung."""

from typing import Any, Dict, Optional


class LibraryError(Exception):
    """Basis-Exception der Bibliotheksverwaltung."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Args:
            message: Für Benutzer lesbare Fehlermeldung
            details: Zusätzliche Angaben für das Logging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DuplicateIsbnError(LibraryError):
    """Ein Buch mit dieser ISBN ist bereits im Katalog."""

    def __init__(self, isbn: str):
        super().__init__(f"A book with ISBN '{isbn}' already exists.", details={"isbn": isbn})


class DuplicateBorrowerError(LibraryError):
    """Ein Entleiher mit dieser ID ist bereits registriert."""

    def __init__(self, borrower_id: str):
        super().__init__(
            f"A borrower with ID '{borrower_id}' already exists.", details={"borrower_id": borrower_id}
        )
