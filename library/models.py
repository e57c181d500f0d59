#!/usr/bin/env python3
"""
Datenmodelle für Bücher und Entleiher

Beide Modelle kennen ihre CSV-Zeilendarstellung, das Lesen und Schreiben
der Dateien selbst übernimmt utils/io.py.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

AVAILABLE_LABEL: str = "Available"
BORROWED_LABEL: str = "Borrowed"


@dataclass
class Book:
    """
    Ein Buch im Katalog.

    Die ISBN ist innerhalb des Katalogs eindeutig. Neue Bücher sind
    zunächst verfügbar.
    """

    title: str
    author: str
    isbn: str
    category: str
    available: bool = True

    @property
    def status(self) -> str:
        """Verfügbarkeit als Anzeigetext ("Available" oder "Borrowed")."""
        return AVAILABLE_LABEL if self.available else BORROWED_LABEL

    def to_row(self) -> List[str]:
        """Gibt die CSV-Zeile (Title, Author, ISBN, Available, Category) zurück."""
        return [self.title, self.author, self.isbn, "1" if self.available else "0", self.category]

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Book":
        """
        Erstellt ein Buch aus einer CSV-Zeile.

        Args:
            row: Mindestens fünf Felder in der Reihenfolge von `to_row`

        Returns:
            Das gelesene Buch

        Raises:
            ValueError: Wenn die Zeile weniger als fünf Felder hat
        """
        if len(row) < 5:
            raise ValueError(f"Book row needs 5 fields, got {len(row)}")

        return cls(title=row[0], author=row[1], isbn=row[2], category=row[4], available=row[3].strip() == "1")


@dataclass
class Borrower:
    """Ein registrierter Entleiher mit den ISBNs seiner ausgeliehenen Bücher."""

    id: str
    name: str
    borrowed_books: List[str] = field(default_factory=list)

    def borrow_book(self, isbn: str) -> None:
        self.borrowed_books.append(isbn)

    def return_book(self, isbn: str) -> None:
        """Entfernt das erste Vorkommen der ISBN, falls vorhanden."""
        if isbn in self.borrowed_books:
            self.borrowed_books.remove(isbn)

    def to_row(self) -> List[str]:
        """Gibt die CSV-Zeile (ID, Name, BorrowedBooks) zurück, ISBNs mit ';' getrennt."""
        return [self.id, self.name, "".join(f"{isbn};" for isbn in self.borrowed_books)]

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Borrower":
        """
        Erstellt einen Entleiher aus einer CSV-Zeile.

        Args:
            row: ID, Name und optional die ';'-getrennten ISBNs

        Returns:
            Der gelesene Entleiher

        Raises:
            ValueError: Wenn ID oder Name fehlen
        """
        if len(row) < 2:
            raise ValueError(f"Borrower row needs at least 2 fields, got {len(row)}")

        borrowed: List[str] = []
        if len(row) > 2 and row[2]:
            borrowed = [isbn for isbn in row[2].split(";") if isbn]

        return cls(id=row[0], name=row[1], borrowed_books=borrowed)
