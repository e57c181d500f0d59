#!/usr/bin/env python3
"""
Verwaltung von Katalog, Entleihern und Ausleihen

Der LibraryManager hält Bücher und Entleiher im Arbeitsspeicher, lädt und
speichert sie über utils/io.py und stellt die Kategorie-Ansichten
(Baum, Graph, Empfehlungen) für den aktuellen Katalog bereit.
"""

from typing import Callable, List, Optional, Set

from library.models import Book, Borrower
from library.exceptions import DuplicateBorrowerError, DuplicateIsbnError
from categories.index import CategoryIndex, build_category_index
from categories.tree import CategoryNode, build_category_tree
from categories.graph import CategoryGraph, build_category_graph
from recommender.recommender import Recommender
from utils.io import load_books, load_borrowers, save_books, save_borrowers
from utils.logging_config import get_logger

logger = get_logger(__name__)


class LibraryManager:
    """
    Katalog- und Ausleihverwaltung.

    Ausleihen und Rückgaben werden als Transaktionen protokolliert
    (neueste zuerst abrufbar über `recent_transactions`).
    """

    def __init__(self, books_file: str = "books.csv", borrowers_file: str = "borrowers.csv", autoload: bool = True):
        """
        Args:
            books_file: Pfad zur Bücher-CSV
            borrowers_file: Pfad zur Entleiher-CSV
            autoload: Daten direkt beim Erstellen laden
        """
        self.books_file = books_file
        self.borrowers_file = borrowers_file
        self.books: List[Book] = []
        self.borrowers: List[Borrower] = []
        self._transactions: List[str] = []

        if autoload:
            self.load_data()

    # ------------------------------------------------------------------
    # Persistenz
    # ------------------------------------------------------------------

    def load_data(self) -> None:
        self.books = load_books(self.books_file)
        self.borrowers = load_borrowers(self.borrowers_file)

    def save_data(self) -> None:
        save_books(self.books, self.books_file)
        save_borrowers(self.borrowers, self.borrowers_file)

    # ------------------------------------------------------------------
    # Bücher und Entleiher
    # ------------------------------------------------------------------

    def find_book(self, isbn: str) -> Optional[Book]:
        return next((book for book in self.books if book.isbn == isbn), None)

    def find_borrower(self, borrower_id: str) -> Optional[Borrower]:
        return next((borrower for borrower in self.borrowers if borrower.id == borrower_id), None)

    def add_book(self, book: Book) -> None:
        """
        Fügt ein Buch zum Katalog hinzu.

        Raises:
            DuplicateIsbnError: Wenn die ISBN bereits vergeben ist
        """
        if self.find_book(book.isbn) is not None:
            raise DuplicateIsbnError(book.isbn)

        self.books.append(book)
        logger.info(f"✅ Buch hinzugefügt: '{book.title}' ({book.isbn}) in '{book.category}'")

    def remove_book(self, isbn: str) -> bool:
        """Entfernt ein Buch, gibt True zurück wenn es existierte."""
        original_length = len(self.books)
        self.books = [book for book in self.books if book.isbn != isbn]

        removed = original_length > len(self.books)
        if removed:
            logger.info(f"Buch {isbn} entfernt")
        return removed

    def add_borrower(self, borrower: Borrower) -> None:
        """
        Registriert einen Entleiher.

        Raises:
            DuplicateBorrowerError: Wenn die ID bereits vergeben ist
        """
        if self.find_borrower(borrower.id) is not None:
            raise DuplicateBorrowerError(borrower.id)

        self.borrowers.append(borrower)
        logger.info(f"✅ Entleiher hinzugefügt: {borrower.name} ({borrower.id})")

    # ------------------------------------------------------------------
    # Ausleihe
    # ------------------------------------------------------------------

    def borrow_book(self, isbn: str, borrower_id: str) -> bool:
        """
        Leiht ein verfügbares Buch an einen registrierten Entleiher aus.

        Returns:
            True bei Erfolg, False wenn Buch fehlt, ausgeliehen ist oder
            der Entleiher unbekannt ist
        """
        book = self.find_book(isbn)
        if book is None or not book.available:
            logger.info(f"Ausleihe abgelehnt: Buch {isbn} nicht verfügbar")
            return False

        borrower = self.find_borrower(borrower_id)
        if borrower is None:
            logger.info(f"Ausleihe abgelehnt: Entleiher {borrower_id} unbekannt")
            return False

        book.available = False
        borrower.borrow_book(isbn)
        self._transactions.append(f"Borrow: {isbn} by {borrower_id}")
        logger.info(f"📅 '{book.title}' an {borrower_id} ausgeliehen")
        return True

    def return_book(self, isbn: str, borrower_id: str) -> bool:
        """
        Nimmt ein Buch zurück.

        Returns:
            True bei Erfolg, False wenn Buch oder Entleiher unbekannt sind
        """
        book = self.find_book(isbn)
        borrower = self.find_borrower(borrower_id)
        if book is None or borrower is None:
            logger.info(f"Rückgabe abgelehnt: Buch {isbn} oder Entleiher {borrower_id} unbekannt")
            return False

        book.available = True
        borrower.return_book(isbn)
        self._transactions.append(f"Return: {isbn} by {borrower_id}")
        logger.info(f"'{book.title}' von {borrower_id} zurückgegeben")
        return True

    def recent_transactions(self, limit: Optional[int] = None) -> List[str]:
        """Protokollierte Transaktionen, neueste zuerst."""
        newest_first = list(reversed(self._transactions))
        return newest_first if limit is None else newest_first[:limit]

    # ------------------------------------------------------------------
    # Sortierung und Suche
    # ------------------------------------------------------------------

    def _sort_books(self, key: Callable[[Book], str]) -> None:
        self.books.sort(key=key)

    def sort_books_by_title(self) -> None:
        self._sort_books(lambda book: book.title)

    def sort_books_by_author(self) -> None:
        self._sort_books(lambda book: book.author)

    def books_in_category(self, category: str) -> List[Book]:
        return [book for book in self.books if book.category == category]

    # ------------------------------------------------------------------
    # Kategorie-Ansichten (immer aus dem aktuellen Katalog)
    # ------------------------------------------------------------------

    def category_index(self) -> CategoryIndex:
        return build_category_index(self.books)

    def categories(self) -> List[str]:
        """Alle Kategorien des Katalogs, aufsteigend sortiert."""
        return sorted(self.category_index().categories)

    def category_tree(self) -> CategoryNode:
        return build_category_tree(self.category_index())

    def category_graph(self) -> CategoryGraph:
        categories: Set[str] = self.category_index().categories
        return build_category_graph(categories)

    def recommender(self) -> Recommender:
        return Recommender(self.books)
