#!/usr/bin/env python3
"""
Konsolenmenü der Bibliotheksverwaltung

Blockierende Menüschleife: jede Aktion läuft vollständig durch, bevor die
nächste Eingabe gelesen wird. Ein- und Ausgabefunktion sind austauschbar
(Tests übergeben eigene Funktionen).
"""

from typing import Callable, Dict

from library.models import Book, Borrower
from library.exceptions import LibraryError
from library.manager import LibraryManager
from utils.io import save_recommendations_to_markdown
from utils import reports
from utils.logging_config import get_logger

logger = get_logger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU_TEXT = """
Library Management System
1. Add Book
2. Add Borrower
3. Borrow Book
4. Return Book
5. Display Books
6. Sort Books by Title
7. Sort Books by Author
8. Display Books by Category
9. Search Books by Category
10. Show Category Analytics
11. Get Book Recommendations
12. Show Recent Transactions
13. Export Recommendations to Markdown
14. Exit"""

EXIT_CHOICE = "14"


class ConsoleMenu:
    """Verbindet Menüeinträge mit den Aktionen des LibraryManager."""

    def __init__(
        self,
        manager: LibraryManager,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        export_file: str = "recommended.md",
    ) -> None:
        self.manager = manager
        self.input = input_fn
        self.output = output_fn
        self.export_file = export_file

        self.actions: Dict[str, Callable[[], None]] = {
            "1": self.add_book,
            "2": self.add_borrower,
            "3": self.borrow_book,
            "4": self.return_book,
            "5": self.display_books,
            "6": self.sort_by_title,
            "7": self.sort_by_author,
            "8": self.display_books_by_category,
            "9": self.search_by_category,
            "10": self.show_category_analytics,
            "11": self.get_recommendations,
            "12": self.show_transactions,
            "13": self.export_recommendations,
        }

    def run(self) -> None:
        """Zeigt das Menü, bis "Exit" gewählt oder die Eingabe beendet wird."""
        while True:
            self.output(MENU_TEXT)
            try:
                choice = self.input("Enter your choice: ").strip()
            except EOFError:
                logger.info("Eingabe beendet")
                choice = EXIT_CHOICE

            if choice == EXIT_CHOICE:
                self.manager.save_data()
                self.output("Thank you for using the Library Management System!")
                return

            action = self.actions.get(choice)
            if action is None:
                self.output("Invalid choice. Please try again.")
                continue

            try:
                action()
            except LibraryError as e:
                logger.warning(f"Aktion {choice} fehlgeschlagen: {e.message}")
                self.output(f"Error: {e.message}")

    # ------------------------------------------------------------------
    # Katalog und Ausleihe
    # ------------------------------------------------------------------

    def add_book(self) -> None:
        title = self.input("Enter book title: ")
        author = self.input("Enter author name: ")
        isbn = self.input("Enter ISBN: ")
        category = self.input("Enter category: ")

        self.manager.add_book(Book(title=title, author=author, isbn=isbn, category=category))
        self.output("Book added successfully!")

    def add_borrower(self) -> None:
        borrower_id = self.input("Enter borrower ID: ")
        name = self.input("Enter borrower name: ")

        self.manager.add_borrower(Borrower(id=borrower_id, name=name))
        self.output("Borrower added successfully!")

    def borrow_book(self) -> None:
        isbn = self.input("Enter ISBN: ")
        borrower_id = self.input("Enter borrower ID: ")

        if self.manager.borrow_book(isbn, borrower_id):
            self.output("Book borrowed successfully!")
        else:
            self.output("Failed to borrow book. Please check availability and borrower ID.")

    def return_book(self) -> None:
        isbn = self.input("Enter ISBN: ")
        borrower_id = self.input("Enter borrower ID: ")

        if self.manager.return_book(isbn, borrower_id):
            self.output("Book returned successfully!")
        else:
            self.output("Failed to return book. Please check ISBN and borrower ID.")

    def display_books(self) -> None:
        self.output(reports.render_books(self.manager.books))

    def sort_by_title(self) -> None:
        self.manager.sort_books_by_title()
        self.output("Books sorted by title!")
        self.display_books()

    def sort_by_author(self) -> None:
        self.manager.sort_books_by_author()
        self.output("Books sorted by author!")
        self.display_books()

    # ------------------------------------------------------------------
    # Kategorien
    # ------------------------------------------------------------------

    def display_books_by_category(self) -> None:
        self.output(reports.render_category_tree(self.manager.category_tree()))

    def search_by_category(self) -> None:
        self.output(reports.render_category_list(self.manager.categories()))
        category = self.input("Enter category to search: ")
        self.output(reports.render_category_books(category, self.manager.books_in_category(category)))

    def show_category_analytics(self) -> None:
        recommender = self.manager.recommender()
        self.output("Analyzing Library Categories...")
        self.output(
            reports.render_category_analysis(
                recommender.index.category_counts(), recommender.category_graph(), recommender.cross_category()
            )
        )

    def get_recommendations(self) -> None:
        self.output(reports.render_category_list(self.manager.categories()))
        start_category = self.input("Enter starting category for recommendations: ")
        result = self.manager.recommender().recommend(start_category)
        self.output(reports.render_recommendations(result))

    def show_transactions(self) -> None:
        self.output(reports.render_transactions(self.manager.recent_transactions()))

    def export_recommendations(self) -> None:
        self.output(reports.render_category_list(self.manager.categories()))
        start_category = self.input("Enter starting category for recommendations: ")

        recommender = self.manager.recommender()
        result = recommender.recommend(start_category)
        if not result.found:
            self.output(reports.render_recommendations(result))
            return

        try:
            filename = save_recommendations_to_markdown(result, recommender.cross_category(), self.export_file)
        except OSError as e:
            logger.error(f"❌ Export fehlgeschlagen: {e}")
            self.output(f"Export failed: {e}")
            return

        self.output(f"Recommendations saved to {filename}")


def run_menu(
    manager: LibraryManager, input_fn: InputFn = input, output_fn: OutputFn = print, export_file: str = "recommended.md"
) -> None:
    """
    Startet das Konsolenmenü.

    Args:
        manager: Katalog- und Ausleihverwaltung
        input_fn: Funktion zum Lesen einer Eingabezeile
        output_fn: Funktion zur Ausgabe eines Textblocks
        export_file: Zieldatei für den Markdown-Export
    """
    ConsoleMenu(manager, input_fn, output_fn, export_file).run()
