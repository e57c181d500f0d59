#!/usr/bin/env python3
"""
I/O-Utilities mit Type Hints und Logging

Lesen und Schreiben der Katalogdateien (books.csv, borrowers.csv) sowie
Export von Empfehlungen als Markdown.
"""

import os
import csv
from datetime import datetime
from typing import Dict, List, Any
from library.models import Book, Borrower
from utils.logging_config import get_logger

logger = get_logger(__name__)

BOOKS_HEADER: List[str] = ["Title", "Author", "ISBN", "Available", "Category"]
BORROWERS_HEADER: List[str] = ["ID", "Name", "BorrowedBooks"]


def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _read_rows(path: str) -> List[List[str]]:
    """
    Liest alle Datenzeilen einer CSV-Datei ohne Kopfzeile.

    Dateien, die kein gültiges UTF-8 sind, werden als Latin-1 gelesen.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
    except UnicodeDecodeError as e:
        logger.warning(f"'{path}' ist kein gültiges UTF-8 ({e}) - lese als Latin-1")
        with open(path, "r", encoding="latin-1", newline="") as f:
            rows = list(csv.reader(f))

    return rows[1:]


def load_books(path: str) -> List[Book]:
    """
    Lädt Bücher aus einer CSV-Datei.

    Die erste Zeile ist die Kopfzeile und wird übersprungen. Zeilen mit
    weniger als fünf Feldern werden mit einer Warnung übersprungen.

    Args:
        path: Pfad zur books.csv

    Returns:
        Liste der Bücher in Dateireihenfolge, leer wenn die Datei fehlt
    """
    if not os.path.exists(path):
        logger.warning(f"Datei '{path}' nicht gefunden - starte mit leerer Buchliste")
        return []

    books: List[Book] = []
    for line_number, row in enumerate(_read_rows(path), start=2):
        if not row:
            continue
        try:
            books.append(Book.from_row(row))
        except ValueError as e:
            logger.warning(f"Überspringe Zeile {line_number} in '{path}': {e}")

    logger.info(f"{len(books)} Bücher aus '{path}' geladen")
    return books


def save_books(books: List[Book], path: str) -> None:
    """
    Speichert Bücher als CSV-Datei mit Kopfzeile.

    Args:
        books: Zu speichernde Bücher
        path: Zieldatei

    Raises:
        IOError: Bei Schreibproblemen
    """
    try:
        _ensure_parent_dir(path)
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(BOOKS_HEADER)
            for book in books:
                writer.writerow(book.to_row())
    except IOError as e:
        logger.error(f"Fehler beim Speichern der Bücher in '{path}': {e}")
        raise

    logger.info(f"{len(books)} Bücher in '{path}' gespeichert")


def load_borrowers(path: str) -> List[Borrower]:
    """
    Lädt Entleiher aus einer CSV-Datei.

    Args:
        path: Pfad zur borrowers.csv

    Returns:
        Liste der Entleiher, leer wenn die Datei fehlt
    """
    if not os.path.exists(path):
        logger.warning(f"Datei '{path}' nicht gefunden - starte mit leerer Entleiherliste")
        return []

    borrowers: List[Borrower] = []
    for line_number, row in enumerate(_read_rows(path), start=2):
        if not row:
            continue
        try:
            borrowers.append(Borrower.from_row(row))
        except ValueError as e:
            logger.warning(f"Überspringe Zeile {line_number} in '{path}': {e}")

    logger.info(f"{len(borrowers)} Entleiher aus '{path}' geladen")
    return borrowers


def save_borrowers(borrowers: List[Borrower], path: str) -> None:
    """
    Speichert Entleiher als CSV-Datei mit Kopfzeile.

    Args:
        borrowers: Zu speichernde Entleiher
        path: Zieldatei

    Raises:
        IOError: Bei Schreibproblemen
    """
    try:
        _ensure_parent_dir(path)
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(BORROWERS_HEADER)
            for borrower in borrowers:
                writer.writerow(borrower.to_row())
    except IOError as e:
        logger.error(f"Fehler beim Speichern der Entleiher in '{path}': {e}")
        raise

    logger.info(f"{len(borrowers)} Entleiher in '{path}' gespeichert")


def save_recommendations_to_markdown(
    result: Any, cross_category: Dict[str, List[str]], filename: str = "recommended.md"
) -> str:
    """
    Speichert eine Empfehlungsrunde in eine Markdown-Datei.

    Args:
        result: RecommendationResult mit start_category, found und titles
        cross_category: Kategorie -> kategorieübergreifende Vorschläge
        filename: Name der Ausgabedatei

    Returns:
        Dateiname der gespeicherten Datei

    Raises:
        IOError: Bei Schreibproblemen
    """
    timestamp: str = datetime.now().strftime("%d.%m.%Y %H:%M:%S")

    logger.info(f"Speichere Empfehlungen in '{filename}'")

    try:
        _ensure_parent_dir(filename)
        with open(filename, "w", encoding="utf-8") as f:
            f.write("# 📚 Book Recommendations\n\n")
            f.write(f"**Created:** {timestamp}\n\n")
            f.write("---\n\n")

            f.write(f"## Based on category '{result.start_category}'\n\n")
            if not result.found:
                f.write("_Category not found!_\n\n")
            elif not result.titles:
                f.write("_No recommendations found._\n\n")
            else:
                for i, title in enumerate(result.titles, 1):
                    f.write(f"{i}. {title}\n")
                f.write("\n")

            f.write("---\n\n")
            f.write("## Cross-Category Recommendations\n\n")
            if not cross_category:
                f.write("_No related categories in the catalog._\n\n")

            for category, suggestions in cross_category.items():
                f.write(f"### If you like {category}, you might also enjoy:\n\n")
                for suggestion in suggestions:
                    f.write(f"- {suggestion}\n")
                f.write("\n")

        logger.info(f"✅ Empfehlungen gespeichert: {len(result.titles)} Titel in '{filename}'")
    except IOError as e:
        logger.error(f"Fehler beim Speichern der Empfehlungen: {e}")
        raise

    return filename
