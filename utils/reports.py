#!/usr/bin/env python3
"""
Textberichte für Konsole und Web-Oberfläche

Alle Funktionen geben den fertigen Text zurück, die Ausgabe übernimmt der
Aufrufer.
"""

from typing import Dict, Iterable, List, Tuple

from library.models import Book
from categories.tree import CategoryNode
from categories.graph import CategoryGraph

TREE_SEPARATOR = "-" * 24
BOOK_SEPARATOR = "-" * 40


def _heading(title: str, underline: str = "=") -> List[str]:
    return [title, underline * len(title)]


def format_book(book: Book, with_category: bool = True) -> str:
    """
    Formatiert ein Buch als mehrzeiligen Block.

    Args:
        book: Das Buch
        with_category: Kategorie mit ausgeben

    Returns:
        Text mit abschließender Trennlinie
    """
    lines = [
        f"Title: {book.title}",
        f"Author: {book.author}",
        f"ISBN: {book.isbn}",
        f"Status: {book.status}",
    ]
    if with_category:
        lines.append(f"Category: {book.category}")
    lines.append(BOOK_SEPARATOR)
    return "\n".join(lines)


def render_books(books: Iterable[Book]) -> str:
    lines = ["Library Books:", BOOK_SEPARATOR]
    lines.extend(format_book(book) for book in books)
    return "\n".join(lines)


def render_category_books(category: str, books: List[Book]) -> str:
    """Bücher einer gesuchten Kategorie oder ein Hinweis, wenn keine existieren."""
    lines = [f"Books in category '{category}':", BOOK_SEPARATOR]
    if not books:
        lines.append(f"No books found in category '{category}'")
    lines.extend(format_book(book, with_category=False) for book in books)
    return "\n".join(lines)


def render_category_list(categories: Iterable[str]) -> str:
    lines = ["Available Categories:"]
    lines.extend(f"- {category}" for category in categories)
    return "\n".join(lines)


def render_category_tree(root: CategoryNode) -> str:
    """
    Rendert den Kategorie-Baum.

    Die Wurzel selbst wird nicht ausgegeben; jede Kategorie beginnt auf
    Ebene 0 und wird durch eine Trennlinie abgeschlossen.
    """
    lines = _heading("Library Books by Category:")
    for child in root.children:
        lines.extend(child.render())
        lines.append(TREE_SEPARATOR)
    return "\n".join(lines)


def render_category_statistics(counts: Iterable[Tuple[str, int]]) -> str:
    lines = _heading("Category Statistics:")
    lines.extend(f"{category}: {count} books" for category, count in counts)
    return "\n".join(lines)


def render_relationship_graph(graph: CategoryGraph) -> str:
    """Rendert die Kanten jeder verbundenen Kategorie, Kategorien aufsteigend."""
    lines = _heading("Category Relationships:")
    for category, edges in graph.items():
        lines.append(f"{category} is connected to:")
        lines.extend(f"  - {edge.target} ({edge.label})" for edge in edges)
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def render_cross_category(recommendations: Dict[str, List[str]]) -> str:
    lines = _heading("Sample Cross-Category Recommendations:")
    for category, suggestions in recommendations.items():
        lines.append(f"If you like {category}, you might also enjoy:")
        lines.extend(f"  - {suggestion}" for suggestion in suggestions)
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def render_category_analysis(
    counts: Iterable[Tuple[str, int]], graph: CategoryGraph, recommendations: Dict[str, List[str]]
) -> str:
    """Vollständiger Analysebericht: Statistik, Beziehungen, Vorschläge."""
    sections = [
        render_category_statistics(counts),
        render_relationship_graph(graph),
        render_cross_category(recommendations),
    ]
    return "\n\n".join(sections)


def render_recommendations(result) -> str:
    """
    Rendert das Ergebnis einer Empfehlungssuche.

    Args:
        result: RecommendationResult

    Returns:
        "Category not found!" für unbekannte Startkategorien, sonst die
        nummerierte Liste oder "No recommendations found."
    """
    if not result.found:
        return "Category not found!"

    lines = _heading(f"Recommended Books (based on category '{result.start_category}'):")
    if not result.titles:
        lines.append("No recommendations found.")
    else:
        lines.extend(f"{i}. {title}" for i, title in enumerate(result.titles, 1))
    return "\n".join(lines)


def render_transactions(transactions: List[str]) -> str:
    lines = _heading("Recent Transactions:")
    if not transactions:
        lines.append("No transactions recorded.")
    lines.extend(f"- {entry}" for entry in transactions)
    return "\n".join(lines)
