#!/usr/bin/env python3
"""
Kategorie-Baum für die Anzeige des Katalogs

Der Baum hat zwei Ebenen (Wurzel -> Kategorie -> Bücher) und wird bei jeder
Anzeige neu aus dem aktuellen Katalog aufgebaut.
"""

from dataclasses import dataclass, field
from typing import List

from library.models import Book
from categories.index import CategoryIndex

ROOT_CATEGORY = "Root"
INDENT = " " * 4


@dataclass
class CategoryNode:
    """Knoten im Kategorie-Baum mit Büchern und Unterkategorien."""

    category: str
    books: List[Book] = field(default_factory=list)
    children: List["CategoryNode"] = field(default_factory=list)

    def add_book(self, book: Book) -> None:
        self.books.append(book)

    def add_child(self, child: "CategoryNode") -> None:
        """
        Fügt eine Unterkategorie hinzu.

        Raises:
            ValueError: Wenn bereits eine Unterkategorie gleichen Namens existiert
        """
        if any(existing.category == child.category for existing in self.children):
            raise ValueError(f"Duplicate subcategory '{child.category}' under '{self.category}'")
        self.children.append(child)

    def child_names(self) -> List[str]:
        return [child.category for child in self.children]

    def render(self, level: int = 0) -> List[str]:
        """
        Rendert den Knoten und seine Unterkategorien (Tiefensuche, Knoten zuerst).

        Args:
            level: Einrückungsebene, je Ebene vier Leerzeichen

        Returns:
            Ausgabezeilen ohne Zeilenumbruch
        """
        indent = INDENT * level
        lines = [f"{indent}Category: {self.category}", f"{indent}Books:"]

        for book in self.books:
            lines.append(
                f"{indent}{INDENT}- {book.title} by {book.author} (ISBN: {book.isbn}) [{book.status}]"
            )

        for child in self.children:
            lines.extend(child.render(level + 1))

        return lines


def build_category_tree(index: CategoryIndex) -> CategoryNode:
    """
    Baut den Kategorie-Baum aus einem CategoryIndex.

    Args:
        index: Bücher gruppiert nach Kategorie

    Returns:
        Wurzelknoten mit einer Unterkategorie pro Kategorie, aufsteigend
        nach Namen sortiert
    """
    root = CategoryNode(ROOT_CATEGORY)

    for category in sorted(index.categories):
        node = CategoryNode(category)
        for book in index.books(category):
            node.add_book(book)
        root.add_child(node)

    return root
