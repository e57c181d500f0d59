#!/usr/bin/env python3
"""
Gruppierung des Katalogs nach Kategorien
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Set, Tuple

from library.models import Book


class CategoryIndex:
    """
    Zuordnung Kategorie -> Bücher für einen Katalog-Schnappschuss.

    Innerhalb einer Kategorie bleibt die Katalogreihenfolge erhalten.
    Der Index wird nicht verändert, nachdem er erstellt wurde.
    """

    def __init__(self, books_by_category: Dict[str, List[Book]]) -> None:
        self.books_by_category: Dict[str, List[Book]] = books_by_category

    @property
    def categories(self) -> Set[str]:
        """Menge aller im Katalog vorkommenden Kategorien."""
        return set(self.books_by_category)

    def __contains__(self, category: str) -> bool:
        return category in self.books_by_category

    def __len__(self) -> int:
        return len(self.books_by_category)

    def books(self, category: str) -> List[Book]:
        """Bücher einer Kategorie in Katalogreihenfolge (leer für unbekannte)."""
        return list(self.books_by_category.get(category, []))

    def category_counts(self) -> List[Tuple[str, int]]:
        """
        Anzahl der Bücher pro Kategorie.

        Returns:
            Liste von (Kategorie, Anzahl), aufsteigend nach Kategorie sortiert
        """
        return [(category, len(self.books_by_category[category])) for category in sorted(self.books_by_category)]


def build_category_index(books: Iterable[Book]) -> CategoryIndex:
    """
    Gruppiert Bücher nach Kategorie.

    Args:
        books: Bücher in Katalogreihenfolge

    Returns:
        CategoryIndex, leer für einen leeren Katalog
    """
    books_by_category: Dict[str, List[Book]] = defaultdict(list)

    for book in books:
        books_by_category[book.category].append(book)

    return CategoryIndex(dict(books_by_category))
