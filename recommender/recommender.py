#!/usr/bin/env python3
"""
Recommender-System für Bücher über verwandte Kategorien

Die rekursive Suche folgt der festen Tabelle RECOMMENDATION_ADJACENCY
(nicht dem Beziehungsgraphen) und ist auf drei Ebenen begrenzt: die
Startkategorie plus zwei Schritte. Bereits besuchte Kategorien werden nicht
erneut betreten, damit Zyklen (Fantasy <-> Fiction <-> Science Fiction)
terminieren.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from library.models import Book
from categories.index import CategoryIndex, build_category_index
from categories.graph import CategoryGraph, build_category_graph, cross_category_recommendations
from categories.policies import CROSS_CATEGORY_LIMIT, MAX_RECOMMENDATION_DEPTH, get_related_categories
from .state import RecommendationState
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class RecommendationResult:
    """Ergebnis einer Empfehlungssuche."""

    start_category: str
    found: bool
    titles: List[str] = field(default_factory=list)


class Recommender:
    """
    Stellt Empfehlungslogik für Bücher aus verwandten Kategorien bereit.

    Arbeitet auf einem Schnappschuss des Katalogs. Bei Änderungen am Katalog
    wird ein neuer Recommender erzeugt.
    """

    def __init__(self, books: List[Book], max_depth: int = MAX_RECOMMENDATION_DEPTH) -> None:
        """
        Initialisiert den Recommender.

        Args:
            books: Bücher in Katalogreihenfolge
            max_depth: Maximale Anzahl Ebenen der Suche (Standard: 3)
        """
        self.books: List[Book] = list(books)
        self.index: CategoryIndex = build_category_index(self.books)
        self.max_depth: int = max_depth

        logger.info(f"Recommender initialisiert mit {len(self.books)} Büchern in {len(self.index)} Kategorien")

    def recommend(self, start_category: str) -> RecommendationResult:
        """
        Sammelt verfügbare Titel aus der Startkategorie und verwandten Kategorien.

        Args:
            start_category: Kategorie, von der die Suche ausgeht

        Returns:
            RecommendationResult; `found` ist False (ohne Suche), wenn die
            Kategorie im Katalog nicht vorkommt
        """
        if start_category not in self.index:
            logger.info(f"Kategorie '{start_category}' nicht im Katalog")
            return RecommendationResult(start_category=start_category, found=False)

        state = RecommendationState()
        self._collect(start_category, state, depth=0)

        logger.info(
            f"{len(state.titles)} Empfehlungen für '{start_category}' "
            f"({len(state.visited)} Kategorien, Tiefe {state.max_depth_reached})"
        )
        return RecommendationResult(start_category=start_category, found=True, titles=state.titles)

    def _collect(self, category: str, state: RecommendationState, depth: int) -> None:
        if depth >= self.max_depth or state.is_visited(category):
            return

        state.mark_visited(category, depth)
        state.add_titles([book.title for book in self.index.books(category) if book.available])

        for related in get_related_categories(category):
            self._collect(related, state, depth + 1)

    def category_graph(self) -> CategoryGraph:
        """Beziehungsgraph für die Kategorien dieses Katalogs."""
        return build_category_graph(self.index.categories)

    def cross_category(self, limit: int = CROSS_CATEGORY_LIMIT) -> Dict[str, List[str]]:
        """
        Kategorieübergreifende Vorschläge über den Beziehungsgraphen.

        Args:
            limit: Maximale Anzahl Vorschläge pro Kategorie (Standard: 2)

        Returns:
            Kategorie -> Vorschläge im Format "Titel (Kategorie)"
        """
        return cross_category_recommendations(self.category_graph(), self.books, limit)
