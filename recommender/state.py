#!/usr/bin/env python3
"""
Zustand einer einzelnen Empfehlungssuche
Lebt nur für die Dauer eines Aufrufs von Recommender.recommend
"""

from typing import List, Set


class RecommendationState:
    """
    Verwaltet den Zustand einer rekursiven Empfehlungssuche.

    Trennt zwischen:
    - visited: Bereits besuchte Kategorien (Schutz vor Zyklen)
    - titles: Gesammelte Titel in Besuchsreihenfolge (Duplikate erlaubt)
    """

    def __init__(self) -> None:
        self.visited: Set[str] = set()
        self.titles: List[str] = []
        # Tiefste erreichte Ebene, nur für Logging und Tests
        self.max_depth_reached: int = 0

    def is_visited(self, category: str) -> bool:
        return category in self.visited

    def mark_visited(self, category: str, depth: int) -> None:
        """Markiert eine Kategorie als besucht und merkt sich die Tiefe."""
        self.visited.add(category)
        self.max_depth_reached = max(self.max_depth_reached, depth)

    def add_titles(self, titles: List[str]) -> None:
        self.titles.extend(titles)

    def get_stats(self):
        """Gibt Statistiken über die Suche zurück"""
        return {
            "visited_total": len(self.visited),
            "titles_total": len(self.titles),
            "max_depth_reached": self.max_depth_reached,
        }
