#!/usr/bin/env python3
"""
Beziehungsgraph zwischen Kategorien

Ungerichteter, gewichteter Graph über Kategorienamen. Für eine Analyse wird
er aus der festen Tabelle CATEGORY_RELATIONSHIPS aufgebaut, wobei nur Paare
berücksichtigt werden, deren beide Kategorien im Katalog vorkommen.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Set, Tuple

import networkx as nx

from library.models import Book
from categories.policies import (
    CATEGORY_RELATIONSHIPS,
    CROSS_CATEGORY_LIMIT,
    UNKNOWN_WEIGHT_LABEL,
    WEIGHT_LABELS,
)
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RelationshipEdge:
    """Kante von `source` nach `target` mit Beziehungsstärke 1-3."""

    source: str
    target: str
    weight: int

    @property
    def label(self) -> str:
        return weight_label(self.weight)


def weight_label(weight: int) -> str:
    """
    Übersetzt ein Gewicht in einen Anzeigetext.

    Args:
        weight: Beziehungsstärke (1=schwach, 2=mittel, 3=stark)

    Returns:
        Anzeigetext, "Unknown relationship" für Werte außerhalb von 1-3
    """
    label = WEIGHT_LABELS.get(weight)
    if label is None:
        logger.warning(f"Unbekanntes Beziehungsgewicht {weight}")
        return UNKNOWN_WEIGHT_LABEL
    return label


class CategoryGraph:
    """
    Ungerichteter networkx-Graph über Kategorienamen mit Kantenattribut `weight`.

    Jede Kante ist symmetrisch abrufbar: add_edge(a, b, w) liefert sowohl
    a -> b als auch b -> a mit Gewicht w. Nachbarn erscheinen in
    Einfügereihenfolge.
    """

    def __init__(self) -> None:
        self.graph = nx.Graph()

    def add_edge(self, category_a: str, category_b: str, weight: int) -> None:
        self.graph.add_edge(category_a, category_b, weight=weight)
        logger.debug(f"Kante {category_a} <-> {category_b} (Gewicht {weight}) hinzugefügt")

    def edges(self, category: str) -> List[RelationshipEdge]:
        """Kanten einer Kategorie, leer wenn sie isoliert ist."""
        if category not in self.graph:
            return []
        return [RelationshipEdge(category, target, data["weight"]) for target, data in self.graph[category].items()]

    def has_edge(self, category_a: str, category_b: str) -> bool:
        return self.graph.has_edge(category_a, category_b)

    def categories(self) -> List[str]:
        """Kategorien mit mindestens einer Kante, aufsteigend sortiert."""
        return sorted(category for category, degree in self.graph.degree() if degree > 0)

    def items(self) -> Iterator[Tuple[str, List[RelationshipEdge]]]:
        """Iteriert (Kategorie, Kanten) in aufsteigender Reihenfolge der Kategorie."""
        for category in self.categories():
            yield category, self.edges(category)

    def __len__(self) -> int:
        return len(self.categories())


def build_category_graph(
    categories: Iterable[str], relationships: Iterable[Tuple[str, str, int]] = CATEGORY_RELATIONSHIPS
) -> CategoryGraph:
    """
    Baut den Beziehungsgraphen für die im Katalog vorhandenen Kategorien.

    Eine Kante wird nur angelegt, wenn beide Kategorien des Paares im Katalog
    vorkommen. Kategorien ohne Eintrag in der Tabelle bleiben isoliert.

    Args:
        categories: Im Katalog vorkommende Kategorien
        relationships: Tabelle von (Kategorie A, Kategorie B, Gewicht)

    Returns:
        Der gefilterte CategoryGraph
    """
    present: Set[str] = set(categories)
    graph = CategoryGraph()

    for category_a, category_b, weight in relationships:
        if category_a in present and category_b in present:
            graph.add_edge(category_a, category_b, weight)

    logger.info(f"Kategorie-Graph erstellt: {len(graph)} verbundene von {len(present)} Kategorien")
    return graph


def cross_category_recommendations(
    graph: CategoryGraph, books: List[Book], limit: int = CROSS_CATEGORY_LIMIT
) -> Dict[str, List[str]]:
    """
    Wählt verfügbare Bücher aus verwandten Kategorien aus.

    Für jede verbundene Kategorie werden die Kanten in Einfügereihenfolge
    durchlaufen und verfügbare Bücher der Zielkategorie gesammelt, bis
    `limit` unterschiedliche Einträge "Titel (Kategorie)" erreicht sind.

    Args:
        graph: Beziehungsgraph
        books: Katalog in Katalogreihenfolge
        limit: Maximale Anzahl Vorschläge pro Quellkategorie

    Returns:
        Kategorie -> alphabetisch sortierte Vorschläge, Kategorien aufsteigend
    """
    recommendations: Dict[str, List[str]] = {}

    for category, edges in graph.items():
        recommended: Set[str] = set()

        for edge in edges:
            if len(recommended) >= limit:
                break
            for book in books:
                if len(recommended) >= limit:
                    break
                if book.category == edge.target and book.available:
                    recommended.add(f"{book.title} ({edge.target})")

        recommendations[category] = sorted(recommended)
        logger.debug(f"{len(recommended)} kategorieübergreifende Vorschläge für '{category}'")

    return recommendations
