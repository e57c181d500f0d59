#!/usr/bin/env python3
"""
Feste Kategorie-Beziehungen für Analyse und Empfehlungen

Definiert zwei unabhängige, bewusst getrennt gehaltene Tabellen:

- CATEGORY_RELATIONSHIPS: gewichtete Kategoriepaare für den Beziehungsgraphen
  (categories/graph.py)
- RECOMMENDATION_ADJACENCY: geordnete Nachbarkategorien für die rekursive
  Empfehlungssuche (recommender/recommender.py)

Die beiden Tabellen stimmen nicht überein (Mystery und Romance haben z.B.
nur im Graphen Kanten zu Fiction, aber keine eigene Nachbarliste).
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# Beziehungsstärken
WEIGHT_WEAK = 1
WEIGHT_MODERATE = 2
WEIGHT_STRONG = 3

WEIGHT_LABELS: Mapping[int, str] = MappingProxyType(
    {
        WEIGHT_STRONG: "Strong relationship",
        WEIGHT_MODERATE: "Moderate relationship",
        WEIGHT_WEAK: "Weak relationship",
    }
)
UNKNOWN_WEIGHT_LABEL = "Unknown relationship"

# (Kategorie A, Kategorie B, Gewicht) - ungerichtet
CATEGORY_RELATIONSHIPS: Tuple[Tuple[str, str, int], ...] = (
    ("Fiction", "Fantasy", WEIGHT_STRONG),
    ("Fiction", "Mystery", WEIGHT_MODERATE),
    ("Fiction", "Romance", WEIGHT_MODERATE),
    ("Fantasy", "Science Fiction", WEIGHT_STRONG),
    ("Science Fiction", "Fiction", WEIGHT_MODERATE),
    ("Technical", "Science Fiction", WEIGHT_WEAK),
)

# Kategorie -> verwandte Kategorien in Suchreihenfolge
RECOMMENDATION_ADJACENCY: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "Fiction": ("Fantasy", "Mystery", "Romance"),
        "Fantasy": ("Fiction", "Science Fiction"),
        "Science Fiction": ("Fantasy", "Fiction"),
        "Technical": ("Science Fiction",),
    }
)

# Startkategorie plus zwei Schritte
MAX_RECOMMENDATION_DEPTH = 3

# Vorschläge pro Quellkategorie in der kategorieübergreifenden Analyse
CROSS_CATEGORY_LIMIT = 2


def get_related_categories(category: str) -> Tuple[str, ...]:
    """
    Gibt die verwandten Kategorien für die Empfehlungssuche zurück.

    Args:
        category: Kategoriename

    Returns:
        Verwandte Kategorien, leer für unbekannte Kategorien
    """
    return RECOMMENDATION_ADJACENCY.get(category, ())
