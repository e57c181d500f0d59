"""
Categories-Package für die Bibliotheksverwaltung.

Dieses Package enthält:
- Die Gruppierung des Katalogs nach Kategorien (`CategoryIndex`)
- Den Kategorie-Baum für die Anzeige (`CategoryNode`)
- Den gewichteten Beziehungsgraphen zwischen Kategorien (`CategoryGraph`)
"""

from .index import CategoryIndex, build_category_index
from .tree import CategoryNode, build_category_tree
from .graph import CategoryGraph, RelationshipEdge, build_category_graph, cross_category_recommendations

__all__ = [
    "CategoryIndex",
    "build_category_index",
    "CategoryNode",
    "build_category_tree",
    "CategoryGraph",
    "RelationshipEdge",
    "build_category_graph",
    "cross_category_recommendations",
]
