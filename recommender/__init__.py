"""
Recommender-Package für die Bibliotheksverwaltung.

Dieses Package enthält:
- Die rekursive Empfehlungssuche über verwandte Kategorien (`Recommender`)
- Den Zustand einer einzelnen Suche (`RecommendationState`)
"""

from .recommender import Recommender, RecommendationResult
from .state import RecommendationState

__all__ = ["Recommender", "RecommendationResult", "RecommendationState"]
