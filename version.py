#!/usr/bin/env python3
"""
Versionsinformationen für die Bibliotheksverwaltung
"""

__version__ = "1.0.0"
__author__ = "dgaida"
__license__ = "MIT"
__description__ = "Library catalog and lending with category-based book recommendations"

# Release-Informationen
RELEASE_DATE = "2026-10-19"
RELEASE_NAME = "Category Recommendations"

# Feature-Flags
FEATURES = {
    "category_tree": True,
    "category_graph": True,
    "recursive_recommendations": True,
    "cross_category_recommendations": True,
    "markdown_export": True,
    "web_interface": True,
}


def get_version_info():
    """Gibt vollständige Versionsinformationen zurück"""
    return {
        "version": __version__,
        "release_date": RELEASE_DATE,
        "release_name": RELEASE_NAME,
        "author": __author__,
        "license": __license__,
        "description": __description__,
        "features": FEATURES,
    }


def print_version_info():
    """Druckt Versionsinformationen auf der Konsole"""
    info = get_version_info()
    print(f"\n{'=' * 60}")
    print("  📚 Library Category Recommender")
    print(f"{'=' * 60}")
    print(f"  Version:      {info['version']}")
    print(f"  Release:      {info['release_name']}")
    print(f"  Datum:        {info['release_date']}")
    print(f"  Autor:        {info['author']}")
    print(f"  Lizenz:       {info['license']}")
    print(f"  Features:     {', '.join(name for name, enabled in info['features'].items() if enabled)}")
    print(f"{'=' * 60}\n")


if __name__ == "__main__":
    print_version_info()
