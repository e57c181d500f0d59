#!/usr/bin/env python3
"""
Unit Tests für die Bibliotheksverwaltung

Ausführen:
    pytest tests/test_category_tree.py -v
"""

import pytest


# ============================================================================
# tests/test_category_tree.py
# ============================================================================


class TestCategoryTree:
    """Tests für categories/tree.py"""

    @pytest.fixture
    def index(self):
        from library.models import Book
        from categories.index import build_category_index

        books = [
            Book("Emma", "Jane Austen", "10", "Romance"),
            Book("The Hobbit", "J.R.R. Tolkien", "11", "Fantasy"),
            Book("Gone Girl", "Gillian Flynn", "12", "Mystery", available=False),
            Book("Persuasion", "Jane Austen", "13", "Romance"),
        ]
        return build_category_index(books)

    def test_children_match_categories(self, index):
        """Unterkategorien entsprechen genau den Kategorien des Index"""
        from categories.tree import build_category_tree

        root = build_category_tree(index)

        assert set(root.child_names()) == index.categories

    def test_children_sorted_ascending(self, index):
        """Unterkategorien sind strikt aufsteigend sortiert"""
        from categories.tree import build_category_tree

        root = build_category_tree(index)

        assert root.child_names() == ["Fantasy", "Mystery", "Romance"]

    def test_books_keep_catalog_order(self, index):
        """Bücher bleiben in Katalogreihenfolge"""
        from categories.tree import build_category_tree

        root = build_category_tree(index)
        romance = root.children[2]

        assert [b.title for b in romance.books] == ["Emma", "Persuasion"]
        assert all(b.category == "Romance" for b in romance.books)

    def test_rebuild_is_structurally_identical(self, index):
        """Zweimal aus demselben Katalog gebaut ergibt denselben Baum"""
        from categories.tree import build_category_tree

        assert build_category_tree(index) == build_category_tree(index)

    def test_empty_index_gives_bare_root(self):
        """Leerer Katalog ergibt Wurzel ohne Unterkategorien"""
        from categories.index import build_category_index
        from categories.tree import build_category_tree, ROOT_CATEGORY

        root = build_category_tree(build_category_index([]))

        assert root.category == ROOT_CATEGORY
        assert root.children == []

    def test_duplicate_child_rejected(self):
        """Unterkategorien sind eindeutig nach Namen"""
        from categories.tree import CategoryNode

        root = CategoryNode("Root")
        root.add_child(CategoryNode("Fiction"))

        with pytest.raises(ValueError):
            root.add_child(CategoryNode("Fiction"))

    def test_render_indents_and_status(self, index):
        """Rendering: vier Leerzeichen pro Ebene, Status Available/Borrowed"""
        from categories.tree import build_category_tree

        root = build_category_tree(index)
        lines = root.render()

        assert lines[0] == "Category: Root"
        assert "    Category: Fantasy" in lines
        assert "        - The Hobbit by J.R.R. Tolkien (ISBN: 11) [Available]" in lines
        assert "        - Gone Girl by Gillian Flynn (ISBN: 12) [Borrowed]" in lines

    def test_render_depth_first(self, index):
        """Knoten werden vor ihren Unterkategorien ausgegeben"""
        from categories.tree import CategoryNode

        root = CategoryNode("Root")
        child = CategoryNode("Fiction")
        child.add_child(CategoryNode("Classics"))
        root.add_child(child)

        lines = root.render()

        assert lines.index("    Category: Fiction") < lines.index("        Category: Classics")


# ============================================================================
# Pytest Configuration
# ============================================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
