#!/usr/bin/env python3
"""
Unit Tests für die Bibliotheksverwaltung

Ausführen:
    pytest tests/test_io.py -v
"""

import pytest
import os
import tempfile


# ============================================================================
# tests/test_io.py
# ============================================================================


class TestIO:
    """Tests für utils/io.py"""

    @pytest.fixture
    def tmpdir_path(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            yield tmpdir

    def test_load_books_missing_file(self, tmpdir_path):
        """Fehlende Datei ergibt leere Liste"""
        from utils.io import load_books

        assert load_books(os.path.join(tmpdir_path, "missing.csv")) == []

    def test_load_books_csv_format(self, tmpdir_path):
        """Kopfzeile wird übersprungen, Available '1' bedeutet verfügbar"""
        from utils.io import load_books

        path = os.path.join(tmpdir_path, "books.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("Title,Author,ISBN,Available,Category\n")
            f.write("Dune,Frank Herbert,111,1,Science Fiction\n")
            f.write("Emma,Jane Austen,222,0,Romance\n")

        books = load_books(path)

        assert [b.title for b in books] == ["Dune", "Emma"]
        assert books[0].available and not books[1].available
        assert books[0].category == "Science Fiction"

    def test_load_books_skips_short_rows(self, tmpdir_path):
        """Zeilen mit weniger als fünf Feldern werden übersprungen"""
        from utils.io import load_books

        path = os.path.join(tmpdir_path, "books.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("Title,Author,ISBN,Available,Category\n")
            f.write("Broken,Row\n")
            f.write("\n")
            f.write("Dune,Frank Herbert,111,1,Science Fiction\n")

        assert [b.title for b in load_books(path)] == ["Dune"]

    def test_load_books_latin1_file(self, tmpdir_path):
        """Nicht-UTF-8-Dateien werden als Latin-1 gelesen statt abzubrechen"""
        from utils.io import load_books

        path = os.path.join(tmpdir_path, "books.csv")
        with open(path, "wb") as f:
            f.write(b"Title,Author,ISBN,Available,Category\n")
            f.write(b"Caf\xe9 Stories,Author,111,1,Fiction\n")

        books = load_books(path)

        assert len(books) == 1
        assert books[0].title == "Café Stories"
        assert books[0].category == "Fiction"

    def test_load_borrowers_latin1_file(self, tmpdir_path):
        from utils.io import load_borrowers

        path = os.path.join(tmpdir_path, "borrowers.csv")
        with open(path, "wb") as f:
            f.write(b"ID,Name,BorrowedBooks\n")
            f.write(b"B1,Ren\xe9e,111\n")

        borrowers = load_borrowers(path)

        assert [b.name for b in borrowers] == ["Renée"]
        assert borrowers[0].borrowed_books == ["111"]

    def test_books_save_and_load(self, tmpdir_path):
        """Titel mit Komma überstehen Speichern und Laden"""
        from library.models import Book
        from utils.io import load_books, save_books

        path = os.path.join(tmpdir_path, "books.csv")
        books = [Book("Hello, World", "Someone", "1", "Technical", available=False)]

        save_books(books, path)

        with open(path, "r", encoding="utf-8") as f:
            assert f.readline().strip() == "Title,Author,ISBN,Available,Category"
        assert load_books(path) == books

    def test_borrowers_save_and_load(self, tmpdir_path):
        """Entleiher mit ';'-getrennten ISBNs"""
        from library.models import Borrower
        from utils.io import load_borrowers, save_borrowers

        path = os.path.join(tmpdir_path, "data", "borrowers.csv")
        borrowers = [Borrower("B1", "Alice", ["1", "2"]), Borrower("B2", "Bob")]

        save_borrowers(borrowers, path)

        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
        assert "B1,Alice,1;2;" in content
        assert load_borrowers(path) == borrowers

    def test_load_borrowers_missing_file(self, tmpdir_path):
        from utils.io import load_borrowers

        assert load_borrowers(os.path.join(tmpdir_path, "missing.csv")) == []

    def test_save_recommendations_to_markdown(self, tmpdir_path):
        """Markdown-Export enthält nummerierte Titel und Vorschläge"""
        from recommender.recommender import RecommendationResult
        from utils.io import save_recommendations_to_markdown

        filename = os.path.join(tmpdir_path, "recommended.md")
        result = RecommendationResult("Fiction", True, ["A", "B"])
        cross = {"Fiction": ["B (Fantasy)"]}

        returned = save_recommendations_to_markdown(result, cross, filename)

        assert returned == filename
        with open(filename, "r", encoding="utf-8") as f:
            content = f.read()
        assert "1. A" in content
        assert "2. B" in content
        assert "If you like Fiction, you might also enjoy:" in content
        assert "- B (Fantasy)" in content

    def test_save_recommendations_empty(self, tmpdir_path):
        from recommender.recommender import RecommendationResult
        from utils.io import save_recommendations_to_markdown

        filename = os.path.join(tmpdir_path, "recommended.md")
        save_recommendations_to_markdown(RecommendationResult("Poetry", True, []), {}, filename)

        with open(filename, "r", encoding="utf-8") as f:
            content = f.read()
        assert "No recommendations found." in content


# ============================================================================
# Pytest Configuration
# ============================================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
