#!/usr/bin/env python3
"""
Unit Tests für die Bibliotheksverwaltung

Ausführen:
    pytest tests/test_main.py -v
"""

import pytest
from unittest.mock import patch


# ============================================================================
# tests/test_main.py
# ============================================================================


class TestMain:
    """Tests für main.py"""

    def test_parse_args_defaults(self):
        from main import parse_args

        args = parse_args([])

        assert args.env_file == "library.env"
        assert args.books_file is None
        assert not args.gui
        assert not args.version

    def test_version_flag_prints_info_and_exits(self, capsys):
        """--version gibt die Versionsinformationen aus, ohne den Katalog zu laden"""
        from main import main
        from version import __version__

        with patch("main.load_config") as mock_config, patch("main.LibraryManager") as mock_manager:
            with pytest.raises(SystemExit) as exc_info:
                main(["--version"])

        assert exc_info.value.code == 0
        mock_config.assert_not_called()
        mock_manager.assert_not_called()

        output = capsys.readouterr().out
        assert f"Version:      {__version__}" in output
        assert "category_graph" in output

    def test_menu_run_exits_zero(self):
        from main import main

        with patch("main.setup_logging"), patch("main.LibraryManager") as mock_manager, patch(
            "cli.run_menu"
        ) as mock_menu:
            with pytest.raises(SystemExit) as exc_info:
                main(["--books-file", "my_books.csv"])

        assert exc_info.value.code == 0
        assert mock_manager.call_args.kwargs["books_file"] == "my_books.csv"
        mock_menu.assert_called_once()

    def test_unexpected_error_exits_one(self):
        """Unerwartete Fehler werden geloggt und führen zu Exit-Code 1"""
        from main import main

        with patch("main.setup_logging"), patch("main.LibraryManager", side_effect=RuntimeError("kaputt")):
            with pytest.raises(SystemExit) as exc_info:
                main([])

        assert exc_info.value.code == 1


class TestVersion:
    """Tests für version.py"""

    def test_get_version_info(self):
        from version import get_version_info, __version__

        info = get_version_info()

        assert info["version"] == __version__
        assert info["features"]["recursive_recommendations"] is True


# ============================================================================
# Pytest Configuration
# ============================================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
