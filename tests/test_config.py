#!/usr/bin/env python3
"""
Unit Tests für die Bibliotheksverwaltung

Ausführen:
    pytest tests/test_config.py -v
"""

import pytest
import os
import tempfile
from unittest.mock import patch


# ============================================================================
# tests/test_config.py
# ============================================================================


class TestConfig:
    """Tests für utils/config.py"""

    ENV_KEYS = [
        "LIBRARY_BOOKS_FILE",
        "LIBRARY_BORROWERS_FILE",
        "LIBRARY_LOG_LEVEL",
        "LIBRARY_LOG_FILE",
        "LIBRARY_EXPORT_FILE",
    ]

    @pytest.fixture
    def clean_env(self):
        """Entfernt LIBRARY_*-Variablen für die Dauer des Tests"""
        env = {k: v for k, v in os.environ.items() if k not in self.ENV_KEYS}
        with patch.dict(os.environ, env, clear=True):
            yield

    def test_defaults(self, clean_env):
        from utils.config import load_config

        config = load_config("/nonexistent/library.env")

        assert config.books_file == "books.csv"
        assert config.borrowers_file == "borrowers.csv"
        assert config.log_level == "INFO"
        assert config.log_file == os.path.join("logs", "library.log")

    def test_env_file(self, clean_env):
        from utils.config import load_config

        with tempfile.NamedTemporaryFile(mode="w", suffix=".env", delete=False) as f:
            f.write("LIBRARY_BOOKS_FILE=data/books.csv\n")
            f.write("LIBRARY_LOG_LEVEL=debug\n")
            f.write("LIBRARY_LOG_FILE=\n")
            env_path = f.name

        try:
            config = load_config(env_path)
        finally:
            os.remove(env_path)

        assert config.books_file == "data/books.csv"
        assert config.log_level == "DEBUG"
        assert config.log_file is None

    def test_environment_wins_over_file(self, clean_env):
        from utils.config import load_config

        with tempfile.NamedTemporaryFile(mode="w", suffix=".env", delete=False) as f:
            f.write("LIBRARY_EXPORT_FILE=from_file.md\n")
            env_path = f.name

        try:
            with patch.dict(os.environ, {"LIBRARY_EXPORT_FILE": "from_env.md"}):
                config = load_config(env_path)
        finally:
            os.remove(env_path)

        assert config.export_file == "from_env.md"


class TestLoggingConfig:
    """Tests für utils/logging_config.py"""

    def test_setup_logging_with_file(self):
        import logging
        from utils.logging_config import setup_logging, get_logger

        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = os.path.join(tmpdir, "logs", "library.log")
            setup_logging("DEBUG", log_file)

            get_logger("tests").info("Testnachricht")
            for handler in logging.getLogger().handlers:
                handler.flush()

            with open(log_file, "r", encoding="utf-8") as f:
                assert "Testnachricht" in f.read()

            for handler in logging.getLogger().handlers:
                handler.close()
            logging.getLogger().handlers.clear()


# ============================================================================
# Pytest Configuration
# ============================================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
