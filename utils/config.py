#!/usr/bin/env python3
"""
Konfiguration der Bibliotheksverwaltung

Liest Einstellungen aus Umgebungsvariablen. Eine optionale Env-Datei
(Standard: library.env) wird vorher mit python-dotenv geladen.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_ENV_FILE: str = "library.env"


@dataclass(frozen=True)
class LibraryConfig:
    """Einstellungen für Datenablage, Logging und Export."""

    books_file: str = "books.csv"
    borrowers_file: str = "borrowers.csv"
    log_level: str = "INFO"
    log_file: Optional[str] = os.path.join("logs", "library.log")
    export_file: str = "recommended.md"


def load_config(env_file: str = DEFAULT_ENV_FILE) -> LibraryConfig:
    """
    Lädt die Konfiguration aus der Umgebung.

    Bereits gesetzte Umgebungsvariablen haben Vorrang vor Werten aus der
    Env-Datei. Ein leerer LIBRARY_LOG_FILE schaltet das Datei-Logging ab.

    Args:
        env_file: Pfad zur Env-Datei (darf fehlen)

    Returns:
        LibraryConfig mit den aufgelösten Werten
    """
    load_dotenv(dotenv_path=env_file, override=False)

    defaults = LibraryConfig()
    log_file = os.getenv("LIBRARY_LOG_FILE", defaults.log_file)

    return LibraryConfig(
        books_file=os.getenv("LIBRARY_BOOKS_FILE", defaults.books_file),
        borrowers_file=os.getenv("LIBRARY_BORROWERS_FILE", defaults.borrowers_file),
        log_level=os.getenv("LIBRARY_LOG_LEVEL", defaults.log_level).upper(),
        log_file=log_file or None,
        export_file=os.getenv("LIBRARY_EXPORT_FILE", defaults.export_file),
    )
