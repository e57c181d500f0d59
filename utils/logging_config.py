#!/usr/bin/env python3
"""
Logging-Konfiguration für die Bibliotheksverwaltung

Stellt eine zentrale Einrichtung des Root-Loggers bereit (Konsole und
optional rotierende Log-Datei) sowie einen Zugriff auf Modul-Logger.
"""

import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Konfiguriert das anwendungsweite Logging.

    Die Konsole erhält nur Warnungen und Fehler, damit die Menüausgabe
    lesbar bleibt. In die Log-Datei wird ab `log_level` geschrieben.

    Args:
        log_level: Logging-Level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Pfad zur Log-Datei oder None für kein Datei-Logging
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Vorhandene Handler entfernen (mehrfacher Aufruf)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(max(level, logging.WARNING))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Drittanbieter-Logger leiser stellen
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("gradio").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Gibt einen benannten Logger zurück.

    Args:
        name: Name des Loggers, üblicherweise `__name__`

    Returns:
        Logger-Instanz
    """
    return logging.getLogger(name)
