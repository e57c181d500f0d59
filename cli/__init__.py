"""
CLI-Package für die Bibliotheksverwaltung.

Stellt das blockierende Konsolenmenü bereit.
"""

from .menu import ConsoleMenu, run_menu

__all__ = ["ConsoleMenu", "run_menu"]
