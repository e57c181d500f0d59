#!/usr/bin/env python3
"""
Haupteinstiegspunkt für die Bibliotheksverwaltung
"""

import sys
import argparse
from typing import List, NoReturn, Optional

from utils.config import load_config
from utils.logging_config import setup_logging, get_logger
from library.manager import LibraryManager
from version import __version__, print_version_info

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Liest die Kommandozeilenargumente.

    Args:
        argv: Argumentliste oder None für sys.argv

    Returns:
        Namespace mit env_file, books_file, borrowers_file, gui und version
    """
    parser = argparse.ArgumentParser(description="Library catalog, lending and category recommendations")
    parser.add_argument("--env-file", default="library.env", help="Env file with LIBRARY_* settings")
    parser.add_argument("--books-file", help="CSV file with books (overrides LIBRARY_BOOKS_FILE)")
    parser.add_argument("--borrowers-file", help="CSV file with borrowers (overrides LIBRARY_BORROWERS_FILE)")
    parser.add_argument("--gui", action="store_true", help="Start the Gradio web interface instead of the menu")
    parser.add_argument("--version", action="store_true", help="Show version information and exit")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """
    Hauptfunktion - Startet Konsolenmenü oder Gradio-App.

    Diese Funktion wird beim direkten Ausführen der Datei aufgerufen.
    """
    args = parse_args(argv)

    if args.version:
        print_version_info()
        sys.exit(0)

    config = load_config(args.env_file)

    setup_logging(config.log_level, config.log_file)

    logger.info("=" * 60)
    logger.info(f"📚 Bibliotheksverwaltung {__version__} startet...")
    logger.info("=" * 60)

    try:
        manager = LibraryManager(
            books_file=args.books_file or config.books_file,
            borrowers_file=args.borrowers_file or config.borrowers_file,
        )

        if args.gui:
            # Gradio nur laden, wenn die Web-Oberfläche gebraucht wird
            from gui import launch_app

            logger.info("Starte Gradio-Webinterface...")
            launch_app(manager, export_file=config.export_file, share=False, inbrowser=True)
        else:
            from cli import run_menu

            run_menu(manager, export_file=config.export_file)

    except KeyboardInterrupt:
        logger.info("⚠️  Programm durch Benutzer beendet (Ctrl+C)")
        sys.exit(0)

    except Exception as e:
        logger.error(f"❌ Kritischer Fehler: {e}", exc_info=True)
        print(f"\n❌ Error: {e}")
        print("\nPlease check the log file for details.")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
