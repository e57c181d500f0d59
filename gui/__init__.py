# gui/__init__.py

"""
GUI-Package für die Bibliotheksverwaltung.

Dieses Package stellt die Gradio-App bereit und bietet eine
bequeme Startfunktion.
"""

from .app import create_app


def launch_app(manager, *args, export_file="recommended.md", **kwargs):
    """
    Erstellt und startet die Gradio-App.

    Args:
        manager: LibraryManager mit dem geladenen Katalog.
        *args: Beliebige Positionsargumente für `demo.launch()`.
        export_file: Zieldatei für den Markdown-Export.
        **kwargs: Beliebige Keyword-Argumente für `demo.launch()`.

    Returns:
        None
    """
    demo = create_app(manager, export_file=export_file)
    demo.launch(*args, **kwargs)


__all__ = ["create_app", "launch_app"]
