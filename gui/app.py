import gradio as gr
from typing import Tuple

from library.manager import LibraryManager
from utils import reports
from utils.io import save_recommendations_to_markdown
from utils.logging_config import get_logger

logger = get_logger(__name__)


def show_category_tree(manager: LibraryManager) -> str:
    """
    Erstellt die Baumansicht des aktuellen Katalogs.

    Args:
        manager: Katalog- und Ausleihverwaltung

    Returns:
        Gerenderter Kategorie-Baum
    """
    return reports.render_category_tree(manager.category_tree())


def show_category_analysis(manager: LibraryManager) -> str:
    """
    Erstellt Statistik, Beziehungsgraph und kategorieübergreifende Vorschläge.

    Args:
        manager: Katalog- und Ausleihverwaltung

    Returns:
        Gerenderter Analysebericht
    """
    recommender = manager.recommender()
    return reports.render_category_analysis(
        recommender.index.category_counts(), recommender.category_graph(), recommender.cross_category()
    )


def recommend(manager: LibraryManager, start_category: str) -> str:
    """
    Führt die rekursive Empfehlungssuche für die gewählte Kategorie aus.

    Args:
        manager: Katalog- und Ausleihverwaltung
        start_category: Ausgewählte Startkategorie

    Returns:
        Gerenderte Empfehlungsliste oder Hinweistext
    """
    if not start_category:
        return "Please select a category."

    result = manager.recommender().recommend(start_category)
    return reports.render_recommendations(result)


def export_recommendations(manager: LibraryManager, start_category: str, filename: str) -> str:
    """
    Speichert die Empfehlungen für die gewählte Kategorie als Markdown.

    Returns:
        Statusmeldung für die Oberfläche
    """
    recommender = manager.recommender()
    result = recommender.recommend(start_category or "")
    if not result.found:
        return reports.render_recommendations(result)

    try:
        saved = save_recommendations_to_markdown(result, recommender.cross_category(), filename)
    except IOError as e:
        logger.error(f"❌ Export fehlgeschlagen: {e}")
        return f"❌ Export failed: {e}"

    return f"✅ Recommendations saved to {saved}"


def refresh_categories(manager: LibraryManager) -> Tuple[gr.update, str]:
    categories = manager.categories()
    return gr.update(choices=categories, value=categories[0] if categories else None), f"{len(categories)} categories"


def create_app(manager: LibraryManager, export_file: str = "recommended.md") -> gr.Blocks:
    """
    Baut die Gradio-Oberfläche.

    Args:
        manager: Katalog- und Ausleihverwaltung
        export_file: Zieldatei für den Markdown-Export

    Returns:
        Die Gradio-Blocks-App
    """
    categories = manager.categories()

    with gr.Blocks(title="Library Categories") as demo:
        gr.Markdown("# 📚 Library Categories & Recommendations")

        with gr.Tab("🌳 Books by Category"):
            tree_btn = gr.Button("Display Books by Category", variant="primary")
            tree_output = gr.Textbox(label="Category Tree", lines=20, interactive=False)

        with gr.Tab("📊 Category Analytics"):
            analysis_btn = gr.Button("Show Category Analytics", variant="primary")
            analysis_output = gr.Textbox(label="Analysis", lines=20, interactive=False)

        with gr.Tab("💡 Recommendations"):
            with gr.Row():
                category_dropdown = gr.Dropdown(
                    choices=categories, value=categories[0] if categories else None, label="Starting category"
                )
                category_info = gr.Markdown(f"{len(categories)} categories")
            with gr.Row():
                recommend_btn = gr.Button("Get Book Recommendations", variant="primary")
                export_btn = gr.Button("💾 Export to Markdown", variant="secondary")
                refresh_btn = gr.Button("🔄 Refresh categories", variant="secondary")
            recommend_output = gr.Textbox(label="Recommended Books", lines=15, interactive=False)

        tree_btn.click(fn=lambda: show_category_tree(manager), outputs=[tree_output])
        analysis_btn.click(fn=lambda: show_category_analysis(manager), outputs=[analysis_output])
        recommend_btn.click(fn=lambda x: recommend(manager, x), inputs=[category_dropdown], outputs=[recommend_output])
        export_btn.click(
            fn=lambda x: export_recommendations(manager, x, export_file),
            inputs=[category_dropdown],
            outputs=[recommend_output],
        )
        refresh_btn.click(fn=lambda: refresh_categories(manager), outputs=[category_dropdown, category_info])

    logger.info(f"Gradio-App erstellt mit {len(categories)} Kategorien")
    return demo
