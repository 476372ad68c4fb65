"""Document preview beside an on-demand summary."""

from nicegui import ui

from docdesk.client.errors import ApiError
from docdesk.models.schemas import AnalysisResult
from docdesk.ui.context import notify_error
from docdesk.ui.layout import protected_page


@ui.page("/home/documents/{document_id}/analyze")
async def analyze_page(document_id: str) -> None:
    ctx = protected_page(f"/home/documents/{document_id}/analyze")
    if ctx is None:
        return

    result: AnalysisResult | None = None
    analyzing = False

    @ui.refreshable
    def summary() -> None:
        if analyzing:
            with ui.column().classes("w-full items-center py-12 gap-2"):
                ui.spinner(size="3em")
                ui.label(ctx.t("analyzing")).classes("text-gray-600")
            return
        if result is None:
            ui.label(ctx.t("analyze_hint")).classes("text-gray-500")
            return
        ui.label(result.filename).classes("text-sm text-gray-500")
        ui.label(result.respuesta).classes("whitespace-pre-wrap leading-relaxed")

    async def analyze() -> None:
        nonlocal result, analyzing
        if analyzing:
            return
        analyzing = True
        summary.refresh()
        try:
            result = await ctx.documents.analyze(document_id)
        except ApiError as e:
            notify_error(e)
        else:
            ui.notify(ctx.t("analysis_done"), type="positive")
        finally:
            analyzing = False
            summary.refresh()

    with ui.column().classes("w-full max-w-6xl mx-auto p-6 gap-4"):
        with ui.row().classes("w-full items-center justify-between"):
            with ui.row().classes("items-center gap-2"):
                ui.button(icon="arrow_back", on_click=lambda: ui.navigate.to("/home/documents")).props(
                    "flat round"
                )
                title = ui.label().classes("text-xl font-semibold")
            ui.button(ctx.t("analyze"), icon="auto_awesome", on_click=analyze).props("color=positive")
        with ui.row().classes("w-full gap-4 items-stretch"):
            preview = ui.card().classes("flex-1 min-w-80 h-[70vh] doc-card")
            with ui.card().classes("flex-1 min-w-80 doc-card"):
                summary()

    try:
        document = await ctx.documents.get(document_id)
    except ApiError as e:
        notify_error(e)
        return
    title.set_text(document.filename)
    with preview:
        if document.s3_url:
            ui.element("iframe").props(f'src="{document.s3_url}"').classes("w-full h-full border-0")
        else:
            ui.label(ctx.t("no_preview")).classes("text-gray-400")
