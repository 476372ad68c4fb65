"""Overview of the document list: uploads per user and the newest files."""

from nicegui import ui

from docdesk.sync.documents import documents_per_user, recent_documents
from docdesk.ui.layout import protected_page
from docdesk.ui.pages.documents import format_date


@ui.page("/home/dashboard")
def dashboard_page() -> None:
    ctx = protected_page("/home/dashboard")
    if ctx is None:
        return

    @ui.refreshable
    def overview() -> None:
        sync = ctx.documents
        if sync.loading and not sync.documents:
            ui.spinner(size="2em")
            return
        if sync.error:
            ui.label(sync.error).classes("text-red-600")

        counts = documents_per_user(sync.documents)
        with ui.row().classes("w-full gap-6 items-stretch"):
            with ui.card().classes("flex-1 min-w-80 doc-card"):
                ui.label(ctx.t("documents_per_user")).classes("text-lg font-semibold")
                if counts:
                    ui.echart(
                        {
                            "tooltip": {},
                            "xAxis": {
                                "type": "category",
                                "data": [ctx.users.username_for(user_id) for user_id in counts],
                            },
                            "yAxis": {"type": "value", "minInterval": 1},
                            "series": [{"type": "bar", "data": list(counts.values())}],
                        }
                    ).classes("w-full h-72")
                else:
                    ui.label(ctx.t("no_data")).classes("text-gray-400")
                ui.separator()
                with ui.column().classes("w-full items-center gap-0"):
                    ui.label(str(len(sync.documents))).classes("text-2xl font-bold text-blue-600")
                    ui.label(ctx.t("total_documents")).classes("text-xs text-gray-500")

            with ui.card().classes("flex-1 min-w-80 doc-card"):
                ui.label(ctx.t("recent_documents")).classes("text-lg font-semibold")
                recent = recent_documents(sync.documents)
                if not recent:
                    ui.label(ctx.t("no_documents")).classes("text-gray-400")
                for document in recent:
                    with ui.row().classes("w-full items-center justify-between"):
                        ui.link(document.filename, f"/home/chats/{document.id}").classes("font-medium")
                        ui.label(format_date(document)).classes("text-xs text-gray-500")

    ctx.documents.on_change(overview.refresh)
    ctx.users.on_change(overview.refresh)

    with ui.column().classes("w-full max-w-5xl mx-auto p-6 gap-4"):
        ui.label(ctx.t("dashboard")).classes("text-2xl font-semibold")
        overview()

    async def load() -> None:
        # only admins may list users; others see shortened owner ids
        if ctx.session.user is not None and ctx.session.user.is_admin:
            await ctx.users.fetch_all()
        await ctx.documents.fetch_all()

    ui.timer(0, load, once=True)
