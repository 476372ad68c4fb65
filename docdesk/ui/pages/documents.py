"""Document list with upload, rename, delete and Drive import."""

from nicegui import events, ui

from docdesk.client.errors import ApiError
from docdesk.models.schemas import Document
from docdesk.ui.context import AppContext, notify_error
from docdesk.ui.layout import protected_page


def format_date(document: Document) -> str:
    return document.created_at_dt.strftime("%Y-%m-%d %H:%M")


@ui.page("/home/documents")
def documents_page() -> None:
    ctx = protected_page("/home/documents")
    if ctx is None:
        return

    @ui.refreshable
    def document_list() -> None:
        sync = ctx.documents
        if sync.loading and not sync.documents:
            ui.spinner(size="2em")
            return
        if sync.error:
            with ui.row().classes("items-center gap-2 text-red-600"):
                ui.icon("error")
                ui.label(sync.error)
                ui.button(icon="refresh", on_click=sync.fetch_all).props("flat round dense")
        if not sync.documents:
            with ui.column().classes("w-full h-48 items-center justify-center gap-2"):
                ui.icon("folder_open").classes("text-5xl text-gray-300")
                ui.label(ctx.t("no_documents")).classes("text-gray-400")
            return
        for document in sync.documents:
            render_document(ctx, document)

    ctx.documents.on_change(document_list.refresh)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        try:
            await ctx.documents.upload(e.file.name, content, e.file.content_type)
        except ApiError as error:
            notify_error(error)
            return
        ui.notify(f"{e.file.name} ✓", type="positive")

    with ui.column().classes("w-full max-w-4xl mx-auto p-6 gap-4"):
        with ui.row().classes("w-full items-center justify-between"):
            ui.label(ctx.t("documents")).classes("text-2xl font-semibold")
            ui.button(ctx.t("drive_import"), icon="add_to_drive", on_click=lambda: drive_dialog(ctx)).props(
                "outline"
            )
        ui.upload(
            label=ctx.t("upload"), on_upload=handle_upload, auto_upload=True, multiple=True
        ).classes("w-full")
        document_list()

    ui.timer(0, ctx.documents.fetch_all, once=True)


def render_document(ctx: AppContext, document: Document) -> None:
    with ui.card().classes("w-full doc-card"), ui.row().classes("w-full items-center justify-between"):
        with ui.column().classes("gap-0"):
            ui.link(document.filename, document.s3_url, new_tab=True).classes("font-medium")
            ui.label(format_date(document)).classes("text-xs text-gray-500")
        with ui.row().classes("gap-1"):
            ui.button(
                icon="chat", on_click=lambda: ui.navigate.to(f"/home/chats/{document.id}")
            ).props("flat round").tooltip(ctx.t("chats"))
            ui.button(
                icon="auto_awesome", on_click=lambda: ui.navigate.to(f"/home/documents/{document.id}/analyze")
            ).props("flat round").tooltip(ctx.t("analyze"))
            ui.button(icon="edit", on_click=lambda: rename_dialog(ctx, document)).props(
                "flat round"
            ).tooltip(ctx.t("rename"))
            ui.button(icon="delete", on_click=lambda: delete_dialog(ctx, document)).props(
                "flat round color=negative"
            ).tooltip(ctx.t("delete"))


def rename_dialog(ctx: AppContext, document: Document) -> None:
    with ui.dialog() as dialog, ui.card().classes("w-96"):
        ui.label(ctx.t("rename")).classes("text-lg font-semibold")
        name = ui.input(value=document.filename).classes("w-full")

        async def save() -> None:
            new_name = (name.value or "").strip()
            if not new_name or new_name == document.filename:
                dialog.close()
                return
            try:
                await ctx.documents.update(document.id, {"filename": new_name})
            except ApiError as e:
                notify_error(e)
            dialog.close()

        with ui.row().classes("w-full justify-end"):
            ui.button(ctx.t("cancel"), on_click=dialog.close).props("flat")
            ui.button(ctx.t("save"), on_click=save)
    dialog.open()


def delete_dialog(ctx: AppContext, document: Document) -> None:
    with ui.dialog() as dialog, ui.card():
        ui.label(ctx.t("confirm_delete", name=document.filename))

        async def confirm() -> None:
            dialog.close()
            try:
                await ctx.documents.delete(document.id)
            except ApiError as e:
                notify_error(e)

        with ui.row().classes("w-full justify-end"):
            ui.button(ctx.t("cancel"), on_click=dialog.close).props("flat")
            ui.button(ctx.t("delete"), on_click=confirm).props("color=negative")
    dialog.open()


def drive_dialog(ctx: AppContext) -> None:
    """Import a file picked in Google Drive, given its id and OAuth token."""
    with ui.dialog() as dialog, ui.card().classes("w-96"):
        ui.label(ctx.t("drive_import")).classes("text-lg font-semibold")
        file_id = ui.input("File ID").classes("w-full")
        oauth_token = ui.input("OAuth token", password=True).classes("w-full")

        async def submit() -> None:
            if not file_id.value or not oauth_token.value:
                return
            try:
                await ctx.documents.upload_from_drive(file_id.value.strip(), oauth_token.value.strip())
            except ApiError as e:
                notify_error(e)
                return
            dialog.close()

        with ui.row().classes("w-full justify-end"):
            ui.button(ctx.t("cancel"), on_click=dialog.close).props("flat")
            ui.button(ctx.t("drive_import"), on_click=submit)
    dialog.open()
