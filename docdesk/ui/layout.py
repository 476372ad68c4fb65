"""Shared page frame: gate check, header and navigation."""

from nicegui import ui

from docdesk.ui.context import AppContext, build_context

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; }
    .body--dark { background: #111827; }
    .header { background: linear-gradient(135deg, #2563eb 0%, #1e40af 100%); }
    .doc-card { border-radius: 12px; }
</style>
"""


def render_loading() -> None:
    with ui.element("div").classes("w-full h-screen flex items-center justify-center"):
        ui.spinner(size="3em", color="primary")


def protected_page(path: str) -> AppContext | None:
    """Build the page context and run the Access Gate.

    Returns:
        The context when the page may render, otherwise None after drawing
        a loading indicator while the redirect happens.
    """
    ctx = build_context()
    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode(ctx.preferences.dark_mode)
    if not ctx.gate.check(path):
        render_loading()
        return None
    render_header(ctx)
    return ctx


def render_header(ctx: AppContext) -> None:
    user = ctx.session.user

    def logout() -> None:
        ctx.session.logout()
        ui.navigate.to(ctx.config.login_route)

    with ui.header().classes("header items-center justify-between px-6"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("description").classes("text-white text-2xl")
            ui.label(ctx.t("app_title")).classes("text-lg font-semibold text-white")
        with ui.row().classes("items-center gap-1"):
            ui.button(ctx.t("dashboard"), on_click=lambda: ui.navigate.to("/home/dashboard")).props(
                "flat color=white"
            )
            ui.button(ctx.t("documents"), on_click=lambda: ui.navigate.to("/home/documents")).props(
                "flat color=white"
            )
            if user is not None and user.is_admin:
                ui.button(ctx.t("users"), on_click=lambda: ui.navigate.to("/home/users")).props(
                    "flat color=white"
                )
            ui.button(ctx.t("settings"), on_click=lambda: ui.navigate.to("/home/config")).props(
                "flat color=white"
            )
            if user is not None:
                ui.label(user.username).classes("text-white/80 text-sm px-2")
            ui.button(icon="logout", on_click=logout).props("flat round color=white").tooltip(
                ctx.t("logout")
            )
