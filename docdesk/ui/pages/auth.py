"""Login, registration and the root redirect."""

import asyncio

from nicegui import ui

from docdesk.client.errors import ApiError
from docdesk.ui.context import build_context, notify_error
from docdesk.ui.layout import CUSTOM_CSS


@ui.page("/")
def index_page() -> None:
    ctx = build_context()
    target = ctx.config.home_route if ctx.session.is_authenticated else ctx.config.login_route
    ui.navigate.to(target)


@ui.page("/auth/login")
def login_page() -> None:
    """Email/password sign-in."""
    ctx = build_context()
    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode(ctx.preferences.dark_mode)

    async def submit() -> None:
        if not email.value or not password.value:
            return
        button.disable()
        try:
            user = await ctx.auth.login(email.value, password.value)
        except ApiError as e:
            notify_error(e)
            button.enable()
            return
        ui.notify(ctx.t("welcome", name=user.username), type="positive")
        await asyncio.sleep(1.0)
        ui.navigate.to(ctx.config.home_route)

    with ui.card().classes("absolute-center w-96 p-6 gap-4"):
        ui.label(ctx.t("login")).classes("text-xl font-semibold")
        email = ui.input(ctx.t("email")).props("type=email outlined").classes("w-full")
        password = (
            ui.input(ctx.t("password"), password=True, password_toggle_button=True)
            .props("outlined")
            .classes("w-full")
            .on("keydown.enter", submit)
        )
        button = ui.button(ctx.t("login"), on_click=submit).classes("w-full")
        ui.button(
            ctx.t("register"), on_click=lambda: ui.navigate.to("/auth/register")
        ).props("flat").classes("w-full")


@ui.page("/auth/register")
def register_page() -> None:
    """Account creation."""
    ctx = build_context()
    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode(ctx.preferences.dark_mode)

    async def submit() -> None:
        if not (username.value and email.value and password.value):
            return
        button.disable()
        try:
            await ctx.auth.register(username.value, email.value, password.value)
        except ApiError as e:
            notify_error(e)
            button.enable()
            return
        ui.notify(ctx.t("registered"), type="positive")
        await asyncio.sleep(1.5)
        ui.navigate.to(ctx.config.login_route)

    with ui.card().classes("absolute-center w-96 p-6 gap-4"):
        ui.label(ctx.t("register")).classes("text-xl font-semibold")
        username = ui.input(ctx.t("username")).props("outlined").classes("w-full")
        email = ui.input(ctx.t("email")).props("type=email outlined").classes("w-full")
        password = (
            ui.input(ctx.t("password"), password=True, password_toggle_button=True)
            .props("outlined")
            .classes("w-full")
        )
        button = ui.button(ctx.t("register"), on_click=submit).classes("w-full")
        ui.button(
            ctx.t("login"), on_click=lambda: ui.navigate.to(ctx.config.login_route)
        ).props("flat").classes("w-full")
