"""Profile, appearance and language settings."""

from nicegui import ui

from docdesk.client.errors import ApiError
from docdesk.session.preferences import LANGUAGES
from docdesk.ui.context import notify_error
from docdesk.ui.layout import protected_page


@ui.page("/home/config")
def settings_page() -> None:
    ctx = protected_page("/home/config")
    if ctx is None:
        return
    user = ctx.session.user
    dark = ui.dark_mode(ctx.preferences.dark_mode)

    def set_dark_mode(value: bool) -> None:
        ctx.preferences.set_dark_mode(value)
        dark.set_value(value)

    def set_language(value: str) -> None:
        ctx.preferences.set_language(value)
        ui.navigate.reload()

    async def save_profile() -> None:
        if not username.value or not email.value:
            return
        try:
            await ctx.users.update_profile(username.value, email.value)
        except ApiError as e:
            notify_error(e)
            return
        ui.notify(ctx.t("profile_saved"), type="positive")

    with ui.column().classes("w-full max-w-2xl mx-auto p-6 gap-6"):
        ui.label(ctx.t("settings")).classes("text-2xl font-semibold")

        with ui.card().classes("w-full gap-3"):
            username = ui.input(ctx.t("username"), value=user.username if user else "").classes("w-full")
            email = ui.input(ctx.t("email"), value=user.email if user else "").classes("w-full")
            if user is not None:
                ui.label(f"{ctx.t('role')}: {user.role.value}").classes("text-sm text-gray-500")
            ui.button(ctx.t("save"), on_click=save_profile)

        with ui.card().classes("w-full gap-3"):
            ui.switch(
                ctx.t("dark_mode"),
                value=ctx.preferences.dark_mode,
                on_change=lambda e: set_dark_mode(e.value),
            )
            ui.select(
                LANGUAGES,
                label=ctx.t("language"),
                value=ctx.preferences.language,
                on_change=lambda e: set_language(e.value),
            ).classes("w-48")
