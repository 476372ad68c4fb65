"""Admin-only user management."""

from nicegui import ui

from docdesk.client.errors import ApiError
from docdesk.models.schemas import Identity, Role
from docdesk.ui.context import AppContext, notify_error
from docdesk.ui.layout import protected_page

ROLE_OPTIONS = {role.value: role.value for role in Role}


@ui.page("/home/users")
def users_page() -> None:
    ctx = protected_page("/home/users")
    if ctx is None:
        return
    if not ctx.gate.require_role(Role.ADMIN):
        ui.notify("Only administrators can access this page", type="negative")
        return

    @ui.refreshable
    def user_list() -> None:
        if ctx.users.error:
            ui.label(ctx.users.error).classes("text-red-600")
        for user in ctx.users.users:
            render_user(ctx, user)

    ctx.users.on_change(user_list.refresh)

    with ui.column().classes("w-full max-w-4xl mx-auto p-6 gap-4"):
        with ui.row().classes("w-full items-center justify-between"):
            ui.label(ctx.t("users")).classes("text-2xl font-semibold")
            ui.button(ctx.t("create_user"), icon="person_add", on_click=lambda: create_dialog(ctx))
        user_list()

    ui.timer(0, ctx.users.fetch_all, once=True)


def render_user(ctx: AppContext, user: Identity) -> None:
    async def change_role(value: str) -> None:
        if value == user.role.value:
            return
        try:
            await ctx.users.update_role(user.id, value)
        except ApiError as e:
            notify_error(e)

    async def delete() -> None:
        try:
            await ctx.users.delete(user.id)
        except ApiError as e:
            notify_error(e)

    with ui.card().classes("w-full"), ui.row().classes("w-full items-center justify-between"):
        with ui.column().classes("gap-0"):
            ui.label(user.username).classes("font-medium")
            ui.label(user.email).classes("text-xs text-gray-500")
        with ui.row().classes("items-center gap-2"):
            ui.select(ROLE_OPTIONS, value=user.role.value, on_change=lambda e: change_role(e.value)).classes(
                "w-32"
            )
            current = ctx.session.user
            if current is None or current.id != user.id:
                ui.button(icon="delete", on_click=delete).props("flat round color=negative")


def create_dialog(ctx: AppContext) -> None:
    with ui.dialog() as dialog, ui.card().classes("w-96 gap-3"):
        ui.label(ctx.t("create_user")).classes("text-lg font-semibold")
        username = ui.input(ctx.t("username")).classes("w-full")
        email = ui.input(ctx.t("email")).classes("w-full")
        password = ui.input(ctx.t("password"), password=True).classes("w-full")
        role = ui.select(ROLE_OPTIONS, value=Role.EMPLOYEE.value, label=ctx.t("role")).classes("w-full")

        async def submit() -> None:
            if not (username.value and email.value and password.value):
                return
            try:
                await ctx.users.create(
                    {
                        "username": username.value,
                        "email": email.value,
                        "password": password.value,
                        "role": role.value,
                    }
                )
            except ApiError as e:
                notify_error(e)
                return
            dialog.close()

        with ui.row().classes("w-full justify-end"):
            ui.button(ctx.t("cancel"), on_click=dialog.close).props("flat")
            ui.button(ctx.t("save"), on_click=submit)
    dialog.open()
