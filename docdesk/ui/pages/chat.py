"""Chat with the assistant about one document."""

from nicegui import ui

from docdesk.client.chat import ChatTranscript
from docdesk.client.errors import ApiError
from docdesk.ui.context import notify_error
from docdesk.ui.layout import protected_page


@ui.page("/home/chats/{document_id}")
async def chat_page(document_id: str) -> None:
    ctx = protected_page(f"/home/chats/{document_id}")
    if ctx is None:
        return

    transcript = ChatTranscript(document_id=document_id)

    username = ctx.session.user.username if ctx.session.user else None

    @ui.refreshable
    def messages() -> None:
        for message in transcript.messages:
            sent = message.role == "user"
            ui.chat_message(
                text=message.text,
                name=username if sent else "DocDesk",
                stamp=message.time,
                sent=sent,
            )
        if transcript.sending:
            ui.spinner("dots", size="2em")

    async def send() -> None:
        question = (input_field.value or "").strip()
        if not question or transcript.sending:
            return
        input_field.value = ""
        transcript.add("user", question)
        transcript.sending = True
        messages.refresh()
        try:
            answer = await ctx.chat.ask(document_id, question)
        except ApiError as e:
            notify_error(e)
        else:
            transcript.add("assistant", answer)
        finally:
            transcript.sending = False
            messages.refresh()

    with ui.column().classes("w-full max-w-3xl mx-auto p-6 gap-4"):
        title = ui.label().classes("text-xl font-semibold")
        with ui.scroll_area().classes("w-full h-[60vh] border rounded-lg"):
            messages()
        with ui.row().classes("w-full items-end gap-2"):
            input_field = (
                ui.textarea(placeholder=ctx.t("ask_placeholder"))
                .props("autogrow outlined dense rows=1")
                .classes("flex-grow")
                .on("keydown.enter.prevent", send)
            )
            ui.button(icon="send", on_click=send).props("round unelevated")

    try:
        document = await ctx.documents.get(document_id)
    except ApiError as e:
        notify_error(e)
        return
    title.set_text(document.filename)
