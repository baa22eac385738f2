"""NiceGUI pages for landing, login, signup and the chat dashboard.

Each browser client gets its own workspace; the session record lives in
NiceGUI's per-browser user storage so it survives restarts.
"""

import logging
from collections.abc import Callable

from nicegui import app, events, ui

from pdfchat.api.client import BackendClient
from pdfchat.config import get_client_config
from pdfchat.errors import BusyError, PDFChatError
from pdfchat.models.schemas import Message, Page, Role
from pdfchat.workspace import Workspace, create_workspace

logger = logging.getLogger(__name__)

_backend: BackendClient | None = None

CUSTOM_CSS = """
<style>
    body { background: #f8fafc; }
    .message-user { background: #2563eb; color: white; border-radius: 18px 18px 4px 18px; }
    .message-assistant { background: white; color: #334155; border: 1px solid #e2e8f0;
                         border-radius: 18px 18px 18px 4px; }
    .message-system { background: #ecfdf5; color: #047857; border: 1px solid #d1fae5;
                      border-radius: 12px; }
</style>
"""


def get_backend() -> BackendClient:
    """Return the backend client shared by all browser clients."""
    global _backend
    if _backend is None:
        _backend = BackendClient(get_client_config())
    return _backend


async def close_backend() -> None:
    global _backend
    if _backend is not None:
        await _backend.aclose()
        _backend = None


app.on_shutdown(close_backend)


def render_landing(ws: Workspace) -> None:
    with ui.column().classes("w-full items-center gap-6 py-24"):
        ui.icon("description").classes("text-6xl text-blue-600")
        ui.label("Chat with your Documents").classes("text-4xl font-bold")
        ui.label(
            "Upload a PDF and ask questions about it."
        ).classes("text-lg text-slate-600")
        with ui.row().classes("gap-4"):
            ui.button("Get Started", on_click=lambda: ws.navigation.navigate(Page.SIGNUP))
            ui.button(
                "Existing User", on_click=lambda: ws.navigation.navigate(Page.LOGIN)
            ).props("outline")


def render_login(ws: Workspace) -> None:
    with ui.card().classes("w-full max-w-md mx-auto mt-24 p-8 gap-4"):
        ui.label("Welcome Back").classes("text-2xl font-bold")
        error = ui.label().classes("text-red-600 text-sm")
        error.set_visibility(False)
        username = ui.input("Username").classes("w-full")
        password = ui.input("Password", password=True).classes("w-full")

        async def submit() -> None:
            error.set_visibility(False)
            button.disable()
            try:
                await ws.auth.login(username.value, password.value)
            except PDFChatError as e:
                error.set_text(str(e) or "Failed to log in.")
                error.set_visibility(True)
            finally:
                button.enable()

        button = ui.button("Sign In", on_click=submit).classes("w-full")
        with ui.row().classes("w-full justify-between"):
            ui.button("Sign up", on_click=lambda: ws.navigation.navigate(Page.SIGNUP)).props("flat")
            ui.button("Back to home", on_click=lambda: ws.navigation.navigate(Page.LANDING)).props(
                "flat"
            )


def render_signup(ws: Workspace) -> None:
    with ui.card().classes("w-full max-w-md mx-auto mt-24 p-8 gap-4"):
        ui.label("Create Account").classes("text-2xl font-bold")
        error = ui.label().classes("text-red-600 text-sm")
        error.set_visibility(False)
        username = ui.input("Username").classes("w-full")
        email = ui.input("Email").classes("w-full")
        password = ui.input("Password", password=True).classes("w-full")

        async def submit() -> None:
            error.set_visibility(False)
            button.disable()
            try:
                await ws.auth.signup(username.value, email.value, password.value)
            except PDFChatError as e:
                error.set_text(str(e))
                error.set_visibility(True)
            finally:
                button.enable()

        button = ui.button("Create Account", on_click=submit).classes("w-full")
        with ui.row().classes("w-full justify-between"):
            ui.button("Log in", on_click=lambda: ws.navigation.navigate(Page.LOGIN)).props("flat")
            ui.button("Back to home", on_click=lambda: ws.navigation.navigate(Page.LANDING)).props(
                "flat"
            )


def render_message(msg: Message) -> None:
    if msg.role is Role.SYSTEM:
        with ui.row().classes("w-full justify-center"):
            ui.label(msg.content).classes("message-system px-4 py-2 text-sm")
        return
    is_user = msg.role is Role.USER
    with ui.row().classes(f"w-full {'justify-end' if is_user else 'justify-start'}"):
        with ui.element("div").classes(
            f"max-w-[75%] px-4 py-3 {'message-user' if is_user else 'message-assistant'}"
        ):
            if is_user:
                ui.label(msg.content).classes("text-sm whitespace-pre-wrap")
            else:
                ui.markdown(msg.content).classes("text-sm")


def render_dashboard(ws: Workspace) -> Callable[[], None]:
    """Render the chat dashboard.

    Returns:
        A callable detaching the dashboard from chat updates.
    """
    session = ws.auth.session
    username = session.username if session else ""

    @ui.refreshable
    def active_document() -> None:
        document = ws.documents.document
        if document is None:
            ui.label("No document selected").classes("text-sm italic text-slate-400")
        else:
            with ui.row().classes("items-center gap-2"):
                ui.icon("description").classes("text-blue-400")
                ui.label(document.name).classes("text-sm text-white truncate")

    @ui.refreshable
    def messages_view() -> None:
        if not ws.chat.messages:
            with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                ui.icon("upload_file").classes("text-5xl text-blue-300")
                ui.label("Upload a PDF to start").classes("text-lg text-slate-500")
            return
        for msg in ws.chat.messages:
            render_message(msg)
        if ws.chat.pending:
            with ui.row().classes("items-center gap-2"):
                ui.spinner(size="sm")
                ui.label("Thinking...").classes("text-sm text-slate-500")

    def sync_controls() -> None:
        enabled = ws.documents.ready_document is not None and not ws.chat.pending
        question.set_enabled(enabled)
        send_btn.set_enabled(enabled)

    def on_chat_change() -> None:
        active_document.refresh()
        messages_view.refresh()
        sync_controls()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        try:
            await ws.documents.upload(e.file.name, await e.file.read())
        except BusyError as err:
            logger.info(f"Upload rejected: {err}")
            ui.notify(str(err), type="warning")
        uploader.reset()

    async def send_message() -> None:
        try:
            await ws.chat.send(ws.chat.draft)
        except BusyError:
            ui.notify("Please wait for the current answer", type="warning")

    with ui.row().classes("w-full h-screen no-wrap gap-0"):
        with ui.column().classes("w-72 h-full bg-slate-900 text-slate-300 p-4 gap-4"):
            ui.label("PDF Chat").classes("font-bold text-white")
            uploader = (
                ui.upload(label="Upload New PDF", auto_upload=True, on_upload=handle_upload)
                .props("accept=.pdf flat dark")
                .classes("w-full")
            )
            ui.label("Active Document").classes("text-xs uppercase text-slate-500")
            active_document()
            ui.space()
            ui.label(username).classes("text-sm text-white")
            ui.button("Sign Out", icon="logout", on_click=ws.auth.logout).props("flat color=white")

        with ui.column().classes("flex-grow h-full gap-0"):
            with ui.scroll_area().classes("flex-grow w-full bg-slate-50"):
                with ui.column().classes("w-full max-w-3xl mx-auto p-6 gap-4"):
                    messages_view()
            with ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t"):
                question = (
                    ui.input(placeholder="Ask a question about this document...")
                    .bind_value(ws.chat, "draft")
                    .classes("flex-grow")
                    .on("keydown.enter", send_message)
                )
                send_btn = ui.button(icon="send", on_click=send_message).props("round unelevated")

    sync_controls()
    return ws.chat.subscribe(on_chat_change)


@ui.page("/")
def index() -> None:
    """Main page; shows whichever page the navigation controller selects."""
    ui.add_head_html(CUSTOM_CSS)
    config = get_client_config()
    ws = create_workspace(
        app.storage.user, get_backend(), storage_key=config.session_storage_key
    )
    detach: list[Callable[[], None]] = []

    @ui.refreshable
    def current_page() -> None:
        while detach:
            detach.pop()()
        if ws.auth.loading:
            with ui.column().classes("w-full h-screen items-center justify-center"):
                ui.spinner(size="lg")
            return
        page = ws.navigation.page
        if page is Page.LOGIN:
            render_login(ws)
        elif page is Page.SIGNUP:
            render_signup(ws)
        elif page is Page.DASHBOARD:
            detach.append(render_dashboard(ws))
        else:
            render_landing(ws)

    ws.navigation.subscribe(lambda _page: current_page.refresh())
    current_page()
