"""NiceGUI chat page with diet and exercise conversations."""

from nicegui import ui
from nicegui.events import ValueChangeEventArguments

from gptdiet.chat.session import ChatSession
from gptdiet.models.schemas import ChatMode, Message
from gptdiet.ui.formatting import markdown_to_html

PAGE_TITLE = "GPT Diet"

MODE_LABELS: dict[ChatMode, str] = {
    ChatMode.DIET: "식단 추천",
    ChatMode.EXERCISE: "운동 추천",
}
INPUT_PLACEHOLDER = "메시지를 입력하세요..."
SEND_LABEL = "보내기"

# Enter also confirms a Hangul syllable; only send once composition has ended
ENTER_KEY_HANDLER = "(e) => { if (!e.isComposing && e.keyCode !== 229) emit(); }"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Roboto:wght@400;500&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Roboto', sans-serif; }

    body {
        background: linear-gradient(to bottom, #ffffff, #e7f6d5);
        color: #4a593b;
        min-height: 100vh;
    }

    .panel {
        background-color: #cbe8a6;
        border-radius: 15px;
        box-shadow: 0 4px 10px rgba(0, 0, 0, 0.1);
    }

    .mode-btn {
        background-color: #d7efb7 !important;
        color: #4a593b !important;
        border-radius: 10px;
        transition: all 0.3s ease;
    }
    .mode-btn:hover { transform: scale(1.1); background-color: #c3de98 !important; }
    .mode-active { background-color: #b5d68d !important; }

    .chat-window {
        background-color: #f0f8e2;
        border: 1px solid #d7efb7;
        border-radius: 15px;
        box-shadow: 0 4px 10px rgba(0, 0, 0, 0.2);
    }

    .message {
        color: #4a593b;
        padding: 12px;
        border-radius: 12px;
        max-width: 70%;
        font-size: 14px;
        line-height: 1.4;
        box-shadow: 0 3px 6px rgba(0, 0, 0, 0.1);
    }
    .message-user { background-color: #cbe8a6; }
    .message-assistant { background-color: #e7f6d5; }

    .input-bar { background-color: #e7f6d5; }

    .send-btn { background-color: #cbe8a6 !important; color: #4a593b !important; }
    .send-btn:hover { transform: scale(1.1); background-color: #b5d68d !important; }

    /* Markdown styling */
    .message-assistant strong { font-weight: 600; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
    .message-assistant .reply-code {
        background: #4a593b;
        color: #f0f8e2;
        border-radius: 8px;
        padding: 8px;
        margin: 4px 0;
        overflow-x: auto;
        white-space: pre;
    }
    .message-assistant a { color: #3b6e1f; text-decoration: underline; }
</style>
"""


def render_message(msg: Message) -> None:
    """Render one transcript entry as a chat bubble."""
    align = "justify-end" if msg.is_user else "justify-start"
    bubble = "message-user" if msg.is_user else "message-assistant"

    with ui.row().classes(f"w-full {align}"):
        with ui.element("div").classes(f"message {bubble}"):
            # Render markdown for replies, plain text for the user
            if msg.is_user:
                ui.label(msg.text).classes("whitespace-pre-wrap")
            else:
                ui.html(markdown_to_html(msg.text), sanitize=False)


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    messages_container: ui.column
    scroll_area: ui.scroll_area
    spinner: ui.spinner
    input_field: ui.input
    mode_buttons: dict[ChatMode, ui.button] = {}
    rendered: tuple | None = None

    def refresh() -> None:
        nonlocal rendered
        # Keystrokes also notify; skip the redraw unless something visible changed
        key = (session.mode, len(session.messages), session.loading)
        if key != rendered:
            rendered = key

            for mode, button in mode_buttons.items():
                active = "mode-active" if mode == session.mode else ""
                button.classes(replace=f"mode-btn {active}")

            messages_container.clear()
            with messages_container:
                visible = session.visible_messages
                if not visible:
                    with ui.column().classes("w-full h-48 items-center justify-center"):
                        ui.label(MODE_LABELS[session.mode]).classes("text-lg opacity-60")
                for msg in visible:
                    render_message(msg)

            spinner.set_visibility(session.loading)
            scroll_area.scroll_to(percent=1.0)

        if input_field.value != session.input_text:
            input_field.value = session.input_text

    session = ChatSession(on_change=refresh)

    async def send_message() -> None:
        session.update_input(input_field.value or "")
        await session.send_message()

    def on_input(e: ValueChangeEventArguments) -> None:
        session.update_input(e.value or "")

    # === UI Layout ===
    with ui.column().classes("w-full max-w-3xl mx-auto p-4 gap-4").style(
        "height: calc(100vh - 2rem)"
    ):
        # Header
        with ui.row().classes("w-full panel p-4 justify-center gap-4"):
            for mode, label in MODE_LABELS.items():
                mode_buttons[mode] = (
                    ui.button(label, on_click=lambda m=mode: session.select_mode(m))
                    .props("unelevated no-caps")
                    .classes("mode-btn")
                )

        # Messages
        with ui.element("div").classes("w-full flex-grow chat-window p-2"):
            with ui.scroll_area().classes("w-full h-full") as scroll_area:
                messages_container = ui.column().classes("w-full gap-3 p-2")
                with ui.row().classes("w-full justify-start p-2"):
                    spinner = ui.spinner("dots", size="lg", color="green-8")

        # Input
        with ui.row().classes("w-full panel input-bar p-4 gap-3 items-center no-wrap"):
            input_field = (
                ui.input(placeholder=INPUT_PLACEHOLDER, on_change=on_input)
                .props("outlined dense bg-color=white")
                .classes("flex-grow")
                .on("keydown.enter", send_message, js_handler=ENTER_KEY_HANDLER)
            )
            ui.button(SEND_LABEL, on_click=send_message).props("unelevated no-caps").classes(
                "send-btn"
            )

    refresh()


def main() -> None:
    ui.run(title=PAGE_TITLE, port=8080, reload=False)


if __name__ == "__main__":
    main()
