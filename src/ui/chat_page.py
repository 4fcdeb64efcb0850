"""NiceGUI chat page rendering conversation snapshots."""

from nicegui import ui

from src.agent.config import ChatConfig
from src.chat.controller import ConversationController, can_send, create_conversation
from src.models.schemas import ConversationSnapshot, Message, Role

CUSTOM_CSS = """
<style>
    body { background: #111827; color: white; }
    .nicegui-content { padding: 0; }

    .chat-aside { background: #1f2937; border-color: #374151; }
    .header { background: #374151; box-shadow: 0 2px 6px rgba(0, 0, 0, 0.3); }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 16px 16px 4px 16px;
    }

    .message-model {
        background: #374151;
        color: white;
        border-radius: 16px 16px 16px 4px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #60a5fa;
        border-radius: 50%;
        animation: pulse 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes pulse {
        0%, 100% { opacity: 1; }
        50% { opacity: 0.3; }
    }

    .input-box { background: #111827; border-radius: 8px; }
</style>
"""

LANDING_TITLE = "Here is the website"
LANDING_TEXT = "Welcome to our basic deployable site. More features coming soon!"


def render_message(message: Message) -> None:
    # Markdown for model replies, plain text for the user
    is_user = message.role == Role.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-model"

    with ui.row().classes(f"w-full {align}"):
        with ui.element("div").classes(f"max-w-[85%] px-4 py-3 {bubble}"):
            if is_user:
                ui.label(message.text).classes(
                    "whitespace-pre-wrap break-words text-sm leading-relaxed"
                )
            else:
                ui.markdown(message.text).classes("break-words text-sm leading-relaxed")


def render_typing_indicator() -> None:
    with (
        ui.row().classes("w-full justify-start"),
        ui.element("div").classes("message-model px-4 py-3"),
        ui.row().classes("gap-2"),
    ):
        for _ in range(3):
            ui.element("div").classes("typing-dot")


def build_chat_panel(conversation: ConversationController) -> None:
    """Build the chat panel and keep it in sync with the conversation."""
    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input
    send_btn: ui.button

    def update_controls(snapshot: ConversationSnapshot | None = None) -> None:
        snapshot = snapshot or conversation.snapshot()
        input_field.set_enabled(not snapshot.pending)
        send_btn.set_enabled(can_send(snapshot, input_field.value))

    def render(snapshot: ConversationSnapshot) -> None:
        messages_container.clear()
        with messages_container:
            for message in snapshot.messages:
                # The reply bubble appears with its first fragment
                if message.role == Role.MODEL and not message.text:
                    continue
                render_message(message)
            if snapshot.pending:
                render_typing_indicator()
        update_controls(snapshot)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        text = input_field.value or ""
        if not can_send(conversation.snapshot(), text):
            return
        input_field.value = ""
        await conversation.send(text)

    # === Panel Layout ===
    with ui.column().classes("w-full h-full gap-0 no-wrap"):
        with ui.row().classes("w-full header px-4 py-4 items-center"):
            ui.label("AI Assistant").classes("text-lg font-bold text-white")

        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full p-4 gap-4")

        with ui.row().classes("w-full p-4 items-center no-wrap border-t border-gray-700"):
            input_field = (
                ui.input(
                    placeholder="Ask something...",
                    on_change=lambda _: update_controls(),
                )
                .props("borderless dense dark")
                .classes("flex-grow input-box px-3")
                .on("keydown.enter", send_message)
            )
            send_btn = ui.button(icon="send", on_click=send_message).props(
                "flat round color=primary"
            )

    unsubscribe = conversation.subscribe(render)
    ui.context.client.on_disconnect(unsubscribe)
    render(conversation.snapshot())


def register_pages(config: ChatConfig) -> None:
    """Register the chat page.

    Every page visit gets its own conversation and Gemini session.

    Args:
        config: Validated chat configuration shared by all visits.
    """

    @ui.page("/")
    def chat_page() -> None:
        """Landing page with the chat panel alongside."""
        ui.add_head_html(CUSTOM_CSS)
        conversation = create_conversation(config)

        with ui.element("div").classes("w-full h-screen flex flex-col md:flex-row"):
            with ui.column().classes(
                "flex-1 items-center justify-center p-4 text-center"
            ):
                ui.label(LANDING_TITLE).classes("text-5xl font-bold mb-4")
                ui.label(LANDING_TEXT).classes("text-xl text-gray-400")
            with ui.element("aside").classes(
                "w-full md:w-1/3 md:max-w-md h-full border-l chat-aside"
            ):
                build_chat_panel(conversation)
