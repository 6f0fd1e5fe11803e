"""NiceGUI chat pages, one per variant."""

import os
from collections.abc import Callable

from nicegui import ui

from minichat.models.schemas import Message
from minichat.ui.client import ProxyClient
from minichat.ui.config import ClientConfig, get_client_config
from minichat.ui.markdown import render_markdown
from minichat.ui.state import ChatController, Exchanger
from minichat.ui.variants import VARIANTS, ChatVariant, Indicator


ExchangerFactory = Callable[[ClientConfig], Exchanger]


def build_chat_view(
    variant: ChatVariant,
    config: ClientConfig,
    client_factory: ExchangerFactory = ProxyClient,
) -> None:
    """Build one chat view for the current browser tab."""
    ui.add_head_html(variant.head_html())

    rendered_count = 0

    def on_change() -> None:
        if len(controller.state.messages) != rendered_count:
            message_list.refresh()
        pending_area.refresh()
        send_btn.set_enabled(controller.can_submit)

    controller = ChatController(
        client_factory(config),
        reveal_interval=config.reveal_interval if variant.reveal else None,
        trim_content=variant.trim_content,
        on_change=on_change,
    )
    # on_disconnect also fires on reconnects; only a deleted client is gone.
    ui.context.client.on_delete(controller.close)

    def render_message(msg: Message) -> None:
        is_user = msg.role == "user"
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"message {bubble} px-3 py-2 max-w-[75%]"):
                ui.html(render_markdown(msg.content), sanitize=False).classes(
                    "text-base leading-relaxed"
                )

    @ui.refreshable
    def message_list() -> None:
        nonlocal rendered_count
        messages = controller.state.messages
        rendered_count = len(messages)
        for msg in messages:
            render_message(msg)

    @ui.refreshable
    def pending_area() -> None:
        state = controller.state
        if state.revealed:
            with ui.row().classes("w-full justify-start"):
                with ui.element("div").classes("message message-assistant px-3 py-2"):
                    ui.html(render_markdown(state.revealed), sanitize=False).classes(
                        "text-sm leading-relaxed"
                    )
        elif state.awaiting_reply:
            if variant.indicator is Indicator.LABEL:
                ui.label(variant.typing_label).classes("typing-label px-3 py-2 w-fit")
            else:
                with ui.row().classes("gap-1 items-center ml-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    async def send_message() -> None:
        if not controller.can_submit or not input_field.validate():
            return
        text = input_field.value or ""
        input_field.value = ""
        await controller.submit(text)

    # === UI Layout ===
    with ui.column().classes("w-full max-w-3xl mx-auto h-screen py-16 gap-4"):
        with ui.scroll_area().classes("flex-grow w-full"):
            with ui.column().classes("w-full gap-3 px-4"):
                message_list()
                pending_area()

        with ui.row().classes("w-full px-4 gap-3 items-end no-wrap"):
            with ui.element("div").classes("flex-grow input-box px-3 py-1"):
                if variant.multiline:
                    input_field = (
                        ui.textarea(placeholder=variant.placeholder, validation=variant.field_error)
                        .props("autogrow borderless dense rows=1")
                        .classes("w-full")
                        .on("keydown.enter.exact.prevent", send_message)
                    )
                else:
                    input_field = (
                        ui.input(placeholder=variant.placeholder, validation=variant.field_error)
                        .props("borderless dense")
                        .classes("w-full")
                        .on("keydown.enter.prevent", send_message)
                    )
                input_field.without_auto_validation().mark("chat-input")
            send_btn = (
                ui.button(icon="arrow_forward", on_click=send_message)
                .props("round unelevated")
                .classes("send-btn")
                .mark("send-button")
            )


def register_pages(
    config: ClientConfig,
    variants: tuple[ChatVariant, ...] = VARIANTS,
    client_factory: ExchangerFactory = ProxyClient,
) -> None:
    """Register a NiceGUI page for every variant."""
    for variant in variants:
        _register_page(variant, config, client_factory)


def _register_page(
    variant: ChatVariant, config: ClientConfig, client_factory: ExchangerFactory
) -> None:
    @ui.page(variant.path, title=variant.title)
    def chat_page() -> None:
        build_chat_view(variant, config, client_factory)


def main() -> None:
    """Serve the chat pages on their own, talking to a proxy elsewhere."""
    register_pages(get_client_config())
    ui.run(title="minichat", port=int(os.getenv("UI_PORT", "8080")), reload=False)


if __name__ == "__main__":
    main()
