"""Page variants.

The three chat pages share one view and differ only in styling, typing
indicator, reply reveal and validation wording.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from minichat.ui.markdown import highlight_css
from minichat.ui.state import DraftError, validate_draft


class Indicator(str, Enum):
    """How a pending reply is shown."""

    DOTS = "dots"
    LABEL = "label"


class ChatVariant(BaseModel):
    """Presentation and validation settings for one chat page.

    Attributes:
        name: Short identifier.
        path: Route the page is served on.
        title: Browser tab title.
        placeholder: Input placeholder text.
        errors: Field error shown for each rejected draft.
        indicator: Pending reply indicator.
        typing_label: Text of the LABEL indicator.
        reveal: Reveal replies one character at a time.
        trim_content: Store the user's text trimmed.
        code_style: Pygments style for fenced code.
        multiline: Textarea (Shift+Enter for newline) instead of one-line input.
        css: Page stylesheet.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    title: str
    placeholder: str
    errors: dict[DraftError, str]
    indicator: Indicator = Indicator.DOTS
    typing_label: str = ""
    reveal: bool = False
    trim_content: bool = True
    code_style: str = "monokai"
    multiline: bool = True
    css: str = ""

    def field_error(self, text: str) -> str | None:
        """Inline error for the input field, or None when the draft is valid."""
        error = validate_draft(text)
        return None if error is None else self.errors[error]

    def head_html(self) -> str:
        return f"<style>\n{self.css}\n{highlight_css(self.code_style)}\n</style>"


_ENGLISH_ERRORS = {
    DraftError.EMPTY: "Message cannot be empty.",
    DraftError.TOO_LONG: "Max length is 500 characters.",
}

_BASE_CSS = """
    .message pre { margin: 0.5rem 0; padding: 0.75rem; border-radius: 0.5rem; overflow-x: auto; }
    .message pre code { padding: 0; font-size: 0.75rem; }
    .message code { font-family: 'Menlo', 'Monaco', monospace; padding: 0.125rem 0.25rem; }
    .message table { border-collapse: collapse; margin: 0.5rem 0; }
    .message th, .message td { border: 1px solid #9ca3af; padding: 0.25rem 0.5rem; }
    .message a { text-decoration: underline; }
    .message p { margin: 0; }
    .typing-dot {
        width: 8px; height: 8px;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(1) { animation-delay: -0.3s; }
    .typing-dot:nth-child(2) { animation-delay: -0.15s; }
    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
"""

DARK = ChatVariant(
    name="dark",
    path="/",
    title="Chat",
    placeholder="Type your message...",
    errors=_ENGLISH_ERRORS,
    indicator=Indicator.DOTS,
    code_style="monokai",
    css=_BASE_CSS
    + """
    body { background: #212121; color: white; }
    .message-user { background: #303030; border-radius: 1rem; }
    .message-assistant { background: transparent; }
    .typing-dot { background: #9ca3af; }
    .input-box { background: #303030; border-radius: 1rem; }
    .input-box textarea, .input-box input { color: white !important; }
    .send-btn { background: #303030 !important; }
    .message a { color: #93c5fd; }
""",
)

REVEAL = ChatVariant(
    name="reveal",
    path="/reveal",
    title="Chat",
    placeholder="Ask anything...",
    errors={
        DraftError.EMPTY: "پیام نمی‌تواند خالی باشد.",
        DraftError.TOO_LONG: "حداکثر طول پیام ۵۰۰ کاراکتر است.",
    },
    indicator=Indicator.LABEL,
    typing_label="در حال تایپ...",
    reveal=True,
    trim_content=False,
    code_style="github-dark",
    multiline=False,
    css=_BASE_CSS
    + """
    body { background: white; color: #111827; }
    .message-user { background: #dbeafe; border-radius: 1rem; text-align: right; }
    .message-assistant { background: transparent; }
    .typing-label {
        background: #f3f4f6; color: #6b7280; border-radius: 0.5rem;
        animation: pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite;
    }
    @keyframes pulse { 50% { opacity: 0.5; } }
    .input-box { border: 1px solid #e5e7eb; border-radius: 9999px; }
    .message a { color: #2563eb; }
""",
)

LIGHT = ChatVariant(
    name="light",
    path="/light",
    title="Chat Assistant",
    placeholder="Type a message...",
    errors=_ENGLISH_ERRORS,
    indicator=Indicator.DOTS,
    code_style="github-dark",
    css=_BASE_CSS
    + """
    body { background: #f5f5f5; }
    .message-user {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }
    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }
    .typing-dot { background: #667eea; }
    .input-box { background: #f9fafb; border: 1px solid #e5e7eb; border-radius: 12px; }
    .input-box:focus-within { border-color: #667eea; }
    .send-btn { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%) !important; }
    .message a { color: #4f46e5; }
""",
)

VARIANTS: tuple[ChatVariant, ...] = (DARK, REVEAL, LIGHT)
