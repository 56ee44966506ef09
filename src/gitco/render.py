"""Terminal rendering of tagged text spans."""

from enum import Enum
from typing import NamedTuple, Optional

from rich.console import Console
from rich.text import Text


class Tag(Enum):
    """Meaning of a piece of output text."""

    PLAIN = "plain"
    HEADER = "header"
    HINT = "hint"
    PROMPT = "prompt"
    NUMBER = "number"
    CURRENT_BRANCH = "current-branch"
    REMOTE_MARKER = "remote-marker"
    ERROR = "error"


class Span(NamedTuple):
    """Text with a tag."""

    tag: Tag
    text: str


STYLES = {
    Tag.PLAIN: "",
    Tag.HEADER: "cyan",
    Tag.HINT: "dark_cyan",
    Tag.PROMPT: "cyan",
    Tag.NUMBER: "white",
    Tag.CURRENT_BRANCH: "green",
    Tag.REMOTE_MARKER: "magenta",
    Tag.ERROR: "red",
}


def to_text(spans: tuple[Span, ...]) -> Text:
    """Build styled rich text from spans."""
    text = Text()
    for span in spans:
        text.append(span.text, style=STYLES[span.tag])
    return text


class ConsoleRenderer:
    """Write spans to a rich console and read commands from the user."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def write_line(self, *spans: Span) -> None:
        """Write one line made of spans (an empty line if none are given)."""
        self.console.print(to_text(spans), soft_wrap=True)

    def read_line(self, *prompt: Span) -> Optional[str]:
        """Show the prompt and read one line, or None at end of input."""
        try:
            return self.console.input(to_text(prompt))
        except EOFError:
            return None
