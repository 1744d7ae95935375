"""Status bar widget showing document state."""

from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """One-line summary of cursor, view toggles and the last action."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text-muted;
        padding: 0 1;
    }
    """

    line = reactive(0)
    word_wrap = reactive(True)
    modified = reactive(False)
    message = reactive("")

    def render(self) -> str:
        """Render the status bar."""
        wrap = "wrap" if self.word_wrap else "nowrap"
        dirty = "●" if self.modified else "○"
        parts = [f"{dirty} line {self.line + 1}", wrap, "ctrl+p quick actions"]
        if self.message:
            parts.insert(0, self.message)
        return "  │  ".join(parts)
