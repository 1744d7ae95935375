"""EditorScreen: the document view behind the quick actions palette.

Handles the view and editing actions of the menu. App-level actions (file
handling, scripts, help) live on the app, further down the responder chain.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Header, Static

from ..models.document import EditorDocument
from ..models.menu import MenuItem
from ..services.outline import OutlineItem, parse_outline
from ..widgets.status import StatusBar


class EditorScreen(Screen):
    """Read-only document view with a line cursor."""

    DEFAULT_CSS = """
    EditorScreen #document-scroll {
        padding: 0 1;
    }
    """

    def __init__(self, document: EditorDocument) -> None:
        super().__init__()
        self.document = document

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="document-scroll"):
            yield Static(id="document")
        yield StatusBar(id="status")

    def on_mount(self) -> None:
        self.refresh_document()

    def refresh_document(self, message: str = "") -> None:
        """Redraw the document and status bar from the model."""
        document = self.document
        text = Text(no_wrap=not document.word_wrap)
        for number, line in enumerate(document.lines):
            if document.show_invisibles:
                line = line.replace(" ", "·") + "¶"
            style = "reverse" if number == document.cursor_line else ""
            text.append(line or " ", style=style)
            text.append("\n")

        self.query_one("#document", Static).update(text)

        status = self.query_one("#status", StatusBar)
        status.line = document.cursor_line
        status.word_wrap = document.word_wrap
        status.modified = document.is_modified
        status.message = message

    def validate_menu_item(self, item: MenuItem) -> None:
        """Update titles and enabled state of the actions handled here."""
        document = self.document
        name = item.action.name if item.action else ""

        if name == "toggle_word_wrap":
            item.title = "Disable Word Wrap" if document.word_wrap else "Enable Word Wrap"
        elif name == "toggle_invisibles":
            item.title = "Hide Invisibles" if document.show_invisibles else "Show Invisibles"
        elif name in ("find_next", "find_previous"):
            item.enabled = bool(document.find_query)
        elif name == "use_heading_for_find":
            item.enabled = self._current_heading() is not None
        elif name == "change_case":
            item.enabled = bool(document.current_line_text.strip())
        elif name == "undo":
            item.enabled = bool(document.history)

    def _current_heading(self) -> OutlineItem | None:
        headings = [
            item for item in parse_outline(self.document.text)
            if item.line <= self.document.cursor_line
        ]
        return headings[-1] if headings else None

    # Actions

    def action_toggle_word_wrap(self) -> None:
        self.document.word_wrap = not self.document.word_wrap
        self.refresh_document()

    def action_toggle_invisibles(self) -> None:
        self.document.show_invisibles = not self.document.show_invisibles
        self.refresh_document()

    def action_use_heading_for_find(self) -> None:
        heading = self._current_heading()
        if heading is None:
            return
        self.document.find_query = heading.title
        self.refresh_document(f"find: {heading.title}")

    def action_find_next(self) -> None:
        found = self.document.find(forward=True)
        self.refresh_document("" if found else "not found")

    def action_find_previous(self) -> None:
        found = self.document.find(forward=False)
        self.refresh_document("" if found else "not found")

    def action_change_case(self, mode: str = "upper") -> None:
        self.document.change_case(mode)
        self.refresh_document()

    def action_undo(self) -> None:
        self.document.undo()
        self.refresh_document()

    def action_select_outline_item(self, item: OutlineItem) -> None:
        self.document.move_to(item.line)
        self.refresh_document(item.title)
