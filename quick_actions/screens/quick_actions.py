"""Quick actions palette: search every menu command by abbreviation.

A modal overlay listing the commands whose menu path matches what the
user typed, best match first, with matched characters highlighted.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Input, Static

from .base import QuickModalScreen
from ..models.command import ActionCommand, SearchHit
from ..services.search_session import SearchSession
from ..widgets.highlight import describe_hit, render_hit

SEARCH_GROUP = "quick-actions-search"


class CommandItem(Horizontal):
    """A single hit in the result list."""

    DEFAULT_CSS = """
    CommandItem {
        width: 100%;
        height: 1;
        padding: 0 1;
    }

    CommandItem:hover {
        background: $surface-lighten-1;
    }

    CommandItem.selected {
        background: $surface-lighten-1;
    }

    CommandItem .label {
        width: 1fr;
    }

    CommandItem .keybinding {
        color: $text-disabled;
        text-align: right;
        width: auto;
    }
    """

    class Chosen(Message):
        """Posted when the item is clicked."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, hit: SearchHit, index: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self.hit = hit
        self.index = index

    def compose(self) -> ComposeResult:
        yield Static(render_hit(self.hit), classes="label")
        yield Static(describe_hit(self.hit), classes="keybinding")

    def on_click(self) -> None:
        self.post_message(self.Chosen(self.index))


class QuickActionsScreen(QuickModalScreen[ActionCommand | None]):
    """Searchable list of every available command."""

    BINDINGS = [
        Binding("escape", "dismiss_modal", "Cancel"),
        Binding("enter", "execute", "Run"),
        Binding("up", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("ctrl+p", "move_up", "Up", show=False),
        Binding("ctrl+n", "move_down", "Down", show=False),
    ]

    DEFAULT_CSS = """
    QuickActionsScreen #dialog {
        border: round $primary;
    }

    QuickActionsScreen #palette-input {
        width: 100%;
        margin-bottom: 1;
    }

    QuickActionsScreen #palette-input:focus {
        border: tall $primary;
    }

    QuickActionsScreen #results {
        height: auto;
        max-height: 50vh;
        min-height: 5;
        overflow-y: auto;
    }
    """

    selected_index: reactive[int] = reactive(0)

    def __init__(self, session: SearchSession, max_results: int = 50) -> None:
        super().__init__()
        self._session = session
        self._max_results = max_results
        self._hits: list[SearchHit] = []
        self._updating = False  # Guard flag for DOM updates

    @property
    def hits(self) -> list[SearchHit]:
        return list(self._hits)

    def compose(self) -> ComposeResult:
        self.add_class("modal-base", "modal-md")

        with Vertical(id="dialog"):
            yield Static("quick actions", classes="dialog-title")
            yield Input(placeholder="type an abbreviation...", id="palette-input")
            yield Vertical(id="results")
            yield Static("↑↓ navigate  enter run  esc cancel", classes="dialog-hint")

    def on_mount(self) -> None:
        super().on_mount()
        self._update_results()
        self.query_one("#palette-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Search again on every keystroke; older searches are superseded."""
        self.run_worker(self._search(event.value), exclusive=True, group=SEARCH_GROUP)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_execute()

    async def _search(self, query: str) -> None:
        hits = await self._session.search(query)
        if hits is None:
            return
        self._hits = hits[: self._max_results]
        self._update_results()
        self.selected_index = 0

    def _update_results(self) -> None:
        """Rebuild the results list."""
        self._updating = True
        try:
            results = self.query_one("#results", Vertical)
            results.remove_children()

            if not self._hits:
                query = self.query_one("#palette-input", Input).value
                hint = "no matching commands" if query else f"{len(self._session.commands)} commands"
                results.mount(Static(hint, classes="empty-list"))
                return

            results.mount_all(
                CommandItem(hit, i, classes="selected" if i == 0 else "")
                for i, hit in enumerate(self._hits)
            )
        finally:
            self._updating = False

    def watch_selected_index(self, new_index: int) -> None:
        """Update visual selection."""
        if self._updating or not self.is_mounted:
            return
        for item in self.query(CommandItem):
            item.set_class(item.index == new_index, "selected")

    def action_move_down(self) -> None:
        if self._hits:
            self.selected_index = min(self.selected_index + 1, len(self._hits) - 1)

    def action_move_up(self) -> None:
        if self._hits:
            self.selected_index = max(self.selected_index - 1, 0)

    def action_execute(self) -> None:
        """Dismiss with the selected command."""
        if self._hits and 0 <= self.selected_index < len(self._hits):
            self._session.cancel()
            self.dismiss(self._hits[self.selected_index].command)
        else:
            self.dismiss(None)

    def action_dismiss_modal(self) -> None:
        self._session.cancel()
        super().action_dismiss_modal()

    def on_command_item_chosen(self, event: CommandItem.Chosen) -> None:
        self.selected_index = event.index
        self.action_execute()
