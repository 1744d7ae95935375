"""Quick Actions: search every menu command by abbreviation.

Main Textual application. Hosts a small document editor whose menu tree is
flattened into quick actions each time the palette opens.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from textual.app import App
from textual.binding import Binding

from quick_actions.models.command import ActionCommand
from quick_actions.models.document import EditorDocument
from quick_actions.models.menu import MenuItem
from quick_actions.screens.main import EditorScreen
from quick_actions.screens.quick_actions import QuickActionsScreen
from quick_actions.services.config import ConfigManager
from quick_actions.services.dispatch import perform
from quick_actions.services.index_builder import IndexBuilder
from quick_actions.services.main_menu import DEFAULT_SCRIPTS, create_default_menu
from quick_actions.services.outline import outline_commands, parse_outline
from quick_actions.services.responder import ResponderChain
from quick_actions.services.search_session import SearchSession
from quick_actions.styles.base import BASE_CSS

SAMPLE_TEXT = """\
# Quick Actions

Press ctrl+p and type an abbreviation of any menu command.
"fn" finds Edit › Find › Find Next, "sa" finds File › Save.

## Outline

Headings like this one are listed too. Type "outl" to jump here.

## Scripts

banana
apple
cherry
"""


@dataclass
class Services:
    """Application service container for dependency injection."""

    config: ConfigManager
    menu: MenuItem
    scripts: list[str]

    @classmethod
    def create(cls, scripts: list[str] | None = None) -> "Services":
        scripts = list(DEFAULT_SCRIPTS if scripts is None else scripts)
        return cls(
            config=ConfigManager(),
            menu=create_default_menu(scripts),
            scripts=scripts,
        )


class QuickActionsApp(App):
    """The main Quick Actions application."""

    TITLE = "Quick Actions"
    CSS = BASE_CSS + """
    Screen {
        background: $background;
    }
    """

    # Quick actions replace Textual's built-in command palette
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+p", "show_quick_actions", "Quick Actions"),
        Binding("ctrl+q", "quit", "Quit", show=False),
        Binding("f1", "show_help", "Help", show=False),
    ]

    def __init__(
        self,
        services: Services | None = None,
        text: str = SAMPLE_TEXT,
        show_debug_items: bool = False,
        **kwargs,
    ):
        """Initialize the app with injected services.

        Args:
            services: Service container (created if not provided)
            text: Initial document text
            show_debug_items: Show debug-only menu items
            **kwargs: Additional Textual app arguments
        """
        super().__init__(**kwargs)
        self.services = services or Services.create()
        self.document = EditorDocument(text)
        self.show_debug_items = show_debug_items
        self.editor: EditorScreen | None = None
        self.responders = ResponderChain(self._responder_chain)
        self.last_skipped: list = []

    def _responder_chain(self) -> list:
        # The palette is never a responder; actions target the editor behind it
        return [r for r in (self.editor, self) if r is not None]

    def on_mount(self) -> None:
        self.editor = EditorScreen(self.document)
        self.push_screen(self.editor)

    def build_index(self) -> list[ActionCommand]:
        """Flatten the menu into a fresh snapshot, outline included."""
        config = self.services.config.config
        extra: list[ActionCommand] = []
        if config.include_outline:
            extra = outline_commands(parse_outline(self.document.text), config.outline_action_ref)

        builder = IndexBuilder(
            self.responders.resolve_validator,
            excluded_actions=config.excluded_action_refs,
            script_action=config.script_action_ref,
        )
        commands = builder.build(self.services.menu, extra)
        self.last_skipped = builder.skipped
        return commands

    def perform_command(self, command: ActionCommand | None) -> bool:
        """Invoke a command chosen in the palette."""
        if command is None:
            return False
        if not perform(command, self.responders):
            self.notify(f"cannot perform {command.title}", severity="warning")
            return False
        return True

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Enable, disable (None) or hide (False) app-level actions."""
        if action in ("save_document", "revert_document"):
            return True if self.document.is_modified else None
        if action == "run_script":
            return not parameters or parameters[0] in self.services.scripts or None
        if action == "show_debug_log":
            return self.show_debug_items
        return True

    def _refresh_editor(self, message: str = "") -> None:
        if self.editor is not None and self.editor.is_mounted:
            self.editor.refresh_document(message)

    # Actions

    def action_show_quick_actions(self) -> None:
        if isinstance(self.screen, QuickActionsScreen):
            return
        config = self.services.config.config
        session = SearchSession(self.build_index(), config.offload_threshold)
        self.push_screen(
            QuickActionsScreen(session, max_results=config.max_results),
            self.perform_command,
        )

    def action_new_document(self) -> None:
        self.document.replace_text("")
        self.document.move_to(0)
        self._refresh_editor("new document")

    def action_save_document(self) -> None:
        self.document.mark_saved()
        self._refresh_editor("saved")

    def action_revert_document(self) -> None:
        self.document.revert()
        self._refresh_editor("reverted")

    def action_run_script(self, name: str) -> None:
        document = self.document
        if name == "Sort Lines":
            document.replace_text("\n".join(sorted(document.lines)))
        elif name == "Insert Date":
            document.replace_text(f"{document.text.rstrip()}\n{date.today().isoformat()}")
        elif name == "Count Words":
            self.notify(f"{len(document.text.split())} words")
        else:
            self.notify(f"unknown script {name}", severity="error")
            return
        self._refresh_editor(name.lower())

    def action_reload_scripts(self) -> None:
        self.notify(f"{len(self.services.scripts)} scripts")

    def action_show_help(self) -> None:
        self.notify("ctrl+p opens quick actions; type the initials of a menu path")

    def action_show_debug_log(self) -> None:
        skipped = ", ".join(f"{s.title} ({s.reason.value})" for s in self.last_skipped if s.title)
        self.notify(skipped or "nothing skipped", timeout=10)


def main():
    """Run the Quick Actions application."""
    app = QuickActionsApp()
    app.run()


if __name__ == "__main__":
    main()
