"""Default menu tree of the Quick Actions app.

Every leaf names an action handled by the editor screen or the app. The
root's title is never shown; its children are the top-level menus.
"""

from __future__ import annotations

from ..models.menu import MenuItem

DEFAULT_SCRIPTS = ["Sort Lines", "Insert Date", "Count Words"]


def _separator() -> MenuItem:
    return MenuItem(title="")


def create_default_menu(scripts: list[str] | None = None) -> MenuItem:
    """Create the main menu with all built-in commands."""
    scripts = DEFAULT_SCRIPTS if scripts is None else scripts
    leaf = MenuItem.leaf
    group = MenuItem.group

    return group("Main Menu", [
        group("File", [
            leaf("New", "new_document", shortcut="ctrl+n"),
            leaf("Save", "save_document", shortcut="ctrl+s"),
            leaf("Revert to Saved", "revert_document"),
            _separator(),
            leaf("Quit", "quit", shortcut="ctrl+q"),
        ]),
        group("Edit", [
            leaf("Undo", "undo", shortcut="ctrl+z"),
            _separator(),
            group("Find", [
                leaf("Use Heading for Find", "use_heading_for_find", shortcut="ctrl+e"),
                leaf("Find Next", "find_next", shortcut="ctrl+g"),
                leaf("Find Previous", "find_previous", shortcut="ctrl+shift+g"),
            ]),
            group("Transformations", [
                leaf("Make Upper Case", "change_case", tag=0, payload="upper"),
                leaf("Make Lower Case", "change_case", tag=1, payload="lower"),
            ]),
        ]),
        group("View", [
            leaf("Enable Word Wrap", "toggle_word_wrap"),
            leaf("Show Invisibles", "toggle_invisibles"),
        ]),
        group("Script", [
            *(leaf(name, "run_script", tag=i, payload=name) for i, name in enumerate(scripts)),
            _separator(),
            leaf("Reload Scripts", "reload_scripts"),
        ]),
        group("Window", [
            leaf("Quick Actions…", "show_quick_actions", shortcut="ctrl+p"),
        ]),
        group("Help", [
            leaf("Quick Actions Help", "show_help", shortcut="f1"),
            leaf("Show Debug Log", "show_debug_log"),
        ]),
    ])
