"""The text document edited in the Quick Actions demo host."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class EditorDocument:
    """Plain text buffer with a line cursor and a few view toggles."""

    text: str = ""
    saved_text: str | None = None  # None until first save; set to text on load
    cursor_line: int = 0
    word_wrap: bool = True
    show_invisibles: bool = False
    find_query: str = ""
    history: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.saved_text is None:
            self.saved_text = self.text

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()

    @property
    def is_modified(self) -> bool:
        return self.text != self.saved_text

    @property
    def current_line_text(self) -> str:
        lines = self.lines
        if 0 <= self.cursor_line < len(lines):
            return lines[self.cursor_line]
        return ""

    def move_to(self, line: int) -> None:
        """Move the cursor, clamped to the document."""
        self.cursor_line = max(0, min(line, max(len(self.lines) - 1, 0)))

    def find(self, forward: bool = True) -> bool:
        """Move to the next (or previous) line containing find_query.

        Wraps around. Returns False if no other line matches.
        """
        if not self.find_query:
            return False

        lines = self.lines
        needle = self.find_query.lower()
        count = len(lines)
        step = 1 if forward else -1
        for offset in range(1, count + 1):
            line = (self.cursor_line + step * offset) % count
            if needle in lines[line].lower():
                self.cursor_line = line
                return True
        return False

    def change_case(self, mode: str) -> None:
        """Upper- or lower-case the current line."""
        lines = self.lines
        if not lines or not (0 <= self.cursor_line < len(lines)):
            return
        line = lines[self.cursor_line]
        lines[self.cursor_line] = line.upper() if mode == "upper" else line.lower()
        self.replace_text("\n".join(lines))

    def replace_text(self, text: str) -> None:
        """Replace the whole buffer, remembering the previous text for undo."""
        if text == self.text:
            return
        self.history.append(self.text)
        self.text = text
        self.move_to(self.cursor_line)

    def undo(self) -> bool:
        if not self.history:
            return False
        self.text = self.history.pop()
        self.move_to(self.cursor_line)
        return True

    def revert(self) -> None:
        self.replace_text(self.saved_text or "")

    def mark_saved(self) -> None:
        self.saved_text = self.text
