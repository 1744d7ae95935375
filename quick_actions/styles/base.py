"""Central CSS definitions for the Quick Actions app."""

# Modal base styles - all modals inherit these
MODAL_CSS = """
.modal-base {
    align: center middle;
}

.modal-base #dialog {
    height: auto;
    max-height: 90%;
    padding: 1 2;
    background: $surface;
    border: round $surface-lighten-1;
    overflow-y: auto;
}

.modal-md #dialog {
    width: 60vw;
    min-width: 50;
    max-width: 80;
}
"""

# Common UI patterns shared across components
COMMON_CSS = """
.dialog-title {
    text-align: center;
    width: 100%;
    margin-bottom: 1;
    color: $text-muted;
}

.dialog-hint {
    text-align: center;
    color: $text-disabled;
    margin-top: 1;
}

.empty-list {
    color: $text-disabled;
    padding: 1;
    text-align: center;
}
"""

BASE_CSS = MODAL_CSS + COMMON_CSS
