"""Central CSS definitions for the fuzzier search UI."""

# Modal base styles - the search palette inherits these
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
}

.modal-md #dialog {
    width: 60vw;
    min-width: 50;
    max-width: 80;
}

.modal-lg #dialog {
    width: 80vw;
    min-width: 60;
    max-width: 120;
}
"""

COMMON_CSS = """
/* Dialog title - centered, muted */
.dialog-title {
    text-align: center;
    width: 100%;
    margin-bottom: 1;
    color: $text-muted;
}

/* Dialog hint text - bottom of modals */
.dialog-hint {
    text-align: center;
    color: $text-disabled;
    margin-top: 1;
}

/* Empty list placeholder */
.empty-list {
    color: $text-disabled;
    padding: 1;
    text-align: center;
}
"""

# Combined base CSS for import
BASE_CSS = MODAL_CSS + COMMON_CSS
