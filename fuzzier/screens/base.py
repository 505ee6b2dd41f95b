"""Base modal screen."""

from typing import Generic, TypeVar

from textual.screen import ModalScreen

# Type variable for modal return types
ModalResultType = TypeVar("ModalResultType", covariant=True)


class FuzzierModalScreen(ModalScreen[ModalResultType], Generic[ModalResultType]):
    """Base modal screen with focus trapping and escape to dismiss.

    Subclasses should use modal-base/modal-md/modal-lg CSS classes and the
    standard dialog structure (Vertical#dialog, dialog-title, dialog-hint).
    """

    BINDINGS = [
        ("escape", "dismiss_modal", "Cancel"),
    ]

    def on_mount(self) -> None:
        """Set up modal on mount - subclasses should call super()."""
        self.trap_focus = True

    def action_dismiss_modal(self) -> None:
        """Dismiss with None result."""
        self.dismiss(None)
