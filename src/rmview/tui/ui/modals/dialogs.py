"""Modal dialogs for rmview.

Information dialog for reported errors and the confirmation dialog that
offers a forced recursive delete.

Created: 2026-10-19
"""

from typing import Callable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Static


DIALOG_CSS = """
{name} {{
    align: center middle;
}}

{name} > Container {{
    width: 70;
    height: auto;
    border: thick $primary;
    background: $surface;
    padding: 1 2;
}}

{name} Static#message {{
    width: 100%;
    margin-bottom: 1;
}}

{name} Horizontal#buttons {{
    height: 3;
    align: center middle;
}}

{name} Button {{
    margin: 0 1;
}}
"""


class InfoModal(ModalScreen[None]):
    """Dismissible dialog showing one message."""

    DEFAULT_CSS = DIALOG_CSS.format(name="InfoModal")

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        with Container():
            yield Static(self.message, id="message")
            with Horizontal(id="buttons"):
                yield Button("Ok", variant="primary", id="ok")

    def on_mount(self) -> None:
        self.query_one("#ok", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss()

    def action_close(self) -> None:
        self.dismiss()


class ConfirmDeleteModal(ModalScreen[None]):
    """Dialog offering a forced delete.

    Confirming calls ``on_confirm`` and leaves closing the dialog to the
    caller; cancelling closes it.
    """

    DEFAULT_CSS = DIALOG_CSS.format(name="ConfirmDeleteModal") + """
    ConfirmDeleteModal > Container {
        border: thick $error;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, message: str, action_label: str, on_confirm: Callable[[], None]):
        super().__init__()
        self.message = message
        self.action_label = action_label
        self.confirm_callback = on_confirm

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        with Container():
            yield Static(self.message, id="message")
            with Horizontal(id="buttons"):
                yield Button(self.action_label, variant="error", id="confirm")
                yield Button("Cancel", variant="default", id="cancel")

    def on_mount(self) -> None:
        """Focus the Cancel button."""
        self.query_one("#cancel", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "confirm":
            self.confirm_callback()
        else:
            self.dismiss()

    def action_cancel(self) -> None:
        self.dismiss()
