"""Main rmview TUI application.

Textual display surface for the interaction controller: widget events are
turned into controller events, and controller calls become widget updates.

Created: 2026-10-19
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from textual import events
from textual.app import App, ComposeResult
from textual.screen import ModalScreen
from textual.widgets import Input, ListView

from ..config.settings import Settings
from ..core.controller import InteractionController
from ..core.events import GlobalKey, Highlight, KeyPress, Submit, TextChanged
from ..core.exceptions import ListingError
from ..core.lister import DirectoryLister
from ..core.models import Entry, Focus
from ..core.remover import EntryRemover
from ..core.styles import EntryStyle

from .keybindings import registry
from .ui.entry_list import EntryList
from .ui.modals import ConfirmDeleteModal, InfoModal
from .ui.status_bar import StatusBar


logger = logging.getLogger(__name__)


class RmviewApp(App):
    """Main application class for rmview."""

    TITLE = "rmview"

    CSS = """
    #filter {
        margin: 0 1 1 1;
    }
    """

    BINDINGS = registry.app_bindings()

    def __init__(
        self,
        directory: Path,
        settings: Optional[Settings] = None,
        lister: Optional[DirectoryLister] = None,
        remover: Optional[EntryRemover] = None,
    ):
        """Initialize the application.

        Args:
            directory: Directory to browse
            settings: Loaded settings (defaults if None)
            lister: Directory lister override
            remover: Entry remover override
        """
        super().__init__()

        self.directory = directory
        self.settings = settings or Settings()
        self.controller = InteractionController(
            self,
            directory,
            lister=lister,
            remover=remover or EntryRemover(self.settings.behavior.policy()),
            page_size=self.settings.behavior.page_size,
        )

        # Set when a listing fails; the CLI reports it after teardown
        self.listing_error: Optional[ListingError] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield EntryList(id="entries")
        yield Input(placeholder="Filter by prefix", id="filter")
        yield StatusBar(id="status-bar", show_hints=self.settings.display.show_hints)

    def on_mount(self) -> None:
        """Take the first listing."""
        self.query_one("#status-bar", StatusBar).update_context(str(self.directory))
        self._guarded(self.controller.start)

    def _send(self, event) -> None:
        self._guarded(self.controller.dispatch, event)

    def _guarded(self, handler: Callable, *args) -> None:
        try:
            handler(*args)
        except ListingError as e:
            logger.error(f"Exiting: {e}")
            self.listing_error = e
            self.exit(return_code=1)

    # Display surface

    def render_list(
        self,
        entries: Sequence[Entry],
        selected_index: Optional[int],
        styles: Sequence[EntryStyle],
    ) -> None:
        self.call_later(self._update_list, list(entries), list(styles), selected_index)

    async def _update_list(
        self,
        entries: Sequence[Entry],
        styles: Sequence[EntryStyle],
        selected_index: Optional[int],
    ) -> None:
        entry_list = self.query_one("#entries", EntryList)
        await entry_list.set_entries(entries, styles, selected_index)
        self.query_one("#status-bar", StatusBar).update_count(
            len(entries), self.controller.listing_size
        )

    def render_filter_box(self, text: str) -> None:
        filter_input = self.query_one("#filter", Input)
        if filter_input.value != text:
            filter_input.value = text

    def render_focus(self, focus: Focus) -> None:
        if focus is Focus.FILTER:
            self.query_one("#filter", Input).focus()
        else:
            self.query_one("#entries", EntryList).focus()

    def show_info_dialog(self, message: str) -> None:
        self.push_screen(InfoModal(message))

    def show_confirm_dialog(
        self, message: str, action_label: str, on_confirm: Callable[[], None]
    ) -> None:
        self.push_screen(
            ConfirmDeleteModal(
                message, action_label, lambda: self._guarded(on_confirm)
            )
        )

    def dismiss_top_dialog(self) -> None:
        if isinstance(self.screen, ModalScreen):
            self.pop_screen()

    # Action handlers

    def action_toggle_focus(self) -> None:
        """Flip focus between the list and the filter box."""
        if isinstance(self.screen, ModalScreen):
            return
        self._send(GlobalKey("tab"))

    # Message handlers

    def on_input_changed(self, event: Input.Changed) -> None:
        self._send(TextChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._send(Submit(Focus.FILTER))

    def on_entry_list_activated(self, event: EntryList.Activated) -> None:
        self._send(Submit(Focus.LIST))

    def on_entry_list_navigate(self, event: EntryList.Navigate) -> None:
        self._send(KeyPress(event.key))

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Mouse clicks only move the selection."""
        index = event.list_view.index
        if index is not None:
            self._send(Highlight(index))

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        if isinstance(event.widget, Input):
            self.controller.note_focus(Focus.FILTER)
        elif isinstance(event.widget, EntryList):
            self.controller.note_focus(Focus.LIST)


def run_app(directory: Path, settings: Optional[Settings] = None) -> RmviewApp:
    """Run the rmview TUI until it exits.

    Args:
        directory: Directory to browse
        settings: Loaded settings

    Returns:
        The finished app, for its return code and listing error
    """
    app = RmviewApp(directory, settings=settings)
    app.run()
    return app
