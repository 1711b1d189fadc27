"""
Interaction controller for rmview.

Owns the view state and reacts to input events one at a time. The
display surface is a plain collaborator: the controller tells it what to
show and never looks widgets up by name.

Created: 2026-10-19
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence

from rmview.core.events import GlobalKey, Highlight, KeyPress, Submit, TextChanged
from rmview.core.exceptions import (
    DirectoryNotEmptyError,
    ForcedDeleteError,
    RemovalError,
    UnsupportedEntryError,
)
from rmview.core.lister import DirectoryLister
from rmview.core.models import Entry, EntryKind, Focus, ViewState
from rmview.core.ordering import order_and_filter
from rmview.core.remover import EntryRemover
from rmview.core.styles import EntryStyle, style_for


logger = logging.getLogger(__name__)

NO_SELECTION_MESSAGE = "No name to remove"
DELETE_ANYWAY_LABEL = "Delete Anyway"
TOGGLE_FOCUS_KEY = "tab"
DEFAULT_PAGE_SIZE = 10


class DisplaySurface(Protocol):
    """What the controller needs from a UI."""

    def render_list(
        self,
        entries: Sequence[Entry],
        selected_index: Optional[int],
        styles: Sequence[EntryStyle],
    ) -> None: ...

    def render_filter_box(self, text: str) -> None: ...

    def render_focus(self, focus: Focus) -> None: ...

    def show_info_dialog(self, message: str) -> None: ...

    def show_confirm_dialog(
        self, message: str, action_label: str, on_confirm: Callable[[], None]
    ) -> None: ...

    def dismiss_top_dialog(self) -> None: ...


class InteractionController:
    """
    Event-driven core of the directory cleaner.

    The displayed sequence is always order_and_filter(last listing,
    filter text). Listings are taken at start and after every successful
    removal; typing only re-filters the last listing.
    """

    def __init__(
        self,
        surface: DisplaySurface,
        directory: Path,
        lister: Optional[DirectoryLister] = None,
        remover: Optional[EntryRemover] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """
        Initialize the controller.

        Args:
            surface: Display surface to drive
            directory: Directory being browsed
            lister: Directory lister (default: DirectoryLister())
            remover: Entry remover (default: EntryRemover())
            page_size: Rows moved by pageup/pagedown
        """
        self.surface = surface
        self.directory = directory
        self.lister = lister or DirectoryLister()
        self.remover = remover or EntryRemover()
        self.page_size = page_size
        self.state = ViewState()

        self._listing: List[Entry] = []
        self._visible: List[Entry] = []

    @property
    def visible_entries(self) -> List[Entry]:
        """Entries currently displayed, in display order."""
        return list(self._visible)

    @property
    def listing_size(self) -> int:
        """Number of entries in the last listing, the self-entry included."""
        return len(self._listing)

    @property
    def selected_entry(self) -> Optional[Entry]:
        index = self.state.selected_index
        if index is None or not 0 <= index < len(self._visible):
            return None
        return self._visible[index]

    def start(self) -> None:
        """Take the initial listing and render it with focus on the list."""
        self._listing = self.lister.list(self.directory)
        self.state = ViewState()
        self._apply_filter(selected_index=0)
        self.surface.render_filter_box(self.state.filter_text)
        self.surface.render_focus(self.state.focus)
        self._render()

    def dispatch(self, event) -> None:
        """Route one input event to its handler."""
        if isinstance(event, TextChanged):
            self.on_text_changed(event.text)
        elif isinstance(event, Submit):
            self.on_submit(event.source)
        elif isinstance(event, KeyPress):
            self.on_key_press(event.key)
        elif isinstance(event, GlobalKey):
            self.on_global_key(event.key)
        elif isinstance(event, Highlight):
            self.on_highlight(event.index)
        else:
            logger.debug(f"Ignoring unknown event {event!r}")

    # Event handlers

    def on_text_changed(self, text: str) -> None:
        if text == self.state.filter_text:
            return
        self.state.filter_text = text
        self._apply_filter(selected_index=0)
        self._render()

    def on_submit(self, source: Focus) -> None:
        if source is Focus.FILTER:
            self.state.focus = Focus.LIST
            self.surface.render_focus(self.state.focus)
            return
        self.delete_selected()

    def on_key_press(self, key: str) -> None:
        if not self._visible:
            return
        current = self.state.selected_index or 0
        last = len(self._visible) - 1
        moves = {
            "up": current - 1,
            "down": current + 1,
            "home": 0,
            "end": last,
            "pageup": current - self.page_size,
            "pagedown": current + self.page_size,
        }
        if key in moves:
            self._select(moves[key])
        elif len(key) == 1:
            self._jump_to(key)

    def on_global_key(self, key: str) -> None:
        if key != TOGGLE_FOCUS_KEY:
            return
        self.state.focus = self.state.focus.toggled()
        self.surface.render_focus(self.state.focus)

    def on_highlight(self, index: int) -> None:
        if not self._visible or index == self.state.selected_index:
            return
        self._select(index)

    def note_focus(self, focus: Focus) -> None:
        """Record a focus change the surface made on its own (mouse click)."""
        self.state.focus = focus

    # Removal

    def delete_selected(self) -> None:
        """Remove the selected entry, asking first for non-empty directories."""
        entry = self.selected_entry
        if entry is None:
            self.surface.show_info_dialog(NO_SELECTION_MESSAGE)
            return

        try:
            self.remover.remove(entry)
        except DirectoryNotEmptyError:
            self._confirm_forced_delete(entry)
            return
        except UnsupportedEntryError:
            self.surface.show_info_dialog(
                f"Cannot remove {entry.path}: unsupported entry kind"
            )
            return
        except RemovalError as e:
            self.surface.show_info_dialog(self._failure_message(entry, e))
            return

        self.refresh(self.state.selected_index)

    def _confirm_forced_delete(self, entry: Entry) -> None:
        def on_confirm() -> None:
            self.force_delete(entry)

        self.surface.show_confirm_dialog(
            f"Failed to remove directory {entry.path}: Directory not empty.",
            DELETE_ANYWAY_LABEL,
            on_confirm,
        )

    def force_delete(self, entry: Entry) -> None:
        """Recursively remove a directory after the user confirmed."""
        previous_index = self.state.selected_index
        self.surface.dismiss_top_dialog()
        try:
            self.remover.remove_tree(entry.path)
        except ForcedDeleteError as e:
            # partially removed: the listing is stale either way
            self.refresh(previous_index)
            self.surface.show_info_dialog(
                f"Failed to remove directory {entry.path}: {e.reason} "
                f"({e.removed_count} entries removed before failure)"
            )
            return
        self.refresh(previous_index)

    def refresh(self, previous_index: Optional[int]) -> None:
        """
        Re-list after a mutation with the filter cleared.

        Selection goes back to ``previous_index``, or to the last entry if
        the list got shorter.

        Raises:
            ListingError: If the directory can no longer be enumerated
        """
        self._listing = self.lister.list(self.directory)
        self.state.filter_text = ""
        self.surface.render_filter_box("")
        self._apply_filter(
            selected_index=previous_index if previous_index is not None else 0
        )
        self._render()

    # Helpers

    @staticmethod
    def _failure_message(entry: Entry, error: RemovalError) -> str:
        if entry.kind is EntryKind.FILE:
            return f"Failed to remove file {entry.path}: {error.reason}"
        if entry.kind is EntryKind.DIRECTORY:
            return f"Failed to remove directory {entry.path}: {error.reason}"
        return f"Failed to remove {entry.path}: {error.reason}"

    def _apply_filter(self, selected_index: int) -> None:
        self._visible = order_and_filter(
            self._listing, self.state.filter_text, self.directory
        )
        self.state.selected_index = self._clamp(selected_index)

    def _clamp(self, index: int) -> Optional[int]:
        if not self._visible:
            return None
        return max(0, min(index, len(self._visible) - 1))

    def _jump_to(self, char: str) -> None:
        """Select the next entry after the current one starting with ``char``.

        Matching ignores case and wraps past the end. No match leaves the
        selection where it is.
        """
        current = self.state.selected_index or 0
        count = len(self._visible)
        wanted = char.lower()
        for step in range(1, count + 1):
            index = (current + step) % count
            if self._visible[index].name.lower().startswith(wanted):
                if index != self.state.selected_index:
                    self._select(index)
                return

    def _select(self, index: int) -> None:
        self.state.selected_index = self._clamp(index)
        self._render()

    def _render(self) -> None:
        self.surface.render_list(
            self.visible_entries,
            self.state.selected_index,
            [style_for(entry) for entry in self._visible],
        )
