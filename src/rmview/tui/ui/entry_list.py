"""Entry list widget for rmview.

A ListView whose rows are rebuilt from the controller's display sequence.
Keyboard navigation is reported to the app instead of moving the cursor
here, so the controller stays the owner of the selection.

Created: 2026-10-19
"""

from typing import Optional, Sequence

from rich.style import Style
from rich.text import Text
from textual import events
from textual.message import Message
from textual.widgets import Label, ListItem, ListView

from ...core.models import Entry
from ...core.styles import EntryStyle


ENTRY_STYLES = {
    EntryStyle.SELF: Style(bold=True),
    EntryStyle.DIRECTORY: Style(bold=True, color="blue"),
    EntryStyle.HIDDEN_DIRECTORY: Style(bold=True, dim=True, color="blue"),
    EntryStyle.FILE: Style(italic=True),
    EntryStyle.HIDDEN_FILE: Style(dim=True),
    EntryStyle.OTHER: Style(color="cyan"),
}


class EntryItem(ListItem):
    """One row of the entry list."""

    def __init__(self, entry: Entry, style: EntryStyle):
        super().__init__(Label(Text(entry.name, style=ENTRY_STYLES[style])))
        self.entry = entry


class EntryList(ListView):
    """List of directory entries."""

    DEFAULT_CSS = """
    EntryList {
        height: 1fr;
    }

    EntryList > EntryItem {
        height: 1;
        padding: 0 1;
    }
    """

    class Navigate(Message):
        """Navigation or jump-to-letter key pressed in the list."""

        def __init__(self, key: str):
            super().__init__()
            self.key = key

    class Activated(Message):
        """Enter pressed on the highlighted entry."""

        pass

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.entries: Sequence[Entry] = ()

    async def set_entries(
        self,
        entries: Sequence[Entry],
        styles: Sequence[EntryStyle],
        selected_index: Optional[int],
    ) -> None:
        """Replace the rows if the sequence changed, then move the cursor."""
        if tuple(entries) != tuple(self.entries):
            self.entries = tuple(entries)
            await self.clear()
            await self.extend(
                EntryItem(entry, style) for entry, style in zip(entries, styles)
            )
        if self.index != selected_index:
            self.index = selected_index

    # Key actions

    def action_select_cursor(self) -> None:
        self.post_message(self.Activated())

    def action_cursor_up(self) -> None:
        self.post_message(self.Navigate("up"))

    def action_cursor_down(self) -> None:
        self.post_message(self.Navigate("down"))

    def action_scroll_home(self) -> None:
        self.post_message(self.Navigate("home"))

    def action_scroll_end(self) -> None:
        self.post_message(self.Navigate("end"))

    def action_page_up(self) -> None:
        self.post_message(self.Navigate("pageup"))

    def action_page_down(self) -> None:
        self.post_message(self.Navigate("pagedown"))

    def on_key(self, event: events.Key) -> None:
        """Typed characters jump to the next entry with that initial."""
        if event.is_printable and event.character:
            event.stop()
            event.prevent_default()
            self.post_message(self.Navigate(event.character))
