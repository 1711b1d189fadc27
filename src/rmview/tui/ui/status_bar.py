"""Status bar widget for rmview.

Shows the browsed directory, keyboard hints and the entry count.

Created: 2026-10-19
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget
from textual.reactive import reactive

from ..keybindings import registry


class StatusBar(Widget):
    """Status bar showing context, hints and counts."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    StatusBar > Horizontal {
        width: 100%;
        height: 1;
    }

    StatusBar .status-left {
        width: 1fr;
        padding: 0 1;
        text-style: bold;
    }

    StatusBar .status-center {
        width: 3fr;
        text-align: center;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-right {
        width: auto;
        text-align: right;
        padding: 0 1;
    }

    StatusBar .status-empty {
        color: $warning;
    }
    """

    count = reactive("")

    def __init__(self, *args, show_hints: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.show_hints = show_hints
        self.left_widget: Optional[Static] = None
        self.center_widget: Optional[Static] = None
        self.right_widget: Optional[Static] = None

    def compose(self) -> ComposeResult:
        """Create status bar layout."""
        with Horizontal():
            self.left_widget = Static("", classes="status-left")
            self.center_widget = Static("", classes="status-center")
            self.right_widget = Static("", classes="status-right")

            yield self.left_widget
            yield self.center_widget
            yield self.right_widget

    def on_mount(self) -> None:
        """Initialize status bar with default values."""
        self.update_hints()

    def update_context(self, context: str) -> None:
        """Update the current context (left side).

        Args:
            context: Directory being browsed
        """
        if self.left_widget:
            self.left_widget.update(context)

    def update_count(self, shown: int, total: int) -> None:
        """Update the entry count (right side).

        Args:
            shown: Entries matching the filter
            total: Entries in the last listing
        """
        self.count = f"{shown}/{total}"
        if self.right_widget:
            self.right_widget.update(self.count)
            self.right_widget.set_class(shown == 0, "status-empty")

    def update_hints(self) -> None:
        """Show the registry's key hints, or nothing when hints are off."""
        if self.center_widget:
            self.center_widget.update(registry.format_hints() if self.show_hints else "")
