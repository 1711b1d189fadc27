"""Central keybinding registry for rmview.

Single source of truth for the app-level key bindings and the key hints
shown in the status bar.

Created: 2026-10-19
"""

from dataclasses import dataclass
from typing import Dict, List, Optional
from enum import Enum

from textual.binding import Binding


class KeyContext(Enum):
    """Context where a keybinding is active."""
    GLOBAL = "global"
    LIST = "list"


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # Key as Textual names it
    label: str  # Key as shown to the user
    description: str
    context: KeyContext = KeyContext.GLOBAL
    action: Optional[str] = None  # App action; None when a widget handles it


class KeybindingRegistry:
    """Registry of the keys rmview reacts to."""

    def __init__(self):
        self.keybindings: Dict[str, Keybinding] = {}
        self._initialize_default_bindings()

    def _initialize_default_bindings(self):
        """Initialize default keybindings."""
        self.register("tab", "Tab", "toggle search bar focus", action="toggle_focus")
        # Handled by EntryList.action_select_cursor
        self.register("enter", "Enter", "delete", KeyContext.LIST)
        self.register("ctrl+c", "Ctrl + C", "exit", action="quit")

    def register(self, key: str, label: str, description: str,
                 context: KeyContext = KeyContext.GLOBAL,
                 action: Optional[str] = None) -> None:
        """Register a keybinding."""
        self.keybindings[f"{context.value}:{key}"] = Keybinding(
            key=key,
            label=label,
            description=description,
            context=context,
            action=action
        )

    def get_bindings_for_context(self, context: KeyContext) -> List[Keybinding]:
        """Get keybindings active in a specific context."""
        result = []
        for binding in self.keybindings.values():
            if binding.context == context or binding.context == KeyContext.GLOBAL:
                result.append(binding)
        return result

    def app_bindings(self) -> List[Binding]:
        """Textual bindings for the global keys that run app actions.

        Priority bindings, so they fire whichever widget has focus.
        """
        return [
            Binding(binding.key, binding.action, binding.description,
                    priority=True, show=False)
            for binding in self.get_bindings_for_context(KeyContext.GLOBAL)
            if binding.action
        ]

    def format_hints(self) -> str:
        """Format the one-line hint text."""
        return "\t\t".join(
            f"{binding.label} = {binding.description}"
            for binding in self.keybindings.values()
        )


# Global registry instance
registry = KeybindingRegistry()
