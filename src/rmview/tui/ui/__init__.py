"""
UI components for rmview TUI.

Created: 2026-10-19
"""

__all__ = [
    "entry_list",
    "status_bar",
    "modals",
]
