"""
TUI (Terminal User Interface) for rmview.

Textual display surface driven by the interaction controller.

Created: 2026-10-19
"""

__all__ = ["app", "keybindings"]
