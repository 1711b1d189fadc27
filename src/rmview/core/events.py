"""
Input events consumed by the interaction controller.

Display surfaces translate their own widget events into these and hand
them to ``InteractionController.dispatch``.

Created: 2026-10-19
"""

from dataclasses import dataclass

from rmview.core.models import Focus


@dataclass(frozen=True)
class TextChanged:
    """The filter box text changed."""

    text: str


@dataclass(frozen=True)
class Submit:
    """Enter pressed in the list or in the filter box."""

    source: Focus


@dataclass(frozen=True)
class KeyPress:
    """A navigation key pressed while the list has focus."""

    key: str


@dataclass(frozen=True)
class GlobalKey:
    """A key handled regardless of focus."""

    key: str


@dataclass(frozen=True)
class Highlight:
    """The surface moved its own cursor (mouse, native widget keys)."""

    index: int
