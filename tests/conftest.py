"""Shared test fixtures for rmview tests.

Created: 2026-10-19
"""

import pytest
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from rmview.core.controller import InteractionController
from rmview.core.models import Entry, Focus
from rmview.core.styles import EntryStyle




class RecordingSurface:
    """Display surface that records every call the controller makes."""

    def __init__(self):
        self.lists: List[Tuple[List[Entry], Optional[int], List[EntryStyle]]] = []
        self.filter_texts: List[str] = []
        self.focus: List[Focus] = []
        self.info_dialogs: List[str] = []
        self.confirm_dialogs: List[Tuple[str, str, Callable[[], None]]] = []
        self.dismissed = 0

    def render_list(
        self,
        entries: Sequence[Entry],
        selected_index: Optional[int],
        styles: Sequence[EntryStyle],
    ) -> None:
        self.lists.append((list(entries), selected_index, list(styles)))

    def render_filter_box(self, text: str) -> None:
        self.filter_texts.append(text)

    def render_focus(self, focus: Focus) -> None:
        self.focus.append(focus)

    def show_info_dialog(self, message: str) -> None:
        self.info_dialogs.append(message)

    def show_confirm_dialog(
        self, message: str, action_label: str, on_confirm: Callable[[], None]
    ) -> None:
        self.confirm_dialogs.append((message, action_label, on_confirm))

    def dismiss_top_dialog(self) -> None:
        self.dismissed += 1

    @property
    def last_names(self) -> List[str]:
        return [entry.name for entry in self.lists[-1][0]]

    @property
    def last_selected(self) -> Optional[int]:
        return self.lists[-1][1]


@pytest.fixture
def surface():
    """Recording display surface."""
    return RecordingSurface()


@pytest.fixture
def workdir(tmp_path) -> Path:
    """Directory with a mix of files, directories and dotfiles.

    Beta is the only non-empty directory.
    """
    root = tmp_path / "work"
    root.mkdir()
    (root / ".git").mkdir()
    (root / "Beta").mkdir()
    (root / "Beta" / "inner.txt").write_text("inner")
    (root / "alpha").mkdir()
    (root / ".hidden").write_text("")
    (root / "B.txt").write_text("b")
    (root / "a.txt").write_text("a")
    (root / "zeta.log").write_text("z")
    return root


@pytest.fixture
def controller(surface, workdir):
    """Started controller over ``workdir``."""
    controller = InteractionController(surface, workdir)
    controller.start()
    return controller


@pytest.fixture
def workdir_order():
    """Display order of ``workdir``: self-entry, directories, files."""
    return [".", ".git", "Beta", "alpha", ".hidden", "B.txt", "a.txt", "zeta.log"]
