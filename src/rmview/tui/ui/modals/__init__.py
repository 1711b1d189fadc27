"""Modal dialogs for rmview.

Created: 2026-10-19
"""

from .dialogs import InfoModal, ConfirmDeleteModal

__all__ = ["InfoModal", "ConfirmDeleteModal"]
