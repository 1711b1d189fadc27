"""
rmview - interactive directory cleaner

Browse the current directory, narrow it with a prefix filter and
delete files or directories from a terminal UI.

Created: 2026-10-19
"""

__version__ = "0.1.0"
