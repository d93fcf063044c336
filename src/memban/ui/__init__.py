"""Textual UI for memban."""

from memban.ui.app import MembanApp

__all__ = ["MembanApp"]
