"""Textual UI for lunacy."""

from .app import LunacyApp

__all__ = ["LunacyApp"]
