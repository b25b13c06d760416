"""Rendering of results and user-facing messages."""

from .formatter import JsonRenderer, TextRenderer, get_renderer, humanize, to_canonical

__all__ = ["JsonRenderer", "TextRenderer", "get_renderer", "humanize", "to_canonical"]
