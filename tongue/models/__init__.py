"""Data models for tongue"""

from .entry import Entry

__all__ = ["Entry"]
