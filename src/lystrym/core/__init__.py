"""Shared enums, type aliases and settings."""

from lystrym.core.enums import Tag, ListenerErrorPolicy
from lystrym.core.config import Settings, settings

__all__ = [
    "Tag",
    "ListenerErrorPolicy",
    "Settings",
    "settings",
]
