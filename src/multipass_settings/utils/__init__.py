"""Common utility functions and helpers for the multipass_settings package."""

from multipass_settings.utils.file import atomic_write_text, ensure_directory_exists
from multipass_settings.utils.keys import KeySequence

__all__ = [
    "KeySequence",
    "atomic_write_text",
    "ensure_directory_exists",
]
