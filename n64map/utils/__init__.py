"""Utility helpers for the N64 memory map tools."""

from .debug import debug_enabled, debug_log, reset_debug_categories

__all__ = [
    "debug_enabled",
    "debug_log",
    "reset_debug_categories",
]
