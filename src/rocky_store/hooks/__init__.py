"""Logging setup."""

from __future__ import annotations

from rocky_store.hooks.logging_config import attach_debug_log, setup_logging

__all__ = ["attach_debug_log", "setup_logging"]
