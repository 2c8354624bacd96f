"""Process-level hooks."""

from __future__ import annotations

from ckd_appeals.hooks.logging_config import setup_logging

__all__ = ["setup_logging"]
