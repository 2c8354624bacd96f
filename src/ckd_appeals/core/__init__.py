"""Framework layer: settings and startup validation."""

from __future__ import annotations

from ckd_appeals.core.config import AppSettings
from ckd_appeals.core.startup_checks import validate_settings

__all__ = ["AppSettings", "validate_settings"]
