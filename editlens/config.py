# editlens/config.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from .errors import ConfigError

__all__ = ["PreviewConfig"]


@dataclass
class PreviewConfig:
    """Host-level options for previewing proposals and navigating their hunks."""

    # Suppress the best-effort block shown when the old text cannot be located.
    strict: bool = False
    # Try whitespace-insensitive line matching after the exact and substring tiers.
    loose_match: bool = False
    center_on_navigate: bool = True
    # Hunks taller than this fraction of the window are scrolled to the top.
    viewport_threshold: float = 0.5

    def __post_init__(self) -> None:
        for name in ("strict", "loose_match", "center_on_navigate"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a bool, got {getattr(self, name)!r}")
        threshold = self.viewport_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ConfigError(f"viewport_threshold must be a number, got {threshold!r}")
        if not 0 < threshold <= 1:
            raise ConfigError("viewport_threshold must be in (0, 1]")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "PreviewConfig":
        """Build a config from plain options, rejecting keys it does not know."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigError(f"Unknown preview option(s): {', '.join(unknown)}")
        return cls(**dict(options))
