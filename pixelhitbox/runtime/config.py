"""Outline feature toggles sourced from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


@dataclass(frozen=True, slots=True)
class OutlineConfig:
    """Immutable per-frame snapshot of the outline toggles."""

    enabled: bool = True
    debug_hitboxes: bool = False
    log_level: str = "INFO"

    @property
    def traces_colliders(self) -> bool:
        return self.enabled and self.debug_hitboxes

    def with_overrides(self, **changes: object) -> OutlineConfig:
        return replace(self, **changes)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with the package-prefixed override."""
    value = _raw("PIXELHITBOX_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_outline_config(env: Mapping[str, str] | None = None) -> OutlineConfig:
    """Load the outline toggles from env vars (or an explicit mapping)."""
    return OutlineConfig(
        enabled=_flag("PIXELHITBOX_ENABLED", True, env=env),
        debug_hitboxes=_flag("PIXELHITBOX_DEBUG_HITBOXES", False, env=env),
        log_level=resolve_log_level_name(env=env),
    )
