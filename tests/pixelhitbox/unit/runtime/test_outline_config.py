from __future__ import annotations

import pytest

from pixelhitbox.runtime.config import OutlineConfig, load_outline_config, resolve_log_level_name


def test_defaults_enable_outlines_without_debug_tracing(monkeypatch) -> None:
    for name in ("PIXELHITBOX_ENABLED", "PIXELHITBOX_DEBUG_HITBOXES", "PIXELHITBOX_LOG_LEVEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    cfg = load_outline_config()
    assert cfg == OutlineConfig(enabled=True, debug_hitboxes=False, log_level="INFO")
    assert cfg.traces_colliders is False


def test_load_outline_config_parses_flags(monkeypatch) -> None:
    monkeypatch.setenv("PIXELHITBOX_ENABLED", "off")
    monkeypatch.setenv("PIXELHITBOX_DEBUG_HITBOXES", "yes")
    monkeypatch.setenv("PIXELHITBOX_LOG_LEVEL", "debug")
    cfg = load_outline_config()
    assert cfg.enabled is False
    assert cfg.debug_hitboxes is True
    assert cfg.log_level == "DEBUG"
    assert cfg.traces_colliders is False


def test_load_outline_config_from_explicit_mapping() -> None:
    cfg = load_outline_config({"PIXELHITBOX_DEBUG_HITBOXES": "1", "LOG_LEVEL": "warning"})
    assert cfg.enabled is True
    assert cfg.traces_colliders is True
    assert cfg.log_level == "WARNING"


def test_unrecognised_flag_values_keep_defaults() -> None:
    cfg = load_outline_config({"PIXELHITBOX_ENABLED": "maybe", "PIXELHITBOX_DEBUG_HITBOXES": ""})
    assert cfg.enabled is True
    assert cfg.debug_hitboxes is False


def test_resolve_log_level_prefers_package_prefix() -> None:
    env = {"LOG_LEVEL": "WARNING", "PIXELHITBOX_LOG_LEVEL": "error"}
    assert resolve_log_level_name(env=env) == "ERROR"
    assert resolve_log_level_name(default="critical", env={}) == "CRITICAL"


def test_with_overrides_returns_new_snapshot() -> None:
    base = OutlineConfig()
    debug = base.with_overrides(debug_hitboxes=True)
    assert debug.traces_colliders is True
    assert base.debug_hitboxes is False
    with pytest.raises(AttributeError):
        base.enabled = False  # type: ignore[misc]
