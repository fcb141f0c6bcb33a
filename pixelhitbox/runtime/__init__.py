"""Configuration and logging runtime for outline rendering."""

from pixelhitbox.runtime.config import OutlineConfig, load_outline_config, resolve_log_level_name
from pixelhitbox.runtime.logging import JsonFormatter, configure_logging, shutdown_logging

__all__ = [
    "JsonFormatter",
    "OutlineConfig",
    "configure_logging",
    "load_outline_config",
    "resolve_log_level_name",
    "shutdown_logging",
]
