"""Public contracts for pixel-exact outline rendering."""

from pixelhitbox.api.logging import LoggingConfig
from pixelhitbox.api.render import DrawTarget, FallbackRenderer
from pixelhitbox.api.shapes import CollisionShape

__all__ = [
    "CollisionShape",
    "DrawTarget",
    "FallbackRenderer",
    "LoggingConfig",
]
