"""Concrete collision shapes."""

from pixelhitbox.shapes.colliders import OUTLINE_MARGIN, CircleCollider, ColliderList, Hitbox

__all__ = ["OUTLINE_MARGIN", "CircleCollider", "ColliderList", "Hitbox"]
