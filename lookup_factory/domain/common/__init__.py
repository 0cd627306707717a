"""
Domain common module.

Contains base classes for domain modeling:
- Entity: Objects with identity and lifecycle
- EntityId: Strongly-typed integer identifiers
"""

from .entity import Entity, EntityId

__all__ = [
    "Entity",
    "EntityId",
]
