"""Linter for the levels of entities in a parent-child hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Entity:
    """An entity placed at a level of the hierarchy."""

    id: str
    type: str = ""
    level: int = 0
    parent: str = ""
    children: list[str] = field(default_factory=list)


@dataclass
class Relationship:
    """A typed link between two entities."""

    source: str
    target: str
    type: str = ""


@dataclass
class ValidationRule:
    """A named check of an entity against others."""

    name: str
    description: str
    validator: Callable[[Entity, list[Entity]], bool]


@dataclass
class EntityRelationshipLinter:
    """Checks that every entity sits one level below its parent."""

    entities: dict[str, Entity] = field(default_factory=dict)
    relationships: dict[str, list[Relationship]] = field(default_factory=dict)
    rules: list[ValidationRule] = field(default_factory=list)

    def validate_hierarchy(self) -> list[str]:
        """Return one message for each entity at an invalid level."""
        return [
            f"Invalid hierarchy level for entity: {entity.id}"
            for entity in self.entities.values()
            if not self._level_is_valid(entity)
        ]

    def _level_is_valid(self, entity: Entity) -> bool:
        if not entity.parent:
            return entity.level == 0
        parent = self.entities.get(entity.parent)
        if parent is None:
            return False
        return entity.level == parent.level + 1