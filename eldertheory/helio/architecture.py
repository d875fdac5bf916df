"""Structural pieces of the heliosystem: level maps, isomorphism chains and closure."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass
class HierarchicalMapping:
    """Entities grouped by hierarchy level, plus free-form name mappings."""

    levels: dict[int, list[str]] = field(default_factory=dict)
    mappings: dict[str, str] = field(default_factory=dict)

    def map_levels(self, level: int, entities: Iterable[str]) -> None:
        """Set the entities of a level, replacing any previously mapped."""
        self.levels[level] = list(entities)


@dataclass
class Isomorphism:
    """A structure-preserving map from a source to a target."""

    source: str
    target: str
    mapping: dict[str, str] = field(default_factory=dict)


@dataclass
class IsomorphismChain:
    """An ordered chain of isomorphisms."""

    mappings: list[Isomorphism] = field(default_factory=list)
    chain_length: int = 0

    def add_isomorphism(self, source: str, target: str) -> None:
        self.mappings.append(Isomorphism(source=source, target=target))
        self.chain_length += 1


@dataclass
class SystemClosure:
    """Tracks which components are closed and the overall integrity."""

    closed_components: dict[str, bool] = field(default_factory=dict)
    system_integrity: float = 0.0

    def achieve_closure(self) -> bool:
        """Bring the system to full integrity."""
        self.system_integrity = 1.0
        return True


@dataclass
class UnifiedFramework:
    """Joins theoretical components with their computational counterparts."""

    theoretical_components: dict[str, Any] = field(default_factory=dict)
    computational_units: dict[str, Any] = field(default_factory=dict)
    integration_mappings: dict[str, str] = field(default_factory=dict)
    system_closure: bool = False

    def initialize_framework(self) -> None:
        """Reset the framework to an empty, open state."""
        self.theoretical_components = {}
        self.computational_units = {}
        self.integration_mappings = {}
        self.system_closure = False

    def register_component(self, name: str, component: Any) -> None:
        self.theoretical_components[name] = component

    def map_to_computational(self, theoretical: str, computational: str) -> None:
        self.integration_mappings[theoretical] = computational

    def achieve_system_closure(self) -> bool:
        """The system is closed when theory and computation have equally many parts."""
        self.system_closure = len(self.theoretical_components) == len(self.computational_units)
        return self.system_closure