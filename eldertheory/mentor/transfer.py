"""Cross-domain knowledge transfer: mappings, isomorphisms and universal principles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

_TRANSFER_EFFICIENCY = 0.8
_UNIVERSAL_THRESHOLD = 0.8


@dataclass
class MappingRule:
    """How a concept maps from one domain to another."""

    source_concept: str
    target_concept: str
    confidence: float
    bidirectional: bool


@dataclass
class DomainMappingProtocol:
    """Mapping rules between concepts of different domains."""

    mapping_rules: dict[str, MappingRule] = field(default_factory=dict)
    domains: list[str] = field(default_factory=list)

    def create_domain_mapping(
        self, source: str, target: str, confidence: float, bidirectional: bool
    ) -> None:
        """Add a rule; a bidirectional rule also adds its reverse."""
        self.mapping_rules[source] = MappingRule(source, target, confidence, bidirectional)
        if bidirectional:
            self.mapping_rules[target] = MappingRule(target, source, confidence, True)

    def get_mapping(self, concept: str) -> MappingRule | None:
        return self.mapping_rules.get(concept)


@dataclass
class IsomorphismDetector:
    """Compares two structures and records isomorphic mappings."""

    source_structure: dict[str, Any] = field(default_factory=dict)
    target_structure: dict[str, Any] = field(default_factory=dict)
    mappings: dict[str, str] = field(default_factory=dict)

    def detect_isomorphism(self) -> bool:
        """Structures are taken to be isomorphic when they have equally many elements."""
        return len(self.source_structure) == len(self.target_structure)

    def create_isomorphic_mapping(self, source: str, target: str) -> None:
        self.mappings[source] = target


@dataclass
class KnowledgeTransferEngine:
    """Transfers feature values from a source domain to a target domain."""

    source_domain: str
    target_domain: str
    transfer_matrix: list[list[float]] = field(default_factory=list)
    mappings: dict[str, str] = field(default_factory=dict)

    def transfer_knowledge(self, source_features: Mapping[str, float]) -> dict[str, float]:
        """Map each known feature to its target, scaled by the transfer efficiency."""
        return {
            self.mappings[key]: value * _TRANSFER_EFFICIENCY
            for key, value in source_features.items()
            if key in self.mappings
        }

    def create_mapping(self, source_key: str, target_key: str) -> None:
        self.mappings[source_key] = target_key


@dataclass
class UniversalPrincipleExtractor:
    """Selects principles strong enough to hold across domains."""

    domains: list[str] = field(default_factory=list)
    principles: dict[str, float] = field(default_factory=dict)

    def extract_universal_principles(self) -> dict[str, float]:
        return {
            name: strength
            for name, strength in self.principles.items()
            if strength > _UNIVERSAL_THRESHOLD
        }