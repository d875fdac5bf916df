"""Mentor entities, domain knowledge, erudite orchestration and orbital mechanics."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from eldertheory.elder.entities import Vector3D


class MentorStatus(IntEnum):
    """Operational status of a mentor."""

    IDLE = 0
    ACTIVE = 1
    LEARNING = 2
    TRANSFERRING = 3


@dataclass
class EruditeEntity:
    """An erudite managed by a mentor."""

    id: str
    task_type: str
    specialization: str
    performance: float = 0.0


@dataclass
class DomainKnowledge:
    """Concepts, their relationships and principles of one domain."""

    domain: str
    concepts: dict[str, Any] = field(default_factory=dict)
    relationships: dict[str, list[str]] = field(default_factory=dict)
    principles: list[str] = field(default_factory=list)


@dataclass
class OrbitalMechanics:
    """Orbital state of a mentor."""

    position: Vector3D = field(default_factory=Vector3D)
    velocity: Vector3D = field(default_factory=Vector3D)
    acceleration: Vector3D = field(default_factory=Vector3D)
    mass: float = 0.0
    radius: float = 0.0

    def update_position(self, delta_time: float) -> None:
        self.position.x += self.velocity.x * delta_time
        self.position.y += self.velocity.y * delta_time
        self.position.z += self.velocity.z * delta_time

    def update_velocity(self, delta_time: float) -> None:
        self.velocity.x += self.acceleration.x * delta_time
        self.velocity.y += self.acceleration.y * delta_time
        self.velocity.z += self.acceleration.z * delta_time

    def calculate_orbital_energy(self) -> float:
        """Kinetic energy of the orbit."""
        speed = self.velocity.magnitude
        return 0.5 * self.mass * speed * speed


@dataclass
class MentorEntity:
    """A mentor-level entity of the hierarchy."""

    id: str
    domain: str
    knowledge_base: DomainKnowledge | None = None
    erudite_entities: list[EruditeEntity] = field(default_factory=list)
    orbital_params: OrbitalMechanics | None = None
    status: MentorStatus = MentorStatus.IDLE

    def __post_init__(self) -> None:
        if self.knowledge_base is None:
            self.knowledge_base = DomainKnowledge(domain=self.domain)


@dataclass
class DomainKnowledgeManager:
    """Operates on a mentor's domain knowledge."""

    knowledge: DomainKnowledge

    def add_concept(self, name: str, concept: Any) -> None:
        self.knowledge.concepts[name] = concept

    def link_concepts(self, concept1: str, concept2: str) -> None:
        """Record a one-way relationship from concept1 to concept2."""
        self.knowledge.relationships.setdefault(concept1, []).append(concept2)

    def related_concepts(self, concept: str) -> list[str]:
        return list(self.knowledge.relationships.get(concept, []))

    def add_principle(self, principle: str) -> None:
        self.knowledge.principles.append(principle)


@dataclass
class EruditeOrchestrator:
    """Manages the erudites of a mentor."""

    mentor: MentorEntity
    erudites: dict[str, EruditeEntity] = field(default_factory=dict)

    def add_erudite(self, erudite_id: str, task_type: str, specialization: str) -> EruditeEntity:
        erudite = EruditeEntity(erudite_id, task_type, specialization)
        self.erudites[erudite_id] = erudite
        self.mentor.erudite_entities.append(erudite)
        return erudite

    def orchestrate_tasks(self) -> None:
        """Give every erudite a small performance improvement."""
        for erudite in self.erudites.values():
            erudite.performance += 0.01