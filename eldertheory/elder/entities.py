"""Elder entity data model, field generation, principles and mentor coordination."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Vector3D:
    """A vector in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


@dataclass
class MentorEntity:
    """Reference to a mentor entity held by an Elder."""

    id: str
    domain: str
    status: str = ""


@dataclass(frozen=True)
class Principle:
    """A universal knowledge principle."""

    name: str
    description: str
    mathematical: str


@dataclass
class GravitationalField:
    """A gravitational field produced by an Elder."""

    strength: float
    direction: Vector3D
    range: float
    stability: float


@dataclass
class ParameterSpace:
    """The unified parameter space of an Elder."""

    dimensions: int = 0
    parameters: dict[str, float] = field(default_factory=dict)


@dataclass
class Elder:
    """The highest-level entity of the hierarchy."""

    id: str
    universal_principles: list[Principle] = field(default_factory=list)
    gravitational_fields: list[GravitationalField] = field(default_factory=list)
    mentor_entities: list[MentorEntity] = field(default_factory=list)
    system_parameters: ParameterSpace = field(default_factory=ParameterSpace)
    information_capacity: float = 0.0


@dataclass
class GravitationalGenerator:
    """Generates gravitational fields for an Elder."""

    elder: Elder | None = None

    def generate_field(self, strength: float, direction: Vector3D) -> GravitationalField:
        """Create a field whose range and stability derive from its strength and direction."""
        return GravitationalField(
            strength=strength,
            direction=direction,
            range=self._range(strength),
            stability=strength / (1.0 + direction.magnitude),
        )

    @staticmethod
    def _range(strength: float) -> float:
        if strength < 0:
            return math.nan
        return math.sqrt(strength) * 10.0


@dataclass
class UniversalPrincipleManager:
    """Keeps a list of universal principles."""

    principles: list[Principle] = field(default_factory=list)

    def add_principle(self, name: str, description: str, mathematical: str) -> None:
        self.principles.append(Principle(name, description, mathematical))

    def get_principle(self, name: str) -> Principle | None:
        """Return the first principle with this name, or None."""
        return next((p for p in self.principles if p.name == name), None)

    def validate_principle(self, principle: Principle) -> bool:
        """A principle is valid when it has both a formula and a description."""
        return bool(principle.mathematical) and bool(principle.description)


@dataclass
class MentorCoordinator:
    """Coordinates the mentors under an Elder."""

    elder: Elder | None = None
    mentors: list[MentorEntity] = field(default_factory=list)

    def add_mentor(self, mentor_id: str, domain: str) -> MentorEntity:
        mentor = MentorEntity(id=mentor_id, domain=domain, status="active")
        self.mentors.append(mentor)
        return mentor

    def coordinate_mentors(self) -> None:
        for mentor in self.mentors:
            mentor.status = "coordinated"