"""Controllers that manage an Elder's capacity, stability, parameters and resonance."""

from __future__ import annotations

from dataclasses import dataclass, field

from eldertheory.elder.entities import Elder, ParameterSpace


@dataclass
class InformationCapacityController:
    """Allocates information capacity to named channels."""

    max_capacity: float
    elder: Elder | None = None
    used_capacity: float = 0.0
    channels: dict[str, float] = field(default_factory=dict)

    def allocate_capacity(self, channel_id: str, capacity: float) -> bool:
        """Allocate capacity to a channel; return False if it would exceed the maximum."""
        if self.used_capacity + capacity > self.max_capacity:
            return False
        self.channels[channel_id] = capacity
        self.used_capacity += capacity
        return True


@dataclass
class OrbitalStabilityController:
    """Monitors and adjusts the stability of an Elder's fields."""

    elder: Elder
    stability_metrics: dict[str, float] = field(default_factory=dict)

    def calculate_system_stability(self) -> float:
        """Mean stability of all fields, or 0.0 when there are none."""
        fields = self.elder.gravitational_fields
        if not fields:
            return 0.0
        return sum(f.stability for f in fields) / len(fields)

    def monitor_orbital_dynamics(self) -> None:
        stability = self.calculate_system_stability()
        self.stability_metrics["system_stability"] = stability
        if stability < 0.5:
            self._adjust_stability()

    def _adjust_stability(self) -> None:
        for f in self.elder.gravitational_fields:
            f.stability = min(1.0, f.stability * 1.1)


class ParameterSpaceManager:
    """Owns a parameter space and per-parameter boundaries."""

    def __init__(self, dimensions: int) -> None:
        self.space = ParameterSpace(dimensions=dimensions)
        self.boundaries: dict[str, tuple[float, float]] = {}

    def set_parameter(self, name: str, value: float) -> None:
        self.space.parameters[name] = value


@dataclass
class ResonanceController:
    """Holds resonance frequency, amplitude and per-field modulation."""

    elder: Elder | None = None
    resonance_fields: dict[str, float] = field(default_factory=dict)
    frequency: float = 0.0
    amplitude: float = 0.0

    def initialize_resonance(self, frequency: float, amplitude: float) -> None:
        self.frequency = frequency
        self.amplitude = amplitude
        self.resonance_fields = {}

    def modulate_resonance(self, field_id: str, modulation: float) -> None:
        self.resonance_fields[field_id] = modulation