"""Coordination of the heliosystem: hierarchy control, flow, phases and resonance."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HierarchyController:
    """Registers entities by level and keeps them active."""

    levels: dict[int, list[str]] = field(default_factory=dict)
    control_matrix: list[list[float]] = field(default_factory=list)
    active_entities: dict[str, bool] = field(default_factory=dict)

    def register_entity(self, level: int, entity_id: str) -> None:
        self.levels.setdefault(level, []).append(entity_id)
        self.active_entities[entity_id] = True

    def control_hierarchy(self) -> None:
        """Mark every registered entity on every level as active."""
        for entities in self.levels.values():
            for entity in entities:
                self.active_entities[entity] = True


@dataclass
class FlowChannel:
    """A directed information channel."""

    source: str
    target: str
    bandwidth: float
    active: bool = True


@dataclass
class InformationFlowManager:
    """Tracks channels and the flow rate through each active one."""

    capacity: float
    channels: dict[str, FlowChannel] = field(default_factory=dict)
    flow_rates: dict[str, float] = field(default_factory=dict)

    def create_channel(self, channel_id: str, source: str, target: str, bandwidth: float) -> None:
        self.channels[channel_id] = FlowChannel(source, target, bandwidth)

    def manage_flow(self) -> None:
        """Set each active channel's flow rate to 80% of its bandwidth."""
        for channel_id, channel in self.channels.items():
            if channel.active:
                self.flow_rates[channel_id] = channel.bandwidth * 0.8


@dataclass
class PhaseSynchronizer:
    """Pulls entity phases towards their common mean."""

    sync_threshold: float
    phases: dict[str, float] = field(default_factory=dict)
    frequency_range: tuple[float, float] = (0.1, 10.0)

    def register_phase(self, entity_id: str, phase: float) -> None:
        self.phases[entity_id] = phase

    def synchronize_phases(self) -> bool:
        """Return True if all phases lie within the threshold of the mean.

        Phases outside the threshold are moved to a tenth of their distance
        from the mean, and False is returned.
        """
        if len(self.phases) < 2:
            return True
        average = sum(self.phases.values()) / len(self.phases)
        synchronized = True
        for entity_id, phase in list(self.phases.items()):
            if abs(phase - average) > self.sync_threshold:
                synchronized = False
                self.phases[entity_id] = average + (phase - average) * 0.1
        return synchronized


@dataclass
class Resonator:
    """An oscillating entity."""

    id: str
    frequency: float
    amplitude: float
    phase: float


@dataclass
class ResonanceCoupler:
    """Couples resonators by how close their frequencies are."""

    coupling_strength: float
    resonators: dict[str, Resonator] = field(default_factory=dict)
    coupling_matrix: list[list[float]] = field(default_factory=list)

    def add_resonator(self, resonator_id: str, freq: float, amp: float, phase: float) -> None:
        self.resonators[resonator_id] = Resonator(resonator_id, freq, amp, phase)

    def couple_resonators(self) -> dict[tuple[str, str], float]:
        """Return the coupling for every ordered pair of distinct resonators."""
        return {
            (id1, id2): self._coupling(res1, res2)
            for id1, res1 in self.resonators.items()
            for id2, res2 in self.resonators.items()
            if id1 != id2
        }

    def _coupling(self, res1: Resonator, res2: Resonator) -> float:
        return self.coupling_strength / (1.0 + abs(res1.frequency - res2.frequency))