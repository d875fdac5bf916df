"""Information-theoretic quantities of the heliosystem."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping

from eldertheory.elder.entities import Vector3D


def _divide(numerator: float, denominator: float) -> float:
    """Floating division that yields infinities or NaN instead of raising."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _log2(value: float) -> float:
    if value > 0:
        return math.log2(value)
    if value == 0:
        return -math.inf
    return math.nan


@dataclass
class CapacityChannel:
    """A communication channel with its capacity and usage."""

    id: str
    capacity: float
    utilization: float = 0.0
    error_rate: float = 0.0
    throughput: float = 0.0


@dataclass
class ChannelCapacity:
    """Shannon-capacity channels sharing one bandwidth, signal and noise level."""

    bandwidth: float
    signal_power: float
    noise_level: float
    channels: dict[str, CapacityChannel] = field(default_factory=dict)

    def _snr(self) -> float:
        return _divide(self.signal_power, self.noise_level)

    def calculate_shannon_capacity(self) -> float:
        """Bandwidth times log2(1 + SNR)."""
        return self.bandwidth * _log2(1.0 + self._snr())

    def create_channel(self, channel_id: str) -> None:
        self.channels[channel_id] = CapacityChannel(
            id=channel_id,
            capacity=self.calculate_shannon_capacity(),
            error_rate=_divide(1.0, 1.0 + self._snr()),
        )

    def update_utilization(self, channel_id: str, utilization: float) -> None:
        """Set a channel's utilization (capped at 1) and recompute its throughput."""
        channel = self.channels.get(channel_id)
        if channel is None:
            return
        channel.utilization = min(1.0, utilization)
        channel.throughput = channel.capacity * channel.utilization * (1.0 - channel.error_rate)

    def total_throughput(self) -> float:
        return sum(channel.throughput for channel in self.channels.values())

    def optimize_channels(self) -> None:
        """Grow the capacity of heavily used channels by 10%."""
        for channel in self.channels.values():
            if channel.utilization > 0.8:
                channel.capacity *= 1.1


@dataclass
class EntropyDistribution:
    """Entropy per hierarchy level and its proportional distribution."""

    hierarchy_levels: dict[int, float] = field(default_factory=dict)
    total_entropy: float = 0.0
    distribution: dict[str, float] = field(default_factory=dict)
    flow_rates: dict[str, float] = field(default_factory=dict)

    def set_level_entropy(self, level: int, entropy: float) -> None:
        self.hierarchy_levels[level] = entropy
        self.total_entropy = sum(self.hierarchy_levels.values())

    def distribute_entropy(self) -> None:
        """Record each level's share of the total entropy under 'level_<n>'."""
        if self.total_entropy == 0:
            return
        for level, entropy in self.hierarchy_levels.items():
            self.distribution[f"level_{level}"] = entropy / self.total_entropy

    def calculate_information_content(self, level: int) -> float:
        """Negative log2 of a level's entropy; 0.0 for an unknown level."""
        entropy = self.hierarchy_levels.get(level)
        if entropy is None:
            return 0.0
        return -_log2(entropy + 1e-10)


@dataclass
class EntropyDynamics:
    """Entropy relaxing towards a maximum over time."""

    max_entropy: float
    evolution_rate: float
    current_entropy: float = 0.0
    entropy_history: list[float] = field(default_factory=list)

    def evolve_entropy(self, delta_time: float) -> None:
        delta = self.evolution_rate * delta_time * (self.max_entropy - self.current_entropy)
        self.current_entropy = min(self.current_entropy + delta, self.max_entropy)
        self.entropy_history.append(self.current_entropy)

    def calculate_entropy_production(self) -> float:
        """Change in entropy over the last step."""
        if len(self.entropy_history) < 2:
            return 0.0
        return self.entropy_history[-1] - self.entropy_history[-2]

    def entropy_gradient(self) -> float:
        """Average change per step over the last two steps."""
        if len(self.entropy_history) < 3:
            return 0.0
        return (self.entropy_history[-1] - self.entropy_history[-3]) / 2.0

    def calculate_system_order(self) -> float:
        if self.max_entropy == 0:
            return 1.0
        return 1.0 - self.current_entropy / self.max_entropy


@dataclass
class InformationGradient:
    """Gradients of information, their flows and divergences."""

    gradient_field: dict[str, Vector3D] = field(default_factory=dict)
    flow_vectors: dict[str, Vector3D] = field(default_factory=dict)
    magnitude: dict[str, float] = field(default_factory=dict)

    def compute_gradient(self, gradient_id: str, information: Mapping[str, float]) -> None:
        gradient = self._gradient(information)
        self.gradient_field[gradient_id] = gradient
        self.magnitude[gradient_id] = gradient.magnitude

    @staticmethod
    def _gradient(information: Mapping[str, float]) -> Vector3D:
        gradient = Vector3D()
        count = 0
        for count, value in enumerate(information.values(), start=1):
            angle = float(count - 1)
            gradient.x += value * math.cos(angle)
            gradient.y += value * math.sin(angle)
            gradient.z += value * 0.1
        if count:
            gradient.x /= count
            gradient.y /= count
            gradient.z /= count
        return gradient

    def compute_flow(self, gradient_id: str) -> None:
        """Information flows against its gradient."""
        gradient = self.gradient_field.get(gradient_id)
        if gradient is not None:
            self.flow_vectors[gradient_id] = Vector3D(-gradient.x, -gradient.y, -gradient.z)

    def divergence(self, gradient_id: str) -> float:
        flow = self.flow_vectors.get(gradient_id)
        if flow is None:
            return 0.0
        return flow.x + flow.y + flow.z