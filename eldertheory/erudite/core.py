"""Erudite entities, learning, resonance response and specialization."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class EruditeEntity:
    """A task-level entity with a performance score."""

    id: str
    task_type: str
    specialization: str
    performance: float = 0.0
    learning_rate: float = 0.01

    def update_performance(self, delta: float) -> None:
        self.performance += delta * self.learning_rate


def _mean(values: Sequence[float]) -> float:
    if not values:
        return math.nan
    return sum(values) / len(values)


@dataclass
class EruditeLearningAlgorithm:
    """A mean-predictor learning algorithm scored by squared error."""

    algorithm_type: str = ""
    parameters: dict[str, float] = field(default_factory=dict)
    convergence: float = 0.0

    def train(self, data: Sequence[Sequence[float]], labels: Sequence[float]) -> float:
        """Return the mean squared error of predicting each row by its mean."""
        if len(labels) < len(data):
            raise ValueError("fewer labels than data rows")
        if not data:
            return math.nan
        losses = [(_mean(row) - label) ** 2 for row, label in zip(data, labels)]
        return sum(losses) / len(data)


@dataclass
class ResonanceResponseMechanism:
    """Responds to frequencies inside a closed range."""

    frequency_range: tuple[float, float] = (0.0, 0.0)
    sensitivity: float = 0.0
    response: dict[float, float] = field(default_factory=dict)

    def respond_to_resonance(self, frequency: float) -> float:
        low, high = self.frequency_range
        if low <= frequency <= high:
            return self.sensitivity * frequency
        return 0.0

    def calibrate_response(self, frequency: float, expected_response: float) -> None:
        self.response[frequency] = expected_response


@dataclass
class SpecializationManager:
    """Tracks expertise per specialization area."""

    domain: str = ""
    specializations: dict[str, float] = field(default_factory=dict)
    expertise: float = 0.0

    def develop_specialization(self, area: str, intensity: float) -> None:
        self.specializations[area] = intensity

    def get_expertise_level(self, area: str) -> float:
        return self.specializations.get(area, 0.0)