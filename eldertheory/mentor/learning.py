"""Mentor learning: convergence checks, loss and parameter optimisation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import MutableMapping, Sequence


@dataclass
class ConvergenceAnalyzer:
    """Decides convergence from the relative change of the last two losses."""

    loss_history: list[float] = field(default_factory=list)
    threshold: float = 0.0

    def check_convergence(self) -> bool:
        if len(self.loss_history) < 2:
            return False
        previous, recent = self.loss_history[-2], self.loss_history[-1]
        change = previous - recent
        if previous == 0:
            if change == 0:
                return False
            relative = math.copysign(math.inf, change) * math.copysign(1.0, previous)
        else:
            relative = change / previous
        return relative < self.threshold


@dataclass
class MentorLossFunction:
    """Mean squared error loss."""

    loss_type: str = ""
    parameters: dict[str, float] = field(default_factory=dict)

    def calculate_loss(self, predicted: Sequence[float], actual: Sequence[float]) -> float:
        if len(actual) < len(predicted):
            raise ValueError("fewer actual values than predictions")
        if not predicted:
            return math.nan
        return sum((p - a) ** 2 for p, a in zip(predicted, actual)) / len(predicted)


@dataclass
class MentorOptimizer:
    """Plain gradient descent over named parameters."""

    learning_rate: float = 0.0
    momentum: float = 0.0
    gradients: dict[str, float] = field(default_factory=dict)

    def update_parameters(
        self, parameters: MutableMapping[str, float], gradients: MutableMapping[str, float]
    ) -> None:
        """Step each parameter that has a gradient, in place."""
        for name, value in list(parameters.items()):
            if name in gradients:
                parameters[name] = value - self.learning_rate * gradients[name]