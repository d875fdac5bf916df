"""Loss functions, PAC learning bounds and sample complexity for erudites."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass
class EruditeLossFunction:
    """Task loss with optional L2 regularization."""

    loss_type: str = ""
    regularization: float = 0.0
    weight_decay: float = 0.0

    def calculate_task_loss(self, predicted: Sequence[float], actual: Sequence[float]) -> float:
        """Mean squared error over the predicted values."""
        if len(actual) < len(predicted):
            raise ValueError("fewer actual values than predictions")
        if not predicted:
            return math.nan
        return sum((p - a) ** 2 for p, a in zip(predicted, actual)) / len(predicted)

    def calculate_regularized_loss(self, base_loss: float, weights: Sequence[float]) -> float:
        return base_loss + self.regularization * sum(w * w for w in weights)


@dataclass
class PACLearningBounds:
    """PAC learning bounds from a VC dimension and a sample size."""

    confidence: float = 0.0
    accuracy: float = 0.0
    vc_dimension: int = 0
    sample_size: int = 0

    def calculate_sample_complexity(self) -> int:
        """Number of samples needed for the configured accuracy and confidence."""
        epsilon = 1.0 - self.accuracy
        delta = 1.0 - self.confidence
        vc = float(self.vc_dimension)
        vc_term = vc * math.log(2.0 * math.e * self.sample_size / vc)
        delta_log = math.log(1.0 / delta)
        return math.ceil((vc_term + delta_log) / epsilon)

    def validate_pac_bounds(self, empirical_error: float) -> bool:
        return empirical_error <= self._generalization_bound()

    def _generalization_bound(self) -> float:
        vc_term = self.vc_dimension / self.sample_size
        log_term = 2.0 - self.confidence
        if log_term <= 0:
            return math.nan
        product = vc_term * math.log(log_term)
        if product < 0:
            return math.nan
        return math.sqrt(product)


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


@dataclass
class SampleComplexityAnalyzer:
    """Estimates sample needs and convergence rates."""

    task_complexity: int = 0
    data_dimension: int = 0
    noise_level: float = 0.0
    target_accuracy: float = 1.0

    def estimate_required_samples(self) -> int:
        complexity = float(self.task_complexity * self.data_dimension)
        return math.ceil(complexity * (1.0 + self.noise_level) / self.target_accuracy)

    def analyze_convergence_rate(self, sample_size: int) -> float:
        """Convergence rate 1/sqrt(n); infinite for zero samples."""
        if sample_size == 0:
            return math.inf
        return 1.0 / math.sqrt(sample_size)

    def optimize_sample_allocation(self, total_samples: int, num_tasks: int) -> list[int]:
        """Split samples evenly, giving the remainder to the first tasks."""
        if num_tasks < 0:
            raise ValueError("number of tasks must not be negative")
        per_task, remaining = _trunc_divmod(total_samples, num_tasks)
        extra = max(remaining, 0)
        return [per_task + (1 if i < extra else 0) for i in range(num_tasks)]