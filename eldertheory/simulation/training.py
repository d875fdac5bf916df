"""Training loop for Elder models and analysis of its convergence."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

_LOSS_TARGET = 0.001
_PREDICTION_TOLERANCE = 0.1


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def _variance(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    mean = _mean(values)
    return sum((value - mean) ** 2 for value in values) / len(values)


@dataclass
class ConvergenceReport:
    """A snapshot of training progress."""

    converged: bool
    current_loss: float
    current_accuracy: float
    loss_variance: float
    predicted_steps: int
    total_epochs: int


@dataclass
class ConvergenceAnalyzer:
    """Judges convergence from the variance of recent losses."""

    threshold: float
    window_size: int
    loss_history: list[float] = field(default_factory=list)
    accuracy_history: list[float] = field(default_factory=list)
    learning_curve: list[float] = field(default_factory=list)

    def record_metrics(self, loss: float, accuracy: float) -> None:
        self.loss_history.append(loss)
        self.accuracy_history.append(accuracy)
        self.learning_curve.append(loss)

    def _recent_losses(self, window: int) -> list[float]:
        return self.loss_history[len(self.loss_history) - window:]

    def check_convergence(self) -> bool:
        """Converged when the last window of losses varies less than the threshold."""
        if len(self.loss_history) < self.window_size:
            return False
        return _variance(self._recent_losses(self.window_size)) < self.threshold

    def predict_convergence_time(self) -> int:
        """Steps until the loss reaches zero at the latest rate, or -1 if it is not falling."""
        if len(self.loss_history) < 2:
            return -1
        gradient = self.loss_history[-1] - self.loss_history[-2]
        if gradient >= 0:
            return -1
        return math.ceil(self.loss_history[-1] / abs(gradient))

    def convergence_report(self) -> ConvergenceReport:
        window = min(self.window_size, len(self.loss_history))
        variance = _variance(self._recent_losses(window)) if window > 0 else 0.0
        return ConvergenceReport(
            converged=self.check_convergence(),
            current_loss=self.loss_history[-1] if self.loss_history else 0.0,
            current_accuracy=self.accuracy_history[-1] if self.accuracy_history else 0.0,
            loss_variance=variance,
            predicted_steps=self.predict_convergence_time(),
            total_epochs=len(self.loss_history),
        )


@dataclass
class TrainingSample:
    """An input with its target output."""

    input: list[float]
    target: list[float]
    weight: float = 1.0


@dataclass
class ElderModel:
    """Model parameters with the latest loss and accuracy."""

    parameters: dict[str, list[float]] = field(default_factory=dict)
    loss: float = 0.0
    accuracy: float = 0.0


def _squared_error(prediction: Sequence[float], target: Sequence[float]) -> float:
    if len(target) < len(prediction):
        raise ValueError("target is shorter than the prediction")
    if not prediction:
        return math.nan
    return sum((p - t) ** 2 for p, t in zip(prediction, target)) / len(prediction)


@dataclass
class ElderTrainingLoop:
    """Epoch-based mini-batch training of an Elder model."""

    max_epochs: int
    learning_rate: float
    batch_size: int
    current_epoch: int = 0
    training_data: list[TrainingSample] = field(default_factory=list)
    validation_data: list[TrainingSample] = field(default_factory=list)
    model: ElderModel = field(default_factory=ElderModel)

    def train(self) -> None:
        """Train until max_epochs, stopping early once the loss is small enough."""
        while self.current_epoch < self.max_epochs:
            self._train_epoch()
            self._validate_epoch()
            self.current_epoch += 1
            if self.model.loss < _LOSS_TARGET:
                break

    def _train_epoch(self) -> None:
        data = self.training_data
        if data and self.batch_size <= 0:
            raise ValueError("batch size must be positive")
        batch_losses = [
            self._train_batch(data[start:start + self.batch_size])
            for start in range(0, len(data), max(self.batch_size, 1))
        ]
        if not batch_losses:
            self.model.loss = math.nan
        else:
            self.model.loss = sum(batch_losses) / len(batch_losses)

    def _train_batch(self, batch: Sequence[TrainingSample]) -> float:
        losses = [_squared_error(self._forward(s.input), s.target) for s in batch]
        return sum(losses) / len(batch)

    @staticmethod
    def _forward(values: Sequence[float]) -> list[float]:
        return list(values)

    def _validate_epoch(self) -> None:
        total = len(self.validation_data)
        if total == 0:
            self.model.accuracy = math.nan
            return
        correct = sum(
            1
            for sample in self.validation_data
            if self._is_correct(self._forward(sample.input), sample.target)
        )
        self.model.accuracy = correct / total

    @staticmethod
    def _is_correct(prediction: Sequence[float], target: Sequence[float]) -> bool:
        if len(target) < len(prediction):
            raise ValueError("target is shorter than the prediction")
        limit = _PREDICTION_TOLERANCE * _PREDICTION_TOLERANCE
        return all((p - t) ** 2 <= limit for p, t in zip(prediction, target))