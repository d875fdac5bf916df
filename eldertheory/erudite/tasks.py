"""Task-specific erudites for audio, language and vision."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Sequence

_RECOGNIZED_TEXT = "recognized_text"


def _check_signal(signal: Sequence[float]) -> None:
    """Raise TypeError unless every sample is a real number."""
    for sample in signal:
        if not isinstance(sample, Real):
            raise TypeError(f"audio sample must be a real number, not {type(sample).__name__}")


@dataclass
class AudioEventDetectionErudite:
    """Detects high-energy events in an audio signal."""

    id: str = ""
    event_types: list[str] = field(default_factory=list)
    threshold: float = 0.0

    def detect_events(self, audio_signal: Sequence[float]) -> list[str]:
        energy = self._energy(audio_signal)
        return ["high_energy_event"] if energy > self.threshold else []

    @staticmethod
    def _energy(signal: Sequence[float]) -> float:
        if not signal:
            return math.nan
        return sum(sample * sample for sample in signal) / len(signal)


@dataclass
class MusicAnalysisErudite:
    """Analyses music for tempo, key and genre."""

    id: str = ""
    genres: list[str] = field(default_factory=list)
    tempo: float = 0.0
    key: str = ""
    confidence: float = 0.0

    def analyze_music(self, audio_signal: Sequence[float]) -> dict[str, Any]:
        """Record the detected tempo and key and return the analysis."""
        _check_signal(audio_signal)
        self.tempo = 120.0
        self.key = "C major"
        return {"tempo": self.tempo, "key": self.key, "genre": "classical"}


@dataclass
class SpeakerIdentificationErudite:
    """Identifies the speaker whose model best matches a signal."""

    id: str = ""
    speaker_models: dict[str, list[float]] = field(default_factory=dict)
    accuracy: float = 0.0

    def identify_speaker(self, audio_signal: Sequence[float]) -> str:
        """Return the best matching speaker, or 'unknown' when none is known.

        Every model scores the same fixed similarity, so the first one wins.
        """
        _check_signal(audio_signal)
        return next(iter(self.speaker_models), "unknown")


@dataclass
class SpeechRecognitionErudite:
    """Recognises speech and improves with training."""

    id: str = ""
    vocabulary_size: int = 0
    accuracy: float = 0.0
    sample_rate: int = 0

    def recognize_speech(self, audio_signal: Sequence[float]) -> str:
        """Return the transcript for a signal of real-valued samples."""
        _check_signal(audio_signal)
        return _RECOGNIZED_TEXT

    def train_on_audio(self, audio: Sequence[float], transcript: str) -> None:
        self.accuracy += 0.001


@dataclass
class LanguageGenerationErudite:
    """Generates text by cycling through a vocabulary."""

    id: str = ""
    vocabulary: list[str] = field(default_factory=list)
    grammar: dict[str, list[str]] = field(default_factory=dict)
    max_length: int = 0

    def generate_text(self, prompt: str, length: int) -> str:
        """Append up to length words (at most max_length) to the prompt."""
        length = min(length, self.max_length)
        if not self.vocabulary:
            return prompt
        words = [self.vocabulary[i % len(self.vocabulary)] for i in range(length)]
        return " ".join([prompt, *words])


def _split_on_spaces(text: str) -> list[str]:
    return [token for token in text.split(" ") if token]


@dataclass
class SemanticAnalysisErudite:
    """Scores known tokens of a text by their frequency."""

    id: str = ""
    vocabulary: dict[str, int] = field(default_factory=dict)
    semantic_net: dict[str, list[str]] = field(default_factory=dict)
    context_size: int = 0

    def analyze_semantics(self, text: str) -> dict[str, float]:
        return {
            token: self.vocabulary[token] / 1000.0
            for token in _split_on_spaces(text)
            if token in self.vocabulary
        }


@dataclass
class TextClassificationErudite:
    """Classifies text into the first known category."""

    id: str = ""
    categories: list[str] = field(default_factory=list)
    features: dict[str, float] = field(default_factory=dict)
    model: dict[str, list[float]] = field(default_factory=dict)

    def classify_text(self, text: str) -> str:
        return self.categories[0] if self.categories else "unclassified"


@dataclass
class ImageClassificationErudite:
    """Classifies images into the first known category."""

    id: str = ""
    categories: list[str] = field(default_factory=list)
    confidence: float = 0.0
    model: list[list[float]] = field(default_factory=list)

    def classify_image(self, image: Sequence[Sequence[float]]) -> str:
        return self.categories[0] if self.categories else "unclassified"


@dataclass
class ObjectRecognitionErudite:
    """Recognises objects as the first known class."""

    id: str = ""
    classes: list[str] = field(default_factory=list)
    accuracy: float = 0.0
    model: dict[str, list[float]] = field(default_factory=dict)

    def recognize_object(self, image: Sequence[Sequence[float]]) -> str:
        return self.classes[0] if self.classes else "unknown"


@dataclass
class SceneUnderstandingErudite:
    """Describes the scene shown in an image."""

    id: str = ""
    scene_types: list[str] = field(default_factory=list)
    objects: list[str] = field(default_factory=list)
    relations: dict[str, list[str]] = field(default_factory=dict)

    def understand_scene(self, image: Sequence[Sequence[float]]) -> dict[str, Any]:
        """Record the objects found in the scene and return its description."""
        self.objects = ["table", "chair"]
        return {
            "scene_type": "indoor",
            "objects": list(self.objects),
            "relations": {"chair": "next_to_table"},
        }