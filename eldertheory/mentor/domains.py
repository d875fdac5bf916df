"""Domain mentors for audio, language, vision and multimodal processing."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from eldertheory.mentor.core import MentorEntity

_WORD_SEPARATORS = re.compile(r"[ \n\t]+")
_AUDIO_GAIN = 0.8
_SPECTRAL_CENTROID = 1000.0
_CONTRAST = 0.5


def _mean(values: Sequence[float]) -> float:
    if not values:
        return math.nan
    return sum(values) / len(values)


def _ratio(numerator: float, denominator: float) -> float:
    """Floating division yielding infinities or NaN instead of raising."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass
class AudioMentor:
    """Mentor for the audio domain."""

    id: str
    domain: str = "audio"
    audio_features: dict[str, float] = field(default_factory=dict)
    sample_rate: int = 44100
    channels: int = 2
    processing_mode: str = "realtime"

    def process_audio_signal(self, signal: Iterable[float]) -> list[float]:
        """Return the signal with its volume scaled down."""
        return [sample * _AUDIO_GAIN for sample in signal]

    def extract_features(self, signal: Sequence[float]) -> None:
        """Store the signal's energy and spectral centroid."""
        self.audio_features["energy"] = _mean([sample * sample for sample in signal])
        self.audio_features["spectral_centroid"] = _SPECTRAL_CENTROID


@dataclass
class LanguageMentor:
    """Mentor for natural language processing."""

    id: str
    domain: str = "language"
    vocabulary: dict[str, int] = field(default_factory=dict)
    grammar_rules: list[str] = field(default_factory=list)
    semantic_model: dict[str, list[float]] = field(default_factory=dict)
    context_window: int = 512

    def process_text(self, text: str) -> list[str]:
        """Split text into words on spaces, newlines and tabs."""
        return [word for word in _WORD_SEPARATORS.split(text) if word]

    def extract_semantics(self, tokens: Sequence[str]) -> dict[str, float]:
        """Token count and average token length in UTF-8 bytes."""
        return {
            "token_count": float(len(tokens)),
            "avg_token_length": self._average_token_length(tokens),
        }

    @staticmethod
    def _average_token_length(tokens: Sequence[str]) -> float:
        if not tokens:
            return 0.0
        return sum(len(token.encode("utf-8")) for token in tokens) / len(tokens)


def _default_fusion_weights() -> dict[str, float]:
    return {"audio": 0.33, "visual": 0.33, "textual": 0.34}


@dataclass
class MultimodalMentor:
    """Mentor that fuses audio, visual and textual features."""

    id: str
    domain: str = "multimodal"
    audio_features: dict[str, float] = field(default_factory=dict)
    visual_features: dict[str, float] = field(default_factory=dict)
    textual_features: dict[str, float] = field(default_factory=dict)
    fusion_weights: dict[str, float] = field(default_factory=_default_fusion_weights)
    integrated_model: list[float] = field(default_factory=list)

    def fuse_modalities(self) -> list[float]:
        """Weight every feature by its modality's weight and store the result."""
        integrated: list[float] = []
        for modality, features in (
            ("audio", self.audio_features),
            ("visual", self.visual_features),
            ("textual", self.textual_features),
        ):
            weight = self.fusion_weights.get(modality, 0.0)
            integrated.extend(value * weight for value in features.values())
        self.integrated_model = integrated
        return integrated

    def update_fusion_weights(self, audio: float, visual: float, textual: float) -> None:
        """Set the weights, normalised to sum to one."""
        total = audio + visual + textual
        self.fusion_weights["audio"] = _ratio(audio, total)
        self.fusion_weights["visual"] = _ratio(visual, total)
        self.fusion_weights["textual"] = _ratio(textual, total)


@dataclass
class Filter:
    """An image processing filter."""

    name: str
    kernel: list[list[float]] = field(default_factory=list)
    size: int = 0


@dataclass
class VisionMentor:
    """Mentor for the visual domain."""

    id: str
    domain: str = "vision"
    image_features: dict[str, float] = field(default_factory=dict)
    resolution: tuple[int, int] = (224, 224)
    color_space: str = "RGB"
    filter_bank: list[Filter] = field(default_factory=list)
    mentor_entity: MentorEntity = field(init=False)

    def __post_init__(self) -> None:
        self.mentor_entity = MentorEntity(id=self.id, domain=self.domain)

    def process_image(self, image: Iterable[Iterable[float]]) -> list[list[float]]:
        """Return a copy of the image."""
        return [list(row) for row in image]

    def extract_visual_features(self, image: Iterable[Iterable[float]]) -> None:
        """Store the image's brightness and contrast."""
        pixels = [pixel for row in image for pixel in row]
        self.image_features["brightness"] = _mean(pixels)
        self.image_features["contrast"] = _CONTRAST