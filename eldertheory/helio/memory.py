"""Memory systems of the heliosystem: region maps, field memory, gravitational and timeline memory."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from eldertheory.elder.entities import Vector3D

_DECAY_FLOOR = 0.01
_COMPRESSION_AGE = timedelta(hours=24)


@dataclass
class MemoryRegion:
    """A fixed-size block of memory with a type and metadata."""

    id: str
    size: int
    type: str
    data: bytearray
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ElderMemoryMap:
    """Allocates typed memory regions out of a fixed total capacity."""

    total_capacity: int
    used_capacity: int = 0
    memory_regions: dict[str, MemoryRegion] = field(default_factory=dict)
    mappings: dict[str, str] = field(default_factory=dict)

    def allocate_region(self, region_id: str, size: int, region_type: str) -> bool:
        """Allocate a zero-filled region; return False if capacity would be exceeded."""
        if self.used_capacity + size > self.total_capacity:
            return False
        if size < 0:
            raise ValueError("region size must not be negative")
        self.memory_regions[region_id] = MemoryRegion(
            id=region_id, size=size, type=region_type, data=bytearray(size)
        )
        self.used_capacity += size
        return True

    def access_region(self, region_id: str) -> MemoryRegion | None:
        return self.memory_regions.get(region_id)


@dataclass
class MemoryField:
    """A memory field holding arbitrary content."""

    id: str
    type: str
    strength: float
    content: Any
    connections: list[str] = field(default_factory=list)


@dataclass
class FieldBasedMemory:
    """Memory organised as fields linked by symmetric associations."""

    fields: dict[str, MemoryField] = field(default_factory=dict)
    associations: dict[str, list[str]] = field(default_factory=dict)
    field_types: dict[str, str] = field(default_factory=dict)

    def create_field(self, field_id: str, field_type: str, strength: float, content: Any) -> None:
        self.fields[field_id] = MemoryField(field_id, field_type, strength, content)
        self.field_types[field_id] = field_type

    def associate_fields(self, field1: str, field2: str) -> None:
        """Link two fields in both directions."""
        self.associations.setdefault(field1, []).append(field2)
        self.associations.setdefault(field2, []).append(field1)

    def retrieve_by_association(self, field_id: str) -> list[MemoryField]:
        """Return the existing fields associated with a field, in association order."""
        return [
            self.fields[assoc_id]
            for assoc_id in self.associations.get(field_id, [])
            if assoc_id in self.fields
        ]


@dataclass
class GravitationalMemoryField:
    """Data stored at a position with a strength and an outward direction."""

    position: Vector3D
    strength: float
    direction: Vector3D
    data: bytes


@dataclass
class GravitationalMemory:
    """Memory whose fields weaken over time and vanish when too weak."""

    capacity: float
    decay: float
    field_strength: dict[str, float] = field(default_factory=dict)
    memory_fields: dict[str, GravitationalMemoryField] = field(default_factory=dict)

    def store_in_field(self, field_id: str, data: bytes, position: Vector3D) -> None:
        """Store data; its strength is its size in KiB, capped at the capacity."""
        strength = min(self.capacity, len(data) / 1024.0)
        self.memory_fields[field_id] = GravitationalMemoryField(
            position=position,
            strength=strength,
            direction=self._direction(position),
            data=data,
        )
        self.field_strength[field_id] = strength

    @staticmethod
    def _direction(position: Vector3D) -> Vector3D:
        magnitude = position.magnitude
        if magnitude == 0:
            return Vector3D(0.0, 0.0, 1.0)
        return Vector3D(position.x / magnitude, position.y / magnitude, position.z / magnitude)

    def apply_decay(self) -> None:
        """Weaken every field; drop those that fall below the floor."""
        for field_id, strength in list(self.field_strength.items()):
            weakened = strength * (1.0 - self.decay)
            if weakened < _DECAY_FLOOR:
                del self.field_strength[field_id]
                self.memory_fields.pop(field_id, None)
            else:
                self.field_strength[field_id] = weakened


@dataclass
class MemorySegment:
    """A stored piece of data with its time and priority."""

    id: str
    data: bytes
    timestamp: datetime
    priority: float
    compressed: bool = False


@dataclass
class TimelineEvent:
    """An entry in the memory timeline."""

    time: datetime
    segment_id: str
    event: str


@dataclass
class InfiniteMemory:
    """Unbounded memory that compresses segments older than a day."""

    compression: float
    growth_rate: float
    segments: dict[str, MemorySegment] = field(default_factory=dict)
    timeline: list[TimelineEvent] = field(default_factory=list)

    def store(self, segment_id: str, data: bytes, priority: float) -> None:
        segment = MemorySegment(segment_id, data, datetime.now(), priority)
        self.segments[segment_id] = segment
        self.timeline.append(TimelineEvent(segment.timestamp, segment_id, "store"))

    def compress_old_segments(self) -> None:
        """Truncate uncompressed segments stored more than 24 hours ago."""
        threshold = datetime.now() - _COMPRESSION_AGE
        for segment in self.segments.values():
            if segment.timestamp < threshold and not segment.compressed:
                segment.data = self._compress(segment.data)
                segment.compressed = True

    def _compress(self, data: bytes) -> bytes:
        keep = max(1, math.trunc(len(data) * self.compression))
        return data[:keep]

    def retrieve(self, segment_id: str) -> MemorySegment | None:
        return self.segments.get(segment_id)