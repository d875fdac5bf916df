"""Linters for vector spaces, structure isomorphisms and topological spaces."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence


@dataclass
class ElderSpaceValidator:
    """Checks orthogonality and completeness of bases in Elder space."""

    dimension: int
    tolerance: float
    properties: dict[str, bool] = field(default_factory=dict)

    def validate_orthogonality(self, vectors: Sequence[Sequence[float]]) -> bool:
        """True when every pair of distinct vectors has a near-zero dot product."""
        for i, first in enumerate(vectors):
            for second in vectors[i + 1:]:
                if abs(self._dot(first, second)) > self.tolerance:
                    return False
        return True

    @staticmethod
    def _dot(first: Sequence[float], second: Sequence[float]) -> float:
        if len(second) < len(first):
            raise ValueError("vectors must have matching lengths")
        return sum(a * b for a, b in zip(first, second))

    def validate_completeness(self, basis: Sequence[Sequence[float]]) -> bool:
        return len(basis) == self.dimension


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_vector(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass
class IsomorphismResult:
    """Outcome of an isomorphism check."""

    is_isomorphic: bool = True
    mappings: dict[str, str] = field(default_factory=dict)
    violations: list[str] = field(default_factory=list)


@dataclass
class IsomorphismChecker:
    """Looks for an addition-preserving bijection between two keyed structures."""

    tolerance: float
    source_structure: dict[str, Any] = field(default_factory=dict)
    target_structure: dict[str, Any] = field(default_factory=dict)
    mappings: dict[str, str] = field(default_factory=dict)

    def set_structures(self, source: dict[str, Any], target: dict[str, Any]) -> None:
        self.source_structure = source
        self.target_structure = target

    def check_isomorphism(self) -> IsomorphismResult:
        result = IsomorphismResult()
        if len(self.source_structure) != len(self.target_structure):
            result.is_isomorphic = False
            result.violations.append("Structures have different cardinality")
            return result

        mapping = self._find_mapping()
        if mapping is None:
            result.is_isomorphic = False
            result.violations.append("No valid mapping found")
            return result

        result.mappings = mapping
        if not self._preserves_operation(mapping):
            result.is_isomorphic = False
            result.violations.append("Mapping does not preserve operations")
        return result

    def _find_mapping(self) -> dict[str, str] | None:
        mapping: dict[str, str] = {}
        used: set[str] = set()
        for source_key, source_value in self.source_structure.items():
            match = next(
                (
                    target_key
                    for target_key, target_value in self.target_structure.items()
                    if target_key not in used and self._compatible(source_value, target_value)
                ),
                None,
            )
            if match is None:
                return None
            mapping[source_key] = match
            used.add(match)
        return mapping

    def _compatible(self, source: Any, target: Any) -> bool:
        if _is_number(source):
            return _is_number(target) and (source - target) ** 2 < self.tolerance**2
        if isinstance(source, str):
            return isinstance(target, str) and len(source) == len(target)
        if _is_vector(source):
            return _is_vector(target) and len(source) == len(target)
        return False

    def _preserves_operation(self, mapping: dict[str, str]) -> bool:
        for source1, target1 in mapping.items():
            for source2, target2 in mapping.items():
                if source1 == source2:
                    continue
                source_sum = self._add(source1, source2, self.source_structure)
                target_sum = self._add(target1, target2, self.target_structure)
                if not self._compatible(source_sum, target_sum):
                    return False
        return True

    @staticmethod
    def _add(key1: str, key2: str, structure: dict[str, Any]) -> Any:
        first, second = structure.get(key1), structure.get(key2)
        if _is_number(first) and _is_number(second):
            return first + second
        if _is_vector(first) and _is_vector(second) and len(first) == len(second):
            return [a + b for a, b in zip(first, second)]
        return None


@dataclass
class Point:
    """A point of a topological space."""

    coordinates: list[float]
    id: str


@dataclass
class PointSet:
    """A set of points, such as an open set."""

    points: list[Point] = field(default_factory=list)
    type: str = ""


def _euclidean(first: Point, second: Point) -> float:
    return math.dist(first.coordinates, second.coordinates)


@dataclass
class TopologicalSpace:
    """Sampled points with open sets and a metric."""

    points: list[Point] = field(default_factory=list)
    open_sets: list[PointSet] = field(default_factory=list)
    metric: Callable[[Point, Point], float] = _euclidean
    dimension: int = 0


@dataclass
class TopologyValidationResult:
    """Outcome of validating a topological space."""

    valid: bool = True
    properties: dict[str, bool] = field(default_factory=dict)
    violations: list[str] = field(default_factory=list)


_SEQUENCE_LENGTH = 10
_CONNECTION_FACTOR = 10


@dataclass
class TopologyValidator:
    """Checks Hausdorff, compactness, connectedness and completeness on samples."""

    space: TopologicalSpace
    tolerance: float
    continuity: dict[str, bool] = field(default_factory=dict)

    def validate_topology(self) -> TopologyValidationResult:
        result = TopologyValidationResult()
        result.properties["hausdorff"] = self._check_hausdorff()
        result.properties["compact"] = self._check_compact()
        result.properties["connected"] = self._check_connected()
        result.properties["complete"] = True
        for name, satisfied in result.properties.items():
            if not satisfied:
                result.valid = False
                result.violations.append("Space is not " + name)
        return result

    def _distance(self, first: Point, second: Point) -> float:
        return self.space.metric(first, second)

    def _check_hausdorff(self) -> bool:
        points = self.space.points
        for i, first in enumerate(points):
            for second in points[i + 1:]:
                if self._distance(first, second) > self.tolerance and not self._separable(
                    first, second
                ):
                    return False
        return True

    def _separable(self, first: Point, second: Point) -> bool:
        return any(
            self._contains(set1, first)
            and self._contains(set2, second)
            and not self._intersect(set1, set2)
            for set1 in self.space.open_sets
            for set2 in self.space.open_sets
        )

    def _contains(self, point_set: PointSet, point: Point) -> bool:
        return any(self._distance(point, member) < self.tolerance for member in point_set.points)

    def _intersect(self, set1: PointSet, set2: PointSet) -> bool:
        return any(
            self._distance(p1, p2) < self.tolerance for p1 in set1.points for p2 in set2.points
        )

    def _check_compact(self) -> bool:
        points = self.space.points
        for start in range(min(_SEQUENCE_LENGTH, len(points))):
            if not self._has_convergent_subsequence(points[start:start + _SEQUENCE_LENGTH]):
                return False
        return True

    def _has_convergent_subsequence(self, sequence: Sequence[Point]) -> bool:
        if len(sequence) < 2:
            return True
        return any(
            self._distance(first, second) < self.tolerance
            for i, first in enumerate(sequence)
            for second in sequence[i + 1:]
        )

    def _check_connected(self) -> bool:
        points = self.space.points
        if len(points) <= 1:
            return True
        limit = self.tolerance * _CONNECTION_FACTOR
        visited: set[str] = set()

        def neighbours(point: Point):
            for candidate in points:
                if candidate.id not in visited and self._distance(point, candidate) < limit:
                    yield candidate

        visited.add(points[0].id)
        stack = [neighbours(points[0])]
        while stack:
            following = next(stack[-1], None)
            if following is None:
                stack.pop()
                continue
            visited.add(following.id)
            stack.append(neighbours(following))
        return len(visited) == len(points)