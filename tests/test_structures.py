import pytest

from eldertheory.linters.structures import (
    ElderSpaceValidator,
    IsomorphismChecker,
    Point,
    PointSet,
    TopologicalSpace,
    TopologyValidator,
)


def test_standard_basis_is_orthogonal():
    validator = ElderSpaceValidator(3, 1e-6)
    basis = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    assert validator.validate_orthogonality(basis) is True
    assert validator.validate_completeness(basis) is True


def test_non_orthogonal_vectors_are_rejected():
    validator = ElderSpaceValidator(2, 1e-6)
    assert validator.validate_orthogonality([[1.0, 1.0], [1.0, 0.0]]) is False


def test_orthogonality_within_tolerance():
    validator = ElderSpaceValidator(2, 1e-6)
    assert validator.validate_orthogonality([[1.0, 0.0], [1e-9, 1.0]]) is True


def test_incomplete_basis():
    validator = ElderSpaceValidator(3, 1e-6)
    assert validator.validate_completeness([[1.0, 0.0, 0.0]]) is False


def test_mismatched_vector_lengths_raise():
    validator = ElderSpaceValidator(2, 1e-6)
    with pytest.raises(ValueError):
        validator.validate_orthogonality([[1.0, 0.0, 0.0], [0.0, 1.0]])


def test_numeric_structures_are_isomorphic():
    checker = IsomorphismChecker(1e-6)
    checker.set_structures({"a": 1.0, "b": 2.0}, {"x": 1.0, "y": 2.0})
    result = checker.check_isomorphism()
    assert result.is_isomorphic
    assert result.mappings == {"a": "x", "b": "y"}
    assert result.violations == []


def test_vector_structures_are_isomorphic():
    checker = IsomorphismChecker(1e-6)
    checker.set_structures({"u": [1.0, 2.0], "v": [3.0, 4.0]}, {"p": [0.0, 0.0], "q": [5.0, 5.0]})
    result = checker.check_isomorphism()
    assert result.is_isomorphic
    assert set(result.mappings) == {"u", "v"}
    assert set(result.mappings.values()) == {"p", "q"}


def test_different_cardinality():
    checker = IsomorphismChecker(1e-6)
    checker.set_structures({"a": 1.0}, {"x": 1.0, "y": 2.0})
    result = checker.check_isomorphism()
    assert not result.is_isomorphic
    assert result.violations == ["Structures have different cardinality"]


def test_no_mapping_found():
    checker = IsomorphismChecker(1e-6)
    checker.set_structures({"a": 1.0}, {"x": 5.0})
    result = checker.check_isomorphism()
    assert not result.is_isomorphic
    assert result.violations == ["No valid mapping found"]
    assert result.mappings == {}


def test_strings_do_not_preserve_operation():
    checker = IsomorphismChecker(1e-6)
    checker.set_structures({"a": "ab", "b": "cd"}, {"x": "ef", "y": "gh"})
    result = checker.check_isomorphism()
    assert not result.is_isomorphic
    assert result.mappings == {"a": "x", "b": "y"}
    assert result.violations == ["Mapping does not preserve operations"]


def _point(pid, *coords):
    return Point(list(coords), pid)


def test_well_behaved_space_is_valid():
    a, b, c = _point("a", 0.0), _point("b", 0.5), _point("c", 0.5)
    space = TopologicalSpace(points=[a, b, c], open_sets=[PointSet([a]), PointSet([b])], dimension=1)
    result = TopologyValidator(space, 0.1).validate_topology()
    assert result.valid
    assert result.violations == []
    assert list(result.properties) == ["hausdorff", "compact", "connected", "complete"]
    assert all(result.properties.values())


def test_distinct_sparse_points_are_not_compact():
    points = [_point("a", 0.0), _point("b", 0.5)]
    space = TopologicalSpace(points=points, open_sets=[PointSet([p]) for p in points])
    result = TopologyValidator(space, 0.1).validate_topology()
    assert not result.valid
    assert result.violations == ["Space is not compact"]


def test_far_points_are_not_connected():
    points = [_point("a", 0.0), _point("b", 0.0), _point("c", 50.0)]
    space = TopologicalSpace(points=points, open_sets=[PointSet([p]) for p in points])
    result = TopologyValidator(space, 0.1).validate_topology()
    assert result.properties["connected"] is False
    assert "Space is not connected" in result.violations


def test_no_open_sets_is_not_hausdorff():
    points = [_point("a", 0.0), _point("b", 0.5), _point("c", 0.5)]
    space = TopologicalSpace(points=points, open_sets=[])
    result = TopologyValidator(space, 0.1).validate_topology()
    assert result.properties["hausdorff"] is False
    assert "Space is not hausdorff" in result.violations


def test_custom_metric_is_used():
    points = [_point("a", 0.0), _point("b", 100.0)]
    space = TopologicalSpace(points=points, open_sets=[], metric=lambda p, q: 0.0)
    result = TopologyValidator(space, 0.1).validate_topology()
    assert result.valid
    assert result.violations == []


def test_empty_space_is_valid():
    result = TopologyValidator(TopologicalSpace(), 0.1).validate_topology()
    assert result.valid
    assert all(result.properties.values())