from eldertheory.linters.hierarchy import (
    Entity,
    EntityRelationshipLinter,
    Relationship,
    ValidationRule,
)


def _linter(*entities):
    return EntityRelationshipLinter(entities={e.id: e for e in entities})


def test_empty_hierarchy_has_no_violations():
    assert EntityRelationshipLinter().validate_hierarchy() == []


def test_valid_hierarchy():
    linter = _linter(
        Entity("root", "elder", 0),
        Entity("m1", "mentor", 1, parent="root"),
        Entity("e1", "erudite", 2, parent="m1"),
    )
    assert linter.validate_hierarchy() == []


def test_root_at_wrong_level():
    linter = _linter(Entity("root", "elder", 1))
    assert linter.validate_hierarchy() == ["Invalid hierarchy level for entity: root"]


def test_child_at_wrong_level():
    linter = _linter(Entity("root", level=0), Entity("child", level=2, parent="root"))
    assert linter.validate_hierarchy() == ["Invalid hierarchy level for entity: child"]


def test_missing_parent_is_a_violation():
    linter = _linter(Entity("orphan", level=1, parent="ghost"))
    assert linter.validate_hierarchy() == ["Invalid hierarchy level for entity: orphan"]


def test_violations_follow_entity_order():
    linter = _linter(Entity("a", level=3), Entity("b", level=0), Entity("c", level=5, parent="b"))
    assert linter.validate_hierarchy() == [
        "Invalid hierarchy level for entity: a",
        "Invalid hierarchy level for entity: c",
    ]


def test_rules_do_not_affect_level_validation():
    rule = ValidationRule("never", "always fails", lambda entity, others: False)
    linter = _linter(Entity("root", level=0))
    linter.rules.append(rule)
    linter.relationships["root"] = [Relationship("root", "root", "self")]
    assert linter.validate_hierarchy() == []
    assert rule.validator(linter.entities["root"], []) is False