from eldertheory.helio.architecture import (
    HierarchicalMapping,
    Isomorphism,
    IsomorphismChain,
    SystemClosure,
    UnifiedFramework,
)


def test_map_levels_stores_and_replaces():
    mapping = HierarchicalMapping()
    mapping.map_levels(0, ["elder"])
    mapping.map_levels(1, ("m1", "m2"))
    assert mapping.levels[0] == ["elder"]
    assert mapping.levels[1] == ["m1", "m2"]
    mapping.map_levels(1, ["m3"])
    assert mapping.levels[1] == ["m3"]


def test_map_levels_copies_input():
    entities = ["a"]
    mapping = HierarchicalMapping()
    mapping.map_levels(2, entities)
    entities.append("b")
    assert mapping.levels[2] == ["a"]


def test_isomorphism_chain_grows_in_order():
    chain = IsomorphismChain()
    chain.add_isomorphism("audio", "vision")
    chain.add_isomorphism("vision", "language")
    assert chain.chain_length == len(chain.mappings) == 2
    assert chain.mappings[0] == Isomorphism(source="audio", target="vision")
    assert chain.mappings[1].target == "language"
    assert chain.mappings[1].mapping == {}


def test_achieve_closure_sets_full_integrity():
    closure = SystemClosure()
    assert closure.achieve_closure() is True
    assert closure.system_integrity == 1.0


def test_system_closure_depends_on_component_counts():
    framework = UnifiedFramework()
    framework.initialize_framework()
    assert framework.achieve_system_closure() is True
    framework.register_component("field", object())
    assert framework.achieve_system_closure() is False
    assert framework.system_closure is False
    framework.computational_units["field_solver"] = object()
    assert framework.achieve_system_closure() is True
    assert framework.system_closure is True


def test_map_to_computational_and_reset():
    framework = UnifiedFramework()
    framework.map_to_computational("gravity", "solver")
    framework.register_component("gravity", 1)
    assert framework.integration_mappings == {"gravity": "solver"}
    framework.initialize_framework()
    assert framework.integration_mappings == {}
    assert framework.theoretical_components == {}
    assert framework.system_closure is False