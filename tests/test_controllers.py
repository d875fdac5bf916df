import pytest

from eldertheory.elder.controllers import (
    InformationCapacityController,
    OrbitalStabilityController,
    ParameterSpaceManager,
    ResonanceController,
)
from eldertheory.elder.entities import Elder, GravitationalField, Vector3D


def _field(stability):
    return GravitationalField(strength=1.0, direction=Vector3D(), range=10.0, stability=stability)


def test_allocate_within_capacity():
    controller = InformationCapacityController(max_capacity=10.0)
    assert controller.allocate_capacity("a", 4.0) is True
    assert controller.channels == {"a": 4.0}
    assert controller.used_capacity == pytest.approx(4.0)


def test_allocate_exact_fill_then_refuse():
    controller = InformationCapacityController(max_capacity=10.0)
    assert controller.allocate_capacity("a", 10.0) is True
    assert controller.allocate_capacity("b", 0.5) is False
    assert "b" not in controller.channels
    assert controller.used_capacity == pytest.approx(10.0)


def test_system_stability_without_fields_is_zero():
    controller = OrbitalStabilityController(elder=Elder(id="e"))
    assert controller.calculate_system_stability() == 0.0


def test_system_stability_is_mean():
    elder = Elder(id="e", gravitational_fields=[_field(0.2), _field(0.4)])
    controller = OrbitalStabilityController(elder=elder)
    assert controller.calculate_system_stability() == pytest.approx(0.3)


def test_monitor_records_metric_and_raises_low_stability():
    elder = Elder(id="e", gravitational_fields=[_field(0.2)])
    controller = OrbitalStabilityController(elder=elder)
    before = controller.calculate_system_stability()
    controller.monitor_orbital_dynamics()
    assert controller.stability_metrics["system_stability"] == pytest.approx(before)
    after = elder.gravitational_fields[0].stability
    assert before < after <= 1.0


def test_adjustment_is_capped_at_one():
    elder = Elder(id="e", gravitational_fields=[_field(0.95), _field(0.0)])
    controller = OrbitalStabilityController(elder=elder)
    controller.monitor_orbital_dynamics()
    assert elder.gravitational_fields[0].stability == 1.0
    assert elder.gravitational_fields[1].stability == 0.0


def test_high_stability_left_unchanged():
    elder = Elder(id="e", gravitational_fields=[_field(0.8)])
    controller = OrbitalStabilityController(elder=elder)
    controller.monitor_orbital_dynamics()
    assert elder.gravitational_fields[0].stability == 0.8


def test_parameter_space_manager():
    manager = ParameterSpaceManager(3)
    manager.set_parameter("alpha", 0.5)
    manager.set_parameter("alpha", 0.7)
    assert manager.space.dimensions == 3
    assert manager.space.parameters == {"alpha": 0.7}
    assert manager.boundaries == {}


def test_resonance_initialize_clears_fields():
    controller = ResonanceController()
    controller.modulate_resonance("f1", 0.3)
    controller.initialize_resonance(2.0, 5.0)
    assert (controller.frequency, controller.amplitude) == (2.0, 5.0)
    assert controller.resonance_fields == {}
    controller.modulate_resonance("f2", 0.9)
    assert controller.resonance_fields == {"f2": 0.9}