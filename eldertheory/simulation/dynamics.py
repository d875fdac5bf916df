"""N-body orbital dynamics and a fixed-step simulation clock."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field, replace
from typing import Any

from eldertheory.elder.entities import Vector3D

GRAVITATIONAL_CONSTANT = 6.67430e-11


@dataclass
class CelestialBody:
    """A point mass with position, velocity and the net force acting on it."""

    mass: float
    position: Vector3D
    velocity: Vector3D
    force: Vector3D = field(default_factory=Vector3D)


@dataclass
class OrbitalDynamics:
    """Bodies moving under mutual Newtonian gravity."""

    time_step: float
    bodies: list[CelestialBody] = field(default_factory=list)
    g: float = GRAVITATIONAL_CONSTANT

    def add_body(self, mass: float, position: Vector3D, velocity: Vector3D) -> None:
        self.bodies.append(CelestialBody(mass, replace(position), replace(velocity)))

    def update_positions(self) -> None:
        """Advance every body along its velocity by one time step."""
        for body in self.bodies:
            body.position.x += body.velocity.x * self.time_step
            body.position.y += body.velocity.y * self.time_step
            body.position.z += body.velocity.z * self.time_step

    def calculate_forces(self) -> None:
        """Set each body's force to the sum of the pulls of all other bodies."""
        for i, body in enumerate(self.bodies):
            total = Vector3D()
            for j, other in enumerate(self.bodies):
                if i == j:
                    continue
                pull = self._gravitational_force(body, other)
                total.x += pull.x
                total.y += pull.y
                total.z += pull.z
            body.force = total

    def _gravitational_force(self, body1: CelestialBody, body2: CelestialBody) -> Vector3D:
        dx = body2.position.x - body1.position.x
        dy = body2.position.y - body1.position.y
        dz = body2.position.z - body1.position.z
        distance = math.sqrt(dx * dx + dy * dy + dz * dz)
        squared = distance * distance
        if squared == 0:
            return Vector3D(math.nan, math.nan, math.nan)
        magnitude = self.g * body1.mass * body2.mass / squared
        return Vector3D(
            magnitude * dx / distance,
            magnitude * dy / distance,
            magnitude * dz / distance,
        )


@dataclass
class SimulationCore:
    """A simulation clock that ticks in real time until it reaches its end."""

    time_step: float
    max_time: float
    current_time: float = 0.0
    state: dict[str, Any] = field(default_factory=dict)
    running: bool = False

    def start(self) -> None:
        """Run from time zero until max_time is reached or the core is stopped."""
        if self.time_step <= 0 and self.max_time > 0:
            raise ValueError("time step must be positive")
        self.running = True
        self.current_time = 0.0
        pause = math.trunc(self.time_step * 1000) / 1000.0
        while self.current_time < self.max_time and self.running:
            self._step()
            self.current_time += self.time_step
            if pause > 0:
                time.sleep(pause)

    def _step(self) -> None:
        """Advance the simulated state by one step; the base core has no state to move."""

    def stop(self) -> None:
        self.running = False