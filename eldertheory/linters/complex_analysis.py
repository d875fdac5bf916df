"""Linters for complex functions: analyticity, boundedness, singularities and residues."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Sequence

ComplexMap = Callable[[complex], complex]

_DERIVATIVE_STEP = 1e-8
_CONTINUITY_STEP = complex(1e-6, 1e-6)
_BLOWUP = 1e10
_PI = 3.14159
_RESIDUE_RADIUS = 1e-3
_RESIDUE_POINTS = 100
_CAUCHY_RIEMANN_STEP = 1e-6
_HELIO_CONTINUITY_STEP = complex(1e-8, 1e-8)


def _evaluate(function: ComplexMap, z: complex) -> complex:
    """Evaluate a function, turning poles into infinities and domain errors into NaN."""
    try:
        return complex(function(z))
    except (ZeroDivisionError, OverflowError):
        return complex(math.inf, math.inf)
    except ValueError:
        return complex(math.nan, math.nan)


def _is_inf(value: complex) -> bool:
    return math.isinf(value.real) or math.isinf(value.imag)


def _is_nan(value: complex) -> bool:
    return (math.isnan(value.real) or math.isnan(value.imag)) and not _is_inf(value)


def _complex_test_domain() -> list[complex]:
    return [complex(i / 2.0, j / 2.0) for i in range(-5, 6) for j in range(-5, 6)]


@dataclass
class ComplexFunction:
    """A complex function with the domain it is checked on and its claimed type."""

    id: str
    function: ComplexMap
    domain: list[complex] = field(default_factory=list)
    type: str = ""


@dataclass
class ComplexAnalysisResult:
    """Outcome of linting one complex function."""

    function_id: str
    valid: bool = True
    properties: dict[str, bool] = field(default_factory=dict)
    violations: list[str] = field(default_factory=list)
    singularities: list[complex] = field(default_factory=list)


@dataclass
class ComplexAnalysisLinter:
    """Checks registered complex functions against the type claimed for them."""

    tolerance: float
    functions: dict[str, ComplexFunction] = field(default_factory=dict)
    test_domain: list[complex] = field(default_factory=_complex_test_domain)

    def add_function(self, function_id: str, function: ComplexMap, function_type: str) -> None:
        self.functions[function_id] = ComplexFunction(
            id=function_id,
            function=function,
            domain=list(self.test_domain),
            type=function_type,
        )

    def lint_all_functions(self) -> dict[str, ComplexAnalysisResult]:
        return {
            function_id: self._lint_function(function)
            for function_id, function in self.functions.items()
        }

    def _lint_function(self, function: ComplexFunction) -> ComplexAnalysisResult:
        result = ComplexAnalysisResult(function_id=function.id)
        result.properties["analytic"] = self._check_analytic(function)
        result.properties["bounded"] = self._check_bounded(function)
        result.properties["continuous"] = self._check_continuous(function)
        result.singularities = self._find_singularities(function)

        if not result.properties["analytic"] and function.type == "holomorphic":
            result.valid = False
            result.violations.append("Function claimed to be holomorphic but is not analytic")
        if result.singularities and function.type == "entire":
            result.valid = False
            result.violations.append("Function claimed to be entire but has singularities")
        return result

    def _check_analytic(self, function: ComplexFunction) -> bool:
        return all(self._derivative_exists(function, z) for z in function.domain)

    def _derivative_exists(self, function: ComplexFunction, z: complex) -> bool:
        real_step = complex(_DERIVATIVE_STEP, 0)
        imag_step = complex(0, _DERIVATIVE_STEP)
        at_z = _evaluate(function.function, z)
        along_real = (_evaluate(function.function, z + real_step) - at_z) / real_step
        along_imag = (_evaluate(function.function, z + imag_step) - at_z) / imag_step
        return abs(along_real - along_imag) < self.tolerance

    def _check_bounded(self, function: ComplexFunction) -> bool:
        largest = 0.0
        for z in function.domain:
            magnitude = abs(_evaluate(function.function, z))
            if math.isinf(magnitude) or math.isnan(magnitude):
                return False
            largest = max(largest, magnitude)
        return largest < _BLOWUP

    def _check_continuous(self, function: ComplexFunction) -> bool:
        return all(self._continuous_at(function, z) for z in function.domain)

    def _continuous_at(self, function: ComplexFunction, z: complex) -> bool:
        value = _evaluate(function.function, z)
        nearby = _evaluate(function.function, z + _CONTINUITY_STEP)
        return abs(value - nearby) < self.tolerance

    def _find_singularities(self, function: ComplexFunction) -> list[complex]:
        singular = []
        for z in function.domain:
            value = _evaluate(function.function, z)
            if _is_inf(value) or _is_nan(value) or abs(value) > _BLOWUP:
                singular.append(z)
        return singular

    def check_residue_theorem(self, function: ComplexFunction, contour: Sequence[complex]) -> bool:
        """Compare the contour integral with 2*pi*i times the sum of residues."""
        points = list(contour)
        if len(points) < 3:
            return False
        integral = self._contour_integral(function, points)
        residues = self._residue_sum(function, points)
        expected = complex(0, 2 * _PI) * residues
        return abs(integral - expected) < self.tolerance

    @staticmethod
    def _contour_integral(function: ComplexFunction, contour: Sequence[complex]) -> complex:
        total = 0j
        for start, end in zip(contour, contour[1:]):
            midpoint = (start + end) / 2
            total += _evaluate(function.function, midpoint) * (end - start)
        return total

    def _residue_sum(self, function: ComplexFunction, contour: Sequence[complex]) -> complex:
        # Every singularity is counted as enclosed by the contour.
        return sum(
            (self._residue(function, point) for point in self._find_singularities(function)),
            0j,
        )

    def _residue(self, function: ComplexFunction, singularity: complex) -> complex:
        circle = [
            singularity
            + complex(
                _RESIDUE_RADIUS * math.cos(2 * _PI * k / _RESIDUE_POINTS),
                _RESIDUE_RADIUS * math.sin(2 * _PI * k / _RESIDUE_POINTS),
            )
            for k in range(_RESIDUE_POINTS)
        ]
        return self._contour_integral(function, circle) / complex(0, 2 * _PI)


def _heliomorphic_test_points() -> list[complex]:
    return [complex(i / 10.0, i / 10.0) for i in range(10)]


@dataclass
class ValidationResult:
    """Outcome of validating a function as heliomorphic."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)
    properties: dict[str, bool] = field(default_factory=dict)


@dataclass
class HeliomorphicValidator:
    """Checks the Cauchy-Riemann equations and continuity on a diagonal of test points."""

    tolerance: float
    max_iterations: int
    test_points: list[complex] = field(default_factory=_heliomorphic_test_points)

    def validate_function(self, function: ComplexMap) -> ValidationResult:
        result = ValidationResult()
        result.properties["holomorphic"] = self._check_holomorphic(function)
        result.properties["analytic"] = self._check_analytic(function)
        result.properties["continuous"] = self._check_continuous(function)
        if not result.properties["holomorphic"]:
            result.valid = False
            result.errors.append("Function is not holomorphic")
        return result

    def _check_holomorphic(self, function: ComplexMap) -> bool:
        return all(self._satisfies_cauchy_riemann(function, z) for z in self.test_points)

    def _satisfies_cauchy_riemann(self, function: ComplexMap, z: complex) -> bool:
        h = complex(_CAUCHY_RIEMANN_STEP, 0)
        ih = complex(0, _CAUCHY_RIEMANN_STEP)
        dfdx = (_evaluate(function, z + h) - _evaluate(function, z - h)) / (2 * h)
        dfdy = (_evaluate(function, z + ih) - _evaluate(function, z - ih)) / (2 * ih)
        u_x, v_x = dfdx.real, dfdx.imag
        u_y, v_y = dfdy.real, dfdy.imag
        mismatch = (u_x - v_y) ** 2 + (v_x + u_y) ** 2
        return mismatch < self.tolerance * self.tolerance

    def _check_analytic(self, function: ComplexMap) -> bool:
        return not any(
            abs(z) > 0 and _is_inf(_evaluate(function, z)) for z in self.test_points
        )

    def _check_continuous(self, function: ComplexMap) -> bool:
        for z in self.test_points:
            change = abs(_evaluate(function, z + _HELIO_CONTINUITY_STEP) - _evaluate(function, z))
            if change > self.tolerance:
                return False
        return True