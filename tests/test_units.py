"""Tests for units and results."""

import pytest

from geodesy.result import FAILURE, ConvergenceError, DistanceResult, FailureReason
from geodesy.units import MILES_TO_KM, Unit, convert_km, unit_factor


class TestUnit:
    """Tests for Unit parsing and conversion."""

    @pytest.mark.parametrize("text", ["si", "SI", "km", " Km "])
    def test_parse_si(self, text):
        assert Unit.parse(text) == Unit.SI

    @pytest.mark.parametrize("text", ["us", "US", "mi", "Mi"])
    def test_parse_us(self, text):
        assert Unit.parse(text) == Unit.US

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Unit.parse("furlongs")

    def test_symbol(self):
        assert Unit.SI.symbol == "km"
        assert Unit.US.symbol == "mi"

    def test_unit_factor(self):
        assert unit_factor(Unit.SI) == 1.0
        assert unit_factor(Unit.US) == 1.0 / MILES_TO_KM

    def test_convert_km(self):
        assert convert_km(1.609344, Unit.US) == pytest.approx(1.0)
        assert convert_km(42.0, Unit.SI) == 42.0
        assert convert_km(0.0, Unit.US) == 0.0


class TestDistanceResult:
    """Tests for DistanceResult."""

    def test_success(self):
        result = DistanceResult(method="haversine", unit=Unit.SI, distance=12.5)
        assert result.ok
        assert result.value == 12.5
        assert result.failure is None
        assert result.iterations == 0

    def test_failed(self):
        result = DistanceResult.failed(
            "vincenty", Unit.US, FailureReason.NON_CONVERGENCE, iterations=100
        )
        assert not result.ok
        assert result.distance is None
        assert result.value == FAILURE == -1.0
        assert result.iterations == 100

    def test_frozen(self):
        result = DistanceResult(method="slc", unit=Unit.SI, distance=1.0)
        with pytest.raises(AttributeError):
            result.distance = 2.0

    def test_convergence_error(self):
        error = ConvergenceError(100)
        assert isinstance(error, ArithmeticError)
        assert error.iterations == 100
        assert "100 iterations" in str(error)
