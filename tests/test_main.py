"""Tests for command line entry point."""

import pytest

from geodesy.main import format_result, main
from geodesy.result import DistanceResult, FailureReason
from geodesy.units import Unit

JFK_LHR = ["40.641766", "-73.780968", "51.470020", "-0.454295"]


class TestMain:
    """Tests for main()."""

    def test_all_methods_km(self, capsys):
        assert main(JFK_LHR + ["--precision", "4"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("Haversine")
        assert lines[0].endswith("5540.1754 km")
        assert lines[1].startswith("Spherical Law of Cosines")
        assert lines[1].endswith("5540.1754 km")
        assert lines[2].startswith("Vincenty (inverse)")
        assert lines[2].endswith("5555.0657 km")

    def test_single_method_miles(self, capsys):
        assert main(JFK_LHR + ["--method", "vincenty", "--unit", "us", "--precision", "4"]) == 0

        out = capsys.readouterr().out.strip()
        assert out.endswith("3451.7578 mi")

    def test_non_convergence_exit_status(self, capsys):
        assert main(["0", "0", "0", "180", "--method", "vincenty"]) == 1

        out = capsys.readouterr().out
        assert "FAILED (non-convergence)" in out

    def test_partial_failure(self, capsys):
        # Spherical methods succeed, Vincenty does not
        assert main(["0", "0", "0.5", "179.7"]) == 1

        lines = capsys.readouterr().out.splitlines()
        assert "FAILED" not in lines[0]
        assert "FAILED" not in lines[1]
        assert "FAILED (non-convergence)" in lines[2]

    @pytest.mark.parametrize("precision", ["-1", "two"])
    def test_invalid_precision(self, precision, capsys):
        with pytest.raises(SystemExit) as exc:
            main(JFK_LHR + ["--precision", precision])
        assert exc.value.code == 2
        assert "--precision" in capsys.readouterr().err

    def test_zero_precision(self, capsys):
        assert main(JFK_LHR + ["--method", "haversine", "--precision", "0"]) == 0
        assert capsys.readouterr().out.strip().endswith("5540 km")

    def test_verbose_adds_debug_records(self, caplog, capsys):
        main(["0", "0", "0", "180", "--method", "vincenty"])
        assert not [r for r in caplog.records if r.levelname == "DEBUG"]
        assert any("failed" in r.getMessage() for r in caplog.records)
        caplog.clear()

        main(["0", "0", "0", "180", "--method", "vincenty", "--verbose"])
        debug = [r for r in caplog.records if r.levelname == "DEBUG"]
        assert any(r.name == "geodesy.distance" for r in debug)

    def test_invalid_method(self):
        with pytest.raises(SystemExit):
            main(JFK_LHR + ["--method", "euclidean"])


class TestFormatResult:
    """Tests for format_result()."""

    def test_success(self):
        result = DistanceResult(method="slc", unit=Unit.US, distance=3442.5054053574)
        line = format_result(result, precision=2)
        assert line == f"{'Spherical Law of Cosines':<32}3442.51 mi"

    def test_failure(self):
        result = DistanceResult.failed("haversine", Unit.SI, FailureReason.DOMAIN_ERROR)
        assert format_result(result) == f"{'Haversine':<32}FAILED (domain-error)"
