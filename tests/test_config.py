"""Tests for configuration resolution."""

import pytest

from wavemesh import ConfigurationError, Range, WaveConfig
from wavemesh.config import DEFAULT_FREQUENCY, DEFAULT_SAMPLES


class TestDefaults:
    def test_defaults(self):
        config = WaveConfig()
        assert (config.dx, config.dy, config.dz) == (1.0, 1.0, 1.0)
        assert config.nx == config.ny == DEFAULT_SAMPLES
        assert config.fx == config.fy == Range(DEFAULT_FREQUENCY)
        assert config.ax == config.ay == Range(1.0)
        assert not (config.absolute or config.arclength_uv or config.normalize_uv)

    def test_ny_defaults_to_nx(self):
        assert WaveConfig(nx=7).ny == 7
        assert WaveConfig(nx=7, ny=0).ny == 7
        assert WaveConfig(nx=7, ny=3).ny == 3


class TestPairedRanges:
    def test_fy_inherits_fx(self):
        config = WaveConfig(fx=5)
        assert config.fy.start == config.fy.end == 5.0

    def test_fx_inherits_fy(self):
        config = WaveConfig(fy="2,8")
        assert config.fx == Range(2.0, 8.0)

    def test_both_given_are_independent(self):
        config = WaveConfig(fx=5, fy=8)
        assert config.fx == Range(5.0)
        assert config.fy == Range(8.0)

    def test_amplitude_pairing(self):
        config = WaveConfig(ax="0,2")
        assert config.ay == Range(0.0, 2.0)

    def test_null_amplitudes_reset_to_one(self):
        config = WaveConfig(ax=0, ay=0)
        assert config.ax == config.ay == Range(1.0)

    def test_single_null_amplitude_is_kept(self):
        config = WaveConfig(ax=0, ay=2)
        assert config.ax == Range(0.0)
        assert config.ay == Range(2.0)

    def test_accepts_range_objects(self):
        config = WaveConfig(fx=Range(1, 3), ax=Range(0.5))
        assert config.fy == Range(1, 3)
        assert config.ay == Range(0.5)


class TestValidation:
    @pytest.mark.parametrize(
        "nx", [0, -1, 2.5, "ten", None, True, float("inf"), float("nan")]
    )
    def test_invalid_nx(self, nx):
        with pytest.raises(ConfigurationError):
            WaveConfig(nx=nx)

    def test_negative_ny(self):
        with pytest.raises(ConfigurationError):
            WaveConfig(nx=4, ny=-2)

    def test_infinite_ny(self):
        with pytest.raises(ConfigurationError, match="ny must be an integer"):
            WaveConfig(nx=4, ny=float("inf"))

    @pytest.mark.parametrize("name", ["dx", "dy", "dz"])
    def test_non_finite_size(self, name):
        with pytest.raises(ConfigurationError):
            WaveConfig(**{name: float("inf")})

    def test_malformed_range(self):
        with pytest.raises(ConfigurationError, match="fx"):
            WaveConfig(fx="1,2,3")

    def test_configuration_error_is_wavemesh_error(self):
        from wavemesh import WaveMeshError

        assert issubclass(ConfigurationError, WaveMeshError)


class TestCounts:
    def test_counts(self):
        config = WaveConfig(nx=4, ny=4)
        assert config.n_vertices == 16
        assert config.n_surface_faces == 18
        assert config.n_volume_faces == 2 * 18 + 4 * 3 + 4 * 3

    def test_single_row(self):
        config = WaveConfig(nx=1, ny=5)
        assert config.n_surface_faces == 0
        assert config.n_volume_faces == 16

    def test_describe(self):
        text = WaveConfig(nx=4, fx="1,2").describe()
        assert "(nx,ny) = 4,4" in text
        assert "fx in [1;2]" in text
        assert len(text.splitlines()) == 4
