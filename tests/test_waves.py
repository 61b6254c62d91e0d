"""Tests for height-field synthesis."""

import numpy as np
import pytest

from wavemesh import Range, WaveConfig, WaveField
from wavemesh.fields import synthesize_heights


def test_constant_ranges_match_closed_form():
    field = WaveField(Range(1), Range(1), Range(1), Range(1))
    xp = np.array([0.0, 0.25, 0.5, 0.125])
    yp = np.array([0.0, 0.0, 0.25, 0.75])

    expected = 2.0 * (np.sin(2 * np.pi * xp) + np.sin(2 * np.pi * yp))
    np.testing.assert_allclose(field(xp, yp), expected, atol=1e-12)


def test_frequency_sweeps_with_position():
    # fx(xp) is evaluated at the point's own coordinate.
    field = WaveField(Range(0, 4), Range(0), Range(1), Range(0))
    xp = np.array([0.25])
    expected = np.sin(2 * np.pi * 1.0 * 0.25)
    np.testing.assert_allclose(field(xp, np.zeros(1)), expected, atol=1e-12)


def test_amplitude_is_sum_of_axes():
    field = WaveField(Range(1), Range(1), Range(0, 2), Range(3))
    np.testing.assert_allclose(field.amplitude([0.0, 0.5, 1.0], [0, 0, 0]), [3.0, 4.0, 5.0])


def test_absolute_variant_is_non_negative():
    xp, yp = np.meshgrid(np.linspace(0, 1, 21), np.linspace(0, 1, 21))
    plain = WaveField(Range(3), Range(2), Range(1), Range(1))
    absolute = WaveField(Range(3), Range(2), Range(1), Range(1), absolute=True)

    assert plain(xp, yp).min() < 0
    assert absolute(xp, yp).min() >= 0
    np.testing.assert_allclose(absolute(xp, yp), np.abs(plain(xp, yp)))


def test_preserves_input_shape():
    field = WaveField(Range(1), Range(1), Range(1), Range(1))
    assert field(np.zeros((3, 5)), np.zeros((3, 5))).shape == (3, 5)


def test_from_config():
    config = WaveConfig(fx="1,2", fy=3, ax=0.5, ay="0,1", absolute=True)
    field = WaveField.from_config(config)
    assert field.absolute

    xp = np.array([0.1, 0.6])
    yp = np.array([0.3, 0.9])
    np.testing.assert_allclose(synthesize_heights(config, xp, yp), field(xp, yp))


@pytest.mark.parametrize("f", [0.0, 1.0, 2.0])
def test_integer_frequency_vanishes_on_grid_corners(f):
    field = WaveField(Range(f), Range(f), Range(1), Range(1))
    np.testing.assert_allclose(field([0.0, 1.0], [1.0, 0.0]), [0.0, 0.0], atol=1e-12)
