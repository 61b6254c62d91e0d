"""Shared fixtures for wavemesh tests."""

import logging

import pytest

from wavemesh import WaveConfig, WaveMeshBuilder


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger("wavemesh")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def small_config():
    """4x4 grid with constant unit frequency and amplitude."""
    return WaveConfig(nx=4, ny=4, dz=1.0, fx=1, ax=1, ay=1)


@pytest.fixture
def small_meshes(small_config):
    return WaveMeshBuilder.from_config(small_config).build()


@pytest.fixture
def sweep_builder():
    """Non-square grid with swept frequency and amplitude."""
    return (
        WaveMeshBuilder()
        .set_size(3.0, 2.0, 0.25)
        .set_samples(17, 9)
        .set_frequency("1,4", 2)
        .set_amplitude("0,2", 0.5)
    )
