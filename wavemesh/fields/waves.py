"""Sinusoidal height-field synthesis."""

from __future__ import annotations

import numpy as np

from wavemesh.config import WaveConfig
from wavemesh.geometry.range import Range


class WaveField:
    """Height field built from two frequency-swept sinusoids.

    Evaluated at normalized grid coordinates (xp, yp) in [0, 1]^2:

        A  = ax(xp) + ay(yp)
        Sx = sin(2*pi * fx(xp) * xp)
        Sy = sin(2*pi * fy(yp) * yp)
        h  = A * (Sx + Sy)        or  A * |Sx + Sy|  if absolute

    The frequency ranges are evaluated at the same coordinate as the point
    itself, so the frequency sweeps across the grid.

    Args:
        fx: Frequency range along x.
        fy: Frequency range along y.
        ax: Amplitude range along x.
        ay: Amplitude range along y.
        absolute: Use the absolute value of the sinusoid sum.

    Example:
        >>> field = WaveField(Range(1), Range(1), Range(1), Range(1))
        >>> heights = field(xp, yp)
    """

    def __init__(
        self,
        fx: Range,
        fy: Range,
        ax: Range,
        ay: Range,
        absolute: bool = False,
    ):
        self._fx = fx
        self._fy = fy
        self._ax = ax
        self._ay = ay
        self._absolute = absolute

    @classmethod
    def from_config(cls, config: WaveConfig) -> WaveField:
        """Create a field from a resolved WaveConfig.

        Args:
            config: Resolved configuration.

        Returns:
            New WaveField instance.
        """
        return cls(config.fx, config.fy, config.ax, config.ay, config.absolute)

    @property
    def absolute(self) -> bool:
        """Return True if the absolute sinusoid variant is used."""
        return self._absolute

    def amplitude(self, xp: np.ndarray, yp: np.ndarray) -> np.ndarray:
        """Amplitude A(xp, yp) = ax(xp) + ay(yp)."""
        return self._ax(np.asarray(xp, dtype=float)) + self._ay(
            np.asarray(yp, dtype=float)
        )

    def oscillation(self, xp: np.ndarray, yp: np.ndarray) -> np.ndarray:
        """Sinusoid sum Sx + Sy, without amplitude."""
        xp = np.asarray(xp, dtype=float)
        yp = np.asarray(yp, dtype=float)
        sx = np.sin(2.0 * np.pi * self._fx(xp) * xp)
        sy = np.sin(2.0 * np.pi * self._fy(yp) * yp)
        return sx + sy

    def __call__(self, xp: np.ndarray, yp: np.ndarray) -> np.ndarray:
        """Evaluate heights at normalized coordinates.

        Args:
            xp: Normalized x-coordinates, any shape.
            yp: Normalized y-coordinates, same shape as xp.

        Returns:
            Heights with the shape of the inputs.
        """
        s = self.oscillation(xp, yp)
        if self._absolute:
            s = np.abs(s)
        return self.amplitude(xp, yp) * s

    def __repr__(self) -> str:
        return (
            f"WaveField(fx={self._fx}, fy={self._fy}, ax={self._ax}, "
            f"ay={self._ay}, absolute={self._absolute})"
        )


def synthesize_heights(
    config: WaveConfig,
    xp: np.ndarray,
    yp: np.ndarray,
) -> np.ndarray:
    """Convenience function to evaluate the configured wave field.

    Args:
        config: Resolved configuration.
        xp: Normalized x-coordinates.
        yp: Normalized y-coordinates.

    Returns:
        Raw heights before floor normalization.
    """
    return WaveField.from_config(config)(xp, yp)
