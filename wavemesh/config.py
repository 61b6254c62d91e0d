"""Wave mesh generation parameters."""

from __future__ import annotations

import math

from wavemesh.exceptions import ConfigurationError
from wavemesh.geometry.range import Range

DEFAULT_FREQUENCY = 10.0
DEFAULT_AMPLITUDE = 1.0
DEFAULT_SAMPLES = 100


def _sample_count(value, name: str, allow_zero: bool = False) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from e
    if count != value:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")

    if count < 0 or (count == 0 and not allow_zero):
        raise ConfigurationError(f"{name} must be positive, got {count}")
    return count


def _finite(value, name: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value}")
    return value


def _as_range(value, name: str) -> Range | None:
    try:
        return Range.coerce(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {name} range: {e}") from e


def _pair(first: Range | None, second: Range | None) -> tuple[Range | None, Range | None]:
    """Fill an unset axis from its sibling."""
    if first is None:
        first = second
    elif second is None:
        second = first
    return first, second


class WaveConfig:
    """Resolved configuration for wave mesh generation.

    All defaults and coupling rules are applied once, after every value is
    known, so the result does not depend on the order parameters were given:

    - if only one of ``fx``/``fy`` (or ``ax``/``ay``) is given, the other axis
      uses the same range;
    - if neither frequency is given, both are the constant 10;
    - if both amplitudes are unset or null, both are the constant 1;
    - if ``ny`` is unset or 0, it equals ``nx``.

    Args:
        dx: Mesh width.
        dy: Mesh height (extent along y).
        dz: Base altitude; the lowest surface point is moved to this height.
        nx: Number of samples along x. Must be positive.
        ny: Number of samples along y. Defaults to ``nx``.
        fx: Frequency range along x (Range, number, or "a,b" string).
        fy: Frequency range along y.
        ax: Amplitude range along x.
        ay: Amplitude range along y.
        absolute: Use ``A * |Sx + Sy|`` instead of ``A * (Sx + Sy)``.
        arclength_uv: Compute UVs from cumulative arclength along grid lines.
        normalize_uv: Rescale each UV axis to [0, 1].

    Raises:
        ConfigurationError: If a parameter is invalid.

    Example:
        >>> config = WaveConfig(nx=4, fx=5)
        >>> config.fy
        Range(start=5.0, end=5.0)
        >>> config.ny
        4
    """

    def __init__(
        self,
        dx: float = 1.0,
        dy: float = 1.0,
        dz: float = 1.0,
        nx: int = DEFAULT_SAMPLES,
        ny: int | None = None,
        fx: Range | float | str | None = None,
        fy: Range | float | str | None = None,
        ax: Range | float | str | None = None,
        ay: Range | float | str | None = None,
        absolute: bool = False,
        arclength_uv: bool = False,
        normalize_uv: bool = False,
    ):
        self._dx = _finite(dx, "dx")
        self._dy = _finite(dy, "dy")
        self._dz = _finite(dz, "dz")

        self._nx = _sample_count(nx, "nx")
        ny = 0 if ny is None else _sample_count(ny, "ny", allow_zero=True)
        self._ny = ny or self._nx

        fx, fy = _pair(_as_range(fx, "fx"), _as_range(fy, "fy"))
        if fx is None:
            fx = fy = Range.constant(DEFAULT_FREQUENCY)
        self._fx, self._fy = fx, fy

        ax, ay = _pair(_as_range(ax, "ax"), _as_range(ay, "ay"))
        if (ax is None or ax.is_null) and (ay is None or ay.is_null):
            ax = ay = Range.constant(DEFAULT_AMPLITUDE)
        self._ax, self._ay = ax, ay

        self._absolute = bool(absolute)
        self._arclength_uv = bool(arclength_uv)
        self._normalize_uv = bool(normalize_uv)

    @property
    def dx(self) -> float:
        """Mesh width."""
        return self._dx

    @property
    def dy(self) -> float:
        """Mesh extent along y."""
        return self._dy

    @property
    def dz(self) -> float:
        """Base altitude of the lowest surface point."""
        return self._dz

    @property
    def nx(self) -> int:
        """Number of samples along x."""
        return self._nx

    @property
    def ny(self) -> int:
        """Number of samples along y."""
        return self._ny

    @property
    def fx(self) -> Range:
        return self._fx

    @property
    def fy(self) -> Range:
        return self._fy

    @property
    def ax(self) -> Range:
        return self._ax

    @property
    def ay(self) -> Range:
        return self._ay

    @property
    def absolute(self) -> bool:
        return self._absolute

    @property
    def arclength_uv(self) -> bool:
        return self._arclength_uv

    @property
    def normalize_uv(self) -> bool:
        return self._normalize_uv

    @property
    def n_vertices(self) -> int:
        """Number of surface vertices (nx * ny)."""
        return self._nx * self._ny

    @property
    def n_surface_faces(self) -> int:
        """Number of surface triangles, two per grid cell."""
        return 2 * (self._nx - 1) * (self._ny - 1)

    @property
    def n_volume_faces(self) -> int:
        """Number of volume triangles: both caps plus the four side walls."""
        return (
            2 * self.n_surface_faces
            + 4 * (self._nx - 1)
            + 4 * (self._ny - 1)
        )

    def describe(self) -> str:
        """Return a multi-line summary of the resolved parameters."""
        return (
            f"(x,y,z) = {self._dx:g},{self._dy:g},{self._dz:g}\n"
            f"(nx,ny) = {self._nx},{self._ny}\n"
            f"fx in {self._fx}, fy in {self._fy}\n"
            f"ax in {self._ax}, ay in {self._ay}"
        )

    def __repr__(self) -> str:
        flags = [
            name
            for name, enabled in (
                ("absolute", self._absolute),
                ("arclength_uv", self._arclength_uv),
                ("normalize_uv", self._normalize_uv),
            )
            if enabled
        ]
        return (
            f"WaveConfig(size=({self._dx}, {self._dy}, {self._dz}), "
            f"samples=({self._nx}, {self._ny}), fx={self._fx}, fy={self._fy}, "
            f"ax={self._ax}, ay={self._ay}, flags={flags})"
        )
