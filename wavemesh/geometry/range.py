"""Linear interpolation ranges for frequency and amplitude parameters."""

from __future__ import annotations

import math

import numpy as np


class Range:
    """Closed interval [start, end] evaluated as a linear interpolant over [0, 1].

    A range parametrizes a quantity that sweeps across the grid: evaluating it
    at a normalized coordinate t returns ``start + t * (end - start)``.

    Args:
        start: Value at t = 0.
        end: Value at t = 1. If None, the range is constant (end = start).

    Raises:
        ValueError: If either endpoint is not a finite number.

    Example:
        >>> r = Range(10.0, 100.0)
        >>> r(0.5)
        55.0
        >>> Range.parse("2.5")
        Range(start=2.5, end=2.5)
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: float = 0.0, end: float | None = None):
        start = float(start)
        end = start if end is None else float(end)

        if not (math.isfinite(start) and math.isfinite(end)):
            raise ValueError(f"Range endpoints must be finite, got ({start}, {end})")

        self._start = start
        self._end = end

    @classmethod
    def constant(cls, value: float) -> Range:
        """Create a range with the same value at both ends.

        Args:
            value: Constant value.

        Returns:
            Range with start == end == value.
        """
        return cls(value, value)

    @classmethod
    def parse(cls, text: str) -> Range:
        """Parse a range from ``"a"`` or ``"a,b"``.

        Args:
            text: A single number for a constant range, or two comma-separated
                numbers for a linear sweep.

        Returns:
            Parsed Range.

        Raises:
            ValueError: If the text is not one or two comma-separated numbers.
        """
        parts = [p.strip() for p in str(text).split(",")]
        if len(parts) not in (1, 2) or not all(parts):
            raise ValueError(f"Expected 'a' or 'a,b', got {text!r}")

        try:
            values = [float(p) for p in parts]
        except ValueError as e:
            raise ValueError(f"Invalid number in range {text!r}") from e

        return cls(*values)

    @classmethod
    def coerce(cls, value: Range | float | str | None) -> Range | None:
        """Convert numbers and strings to a Range, passing None through."""
        if value is None or isinstance(value, Range):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls.constant(value)

    @property
    def start(self) -> float:
        """Value at t = 0."""
        return self._start

    @property
    def end(self) -> float:
        """Value at t = 1."""
        return self._end

    @property
    def is_null(self) -> bool:
        """Return True if both endpoints are zero (the "unset" sentinel)."""
        return self._start == 0.0 and self._end == 0.0

    @property
    def is_constant(self) -> bool:
        """Return True if the range does not vary."""
        return self._start == self._end

    def max(self) -> float:
        """Return the larger endpoint."""
        return max(self._start, self._end)

    def __call__(self, t: float | np.ndarray) -> float | np.ndarray:
        """Evaluate the linear interpolant at normalized coordinate(s) t."""
        return self._start + t * (self._end - self._start)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __str__(self) -> str:
        return f"[{self._start:g};{self._end:g}]"

    def __repr__(self) -> str:
        return f"Range(start={self._start}, end={self._end})"
