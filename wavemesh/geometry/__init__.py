"""Geometric primitives for wave parametrization."""

from wavemesh.geometry.range import Range

__all__ = ["Range"]
