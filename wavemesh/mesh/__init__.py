"""Mesh generation utilities."""

from wavemesh.mesh.builder import WaveMeshBuilder, WaveMeshes
from wavemesh.mesh.data import TriangleMesh
from wavemesh.mesh.extrusion import (
    bottom_cap_faces,
    extrude_surface,
    side_wall_faces,
)
from wavemesh.mesh.grid import GridSampling, triangulate_grid
from wavemesh.mesh.surface import SurfaceMesh, generate_surface_mesh
from wavemesh.mesh.transform import (
    arclength_uv,
    check_closed,
    grid_uv,
    normalize_uv,
    shift_to_floor,
)

__all__ = [
    "WaveMeshBuilder",
    "WaveMeshes",
    "TriangleMesh",
    "GridSampling",
    "triangulate_grid",
    "SurfaceMesh",
    "generate_surface_mesh",
    "bottom_cap_faces",
    "extrude_surface",
    "side_wall_faces",
    "arclength_uv",
    "check_closed",
    "grid_uv",
    "normalize_uv",
    "shift_to_floor",
]
