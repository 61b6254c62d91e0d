"""Wave surface mesh generation over a regular grid."""

from __future__ import annotations

import numpy as np

from wavemesh.config import WaveConfig
from wavemesh.exceptions import MeshGenerationError
from wavemesh.fields.waves import WaveField
from wavemesh.mesh.data import TriangleMesh
from wavemesh.mesh.grid import GridSampling, triangulate_grid
from wavemesh.mesh.transform import (
    arclength_uv,
    grid_uv,
    normalize_uv,
    shift_to_floor,
)


class SurfaceMesh:
    """Height-field surface generator for a resolved wave configuration.

    Runs grid sampling, height synthesis, floor normalization, UV mapping
    and triangulation in one forward pass.

    Args:
        config: Resolved wave configuration.

    Example:
        >>> from wavemesh import WaveConfig
        >>> surface = SurfaceMesh(WaveConfig(nx=4, fx=1)).generate()
        >>> surface.n_vertices, surface.n_faces
        (16, 18)
    """

    def __init__(self, config: WaveConfig):
        self._config = config
        self._grid = GridSampling(config.nx, config.ny, config.dx, config.dy)
        self._field = WaveField.from_config(config)
        self._mesh: TriangleMesh | None = None

    @property
    def config(self) -> WaveConfig:
        """Return the configuration used for generation."""
        return self._config

    @property
    def grid(self) -> GridSampling:
        """Return the grid sampling."""
        return self._grid

    @property
    def field(self) -> WaveField:
        """Return the height field."""
        return self._field

    @property
    def mesh(self) -> TriangleMesh | None:
        """Return the generated mesh, or None if not yet generated."""
        return self._mesh

    def generate(self) -> TriangleMesh:
        """Generate the surface mesh.

        Returns:
            Surface mesh with nx*ny vertices, 2*(nx-1)*(ny-1) faces and UVs.

        Raises:
            MeshGenerationError: If the synthesized heights are not finite.
        """
        config = self._config
        xp, yp = self._grid.normalized_coords()

        try:
            heights = shift_to_floor(self._field(xp, yp), config.dz)
        except ValueError as e:
            raise MeshGenerationError(f"Height synthesis failed: {e}") from e

        vertices = np.column_stack([self._grid.positions(), heights])

        if config.arclength_uv:
            uv = arclength_uv(vertices, config.nx, config.ny)
        else:
            uv = grid_uv(xp, yp)
        if config.normalize_uv:
            uv = normalize_uv(uv)

        faces = triangulate_grid(config.nx, config.ny)

        self._mesh = TriangleMesh(vertices, faces, uv=uv, name="surface")
        return self._mesh

    def get_mesh_info(self) -> dict:
        """Return information about the generated surface.

        Returns:
            Dictionary with surface statistics.

        Raises:
            MeshGenerationError: If the mesh has not been generated yet.
        """
        if self._mesh is None:
            raise MeshGenerationError("Mesh has not been generated yet")

        heights = self._mesh.vertices[:, 2]
        uv = self._mesh.uv
        return {
            "n_vertices": self._mesh.n_vertices,
            "n_faces": self._mesh.n_faces,
            "height_range": (float(heights.min()), float(heights.max())),
            "uv_min": tuple(float(v) for v in uv.min(axis=0)),
            "uv_max": tuple(float(v) for v in uv.max(axis=0)),
        }


def generate_surface_mesh(config: WaveConfig) -> TriangleMesh:
    """Convenience function to generate a wave surface mesh.

    Args:
        config: Resolved wave configuration.

    Returns:
        Surface mesh with UVs.
    """
    return SurfaceMesh(config).generate()
