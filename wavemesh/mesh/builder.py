"""High-level WaveMeshBuilder API for wave surface and volume generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wavemesh.config import DEFAULT_SAMPLES, WaveConfig
from wavemesh.exceptions import MeshGenerationError
from wavemesh.geometry.range import Range
from wavemesh.mesh.data import TriangleMesh
from wavemesh.mesh.extrusion import extrude_surface
from wavemesh.mesh.surface import SurfaceMesh
from wavemesh.mesh.transform import check_closed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WaveMeshes:
    """Result of a build: the surface, its extruded volume and the config."""

    surface: TriangleMesh
    volume: TriangleMesh
    config: WaveConfig


class WaveMeshBuilder:
    """High-level API for building wave surface and volume meshes.

    Orchestrates the full generation workflow:
    1. Resolve configuration (paired ranges and defaults)
    2. Sample the grid and synthesize heights
    3. Move the lowest point to the base altitude
    4. Compute UVs (grid or arclength, optionally normalized)
    5. Triangulate the grid
    6. Extrude the surface into a closed volume

    Example:
        >>> from wavemesh import WaveMeshBuilder
        >>> meshes = (
        ...     WaveMeshBuilder()
        ...     .set_size(10.0, 10.0, 1.0)
        ...     .set_samples(200)
        ...     .set_frequency("10,100", 10)
        ...     .set_amplitude("0,2", 2)
        ...     .build()
        ... )
        >>> from wavemesh.io import save_wave_meshes
        >>> save_wave_meshes(meshes, "output/wave")
    """

    def __init__(self):
        self._size = (1.0, 1.0, 1.0)
        self._samples: tuple[int, int | None] = (DEFAULT_SAMPLES, None)
        self._frequency: tuple[Range | float | str | None, ...] = (None, None)
        self._amplitude: tuple[Range | float | str | None, ...] = (None, None)
        self._absolute = False
        self._arclength_uv = False
        self._normalize_uv = False

        # Generated objects (created during build)
        self._surface_mesh: SurfaceMesh | None = None
        self._result: WaveMeshes | None = None

    @classmethod
    def from_config(cls, config: WaveConfig) -> WaveMeshBuilder:
        """Create a builder preloaded with a resolved configuration.

        Args:
            config: Resolved configuration.

        Returns:
            New WaveMeshBuilder instance.
        """
        builder = (
            cls()
            .set_size(config.dx, config.dy, config.dz)
            .set_samples(config.nx, config.ny)
            .set_frequency(config.fx, config.fy)
            .set_amplitude(config.ax, config.ay)
            .use_absolute(config.absolute)
            .use_arclength_uv(config.arclength_uv)
            .normalize_uv(config.normalize_uv)
        )
        return builder

    @property
    def config(self) -> WaveConfig:
        """Return the resolved configuration for the current settings.

        Raises:
            ConfigurationError: If a parameter is invalid.
        """
        dx, dy, dz = self._size
        nx, ny = self._samples
        fx, fy = self._frequency
        ax, ay = self._amplitude
        return WaveConfig(
            dx=dx,
            dy=dy,
            dz=dz,
            nx=nx,
            ny=ny,
            fx=fx,
            fy=fy,
            ax=ax,
            ay=ay,
            absolute=self._absolute,
            arclength_uv=self._arclength_uv,
            normalize_uv=self._normalize_uv,
        )

    def set_size(self, dx: float, dy: float, dz: float = 1.0) -> WaveMeshBuilder:
        """Set mesh width, height and base altitude.

        Args:
            dx: Extent along x.
            dy: Extent along y.
            dz: Height of the lowest surface point above the base.

        Returns:
            Self for method chaining.
        """
        self._size = (dx, dy, dz)
        return self

    def set_samples(self, nx: int, ny: int | None = None) -> WaveMeshBuilder:
        """Set number of grid samples per axis.

        Args:
            nx: Samples along x.
            ny: Samples along y. Defaults to nx.

        Returns:
            Self for method chaining.
        """
        self._samples = (nx, ny)
        return self

    def set_frequency(
        self,
        fx: Range | float | str | None,
        fy: Range | float | str | None = None,
    ) -> WaveMeshBuilder:
        """Set frequency ranges. An axis left as None takes the other's value.

        Returns:
            Self for method chaining.
        """
        self._frequency = (fx, fy)
        return self

    def set_amplitude(
        self,
        ax: Range | float | str | None,
        ay: Range | float | str | None = None,
    ) -> WaveMeshBuilder:
        """Set amplitude ranges. An axis left as None takes the other's value.

        Returns:
            Self for method chaining.
        """
        self._amplitude = (ax, ay)
        return self

    def use_absolute(self, enabled: bool = True) -> WaveMeshBuilder:
        """Use the absolute-value sinusoid variant."""
        self._absolute = enabled
        return self

    def use_arclength_uv(self, enabled: bool = True) -> WaveMeshBuilder:
        """Compute UVs from cumulative arclength along grid lines."""
        self._arclength_uv = enabled
        return self

    def normalize_uv(self, enabled: bool = True) -> WaveMeshBuilder:
        """Rescale UVs to the unit square."""
        self._normalize_uv = enabled
        return self

    def build(self, validate: bool = True) -> WaveMeshes:
        """Build the surface and volume meshes.

        Args:
            validate: If True, check face counts and that the volume is closed.

        Returns:
            WaveMeshes with the surface, the volume and the resolved config.

        Raises:
            ConfigurationError: If a parameter is invalid.
            MeshGenerationError: If the generated topology is inconsistent.
        """
        config = self.config
        for line in config.describe().splitlines():
            logger.info(line)
        if config.dz <= 0:
            logger.warning(
                "Base altitude %g is not above the volume base; "
                "the solid will be degenerate or inverted",
                config.dz,
            )

        # Step 1: Generate surface
        self._surface_mesh = SurfaceMesh(config)
        surface = self._surface_mesh.generate()
        logger.debug(
            "Surface faces: %d out of %d", surface.n_faces, config.n_surface_faces
        )

        # Step 2: Extrude to closed volume
        volume = extrude_surface(surface, config.nx, config.ny)
        logger.debug(
            "Volume faces: %d out of %d", volume.n_faces, config.n_volume_faces
        )

        if validate:
            self._validate(config, surface, volume)

        self._result = WaveMeshes(surface=surface, volume=volume, config=config)
        return self._result

    @staticmethod
    def _validate(
        config: WaveConfig, surface: TriangleMesh, volume: TriangleMesh
    ) -> None:
        """Check generated topology against the expected counts."""
        if surface.n_faces != config.n_surface_faces:
            raise MeshGenerationError(
                f"Surface has {surface.n_faces} faces, "
                f"expected {config.n_surface_faces}"
            )
        if volume.n_faces != config.n_volume_faces:
            raise MeshGenerationError(
                f"Volume has {volume.n_faces} faces, "
                f"expected {config.n_volume_faces}"
            )

        # Single-row grids produce flat walls with no interior to close.
        if config.nx > 1 and config.ny > 1:
            is_closed, message = check_closed(volume.faces)
            if not is_closed:
                raise MeshGenerationError(f"Volume mesh is not closed: {message}")

    def get_surface_mesh(self) -> SurfaceMesh | None:
        """Return the surface generator (available after build)."""
        return self._surface_mesh

    def get_mesh_info(self) -> dict:
        """Return information about the built meshes.

        Returns:
            Dictionary with configuration and mesh statistics.

        Raises:
            MeshGenerationError: If build() has not been called yet.
        """
        if self._result is None or self._surface_mesh is None:
            raise MeshGenerationError("Meshes have not been built yet")

        config = self._result.config
        info = {
            "size": (config.dx, config.dy, config.dz),
            "samples": (config.nx, config.ny),
            "n_volume_vertices": self._result.volume.n_vertices,
            "n_volume_faces": self._result.volume.n_faces,
        }
        info.update(self._surface_mesh.get_mesh_info())
        return info
