"""wavemesh - procedural sinusoidal wave meshes.

Generates a height-field surface mesh with UVs from two frequency-swept
sinusoids, and extrudes it down to a flat base to form a closed solid.

Example:
    >>> from wavemesh import WaveMeshBuilder
    >>> meshes = (
    ...     WaveMeshBuilder()
    ...     .set_size(10.0, 10.0, 1.0)
    ...     .set_samples(100)
    ...     .set_frequency("10,100", 10)
    ...     .set_amplitude("0,2", 2)
    ...     .build()
    ... )
    >>> from wavemesh.io import save_wave_meshes
    >>> save_wave_meshes(meshes, "wave")
"""

from wavemesh.config import WaveConfig
from wavemesh.exceptions import (
    ConfigurationError,
    MeshGenerationError,
    MeshLoadError,
    MeshWriteError,
    WaveMeshError,
)
from wavemesh.fields import WaveField
from wavemesh.geometry import Range
from wavemesh.mesh import TriangleMesh, WaveMeshBuilder, WaveMeshes

__version__ = "0.1.0"

__all__ = [
    # Main API
    "WaveMeshBuilder",
    "WaveMeshes",
    "WaveConfig",
    "WaveField",
    "Range",
    "TriangleMesh",
    # Exceptions
    "WaveMeshError",
    "ConfigurationError",
    "MeshGenerationError",
    "MeshLoadError",
    "MeshWriteError",
]
