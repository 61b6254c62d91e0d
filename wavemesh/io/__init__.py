"""I/O utilities for reading and writing mesh files."""

from wavemesh.io.readers import load_mesh
from wavemesh.io.writers import (
    save_mesh,
    save_wave_meshes,
    to_trimesh,
    wave_mesh_paths,
)

__all__ = [
    "load_mesh",
    "save_mesh",
    "save_wave_meshes",
    "to_trimesh",
    "wave_mesh_paths",
]
