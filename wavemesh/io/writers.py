"""Mesh export utilities."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import trimesh
from trimesh.exchange.obj import export_obj

from wavemesh.exceptions import MeshWriteError
from wavemesh.mesh.builder import WaveMeshes
from wavemesh.mesh.data import TriangleMesh

SURFACE_SUFFIX = "_surf"

# Material records trimesh emits for textured meshes; no .mtl file is written.
_MATERIAL_PREFIXES = ("mtllib ", "usemtl ")


def to_trimesh(mesh: TriangleMesh) -> trimesh.Trimesh:
    """Convert to a trimesh.Trimesh without merging or reordering vertices.

    Args:
        mesh: Mesh to convert. UVs, if present, become texture visuals.

    Returns:
        trimesh.Trimesh sharing the same vertex and face order.
    """
    visual = None
    if mesh.has_uv:
        visual = trimesh.visual.TextureVisuals(uv=np.array(mesh.uv))

    return trimesh.Trimesh(
        vertices=np.array(mesh.vertices),
        faces=np.array(mesh.faces),
        visual=visual,
        process=False,
    )


def save_mesh(mesh: TriangleMesh, path: str | Path) -> Path:
    """Save mesh to a Wavefront OBJ file.

    Vertex positions and faces are always written; per-vertex UVs are
    written when the mesh has them. Normals and material references are
    not written.

    Args:
        mesh: Mesh to save.
        path: Path for output file (typically .obj extension).

    Returns:
        Path of the written file.

    Raises:
        MeshWriteError: If the mesh has UVs but the exporter produced no
            texture coordinates.

    Example:
        >>> from wavemesh.io import save_mesh
        >>> save_mesh(meshes.surface, "output/wave_surf.obj")
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    text = export_obj(
        to_trimesh(mesh),
        include_normals=False,
        include_texture=mesh.has_uv,
    )
    lines = [
        line for line in text.splitlines() if not line.startswith(_MATERIAL_PREFIXES)
    ]
    if mesh.has_uv and not any(line.startswith("vt ") for line in lines):
        raise MeshWriteError(
            f"Texture coordinates were not exported for {path}; "
            "trimesh needs Pillow to write UVs"
        )

    path.write_text("\n".join(lines) + "\n")
    return path


def wave_mesh_paths(basename: str | Path) -> tuple[Path, Path]:
    """Return (surface_path, volume_path) for an output base name.

    Args:
        basename: Output base name without extension, e.g. "out/mesh".

    Returns:
        Paths ``<basename>_surf.obj`` and ``<basename>.obj``.
    """
    basename = Path(basename)
    surface_path = basename.with_name(basename.name + SURFACE_SUFFIX + ".obj")
    volume_path = basename.with_name(basename.name + ".obj")
    return surface_path, volume_path


def save_wave_meshes(meshes: WaveMeshes, basename: str | Path) -> tuple[Path, Path]:
    """Save the surface and volume meshes of a build.

    Args:
        meshes: Result of WaveMeshBuilder.build().
        basename: Output base name without extension.

    Returns:
        Tuple of (surface_path, volume_path).

    Example:
        >>> save_wave_meshes(meshes, "output/wave")
        (PosixPath('output/wave_surf.obj'), PosixPath('output/wave.obj'))
    """
    surface_path, volume_path = wave_mesh_paths(basename)
    save_mesh(meshes.surface, surface_path)
    save_mesh(meshes.volume, volume_path)
    return surface_path, volume_path
