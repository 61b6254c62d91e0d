"""Tests for OBJ export and import."""

import numpy as np
import pytest

from wavemesh import MeshLoadError, MeshWriteError
from wavemesh.io import load_mesh, save_mesh, save_wave_meshes, wave_mesh_paths


def count_records(path, prefix):
    with open(path) as f:
        return sum(1 for line in f if line.startswith(prefix))


def test_wave_mesh_paths(tmp_path):
    surface_path, volume_path = wave_mesh_paths(tmp_path / "wave")
    assert surface_path == tmp_path / "wave_surf.obj"
    assert volume_path == tmp_path / "wave.obj"


def test_save_wave_meshes(tmp_path, small_meshes):
    surface_path, volume_path = save_wave_meshes(small_meshes, tmp_path / "wave")

    assert surface_path.exists()
    assert volume_path.exists()

    assert count_records(surface_path, "v ") == 16
    assert count_records(surface_path, "vt ") == 16
    assert count_records(surface_path, "f ") == 18

    assert count_records(volume_path, "v ") == 32
    assert count_records(volume_path, "vt ") == 0
    assert count_records(volume_path, "f ") == 60


def test_save_creates_parent_directories(tmp_path, small_meshes):
    path = save_mesh(small_meshes.volume, tmp_path / "nested" / "dir" / "box.obj")
    assert path.exists()


def test_volume_reloads_unchanged(tmp_path, small_meshes):
    _, volume_path = save_wave_meshes(small_meshes, tmp_path / "wave")
    loaded = load_mesh(volume_path)

    assert loaded.name == "wave"
    assert loaded.n_vertices == small_meshes.volume.n_vertices
    np.testing.assert_array_equal(loaded.faces, small_meshes.volume.faces)
    np.testing.assert_allclose(loaded.vertices, small_meshes.volume.vertices, atol=1e-6)


def test_load_missing_file(tmp_path):
    with pytest.raises(MeshLoadError, match="not found"):
        load_mesh(tmp_path / "missing.obj")


def test_no_material_references(tmp_path, small_meshes):
    surface_path, volume_path = save_wave_meshes(small_meshes, tmp_path / "wave")

    for path in (surface_path, volume_path):
        assert count_records(path, "mtllib") == 0
        assert count_records(path, "usemtl") == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["wave.obj", "wave_surf.obj"]


def test_missing_uvs_in_export(tmp_path, small_meshes, monkeypatch):
    monkeypatch.setattr(
        "wavemesh.io.writers.export_obj",
        lambda *args, **kwargs: "mtllib material.mtl\nv 0 0 0\nf 1 1 1\n",
    )
    path = tmp_path / "wave_surf.obj"
    with pytest.raises(MeshWriteError, match="Pillow"):
        save_mesh(small_meshes.surface, path)
    assert not path.exists()


def test_volume_export_needs_no_uvs(tmp_path, small_meshes, monkeypatch):
    monkeypatch.setattr(
        "wavemesh.io.writers.export_obj",
        lambda *args, **kwargs: "v 0 0 0\nf 1 1 1\n",
    )
    path = save_mesh(small_meshes.volume, tmp_path / "wave.obj")
    assert count_records(path, "v ") == 1
