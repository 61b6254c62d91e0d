"""Tests for the command-line program."""

import pytest

from wavemesh.cli import (
    EXIT_CONFIG,
    EXIT_GENERATION,
    EXIT_OK,
    EXIT_USAGE,
    build_parser,
    main,
)
from wavemesh.geometry import Range


def obj_count(path, prefix):
    with open(path) as f:
        return sum(1 for line in f if line.startswith(prefix))


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert (args.dx, args.dy, args.dz) == (1.0, 1.0, 1.0)
        assert args.nx == 100
        assert args.ny is None
        assert args.fx is None and args.fy is None
        assert args.mesh == "mesh"

    def test_ranges_and_flags(self):
        args = build_parser().parse_args(
            ["-fx", "10,100", "-ay", "2", "-abs", "-arclength", "-normuv", "out"]
        )
        assert args.fx == Range(10.0, 100.0)
        assert args.ay == Range(2.0)
        assert args.absolute and args.arclength_uv and args.normalize_uv
        assert args.mesh == "out"

    def test_negative_scalar_value(self):
        args = build_parser().parse_args(["-z", "-1.5"])
        assert args.dz == -1.5


class TestMain:
    def test_writes_both_meshes(self, tmp_path):
        base = tmp_path / "wave"
        code = main(["-sx", "4", "-fx", "1", "-ax", "1", str(base)])

        assert code == EXIT_OK
        surface = tmp_path / "wave_surf.obj"
        volume = tmp_path / "wave.obj"
        assert obj_count(surface, "v ") == 16
        assert obj_count(surface, "f ") == 18
        assert obj_count(volume, "v ") == 32
        assert obj_count(volume, "f ") == 60

    def test_separate_sample_counts(self, tmp_path):
        code = main(["-sx", "5", "-sy", "3", "-abs", "-arclength", "-normuv",
                     str(tmp_path / "w")])
        assert code == EXIT_OK
        assert obj_count(tmp_path / "w_surf.obj", "v ") == 15
        assert obj_count(tmp_path / "w_surf.obj", "vt ") == 15

    def test_logs_parameters(self, tmp_path, capsys):
        main(["-sx", "3", "-fx", "5", str(tmp_path / "w")])
        out = capsys.readouterr().out
        assert "(nx,ny) = 3,3" in out
        assert "fy in [5;5]" in out

    def test_zero_samples(self, tmp_path, capsys):
        code = main(["-sx", "0", str(tmp_path / "w")])
        assert code == EXIT_CONFIG
        assert list(tmp_path.iterdir()) == []
        err = capsys.readouterr().err
        assert err.startswith("usage: wavemesh")
        assert "nx" in err

    @pytest.mark.filterwarnings("ignore::RuntimeWarning")
    def test_overflowing_amplitude(self, tmp_path, capsys):
        code = main(["-sx", "4", "-ax", "1e308", "-ay", "1e308", str(tmp_path / "w")])
        assert code == EXIT_GENERATION
        assert list(tmp_path.iterdir()) == []
        assert "Height synthesis failed" in capsys.readouterr().err

    def test_export_without_uvs(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(
            "wavemesh.io.writers.export_obj", lambda *args, **kwargs: "v 0 0 0\n"
        )
        code = main(["-sx", "3", str(tmp_path / "w")])
        assert code == EXIT_GENERATION
        assert not (tmp_path / "w_surf.obj").exists()
        assert "Pillow" in capsys.readouterr().err

    def test_name_with_leading_dash(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as excinfo:
            main(["-badname"])
        assert excinfo.value.code == EXIT_USAGE
        assert list(tmp_path.iterdir()) == []

    def test_name_with_leading_dash_after_separator(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as excinfo:
            main(["--", "-badname"])
        assert excinfo.value.code == EXIT_USAGE
        assert "cannot start with -" in capsys.readouterr().err
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.parametrize(
        "argv",
        [["-unknown", "out"], ["-x"], ["-fx", "1,2,3", "out"], ["-sx", "ten", "out"]],
    )
    def test_usage_errors(self, argv, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == EXIT_USAGE
        assert list(tmp_path.iterdir()) == []

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["-h"])
        assert excinfo.value.code == EXIT_OK
        out = capsys.readouterr().out
        assert "-arclength" in out
        assert "Equation" in out
