"""Tests for the command-line front end."""

import logging

import pytest

from pathtracer import main as cli
from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.world import HittableList
from pathtracer.renderer.settings import ASPECT_RATIO, QUALITY_PRESETS
from pathtracer.scenes import Scene

TINY = ["--width", "8", "--height", "6", "--samples", "1", "--max-depth", "2", "--seed", "3"]


class TestArguments:
    def test_defaults(self):
        args = cli.parse_args([])
        assert args.scene == "random"
        assert args.output == "image.ppm"
        settings = cli.settings_from_args(args)
        assert settings.width == 400
        assert settings.height == int(400 / ASPECT_RATIO)
        assert settings.samples_per_pixel == QUALITY_PRESETS["final"]["samples_per_pixel"]
        assert settings.nearest_hit and settings.use_bvh

    def test_quality_with_override(self):
        args = cli.parse_args(["--quality", "preview", "--max-depth", "3"])
        settings = cli.settings_from_args(args)
        assert settings.samples_per_pixel == QUALITY_PRESETS["preview"]["samples_per_pixel"]
        assert settings.max_depth == 3

    def test_flags(self):
        args = cli.parse_args(["--legacy-bvh", "--no-bvh", "--flat-bvh", "--processes",
                               "--workers", "2"])
        settings = cli.settings_from_args(args)
        assert settings.flat_bvh is True
        assert settings.nearest_hit is False
        assert settings.use_bvh is False
        assert settings.use_processes is True
        assert settings.workers == 2

    def test_processes_help_explains_threads(self, capsys):
        with pytest.raises(SystemExit):
            cli.parse_args(["--help"])
        out = " ".join(capsys.readouterr().out.split())
        assert "--processes" in out
        assert "interpreter lock" in out

    def test_unknown_scene_rejected(self):
        with pytest.raises(SystemExit):
            cli.parse_args(["--scene", "nope"])


class TestMain:
    def test_renders_ppm(self, tmp_path, capsys):
        out = tmp_path / "out.ppm"
        code = cli.main(["--scene", "glowing_sphere", *TINY, "-o", str(out)])

        assert code == 0
        lines = out.read_text().splitlines()
        assert lines[:3] == ["P3", "8 6", "255"]
        assert len(lines) == 3 + 8 * 6
        err = capsys.readouterr().err
        assert "Rendering information" in err
        assert "Done!" in err

    def test_completion_time_reported_once(self, tmp_path, capsys, caplog):
        caplog.set_level(logging.INFO)
        out = tmp_path / "out.ppm"
        assert cli.main(["--scene", "glowing_sphere", "--flat-bvh", *TINY, "-o", str(out)]) == 0

        logged = [r for r in caplog.records if "Rendering completed" in r.getMessage()]
        assert len(logged) == 1
        assert "Rendering completed" not in capsys.readouterr().err

    def test_renders_png(self, tmp_path):
        out = tmp_path / "out.png"
        assert cli.main(["--scene", "simple_light", *TINY, "-o", str(out)]) == 0
        assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_seeded_runs_match(self, tmp_path):
        first = tmp_path / "a.ppm"
        second = tmp_path / "b.ppm"
        cli.main(["--scene", "glowing_sphere", *TINY, "--workers", "1", "-o", str(first)])
        cli.main(["--scene", "glowing_sphere", *TINY, "--workers", "3", "-o", str(second)])
        assert first.read_text() == second.read_text()

    def test_invalid_settings_exit_code(self, tmp_path, capsys):
        code = cli.main(["--width", "1", "-o", str(tmp_path / "x.ppm")])
        assert code == 2
        assert "error:" in capsys.readouterr().err
        assert not (tmp_path / "x.ppm").exists()

    def test_bvh_error_exit_code(self, tmp_path, monkeypatch, capsys):
        def unbounded_scene(name, rng=None, aspect_ratio=ASPECT_RATIO):
            camera = Camera(Vector3(0, 0, 1), Vector3(0, 0, 0), Vector3(0, 1, 0),
                            90.0, aspect_ratio)
            return Scene(HittableList([HittableList()]), camera, None)

        monkeypatch.setattr(cli, "build_scene", unbounded_scene)
        out = tmp_path / "x.ppm"
        code = cli.main([*TINY, "-o", str(out)])

        assert code == 1
        assert "unbounded geometry in BVH" in capsys.readouterr().err
        assert not out.exists()
