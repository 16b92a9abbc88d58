"""Tests for the command line entry point."""

import numpy as np
import pytest

from treelights.cli import build_parser, main
from treelights.io.exporter import read_sequence


@pytest.fixture
def coords_file(tmp_path, cone_tree):
    path = tmp_path / "coords.csv"
    np.savetxt(path, cone_tree.coords, delimiter=",")
    return path


class TestCli:
    def test_defaults(self):
        args = build_parser().parse_args(["snake"])
        assert args.length == 1000
        assert str(args.coords).endswith("coords_2021.csv")
        assert args.output is None

    def test_list(self, capsys):
        assert main(["--list"]) == 0
        out = capsys.readouterr().out.split()
        assert "barber-pole" in out
        assert len(out) == 8

    def test_unknown_effect_is_not_fatal(self, capsys, coords_file):
        assert main(["disco", str(coords_file)]) == 0
        assert "Unknown effect: disco" in capsys.readouterr().out

    def test_stdout_csv(self, capsys, coords_file):
        assert main(["barber-pole", str(coords_file), "--len", "200"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("FRAME_ID,R_0,G_0,B_0")
        assert len(lines) == 201
        assert len(lines[1].split(",")) == 1 + 3 * 250

    def test_output_file(self, tmp_path, coords_file):
        out = tmp_path / "seq.csv"
        assert main(["twinkle", str(coords_file), "--len", "50", "-o", str(out), "-j", "2"]) == 0
        assert read_sequence(out).shape == (50, 250, 3)

    def test_too_short_reports_error(self, capsys, coords_file):
        assert main(["fall-down", str(coords_file), "--len", "10"]) == 1
        captured = capsys.readouterr()
        assert "too short" in captured.err
        assert captured.out == ""

    def test_missing_coords(self, capsys, tmp_path):
        assert main(["snake", str(tmp_path / "missing.csv")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_effect_required(self):
        with pytest.raises(SystemExit):
            main([])
