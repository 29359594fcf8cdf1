"""Tests for the command-line front end."""

import io
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from PIL import Image
from seam_resize.cli import main, DEFAULT_OUTPUT
from seam_resize.io import save_image

from conftest import make_indexed_image


@pytest.fixture
def source_image(tmp_path):
    path = tmp_path / 'input.png'
    save_image(make_indexed_image(6, 8), path)
    return path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    out = tmp_path / 'work'
    out.mkdir()
    monkeypatch.chdir(out)
    return out


def feed_stdin(monkeypatch, text):
    monkeypatch.setattr(sys, 'stdin', io.StringIO(text))


class TestMain:
    def test_prompts_and_writes_default_output(self, source_image, workdir, monkeypatch, capsys):
        feed_stdin(monkeypatch, "5\n4\n")
        assert main([str(source_image)]) == 0

        out = capsys.readouterr().out
        assert "Enter new width: " in out
        assert "Enter new height: " in out
        with Image.open(workdir / DEFAULT_OUTPUT) as img:
            assert img.size == (5, 4)

    def test_dimensions_from_flags(self, source_image, tmp_path):
        output = tmp_path / 'small.png'
        assert main([str(source_image), '--width', '3', '--height', '2',
                     '-o', str(output)]) == 0
        with Image.open(output) as img:
            assert img.size == (3, 2)

    def test_missing_argument_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code != 0

    def test_unreadable_image(self, tmp_path, workdir, capsys):
        assert main([str(tmp_path / 'missing.png'), '--width', '1', '--height', '1']) == 1
        assert "Error" in capsys.readouterr().err
        assert not (workdir / DEFAULT_OUTPUT).exists()

    def test_invalid_dimensions(self, source_image, workdir, monkeypatch, capsys):
        feed_stdin(monkeypatch, "8\n4\n")
        assert main([str(source_image)]) == 1
        assert "Invalid target" in capsys.readouterr().err
        assert not (workdir / DEFAULT_OUTPUT).exists()

    def test_non_integer_dimension(self, source_image, workdir, monkeypatch, capsys):
        feed_stdin(monkeypatch, "wide\n")
        assert main([str(source_image)]) == 1
        assert "integer" in capsys.readouterr().err

    def test_closed_stdin(self, source_image, workdir, monkeypatch):
        feed_stdin(monkeypatch, "")
        assert main([str(source_image)]) == 1

    def test_save_failure(self, source_image, tmp_path):
        output = tmp_path / 'missing-dir' / 'out.png'
        assert main([str(source_image), '--width', '3', '--height', '2',
                     '-o', str(output)]) == 1
