"""Tests for the qwsvg CLI."""

import logging

import pytest
import yaml
from typer.testing import CliRunner

from qwsvg import __version__
from qwsvg.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI installs its own handler on the qwsvg logger; undo it."""
    logger = logging.getLogger("qwsvg")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield
    logger.handlers, logger.level, logger.propagate = saved


def write_scene(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "width": 40,
                "height": 40,
                "elements": [{"shape": "circle", "args": [20, 20, 5]}],
            }
        )
    )
    return path


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_render_to_stdout(tmp_path):
    result = runner.invoke(app, ["render", str(write_scene(tmp_path))])
    assert result.exit_code == 0, result.output
    assert '<circle cx="20" cy="20" r="5" />' in result.output
    assert 'width="40" height="40"' in result.output


def test_render_to_file(tmp_path):
    out = tmp_path / "out.svg"
    result = runner.invoke(app, ["render", str(write_scene(tmp_path)), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "<circle" in out.read_text(encoding="utf-8")


def test_render_missing_scene(tmp_path):
    result = runner.invoke(app, ["render", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "Error: Scene file not found" in result.output
