"""Tests for the hyperhtml command line."""

import sys

import pytest
from click.testing import CliRunner

from hyperhtml import config
from hyperhtml.cli import cli

PAGES = '''
from hyperhtml import html_root, text
from hyperhtml.elements import body, h1, li, ul

home = html_root(None, body(h1(text("Home"))))
menu = ul(li(text("a")), li(text("b")))
title = "not renderable"
'''


@pytest.fixture
def app_dir(tmp_path):
    (tmp_path / "cli_sample_pages.py").write_text(PAGES)
    return tmp_path


@pytest.fixture
def runner():
    return CliRunner()


class TestRender:
    def test_render_to_stdout(self, runner, app_dir):
        result = runner.invoke(cli, ["render", "cli_sample_pages:menu", "--app-dir", str(app_dir)])
        assert result.exit_code == 0, result.output
        assert result.output == "<ul>\n    <li>a</li>\n    <li>b</li>\n</ul>\n"

    def test_sys_path_restored(self, runner, app_dir):
        before = list(sys.path)
        runner.invoke(cli, ["render", "cli_sample_pages:menu", "--app-dir", str(app_dir)])
        runner.invoke(cli, ["render", "cli_sample_pages:missing", "--app-dir", str(app_dir)])
        assert sys.path == before

    def test_render_to_file(self, runner, app_dir, tmp_path):
        out = tmp_path / "home.html"
        result = runner.invoke(
            cli, ["render", "cli_sample_pages:home", "--app-dir", str(app_dir), "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert out.read_text().startswith("<!DOCTYPE html>\n<html")

    def test_render_with_config(self, runner, app_dir, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("[tool.hyperhtml]\nindent = 2\n")

        result = runner.invoke(
            cli,
            ["render", "cli_sample_pages:menu", "--app-dir", str(app_dir), "--config", str(project)],
        )
        assert result.exit_code == 0, result.output
        assert result.output == "<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>\n"
        assert config.settings.indent == 2

    @pytest.mark.parametrize(
        "target",
        [
            "cli_sample_pages",
            "cli_sample_pages:missing",
            "cli_sample_pages:title",
            "no_such_module_here:home",
        ],
    )
    def test_bad_target(self, runner, app_dir, target):
        result = runner.invoke(cli, ["render", target, "--app-dir", str(app_dir)])
        assert result.exit_code == 2
        assert "TARGET" in result.output


class TestTags:
    def test_lists_catalog(self, runner):
        result = runner.invoke(cli, ["tags"])
        assert result.exit_code == 0
        names = result.output.split()
        assert "div" in names
        assert "footer" in names
        assert "foorter" not in names
