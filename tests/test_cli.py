"""
Tests for the license-headers command.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from license_headers import __version__, cli as cli_module
from license_headers.cli import STATUS_STYLES, cli
from license_headers.exceptions import GitStatusError, HeaderPatternError
from license_headers.processor import FileStatus


@pytest.fixture
def runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project(workdir):
    """A small source tree in the current directory."""
    (workdir / "src").mkdir()
    (workdir / "src" / "app.ts").write_text("run();\n", encoding="utf-8")
    (workdir / "src" / "native.cc").write_text(
        "/* Copyright 2020 Someone */\nint x;\n", encoding="utf-8"
    )
    (workdir / "src" / "tool.py").write_text("print(1)\n", encoding="utf-8")
    (workdir / "node_modules").mkdir()
    (workdir / "node_modules" / "dep.ts").write_text("dep();\n", encoding="utf-8")
    return workdir


def output_lines(result):
    return [line for line in result.output.splitlines() if line.strip()]


class TestGlobMode:

    def test_adds_headers(self, runner, project, js_header):
        result = runner.invoke(cli, ["--glob", "src/*"])
        assert result.exit_code == 0, result.output
        assert output_lines(result) == [
            "src/app.ts - ADDED",
            "src/native.cc",
            "src/tool.py",
        ]
        content = (project / "src" / "app.ts").read_text(encoding="utf-8")
        assert content == js_header.content + "\nrun();\n"

    def test_second_run_reports_unchanged(self, runner, project):
        runner.invoke(cli, ["--glob", "src/*.ts"])
        result = runner.invoke(cli, ["--glob", "src/*.ts"])
        assert result.exit_code == 0
        assert output_lines(result) == ["src/app.ts"]

    def test_no_add(self, runner, project):
        result = runner.invoke(cli, ["--glob", "src/*.ts", "--no-add"])
        assert result.exit_code == 0
        assert output_lines(result) == ["src/app.ts"]
        assert (project / "src" / "app.ts").read_text(encoding="utf-8") == "run();\n"

    def test_multiple_globs_are_merged(self, runner, project):
        result = runner.invoke(cli, ["--glob", "**/*.ts", "--glob", "src/app.*"])
        assert result.exit_code == 0
        assert output_lines(result) == ["src/app.ts - ADDED"]
        assert (project / "node_modules" / "dep.ts").read_text(encoding="utf-8") == "dep();\n"

    def test_updates_same_year_header(self, runner, workdir, cpp_header):
        (workdir / "lib.h").write_text("/* Copyright 2023 Old */\n#pragma once\n", encoding="utf-8")
        result = runner.invoke(cli, ["--glob", "*.h"])
        assert result.exit_code == 0
        assert output_lines(result) == ["lib.h - UPDATED"]
        assert (workdir / "lib.h").read_text(encoding="utf-8") == (
            cpp_header.content + "\n#pragma once\n"
        )


class TestGitMode:

    def test_uses_git_status_without_globs(self, runner, project, monkeypatch):
        changed = [str(project / "src" / "app.ts"), str(project / "deleted.ts")]
        monkeypatch.setattr(cli_module, "resolve_files", lambda globs: changed)
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert output_lines(result) == ["src/app.ts - ADDED", "deleted.ts"]

    def test_git_failure_aborts(self, runner, workdir, monkeypatch):
        def fail(globs):
            raise GitStatusError("`git rev-parse --show-toplevel` failed: not a git repository")

        monkeypatch.setattr(cli_module, "resolve_files", fail)
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "not a git repository" in result.output


def test_invalid_header_table_aborts_before_processing(runner, project, monkeypatch):
    def invalid():
        raise HeaderPatternError("License header cannot be caught by any pattern: {}")

    monkeypatch.setattr(cli_module, "validate_license_headers", invalid)
    result = runner.invoke(cli, ["--glob", "src/*.ts"])
    assert result.exit_code == 1
    assert "cannot be caught by any pattern" in result.output
    assert (project / "src" / "app.ts").read_text(encoding="utf-8") == "run();\n"


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_every_status_has_a_style():
    assert set(STATUS_STYLES) == set(FileStatus)
