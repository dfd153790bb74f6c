# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for vernorm.cli module.

Tests each subcommand's output and exit code, plus error reporting.
"""

from __future__ import annotations

import pytest

from vernorm import __version__
from vernorm.cli import main
from vernorm.runtime import FORCE_VERSION_ENV

# All tests in this file are unit tests (fast, no side effects)
pytestmark = pytest.mark.unit


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestNormalizeCommand:
    """Tests for 'vernorm normalize'."""

    def test_prints_semantic_version(self, capsys):
        """Test that the canonical form is printed."""
        assert _run(["normalize", "1.2b1"]) == 0
        assert capsys.readouterr().out == "1.2.0-b1\n"

    def test_omit_pre_release(self, capsys):
        """Test the --omit-pre-release flag."""
        assert _run(["normalize", "1.2.3-beta1", "--omit-pre-release"]) == 0
        assert capsys.readouterr().out == "1.2.3\n"

    def test_unparsable(self, capsys):
        """Test that conversion errors are reported with exit code 1."""
        assert _run(["normalize", "thisIsNotAVersion"]) == 1
        out = capsys.readouterr().out
        assert out.startswith("Error: Cannot convert provided version")

    def test_debug_output(self, capsys):
        """Test that --debug traces the parse."""
        assert _run(["normalize", "1.2b1", "--debug"]) == 0
        out = capsys.readouterr().out
        assert "[VERSION]" in out
        assert out.endswith("1.2.0-b1\n")


class TestCompareCommand:
    """Tests for 'vernorm compare'."""

    @pytest.mark.parametrize(
        "v1, v2, expected",
        [("1.2", "1.2b1", "1"), ("1.0.0-", "1.0", "0"), ("1-beta1", "1", "-1")],
    )
    def test_prints_result(self, capsys, v1, v2, expected):
        """Test that the comparison result is printed."""
        assert _run(["compare", v1, v2]) == 0
        assert capsys.readouterr().out == f"{expected}\n"

    def test_unparsable(self, capsys):
        """Test that errors are reported with exit code 1."""
        assert _run(["compare", "1.0", "nope"]) == 1
        assert "nope" in capsys.readouterr().out


class TestIsSpecificCommand:
    """Tests for 'vernorm is-specific'."""

    def test_specific(self, capsys):
        """Test a pinned version."""
        assert _run(["is-specific", "1.2.3"]) == 0
        assert capsys.readouterr().out == "true\n"

    def test_range(self, capsys):
        """Test a range."""
        assert _run(["is-specific", "^1.2.3"]) == 1
        assert capsys.readouterr().out == "false\n"


class TestCheckPythonCommand:
    """Tests for 'vernorm check-python'."""

    def test_satisfied(self, monkeypatch, no_force_env):
        """Test exit code 0 when the interpreter matches."""
        monkeypatch.setattr("vernorm.runtime.platform.python_version", lambda: "3.11.4")
        assert _run(["check-python", ">=3.10"]) == 0

    def test_mismatch(self, capsys, monkeypatch, no_force_env):
        """Test exit code 1 and the error message on mismatch."""
        monkeypatch.setattr("vernorm.runtime.platform.python_version", lambda: "3.11.4")
        assert _run(["check-python", ">=4"]) == 1
        assert "doesn't match the requirements" in capsys.readouterr().out

    def test_override(self, monkeypatch):
        """Test that FORCE_PYTHON_VERSION makes the check pass."""
        monkeypatch.setenv(FORCE_VERSION_ENV, "1")
        monkeypatch.setattr("vernorm.runtime.platform.python_version", lambda: "3.11.4")
        assert _run(["check-python", ">=4"]) == 0


class TestVersionFlag:
    """Tests for 'vernorm --version'."""

    def test_version(self, capsys):
        """Test that the package version is printed."""
        assert _run(["--version"]) == 0
        assert capsys.readouterr().out == f"vernorm {__version__}\n"
