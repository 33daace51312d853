# tests/test_selector.py
"""Tests for the fzf-backed archive picker."""

import subprocess

import pytest

from imgarchive.errors import ArchiveIOError
from imgarchive.selector import FzfSelector, fzf


class TestFzfSelector:
    """Test FzfSelector against a mocked fzf."""

    def test_module_level_instance(self):
        assert isinstance(fzf, FzfSelector)
        assert fzf.executable == "fzf"

    def test_feeds_newline_joined_candidates(self, mocker):
        """Candidates should go to fzf on stdin, one per line."""
        mock_run = mocker.patch(
            "subprocess.run",
            return_value=subprocess.CompletedProcess([], 0, stdout="b.tar\n"),
        )

        FzfSelector()(["a.tar", "b.tar"])

        assert mock_run.call_args[0][0] == ["fzf", "--height=100%"]
        assert mock_run.call_args[1]["input"] == "a.tar\nb.tar"
        assert mock_run.call_args[1]["stdout"] is subprocess.PIPE
        assert mock_run.call_args[1]["text"] is True

    def test_returns_selection(self, mocker):
        mocker.patch(
            "subprocess.run",
            return_value=subprocess.CompletedProcess([], 0, stdout="web.tar\n"),
        )

        assert FzfSelector()(["web.tar"]) == "web.tar"

    def test_returns_first_of_several(self, mocker):
        mocker.patch(
            "subprocess.run",
            return_value=subprocess.CompletedProcess([], 0, stdout="a.tar\nb.tar\n"),
        )

        assert FzfSelector()(["a.tar", "b.tar"]) == "a.tar"

    @pytest.mark.parametrize("code", [1, 130])
    def test_abort_returns_none(self, mocker, code):
        """No match and Esc/Ctrl-C should both mean abort."""
        mocker.patch(
            "subprocess.run",
            return_value=subprocess.CompletedProcess([], code, stdout=""),
        )

        assert FzfSelector()(["web.tar"]) is None

    def test_empty_output_returns_none(self, mocker):
        mocker.patch(
            "subprocess.run",
            return_value=subprocess.CompletedProcess([], 0, stdout=""),
        )

        assert FzfSelector()([]) is None

    def test_unexpected_exit_raises(self, mocker):
        mocker.patch(
            "subprocess.run",
            return_value=subprocess.CompletedProcess([], 2, stdout=""),
        )

        with pytest.raises(ArchiveIOError) as exc_info:
            FzfSelector()(["web.tar"])
        assert "status 2" in str(exc_info.value)

    def test_missing_fzf_raises(self, mocker):
        mocker.patch("subprocess.run", side_effect=FileNotFoundError("fzf"))

        with pytest.raises(ArchiveIOError) as exc_info:
            FzfSelector()(["web.tar"])
        assert "fzf not found" in str(exc_info.value)

    def test_custom_executable_and_height(self, mocker):
        mock_run = mocker.patch(
            "subprocess.run",
            return_value=subprocess.CompletedProcess([], 0, stdout="web.tar\n"),
        )

        FzfSelector(executable="sk", height="40%")(["web.tar"])

        assert mock_run.call_args[0][0] == ["sk", "--height=40%"]
