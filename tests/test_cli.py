#!/usr/bin/env python3
"""Tests for CLI argument parsing and main entry points."""

import os
import sys
import pytest
import requests
from unittest.mock import patch

from catbox_uploader import __version__
from catbox_uploader.catbox_uploader import main, run


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep tests from installing file handlers on the root logger."""
    with patch("catbox_uploader.catbox_uploader.setup_logging") as mock_setup:
        yield mock_setup


def _write_userhash(path, token):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write(token)


class TestVersionFlag:
    """Tests for --version flag."""

    def test_version_flag(self, capsys):
        """Should print version and exit."""
        with pytest.raises(SystemExit) as exc_info:
            with patch.object(sys, "argv", ["catbox-uploader", "--version"]):
                main()
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_version_returns_exit_code(self, capsys):
        """run() reports --version through its return value."""
        assert run(["--version"]) == 0
        assert f"catbox-uploader {__version__}" in capsys.readouterr().out


class TestHelpFlag:
    """Tests for --help flag."""

    def test_help_flag(self, capsys):
        """Should print help and exit 0."""
        assert run(["--help"]) == 0
        out = capsys.readouterr().out
        assert "usage:" in out.lower()
        assert '"1h", "12h", "24h", "72h"' in out

    def test_main_exit_code(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0


class TestOptionValidation:
    """Tests for option combinations and usage errors."""

    @pytest.mark.parametrize(
        "argv",
        [
            ["missing.txt", "--anon", "--time", "1h"],
            ["missing.txt", "--userhash", "abc", "--anon"],
            ["missing.txt", "--userhash", "abc", "--time", "24h"],
            ["missing.txt", "--help", "--anon"],
        ],
    )
    @patch("catbox_uploader.catbox_uploader.handle_upload_command")
    def test_conflicting_options(self, mock_upload, argv, caplog):
        """Rejected before the file is even looked at."""
        assert run(argv) == 1
        mock_upload.assert_not_called()
        assert "Only one option" in caplog.text
        assert "File does not exist" not in caplog.text

    def test_unknown_option_exits_1(self, caplog):
        assert run(["file.txt", "--bogus"]) == 1
        assert "unrecognized arguments" in caplog.text

    def test_missing_option_value_exits_1(self, caplog):
        assert run(["file.txt", "--time"]) == 1

    def test_no_file_path(self, userhash_path, caplog):
        assert run([]) == 1
        assert "No file path specified" in caplog.text

    def test_anon_without_file(self, userhash_path, caplog):
        assert run(["--anon"]) == 1
        assert "No file path specified" in caplog.text

    @patch.object(requests.Session, "post")
    def test_invalid_time_option(self, mock_post, photo_file, userhash_path, caplog):
        assert run([photo_file, "--time", "2h"]) == 1
        assert "Invalid time option" in caplog.text
        mock_post.assert_not_called()

    def test_file_not_found(self, tmp_path, userhash_path, caplog):
        assert run([str(tmp_path / "missing.txt"), "--anon"]) == 1
        assert "File does not exist." in caplog.text


class TestSaveUserhash:
    """Tests for --userhash without a file."""

    def test_saves_token(self, userhash_path, capsys):
        assert run(["--userhash", "abc123"]) == 0
        with open(userhash_path) as f:
            assert f.read() == "abc123"
        assert "saved as default" in capsys.readouterr().out

    def test_overwrites_existing_token(self, userhash_path):
        _write_userhash(userhash_path, "old")
        assert run(["--userhash", "new"]) == 0
        with open(userhash_path) as f:
            assert f.read() == "new"

    def test_empty_token_rejected(self, userhash_path):
        assert run(["--userhash", ""]) == 1

    @patch("builtins.input")
    def test_empty_token_with_file_rejected(self, mock_input, photo_file, userhash_path, fake_catbox, caplog):
        """An empty userhash is not mistaken for no userhash at all."""
        assert run([photo_file, "--userhash", ""]) == 1
        assert "must not be empty" in caplog.text
        mock_input.assert_not_called()
        assert fake_catbox.calls == []


class TestUpload:
    """End to end upload scenarios with a mocked service."""

    def test_upload_with_stored_userhash(self, photo_file, userhash_path, fake_catbox, capsys):
        _write_userhash(userhash_path, "abc123")
        fake_catbox.text = "https://files.example/photo.png"

        assert run([photo_file]) == 0

        body = fake_catbox.calls[0]["body"]
        assert b'name="reqtype"' in body
        assert b"fileupload" in body
        assert b'name="fileToUpload"; filename="photo.png"' in body
        assert b"x" * 1024 in body
        assert b'name="userhash"' in body
        assert b"abc123" in body
        assert "https://files.example/photo.png" in capsys.readouterr().out

    def test_oversized_litterbox_upload(self, sparse_file, userhash_path, fake_catbox, caplog):
        path = sparse_file("big.iso", 2147483648)

        assert run([path, "--time", "24h"]) == 1

        assert "1GB limit for Litterbox" in caplog.text
        assert fake_catbox.calls == []

    @patch("builtins.input")
    def test_oversized_catbox_upload(self, mock_input, sparse_file, userhash_path, fake_catbox, caplog):
        """No prompts are shown for a file that cannot be uploaded."""
        path = sparse_file("big.bin", 209715201)

        assert run([path]) == 1

        assert "200MB limit for Catbox" in caplog.text
        mock_input.assert_not_called()
        assert fake_catbox.calls == []

    @patch("builtins.input", return_value="n")
    def test_declined_anonymous_upload(self, mock_input, photo_file, userhash_path, fake_catbox, capsys):
        assert run([photo_file]) == 0
        assert "Upload cancelled" in capsys.readouterr().out
        assert fake_catbox.calls == []

    @patch("builtins.input", return_value="y")
    def test_accepted_anonymous_upload(self, mock_input, photo_file, userhash_path, fake_catbox):
        assert run([photo_file]) == 0
        assert b'name="userhash"' not in fake_catbox.calls[0]["body"]

    @patch("builtins.input", return_value="yes")
    def test_explicit_userhash_offered_for_saving(self, mock_input, photo_file, userhash_path, fake_catbox):
        assert run([photo_file, "--userhash", "given"]) == 0
        with open(userhash_path) as f:
            assert f.read() == "given"
        assert b"given" in fake_catbox.calls[0]["body"]

    @patch("builtins.input", side_effect=KeyboardInterrupt)
    def test_interrupt_at_save_prompt_aborts(self, mock_input, photo_file, userhash_path, fake_catbox, caplog):
        """Ctrl+C at the save question ends the run without uploading."""
        assert run([photo_file, "--userhash", "given"]) == 1
        assert "cancelled by user" in caplog.text
        assert fake_catbox.calls == []
        with open(userhash_path) as f:
            assert f.read() == ""

    @patch("builtins.input")
    def test_explicit_userhash_with_stored_default(self, mock_input, photo_file, userhash_path, fake_catbox):
        _write_userhash(userhash_path, "stored")
        assert run([photo_file, "--userhash", "given"]) == 0
        mock_input.assert_not_called()
        body = fake_catbox.calls[0]["body"]
        assert b"given" in body
        assert b"stored" not in body

    @patch("builtins.input")
    def test_anon_upload_ignores_stored(self, mock_input, photo_file, userhash_path, fake_catbox):
        _write_userhash(userhash_path, "stored")
        assert run([photo_file, "--anon"]) == 0
        mock_input.assert_not_called()
        assert b'name="userhash"' not in fake_catbox.calls[0]["body"]

    def test_litterbox_upload(self, photo_file, userhash_path, fake_catbox, capsys):
        fake_catbox.text = "https://litter.catbox.moe/xyz.png"
        assert run([photo_file, "--time", "1h"]) == 0
        assert b"1h" in fake_catbox.calls[0]["body"]
        out = capsys.readouterr().out
        assert "to Litterbox for 1h" in out
        assert "https://litter.catbox.moe/xyz.png" in out

    def test_upload_failure_exits_1(self, photo_file, userhash_path, fake_catbox, caplog):
        _write_userhash(userhash_path, "abc123")
        fake_catbox.status_code = 500
        assert run([photo_file]) == 1
        assert "Error uploading file" in caplog.text

    @patch("catbox_uploader.catbox_uploader.handle_upload_command", side_effect=KeyboardInterrupt)
    def test_keyboard_interrupt(self, mock_upload, photo_file, userhash_path, caplog):
        assert run([photo_file]) == 1
        assert "cancelled by user" in caplog.text
