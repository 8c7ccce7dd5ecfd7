"""
Tests for file service — critical for safe file deletion.
These tests verify files are moved to trash (not permanently deleted).
"""
import sys
import pytest
from unittest import mock
from twinfinder.services import file_service
from twinfinder.services.file_service import FileService


class TestMoveToTrash:
    """Test safe file deletion via system trash."""

    def test_moves_file_to_trash(self, tmp_path):
        """
        File must disappear from its original location after move_to_trash().
        The trash location itself is OS-dependent and not checked.
        """
        test_file = tmp_path / "test.txt"
        test_file.write_text("content to delete")

        assert FileService.move_to_trash(str(test_file)) is True
        assert not test_file.exists()

    def test_returns_false_for_nonexistent_file(self, tmp_path):
        assert FileService.move_to_trash(str(tmp_path / "does_not_exist.txt")) is False

    def test_returns_false_when_backend_fails(self, tmp_path):
        test_file = tmp_path / "stuck.txt"
        test_file.write_text("content")

        with mock.patch.object(file_service, "send2trash", side_effect=OSError("no trash")):
            assert FileService.move_to_trash(str(test_file)) is False

        assert test_file.exists()


class TestTrashSupported:

    @pytest.mark.parametrize("platform", ["win32", "darwin"])
    def test_native_platforms_supported(self, platform, monkeypatch):
        monkeypatch.setattr(sys, "platform", platform)
        assert FileService.trash_supported() is True

    def test_linux_without_home_unsupported(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("HOME", str(tmp_path / "no_such_home"))
        assert FileService.trash_supported() is False

    def test_linux_with_writable_home_supported(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert FileService.trash_supported() is True
