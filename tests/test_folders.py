"""Tests for directory creation."""

import os

import pytest

from textlog.errors import DirectoryCreationError
from textlog.folders import create_directory_tree


class TestCreateDirectoryTree:
    def test_creates_nested(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        create_directory_tree(str(target))
        assert os.path.isdir(target)

    def test_idempotent(self, tmp_path):
        target = str(tmp_path / "logs")
        create_directory_tree(target)
        create_directory_tree(target)  # should not raise
        assert os.path.isdir(target)

    def test_empty_path_is_noop(self):
        create_directory_tree("")

    def test_blocked_by_file(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(DirectoryCreationError, match="Cannot create log directory"):
            create_directory_tree(str(blocker / "sub"))
