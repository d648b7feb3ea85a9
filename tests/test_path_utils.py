"""Tests for path eligibility rules."""

import pytest
from pathlib import Path
from image_inverter.path_utils import (
    is_hidden,
    is_system_file,
    normalize_extensions,
)


class TestIsHidden:
    """Tests for is_hidden function."""

    def test_unix_hidden_files(self):
        """Test Unix-style hidden files (starting with dot)."""
        assert is_hidden(Path(".hidden"))
        assert is_hidden(Path(".DS_Store"))
        assert is_hidden(Path(".photo.jpg"))

    def test_regular_files_not_hidden(self):
        """Test that regular files are not hidden."""
        assert not is_hidden(Path("photo.jpg"))
        assert not is_hidden(Path("dir/.config/photo.jpg"))


class TestIsSystemFile:
    """Tests for is_system_file function."""

    def test_system_files(self):
        assert is_system_file(Path("Thumbs.db"))
        assert is_system_file(Path("THUMBS.DB"))  # Case insensitive
        assert is_system_file(Path("desktop.ini"))

    def test_regular_files(self):
        assert not is_system_file(Path("photo.png"))


class TestNormalizeExtensions:
    """Tests for normalize_extensions function."""

    def test_adds_dot_and_lowercases(self):
        assert normalize_extensions(["JPG", ".Png", "jpeg"]) == {".jpg", ".png", ".jpeg"}

    def test_drops_blank_entries(self):
        assert normalize_extensions(["", "  ", ".jpg"]) == {".jpg"}

    @pytest.mark.parametrize("ext", [" .jpg", ".jpg ", "jpg"])
    def test_strips_whitespace(self, ext):
        assert normalize_extensions([ext]) == {".jpg"}
