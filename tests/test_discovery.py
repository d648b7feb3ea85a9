"""Tests for image discovery."""

from pathlib import Path

import pytest

from image_inverter.discovery import discover_images
from image_inverter.errors import DiscoveryError
from image_inverter.parallel.tasks import ImageTask


@pytest.fixture
def input_dir(tmp_path):
    """Create an input directory with a mix of eligible and ineligible entries."""
    root = tmp_path / "input_images"
    root.mkdir()
    for name in ["b.png", "a.jpg", "c.JPEG", "notes.txt", ".hidden.jpg", "Thumbs.db", "archive.gif"]:
        (root / name).write_bytes(b"x")
    (root / "subdir.jpg").mkdir()
    return root


class TestDiscoverImages:
    """Tests for discover_images function."""

    def test_yields_only_eligible_images(self, input_dir):
        """Test that only regular, visible image files are yielded."""
        names = [task.name for task in discover_images(input_dir)]
        assert names == ["a.jpg", "b.png", "c.JPEG"]

    def test_tasks_carry_full_path(self, input_dir):
        """Test that each task points at the file inside input_dir."""
        tasks = list(discover_images(input_dir))
        assert all(isinstance(t, ImageTask) for t in tasks)
        assert tasks[0].path == input_dir / "a.jpg"

    def test_custom_extensions(self, input_dir):
        """Test that the extension filter is configurable and case-insensitive."""
        names = [task.name for task in discover_images(input_dir, extensions=["GIF", ".txt"])]
        assert names == ["archive.gif", "notes.txt"]

    def test_empty_directory(self, tmp_path):
        """Test that an empty directory yields nothing."""
        assert list(discover_images(tmp_path)) == []

    def test_deterministic(self, input_dir):
        """Test that repeated discovery yields the same sequence."""
        assert list(discover_images(input_dir)) == list(discover_images(input_dir))

    def test_missing_directory_raises(self, tmp_path):
        """Test that an unlistable source raises DiscoveryError."""
        missing = tmp_path / "does_not_exist"
        with pytest.raises(DiscoveryError) as exc_info:
            list(discover_images(missing))

        assert exc_info.value.context["path"] == str(missing)

    def test_is_lazy(self, tmp_path):
        """Test that errors surface on iteration, inside the consuming thread."""
        gen = discover_images(tmp_path / "missing")
        with pytest.raises(DiscoveryError):
            next(gen)

    def test_does_not_recurse(self, tmp_path):
        """Test that images in subdirectories are not picked up."""
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "deep.jpg").write_bytes(b"x")
        (tmp_path / "top.jpg").write_bytes(b"x")

        assert [t.name for t in discover_images(tmp_path)] == ["top.jpg"]
