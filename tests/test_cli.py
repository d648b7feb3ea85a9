"""Tests for the command-line entry point."""

import logging
import os
from unittest.mock import patch

import pytest
from PIL import Image

from image_inverter import cli
from image_inverter.config import InverterConfig


@pytest.fixture
def images(tmp_path):
    root = tmp_path / "in"
    root.mkdir()
    for i in range(3):
        Image.new("RGB", (2, 2), (i, i, i)).save(root / f"p{i}.png")
    return root


@pytest.fixture(autouse=True)
def no_host_config(monkeypatch, tmp_path):
    """Keep host config files and environment out of CLI runs."""
    monkeypatch.setattr(cli.ConfigLoader, "_load_system_config", lambda self: None)
    monkeypatch.setattr(cli.ConfigLoader, "_load_user_config", lambda self: None)
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("IMAGE_INVERTER_"):
            monkeypatch.delenv(key)

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestAppName:

    def test_derived_from_package(self):
        assert cli.APP_NAME == "image-inverter"


class TestInvertCommand:
    """Tests for invert_command function."""

    def test_success(self, images, tmp_path):
        out = tmp_path / "out"
        code = cli.invert_command(
            InverterConfig(),
            input_dir_override=images,
            output_dir_override=out,
            worker_threads_override=2,
        )

        assert code == 0
        assert sorted(p.name for p in out.iterdir()) == ["inverted_p0.png", "inverted_p1.png", "inverted_p2.png"]

    def test_missing_input_dir(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            code = cli.invert_command(
                InverterConfig(),
                input_dir_override=tmp_path / "nope",
                output_dir_override=tmp_path / "out",
            )

        assert code == 1
        assert "Input directory does not exist" in caplog.text
        assert not (tmp_path / "out").exists()

    def test_uses_config_values(self, images, tmp_path):
        config = InverterConfig(**{"pipeline": {
            "input_dir": str(images),
            "output_dir": str(tmp_path / "cfg_out"),
            "output_prefix": "neg_",
        }})

        assert cli.invert_command(config) == 0
        assert (tmp_path / "cfg_out" / "neg_p0.png").exists()

    def test_task_failures_do_not_change_exit_code(self, images, tmp_path):
        (images / "broken.png").write_text("nope", encoding="utf-8")
        code = cli.invert_command(
            InverterConfig(),
            input_dir_override=images,
            output_dir_override=tmp_path / "out",
        )
        assert code == 0

    def test_unexpected_error_returns_one(self, images, tmp_path):
        with patch.object(cli.ParallelInverter, "run", side_effect=RuntimeError("boom")):
            code = cli.invert_command(
                InverterConfig(),
                input_dir_override=images,
                output_dir_override=tmp_path / "out",
            )
        assert code == 1


class TestMain:
    """Tests for main function."""

    def test_runs_with_arguments(self, images, tmp_path):
        out = tmp_path / "main_out"
        code = cli.main([
            "--input-dir", str(images),
            "--output-dir", str(out),
            "--worker-threads", "3",
        ])

        assert code == 0
        assert len(list(out.iterdir())) == 3

    def test_config_file(self, images, tmp_path):
        config_file = tmp_path / "custom.toml"
        config_file.write_text(
            f'[pipeline]\ninput_dir = "{images.as_posix()}"\noutput_dir = "{(tmp_path / "from_cfg").as_posix()}"\n',
            encoding="utf-8",
        )

        assert cli.main(["--config", str(config_file)]) == 0
        assert (tmp_path / "from_cfg" / "inverted_p1.png").exists()

    def test_rejects_zero_worker_threads(self):
        with pytest.raises(SystemExit):
            cli.main(["--worker-threads", "0"])

    def test_missing_config_file(self, tmp_path, capsys):
        code = cli.main(["--config", str(tmp_path / "missing.toml")])

        assert code == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_invalid_config_value(self, tmp_path, capsys):
        config_file = tmp_path / "bad.toml"
        config_file.write_text("[pipeline]\nworker_threads = 0\n", encoding="utf-8")

        assert cli.main(["--config", str(config_file)]) == 1
        assert "worker_threads" in capsys.readouterr().err

    def test_numeric_input_dir_from_environment(self, tmp_path, monkeypatch):
        """Test that a digit-only directory name from the environment is used as a path."""
        input_dir = tmp_path / "2024"
        input_dir.mkdir()
        Image.new("RGB", (2, 2)).save(input_dir / "a.png")
        monkeypatch.setenv("IMAGE_INVERTER_PIPELINE__INPUT_DIR", "2024")
        monkeypatch.setenv("IMAGE_INVERTER_PIPELINE__OUTPUT_DIR", "out")

        assert cli.main([]) == 0
        assert (tmp_path / "out" / "inverted_a.png").exists()
