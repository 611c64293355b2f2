"""Tests for the command line tool."""

import json
import logging
import shutil
from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

from fa_svg_sprite.cli import load_config, main, resolve_path, run
from fa_svg_sprite.exceptions import ConfigFileNotFoundError, InvalidConfigError, OutputError


@pytest.fixture()
def config_dir(tmp_path: Path, test_data_dir: Path) -> Path:
    """Directory with the test configuration and its icon pack."""
    shutil.copy(test_data_dir / "sprite.yaml", tmp_path / "sprite.yaml")
    shutil.copy(test_data_dir / "icons.json", tmp_path / "icons.json")
    return tmp_path


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises a configuration error."""
        with pytest.raises(ConfigFileNotFoundError, match="Configuration file not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that unparsable YAML is reported as invalid configuration."""
        path = tmp_path / "sprite.yaml"
        path.write_text("icons: [unclosed", encoding="utf-8")

        with pytest.raises(InvalidConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.__cause__ is not None

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Test that validation errors are reported as invalid configuration."""
        path = tmp_path / "sprite.yaml"
        path.write_text("icons: []\n", encoding="utf-8")

        with pytest.raises(InvalidConfigError, match="Invalid sprite configuration"):
            load_config(path)


class TestMain:
    """Tests for the main entry point."""

    def test_generates_sprite(self, config_dir: Path) -> None:
        """Test writing the sprite and attribute map."""
        output = config_dir / "out" / "sprite.svg"
        attributes = config_dir / "out" / "sprite.json"

        exit_code = main(
            ["--config", str(config_dir / "sprite.yaml"), "--output", str(output), "--attributes", str(attributes)]
        )

        assert exit_code == 0
        svg = output.read_text(encoding="utf-8")
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg">')
        assert '<symbol id="dice" viewBox="0 0 448 512">' in svg
        assert '<title id="svg-inline--fa-title-bookmark-title">Bookmark</title>' in svg
        assert json.loads(attributes.read_text(encoding="utf-8")) == {
            "dice": {"class": "svg-inline--fa fa-dice-one fa-w-14", "viewBox": "0 0 448 512"},
            "bookmark": {"class": "svg-inline--fa fa-bookmark fa-w-12", "viewBox": "0 0 384 512", "title": "Bookmark"},
        }

    def test_license_override(self, config_dir: Path) -> None:
        """Test that command line options override the configuration."""
        output = config_dir / "sprite.svg"

        exit_code = main(["--config", str(config_dir / "sprite.yaml"), "--output", str(output), "--license", "MIT"])

        assert exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("<!--MIT-->\n<svg")
        assert not (config_dir / "sprite.json").exists()

    @patch("sys.stderr", new_callable=StringIO)
    def test_missing_config(self, mock_stderr: StringIO, tmp_path: Path) -> None:
        """Test that a missing configuration exits with an error."""
        exit_code = main(["--config", str(tmp_path / "missing.yaml")])

        assert exit_code == 1
        assert "CONFIG_ERROR: Configuration file not found" in mock_stderr.getvalue()

    def test_missing_icon(self, config_dir: Path) -> None:
        """Test that icons absent from the packs fail the run."""
        config_path = config_dir / "sprite.yaml"
        config_path.write_text(
            "icon_packs: [icons.json]\nicons:\n  - {prefix: fas, iconName: smile}\n", encoding="utf-8"
        )
        output = config_dir / "sprite.svg"

        exit_code = main(["--config", str(config_path), "--output", str(output)])

        assert exit_code == 1
        assert not output.exists()

    def test_missing_pack(self, config_dir: Path) -> None:
        """Test that an unreadable icon pack fails the run."""
        (config_dir / "icons.json").unlink()

        exit_code = main(["--config", str(config_dir / "sprite.yaml"), "--output", str(config_dir / "sprite.svg")])

        assert exit_code == 1

    def test_output_relative_to_config(
        self, config_dir: Path, tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that configured outputs land next to the configuration."""
        config_path = config_dir / "sprite.yaml"
        config_path.write_text(
            config_path.read_text(encoding="utf-8") + "output: out/sprite.svg\nattributes_output: out/sprite.json\n",
            encoding="utf-8",
        )
        monkeypatch.chdir(tmp_path_factory.mktemp("elsewhere"))

        exit_code = main(["--config", str(config_path)])

        assert exit_code == 0
        assert (config_dir / "out" / "sprite.svg").is_file()
        assert (config_dir / "out" / "sprite.json").is_file()

    def test_cli_output_relative_to_cwd(
        self, config_dir: Path, tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that --output is taken relative to the working directory."""
        work_dir = tmp_path_factory.mktemp("work")
        monkeypatch.chdir(work_dir)

        exit_code = main(["--config", str(config_dir / "sprite.yaml"), "--output", "sprite.svg"])

        assert exit_code == 0
        assert (work_dir / "sprite.svg").is_file()
        assert not (config_dir / "sprite.svg").exists()

    def test_unwritable_output(self, config_dir: Path) -> None:
        """Test that write failures exit with an error instead of a traceback."""
        blocker = config_dir / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        exit_code = main(["--config", str(config_dir / "sprite.yaml"), "--output", str(blocker / "sprite.svg")])

        assert exit_code == 1
        assert blocker.read_text(encoding="utf-8") == "not a directory"

    @patch("sys.stderr", new_callable=StringIO)
    def test_invalid_config_reports_path(self, mock_stderr: StringIO, tmp_path: Path) -> None:
        """Test that configuration errors name the configuration file."""
        config_path = tmp_path / "sprite.yaml"
        config_path.write_text("icons: []\n", encoding="utf-8")

        exit_code = main(["--config", str(config_path)])

        assert exit_code == 1
        output = mock_stderr.getvalue()
        assert "CONFIG_ERROR: Invalid sprite configuration" in output
        assert f"config: {config_path}" in output


class TestRun:
    """Tests for run."""

    def test_write_error_is_wrapped(self, config_dir: Path) -> None:
        """Test that OS errors while writing become output errors."""
        config = load_config(config_dir / "sprite.yaml")
        (config_dir / "blocker").write_text("", encoding="utf-8")
        config.output = "blocker/sprite.svg"

        with pytest.raises(OutputError, match="Failed to write sprite") as exc_info:
            run(config, config_dir, logging.getLogger("test_sprite_cli"))

        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.details["path"] == str(config_dir / "blocker" / "sprite.svg")


def test_resolve_path(tmp_path: Path) -> None:
    """Test resolving configured paths."""
    assert resolve_path("icons.json", tmp_path) == tmp_path / "icons.json"
    assert resolve_path(str(tmp_path / "abs.json"), Path("/elsewhere")) == tmp_path / "abs.json"
