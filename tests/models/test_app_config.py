"""Tests for the configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fa_svg_sprite.constants import LICENSE_FREE
from fa_svg_sprite.models.config import AppConfig, IconEntry, LoggingConfig, SpriteOptions


class TestSpriteOptions:
    """Tests for SpriteOptions."""

    def test_defaults(self) -> None:
        """Test declaration and Font Awesome license by default."""
        options = SpriteOptions()

        assert options.xml_declaration is True
        assert options.license == LICENSE_FREE

    def test_aliases(self) -> None:
        """Test the camelCase option name."""
        assert SpriteOptions.model_validate({"xmlDeclaration": False}).xml_declaration is False
        assert SpriteOptions.model_validate({"xml_declaration": False}).xml_declaration is False


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_invalid_format(self) -> None:
        """Test that unknown formats are rejected."""
        with pytest.raises(ValidationError, match="Log format must be one of"):
            LoggingConfig(format="xml")


class TestAppConfig:
    """Tests for AppConfig."""

    def test_from_yaml(self, test_data_dir: Path) -> None:
        """Test loading the test configuration."""
        config = AppConfig.from_yaml(test_data_dir / "sprite.yaml")

        assert config.icon_packs == ["icons.json"]
        assert isinstance(config.icons, dict)
        assert config.sprite.xml_declaration is False
        assert config.sprite.license == ""
        assert config.logging.level == "DEBUG"
        assert config.output == "sprite.svg"

    def test_descriptors_mapping(self, test_data_dir: Path) -> None:
        """Test that mapping icons keep their ids and parameters."""
        config = AppConfig.from_yaml(str(test_data_dir / "sprite.yaml"))

        assert config.descriptors() == {
            "dice": {"prefix": "fas", "iconName": "dice-one"},
            "bookmark": (
                {"prefix": "far", "iconName": "bookmark"},
                {"title": "Bookmark", "titleId": "bookmark-title"},
            ),
        }

    def test_descriptors_list(self) -> None:
        """Test that listed icons become a list of lookups."""
        config = AppConfig.model_validate({"icons": [{"prefix": "fas", "iconName": "x"}]})

        assert config.descriptors() == [{"prefix": "fas", "iconName": "x"}]

    def test_no_icons(self) -> None:
        """Test that at least one icon is required."""
        with pytest.raises(ValidationError, match="At least one icon"):
            AppConfig.model_validate({"icons": []})

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(tmp_path / "missing.yaml")

    def test_icon_entry_without_params(self) -> None:
        """Test that entries without parameters are plain lookups."""
        assert IconEntry(prefix="fas", icon_name="x").to_descriptor() == {"prefix": "fas", "iconName": "x"}
