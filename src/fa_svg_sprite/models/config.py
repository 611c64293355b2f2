"""Configuration models for the SVG sprite generator.

Defines Pydantic models for sprite output options, the icons to include,
logging and the command line tool configuration file.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fa_svg_sprite.constants import DEFAULT_OUTPUT_PATH, LICENSE_FREE


def _normalize_path(path: str | Path) -> Path:
    """Convert a string path to a Path object.

    Args:
        path: String or Path object

    Returns:
        A Path object.
    """
    return Path(path) if isinstance(path, str) else path


class SpriteOptions(BaseModel):
    """Options for the serialized sprite document."""

    model_config = ConfigDict(populate_by_name=True)

    xml_declaration: bool = Field(default=True, alias="xmlDeclaration")
    # Empty string disables the license comment
    license: str = LICENSE_FREE


class IconEntry(BaseModel):
    """An icon listed in the configuration file."""

    model_config = ConfigDict(populate_by_name=True)

    prefix: str
    icon_name: str = Field(alias="iconName")
    params: dict[str, Any] | None = None

    def to_descriptor(self) -> dict[str, str] | tuple[dict[str, str], dict[str, Any]]:
        """Convert the entry to a raw icon descriptor.

        Returns:
            A lookup mapping, or a ``(lookup, params)`` pair when parameters
            are configured.
        """
        lookup = {"prefix": self.prefix, "iconName": self.icon_name}
        if self.params:
            return lookup, dict(self.params)
        return lookup


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str | None = None
    format: str = "text"
    max_size_mb: int = 5
    backup_count: int = 3

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate the log format is one of the supported types.

        Args:
            v: The log format string.

        Returns:
            The validated log format.

        Raises:
            ValueError: If the format is not supported.
        """
        valid_formats = ["json", "text"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v


class AppConfig(BaseModel):
    """Configuration of the sprite command line tool."""

    icon_packs: list[str] = Field(default_factory=list)
    icons: list[IconEntry] | dict[str, IconEntry]
    output: str = DEFAULT_OUTPUT_PATH
    attributes_output: str | None = None
    sprite: SpriteOptions = Field(default_factory=SpriteOptions)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("icons")
    @classmethod
    def validate_icons(
        cls, v: list[IconEntry] | dict[str, IconEntry]
    ) -> list[IconEntry] | dict[str, IconEntry]:
        """Validate that at least one icon is configured.

        Args:
            v: The configured icons.

        Returns:
            The validated icons.

        Raises:
            ValueError: If no icons are configured.
        """
        if not v:
            raise ValueError("At least one icon must be configured")
        return v

    def descriptors(self) -> list[Any] | dict[str, Any]:
        """Return the configured icons as raw descriptors.

        Returns:
            A list when ids are generated, a mapping when ids are explicit.
        """
        if isinstance(self.icons, dict):
            return {symbol_id: entry.to_descriptor() for symbol_id, entry in self.icons.items()}
        return [entry.to_descriptor() for entry in self.icons]

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "AppConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the YAML configuration file.

        Returns:
            An initialized AppConfig object with values from the YAML file.

        Raises:
            FileNotFoundError: If the specified config file doesn't exist.
            yaml.YAMLError: If the YAML file has invalid syntax.
            ValidationError: If the configuration values don't match the expected schema.
        """
        import yaml

        from fa_svg_sprite.utils.file_utils import read_text

        path = _normalize_path(config_path)
        config_data = yaml.safe_load(read_text(path))
        return cls.model_validate(config_data)
