"""Command line tool for building an SVG sprite from a YAML configuration.

Example configuration::

    icon_packs:
      - icons/solid.json
    icons:
      dice: {prefix: fas, iconName: dice-one}
      bookmark: {prefix: far, iconName: bookmark, params: {title: Bookmark}}
    output: static/sprite.svg
    attributes_output: static/sprite.json

Relative paths in the configuration are resolved against the directory of
the configuration file. Paths passed with ``--output`` and ``--attributes``
are relative to the working directory.

Usage::

    fa-svg-sprite --config sprite.yaml
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from fa_svg_sprite.constants import DEFAULT_CONFIG_PATH, LOGGER_NAME
from fa_svg_sprite.exceptions import (
    ConfigFileNotFoundError,
    ConfigurationError,
    InvalidConfigError,
    OutputError,
    SpriteGeneratorError,
    chain_exception,
)
from fa_svg_sprite.icons import IconLibrary, IconRenderer
from fa_svg_sprite.models.config import AppConfig
from fa_svg_sprite.sprite import generate
from fa_svg_sprite.utils import file_utils
from fa_svg_sprite.utils.early_error_handler import handle_config_error, handle_keyboard_interrupt
from fa_svg_sprite.utils.logging import setup_logging


def load_config(config_path: Path) -> AppConfig:
    """Load and validate the configuration file.

    Args:
        config_path: Path to the YAML configuration.

    Returns:
        The validated configuration.

    Raises:
        ConfigFileNotFoundError: If the file does not exist.
        InvalidConfigError: If the file is not valid YAML or fails validation.
    """
    if not file_utils.file_exists(config_path):
        raise ConfigFileNotFoundError("Configuration file not found", {"path": str(config_path)})
    try:
        return AppConfig.from_yaml(config_path)
    except (yaml.YAMLError, ValidationError) as e:
        raise chain_exception(
            InvalidConfigError("Invalid sprite configuration", {"path": str(config_path), "error": str(e)}),
            e,
        )


def resolve_path(path: str, base_dir: Path) -> Path:
    """Resolve a configured path against the configuration directory.

    Args:
        path: Path as written in the configuration.
        base_dir: Directory of the configuration file.

    Returns:
        The path itself if absolute, else the path below ``base_dir``.
    """
    candidate = Path(path).expanduser()
    return candidate if candidate.is_absolute() else base_dir / candidate


def build_library(config: AppConfig, base_dir: Path, logger: logging.Logger) -> IconLibrary:
    """Create an icon library from the configured icon packs.

    Args:
        config: Tool configuration.
        base_dir: Directory relative pack paths are resolved against.
        logger: Logger for progress messages.

    Returns:
        The populated library.
    """
    library = IconLibrary()
    for pack in config.icon_packs:
        pack_path = resolve_path(pack, base_dir)
        count = library.load_json(pack_path)
        logger.info(f"Loaded {count} icons from {pack_path}")
    return library


def run(config: AppConfig, base_dir: Path, logger: logging.Logger) -> None:
    """Generate the sprite described by the configuration and write it out.

    Relative icon pack and output paths are resolved against ``base_dir``.

    Args:
        config: Tool configuration.
        base_dir: Directory of the configuration file.
        logger: Logger for progress messages.

    Raises:
        SpriteGeneratorError: If loading icons or generating the sprite fails.
        OutputError: If the sprite or its attribute map cannot be written.
    """
    renderer = IconRenderer(build_library(config, base_dir, logger))
    sprite = generate(config.descriptors(), config.sprite, renderer=renderer)

    svg_path = resolve_path(config.output, base_dir)
    attributes_path = resolve_path(config.attributes_output, base_dir) if config.attributes_output else None
    try:
        sprite.write(svg_path, attributes_path)
    except OSError as e:
        raise chain_exception(
            OutputError(
                "Failed to write sprite",
                {"path": str(svg_path), "attributes_path": str(attributes_path), "error": str(e)},
            ),
            e,
        )

    logger.info(f"Wrote sprite with {len(sprite.symbols)} symbols to {svg_path}")
    if attributes_path:
        logger.info(f"Wrote symbol attributes to {attributes_path}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the command line tool.

    Args:
        argv: Command line arguments, defaults to ``sys.argv``.

    Returns:
        Process exit code.
    """
    parser = argparse.ArgumentParser(description="Build an SVG sprite from Font Awesome icons")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--output", type=str, help="Sprite output path (overrides config)")
    parser.add_argument("--attributes", type=str, help="Symbol attributes JSON output path (overrides config)")
    parser.add_argument(
        "--no-xml-declaration", action="store_true", help="Omit the XML declaration from the sprite"
    )
    parser.add_argument("--license", type=str, help="License comment text, empty to omit it")
    parser.add_argument("--log-level", type=str, help="Log level (overrides config)")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        handle_config_error(e, args.config)
        return 1

    # Paths given on the command line are relative to the working directory
    if args.output:
        config.output = str(file_utils.normalize_path(args.output))
    if args.attributes:
        config.attributes_output = str(file_utils.normalize_path(args.attributes))
    if args.no_xml_declaration:
        config.sprite.xml_declaration = False
    if args.license is not None:
        config.sprite.license = args.license
    if args.log_level:
        config.logging.level = args.log_level

    logger = setup_logging(config.logging, LOGGER_NAME)

    try:
        run(config, args.config.parent, logger)
    except SpriteGeneratorError as e:
        logger.error(f"Sprite generation failed: {e}")
        return 1
    except KeyboardInterrupt:
        handle_keyboard_interrupt()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
