"""Custom exception hierarchy for the SVG sprite generator.

This module defines domain-specific exceptions so callers can tell apart
configuration problems, broken icon packs and failures of the sprite pipeline
itself.

Exception Hierarchy:
    SpriteGeneratorError (Base)
    ├── ConfigurationError
    │   ├── InvalidConfigError
    │   └── ConfigFileNotFoundError
    ├── IconLibraryError
    │   └── InvalidIconDefinitionError
    ├── SpriteError
    │   ├── InvalidDescriptorError
    │   ├── RenderError
    │   ├── StructureError
    │   └── DuplicateIdError
    └── OutputError
"""

from typing import Any


# Base Exception
class SpriteGeneratorError(Exception):
    """Base exception for all sprite generator errors.

    This is the root exception that all custom exceptions inherit from,
    allowing for broad exception handling when needed.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception with message and optional details.

        Args:
            message: Human-readable error description
            details: Optional dictionary containing additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Configuration Exceptions
class ConfigurationError(SpriteGeneratorError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration contains invalid values.

    Example:
        raise InvalidConfigError(
            "Invalid sprite configuration",
            {"path": "sprite.yaml", "error": "icons: field required"}
        )
    """
    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when configuration file cannot be found.

    Example:
        raise ConfigFileNotFoundError(
            "Configuration file not found",
            {"path": "sprite.yaml"}
        )
    """
    pass


# Icon library Exceptions
class IconLibraryError(SpriteGeneratorError):
    """Base exception for icon library errors."""
    pass


class InvalidIconDefinitionError(IconLibraryError):
    """Raised when an icon pack contains a malformed definition.

    Example:
        raise InvalidIconDefinitionError(
            "Invalid icon definition",
            {"source": "icons/solid.json", "error": "icon: field required"}
        )
    """
    pass


# Sprite pipeline Exceptions
class SpriteError(SpriteGeneratorError):
    """Base exception for errors raised while generating a sprite."""
    pass


class InvalidDescriptorError(SpriteError):
    """Raised when an icon descriptor has none of the supported shapes.

    Example:
        raise InvalidDescriptorError(
            "Unsupported icon descriptor",
            {"descriptor": "42", "type": "int"}
        )
    """
    pass


class RenderError(SpriteError):
    """Raised when the icon renderer produces nothing for a descriptor.

    Usually means no icon matching the lookup is registered.

    Example:
        raise RenderError(
            "Failed to generate symbol for fas smile",
            {"prefix": "fas", "icon_name": "smile"}
        )
    """
    pass


class StructureError(SpriteError):
    """Raised when a rendered icon does not have the shape of a symbol icon.

    Example:
        raise StructureError("SVG has no children")
    """
    pass


class DuplicateIdError(SpriteError):
    """Raised when two symbols in one sprite resolve to the same id.

    Example:
        raise DuplicateIdError(
            "Duplicate symbol id 'far-fa-bookmark'",
            {"id": "far-fa-bookmark", "index": 1}
        )
    """
    pass


# Output Exceptions
class OutputError(SpriteGeneratorError):
    """Raised when the sprite or its attribute map cannot be written.

    Example:
        raise OutputError(
            "Failed to write sprite",
            {"path": "static/sprite.svg", "error": "[Errno 13] Permission denied"}
        )
    """
    pass


# Utility function for exception chaining
def chain_exception(new_exception: SpriteGeneratorError, cause: Exception) -> SpriteGeneratorError:
    """Chain a new exception with its underlying cause.

    Args:
        new_exception: The new domain-specific exception to raise
        cause: The underlying exception that caused this error

    Returns:
        The new exception with cause properly chained

    Example:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise chain_exception(
                InvalidConfigError("Invalid YAML", {"path": path}),
                e
            )
    """
    new_exception.__cause__ = cause
    return new_exception
