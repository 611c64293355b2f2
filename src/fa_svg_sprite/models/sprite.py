"""Sprite models produced by the sprite pipeline.

A sprite owns its symbols; each symbol owns one set of side-channel
attributes that template consumers need on every ``<use>`` of the icon.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fa_svg_sprite.models.abstract import AbstractElement
from fa_svg_sprite.models.icon import RenderedIcon
from fa_svg_sprite.utils import file_utils


class SymbolAttributes(BaseModel):
    """Additional attributes for a symbol in a sprite.

    Attributes:
        class_: CSS classes of the icon (``class``). Adding them to the
            ``<svg>`` around a ``<use>`` sizes the icon like the inline one.
        view_box: The ``viewBox`` of the icon. It must be repeated on the
            ``<svg>`` around each ``<use>`` for the icon to scale correctly.
        title: Accessible title of the icon, if one was requested.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_: str = Field(alias="class")
    view_box: str = Field(alias="viewBox")
    title: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Return the attributes keyed by their markup names.

        Returns:
            Mapping with ``class``, ``viewBox`` and, when present, ``title``.
        """
        return self.model_dump(by_alias=True, exclude_none=True)


class IconSymbol(BaseModel):
    """A single icon contained as ``<symbol>`` in a sprite."""

    model_config = ConfigDict(frozen=True)

    id: str
    icon: RenderedIcon
    symbol: AbstractElement
    attributes: SymbolAttributes


class Sprite(BaseModel):
    """An SVG sprite generated for a number of icons.

    Attributes:
        abstract: Abstract representation of the sprite document.
        svg: Serialized markup of the sprite document.
        symbols: The symbols in input order.
        attributes: Symbol attributes keyed by symbol id.
    """

    model_config = ConfigDict(frozen=True)

    abstract: AbstractElement
    svg: str
    symbols: tuple[IconSymbol, ...]
    attributes: dict[str, SymbolAttributes]

    def attributes_dict(self) -> dict[str, dict[str, Any]]:
        """Return the attribute map as plain dictionaries."""
        return {symbol_id: attributes.to_dict() for symbol_id, attributes in self.attributes.items()}

    def attributes_json(self, indent: int | None = 2) -> str:
        """Serialize the attribute map to JSON for template languages.

        Args:
            indent: JSON indentation, None for compact output.

        Returns:
            JSON object mapping each symbol id to its attributes.
        """
        return json.dumps(self.attributes_dict(), indent=indent)

    def write(self, svg_path: str | Path, attributes_path: str | Path | None = None) -> None:
        """Write the sprite (and optionally its attribute map) to disk.

        Args:
            svg_path: Destination of the sprite markup.
            attributes_path: Destination of the JSON attribute map, if wanted.
        """
        file_utils.write_text(svg_path, self.svg)
        if attributes_path is not None:
            file_utils.write_json(attributes_path, self.attributes_dict())
