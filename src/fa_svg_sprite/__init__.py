"""Generate SVG sprites of Font Awesome icons.

Each icon becomes a ``<symbol>`` in one SVG document so pages can reference
it with ``<use href="sprite.svg#id">``::

    from fa_svg_sprite import generate, library

    library.add(dice_one_definition)
    sprite = generate([{"prefix": "fas", "iconName": "dice-one"}])
    sprite.write("sprite.svg", "sprite.json")
"""

from fa_svg_sprite.exceptions import (
    DuplicateIdError,
    InvalidDescriptorError,
    OutputError,
    RenderError,
    SpriteError,
    SpriteGeneratorError,
    StructureError,
)
from fa_svg_sprite.icons import IconLibrary, IconRenderer, default_renderer, library
from fa_svg_sprite.markup import to_html
from fa_svg_sprite.models.abstract import AbstractElement
from fa_svg_sprite.models.config import SpriteOptions
from fa_svg_sprite.models.icon import IconDefinition, IconLookup, IconParams, RenderedIcon, Transform
from fa_svg_sprite.models.sprite import IconSymbol, Sprite, SymbolAttributes
from fa_svg_sprite.sprite import generate

__version__ = "1.0.0"

__all__ = [
    "AbstractElement",
    "DuplicateIdError",
    "IconDefinition",
    "IconLibrary",
    "IconLookup",
    "IconParams",
    "IconRenderer",
    "IconSymbol",
    "InvalidDescriptorError",
    "OutputError",
    "RenderError",
    "RenderedIcon",
    "Sprite",
    "SpriteError",
    "SpriteGeneratorError",
    "SpriteOptions",
    "StructureError",
    "SymbolAttributes",
    "Transform",
    "default_renderer",
    "generate",
    "library",
    "to_html",
]
