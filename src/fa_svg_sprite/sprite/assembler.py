"""Assembly of prepared symbols into one SVG sprite document."""

import logging
from collections.abc import Sequence

from fa_svg_sprite.constants import SVG_NAMESPACE, XML_DECLARATION
from fa_svg_sprite.exceptions import DuplicateIdError
from fa_svg_sprite.markup import to_html
from fa_svg_sprite.models.abstract import AbstractElement
from fa_svg_sprite.models.config import SpriteOptions
from fa_svg_sprite.models.sprite import IconSymbol, Sprite, SymbolAttributes

logger = logging.getLogger(__name__)


def to_svg(abstract: AbstractElement, options: SpriteOptions) -> str:
    """Serialize a sprite document.

    Args:
        abstract: Root ``<svg>`` element of the sprite.
        options: Whether to emit the XML declaration and which license text
            to embed as a comment.

    Returns:
        The sprite markup, prefixed with declaration and license comment.
    """
    xml_declaration = XML_DECLARATION if options.xml_declaration else ""
    license_comment = f"<!--{options.license}-->\n" if options.license else ""
    return xml_declaration + license_comment + to_html(abstract)


def generate_sprite(symbols: Sequence[IconSymbol], options: SpriteOptions) -> Sprite:
    """Combine symbols into a sprite.

    Args:
        symbols: Prepared symbols in output order.
        options: Output options.

    Returns:
        The generated sprite.

    Raises:
        DuplicateIdError: If two symbols share an id.
    """
    children: list[AbstractElement | str] = []
    attributes: dict[str, SymbolAttributes] = {}

    for index, symbol in enumerate(symbols):
        if symbol.id in attributes:
            raise DuplicateIdError(f"Duplicate symbol id '{symbol.id}'", {"id": symbol.id, "index": index})

        children.append(symbol.symbol)
        attributes[symbol.id] = symbol.attributes

    abstract = AbstractElement(tag="svg", attributes={"xmlns": SVG_NAMESPACE}, children=children)

    logger.info(f"Generated sprite with {len(children)} symbols")
    return Sprite(
        abstract=abstract,
        svg=to_svg(abstract, options),
        symbols=tuple(symbols),
        attributes=attributes,
    )
