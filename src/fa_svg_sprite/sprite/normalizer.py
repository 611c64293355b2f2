"""Normalization of rendered icons into sprite symbols.

A rendered icon must be a single ``<svg>`` wrapping exactly one
``<symbol>``. The symbol is reduced to its id and a small set of attributes;
the attributes needed on each ``<use>`` (class, viewBox, title) are kept
aside as ``SymbolAttributes``.
"""

import logging
from typing import Any

from fa_svg_sprite.constants import ALLOWED_SYMBOL_ATTRIBUTES, MISSING_ATTRIBUTE_VALUE
from fa_svg_sprite.exceptions import StructureError
from fa_svg_sprite.markup import to_html
from fa_svg_sprite.models.abstract import AbstractElement
from fa_svg_sprite.models.icon import RenderedIcon
from fa_svg_sprite.models.sprite import IconSymbol, SymbolAttributes

logger = logging.getLogger(__name__)


def _attribute(attributes: dict[str, Any], name: str) -> str:
    value = attributes.get(name)
    return MISSING_ATTRIBUTE_VALUE if value is None else str(value)


def find_title(symbol: AbstractElement) -> str | None:
    """Return the text of the first ``<title>`` child of a symbol.

    Args:
        symbol: Symbol element to search.

    Returns:
        The title text, or None if there is no (non-empty) title.
    """
    title = symbol.find_child("title")
    if title is None:
        return None
    return title.text or None


def extract_symbol(icon: RenderedIcon) -> AbstractElement:
    """Return the ``<symbol>`` element of a rendered icon.

    Args:
        icon: Rendered icon to inspect.

    Returns:
        The symbol element.

    Raises:
        StructureError: If the icon is not one ``<svg>`` with one ``<symbol>``.
    """
    abstract = icon.abstract
    if len(abstract) != 1:
        raise StructureError(
            f"Unexpected number of root elements: {len(abstract)}\n"
            + "\n".join(to_html(element) for element in abstract)
        )

    svg = abstract[0]
    if svg.tag != "svg":
        raise StructureError(f"Unexpected root tag: '{svg.tag}' (expected 'svg')")
    if not svg.children:
        raise StructureError("SVG has no children")
    if len(svg.children) != 1:
        raise StructureError(
            "Multiple elements included in SVG:\n" + "\n".join(to_html(child) for child in svg.children)
        )

    symbol = svg.children[0]
    if isinstance(symbol, str):
        raise StructureError("Unexpected text in SVG (expected 'symbol'). Did you set {symbol: true}?")
    if symbol.tag != "symbol":
        raise StructureError(
            f"Unexpected element in SVG: '{symbol.tag}' (expected 'symbol'). Did you set {{symbol: true}}?"
        )
    return symbol


def prepare_symbol(icon: RenderedIcon, custom_id: str | None = None) -> IconSymbol:
    """Turn a rendered icon into a sprite symbol.

    The returned symbol element is a copy that keeps only ``id`` and the
    allowed attributes (``viewBox``, ``aria-labelledby``); the rendered icon
    itself is left untouched.

    Args:
        icon: Rendered icon in symbol mode.
        custom_id: Id to use instead of the symbol's own ``id``.

    Returns:
        The prepared symbol.

    Raises:
        StructureError: If the icon does not have the shape of a symbol icon.
    """
    symbol = extract_symbol(icon)
    original = symbol.attributes

    attributes = SymbolAttributes(
        class_=_attribute(original, "class"),
        view_box=_attribute(original, "viewBox"),
        title=find_title(symbol),
    )

    symbol_id = custom_id or _attribute(original, "id")

    stripped: dict[str, Any] = {"id": symbol_id}
    for name in ALLOWED_SYMBOL_ATTRIBUTES:
        if name in original:
            stripped[name] = original[name]

    logger.debug(f"Prepared symbol '{symbol_id}'")
    return IconSymbol(
        id=symbol_id,
        icon=icon,
        symbol=symbol.model_copy(update={"attributes": stripped}),
        attributes=attributes,
    )
