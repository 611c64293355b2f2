"""Jinja2 helpers for referencing sprite symbols from templates.

Registers a ``sprite_icon`` global that renders
``<svg class="..." viewBox="..."><use href="sprite.svg#id"></use></svg>``
with the attributes recorded for the symbol, and a ``sprite_attributes``
filter exposing the raw attribute mapping.
"""

from typing import Any

import jinja2
from markupsafe import Markup

from fa_svg_sprite.exceptions import SpriteError
from fa_svg_sprite.markup import to_html
from fa_svg_sprite.models.abstract import AbstractElement
from fa_svg_sprite.models.sprite import Sprite, SymbolAttributes


class SpriteTemplateHelpers:
    """Manages the sprite filters and globals of a Jinja2 environment."""

    def __init__(self, jinja_env: jinja2.Environment, sprite: Sprite, href: str) -> None:
        """Initialize the helpers.

        Args:
            jinja_env: Jinja2 environment to register helpers on
            sprite: Sprite the templates reference
            href: URL of the sprite file as seen from the rendered pages
        """
        self.jinja_env = jinja_env
        self.sprite = sprite
        self.href = href

    def register_all(self) -> None:
        """Register all sprite filters and globals."""
        self.jinja_env.globals["sprite_icon"] = self.sprite_icon  # type: ignore[assignment]
        self.jinja_env.filters["sprite_attributes"] = self.symbol_attributes  # type: ignore[assignment]

    def _attributes(self, symbol_id: str) -> SymbolAttributes:
        try:
            return self.sprite.attributes[symbol_id]
        except KeyError as e:
            raise SpriteError(f"Unknown symbol id '{symbol_id}'", {"href": self.href}) from e

    def symbol_attributes(self, symbol_id: str) -> dict[str, str]:
        """Return the recorded attributes of a symbol.

        Args:
            symbol_id: Id of the symbol.

        Returns:
            Mapping with ``class``, ``viewBox`` and optionally ``title``.

        Raises:
            SpriteError: If the sprite has no symbol with that id.
        """
        return self._attributes(symbol_id).to_dict()

    def sprite_icon(self, symbol_id: str, classes: str = "", **attributes: Any) -> Markup:
        """Render the markup that displays a symbol of the sprite.

        Args:
            symbol_id: Id of the symbol.
            classes: Extra CSS classes appended to the symbol classes.
            **attributes: Extra attributes for the ``<svg>`` element.

        Returns:
            Safe markup for the icon.

        Raises:
            SpriteError: If the sprite has no symbol with that id.
        """
        symbol_attributes = self._attributes(symbol_id)

        svg_attributes: dict[str, Any] = {
            "class": " ".join(filter(None, [symbol_attributes.class_, classes])),
            "viewBox": symbol_attributes.view_box,
        }
        children: list[AbstractElement | str] = []
        if symbol_attributes.title:
            svg_attributes["role"] = "img"
            children.append(AbstractElement(tag="title", children=[symbol_attributes.title]))
        else:
            svg_attributes["aria-hidden"] = "true"
        svg_attributes.update(attributes)
        children.append(AbstractElement(tag="use", attributes={"href": f"{self.href}#{symbol_id}"}))

        return Markup(to_html(AbstractElement(tag="svg", attributes=svg_attributes, children=children)))


def register_sprite_helpers(jinja_env: jinja2.Environment, sprite: Sprite, href: str) -> SpriteTemplateHelpers:
    """Register sprite helpers on a Jinja2 environment.

    Args:
        jinja_env: Environment to register on.
        sprite: Sprite the templates reference.
        href: URL of the sprite file.

    Returns:
        The registered helpers.
    """
    helpers = SpriteTemplateHelpers(jinja_env, sprite, href)
    helpers.register_all()
    return helpers
