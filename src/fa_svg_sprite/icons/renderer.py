"""Rendering of icon definitions to abstract markup trees.

Produces the same markup as the Font Awesome JS core: an inline ``<svg>``
(or a hidden ``<svg>`` wrapping a ``<symbol>`` in symbol mode) with the
``svg-inline--fa`` classes, accessibility attributes and the glyph path.
"""

import logging
import math
import random
from collections.abc import Callable, Mapping
from typing import Any

from fa_svg_sprite.constants import (
    FAMILY_PREFIX,
    HIDDEN_SYMBOL_STYLE,
    REPLACEMENT_CLASS,
    SVG_NAMESPACE,
    UNIQUE_ID_ALPHABET,
    UNIQUE_ID_SIZE,
    UNITS_PER_EM,
)
from fa_svg_sprite.icons.library import IconLibrary
from fa_svg_sprite.icons.transform import parse_transform, transform_for_svg
from fa_svg_sprite.models.abstract import AbstractElement
from fa_svg_sprite.models.icon import IconDefinition, IconLookup, IconParams, RenderedIcon, Transform

logger = logging.getLogger(__name__)


def next_unique_id() -> str:
    """Generate a random id for title elements."""
    return "".join(random.choice(UNIQUE_ID_ALPHABET) for _ in range(UNIQUE_ID_SIZE))  # noqa: S311


def join_styles(styles: Mapping[str, str]) -> str:
    """Render a style mapping as an inline ``style`` value."""
    return "".join(f"{name}: {value};" for name, value in styles.items())


class IconRenderer:
    """Renders registered icons to abstract markup trees.

    Attributes:
        library: Library used to resolve lookups without geometry.
        id_generator: Callable producing ids for accessible titles.
    """

    def __init__(
        self, library: IconLibrary, id_generator: Callable[[], str] | None = None
    ) -> None:
        """Initialize the renderer.

        Args:
            library: Icon library to resolve lookups against.
            id_generator: Optional id factory, defaults to random ids.
        """
        self.library = library
        self.id_generator = id_generator or next_unique_id

    def find_definition(self, lookup: IconLookup) -> IconDefinition | None:
        """Resolve a lookup to a definition.

        Definitions are used directly, other lookups go through the library.

        Args:
            lookup: Lookup or definition.

        Returns:
            The icon definition, or None if the icon is not registered.
        """
        if isinstance(lookup, IconDefinition):
            return lookup
        return self.library.find(lookup)

    def icon(
        self, lookup: IconLookup, params: IconParams | Mapping[str, Any] | None = None
    ) -> RenderedIcon | None:
        """Render an icon.

        Args:
            lookup: Icon to render.
            params: Rendering parameters.

        Returns:
            The rendered icon, or None if no matching icon is registered.
        """
        definition = self.find_definition(lookup)
        if definition is None:
            logger.debug(f"No icon definition registered for {lookup}")
            return None

        if params is None:
            params = IconParams()
        elif not isinstance(params, IconParams):
            params = IconParams.model_validate(params)

        transform = params.transform
        if isinstance(transform, str):
            transform = parse_transform(transform)

        abstract = self._make_abstract(definition, params, transform)
        return RenderedIcon(abstract=abstract, prefix=definition.prefix, icon_name=definition.icon_name)

    def _make_abstract(
        self, definition: IconDefinition, params: IconParams, transform: Transform | None
    ) -> list[AbstractElement]:
        title_id = None
        if params.title:
            title_id = f"{REPLACEMENT_CLASS}-title-{params.title_id or self.id_generator()}"

        attributes = self._make_attributes(definition, params, title_id)
        children: list[AbstractElement | str] = []
        if params.title:
            children.append(AbstractElement(tag="title", attributes={"id": title_id}, children=[params.title]))

        main = self._make_main_path(definition)
        if transform is not None and not transform.is_identity:
            outer, inner, path = transform_for_svg(transform, definition.width)
            main = main.model_copy(update={"attributes": {**main.attributes, **path}})
            children.append(
                AbstractElement(
                    tag="g",
                    attributes=outer,
                    children=[AbstractElement(tag="g", attributes=inner, children=[main])],
                )
            )
        else:
            children.append(main)

        if params.symbol:
            symbol_id = (
                params.symbol
                if isinstance(params.symbol, str)
                else f"{definition.prefix}-{FAMILY_PREFIX}-{definition.icon_name}"
            )
            symbol = AbstractElement(tag="symbol", attributes={**attributes, "id": symbol_id}, children=children)
            return [AbstractElement(tag="svg", attributes={"style": HIDDEN_SYMBOL_STYLE}, children=[symbol])]

        return [AbstractElement(tag="svg", attributes=attributes, children=children)]

    def _make_attributes(
        self, definition: IconDefinition, params: IconParams, title_id: str | None
    ) -> dict[str, Any]:
        width_class = f"{FAMILY_PREFIX}-w-{math.ceil(definition.width / definition.height * UNITS_PER_EM)}"
        base_classes = [REPLACEMENT_CLASS, f"{FAMILY_PREFIX}-{definition.icon_name}", width_class]
        classes = [c for c in base_classes if c not in params.classes] + params.classes

        attributes: dict[str, Any] = dict(params.attributes)
        if title_id:
            attributes["aria-labelledby"] = title_id
        else:
            attributes["aria-hidden"] = "true"
            attributes["focusable"] = "false"

        attributes.update(
            {
                "data-prefix": definition.prefix,
                "data-icon": definition.icon_name,
                "class": " ".join(classes),
                "role": params.attributes.get("role", "img"),
                "xmlns": SVG_NAMESPACE,
                "viewBox": f"0 0 {definition.width} {definition.height}",
            }
        )

        style = join_styles(params.styles)
        if style:
            attributes["style"] = style
        return attributes

    @staticmethod
    def _make_main_path(definition: IconDefinition) -> AbstractElement:
        path_data = definition.path_data
        if isinstance(path_data, str):
            return AbstractElement(tag="path", attributes={"fill": "currentColor", "d": path_data})

        # Duotone icons: secondary layer first, primary on top
        secondary, primary = (path_data + ["", ""])[:2]
        return AbstractElement(
            tag="g",
            attributes={"class": f"{FAMILY_PREFIX}-group"},
            children=[
                AbstractElement(
                    tag="path",
                    attributes={"class": f"{FAMILY_PREFIX}-secondary", "fill": "currentColor", "d": secondary},
                ),
                AbstractElement(
                    tag="path",
                    attributes={"class": f"{FAMILY_PREFIX}-primary", "fill": "currentColor", "d": primary},
                ),
            ],
        )
