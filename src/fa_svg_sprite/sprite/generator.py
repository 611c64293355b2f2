"""Public entry point for generating SVG sprites."""

from collections.abc import Mapping, Sequence
from typing import Any

from fa_svg_sprite.exceptions import InvalidDescriptorError
from fa_svg_sprite.icons import default_renderer
from fa_svg_sprite.models.config import SpriteOptions
from fa_svg_sprite.models.sprite import IconSymbol, Sprite
from fa_svg_sprite.sprite.assembler import generate_sprite
from fa_svg_sprite.sprite.loader import IconRendererProtocol, as_descriptor, load_symbol
from fa_svg_sprite.sprite.normalizer import prepare_symbol


def prepare_symbols(
    icons: Sequence[Any] | Mapping[str, Any], renderer: IconRendererProtocol
) -> list[IconSymbol]:
    """Load and prepare a symbol for every icon descriptor.

    Args:
        icons: A sequence of descriptors (ids generated) or a mapping of
            id to descriptor (ids explicit).
        renderer: Renderer for descriptors that are not pre-rendered.

    Returns:
        The symbols in input order.

    Raises:
        InvalidDescriptorError: If ``icons`` is neither a sequence nor a mapping.
    """
    if isinstance(icons, Mapping):
        return [
            prepare_symbol(load_symbol(as_descriptor(icon), renderer, symbol_id), symbol_id)
            for symbol_id, icon in icons.items()
        ]
    if isinstance(icons, Sequence) and not isinstance(icons, str):
        return [prepare_symbol(load_symbol(as_descriptor(icon), renderer)) for icon in icons]
    raise InvalidDescriptorError(
        "Icons must be a sequence or a mapping of descriptors", {"type": type(icons).__name__}
    )


def generate(
    icons: Sequence[Any] | Mapping[str, Any],
    options: SpriteOptions | Mapping[str, Any] | None = None,
    *,
    renderer: IconRendererProtocol | None = None,
) -> Sprite:
    """Generate an SVG sprite for the selected icons.

    Icons are passed either as a sequence, in which case every symbol gets
    the id generated by the renderer (e.g. ``fas-fa-dice-one``), or as a
    mapping from (unique) id to icon. Each icon may be a lookup
    (``{"prefix": "fas", "iconName": "dice-one"}`` or an ``IconDefinition``),
    a ``(lookup, params)`` pair or an already rendered icon.

    Args:
        icons: The icons to include in the sprite.
        options: Sprite output options, as model or mapping
            (``xmlDeclaration``/``xml_declaration``, ``license``).
        renderer: Icon renderer, defaults to the renderer of the global
            icon library.

    Returns:
        The generated sprite.

    Raises:
        RenderError: If an icon could not be rendered.
        StructureError: If a rendered icon is not a symbol icon.
        DuplicateIdError: If two icons resolve to the same id.
        InvalidDescriptorError: If a descriptor has an unsupported shape.
    """
    if renderer is None:
        renderer = default_renderer

    if options is None:
        options = SpriteOptions()
    elif not isinstance(options, SpriteOptions):
        options = SpriteOptions.model_validate(options)

    symbols = prepare_symbols(icons, renderer)
    return generate_sprite(symbols, options)
