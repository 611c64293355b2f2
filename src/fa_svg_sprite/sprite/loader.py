"""Loading of icon descriptors into rendered symbol icons.

Raw descriptors are classified once into one of the descriptor variants and
then rendered in symbol mode, so every loaded icon is an ``<svg>`` wrapping a
single ``<symbol>``.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from pydantic import ValidationError

from fa_svg_sprite.exceptions import InvalidDescriptorError, RenderError, chain_exception
from fa_svg_sprite.models.icon import (
    IconDefinition,
    IconDescriptor,
    IconLookup,
    IconParams,
    Lookup,
    LookupWithParams,
    PreRendered,
    RenderedIcon,
)

logger = logging.getLogger(__name__)


class IconRendererProtocol(Protocol):
    """Protocol for the icon renderer used to load symbols."""

    def icon(self, lookup: IconLookup, params: IconParams) -> RenderedIcon | None:
        """Render an icon, returning None if it is not registered."""
        ...


def _invalid(raw: Any, reason: str, cause: Exception | None = None) -> InvalidDescriptorError:
    error = InvalidDescriptorError(
        f"Unsupported icon descriptor: {reason}",
        {"descriptor": repr(raw), "type": type(raw).__name__},
    )
    if cause is not None:
        chain_exception(error, cause)
    return error


def as_lookup(raw: Any) -> IconLookup:
    """Convert a raw lookup or definition to a lookup model.

    Args:
        raw: An ``IconLookup``/``IconDefinition`` or a mapping with
            ``prefix`` and ``iconName`` (and optionally ``icon``).

    Returns:
        The lookup, an ``IconDefinition`` when geometry is included.

    Raises:
        InvalidDescriptorError: If the value is not a lookup.
    """
    if isinstance(raw, IconLookup):
        return raw
    if not isinstance(raw, Mapping):
        raise _invalid(raw, "expected an icon lookup")
    try:
        if "icon" in raw:
            return IconDefinition.model_validate(raw)
        return IconLookup.model_validate(raw)
    except ValidationError as e:
        raise _invalid(raw, "invalid icon lookup", e)


def as_descriptor(raw: Any) -> IconDescriptor:
    """Classify a raw icon descriptor.

    Accepted shapes:
        - a ``RenderedIcon`` or a mapping with an ``abstract`` key
        - a ``(lookup, params)`` pair
        - a lookup or definition

    Args:
        raw: Descriptor as passed by the caller.

    Returns:
        The matching descriptor variant.

    Raises:
        InvalidDescriptorError: If the value matches none of the shapes.
    """
    if isinstance(raw, (PreRendered, Lookup, LookupWithParams)):
        return raw
    if isinstance(raw, RenderedIcon):
        return PreRendered(icon=raw)
    if isinstance(raw, Mapping) and "abstract" in raw:
        try:
            return PreRendered(icon=RenderedIcon.model_validate(raw))
        except ValidationError as e:
            raise _invalid(raw, "invalid rendered icon", e)
    if isinstance(raw, Sequence) and not isinstance(raw, str):
        if len(raw) != 2:
            raise _invalid(raw, "expected a (lookup, params) pair")
        lookup, params = raw
        if isinstance(params, IconParams):
            return LookupWithParams(lookup=as_lookup(lookup), params=params)
        try:
            return LookupWithParams(lookup=as_lookup(lookup), params=IconParams.model_validate(params or {}))
        except ValidationError as e:
            raise _invalid(raw, "invalid icon parameters", e)
    return Lookup(lookup=as_lookup(raw))


def load_symbol(
    descriptor: IconDescriptor, renderer: IconRendererProtocol, symbol_id: str | None = None
) -> RenderedIcon:
    """Load a descriptor as a rendered icon in symbol mode.

    Pre-rendered icons are returned unchanged. Other descriptors are rendered
    with ``symbol`` forced: an explicit ``symbol`` parameter wins, then the
    caller supplied id, else the renderer generates one.

    Args:
        descriptor: Descriptor to load.
        renderer: Renderer producing the icon.
        symbol_id: Id requested by the caller, if any.

    Returns:
        The rendered icon.

    Raises:
        RenderError: If the renderer produced nothing for the descriptor.
    """
    if isinstance(descriptor, PreRendered):
        return descriptor.icon

    if isinstance(descriptor, LookupWithParams):
        lookup, params = descriptor.lookup, descriptor.params
    else:
        lookup, params = descriptor.lookup, IconParams()

    params = params.model_copy(update={"symbol": params.symbol or symbol_id or True})

    result = renderer.icon(lookup, params)
    if not result:
        raise RenderError(
            f"Failed to generate symbol for {descriptor}",
            {"prefix": lookup.prefix, "icon_name": lookup.icon_name},
        )

    logger.debug(f"Rendered symbol for {lookup}")
    return result
