"""Icon library and renderer used to produce symbols.

``library`` is the process-wide registry that ``default_renderer`` reads
from, mirroring ``library.add()`` and ``icon()`` of the Font Awesome JS core.
"""

from fa_svg_sprite.icons.library import IconLibrary
from fa_svg_sprite.icons.renderer import IconRenderer, next_unique_id
from fa_svg_sprite.icons.transform import parse_transform

library = IconLibrary()
default_renderer = IconRenderer(library)

__all__ = [
    "IconLibrary",
    "IconRenderer",
    "default_renderer",
    "library",
    "next_unique_id",
    "parse_transform",
]
