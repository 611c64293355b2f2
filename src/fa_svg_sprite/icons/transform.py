"""Parsing and SVG rendering of icon transforms.

Transforms use the Font Awesome power transform syntax, e.g.
``"grow-2 rotate-90 flip-h left-1"``. Sizes and offsets are in 1/16 em.
"""

from fa_svg_sprite.constants import UNITS_PER_EM
from fa_svg_sprite.models.icon import Transform

# Offsets are expressed in 1/16 em of a 512 unit high glyph
UNIT_OFFSET = 32
GLYPH_CENTER_Y = 256


def parse_transform(transform: str) -> Transform:
    """Parse a power transform string.

    Unknown or malformed tokens are ignored.

    Args:
        transform: Space separated transform tokens.

    Returns:
        The accumulated transform.
    """
    result = Transform()
    for token in transform.lower().split():
        name, _, argument = token.partition("-")
        if not name:
            continue
        if argument == "h":
            result.flip_x = True
            continue
        if argument == "v":
            result.flip_y = True
            continue
        try:
            amount = float(argument)
        except ValueError:
            continue

        if name == "grow":
            result.size += amount
        elif name == "shrink":
            result.size -= amount
        elif name == "left":
            result.x -= amount
        elif name == "right":
            result.x += amount
        elif name == "up":
            result.y -= amount
        elif name == "down":
            result.y += amount
        elif name == "rotate":
            result.rotate += amount
    return result


def format_number(value: float) -> str:
    """Format a number without a trailing ``.0`` for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def transform_for_svg(transform: Transform, width: int) -> tuple[dict[str, str], dict[str, str], dict[str, str]]:
    """Compute the transform attributes for the groups around an icon path.

    The outer group moves the origin to the glyph center, the inner group
    applies offset, scale/flip and rotation, and the path is moved back.

    Args:
        transform: Transform to apply.
        width: Width of the glyph.

    Returns:
        Attributes of the outer group, inner group and path.
    """
    scale = transform.size / UNITS_PER_EM
    scale_x = scale * (-1 if transform.flip_x else 1)
    scale_y = scale * (-1 if transform.flip_y else 1)

    outer = {"transform": f"translate({format_number(width / 2)} {GLYPH_CENTER_Y})"}
    inner = {
        "transform": (
            f"translate({format_number(transform.x * UNIT_OFFSET)}, "
            f"{format_number(transform.y * UNIT_OFFSET)}) "
            f"scale({format_number(scale_x)}, {format_number(scale_y)}) "
            f"rotate({format_number(transform.rotate)} 0 0)"
        )
    }
    path = {"transform": f"translate({format_number(width / 2 * -1)} -{GLYPH_CENTER_Y})"}
    return outer, inner, path
