"""Serialization of abstract markup trees to text."""

from markupsafe import escape

from fa_svg_sprite.models.abstract import AbstractElement


def escape_text(value: object) -> str:
    """Escape a value for use in markup.

    Quotes are written as ``&quot;`` so output matches sprites built with the
    Font Awesome JS core.

    Args:
        value: Value to escape, converted with ``str()``.

    Returns:
        The escaped text.
    """
    return str(escape(str(value))).replace("&#34;", "&quot;")


def join_attributes(attributes: dict[str, object]) -> str:
    """Render an attribute mapping as ``name="value"`` pairs.

    Args:
        attributes: Attribute names mapped to their values.

    Returns:
        Space separated attribute pairs with escaped values.
    """
    return " ".join(f'{name}="{escape_text(value)}"' for name, value in attributes.items())


def to_html(node: AbstractElement | str) -> str:
    """Render an abstract element (or text node) to markup.

    Every element gets an explicit closing tag, e.g. ``<path d="..."></path>``.

    Args:
        node: Element or text node to render.

    Returns:
        The markup text.
    """
    if isinstance(node, str):
        return escape_text(node)

    attributes = join_attributes(node.attributes)
    opening = f"<{node.tag} {attributes}>" if attributes else f"<{node.tag}>"
    children = "".join(to_html(child) for child in node.children or [])
    return f"{opening}{children}</{node.tag}>"
