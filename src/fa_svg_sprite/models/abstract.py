"""Abstract markup tree used by the renderer and the sprite pipeline.

An abstract element is an in-memory description of an SVG element before it
is serialized to text. Text nodes are plain strings inside ``children``.
"""

from typing import Any

from pydantic import BaseModel, Field


class AbstractElement(BaseModel):
    """A single element of an abstract markup tree."""

    tag: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    children: list["AbstractElement | str"] | None = None

    def find_child(self, tag: str) -> "AbstractElement | None":
        """Return the first direct child element with the given tag.

        Args:
            tag: Tag name to look for.

        Returns:
            The matching child, or None if there is none.
        """
        for child in self.children or []:
            if isinstance(child, AbstractElement) and child.tag == tag:
                return child
        return None

    @property
    def text(self) -> str:
        """Concatenated text of the direct text children."""
        return "".join(str(child) for child in self.children or [] if isinstance(child, str))


AbstractElement.model_rebuild()
