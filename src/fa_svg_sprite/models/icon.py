"""Icon models for the SVG sprite generator.

Defines Pydantic models for icon lookups and definitions, rendering
parameters, rendered icons and the descriptor variants accepted by the
sprite pipeline.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fa_svg_sprite.markup import to_html
from fa_svg_sprite.models.abstract import AbstractElement


class IconLookup(BaseModel):
    """Identifies a registered icon by style prefix and name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prefix: str
    icon_name: str = Field(alias="iconName")

    def __str__(self) -> str:
        """Return the lookup as ``prefix/icon-name``."""
        return f"{self.prefix}/{self.icon_name}"


class IconDefinition(IconLookup):
    """An icon lookup carrying the glyph geometry.

    The ``icon`` tuple follows the Font Awesome packs:
    ``(width, height, ligatures, unicode, path_data)``. ``path_data`` is a
    list of paths for duotone icons.
    """

    icon: tuple[int, int, list[str], str, str | list[str]]

    @property
    def width(self) -> int:
        """Width of the glyph in icon units."""
        return self.icon[0]

    @property
    def height(self) -> int:
        """Height of the glyph in icon units."""
        return self.icon[1]

    @property
    def path_data(self) -> str | list[str]:
        """SVG path data of the glyph."""
        return self.icon[4]


class Transform(BaseModel):
    """Visual transform applied by the icon renderer."""

    model_config = ConfigDict(populate_by_name=True)

    size: float = 16
    x: float = 0
    y: float = 0
    rotate: float = 0
    flip_x: bool = Field(default=False, alias="flipX")
    flip_y: bool = Field(default=False, alias="flipY")

    @property
    def is_identity(self) -> bool:
        """Whether the transform leaves the icon unchanged."""
        return self == Transform()


class IconParams(BaseModel):
    """Parameters for rendering a single icon."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: bool | str = False
    title: str | None = None
    title_id: str | None = Field(default=None, alias="titleId")
    transform: Transform | str | None = None
    classes: list[str] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)
    styles: dict[str, str] = Field(default_factory=dict)

    @field_validator("classes", mode="before")
    @classmethod
    def split_classes(cls, v: Any) -> Any:
        """Accept a whitespace separated class string.

        Args:
            v: Class list or string.

        Returns:
            The classes as a list.
        """
        if isinstance(v, str):
            return v.split()
        return v


class RenderedIcon(BaseModel):
    """An icon rendered to an abstract markup tree."""

    model_config = ConfigDict(populate_by_name=True)

    abstract: list[AbstractElement]
    prefix: str | None = None
    icon_name: str | None = Field(default=None, alias="iconName")

    @property
    def html(self) -> list[str]:
        """Markup of every root element."""
        return [to_html(element) for element in self.abstract]


class PreRendered(BaseModel):
    """Descriptor for an icon that was rendered by the caller."""

    kind: Literal["pre-rendered"] = "pre-rendered"
    icon: RenderedIcon

    def __str__(self) -> str:
        return f"pre-rendered icon {self.icon.prefix}/{self.icon.icon_name}"


class Lookup(BaseModel):
    """Descriptor for a registered icon rendered with default parameters."""

    kind: Literal["lookup"] = "lookup"
    lookup: IconLookup

    def __str__(self) -> str:
        return str(self.lookup)


class LookupWithParams(BaseModel):
    """Descriptor for a registered icon rendered with explicit parameters."""

    kind: Literal["lookup-with-params"] = "lookup-with-params"
    lookup: IconLookup
    params: IconParams

    def __str__(self) -> str:
        return f"{self.lookup} with {self.params.model_dump(exclude_defaults=True)}"


IconDescriptor = Annotated[PreRendered | Lookup | LookupWithParams, Field(discriminator="kind")]
