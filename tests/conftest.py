"""Common fixtures for testing the sprite generator."""

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from fa_svg_sprite.icons import IconLibrary, IconRenderer, library
from fa_svg_sprite.models.abstract import AbstractElement
from fa_svg_sprite.models.icon import IconDefinition, RenderedIcon

# Unique id used for accessible titles, keeps generated markup deterministic
TITLE_ID = "000000000000"


@pytest.fixture()
def fas_dice_one() -> IconDefinition:
    """Solid dice icon (448 x 512)."""
    return IconDefinition(prefix="fas", icon_name="dice-one", icon=(448, 512, [], "f525", "dice one"))


@pytest.fixture()
def fas_bookmark() -> IconDefinition:
    """Solid bookmark icon (384 x 512)."""
    return IconDefinition(prefix="fas", icon_name="bookmark", icon=(384, 512, [], "f02e", "solid bookmark"))


@pytest.fixture()
def far_bookmark() -> IconDefinition:
    """Regular bookmark icon (384 x 512)."""
    return IconDefinition(prefix="far", icon_name="bookmark", icon=(384, 512, [], "f02e", "regular bookmark"))


@pytest.fixture()
def icon_library(
    fas_dice_one: IconDefinition, fas_bookmark: IconDefinition, far_bookmark: IconDefinition
) -> IconLibrary:
    """Library with the three test icons registered."""
    library = IconLibrary()
    library.add(fas_dice_one, fas_bookmark, far_bookmark)
    return library


@pytest.fixture()
def title_id() -> str:
    """Id the test renderer assigns to every title."""
    return TITLE_ID


@pytest.fixture()
def renderer(icon_library: IconLibrary) -> IconRenderer:
    """Renderer over the test library with deterministic title ids."""
    return IconRenderer(icon_library, id_generator=lambda: TITLE_ID)


@pytest.fixture()
def bare_options() -> dict[str, Any]:
    """Options producing a sprite without XML declaration and license."""
    return {"xmlDeclaration": False, "license": ""}


@pytest.fixture()
def global_library(
    fas_dice_one: IconDefinition, fas_bookmark: IconDefinition, far_bookmark: IconDefinition
) -> Generator[IconLibrary, None, None]:
    """Register the test icons in the process-wide library for one test."""
    library.reset()
    library.add(fas_dice_one, fas_bookmark, far_bookmark)
    yield library
    library.reset()


@pytest.fixture()
def test_data_dir() -> Path:
    """Directory holding test icon packs and configurations."""
    return Path(__file__).parent / "data"


@pytest.fixture()
def make_icon() -> Callable[..., RenderedIcon]:
    """Factory building pre-rendered icons from raw abstract elements."""

    def _make_icon(*roots: dict[str, Any]) -> RenderedIcon:
        return RenderedIcon(abstract=[AbstractElement.model_validate(root) for root in roots])

    return _make_icon
