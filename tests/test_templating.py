"""Tests for the Jinja2 sprite helpers."""

from typing import Any

import jinja2
import pytest

from fa_svg_sprite import generate
from fa_svg_sprite.exceptions import SpriteError
from fa_svg_sprite.icons import IconRenderer
from fa_svg_sprite.models.icon import IconDefinition
from fa_svg_sprite.models.sprite import Sprite
from fa_svg_sprite.templating import SpriteTemplateHelpers, register_sprite_helpers


@pytest.fixture()
def jinja_env() -> jinja2.Environment:
    """Create a test Jinja2 environment."""
    return jinja2.Environment(autoescape=True)


@pytest.fixture()
def sprite(
    renderer: IconRenderer,
    fas_dice_one: IconDefinition,
    far_bookmark: IconDefinition,
    bare_options: dict[str, Any],
) -> Sprite:
    """Sprite with an untitled and a titled icon."""
    return generate(
        {"dice": fas_dice_one, "bookmark": (far_bookmark, {"title": "Saved"})},
        bare_options,
        renderer=renderer,
    )


class TestSpriteTemplateHelpers:
    """Tests for SpriteTemplateHelpers."""

    def test_register_all(self, jinja_env: jinja2.Environment, sprite: Sprite) -> None:
        """Test that the global and filter are registered."""
        helpers = register_sprite_helpers(jinja_env, sprite, "/static/sprite.svg")

        assert isinstance(helpers, SpriteTemplateHelpers)
        assert "sprite_icon" in jinja_env.globals
        assert "sprite_attributes" in jinja_env.filters

    def test_sprite_icon(self, jinja_env: jinja2.Environment, sprite: Sprite) -> None:
        """Test rendering an untitled icon from a template."""
        register_sprite_helpers(jinja_env, sprite, "/static/sprite.svg")

        result = jinja_env.from_string("{{ sprite_icon('dice', classes='fa-2x') }}").render()

        assert result == (
            '<svg class="svg-inline--fa fa-dice-one fa-w-14 fa-2x" viewBox="0 0 448 512" aria-hidden="true">'
            '<use href="/static/sprite.svg#dice"></use></svg>'
        )

    def test_sprite_icon_with_title(self, jinja_env: jinja2.Environment, sprite: Sprite) -> None:
        """Test that titled icons are announced as images."""
        helpers = SpriteTemplateHelpers(jinja_env, sprite, "sprite.svg")

        result = helpers.sprite_icon("bookmark", width="16")

        assert result == (
            '<svg class="svg-inline--fa fa-bookmark fa-w-12" viewBox="0 0 384 512" role="img" width="16">'
            '<title>Saved</title><use href="sprite.svg#bookmark"></use></svg>'
        )

    def test_sprite_attributes_filter(self, jinja_env: jinja2.Environment, sprite: Sprite) -> None:
        """Test the attribute filter."""
        register_sprite_helpers(jinja_env, sprite, "sprite.svg")

        result = jinja_env.from_string("{{ ('dice' | sprite_attributes)['viewBox'] }}").render()

        assert result == "0 0 448 512"

    def test_unknown_symbol(self, jinja_env: jinja2.Environment, sprite: Sprite) -> None:
        """Test that unknown ids raise a sprite error."""
        helpers = SpriteTemplateHelpers(jinja_env, sprite, "sprite.svg")

        with pytest.raises(SpriteError, match="Unknown symbol id 'smile'"):
            helpers.sprite_icon("smile")
