"""Sprite pipeline: load icons, normalize them to symbols, assemble the sprite."""

from fa_svg_sprite.sprite.assembler import generate_sprite, to_svg
from fa_svg_sprite.sprite.generator import generate, prepare_symbols
from fa_svg_sprite.sprite.loader import as_descriptor, load_symbol
from fa_svg_sprite.sprite.normalizer import prepare_symbol

__all__ = [
    "as_descriptor",
    "generate",
    "generate_sprite",
    "load_symbol",
    "prepare_symbol",
    "prepare_symbols",
    "to_svg",
]
