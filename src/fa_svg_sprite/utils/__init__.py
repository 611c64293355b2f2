"""Module initialization."""

from fa_svg_sprite.utils.file_utils import (
    ensure_dir_exists,
    file_exists,
    normalize_path,
    read_json,
    read_text,
    write_json,
    write_text,
)

__all__ = [
    "ensure_dir_exists",
    "file_exists",
    "normalize_path",
    "read_json",
    "read_text",
    "write_json",
    "write_text",
]
