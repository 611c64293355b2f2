"""File system helpers for the SVG sprite generator.

Provides a consistent interface for reading configuration and icon packs and
for writing sprites and their attribute maps, including directory creation.
"""

import json
from pathlib import Path
from typing import Any

# Type aliases for clarity and documentation
PathLike = str | Path
JsonData = dict[str, Any] | list[Any]


def normalize_path(file_path: PathLike) -> Path:
    """Convert a path to an absolute Path with ``~`` expanded.

    Args:
        file_path: Path to normalize (string or Path object)

    Returns:
        The normalized path.
    """
    return Path(file_path).expanduser().absolute()


def file_exists(file_path: PathLike) -> bool:
    """Check whether a regular file exists at the path.

    Args:
        file_path: Path to check (string or Path object)

    Returns:
        True if the path exists and is a file.
    """
    return normalize_path(file_path).is_file()


def ensure_dir_exists(dir_path: PathLike) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        dir_path: Directory to create (string or Path object)

    Returns:
        The normalized directory path.
    """
    normalized_path = normalize_path(dir_path)
    normalized_path.mkdir(parents=True, exist_ok=True)
    return normalized_path


def read_text(file_path: PathLike) -> str:
    """Read text content from a file.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        The text content of the file

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read due to permissions
        UnicodeDecodeError: If the file content cannot be decoded as text
    """
    normalized_path = normalize_path(file_path)
    with open(normalized_path, encoding="utf-8") as f:
        return f.read()


def read_json(file_path: PathLike) -> JsonData:
    """Read and parse JSON content from a file.

    Args:
        file_path: Path to the JSON file (string or Path object)

    Returns:
        The parsed JSON data as a dictionary or list

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file content is not valid JSON
    """
    normalized_path = normalize_path(file_path)
    with open(normalized_path, encoding="utf-8") as f:
        return json.load(f)


def write_text(file_path: PathLike, content: str, make_dirs: bool = True) -> None:
    """Write text content to a file.

    Args:
        file_path: Path to the file (string or Path object)
        content: Text content to write
        make_dirs: Whether to create parent directories if they don't exist

    Raises:
        FileNotFoundError: If the parent directory does not exist and make_dirs is False
        PermissionError: If the file cannot be written due to permissions
    """
    normalized_path = normalize_path(file_path)

    if make_dirs:
        ensure_dir_exists(normalized_path.parent)

    with open(normalized_path, "w", encoding="utf-8") as f:
        f.write(content)


def write_json(file_path: PathLike, data: JsonData, indent: int = 2, make_dirs: bool = True) -> None:
    """Write data as JSON to a file.

    Args:
        file_path: Path to the file (string or Path object)
        data: Data to serialize
        indent: JSON indentation level
        make_dirs: Whether to create parent directories if they don't exist
    """
    write_text(file_path, json.dumps(data, indent=indent) + "\n", make_dirs=make_dirs)
