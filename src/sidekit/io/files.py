"""Filesystem primitives that report failures as FileError."""

from pathlib import Path

from sidekit.exceptions import FileError


def read_file(path: Path) -> str:
    """Read a UTF-8 text file."""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise FileError(path, str(e)) from e


def write_file(path: Path, content: str) -> None:
    """Write a UTF-8 text file atomically, creating parent directories.

    Content goes to a sibling temporary file first and is then renamed over
    the destination, so readers never observe a truncated file.
    """
    create_dir(path.parent)
    temp_path = path.with_name(f".{path.name}.tmp")
    try:
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise FileError(path, e.strerror or str(e)) from e


def create_dir(path: Path) -> None:
    """Create a directory and its parents if missing."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileError(path, e.strerror or str(e)) from e
