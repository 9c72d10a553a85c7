"""Small file and string helpers."""

from __future__ import annotations

import os
from pathlib import Path

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def file_as_buffer(filepath) -> bytes:
    """Return the whole contents of a regular file.

    Raises OSError when the path is not a regular file or cannot be read.
    """
    path = Path(filepath)
    if not path.is_file():
        raise OSError(f"Error opening {path}: Not a regular file")
    return path.read_bytes()


def check_fileext(filepath, fileext) -> bool:
    """Whether the extension of ``filepath``, lowercased, equals ``fileext``."""
    ext = os.path.splitext(os.path.basename(os.fspath(filepath)))[1]
    return _ascii_lower(ext) == fileext


def find_str_in_buf(text, buf) -> bool:
    """Whether ``text`` occurs anywhere in ``buf``."""
    needle = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    haystack = buf.encode("utf-8") if isinstance(buf, str) else bytes(buf)
    if not needle:
        return bool(haystack)
    return needle in haystack


def compare_string_insensitive(str1, str2) -> bool:
    """Compare two strings ignoring ASCII letter case."""
    return len(str1) == len(str2) and _ascii_lower(str1) == _ascii_lower(str2)


def lookup_file_insensitive(path, filename) -> Path:
    """Find the entry of directory ``path`` whose name matches ``filename`` ignoring case.

    Raises OSError when the directory cannot be listed and FileNotFoundError
    when no entry matches.
    """
    directory = Path(path)
    try:
        entries = list(os.scandir(directory))
    except OSError as exc:
        raise OSError(
            f"Error looking up '{filename}' in '{directory}': {exc.strerror or exc}"
        ) from exc
    for entry in entries:
        if compare_string_insensitive(entry.name, filename):
            return directory / entry.name
    raise FileNotFoundError(f"{filename}: file not found in '{directory}'.")


def split_string(text, delimiter=None) -> list[str]:
    """Split ``text`` on whitespace, or on ``delimiter`` when one is given.

    With a delimiter, a trailing empty field is not reported.
    """
    if delimiter is None:
        return text.split()
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts