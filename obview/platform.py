"""Per-user directories and small text helpers that differ between systems."""

from __future__ import annotations

import enum
import os
import stat

from obview.confparse import APP_NAME

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


class UserDir(enum.Enum):
    """Kinds of per-user directory the application keeps files in."""

    CONFIG = "config"
    DATA = "data"


def create_dir(path) -> bool:
    """Create ``path`` if it is missing; True when it ends up a directory."""
    path = os.fspath(path)
    try:
        st = os.stat(path)
    except OSError:
        try:
            os.mkdir(path, 0o700)
        except OSError:
            pass
        try:
            st = os.stat(path)
        except OSError:
            return False
    return stat.S_ISDIR(st.st_mode)


def create_dirs(path) -> bool:
    """Create every directory named by a ``/``-terminated prefix of ``path``."""
    path = os.fspath(path)
    pos = path.find("/", 1)
    while pos != -1:
        if not create_dir(path[: pos + 1]):
            return False
        pos = path.find("/", pos + 1)
    return True


def _posix_user_dir(userdir: UserDir) -> str:
    variable = "XDG_CONFIG_HOME" if userdir is UserDir.CONFIG else "XDG_DATA_HOME"
    path = os.environ.get(variable, "")
    if not path:
        home = os.environ.get("HOME", "")
        if home:
            suffix = "/.config" if userdir is UserDir.CONFIG else "/.local/share"
            path = home + suffix
    if path:
        path += f"/{APP_NAME}/"
        if create_dirs(path):
            return path
    return "./"


def _windows_user_dir(userdir: UserDir) -> str:
    variable = "APPDATA" if userdir is UserDir.CONFIG else "LOCALAPPDATA"
    base = os.environ.get(variable, "")
    if not base:
        return ".\\"
    path = base + f"\\{APP_NAME}\\"
    try:
        os.mkdir(path)
    except FileExistsError:
        pass
    except OSError:
        return ".\\"
    return path


def get_user_dir(userdir) -> str:
    """Directory for the given kind of user files, created when needed.

    Falls back to the current directory when no usable location exists.
    """
    userdir = UserDir(userdir)
    if os.name == "nt":
        return _windows_user_dir(userdir)
    return _posix_user_dir(userdir)


def strcasestr(text, pattern):
    """Tail of ``text`` from the first ASCII case-insensitive match of ``pattern``."""
    if text is None or pattern is None:
        return None
    if not pattern:
        return text
    index = text.translate(_ASCII_UPPER).find(pattern.translate(_ASCII_UPPER))
    if index == -1:
        return None
    return text[index:]


def _to_text(data, encoding: str) -> str:
    if isinstance(data, str):
        text = data
    else:
        text = bytes(data).decode(encoding)
    return text.split("\0", 1)[0]


def utf16_to_utf8(data) -> bytes:
    """Convert UTF-16 (little-endian bytes, or a str) into UTF-8 bytes."""
    return _to_text(data, "utf-16-le").encode("utf-8")


def utf8_to_utf16(text) -> bytes:
    """Convert UTF-8 (bytes, or a str) into little-endian UTF-16 bytes."""
    return _to_text(text, "utf-8").encode("utf-16-le")