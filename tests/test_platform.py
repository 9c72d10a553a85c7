import os

import pytest

from obview.confparse import APP_NAME
from obview.platform import (
    UserDir,
    create_dir,
    create_dirs,
    get_user_dir,
    strcasestr,
    utf16_to_utf8,
    utf8_to_utf16,
)


@pytest.fixture
def posix(monkeypatch):
    monkeypatch.setattr(os, "name", "posix")
    for name in ("XDG_CONFIG_HOME", "XDG_DATA_HOME", "HOME"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_create_dir_new(tmp_path):
    target = tmp_path / "fresh"
    assert create_dir(str(target)) is True
    assert target.is_dir()


def test_create_dir_existing(tmp_path):
    assert create_dir(str(tmp_path)) is True


def test_create_dir_on_file(tmp_path):
    f = tmp_path / "plain"
    f.write_text("x")
    assert create_dir(str(f)) is False


def test_create_dirs_nested(tmp_path):
    target = f"{tmp_path}/a/b/c/"
    assert create_dirs(target) is True
    assert (tmp_path / "a" / "b" / "c").is_dir()


def test_create_dirs_blocked_by_file(tmp_path):
    (tmp_path / "blocker").write_text("x")
    assert create_dirs(f"{tmp_path}/blocker/sub/") is False
    assert not (tmp_path / "blocker" / "sub").exists()


def test_user_dir_from_xdg_config(posix, tmp_path):
    posix.setenv("XDG_CONFIG_HOME", str(tmp_path))
    result = get_user_dir(UserDir.CONFIG)
    assert result == f"{tmp_path}/{APP_NAME}/"
    assert (tmp_path / APP_NAME).is_dir()


def test_user_dir_from_xdg_data(posix, tmp_path):
    posix.setenv("XDG_DATA_HOME", str(tmp_path))
    assert get_user_dir(UserDir.DATA) == f"{tmp_path}/{APP_NAME}/"


def test_user_dir_home_config(posix, tmp_path):
    posix.setenv("HOME", str(tmp_path))
    result = get_user_dir(UserDir.CONFIG)
    assert result == f"{tmp_path}/.config/{APP_NAME}/"
    assert (tmp_path / ".config" / APP_NAME).is_dir()


def test_user_dir_home_data(posix, tmp_path):
    posix.setenv("HOME", str(tmp_path))
    result = get_user_dir(UserDir.DATA)
    assert result == f"{tmp_path}/.local/share/{APP_NAME}/"
    assert (tmp_path / ".local" / "share" / APP_NAME).is_dir()


def test_user_dir_no_environment(posix):
    assert get_user_dir(UserDir.CONFIG) == "./"


def test_user_dir_unusable_location(posix, tmp_path):
    f = tmp_path / "file"
    f.write_text("x")
    posix.setenv("XDG_CONFIG_HOME", str(f))
    assert get_user_dir(UserDir.CONFIG) == "./"


def test_user_dir_windows_without_appdata(monkeypatch):
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setattr(os, "name", "nt")
    result = get_user_dir(UserDir.CONFIG)
    monkeypatch.undo()
    assert result == ".\\"


def test_user_dir_windows_missing_parent(monkeypatch, tmp_path):
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "missing" / "deeper"))
    monkeypatch.setattr(os, "name", "nt")
    result = get_user_dir(UserDir.DATA)
    monkeypatch.undo()
    assert result == ".\\"


def test_user_dir_rejects_unknown_kind():
    with pytest.raises(ValueError):
        get_user_dir("cache")


def test_strcasestr_finds_case_insensitively():
    assert strcasestr("Hello World", "WORLD") == "World"


def test_strcasestr_first_match():
    assert strcasestr("abcABCabc", "cab") == "cABCabc"


def test_strcasestr_not_found():
    assert strcasestr("Hello", "xyz") is None


def test_strcasestr_empty_pattern_returns_text():
    assert strcasestr("board", "") == "board"


def test_strcasestr_none_inputs():
    assert strcasestr(None, "a") is None
    assert strcasestr("a", None) is None


def test_strcasestr_empty_text():
    assert strcasestr("", "a") is None


def test_utf8_to_utf16_pinned():
    assert utf8_to_utf16(b"A") == b"A\x00"


@pytest.mark.parametrize("text", ["", "plain", "Überschrift", "日本語", "emoji \U0001F600"])
def test_utf_round_trip(text):
    utf8 = text.encode("utf-8")
    assert utf16_to_utf8(utf8_to_utf16(utf8)) == utf8


def test_utf16_length_of_ascii():
    converted = utf8_to_utf16("netlist")
    assert len(converted) == 2 * len("netlist")
    assert utf16_to_utf8(converted) == b"netlist"


def test_conversion_stops_at_nul():
    assert utf8_to_utf16(b"ab\x00cd") == utf8_to_utf16(b"ab")


def test_invalid_utf8_raises():
    with pytest.raises(UnicodeDecodeError):
        utf8_to_utf16(b"\xff\xfe\xfd")


def test_invalid_utf16_raises():
    with pytest.raises(UnicodeDecodeError):
        utf16_to_utf8(b"\x00\xd8")