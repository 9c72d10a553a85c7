import pytest

from obview.history import HISTORY_COUNT_MAX, FileHistory, trim_filename


def test_load_without_name_raises():
    with pytest.raises(ValueError):
        FileHistory().load()


def test_load_missing_file(tmp_path):
    history = FileHistory(tmp_path / "obv.history")
    assert history.load() == 0
    assert history.entries == []


def test_prepend_orders_newest_first(tmp_path):
    history = FileHistory(tmp_path / "obv.history")
    history.prepend_save("/boards/a.brd")
    assert history.entries == ["/boards/a.brd"]
    history.prepend_save("/boards/b.brd")
    assert history.entries == ["/boards/b.brd", "/boards/a.brd"]


def test_prepend_removes_duplicates(tmp_path):
    history = FileHistory(tmp_path / "obv.history")
    history.prepend_save("/boards/a.brd")
    history.prepend_save("/boards/b.brd")
    history.prepend_save("/boards/a.brd")
    assert history.entries == ["/boards/a.brd", "/boards/b.brd"]
    assert history.count == 2


def test_history_is_capped(tmp_path):
    history = FileHistory(tmp_path / "obv.history")
    names = [f"/boards/{n}.brd" for n in range(HISTORY_COUNT_MAX + 5)]
    for name in names:
        history.prepend_save(name)
    assert history.count == HISTORY_COUNT_MAX
    assert history.entries[0] == names[-1]
    assert history.entries == list(reversed(names))[:HISTORY_COUNT_MAX]


def test_line_breaks_stripped(tmp_path):
    path = tmp_path / "obv.history"
    path.write_bytes(b"first.brd\r\nsecond.fz\n")
    history = FileHistory(path)
    assert history.load() == 2
    assert history.entries == ["first.brd", "second.fz"]


def test_saved_file_format(tmp_path):
    path = tmp_path / "obv.history"
    history = FileHistory(path)
    history.prepend_save("x.brd")
    history.prepend_save("y.brd")
    assert path.read_text() == "y.brd\nx.brd\n"


@pytest.mark.parametrize(
    "path, stops, expected",
    [
        ("/a/b/c.txt", 1, "c.txt"),
        ("/a/b/c.txt", 2, "b/c.txt"),
        ("C:\\boards\\x\\y.brd", 2, "x\\y.brd"),
        ("plain.brd", 1, "plain.brd"),
        ("", 1, ""),
    ],
)
def test_trim_filename(path, stops, expected):
    assert trim_filename(path, stops) == expected


@pytest.mark.parametrize(
    "stops, expected",
    [
        (1, "board.brd"),
        (2, "main/board.brd"),
        (3, "boards/main/board.brd"),
        (4, "user/boards/main/board.brd"),
    ],
)
def test_trim_filename_deeper_paths(stops, expected):
    path = "/home/user/boards/main/board.brd"
    assert trim_filename(path, stops) == expected