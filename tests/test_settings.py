import pytest

from todolist.settings import load_dark_mode, save_dark_mode


@pytest.mark.parametrize("flag", [True, False])
def test_round_trip(tmp_path, flag):
    path = tmp_path / "config.txt"
    save_dark_mode(path, flag)
    assert load_dark_mode(path) is flag


def test_missing_file_means_light_mode(tmp_path):
    assert load_dark_mode(tmp_path / "absent.txt") is False


def test_saved_format(tmp_path):
    path = tmp_path / "config.txt"
    save_dark_mode(path, True)
    assert path.read_text(encoding="utf-8") == "DarkMode=1"


def test_save_overwrites(tmp_path):
    path = tmp_path / "config.txt"
    save_dark_mode(path, True)
    save_dark_mode(path, False)
    assert load_dark_mode(path) is False
    assert path.read_text(encoding="utf-8").startswith("DarkMode=")


@pytest.mark.parametrize(
    "content, expected",
    [
        ("DarkMode=7", True),
        ("DarkMode=  -2", True),
        ("DarkMode=0", False),
        ("DarkMode=abc", False),
        ("LightMode=1", False),
        ("", False),
    ],
)
def test_parsing(tmp_path, content, expected):
    path = tmp_path / "config.txt"
    path.write_text(content, encoding="utf-8")
    assert load_dark_mode(path) is expected