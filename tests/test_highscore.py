import pytest

from arcadebox.highscore import find_highscore_path, load_highscore, save_highscore


def test_round_trip(tmp_path):
    path = tmp_path / "hs.txt"
    save_highscore(path, 1234)
    assert load_highscore(path) == 1234


def test_missing_file_loads_zero(tmp_path):
    assert load_highscore(tmp_path / "absent.txt") == 0


def test_leading_whitespace_and_trailing_text(tmp_path):
    path = tmp_path / "hs.txt"
    path.write_text("  17\nextra")
    assert load_highscore(path) == 17


def test_garbage_loads_zero(tmp_path):
    path = tmp_path / "hs.txt"
    path.write_text("not a number")
    assert load_highscore(path) == 0


def test_unwritable_location_is_ignored(tmp_path):
    path = tmp_path / "missing_dir" / "hs.txt"
    save_highscore(path, 50)
    assert load_highscore(path) == 0


def test_find_prefers_first_existing(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    second.write_text("5")
    assert find_highscore_path([first, second]) == second


def test_find_falls_back_to_first(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    assert find_highscore_path([first, second]) == first


def test_find_needs_candidates():
    with pytest.raises(ValueError):
        find_highscore_path([])