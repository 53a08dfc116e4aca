import os
import stat

import pytest

from pushswap.listing import (
    block_count,
    count_entries,
    count_names,
    format_date,
    heading,
    list_all,
    list_by_time,
    list_default,
    list_long,
    list_named,
    list_recursive,
    list_reverse,
    month_abbrev,
    month_number,
    name_arguments,
    permissions,
    sort_names,
    visible_entries,
)


@pytest.fixture
def populated(tmp_path):
    for name in ("b", "a", "c", ".hidden"):
        (tmp_path / name).write_text("data")
    return tmp_path


def test_name_arguments_skips_leading_options():
    assert name_arguments(["-l", "-a", "dir1", "dir2"]) == ["dir1", "dir2"]


def test_name_arguments_keeps_everything_after_first_name():
    assert name_arguments(["-l", "x", "-a"]) == ["x", "-a"]


def test_name_arguments_only_options():
    assert name_arguments(["-l", "-R"]) == []
    assert count_names(["-l", "-R"]) == 0


def test_count_names_matches_name_arguments():
    args = ["-a", "one", "two", "three"]
    assert count_names(args) == len(name_arguments(args))


def test_heading_only_for_several_names():
    assert heading(["x", "y"], 1, 2) == "y: \n"
    assert heading(["x"], 0, 1) == ""


def test_visible_entries_hide_dot_files(populated):
    assert sorted(visible_entries(populated)) == ["a", "b", "c"]
    assert count_entries(populated) == 3


def test_block_count_ignores_hidden_files(tmp_path):
    (tmp_path / "visible").write_text("x")
    before = block_count(tmp_path)
    (tmp_path / ".big").write_bytes(b"x" * 100000)
    assert block_count(tmp_path) == before


def test_block_count_empty_directory(tmp_path):
    assert block_count(tmp_path) == 0


@pytest.mark.parametrize(
    "names",
    [["b", "a", "c"], ["abc", "ab"], ["zeta", "alpha", "mid"], []],
)
def test_sort_names_orders_these_inputs(names):
    assert sort_names(names) == sorted(names)


def test_sort_names_is_a_permutation():
    names = ["ab", "ac", "b", "aa", "ba"]
    assert sorted(sort_names(names)) == sorted(names)


def test_sort_names_dot_before_dotdot():
    assert sort_names(["..", "."]) == [".", ".."]


def test_month_number_reads_at_index():
    assert month_number("Wed Oct 11", 4) == month_number("Oct", 0)


def test_month_number_unknown_letter():
    with pytest.raises(ValueError):
        month_number("Xyz", 0)


def test_month_abbrev_unknown():
    assert month_abbrev(13) == ""


def test_format_date_example():
    assert format_date("Wed Jun 30 21:49:08 1993") == "30 jun 21:49"


def test_format_date_malformed():
    with pytest.raises(ValueError):
        format_date("Wed Jun 30 21")


def test_permissions_directory():
    assert permissions(stat.S_IFDIR | 0o755) == "drwxr-xr-x"


def test_permissions_regular_file():
    assert permissions(stat.S_IFREG | 0o644) == "-rw-r--r--"


def test_list_default(populated):
    assert list_default(populated) == "a b c \n"


def test_list_reverse(populated):
    assert list_reverse(populated) == "c\nb\na\n"


def test_list_long_layout(populated):
    for name in ("a", "b", "c"):
        os.chmod(populated / name, 0o644)
    lines = list_long(populated).splitlines()
    assert lines[0] == f"total {block_count(populated)}"
    assert len(lines) == 4
    for line, name in zip(lines[1:], ["a", "b", "c"]):
        assert line.startswith(permissions(os.stat(populated / name).st_mode))
        assert line.endswith(f" {name}")


def test_list_recursive_descends(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "f").write_text("x")
    (tmp_path / "g").write_text("x")
    text = list_recursive(tmp_path)
    assert text.startswith(list_default(tmp_path) + "\n")
    assert f"{tmp_path}/sub:\n" in text
    assert list_default(f"{tmp_path}/sub") in text


def test_list_recursive_unreadable_directory(tmp_path):
    locked = tmp_path / "locked"
    locked.mkdir()
    os.chmod(locked, 0o000)
    try:
        text = list_recursive(tmp_path)
    finally:
        os.chmod(locked, 0o755)
    assert f"ls: {tmp_path}/locked Permission denied\n\n" in text


def test_list_named(populated):
    assert list_named(populated, "a") == "a "
    assert list_named(populated, "missing") == ""
    assert list_named(populated, ".") == ". "


def test_list_by_time_newest_first(tmp_path):
    (tmp_path / "old").write_text("x")
    (tmp_path / "new").write_text("x")
    os.utime(tmp_path / "old", (1000, 1000))
    os.utime(tmp_path / "new", (2000, 2000))
    assert list_by_time(tmp_path) == "new old "