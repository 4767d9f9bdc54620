from __future__ import annotations

from pathlib import Path
import sys

import pytest

test_dir = Path(__file__).resolve().parent
project_root = test_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from glossgen.text import SEPARATORS, is_separator, iter_runs, next_run  # noqa: E402


def test_separator_set_is_space_tab_comma():
    assert SEPARATORS == frozenset({" ", "\t", ","})
    assert is_separator(",")
    assert not is_separator(".")
    assert not is_separator("\n")


def test_next_run_word_stops_at_separator():
    assert next_run("cat, dog", 0) == "cat"
    assert next_run("cat, dog", 3) == ", "
    assert next_run("cat, dog", 5) == "dog"


def test_next_run_classification_decided_by_start_character():
    # 途中から開始しても開始文字の種類だけで判定する
    assert next_run("a\t, b", 1) == "\t, "
    assert next_run("abc def", 1) == "bc"


def test_next_run_single_character():
    assert next_run("x", 0) == "x"
    assert next_run(" ", 0) == " "


@pytest.mark.parametrize("position", [-1, 3, 10])
def test_next_run_rejects_out_of_range_position(position):
    with pytest.raises(ValueError):
        next_run("abc", position)


def test_runs_are_homogeneous_and_maximal():
    text = "  fast,  quick\tbrown fox,,"
    runs = list(iter_runs(text))
    assert "".join(runs) == text
    for left, right in zip(runs, runs[1:]):
        assert is_separator(left[0]) != is_separator(right[0])
    for run in runs:
        assert len({is_separator(ch) for ch in run}) == 1


def test_iter_runs_empty_text():
    assert list(iter_runs("")) == []
