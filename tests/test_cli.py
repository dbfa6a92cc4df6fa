import io

import pytest

from cfsolutions.arithmetic import is_sum_of_2020_2021, moves_to_one
from cfsolutions.cli import main, solve
from cfsolutions.sequences import shifted_permutation
from cfsolutions.textproblems import abbreviate


def test_single_answer_problem():
    assert solve("4A", "8\n") == "YES\n"
    assert solve("4a", "2") == "NO\n"


def test_multi_case_problem_matches_library():
    numbers = [4040, 4041, 1]
    text = f"{len(numbers)}\n" + "\n".join(map(str, numbers))
    expected = ["YES" if is_sum_of_2020_2021(n) else "NO" for n in numbers]
    assert solve("1475B", text).splitlines() == expected


def test_moves_problem_matches_library():
    numbers = [1, 2, 3, 12, 15116544]
    text = f"{len(numbers)} " + " ".join(map(str, numbers))
    assert solve("1374B", text).splitlines() == [str(moves_to_one(n)) for n in numbers]


def test_word_list_problem():
    words = ["word", "localization", "internationalization"]
    text = f"{len(words)}\n" + "\n".join(words)
    assert solve("71A", text).splitlines() == [abbreviate(w) for w in words]


def test_permutation_output_is_space_separated():
    output = solve("2106B", "1\n5 2\n")
    assert output == " ".join(map(str, shifted_permutation(5, 2))) + "\n"


def test_median_problem_prints_two_lines_per_case():
    lines = solve("2102B", "1\n1\n5\n").splitlines()
    assert lines == ["YES", "0"]


def test_unknown_problem_rejected():
    with pytest.raises(ValueError):
        solve("9999Z", "1")


def test_truncated_input_rejected():
    with pytest.raises(ValueError):
        solve("1475B", "3\n4040\n")


def test_non_integer_rejected():
    with pytest.raises(ValueError):
        solve("4A", "eight")


def test_main_writes_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("8\n"))
    assert main(["4A"]) == 0
    assert capsys.readouterr().out == "YES\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["4A"]) == 1
    assert "input ended early" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["nope"])