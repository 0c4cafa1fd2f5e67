import io
import random

import pytest

from pushswap.cli import checker_main, push_swap_main, run_checker
from pushswap.parsing import InvalidInput
from pushswap.stacks import Stacks


def _sort_output(capsys, args):
    code = push_swap_main(args)
    out = capsys.readouterr().out
    return code, out


def _apply_all(values, output):
    stacks = Stacks(values)
    for line in output.splitlines():
        stacks.apply(line)
    return stacks


def test_push_swap_without_arguments_fails_silently(capsys):
    code, out = _sort_output(capsys, [])
    assert code == 1
    assert out == ""


def test_push_swap_single_value_fails_silently(capsys):
    code, out = _sort_output(capsys, ["42"])
    assert code == 1
    assert out == ""


@pytest.mark.parametrize(
    "args",
    [
        ["1", "a", "3"],
        ["1", "2", "1"],
        ["1", "2147483648"],
        ["3 2 x"],
    ],
)
def test_push_swap_reports_error(capsys, args):
    code, out = _sort_output(capsys, args)
    assert code == 1
    assert out == "Error\n"


def test_push_swap_sorted_input_prints_nothing(capsys):
    code, out = _sort_output(capsys, ["1", "2", "3", "4"])
    assert code == 0
    assert out == ""


def test_push_swap_three_values_single_swap(capsys):
    code, out = _sort_output(capsys, ["2", "1", "3"])
    assert code == 0
    assert out == "sa\n"


@pytest.mark.parametrize(
    "values",
    [
        [2, 1],
        [3, 2, 1],
        [1, 3, 2],
        [4, 1, 3, 2],
        [5, 4, 3, 2, 1],
        [2, 5, 1, 4, 3],
        [7, -3, 12, 0, 5, 9, -8],
    ],
)
def test_push_swap_output_sorts(capsys, values):
    code, out = _sort_output(capsys, [str(v) for v in values])
    assert code == 0
    stacks = _apply_all(values, out)
    assert stacks.is_sorted()
    assert stacks.a == tuple(sorted(values))


def test_push_swap_random_permutations_sort(capsys):
    rng = random.Random(7)
    for size in (6, 10, 25, 60):
        values = rng.sample(range(-500, 500), size)
        code, out = _sort_output(capsys, [str(v) for v in values])
        assert code == 0
        stacks = _apply_all(values, out)
        assert stacks.a == tuple(sorted(values))
        assert stacks.b == ()


def test_push_swap_single_argument_matches_separate(capsys):
    _, joined = _sort_output(capsys, ["4 1 3 2 5"])
    _, separate = _sort_output(capsys, ["4", "1", "3", "2", "5"])
    assert joined == separate
    assert joined != ""


def test_run_checker_swap_sorts():
    assert run_checker(Stacks([2, 1]), ["sa\n"]) is True


def test_run_checker_without_operations_on_unsorted():
    assert run_checker(Stacks([2, 1, 3]), []) is False


def test_run_checker_nonempty_b_is_not_sorted():
    stacks = Stacks([1, 2, 3])
    assert run_checker(stacks, ["pb"]) is False
    assert stacks.b == (1,)


def test_run_checker_unknown_operation():
    with pytest.raises(InvalidInput):
        run_checker(Stacks([2, 1]), ["sa\n", "swap\n"])


def test_run_checker_empty_line_is_unknown():
    with pytest.raises(InvalidInput):
        run_checker(Stacks([2, 1]), ["\n"])


def _check(monkeypatch, capsys, args, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = checker_main(args)
    return code, capsys.readouterr().out


def test_checker_ok(monkeypatch, capsys):
    code, out = _check(monkeypatch, capsys, ["2", "1", "3"], "sa\n")
    assert code == 0
    assert out == "OK\n"


def test_checker_ko(monkeypatch, capsys):
    code, out = _check(monkeypatch, capsys, ["2", "1", "3"], "ra\n")
    assert code == 0
    assert out == "KO\n"


def test_checker_last_line_without_newline(monkeypatch, capsys):
    code, out = _check(monkeypatch, capsys, ["2 1 3"], "sa")
    assert code == 0
    assert out == "OK\n"


def test_checker_bad_command(monkeypatch, capsys):
    code, out = _check(monkeypatch, capsys, ["2", "1", "3"], "sa\nfoo\n")
    assert code == 1
    assert out == "Error\n"


def test_checker_single_value_is_error(monkeypatch, capsys):
    code, out = _check(monkeypatch, capsys, ["5"], "")
    assert code == 1
    assert out == "Error\n"


def test_checker_duplicate_is_error(monkeypatch, capsys):
    code, out = _check(monkeypatch, capsys, ["5", "5"], "")
    assert code == 1
    assert out == "Error\n"


def test_checker_without_arguments(monkeypatch, capsys):
    code, out = _check(monkeypatch, capsys, [], "")
    assert code == 1
    assert out == ""


def test_push_swap_output_passes_checker(monkeypatch, capsys):
    args = ["9", "-4", "17", "3", "0", "8", "-11", "2"]
    code, ops = _sort_output(capsys, args)
    assert code == 0
    code, out = _check(monkeypatch, capsys, args, ops)
    assert code == 0
    assert out == "OK\n"