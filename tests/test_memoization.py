import io

import pytest
from hypothesis import given, strategies as st

from algokit.memoization import fib, main


@pytest.mark.parametrize("n", [1, 2])
def test_first_terms(n):
    assert fib(n) == 1


def test_tenth_term():
    assert fib(10) == 55


@given(st.integers(3, 500))
def test_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


@pytest.mark.parametrize("n", [0, -5])
def test_rejects_non_positive(n):
    with pytest.raises(ValueError):
        fib(n)


def test_main_with_argument(capsys):
    assert main(["10"]) == 0
    assert capsys.readouterr().out == f"{fib(10)}\n"


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Enter the value of n :", str(fib(7))]


def test_main_bad_input(capsys):
    assert main(["abc"]) == 1
    assert "error" in capsys.readouterr().err