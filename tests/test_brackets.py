import io

import pytest

from nodekit.brackets import answer_vps, is_valid, is_vps, main

VPS_SAMPLE = [
    "(())())",
    "(((()())()",
    "(()())((()))",
    "((()()(()))(((())))()",
    "()()()()(()()())()",
    "(()((())()(",
]
VPS_ANSWERS = ["NO", "NO", "YES", "NO", "YES", "NO"]


@pytest.mark.parametrize("s", ["()", "()[]{}", "{[]}", "([{}])"])
def test_is_valid_accepts_balanced(s):
    assert is_valid(s) is True


@pytest.mark.parametrize("s", ["", "(", "(]", "([)]", "))", "((", "a)"])
def test_is_valid_rejects_unbalanced(s):
    assert is_valid(s) is False


@pytest.mark.parametrize("s", ["", "()", "(())", "()()"])
def test_is_vps_accepts(s):
    assert is_vps(s) is True


@pytest.mark.parametrize("s", [")", "(", "())(", "(()"])
def test_is_vps_rejects(s):
    assert is_vps(s) is False


def test_answer_vps_sample():
    assert answer_vps(VPS_SAMPLE) == VPS_ANSWERS


def test_main_reads_stdin(monkeypatch, capsys):
    text = f"{len(VPS_SAMPLE)}\n" + "\n".join(VPS_SAMPLE) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == VPS_ANSWERS


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n()\n"))
    with pytest.raises(SystemExit):
        main([])