import io
import sys

import pytest

from labkit.chat import FALLBACK, GREETING, ChatResponse, converse, load_responses, main, reply

RESPONSES = [
    ChatResponse("hello", "Hello to you too"),
    ChatResponse("weather", "It is sunny"),
    ChatResponse("hello there", "never reached"),
]


def test_load_responses(tmp_path):
    path = tmp_path / "chatresponses.txt"
    path.write_text("hello\tHello to you too\r\nweather\tIt is sunny\textra\n")
    assert load_responses(path) == RESPONSES[:2]


def test_load_responses_needs_tab(tmp_path):
    path = tmp_path / "chatresponses.txt"
    path.write_text("hello Hello to you too\n")
    with pytest.raises(ValueError):
        load_responses(path)


def test_reply_uses_first_match():
    assert reply(RESPONSES, "well hello there") == "Hello to you too"
    assert reply(RESPONSES, "how is the weather") == "It is sunny"


def test_reply_fallback():
    assert reply(RESPONSES, "goodbye") == "I'm not sure what you are saying"


def test_reply_is_case_sensitive():
    assert reply(RESPONSES, "HELLO") == FALLBACK


def test_converse_strips_input():
    out = io.StringIO()
    converse(RESPONSES, ["  weather  \n", "nothing\n"], out)
    assert out.getvalue().splitlines() == [GREETING, "It is sunny", FALLBACK]


def test_main_reads_stdin(tmp_path, monkeypatch, capsys):
    path = tmp_path / "chatresponses.txt"
    path.write_text("hello\tHello to you too\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO("hello\n"))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Hi,my name is Zelia, what can I do for you?",
        "Hello to you too",
    ]