import io
from pathlib import Path

import pytest
from apps.cli.run import main

WORDS = ["crane", "raise", "stare", "trace", "cared", "rales"]


@pytest.fixture
def words_file(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(p)


def test_cli_interactive_win(words_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("yy-y-\nggggg\n"))
    assert main(["--words", words_file, "--progress", "off"]) == 0
    out = capsys.readouterr().out
    assert "You should play the word 'rales'." in out
    assert "Yippie! You got it!" in out


def test_cli_input_exhausted_is_fatal(words_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--words", words_file, "--progress", "off"]) == 1
    assert "Failed to grab input" in capsys.readouterr().err


def test_cli_no_consistent_word(words_file, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("-----\n"))
    assert main(["--words", words_file, "--progress", "off", "--no-validate"]) == 2


def test_cli_missing_dictionary(tmp_path, capsys):
    assert main(["--words", str(tmp_path / "nope.txt"), "--progress", "off"]) == 1
    assert "An error occurred" in capsys.readouterr().err


def test_cli_self_play(words_file, capsys):
    assert main(["--words", words_file, "--answer", "trace", "--progress", "plain"]) == 0
    captured = capsys.readouterr()
    assert "trace: solved" in captured.out
    assert "of 6" in captured.err


def test_cli_best_opener(words_file, capsys):
    assert main(["--words", words_file, "--best-opener", "--progress", "off"]) == 0
    assert "Results: " in capsys.readouterr().out


def test_cli_undecodable_dictionary_lines_are_skipped(tmp_path, capsys):
    p = tmp_path / "words.txt"
    p.write_bytes(b"crane\n\xff\xfe\ntrace\n")
    assert main(["--words", str(p), "--best-opener", "--progress", "off"]) == 0
    captured = capsys.readouterr()
    assert "Words: 2" in captured.out
    assert "invalid=1" in captured.out
    assert "skipped 1 line(s)" in captured.err


def test_cli_uppercase_first_guess_is_normalized(words_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("yy-y-\nggggg\n"))
    assert main(["--words", words_file, "--first-guess", " RALES ", "--progress", "off",
                 "--no-validate"]) == 0
    assert "You should play the word 'rales'." in capsys.readouterr().out


@pytest.mark.parametrize("opener", ["ral3s", "raless", "ráles"])
def test_cli_rejects_bad_first_guess(words_file, opener, capsys):
    assert main(["--words", words_file, "--first-guess", opener, "--progress", "off"]) == 1
    assert "--first-guess must be 5 lowercase letters" in capsys.readouterr().err
