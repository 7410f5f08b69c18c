import pytest
from packages.harness import run_session

WORDS = ["crane", "raise", "stare", "trace", "cared", "rales"]


def _scripted(lines):
    it = iter(lines)

    def read_line():
        try:
            return next(it)
        except StopIteration:
            raise EOFError("no more input")
    return read_line


def test_session_reprompts_then_wins():
    out = []
    result = run_session(WORDS, read_line=_scripted(["bad\n", "yy-y-\n", "ggggg\n"]),
                         write=out.append)
    assert result.success is True
    assert [w for w, _ in result.guesses] == ["rales", "crane"]
    assert any("Try again..." in line for line in out)
    assert "You should play the word 'crane'." in out
    assert out[-1] == "Yippie! You got it!"


def test_session_win_on_opener_skips_filtering():
    out = []
    result = run_session(WORDS, read_line=_scripted(["ggggg"]), write=out.append)
    assert result.success is True
    assert result.remaining == len(WORDS)
    assert not any(line.startswith("Word pool reduced") for line in out)


def test_session_empty_pool_stops():
    out = []
    result = run_session(WORDS, read_line=_scripted(["-----"]), write=out.append)
    assert result.success is False
    assert result.remaining == 0
    assert "Word pool reduced to 0" in out


def test_session_uppercase_feedback_is_gray():
    # "GGGGG" is not a win: unknown characters count as gray
    result = run_session(WORDS, read_line=_scripted(["GGGGG"]), write=lambda s: None)
    assert result.success is False


def test_session_eof_propagates():
    with pytest.raises(EOFError):
        run_session(WORDS, read_line=_scripted([]), write=lambda s: None)


def test_session_custom_first_guess_and_progress():
    calls = []
    result = run_session(WORDS, first_guess="stare",
                         read_line=_scripted(["--gyg", "ggggg"]), write=lambda s: None,
                         progress=lambda done, total: calls.append((done, total)))
    assert result.guesses[0][0] == "stare"
    assert result.success is True
    assert calls[-1] == (len(WORDS), len(WORDS))
