import pytest
from packages.engine import (
    WINNING_GUESS, LetterColor, FeedbackError,
    calc_guess_match, parse_feedback, format_pattern,
    filter_candidates, filter_history, is_valid_word,
)

G, Y, X = LetterColor.GREEN, LetterColor.YELLOW, LetterColor.GRAY


# --- golden patterns (running count vs total count) ---
@pytest.mark.parametrize("guess,actual,expected", [
    ("aabbb", "ababa", "gyyg-"),
    ("crane", "crane", "ggggg"),
    ("belle", "level", "-gyyy"),
    ("lemon", "level", "gg---"),
    ("raise", "crane", "yy--g"),
    # a later green doesn't use up the letter for earlier positions
    ("lolly", "hello", "yygg-"),
    ("eerie", "there", "yyy-g"),
])
def test_calc_guess_match_golden(guess, actual, expected):
    assert format_pattern(calc_guess_match(guess, actual)) == expected


def test_counting_rule_example_as_colors():
    assert calc_guess_match("aabbb", "ababa") == (G, Y, Y, G, X)


@pytest.mark.parametrize("w", ["crane", "aabbb", "level", "zzzzz", "rales"])
def test_self_match_is_win(w):
    assert calc_guess_match(w, w) == WINNING_GUESS


def test_calc_guess_match_is_deterministic():
    first = calc_guess_match("eerie", "there")
    assert all(calc_guess_match("eerie", "there") == first for _ in range(5))


def test_parse_feedback_maps_unknown_chars_to_gray():
    assert parse_feedback("gy-xG\n") == (G, Y, X, X, X)
    assert parse_feedback("  ggggg  ") == WINNING_GUESS


@pytest.mark.parametrize("line", ["", "gggg", "gggggg", "g y -"])
def test_parse_feedback_wrong_length(line):
    with pytest.raises(FeedbackError):
        parse_feedback(line)


def test_scenario_rales_partition():
    words = ["raise", "arise", "slate", "crane", "trace"]
    got = {w: format_pattern(calc_guess_match("rales", w)) for w in words}
    assert got == {
        "raise": "gg-yy",
        "arise": "yy-yy",
        "slate": "-yyyy",
        "crane": "yy-y-",
        "trace": "yy-y-",
    }
    # "-y--g" matches none of them under this marking rule
    assert filter_candidates("rales", parse_feedback("-y--g"), words) == []
    assert filter_candidates("rales", parse_feedback("yy-y-"), words) == ["crane", "trace"]


def test_filter_is_exact_and_never_grows():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "arise"]
    for chosen in ["raise", "scoop", "eerie"]:
        for actual in words:
            patt = calc_guess_match(chosen, actual)
            out = filter_candidates(chosen, patt, words)
            assert actual in out
            assert len(out) <= len(words)
            assert all(calc_guess_match(chosen, w) == patt for w in out)
            assert [w for w in words if calc_guess_match(chosen, w) == patt] == out


def test_filter_history_chains():
    words = ["crane", "raise", "stare", "trace", "cared"]
    history = [
        ("rales", calc_guess_match("rales", "trace")),
        ("crane", calc_guess_match("crane", "trace")),
    ]
    assert filter_history(words, history) == ["trace"]


def test_is_valid_word():
    assert is_valid_word("crane") is True
    assert is_valid_word("CRANE") is False
    assert is_valid_word("cranes") is False
    assert is_valid_word("cr4ne") is False
    assert is_valid_word(None) is False
