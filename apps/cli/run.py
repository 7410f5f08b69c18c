# apps/cli/run.py
"""
CLI entry point for the interactive solver.

This script:
  1) Validates the dictionary (prints counts + SHA) unless --no-validate.
  2) Loads the dictionary (blank lines ignored, duplicates collapsed).
  3) Depending on the flags:
       - default:        interactive session (suggest, read feedback, repeat)
       - --answer WORD:  self-play against a known hidden word
       - --best-opener:  score every word against the whole dictionary

Exit status:
  0  game won / command finished
  1  dictionary can't be read, or reading feedback failed
  2  no dictionary word is consistent with the feedback (or self-play lost)
"""

from __future__ import annotations

import argparse
import sys

from packages.datasets import load_words, validate_dictionary, pretty_summary
from packages.engine import is_valid_word
from packages.harness import PROGRESS_MODES, make_progress, run_case, run_session
from packages.solvers import DEFAULT_OPENER, create_solver, get_solver_ids, select_best_guess


def _fail(msg: str, code: int = 1) -> int:
    sys.stderr.write(msg + "\n")
    sys.stderr.flush()
    return code


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Five-letter word puzzle solver")
    ap.add_argument("--words", default="words.txt",
                    help="path to the dictionary (one lowercase word per line)")
    ap.add_argument("--first-guess", default=DEFAULT_OPENER,
                    help=f"fixed opening suggestion (default: {DEFAULT_OPENER})")
    ap.add_argument("--solver", default="pattern_std",
                    help=f"solver id for self-play (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--answer", help="self-play against this hidden word instead of prompting")
    ap.add_argument("--max-turns", type=int, default=6, help="turn budget for --answer self-play")
    ap.add_argument("--best-opener", action="store_true",
                    help="score every word against the full dictionary and print the best opener")
    ap.add_argument("--workers", type=int, default=None,
                    help="score guesses in N worker processes (default: sequential)")
    ap.add_argument(
        "--progress",
        choices=PROGRESS_MODES,
        default="auto",
        help="Show scoring progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--validate", action=argparse.BooleanOptionalAction, default=True,
                    help="print a dictionary validation summary before starting")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.validate:
        rep = validate_dictionary(args.words)
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            sys.stderr.write(f"warning: {issue}\n")

    print(f"Reading in {args.words}")
    try:
        words, skipped = load_words(args.words)
    except OSError as e:
        return _fail(f"An error occurred when trying to read in {args.words}: {e}")
    if skipped:
        sys.stderr.write(f"warning: skipped {skipped} line(s) that are not 5 lowercase letters\n")
    if not words:
        return _fail(f"No usable words in {args.words}")
    print(f"Words: {len(words)}")

    first_guess = args.first_guess.strip().lower()
    if not is_valid_word(first_guess):
        return _fail(f"--first-guess must be 5 lowercase letters; got {args.first_guess!r}")

    progress = make_progress(args.progress)

    if args.best_opener:
        print("Calculating best word...")
        best_word, best_std = select_best_guess(words, words, progress=progress,
                                                workers=args.workers)
        print(f"Results: {best_word}, {best_std:.6f}")
        return 0

    if args.answer is not None:
        answer = args.answer.strip().lower()
        if not is_valid_word(answer):
            return _fail(f"--answer must be 5 lowercase letters; got {args.answer!r}")
        try:
            solver = create_solver(args.solver)
            r = run_case(solver, answer, words=words, max_turns=args.max_turns,
                         opener=first_guess, progress=progress, workers=args.workers)
        except ValueError as e:
            return _fail(str(e))
        for turn, (g, patt) in enumerate(r["history"], 1):
            print(f"{turn}. {g}  {patt}")
        status = "solved" if r["success"] else "not solved"
        print(f"{answer}: {status} in {r['guesses']} guess(es), {r['time_ms']:.1f} ms")
        return 0 if r["success"] else 2

    try:
        result = run_session(words, first_guess=first_guess, progress=progress,
                             workers=args.workers)
    except EOFError:
        return _fail("Failed to grab input. Err: end of input")
    except KeyboardInterrupt:
        return _fail("Interrupted")
    except OSError as e:
        return _fail(f"Failed to grab input. Err: {e}")

    return 0 if result.success else 2


if __name__ == "__main__":
    sys.exit(main())
