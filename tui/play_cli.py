"""
tui/play_cli.py

Play Wordle in the terminal:
- Type letters, Backspace to erase, Enter to submit the guess.
- Only words from the guess list are accepted; anything else is ignored.
- Esc quits and reveals the answer.

Run:
  python -m tui.play_cli
  python -m tui.play_cli --guesses my_guesses.txt --answers my_answers.txt --seed 7
"""
from __future__ import annotations

import argparse
import curses
import logging
import sys
import time
from typing import List, Optional

from tui.display import CursesDisplay, make_palette
from tui.keys import read_events
from wordle.data_utils import DEFAULT_ANSWERS, DEFAULT_GUESSES, load_corpora
from wordle.events import run_game
from wordle.feedback import to_emoji
from wordle.sampler import WordSampler
from wordle.state import GameState, Outcome

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Guess the hidden five-letter word in six tries.")
    ap.add_argument("--guesses", default=str(DEFAULT_GUESSES), help="Word list of accepted guesses")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS), help="Word list the answer is drawn from")
    ap.add_argument("--seed", type=int, default=None, help="Seed for answer selection")
    ap.add_argument(
        "--end-delay",
        type=float,
        default=1.0,
        help="Seconds to keep the final board on screen",
    )
    ap.add_argument("--log-file", default=None, help="Write logs to this file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    return ap


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    # curses owns the terminal while playing, so logs only ever go to a file
    if log_file is None:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _play(window, game: GameState, end_delay: float) -> Outcome:
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("terminal cannot hide the cursor")
    window.keypad(True)
    # react to Esc right away instead of waiting for an escape sequence
    curses.set_escdelay(25)

    display = CursesDisplay(window, make_palette())
    outcome = run_game(game, read_events(window.get_wch), display.render)
    if outcome is not Outcome.IN_PROGRESS and end_delay > 0:
        time.sleep(end_delay)
    return outcome


def summary(game: GameState, outcome: Outcome) -> List[str]:
    """Lines printed after the screen has been restored."""
    if outcome is Outcome.WON:
        lines = [f"You have won! {len(game.guesses)}/{game.max_guesses}", ""]
        lines.extend(to_emoji(pattern) for _, pattern in game.feedback())
        return lines
    return [
        f"The answer was {game.answer.upper()}.",
        "Maybe try again later...",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        dictionary, answers = load_corpora(args.guesses, args.answers)
    except (OSError, KeyError, ValueError) as e:
        print(f"error: could not load word lists: {e}", file=sys.stderr)
        return 1

    game = GameState.from_sampler(dictionary, WordSampler(answers, seed=args.seed))
    logger.debug("new game, seed=%s", args.seed)

    try:
        outcome = curses.wrapper(_play, game, args.end_delay)
    except KeyboardInterrupt:
        outcome = game.outcome()
    except curses.error as e:
        logger.exception("terminal failure")
        print(f"error: terminal failure: {e}", file=sys.stderr)
        return 1

    for line in summary(game, outcome):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
