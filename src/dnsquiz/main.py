"""CLI entrypoint for the DNS knowledge quiz."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Callable

from . import __version__
from .domains import DomainGenerator
from .session import OPTION_CORRECT, OPTION_INCORRECT, QuizSession, QuizView

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
QUIT_COMMANDS = {"q", ":q", ":quit", ":exit"}
RESTART_COMMANDS = {"r", ":r", ":restart"}
NEXT_COMMANDS = {"", "n", "next"}
PROGRESS_WIDTH = 30
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
OPTION_MARKERS = {OPTION_CORRECT: "  <- correct", OPTION_INCORRECT: "  <- your answer"}


class QuitApp(Exception):
    """Signal immediate app exit from nested quiz flows."""


def _session(seed: int | None = None) -> QuizSession:
    """Create a quiz session, seeded when requested."""
    rng = random.Random(seed) if seed is not None else random.Random()
    return QuizSession(generator=DomainGenerator(rng))


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="dnsquiz", description="DNS and BIND knowledge quiz")
    parser.add_argument("command", nargs="?", default="play", choices=["play"])
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible example domains")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS, help="logging verbosity")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s | %(levelname)s | %(message)s")
    return play_shell(seed=args.seed)


def play_shell(input_fn: InputFn = input, print_fn: PrintFn = print, *, seed: int | None = None) -> int:
    """Run the interactive quiz until the user quits."""
    session = _session(seed)
    try:
        _print_domains(session, print_fn)
        while True:
            if session.is_complete:
                if not _summary_flow(session, input_fn, print_fn):
                    return 0
                _print_domains(session, print_fn)
                continue
            if _question_flow(session, input_fn, print_fn):
                _print_domains(session, print_fn)
    except QuitApp:
        return 0


def _print_domains(session: QuizSession, print_fn: PrintFn) -> None:
    """Show the domains used in this run of the quiz."""
    domains = session.domains
    print_fn("\nDomains used in this quiz:")
    print_fn(f"- {domains.primary}: primary homelab domain")
    print_fn(f"- {domains.cluster}: OKD cluster subdomain")
    print_fn(f"- {domains.secondary}: public website domain")


def _progress_bar(progress: float) -> str:
    filled = round(progress * PROGRESS_WIDTH)
    return "[" + "#" * filled + "-" * (PROGRESS_WIDTH - filled) + "]"


def _print_question(view: QuizView, print_fn: PrintFn) -> None:
    print_fn(f"\n=== Question {view.question_number} of {view.total} ===")
    print_fn(f"{_progress_bar(view.progress)} Score: {view.score_display}")
    print_fn(view.text)
    for option in view.options:
        print_fn(f"{option.index + 1}) {option.text}{OPTION_MARKERS.get(option.state, '')}")


def _question_flow(session: QuizSession, input_fn: InputFn, print_fn: PrintFn) -> bool:
    """Ask the current question and wait for the user to move on.

    Returns True when the user restarted the quiz.
    """
    _print_question(session.current_view(), print_fn)
    while session.can_submit:
        choice = input_fn("Answer (1-4, r=restart, q=quit): ").strip().lower()
        if choice in QUIT_COMMANDS:
            raise QuitApp()
        if choice in RESTART_COMMANDS:
            session.restart()
            print_fn("Quiz restarted with new domains.")
            return True
        if choice.isdigit() and 1 <= int(choice) <= len(session.current_question.options):
            session.submit_answer(int(choice) - 1)
            break
        print_fn("Invalid choice.")

    view = session.current_view()
    print_fn("")
    for option in view.options:
        print_fn(f"{option.index + 1}) {option.text}{OPTION_MARKERS.get(option.state, '')}")
    print_fn("Correct!" if view.answered_correctly else "Not quite...")
    if view.explanation:
        print_fn(view.explanation)

    prompt = "Enter to see results" if view.is_last_question else "Enter for next question"
    while True:
        choice = input_fn(f"{prompt} (r=restart, q=quit): ").strip().lower()
        if choice in QUIT_COMMANDS:
            raise QuitApp()
        if choice in RESTART_COMMANDS:
            session.restart()
            print_fn("Quiz restarted with new domains.")
            return True
        if choice in NEXT_COMMANDS:
            session.advance()
            return False
        print_fn("Invalid choice.")


def _summary_flow(session: QuizSession, input_fn: InputFn, print_fn: PrintFn) -> bool:
    """Show the final score. Returns True when the user wants another run."""
    summary = session.score_summary()
    print_fn("\n=== Quiz Complete ===")
    print_fn(f"Score: {summary.score}/{summary.total}")
    print_fn(f"{summary.percentage}% correct")
    print_fn(summary.message)
    while True:
        print_fn("r) Try again")
        print_fn("q) Quit")
        choice = input_fn("Choose: ").strip().lower()
        if choice in QUIT_COMMANDS:
            return False
        if choice in RESTART_COMMANDS:
            session.restart()
            return True
        print_fn("Invalid choice.")


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
