"""
Terminal front end for the academy.
===================================

The Streamlit page (``streamlit run ui/app.py``) is the full course. The
terminal gives the two interactive parts without a browser:

    # Position size for a $10k account, 2% risk, entry 50, stop 48
    swing-academy calc --account 10000 --risk 2 --entry 50 --stop 48

    # Same, with a target to see reward-to-risk
    swing-academy calc --account 10000 --risk 2 --entry 50 --stop 48 --target 54

    # Take the 10-question quiz
    swing-academy quiz

    # Print the modules, patterns and glossary
    swing-academy outline
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from swing_academy import __version__, config
from swing_academy.config import (
    APP_SUBTITLE, APP_TITLE,
    DEFAULT_ACCOUNT_SIZE, DEFAULT_ENTRY_PRICE, DEFAULT_RISK_PCT, DEFAULT_STOP_PRICE,
)
from swing_academy.content import (
    COURSE_SECTIONS, GLOSSARY, PATTERNS, QUESTIONS, SECTION_TITLES, STRATEGIES,
)
from swing_academy.logger import get_logger, setup_logging
from swing_academy.models import FeedbackTier, PositionSize, QuizQuestion
from swing_academy.quiz import QuizSession
from swing_academy.risk import position_size

log = get_logger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# ANSI Colors
# ──────────────────────────────────────────────────────────────────────────────
GREEN  = "\033[92m"
RED    = "\033[91m"
YELLOW = "\033[93m"
CYAN   = "\033[96m"
RESET  = "\033[0m"
BOLD   = "\033[1m"

_W   = 60
_SEP = "━" * _W
_sep = "─" * _W

_LETTERS = "ABCD"

TIER_COLORS = {
    FeedbackTier.EXCELLENT:     GREEN,
    FeedbackTier.GOOD:          YELLOW,
    FeedbackTier.KEEP_LEARNING: RED,
}


def color(text, c): return f"{c}{text}{RESET}"


# ──────────────────────────────────────────────────────────────────────────────
# calc
# ──────────────────────────────────────────────────────────────────────────────
def print_position(result: PositionSize, out: Optional[TextIO] = None) -> None:
    p = lambda *a, **kw: print(*a, file=(out or sys.stdout), **kw)  # noqa: E731

    p(f"\n{_SEP}")
    p("  POSITION SIZE")
    p(_SEP)
    p(f"  Risk Amount          : ${result.risk_amount:,.2f}")
    p(f"  Risk Per Share       : ${result.risk_per_share:,.2f}")
    p(f"  Position Size        : {color(f'{result.position_size:,} shares', BOLD)}")
    p(f"  Total Position Value : ${result.total_position:,.2f}")
    if result.account_fraction is not None:
        p(f"  Share of Account     : {result.account_fraction:.1f}%")
    if result.reward_to_risk is not None:
        p(_sep)
        p(f"  Reward : Risk        : {result.reward_to_risk:.1f}:1")
        if result.potential_profit is not None:
            sign = GREEN if result.potential_profit >= 0 else RED
            p(f"  Profit at Target     : {color(f'${result.potential_profit:+,.2f}', sign)}")
    for note in result.warnings:
        p(color(f"  ⚠ {note}", YELLOW))
    p(_SEP)


def _cmd_calc(args: argparse.Namespace) -> int:
    result = position_size(args.account, args.risk, args.entry, args.stop, args.target)
    print_position(result)
    return 0


# ──────────────────────────────────────────────────────────────────────────────
# quiz
# ──────────────────────────────────────────────────────────────────────────────
def _parse_choice(raw: str, n_options: int) -> Optional[int]:
    """Accept ``b``/``B`` or ``2`` for the second option. None if unusable."""
    raw = raw.strip().upper()
    if len(raw) == 1 and raw in _LETTERS[:n_options]:
        return _LETTERS.index(raw)
    if raw.isdigit() and 1 <= int(raw) <= n_options:
        return int(raw) - 1
    return None


def run_quiz(
    questions: Sequence[QuizQuestion],
    read:      Callable[[str], str] = input,
    out:       Optional[TextIO] = None,
) -> Optional[QuizSession]:
    """
    Ask every question in order, reading answers with ``read``.

    Returns the finished QuizSession, or None if input ran out before the
    last answer.
    """
    p = lambda *a, **kw: print(*a, file=(out or sys.stdout), **kw)  # noqa: E731

    quiz = QuizSession(questions)
    while True:
        q = quiz.question
        p(f"\n{_sep}")
        p(f"  Question {quiz.current + 1} of {quiz.total}")
        p(_sep)
        p(f"  {color(q.question, BOLD)}")
        for i, option in enumerate(q.options):
            p(f"    {_LETTERS[i]}) {option}")

        while quiz.selected is None:
            try:
                raw = read("  Your answer: ")
            except EOFError:
                p(color("\n  Quiz aborted: no more input.", YELLOW))
                return None
            choice = _parse_choice(raw, len(q.options))
            if choice is None:
                p(color(f"  Enter a letter A-{_LETTERS[len(q.options) - 1]} "
                        f"or a number 1-{len(q.options)}.", RED))
                continue
            quiz.select(choice)

        answer = quiz.submit()
        if answer.correct:
            p(color("  ✔ Correct!", GREEN))
        else:
            right = _LETTERS[q.correct]
            p(color(f"  ✘ Incorrect. Answer: {right}) {q.options[q.correct]}", RED))
        p(f"  {q.explanation}")
        p(f"  Score: {quiz.score}/{quiz.answered}")

        if quiz.is_complete:
            break
        quiz.next()

    quiz.finish()
    print_quiz_summary(quiz, out=out)
    return quiz


def print_quiz_summary(quiz: QuizSession, out: Optional[TextIO] = None) -> None:
    p = lambda *a, **kw: print(*a, file=(out or sys.stdout), **kw)  # noqa: E731

    tier_color = TIER_COLORS[quiz.tier]
    p(f"\n{_SEP}")
    p("  QUIZ COMPLETE")
    p(_SEP)
    p(f"  Your Score : {quiz.score} out of {quiz.total} ({color(f'{quiz.percentage}%', tier_color)})")
    p(f"  {color(quiz.feedback, tier_color)}")
    p(_sep)
    for q, correct in quiz.breakdown():
        mark = color("✔", GREEN) if correct else color("✘", RED)
        p(f"  {mark} {q.question}")
    p(_SEP)


def _cmd_quiz(args: argparse.Namespace) -> int:
    quiz = run_quiz(QUESTIONS)
    return 0 if quiz is not None else 1


# ──────────────────────────────────────────────────────────────────────────────
# outline
# ──────────────────────────────────────────────────────────────────────────────
def print_outline(out: Optional[TextIO] = None) -> None:
    p = lambda *a, **kw: print(*a, file=(out or sys.stdout), **kw)  # noqa: E731

    p(f"\n{BOLD}{CYAN}{'═' * _W}")
    p(f"  {APP_TITLE.upper()}")
    p(f"  {APP_SUBTITLE}")
    p(f"{'═' * _W}{RESET}")
    p("\n  Course Modules")
    for n, section in enumerate(COURSE_SECTIONS, 1):
        p(f"    {n}. {SECTION_TITLES[section]}")
    p("\n  Chart Patterns")
    for pattern in PATTERNS:
        p(f"    • {pattern.name:<24} {pattern.signal}")
    p("\n  Entry Strategies")
    for s in STRATEGIES:
        p(f"    • {s.title:<24} entry {s.entry.price:g}  stop {s.stop.price:g}  "
          f"target {s.target.price:g}  R:R {s.reward_to_risk:.1f}:1")
    p("\n  Glossary")
    for term in GLOSSARY:
        p(f"    {term.label}: {term.text}")
    p("")


def _cmd_outline(args: argparse.Namespace) -> int:
    print_outline()
    return 0


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="swing-academy",
        description=f"{APP_TITLE}: terminal tools.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calc", help="Position size from account, risk %%, entry and stop")
    calc.add_argument("--account", type=float, default=DEFAULT_ACCOUNT_SIZE,
                      help=f"Account size in $   (default: {DEFAULT_ACCOUNT_SIZE:g})")
    calc.add_argument("--risk",    type=float, default=DEFAULT_RISK_PCT,
                      help=f"Risk per trade %%    (default: {DEFAULT_RISK_PCT:g})")
    calc.add_argument("--entry",   type=float, default=DEFAULT_ENTRY_PRICE,
                      help=f"Entry price         (default: {DEFAULT_ENTRY_PRICE:g})")
    calc.add_argument("--stop",    type=float, default=DEFAULT_STOP_PRICE,
                      help=f"Stop-loss price     (default: {DEFAULT_STOP_PRICE:g})")
    calc.add_argument("--target",  type=float, default=None,
                      help="Profit target       (optional, adds reward-to-risk)")
    calc.set_defaults(func=_cmd_calc)

    quiz = sub.add_parser("quiz", help="Take the multiple-choice quiz")
    quiz.set_defaults(func=_cmd_quiz)

    outline = sub.add_parser("outline", help="Print modules, patterns, strategies and glossary")
    outline.set_defaults(func=_cmd_outline)

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(config.LOG_DIR)
    log.info("command: %s", args.command)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print(color("\n\nInterrupted by user.", YELLOW))
        return 130
