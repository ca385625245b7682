"""
Course session state.
=====================

One CourseSession per learner per browser session (or per terminal run).
It is the only mutable state in the app and is passed down explicitly to
every screen:

    current      : the section on screen
    completed    : set of Section values finished so far
    patterns     : LessonCursor over the chart patterns   (+ signal reveal flag)
    strategies   : LessonCursor over the entry strategies
    scenarios    : LessonCursor over the timeframe scenarios
    quiz         : QuizSession over the question bank
    calculator   : last inputs typed into the position-size calculator

Completion
----------
Each cursor and the quiz hold a callback bound to mark_complete(section).
Stepping past the last item, or pressing "Complete Module", fires it; the
cursor fires at most once, and mark_complete is a set insert, so the
completed set never double counts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Optional

from swing_academy.config import (
    DEFAULT_ACCOUNT_SIZE, DEFAULT_ENTRY_PRICE, DEFAULT_RISK_PCT,
    DEFAULT_STOP_PRICE, DEFAULT_TARGET_PRICE,
)
from swing_academy.content import COURSE_SECTIONS, Catalog
from swing_academy.logger import get_logger
from swing_academy.models import (
    ChartPattern, EntryStrategy, PositionSize, Section, TimeframeScenario,
)
from swing_academy.quiz import QuizSession
from swing_academy.risk import position_size

log = get_logger(__name__)


@dataclass
class LessonCursor:
    """Index into a fixed-length lesson list, clamped to its bounds."""
    length:      int
    on_complete: Optional[Callable[[], None]] = None
    index:       int  = 0
    completed:   bool = False

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index >= self.length - 1

    @property
    def progress(self) -> float:
        return (self.index + 1) / self.length if self.length else 0.0

    def advance(self) -> bool:
        """Step forward. On the last item this completes the module instead."""
        if self.is_last:
            self.finish()
            return False
        self.index += 1
        return True

    def back(self) -> bool:
        if self.is_first:
            return False
        self.index -= 1
        return True

    def jump(self, index: int) -> None:
        self.index = max(0, min(index, self.length - 1))

    def finish(self) -> bool:
        """Fire the completion callback; returns False if it already fired."""
        if self.completed:
            return False
        self.completed = True
        if self.on_complete is not None:
            self.on_complete()
        return True


@dataclass
class CalculatorInputs:
    account_size: float = DEFAULT_ACCOUNT_SIZE
    risk_pct:     float = DEFAULT_RISK_PCT
    entry_price:  float = DEFAULT_ENTRY_PRICE
    stop_price:   float = DEFAULT_STOP_PRICE
    target_price: Optional[float] = DEFAULT_TARGET_PRICE

    def result(self) -> PositionSize:
        return position_size(
            self.account_size, self.risk_pct, self.entry_price, self.stop_price, self.target_price,
        )


@dataclass
class CourseSession:
    catalog:          Catalog
    current:          Section = Section.INTRO
    completed:        set[Section] = field(default_factory=set)
    pattern_revealed: bool = False
    calculator:       CalculatorInputs = field(default_factory=CalculatorInputs)
    patterns:         LessonCursor = field(init=False)
    strategies:       LessonCursor = field(init=False)
    scenarios:        LessonCursor = field(init=False)
    quiz:             QuizSession  = field(init=False)

    def __post_init__(self) -> None:
        c = self.catalog
        self.patterns   = LessonCursor(len(c.patterns), partial(self.mark_complete, Section.PATTERNS))
        self.strategies = LessonCursor(len(c.strategies), partial(self.mark_complete, Section.ENTRIES))
        self.scenarios  = LessonCursor(len(c.scenarios), partial(self.mark_complete, Section.TIMEFRAMES))
        self.quiz       = QuizSession(c.questions, partial(self.mark_complete, Section.QUIZ))

    # ── navigation ──────────────────────────────────────────────────────────
    def go_to(self, section: Section) -> None:
        if section != self.current:
            log.info("section %s → %s", self.current.value, section.value)
        self.current = section

    def start_learning(self) -> None:
        self.go_to(Section.PATTERNS)

    # ── progress ────────────────────────────────────────────────────────────
    def mark_complete(self, section: Section) -> None:
        if section not in self.completed:
            log.info("module completed: %s", section.value)
        self.completed.add(section)

    def is_complete(self, section: Section) -> bool:
        return section in self.completed

    @property
    def progress(self) -> tuple[int, int]:
        """(completed, total) over the course sections; the intro does not count."""
        done = sum(1 for s in COURSE_SECTIONS if s in self.completed)
        return done, len(COURSE_SECTIONS)

    @property
    def course_finished(self) -> bool:
        done, total = self.progress
        return done == total

    # ── pattern lesson ──────────────────────────────────────────────────────
    @property
    def pattern(self) -> ChartPattern:
        return self.catalog.patterns[self.patterns.index]

    def reveal_signal(self) -> None:
        self.pattern_revealed = True

    def next_pattern(self) -> None:
        if self.patterns.advance():
            self.pattern_revealed = False

    def previous_pattern(self) -> None:
        if self.patterns.back():
            self.pattern_revealed = False

    # ── strategies / scenarios ──────────────────────────────────────────────
    @property
    def strategy(self) -> EntryStrategy:
        return self.catalog.strategies[self.strategies.index]

    @property
    def scenario(self) -> TimeframeScenario:
        return self.catalog.scenarios[self.scenarios.index]

    # ── risk lesson ─────────────────────────────────────────────────────────
    def complete_risk(self) -> None:
        self.mark_complete(Section.RISK)
