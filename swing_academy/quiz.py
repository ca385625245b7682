"""
Quiz scoring.
=============

A QuizSession walks a fixed question list once:

    select(i)  → choose an option (ignored once the answer is revealed)
    submit()   → lock the selection, score it, log it
    next()     → move on (only after the current answer is revealed);
                 past the last question it finishes the quiz
    finish()   → fire the completion callback, once, when the quiz is done

The running score is the count of submissions whose selected index equals
the question's correct index. The final percentage is rounded half-up and
bucketed into three feedback tiers with inclusive lower bounds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from swing_academy.config import EXCELLENT_PCT, GOOD_PCT
from swing_academy.logger import get_logger
from swing_academy.models import FeedbackTier, QuizAnswer, QuizQuestion

log = get_logger(__name__)

FEEDBACK_MESSAGES = {
    FeedbackTier.EXCELLENT:
        "Excellent! You have a strong understanding of Alan Farley's swing trading principles.",
    FeedbackTier.GOOD:
        "Good job! Review the modules to strengthen your understanding of key concepts.",
    FeedbackTier.KEEP_LEARNING:
        "Keep learning! Go back through the modules to better understand the core principles.",
}


def score_percentage(score: int, total: int) -> int:
    if total <= 0:
        return 0
    return math.floor(score * 100 / total + 0.5)


def feedback_tier(percentage: float) -> FeedbackTier:
    if percentage >= EXCELLENT_PCT:
        return FeedbackTier.EXCELLENT
    if percentage >= GOOD_PCT:
        return FeedbackTier.GOOD
    return FeedbackTier.KEEP_LEARNING


@dataclass
class QuizSession:
    questions:   Sequence[QuizQuestion]
    on_complete: Optional[Callable[[], None]] = None
    current:     int           = 0
    selected:    Optional[int] = None
    revealed:    bool          = False
    score:       int           = 0
    answers:     list[QuizAnswer] = field(default_factory=list)
    finished:    bool          = False

    @property
    def question(self) -> QuizQuestion:
        return self.questions[self.current]

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def answered(self) -> int:
        return len(self.answers)

    @property
    def is_last(self) -> bool:
        return self.current >= self.total - 1

    @property
    def is_complete(self) -> bool:
        return self.is_last and self.revealed

    @property
    def is_correct(self) -> bool:
        return self.selected is not None and self.selected == self.question.correct

    @property
    def percentage(self) -> int:
        return score_percentage(self.score, self.total)

    @property
    def tier(self) -> FeedbackTier:
        return feedback_tier(self.percentage)

    @property
    def feedback(self) -> str:
        return FEEDBACK_MESSAGES[self.tier]

    @property
    def progress(self) -> float:
        """Fraction of the question list reached, for a progress bar."""
        return (self.current + 1) / self.total if self.total else 0.0

    def select(self, index: int) -> bool:
        if self.revealed:
            return False
        if not 0 <= index < len(self.question.options):
            raise ValueError(f"option {index} outside 0..{len(self.question.options) - 1}")
        self.selected = index
        return True

    def submit(self) -> Optional[QuizAnswer]:
        if self.selected is None or self.revealed:
            return None
        answer = QuizAnswer(
            question_index=self.current,
            selected=self.selected,
            correct=self.is_correct,
        )
        self.revealed = True
        self.answers.append(answer)
        if answer.correct:
            self.score += 1
        log.debug("question %d answered %d: %s (score %d/%d)",
                  self.current + 1, answer.selected, answer.correct, self.score, self.answered)
        return answer

    def next(self) -> bool:
        """Move to the next question. Past the last one this finishes the quiz."""
        if not self.revealed:
            return False
        if self.is_last:
            self.finish()
            return False
        self.current += 1
        self.selected = None
        self.revealed = False
        return True

    def finish(self) -> bool:
        """Fire the completion callback the first time a complete quiz is finished."""
        if not self.is_complete or self.finished:
            return False
        self.finished = True
        log.info("quiz finished: %d/%d (%d%%)", self.score, self.total, self.percentage)
        if self.on_complete is not None:
            self.on_complete()
        return True

    def breakdown(self) -> list[tuple[QuizQuestion, bool]]:
        """(question, answered correctly) for every question; unanswered count as wrong."""
        by_index = {a.question_index: a.correct for a in self.answers}
        return [(q, by_index.get(i, False)) for i, q in enumerate(self.questions)]
