from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Section(str, Enum):
    INTRO      = "intro"
    PATTERNS   = "patterns"
    RISK       = "risk"
    TIMEFRAMES = "timeframes"
    ENTRIES    = "entries"
    QUIZ       = "quiz"


class Trend(str, Enum):
    UP      = "up"
    DOWN    = "down"
    NEUTRAL = "neutral"


class Signal(str, Enum):
    BULLISH        = "bullish"          # every timeframe up, power zone
    BEARISH        = "bearish"          # every timeframe down, power zone
    NEUTRAL        = "neutral"          # mixed, wait for alignment
    EARLY_REVERSAL = "early-reversal"   # short term running against the longer two


class Timeframe(str, Enum):
    WEEKLY    = "Weekly"
    DAILY     = "Daily"
    FOUR_HOUR = "4-Hour"


class FeedbackTier(str, Enum):
    EXCELLENT     = "excellent"
    GOOD          = "good"
    KEEP_LEARNING = "keep-learning"


class _Content(BaseModel):
    """Read-only course content. Built once at startup, never mutated."""
    model_config = ConfigDict(frozen=True)


class PricePoint(_Content):
    x:     int
    price: float


class Principle(_Content):
    """One labelled bullet of a narrative list ("Hard Stop: always use ...")."""
    label: str
    text:  str


class ChartPattern(_Content):
    name:        str
    description: str
    signal:      str
    data:        list[PricePoint]
    key_levels:  dict[str, float]   # insertion order is display order


class PriceMark(_Content):
    price: float
    label: str
    x:     Optional[int] = None     # only the entry mark sits on the time axis


class EntryStrategy(_Content):
    title:       str
    description: str
    side:        Literal["buy", "sell"] = "buy"
    data:        list[PricePoint]
    entry:       PriceMark
    stop:        PriceMark
    target:      PriceMark
    rules:       list[str]

    @property
    def direction(self) -> int:
        """+1 for a long setup, -1 for a short one."""
        return 1 if self.side == "buy" else -1

    @property
    def risk_per_share(self) -> float:
        return (self.entry.price - self.stop.price) * self.direction

    @property
    def reward_to_risk(self) -> float:
        return (self.target.price - self.entry.price) * self.direction / self.risk_per_share

    @model_validator(mode="after")
    def _entry_on_chart(self) -> "EntryStrategy":
        if self.entry.x is None:
            raise ValueError(f"{self.title}: entry mark needs an x position")
        if self.risk_per_share <= 0:
            raise ValueError(f"{self.title}: stop must sit on the losing side of a {self.side} entry")
        return self


class QuizQuestion(_Content):
    question:    str
    options:     list[str] = Field(min_length=4, max_length=4)
    correct:     int
    explanation: str

    @model_validator(mode="after")
    def _correct_in_range(self) -> "QuizQuestion":
        if not 0 <= self.correct < len(self.options):
            raise ValueError(
                f"correct index {self.correct} outside options 0..{len(self.options) - 1}"
            )
        return self


class TimeframeView(_Content):
    timeframe: Timeframe
    trend:     Trend
    data:      list[PricePoint]


class TimeframeScenario(_Content):
    """
    Three charts of the same instrument, longest timeframe first.

    The signal is stored with the scenario (it is teaching content), and
    timeframes.classify_alignment() derives the same value from the trends.
    """
    title:       str
    views:       list[TimeframeView]
    signal:      Signal
    description: str
    action:      str

    def view(self, timeframe: Timeframe) -> TimeframeView:
        for v in self.views:
            if v.timeframe == timeframe:
                return v
        raise KeyError(timeframe)


class PositionSize(BaseModel):
    """Output of the position-size calculator for one set of inputs."""
    risk_amount:      float
    risk_per_share:   float
    position_size:    int
    total_position:   float
    account_fraction: Optional[float] = None   # total_position as % of account
    reward_to_risk:   Optional[float] = None
    potential_profit: Optional[float] = None
    warnings:         list[str]       = Field(default_factory=list)


class QuizAnswer(BaseModel):
    """One locked-in quiz submission."""
    question_index: int
    selected:       int
    correct:        bool
