"""
Multiple-timeframe scenarios.
=============================

Each scenario shows the same instrument on three charts, longest first:

    Weekly   → primary trend and major support/resistance
    Daily    → swing setups inside that trend
    4-Hour   → entry timing

The price series are illustrative, not market data. They are generated
once per process from a seeded RNG so every rerun of the page draws the
same bars:

    trending : start + (end − start)·i/(n−1) + (r − 0.3)·5
    neutral  : start + (r − 0.5)·10

rounded half-up to whole prices.

Alignment
---------
classify_alignment() turns three trend labels into the signal the lesson
teaches:

    all up                      → BULLISH          (power zone)
    all down                    → BEARISH          (power zone)
    weekly == daily != 4-hour,
      and 4-hour is not neutral → EARLY_REVERSAL   (counter-trend bounce)
    anything else               → NEUTRAL          (wait for alignment)
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from swing_academy.config import TIMEFRAME_POINTS, TIMEFRAME_SEED
from swing_academy.models import PricePoint, Signal, Timeframe, TimeframeScenario, TimeframeView, Trend


@dataclass(frozen=True)
class _Leg:
    trend: Trend
    start: float
    end:   float


@dataclass(frozen=True)
class _ScenarioSpec:
    title:       str
    weekly:      _Leg
    daily:       _Leg
    four_hour:   _Leg
    signal:      Signal
    description: str
    action:      str


_SCENARIOS = [
    _ScenarioSpec(
        title="Strong Alignment - Best Setup",
        weekly=_Leg(Trend.UP, 90, 135),
        daily=_Leg(Trend.UP, 100, 130),
        four_hour=_Leg(Trend.UP, 120, 135),
        signal=Signal.BULLISH,
        description="All timeframes showing uptrend - highest probability long setup",
        action="Look for pullbacks to support on 4H chart for entry",
    ),
    _ScenarioSpec(
        title="Conflicting Signals - Caution",
        weekly=_Leg(Trend.NEUTRAL, 110, 115),
        daily=_Leg(Trend.UP, 100, 125),
        four_hour=_Leg(Trend.DOWN, 125, 110),
        signal=Signal.NEUTRAL,
        description="Mixed signals across timeframes - wait for alignment",
        action="Stay on sidelines or reduce position size significantly",
    ),
    _ScenarioSpec(
        title="Trend Reversal Setup",
        weekly=_Leg(Trend.DOWN, 130, 90),
        daily=_Leg(Trend.DOWN, 120, 95),
        four_hour=_Leg(Trend.UP, 95, 105),
        signal=Signal.EARLY_REVERSAL,
        description="Short-term reversal against longer-term downtrend",
        action="Counter-trend trade - requires tight stops and quick profit-taking",
    ),
]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def generate_trend_data(
    points: int,
    start:  float,
    end:    float,
    trend:  Trend,
    rng:    random.Random,
) -> list[PricePoint]:
    """Noisy walk from ``start`` to ``end`` (or a flat band around ``start``)."""
    data = []
    for i in range(points):
        r = rng.random()
        if trend == Trend.NEUTRAL:
            value = start + (r - 0.5) * 10
        else:
            step  = (end - start) * i / (points - 1) if points > 1 else 0.0
            value = start + step + (r - 0.3) * 5
        data.append(PricePoint(x=i + 1, price=_round_half_up(value)))
    return data


def classify_alignment(weekly: Trend, daily: Trend, four_hour: Trend) -> Signal:
    trends = {weekly, daily, four_hour}
    if trends == {Trend.UP}:
        return Signal.BULLISH
    if trends == {Trend.DOWN}:
        return Signal.BEARISH
    if weekly == daily != four_hour and Trend.NEUTRAL not in trends:
        return Signal.EARLY_REVERSAL
    return Signal.NEUTRAL


def is_power_zone(scenario: TimeframeScenario) -> bool:
    """True when every timeframe agrees on a direction."""
    trends = {v.trend for v in scenario.views}
    return len(trends) == 1 and Trend.NEUTRAL not in trends


def build_scenarios(seed: int = TIMEFRAME_SEED, points: int = TIMEFRAME_POINTS) -> list[TimeframeScenario]:
    rng = random.Random(seed)
    scenarios = []
    for spec in _SCENARIOS:
        legs = (
            (Timeframe.WEEKLY, spec.weekly),
            (Timeframe.DAILY, spec.daily),
            (Timeframe.FOUR_HOUR, spec.four_hour),
        )
        views = [
            TimeframeView(
                timeframe=tf,
                trend=leg.trend,
                data=generate_trend_data(points, leg.start, leg.end, leg.trend, rng),
            )
            for tf, leg in legs
        ]
        scenarios.append(TimeframeScenario(
            title=spec.title,
            views=views,
            signal=spec.signal,
            description=spec.description,
            action=spec.action,
        ))
    return scenarios
