"""
Course content: every table the screens render.
================================================

All lesson data is literal and read-only. Tables are validated by the
pydantic models in swing_academy.models when this module is imported, so
a typo in a quiz answer index fails at startup rather than mid-quiz.

Only the timeframe scenarios are generated (their price series come from a
seeded RNG); load_catalog() builds them alongside the literal tables.
"""

from __future__ import annotations

from dataclasses import dataclass

from swing_academy.config import TIMEFRAME_SEED
from swing_academy.models import (
    ChartPattern,
    EntryStrategy,
    PricePoint,
    PriceMark,
    Principle,
    QuizQuestion,
    Section,
    TimeframeScenario,
)
from swing_academy.timeframes import build_scenarios


def _series(*prices: float) -> list[PricePoint]:
    return [PricePoint(x=i, price=p) for i, p in enumerate(prices, 1)]


def _principles(*pairs: tuple[str, str]) -> tuple[Principle, ...]:
    return tuple(Principle(label=label, text=text) for label, text in pairs)


# ──────────────────────────────────────────────────────────────────────────────
# Navigation
# ──────────────────────────────────────────────────────────────────────────────
SECTION_TITLES = {
    Section.INTRO:      "Introduction",
    Section.PATTERNS:   "Pattern Recognition",
    Section.RISK:       "Risk Management",
    Section.TIMEFRAMES: "Timeframe Analysis",
    Section.ENTRIES:    "Entry & Exit Strategies",
    Section.QUIZ:       "Test Your Knowledge",
}
SECTION_ICONS = {
    Section.INTRO:      "📖",
    Section.PATTERNS:   "📊",
    Section.RISK:       "🎯",
    Section.TIMEFRAMES: "📈",
    Section.ENTRIES:    "➡️",
    Section.QUIZ:       "🏆",
}
# Sections that count towards course progress, in learning order.
COURSE_SECTIONS = (
    Section.PATTERNS, Section.RISK, Section.TIMEFRAMES, Section.ENTRIES, Section.QUIZ,
)


# ──────────────────────────────────────────────────────────────────────────────
# Introduction
# ──────────────────────────────────────────────────────────────────────────────
INTRO_TEXT = (
    "Master the art of swing trading with principles from Alan Farley's renowned book "
    "*\"The Master Swing Trader\"*. This interactive course will teach you the essential "
    "concepts and strategies used by professional traders."
)
WHAT_IS_SWING_TRADING = (
    "Swing trading is a strategy that attempts to capture gains in a stock within 1 to 7 days. "
    "Unlike day trading, swing traders hold positions overnight and for several days, targeting "
    "medium-term price movements."
)
CORE_PRINCIPLES = _principles(
    ("Pattern Recognition",
     "Learn to identify classic chart patterns like head and shoulders, double tops/bottoms, "
     "and continuation patterns that signal potential trades."),
    ("Risk Management",
     "Master the 2% rule, position sizing, and stop-loss placement to protect your capital "
     "and survive in the markets long-term."),
    ("Multiple Timeframes",
     "Use daily, weekly, and intraday charts together to confirm trends and find optimal "
     "entry points with multiple timeframe analysis."),
    ("Entry & Exit Rules",
     "Develop systematic entry and exit strategies using support/resistance levels, "
     "Fibonacci retracements, and momentum indicators."),
)
METHODOLOGY = _principles(
    ("Pattern Cycles",
     "Markets move through predictable cycles of accumulation, markup, distribution, and markdown"),
    ("Support/Resistance",
     "Price memory creates levels where buyers and sellers repeatedly battle"),
    ("3D Charting",
     "Analyze price, volume, and time together for complete market understanding"),
    ("Trend Mechanics",
     "Trade with the trend using pullbacks and breakouts for best probability"),
)
LEARNING_PATH = _principles(
    ("Pattern Recognition", "Learn to spot classic chart patterns and understand what they mean"),
    ("Risk Management", "Calculate position sizes and set proper stop-losses"),
    ("Timeframe Analysis", "Use multiple timeframes to confirm your trading decisions"),
    ("Entry & Exit Strategies", "Develop systematic rules for when to enter and exit trades"),
    ("Test Your Knowledge", "Complete the quiz to verify your understanding"),
)


# ──────────────────────────────────────────────────────────────────────────────
# Pattern recognition
# ──────────────────────────────────────────────────────────────────────────────
PATTERNS = (
    ChartPattern(
        name="Head and Shoulders",
        description=(
            "A reversal pattern that forms after an uptrend. It consists of a peak (shoulder), "
            "followed by a higher peak (head), and then another lower peak (shoulder)."
        ),
        signal="Bearish reversal - indicates potential trend change from up to down",
        data=_series(100, 110, 105, 120, 105, 110, 95, 90),
        key_levels={"neckline": 105, "target": 90},
    ),
    ChartPattern(
        name="Double Bottom",
        description=(
            "A bullish reversal pattern that appears after a downtrend. Price tests a support "
            "level twice, failing to break below, forming a \"W\" shape."
        ),
        signal="Bullish reversal - indicates potential trend change from down to up",
        data=_series(100, 85, 95, 90, 85, 95, 105, 110),
        key_levels={"support": 85, "resistance": 95},
    ),
    ChartPattern(
        name="Bull Flag",
        description=(
            "A continuation pattern that occurs during an uptrend. After a strong rally "
            "(flagpole), price consolidates in a slight downward channel before breaking out upward."
        ),
        signal="Bullish continuation - expect uptrend to resume",
        data=_series(80, 90, 100, 98, 96, 94, 102, 110),
        key_levels={"flagTop": 98, "flagBottom": 94},
    ),
    ChartPattern(
        name="Triangle Consolidation",
        description=(
            "Price forms higher lows and lower highs, creating converging trendlines. "
            "Volume typically decreases during formation."
        ),
        signal="Continuation pattern - breakout direction determines trade direction",
        data=_series(95, 105, 97, 103, 99, 101, 100, 108),
        key_levels={"apex": 100},
    ),
)
PATTERN_KEY_CONCEPTS = _principles(
    ("Formation", "Look for this pattern after a clear preceding trend"),
    ("Volume", "Volume should confirm the pattern (increase on breakout)"),
    ("Confirmation", "Wait for price to break key levels before entering"),
    ("Risk Management", "Place stops beyond the pattern extremes"),
)


# ──────────────────────────────────────────────────────────────────────────────
# Risk management
# ──────────────────────────────────────────────────────────────────────────────
TWO_PERCENT_RULE = (
    "Alan Farley emphasizes never risking more than 2% of your account on any single trade. "
    "This is the golden rule of capital preservation. Even with a 50% win rate, you can stay "
    "profitable long-term by following this principle."
)
STOP_PLACEMENT = _principles(
    ("Below support", "Place stops just below key support levels"),
    ("Pattern extremes", "Use pattern lows/highs as stop references"),
    ("ATR method", "1.5-2x Average True Range below entry"),
    ("Never mental", "Always use hard stops in the market"),
)
PROFIT_TARGETS = _principles(
    ("Risk/Reward", "Target minimum 2:1 reward-to-risk ratio"),
    ("Scale out", "Take partial profits at key resistance levels"),
    ("Trail stops", "Move stop to breakeven, then trail upward"),
    ("Pattern targets", "Measure pattern height for price targets"),
)
RISK_PRINCIPLES = _principles(
    ("Capital Preservation", "Protecting your capital is more important than making profits"),
    ("Position Sizing", "Smaller positions = longer survival = more opportunities to profit"),
    ("Emotional Control", "Pre-calculated risk removes emotion from trading decisions"),
    ("Consistency", "Use the same risk rules for every single trade without exception"),
    ("Documentation", "Keep a trading journal to track risk metrics and improve over time"),
)


# ──────────────────────────────────────────────────────────────────────────────
# Timeframe analysis
# ──────────────────────────────────────────────────────────────────────────────
TIMEFRAME_INTRO = (
    "Alan Farley teaches that successful swing traders must analyze three timeframes "
    "simultaneously. This \"3D\" approach reveals the complete market picture and helps "
    "identify high-probability setups."
)
TIMEFRAME_HIERARCHY = _principles(
    ("Long-term", "Weekly chart shows overall trend and major support/resistance"),
    ("Medium-term", "Daily chart identifies swing opportunities within the trend"),
    ("Short-term", "4-hour/1-hour chart times precise entry and exit points"),
)
TIMEFRAME_RULES = _principles(
    ("Trend Alignment",
     "Best trades occur when all timeframes point in the same direction. This creates "
     "\"power zones\" with highest probability of success."),
    ("Entry Timing",
     "Use the shortest timeframe for precise entry after longer timeframes confirm the trend. "
     "Enter on pullbacks to support in uptrends."),
    ("Conflict Management",
     "When timeframes conflict, either wait for alignment or reduce position size. "
     "Never force trades with mixed signals."),
    ("Stop Placement",
     "Set stops based on the entry timeframe, but profit targets should respect resistance "
     "levels on higher timeframes."),
    ("Pattern Confirmation",
     "A pattern on the daily chart has more significance if it aligns with weekly "
     "support/resistance levels."),
)
TIMEFRAME_WORKFLOW = (
    "Check weekly chart first - identify the primary trend and key S/R levels",
    "Move to daily chart - look for patterns and setups aligned with weekly trend",
    "Drop to 4-hour chart - time your entry on pullbacks or breakouts",
    "Set stop loss based on 4H chart, but check it doesn't violate daily support",
    "Set profit target at daily/weekly resistance levels for optimal exit",
)


# ──────────────────────────────────────────────────────────────────────────────
# Entry & exit strategies
# ──────────────────────────────────────────────────────────────────────────────
SYSTEMATIC_TRADING = (
    "Alan Farley emphasizes that successful swing trading requires systematic rules for both "
    "entries and exits. Emotional decisions lead to poor results. Define your entry and exit "
    "criteria before the trade and stick to them without exception."
)
STRATEGIES = (
    EntryStrategy(
        title="Pullback Entry",
        description="Enter on a pullback to support within an established uptrend",
        data=_series(100, 108, 115, 112, 107, 109, 116, 122),
        entry=PriceMark(x=6, price=109, label="Entry at support"),
        stop=PriceMark(price=105, label="Stop below support"),
        target=PriceMark(price=120, label="Target at resistance"),
        rules=[
            "Identify clear uptrend on higher timeframe",
            "Wait for pullback to support level or moving average",
            "Look for reversal signals (bullish candle, volume increase)",
            "Enter when price bounces off support",
            "Place stop below support level",
        ],
    ),
    EntryStrategy(
        title="Breakout Entry",
        description="Enter as price breaks above resistance with strong volume",
        data=_series(95, 98, 100, 99, 101, 106, 110, 112),
        entry=PriceMark(x=6, price=106, label="Entry on breakout"),
        stop=PriceMark(price=99, label="Stop at old resistance"),
        target=PriceMark(price=115, label="Measured move target"),
        rules=[
            "Identify consolidation or resistance level",
            "Wait for volume to expand on breakout",
            "Enter on breakout or on retest of old resistance",
            "Place stop at prior resistance (now support)",
            "Target = breakout point + pattern height",
        ],
    ),
    EntryStrategy(
        title="Trend Reversal Entry",
        description="Enter after confirmed trend reversal pattern",
        data=_series(120, 110, 95, 90, 92, 98, 105, 110),
        entry=PriceMark(x=6, price=98, label="Entry after double bottom"),
        stop=PriceMark(price=88, label="Stop below pattern low"),
        target=PriceMark(price=110, label="Target at neckline"),
        rules=[
            "Wait for complete reversal pattern formation",
            "Confirm with volume and momentum indicators",
            "Enter after neckline break or on retest",
            "Place stop beyond pattern extreme",
            "Initial target at pattern neckline or resistance",
        ],
    ),
)
PROFIT_EXITS = _principles(
    ("Scale Out", "Sell 1/3 at first resistance, 1/3 at second, trail final 1/3"),
    ("Trailing Stop", "Move stop to breakeven at 1R, then trail below recent lows"),
    ("Time Stop", "Exit if target not reached within expected timeframe (3-7 days)"),
    ("Pattern Target", "Exit at measured move or Fibonacci extension levels"),
    ("Momentum Exit", "Exit when momentum indicators show divergence or exhaustion"),
)
LOSS_EXITS = _principles(
    ("Hard Stop", "Always use a stop loss order in the market, never mental stops"),
    ("Pattern Break", "Exit immediately if pattern is violated (breakdown below support)"),
    ("Time Decay", "Exit if setup fails to trigger within 2-3 days of pattern completion"),
    ("News Event", "Exit before major earnings or news if it arrives during your hold period"),
    ("Wrong Analysis", "Exit immediately if you realize your analysis was incorrect"),
)
EXIT_PRINCIPLES = _principles(
    ("Plan the Trade", "Know your entry, stop, and target before placing any order"),
    ("Trade the Plan", "Execute your predetermined strategy without emotional interference"),
    ("Cut Losses Quick", "Take small losses immediately when stop is hit - no hoping or averaging down"),
    ("Let Winners Run", "Trail stops on profitable trades to capture larger moves"),
    ("Review & Learn", "Journal every trade to identify patterns in your behavior and improve"),
)


# ──────────────────────────────────────────────────────────────────────────────
# Quiz
# ──────────────────────────────────────────────────────────────────────────────
QUESTIONS = (
    QuizQuestion(
        question=("According to Alan Farley, what is the maximum percentage of your account "
                  "you should risk on a single trade?"),
        options=["1%", "2%", "5%", "10%"],
        correct=1,
        explanation=("The 2% rule is fundamental to capital preservation. Risking more increases "
                     "the chance of significant drawdowns."),
    ),
    QuizQuestion(
        question="In a Head and Shoulders pattern, what does the pattern signal?",
        options=["Bullish continuation", "Bearish reversal", "Neutral consolidation", "Bullish reversal"],
        correct=1,
        explanation=("Head and Shoulders is a bearish reversal pattern that forms after an uptrend, "
                     "signaling a potential trend change."),
    ),
    QuizQuestion(
        question="What is the recommended reward-to-risk ratio for swing trades?",
        options=["1:1", "2:1 or better", "3:1 or better", "Any positive ratio"],
        correct=1,
        explanation=("Farley recommends targeting at least 2:1 reward-to-risk. This allows you to "
                     "be profitable even with a 40% win rate."),
    ),
    QuizQuestion(
        question="When using multiple timeframe analysis, which timeframe should you check first?",
        options=["1-hour chart", "4-hour chart", "Daily chart", "Weekly chart"],
        correct=3,
        explanation=("Always start with the weekly chart to identify the primary trend and major "
                     "support/resistance levels."),
    ),
    QuizQuestion(
        question="What is the best setup for a swing trade according to multiple timeframe analysis?",
        options=[
            "All timeframes showing the same trend",
            "Daily and weekly in conflict",
            "Only the daily chart matters",
            "Short-term counter to long-term trend",
        ],
        correct=0,
        explanation=("The highest probability setups occur when all timeframes align in the same "
                     "direction - these are \"power zones\"."),
    ),
    QuizQuestion(
        question="Where should you place your stop loss on a pullback entry in an uptrend?",
        options=["At the entry price", "Just below support level", "10% below entry", "At the recent high"],
        correct=1,
        explanation=("Place stops just below the support level that you used for entry. If support "
                     "breaks, your trade thesis is invalid."),
    ),
    QuizQuestion(
        question="What is a Bull Flag pattern?",
        options=[
            "A reversal pattern",
            "A topping pattern",
            "A continuation pattern during uptrend",
            "A bottoming pattern",
        ],
        correct=2,
        explanation=("Bull Flag is a continuation pattern - a brief consolidation during an uptrend "
                     "before the trend resumes higher."),
    ),
    QuizQuestion(
        question="When should you move your stop loss to breakeven?",
        options=[
            "Immediately after entry",
            "When profit equals your initial risk (1R)",
            "Never move stops",
            "Only at the profit target",
        ],
        correct=1,
        explanation=("Move your stop to breakeven once the trade has moved in your favor by 1R "
                     "(one times your initial risk)."),
    ),
    QuizQuestion(
        question="What does Farley mean by \"3D charting\"?",
        options=[
            "Three-dimensional charts",
            "Analyzing price, volume, and time together",
            "Using three indicators",
            "Three different stocks",
        ],
        correct=1,
        explanation=("3D charting means analyzing price action, volume patterns, and time cycles "
                     "together for complete market understanding."),
    ),
    QuizQuestion(
        question="What is the primary benefit of scaling out of winning positions?",
        options=[
            "It guarantees profits",
            "It locks in partial gains while keeping exposure to larger moves",
            "It avoids all risk",
            "It increases position size",
        ],
        correct=1,
        explanation=("Scaling out locks in partial profits while leaving some position to capture "
                     "larger moves if the trend continues."),
    ),
)


# ──────────────────────────────────────────────────────────────────────────────
# Glossary
# ──────────────────────────────────────────────────────────────────────────────
GLOSSARY = _principles(
    ("Swing trade",
     "A position held from roughly one to seven days targeting a medium-term price move."),
    ("Risk-per-share",
     "Absolute price distance between entry and stop-loss, used as the per-unit loss basis."),
    ("Reward-to-risk ratio",
     "Ratio of expected gain (target - entry) to expected loss (entry - stop)."),
    ("Power zone",
     "Scenario where multiple chart timeframes agree on trend direction."),
)


@dataclass(frozen=True)
class Catalog:
    """The four fixed lists a course session walks through."""
    patterns:   tuple[ChartPattern, ...]
    strategies: tuple[EntryStrategy, ...]
    scenarios:  tuple[TimeframeScenario, ...]
    questions:  tuple[QuizQuestion, ...]


def load_catalog(seed: int = TIMEFRAME_SEED) -> Catalog:
    """Assemble the course tables. Only the scenario price series depend on ``seed``."""
    return Catalog(
        patterns   = PATTERNS,
        strategies = STRATEGIES,
        scenarios  = tuple(build_scenarios(seed)),
        questions  = QUESTIONS,
    )
