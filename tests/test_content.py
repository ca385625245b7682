import pytest
from pydantic import ValidationError

from swing_academy.content import (
    COURSE_SECTIONS, GLOSSARY, PATTERNS, QUESTIONS, SECTION_ICONS, SECTION_TITLES, STRATEGIES,
    load_catalog,
)
from swing_academy.models import EntryStrategy, PriceMark, PricePoint, QuizQuestion, Section


def test_catalog_sizes(catalog) -> None:
    assert len(catalog.patterns) == 4
    assert len(catalog.strategies) == 3
    assert len(catalog.scenarios) == 3
    assert len(catalog.questions) == 10


def test_every_section_has_title_and_icon() -> None:
    assert set(SECTION_TITLES) == set(Section)
    assert set(SECTION_ICONS) == set(Section)
    assert Section.INTRO not in COURSE_SECTIONS
    assert len(COURSE_SECTIONS) == 5


def test_patterns_have_eight_points_and_levels() -> None:
    for pattern in PATTERNS:
        assert [p.x for p in pattern.data] == list(range(1, 9))
        assert pattern.key_levels
    assert list(PATTERNS[0].key_levels) == ["neckline", "target"]


@pytest.mark.parametrize(
    ("title", "risk", "rr"),
    [
        ("Pullback Entry", 4, 11 / 4),
        ("Breakout Entry", 7, 9 / 7),
        ("Trend Reversal Entry", 10, 12 / 10),
    ],
)
def test_strategy_risk_and_reward(title, risk, rr) -> None:
    strategy = next(s for s in STRATEGIES if s.title == title)
    assert strategy.risk_per_share == risk
    assert strategy.reward_to_risk == pytest.approx(rr)
    assert len(strategy.rules) == 5


def test_questions_have_four_options_and_valid_answer() -> None:
    for q in QUESTIONS:
        assert len(q.options) == 4
        assert 0 <= q.correct < 4
        assert q.explanation


def test_question_with_bad_correct_index_is_rejected() -> None:
    with pytest.raises(ValidationError):
        QuizQuestion(question="?", options=["a", "b", "c", "d"], correct=4, explanation="")


def test_question_needs_four_options() -> None:
    with pytest.raises(ValidationError):
        QuizQuestion(question="?", options=["a", "b"], correct=0, explanation="")


def test_strategy_with_stop_at_entry_is_rejected() -> None:
    with pytest.raises(ValidationError):
        EntryStrategy(
            title="Broken",
            description="",
            data=[PricePoint(x=1, price=10)],
            entry=PriceMark(x=1, price=10, label="e"),
            stop=PriceMark(price=10, label="s"),
            target=PriceMark(price=12, label="t"),
            rules=[],
        )


def test_content_is_read_only() -> None:
    with pytest.raises(ValidationError):
        PATTERNS[0].name = "changed"


def test_glossary_defines_power_zone() -> None:
    assert "Power zone" in {term.label for term in GLOSSARY}


def test_catalog_scenarios_follow_seed() -> None:
    assert load_catalog(1).scenarios == load_catalog(1).scenarios


def _strategy(side: str, entry: float, stop: float, target: float) -> EntryStrategy:
    return EntryStrategy(
        title=f"{side} setup",
        description="",
        side=side,
        data=[PricePoint(x=1, price=entry)],
        entry=PriceMark(x=1, price=entry, label="e"),
        stop=PriceMark(price=stop, label="s"),
        target=PriceMark(price=target, label="t"),
        rules=[],
    )


def test_short_strategy_measures_risk_above_entry() -> None:
    short = _strategy("sell", entry=100, stop=105, target=90)
    assert short.direction == -1
    assert short.risk_per_share == 5
    assert short.reward_to_risk == 2


@pytest.mark.parametrize(("side", "stop"), [("buy", 105), ("sell", 95)])
def test_stop_on_profit_side_is_rejected(side, stop) -> None:
    with pytest.raises(ValidationError):
        _strategy(side, entry=100, stop=stop, target=110)
