"""Drive ui/app.py headless with streamlit's AppTest."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import swing_academy.logger as logger
from swing_academy.content import QUESTIONS
from swing_academy.models import Section

ROOT = Path(__file__).resolve().parents[1]

APP = ROOT / "ui" / "app.py"


@pytest.fixture
def at(monkeypatch) -> AppTest:
    monkeypatch.setattr(logger, "_configured", True)
    app = AppTest.from_file(str(APP), default_timeout=30)
    app.run()
    assert not app.exception
    return app


def click(at: AppTest, key: str) -> None:
    at.button(key=key).click().run()
    assert not at.exception


def test_opens_on_intro(at) -> None:
    course = at.session_state["course"]
    assert course.current == Section.INTRO
    assert course.progress == (0, 5)


def test_start_learning_opens_patterns(at) -> None:
    click(at, "start_learning")
    assert at.session_state["course"].current == Section.PATTERNS


def test_reveal_signal_shows_key_levels(at) -> None:
    click(at, "start_learning")
    click(at, "reveal_signal")
    assert at.session_state["course"].pattern_revealed
    assert any("Bearish reversal" in s.value for s in at.success)


def test_walking_patterns_completes_module(at) -> None:
    click(at, "start_learning")
    for _ in range(4):
        click(at, "pattern_next")
    course = at.session_state["course"]
    assert course.patterns.index == 3
    assert course.is_complete(Section.PATTERNS)


def test_risk_calculator_defaults(at) -> None:
    click(at, "nav_risk")
    metrics = {m.label: m.value for m in at.metric}
    assert metrics["Risk Amount"] == "$200.00"
    assert metrics["Risk Per Share"] == "$2.00"
    assert metrics["Position Size"] == "100 shares"
    assert metrics["Total Position Value"] == "$5,000.00"
    assert not at.warning


def test_risk_calculator_entry_equals_stop(at) -> None:
    click(at, "nav_risk")
    at.number_input(key="calc_stop").set_value(50.0).run()
    metrics = {m.label: m.value for m in at.metric}
    assert metrics["Position Size"] == "0 shares"
    assert any("Entry equals stop" in w.value for w in at.warning)


def test_timeframe_scenarios_navigate(at) -> None:
    click(at, "nav_timeframes")
    click(at, "scenario_next")
    assert at.session_state["course"].scenarios.index == 1
    click(at, "scenario_dot_2")
    assert at.session_state["course"].scenarios.index == 2
    click(at, "timeframes_complete")
    assert at.session_state["course"].is_complete(Section.TIMEFRAMES)


def test_quiz_to_results(at) -> None:
    click(at, "nav_quiz")
    for n, q in enumerate(QUESTIONS):
        click(at, f"quiz_{n}_opt_{q.correct}")
        click(at, "quiz_submit")
        click(at, "quiz_next")
    course = at.session_state["course"]
    assert course.quiz.score == 10
    assert course.is_complete(Section.QUIZ)
    assert any("Quiz Complete" in m.value for m in at.markdown)


def test_calculator_inputs_survive_navigation(at) -> None:
    click(at, "nav_risk")
    at.number_input(key="calc_account").set_value(20000.0).run()
    at.number_input(key="calc_stop").set_value(49.0).run()
    click(at, "nav_intro")
    click(at, "nav_risk")
    assert at.number_input(key="calc_account").value == 20000.0
    assert at.number_input(key="calc_stop").value == 49.0
    metrics = {m.label: m.value for m in at.metric}
    assert metrics["Risk Amount"] == "$400.00"
    assert metrics["Position Size"] == "400 shares"
    assert at.session_state["course"].calculator.account_size == 20000.0
