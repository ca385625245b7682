import typing

from swing_academy.models import ChartPattern, EntryStrategy, Section, TimeframeScenario
from swing_academy.session import CalculatorInputs, CourseSession, LessonCursor


def test_cursor_fires_completion_once_past_last_item() -> None:
    calls = []
    cursor = LessonCursor(3, on_complete=lambda: calls.append(1))
    assert cursor.advance() is True
    assert cursor.advance() is True
    assert cursor.is_last
    assert cursor.advance() is False
    assert cursor.advance() is False
    assert cursor.finish() is False
    assert cursor.index == 2
    assert calls == [1]


def test_cursor_back_and_jump_are_clamped() -> None:
    cursor = LessonCursor(4)
    assert cursor.back() is False
    cursor.jump(10)
    assert cursor.index == 3
    cursor.jump(-2)
    assert cursor.index == 0
    cursor.jump(2)
    assert cursor.progress == 0.75


def test_new_session_starts_on_intro(catalog) -> None:
    course = CourseSession(catalog)
    assert course.current == Section.INTRO
    assert course.completed == set()
    assert course.progress == (0, 5)
    course.start_learning()
    assert course.current == Section.PATTERNS


def test_walking_patterns_completes_module(catalog) -> None:
    course = CourseSession(catalog)
    for _ in range(len(catalog.patterns)):
        course.next_pattern()
    assert course.is_complete(Section.PATTERNS)
    assert course.progress == (1, 5)
    course.next_pattern()
    assert course.progress == (1, 5)


def test_reveal_resets_on_pattern_move(catalog) -> None:
    course = CourseSession(catalog)
    course.reveal_signal()
    assert course.pattern_revealed
    course.previous_pattern()  # already on the first pattern
    assert course.pattern_revealed
    course.next_pattern()
    assert not course.pattern_revealed
    assert course.pattern == catalog.patterns[1]
    course.reveal_signal()
    course.previous_pattern()
    assert not course.pattern_revealed


def test_each_module_marks_its_own_section(catalog) -> None:
    course = CourseSession(catalog)
    course.strategies.finish()
    course.scenarios.jump(len(catalog.scenarios) - 1)
    course.scenarios.advance()
    course.complete_risk()
    assert course.completed == {Section.ENTRIES, Section.TIMEFRAMES, Section.RISK}


def test_course_finished_after_all_modules(catalog) -> None:
    course = CourseSession(catalog)
    for _ in catalog.patterns:
        course.next_pattern()
    course.complete_risk()
    course.scenarios.finish()
    course.strategies.finish()
    for q in catalog.questions:
        course.quiz.select(q.correct)
        course.quiz.submit()
        course.quiz.next()
    assert course.course_finished
    assert course.progress == (5, 5)


def test_intro_never_counts_towards_progress(catalog) -> None:
    course = CourseSession(catalog)
    course.mark_complete(Section.INTRO)
    assert course.progress == (0, 5)


def test_calculator_inputs_default_to_practice_scenario() -> None:
    result = CalculatorInputs().result()
    assert result.position_size == 100
    assert result.reward_to_risk == 2.0


def test_current_lesson_properties_are_typed(catalog) -> None:
    course = CourseSession(catalog)
    hints = {
        name: typing.get_type_hints(getattr(CourseSession, name).fget)["return"]
        for name in ("pattern", "strategy", "scenario")
    }
    assert hints == {"pattern": ChartPattern, "strategy": EntryStrategy, "scenario": TimeframeScenario}
    assert isinstance(course.pattern, ChartPattern)
    assert isinstance(course.strategy, EntryStrategy)
    assert isinstance(course.scenario, TimeframeScenario)
