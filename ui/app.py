"""
Swing Trading Academy
=====================
Single-page course: introduction, four lesson modules, a position-size
calculator and a scored quiz.

    streamlit run ui/app.py

All lesson content is static (swing_academy.content). The only state is
one CourseSession per browser session, kept in st.session_state["course"]
and passed to every screen. Buttons mutate it through on_click callbacks,
then Streamlit reruns this script top to bottom.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import streamlit as st

from swing_academy import config
from swing_academy.charts import pattern_figure, strategy_figure, timeframe_figure
from swing_academy.content import (
    CORE_PRINCIPLES, EXIT_PRINCIPLES, GLOSSARY, INTRO_TEXT, LEARNING_PATH, LOSS_EXITS,
    METHODOLOGY, PATTERN_KEY_CONCEPTS, PROFIT_EXITS, PROFIT_TARGETS, RISK_PRINCIPLES,
    SECTION_ICONS, SECTION_TITLES, STOP_PLACEMENT, SYSTEMATIC_TRADING, TIMEFRAME_HIERARCHY,
    TIMEFRAME_INTRO, TIMEFRAME_RULES, TIMEFRAME_WORKFLOW, TWO_PERCENT_RULE,
    WHAT_IS_SWING_TRADING, Catalog, load_catalog,
)
from swing_academy.logger import get_logger, setup_logging
from swing_academy.models import FeedbackTier, Section, Signal, Timeframe, Trend
from swing_academy.risk import position_size
from swing_academy.session import CalculatorInputs, CourseSession
from swing_academy.timeframes import is_power_zone

setup_logging(config.LOG_DIR)
log = get_logger("ui.app")

TREND_BADGE = {Trend.UP: "🟢 ▲ up", Trend.DOWN: "🔴 ▼ down", Trend.NEUTRAL: "⚪ ▬ neutral"}
SIGNAL_BOX = {
    Signal.BULLISH:        st.success,
    Signal.BEARISH:        st.error,
    Signal.NEUTRAL:        st.warning,
    Signal.EARLY_REVERSAL: st.info,
}
TIER_BOX = {
    FeedbackTier.EXCELLENT:     st.success,
    FeedbackTier.GOOD:          st.warning,
    FeedbackTier.KEEP_LEARNING: st.error,
}


# ──────────────────────────────────────────────────────────────────────────────
# Content + session: catalog cached per process, session per browser tab
# ──────────────────────────────────────────────────────────────────────────────
@st.cache_resource(show_spinner=False)
def get_catalog() -> Catalog:
    log.info("loading course catalog (seed=%d)", config.TIMEFRAME_SEED)
    return load_catalog(config.TIMEFRAME_SEED)


def get_session() -> CourseSession:
    if "course" not in st.session_state:
        st.session_state["course"] = CourseSession(get_catalog())
        log.info("new course session")
    return st.session_state["course"]


def bullets(items, numbered: bool = False) -> None:
    """Render Principle rows (or plain strings) as a markdown list."""
    lines = []
    for n, item in enumerate(items, 1):
        text   = item if isinstance(item, str) else f"**{item.label}:** {item.text}"
        prefix = f"{n}." if numbered else "-"
        lines.append(f"{prefix} {text}")
    st.markdown("\n".join(lines))


# ──────────────────────────────────────────────────────────────────────────────
# Page setup
# ──────────────────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title=f"{config.APP_TITLE} - Learn Alan Farley's Methods",
    page_icon=config.PAGE_ICON,
    layout="wide",
    initial_sidebar_state="expanded",
)

course = get_session()


# ──────────────────────────────────────────────────────────────────────────────
# Sidebar
# ──────────────────────────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown(f"## {config.PAGE_ICON} {config.APP_TITLE}")
    st.markdown("---")
    st.markdown("**Course Modules**")
    for section in Section:
        label = f"{SECTION_ICONS[section]} {SECTION_TITLES[section]}"
        if course.is_complete(section):
            label += "  🏅"
        st.button(
            label,
            key=f"nav_{section.value}",
            on_click=course.go_to,
            args=(section,),
            type="primary" if course.current == section else "secondary",
        )
    st.markdown("---")
    with st.expander("Glossary"):
        bullets(GLOSSARY)


# ──────────────────────────────────────────────────────────────────────────────
# Header
# ──────────────────────────────────────────────────────────────────────────────
done, total = course.progress
st.markdown(f"## {config.PAGE_ICON} {config.APP_TITLE}")
st.caption(config.APP_SUBTITLE)
st.progress(done / total, text=f"Progress: {done}/{total}")
if course.course_finished:
    st.success("🏆 Course complete. Every module is finished.")
st.markdown("---")


# ┌─────────────────────────────────┐
# │  Introduction                   │
# └─────────────────────────────────┘
def render_intro(course: CourseSession) -> None:
    st.subheader("Welcome to Swing Trading")
    st.markdown(INTRO_TEXT)
    st.info(f"**What is Swing Trading?**\n\n{WHAT_IS_SWING_TRADING}")

    st.markdown("### Core Principles from Alan Farley")
    cols = st.columns(2)
    icons = [SECTION_ICONS[s] for s in (Section.PATTERNS, Section.RISK, Section.TIMEFRAMES, Section.ENTRIES)]
    for i, (principle, icon) in enumerate(zip(CORE_PRINCIPLES, icons)):
        with cols[i % 2]:
            with st.container(border=True):
                st.markdown(f"**{icon} {principle.label}**")
                st.caption(principle.text)

    st.markdown("### The Master Swing Trader Methodology")
    bullets(METHODOLOGY)

    st.markdown("### Your Learning Path")
    bullets(LEARNING_PATH, numbered=True)

    st.button("Start Learning ➜", key="start_learning", type="primary", on_click=course.start_learning)


# ┌─────────────────────────────────┐
# │  Pattern Recognition            │
# └─────────────────────────────────┘
def render_patterns(course: CourseSession) -> None:
    cursor  = course.patterns
    pattern = course.pattern

    st.subheader("Pattern Recognition")
    st.progress(cursor.progress, text=f"Pattern {cursor.index + 1} of {cursor.length}")

    st.info(f"**{pattern.name}**\n\n{pattern.description}")
    st.markdown("#### Chart Pattern")
    st.plotly_chart(
        pattern_figure(pattern, show_levels=course.pattern_revealed),
        key=f"pattern_chart_{cursor.index}",
    )

    st.markdown("#### Key Concepts")
    bullets(PATTERN_KEY_CONCEPTS)

    if not course.pattern_revealed:
        st.button("Show Trading Signal", key="reveal_signal", on_click=course.reveal_signal)
    else:
        levels = "\n".join(f"- {name}: \\${value:g}" for name, value in pattern.key_levels.items())
        st.success(f"**Trading Signal:** {pattern.signal}\n\n**Key Levels:**\n{levels}")

    col_prev, col_next = st.columns(2)
    with col_prev:
        st.button("◀ Previous", key="pattern_prev", disabled=cursor.is_first,
                  on_click=course.previous_pattern)
    with col_next:
        st.button("Next Pattern ▶" if not cursor.is_last else "Complete Module ✔",
                  key="pattern_next", type="primary", on_click=course.next_pattern)


# ┌─────────────────────────────────┐
# │  Risk Management                │
# └─────────────────────────────────┘
def render_risk(course: CourseSession) -> None:
    st.subheader("Risk Management")
    st.error(f"**⚠ The 2% Rule**\n\n{TWO_PERCENT_RULE}")

    st.markdown("### 🧮 Position Size Calculator")
    inputs = course.calculator
    c1, c2 = st.columns(2)
    with c1:
        account = st.number_input("Account Size ($)", value=inputs.account_size,
                                  step=1000.0, key="calc_account")
        entry   = st.number_input("Entry Price ($)", value=inputs.entry_price,
                                  step=config.PRICE_STEP, format="%.2f", key="calc_entry")
        target  = st.number_input("Target Price ($)", value=inputs.target_price,
                                  step=config.PRICE_STEP, format="%.2f", key="calc_target")
    with c2:
        risk    = st.number_input("Risk Per Trade (%)", value=inputs.risk_pct,
                                  min_value=0.0, max_value=config.MAX_RISK_PCT,
                                  step=config.RISK_PCT_STEP, key="calc_risk")
        stop    = st.number_input("Stop Loss ($)", value=inputs.stop_price,
                                  step=config.PRICE_STEP, format="%.2f", key="calc_stop")

    course.calculator = CalculatorInputs(account, risk, entry, stop, target)
    result = course.calculator.result()

    st.markdown("#### Calculated Position")
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Risk Amount", f"${result.risk_amount:,.2f}")
    m2.metric("Risk Per Share", f"${result.risk_per_share:,.2f}")
    m3.metric("Position Size", f"{result.position_size:,} shares")
    m4.metric("Total Position Value", f"${result.total_position:,.2f}")
    if result.reward_to_risk is not None:
        r1, r2, r3 = st.columns(3)
        r1.metric("Reward : Risk", f"{result.reward_to_risk:.1f}:1")
        r2.metric("Profit at Target", f"${result.potential_profit:,.2f}")
        if result.account_fraction is not None:
            r3.metric("Share of Account", f"{result.account_fraction:.1f}%")
    for note in result.warnings:
        st.warning(note)

    col_a, col_b = st.columns(2)
    with col_a:
        st.markdown("#### 📉 Stop Loss Placement")
        bullets(STOP_PLACEMENT)
    with col_b:
        st.markdown("#### ✅ Take Profit Targets")
        bullets(PROFIT_TARGETS)

    st.markdown("#### Key Principles from Farley")
    bullets(RISK_PRINCIPLES)

    render_practice_scenario()

    st.button("Complete Module", key="risk_complete", type="primary", on_click=course.complete_risk)


def render_practice_scenario() -> None:
    """Worked example, computed from the calculator defaults rather than typed in."""
    acct, pct = config.DEFAULT_ACCOUNT_SIZE, config.DEFAULT_RISK_PCT
    entry, stop, target = config.DEFAULT_ENTRY_PRICE, config.DEFAULT_STOP_PRICE, config.DEFAULT_TARGET_PRICE
    r = position_size(acct, pct, entry, stop, target)
    st.markdown("#### Practice Scenario")
    st.markdown(
        f"You have a \\${acct:,.0f} account and want to buy a stock at \\${entry:g}. "
        f"Your analysis suggests a stop loss at \\${stop:g} is appropriate. Using the {pct:g}% rule:\n\n"
        f"- Risk amount: \\${acct:,.0f} × {pct:g}% = \\${r.risk_amount:,.0f}\n"
        f"- Risk per share: \\${entry:g} - \\${stop:g} = \\${r.risk_per_share:g}\n"
        f"- Position size: \\${r.risk_amount:,.0f} ÷ \\${r.risk_per_share:g} = {r.position_size} shares\n"
        f"- Total investment: {r.position_size} × \\${entry:g} = \\${r.total_position:,.0f} "
        f"({r.account_fraction:.0f}% of account)\n\n"
        f"**Result:** If stopped out, you lose only \\${r.risk_amount:,.0f} ({pct:g}%). If the trade "
        f"moves to \\${target:g} ({r.reward_to_risk:g}:1 reward), you gain \\${r.potential_profit:,.0f} "
        f"({r.potential_profit / acct * 100:g}%)."
    )


# ┌─────────────────────────────────┐
# │  Timeframe Analysis             │
# └─────────────────────────────────┘
def render_timeframes(course: CourseSession) -> None:
    cursor   = course.scenarios
    scenario = course.scenario

    st.subheader("Multiple Timeframe Analysis")
    st.info(f"**🕒 The 3-Timeframe Approach**\n\n{TIMEFRAME_INTRO}")
    bullets(TIMEFRAME_HIERARCHY)

    st.markdown(f"### Scenario {cursor.index + 1}: {scenario.title}")
    dots = st.columns(cursor.length + 6)
    for i in range(cursor.length):
        with dots[i]:
            st.button("●" if i == cursor.index else "○", key=f"scenario_dot_{i}",
                      on_click=cursor.jump, args=(i,))

    charts = st.columns(3)
    for col, tf in zip(charts, (Timeframe.WEEKLY, Timeframe.DAILY, Timeframe.FOUR_HOUR)):
        view = scenario.view(tf)
        with col:
            with st.container(border=True):
                st.markdown(f"**{tf.value}**  {TREND_BADGE[view.trend]}")
                st.plotly_chart(timeframe_figure(view), key=f"tf_{cursor.index}_{tf.name}")
                st.caption(f"{view.trend.value.capitalize()} trend")

    box = SIGNAL_BOX[scenario.signal]
    zone = "  ⚡ Power zone: every timeframe agrees." if is_power_zone(scenario) else ""
    box(f"**Analysis:** {scenario.description}{zone}\n\n**Trading Action:** {scenario.action}")

    col_prev, col_next = st.columns(2)
    with col_prev:
        st.button("◀ Previous Scenario", key="scenario_prev", disabled=cursor.is_first,
                  on_click=cursor.back)
    with col_next:
        st.button("Next Scenario ▶", key="scenario_next", disabled=cursor.is_last,
                  on_click=cursor.advance)

    st.markdown("#### Farley's Timeframe Rules")
    bullets(TIMEFRAME_RULES, numbered=True)
    st.markdown("#### Practical Workflow")
    bullets(TIMEFRAME_WORKFLOW, numbered=True)

    st.button("Complete Module", key="timeframes_complete", type="primary", on_click=cursor.finish)


# ┌─────────────────────────────────┐
# │  Entry & Exit Strategies        │
# └─────────────────────────────────┘
def render_entries(course: CourseSession) -> None:
    cursor   = course.strategies
    strategy = course.strategy

    st.subheader("Entry & Exit Strategies")
    st.info(f"**Systematic Entry and Exit**\n\n{SYSTEMATIC_TRADING}")

    head, picker = st.columns([3, 2])
    head.markdown(f"### {strategy.title}")
    with picker:
        picks = st.columns(cursor.length)
        for i, col in enumerate(picks):
            col.button(str(i + 1), key=f"strategy_pick_{i}", on_click=cursor.jump, args=(i,),
                       type="primary" if i == cursor.index else "secondary")
    st.markdown(strategy.description)

    st.plotly_chart(strategy_figure(strategy), key=f"strategy_chart_{cursor.index}")

    e, s, t = st.columns(3)
    e.metric("⬇ Entry", f"${strategy.entry.price:g}")
    e.caption(strategy.entry.label)
    s.metric("🎯 Stop Loss", f"${strategy.stop.price:g}")
    s.caption(f"{strategy.stop.label} · Risk: \\${strategy.risk_per_share:.2f}/share")
    t.metric("⬆ Target", f"${strategy.target.price:g}")
    t.caption(f"{strategy.target.label} · R:R = {strategy.reward_to_risk:.1f}:1")

    st.markdown("#### Entry Rules")
    bullets(strategy.rules)

    col_prev, col_next = st.columns(2)
    with col_prev:
        st.button("◀ Previous Strategy", key="strategy_prev", disabled=cursor.is_first,
                  on_click=cursor.back)
    with col_next:
        st.button("Next Strategy ▶", key="strategy_next", disabled=cursor.is_last,
                  on_click=cursor.advance)

    col_a, col_b = st.columns(2)
    with col_a:
        st.markdown("#### Exit Strategies (Profits)")
        bullets(PROFIT_EXITS)
    with col_b:
        st.markdown("#### Exit Strategies (Losses)")
        bullets(LOSS_EXITS)

    st.markdown("#### Farley's Core Exit Principles")
    bullets(EXIT_PRINCIPLES)

    st.button("Complete Module", key="entries_complete", type="primary", on_click=cursor.finish)


# ┌─────────────────────────────────┐
# │  Quiz                           │
# └─────────────────────────────────┘
def render_quiz(course: CourseSession) -> None:
    quiz = course.quiz
    st.subheader("Test Your Knowledge")
    st.progress(quiz.progress, text=f"Question {quiz.current + 1} of {quiz.total}")

    if quiz.finished:
        render_quiz_results(course)
        return

    q = quiz.question
    st.info(f"**{q.question}**")
    for i, option in enumerate(q.options):
        mark = ""
        if quiz.revealed and i == q.correct:
            mark = "✅ "
        elif quiz.revealed and i == quiz.selected:
            mark = "❌ "
        elif i == quiz.selected:
            mark = "👉 "
        st.button(f"{mark}{option}", key=f"quiz_{quiz.current}_opt_{i}",
                  on_click=quiz.select, args=(i,), disabled=quiz.revealed)

    if quiz.revealed:
        box = st.success if quiz.is_correct else st.error
        box(f"**{'Correct!' if quiz.is_correct else 'Incorrect'}**\n\n{q.explanation}")

    left, right = st.columns([3, 1])
    left.caption(f"Score: {quiz.score}/{quiz.answered}")
    with right:
        if not quiz.revealed:
            st.button("Submit Answer", key="quiz_submit", type="primary",
                      disabled=quiz.selected is None, on_click=quiz.submit)
        else:
            st.button("See Results ▶" if quiz.is_last else "Next Question ▶",
                      key="quiz_next", type="primary", on_click=quiz.next)


def render_quiz_results(course: CourseSession) -> None:
    quiz = course.quiz
    st.markdown("### 🏆 Quiz Complete!")
    st.markdown(f"Your Score: **{quiz.score} out of {quiz.total} ({quiz.percentage}%)**")
    st.progress(quiz.percentage / 100)
    TIER_BOX[quiz.tier](quiz.feedback)

    st.markdown("#### Results Breakdown")
    st.markdown("\n".join(
        f"- {'✅' if correct else '❌'} {q.question}" for q, correct in quiz.breakdown()
    ))


# ──────────────────────────────────────────────────────────────────────────────
# Main content
# ──────────────────────────────────────────────────────────────────────────────
SCREENS = {
    Section.INTRO:      render_intro,
    Section.PATTERNS:   render_patterns,
    Section.RISK:       render_risk,
    Section.TIMEFRAMES: render_timeframes,
    Section.ENTRIES:    render_entries,
    Section.QUIZ:       render_quiz,
}

SCREENS[course.current](course)
