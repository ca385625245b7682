from swing_academy.charts import (
    TREND_COLORS, pattern_figure, price_frame, strategy_figure, timeframe_figure,
)
from swing_academy.content import PATTERNS, STRATEGIES


def test_price_frame_columns() -> None:
    df = price_frame(PATTERNS[0].data)
    assert list(df.columns) == ["x", "price"]
    assert df["price"].tolist() == [100, 110, 105, 120, 105, 110, 95, 90]


def test_pattern_levels_hidden_until_revealed() -> None:
    hidden = pattern_figure(PATTERNS[0])
    shown = pattern_figure(PATTERNS[0], show_levels=True)
    assert len(hidden.layout.shapes) == 0
    assert [s.y0 for s in shown.layout.shapes] == [105, 90]
    assert len(shown.data) == 1


def test_strategy_figure_marks_stop_target_and_entry() -> None:
    strategy = STRATEGIES[0]
    fig = strategy_figure(strategy)
    shapes = fig.layout.shapes
    assert len(shapes) == 3
    assert {s.y0 for s in shapes[:2]} == {strategy.stop.price, strategy.target.price}
    assert shapes[2].x0 == strategy.entry.x


def test_timeframe_figure_colours_and_range(catalog) -> None:
    view = catalog.scenarios[0].views[0]
    fig = timeframe_figure(view)
    bar = fig.data[0]
    assert set(bar.marker.color) == {TREND_COLORS[view.trend]}
    prices = [p.price for p in view.data]
    assert tuple(fig.layout.yaxis.range) == (min(prices) - 10, max(prices) + 10)
