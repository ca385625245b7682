# --- Swing Trading Academy Config ---

from pathlib import Path

APP_TITLE    = "Swing Trading Academy"
APP_SUBTITLE = "Based on Alan Farley's \"The Master Swing Trader\""
PAGE_ICON    = "📘"

# --- Position Size Calculator ---
# Starting values for the calculator inputs (the practice scenario).
DEFAULT_ACCOUNT_SIZE = 10_000.0
DEFAULT_RISK_PCT     = 2.0
DEFAULT_ENTRY_PRICE  = 50.0
DEFAULT_STOP_PRICE   = 48.0
DEFAULT_TARGET_PRICE = 54.0

MAX_RISK_PCT      = 5.0    # hard per-trade cap on the risk input
RULE_RISK_PCT     = 2.0    # the 2% rule, above this the calculator warns
RISK_PCT_STEP     = 0.5
PRICE_STEP        = 0.01
MIN_REWARD_TO_RISK = 2.0   # 2:1 minimum target

# --- Quiz ---
# Feedback tiers, lower bound inclusive.
EXCELLENT_PCT = 80
GOOD_PCT      = 60

# --- Timeframe scenarios ---
# Price series are generated once per process from this seed.
TIMEFRAME_SEED   = 7
TIMEFRAME_POINTS = 8

# --- Logging ---
# Relative to the working directory, so an installed console script never
# writes into site-packages.
LOG_DIR = Path("logs")
