"""
Position sizing: the arithmetic behind the 2% rule.
====================================================

    risk_amount    = account_size × risk_pct / 100
    risk_per_share = |entry − stop|
    position_size  = floor(risk_amount / risk_per_share)   (0 if risk_per_share ≤ 0)
    total_position = position_size × entry

Degenerate input never raises. A zero distance between entry and stop, a
negative account, a risk above the cap: each still produces a PositionSize
(usually with position_size = 0) and a human-readable note in ``warnings``.
The page shows those notes next to the numbers; nothing blocks the
calculation.

Worked example (the practice scenario)
--------------------------------------
    position_size(10_000, 2, 50, 48)
      → risk 200.00, per share 2.00, 100 shares, 5,000.00 position
"""

from __future__ import annotations

import math
from typing import Optional

from swing_academy.config import MAX_RISK_PCT, MIN_REWARD_TO_RISK, RULE_RISK_PCT
from swing_academy.logger import get_logger
from swing_academy.models import PositionSize

log = get_logger(__name__)


def reward_to_risk(entry: float, stop: float, target: float) -> Optional[float]:
    """
    (target − entry) / (entry − stop), or None when entry == stop.

    Signs cancel for shorts (stop above entry, target below), so a healthy
    trade on either side gives a positive ratio.
    """
    risk = entry - stop
    if risk == 0 or not math.isfinite(risk):
        return None
    return (target - entry) / risk


def position_size(
    account_size: float,
    risk_pct:     float,
    entry_price:  float,
    stop_price:   float,
    target_price: Optional[float] = None,
) -> PositionSize:
    """Size a trade so a stop-out costs exactly ``risk_pct`` of the account."""
    warnings: list[str] = []

    risk_amount    = account_size * risk_pct / 100
    risk_per_share = abs(entry_price - stop_price)

    ratio  = risk_amount / risk_per_share if risk_per_share > 0 else 0.0
    shares = math.floor(ratio) if math.isfinite(ratio) else 0
    total_position = shares * entry_price

    if not all(math.isfinite(v) for v in (account_size, risk_pct, entry_price, stop_price)):
        warnings.append("Inputs are not finite numbers: position size set to 0")
        shares, total_position = 0, 0.0

    if not account_size > 0:
        warnings.append("Account size must be positive")
    if not risk_pct > 0:
        warnings.append("Risk per trade must be positive")
    elif risk_pct > MAX_RISK_PCT:
        warnings.append(f"Risk {risk_pct:g}% exceeds the {MAX_RISK_PCT:g}% per-trade cap")
    elif risk_pct > RULE_RISK_PCT:
        warnings.append(f"Risk {risk_pct:g}% breaks the {RULE_RISK_PCT:g}% rule")
    if not (entry_price > 0 and stop_price > 0):
        warnings.append("Entry and stop prices must be positive")
    if risk_per_share == 0:
        warnings.append("Entry equals stop: no risk per share, so no position can be sized")

    account_fraction = None
    if account_size > 0 and math.isfinite(total_position):
        account_fraction = total_position / account_size * 100

    rr     = None
    profit = None
    if target_price is not None:
        rr = reward_to_risk(entry_price, stop_price, target_price)
        if rr is not None:
            profit = shares * (target_price - entry_price) * math.copysign(1, entry_price - stop_price)
            if rr <= 0:
                warnings.append("Target does not sit beyond entry on the profit side")
            elif rr < MIN_REWARD_TO_RISK:
                warnings.append(
                    f"Reward-to-risk {rr:.1f}:1 is below the {MIN_REWARD_TO_RISK:g}:1 minimum"
                )

    if warnings:
        log.debug("position_size(%s, %s, %s, %s): %s",
                  account_size, risk_pct, entry_price, stop_price, "; ".join(warnings))

    return PositionSize(
        risk_amount      = risk_amount,
        risk_per_share   = risk_per_share,
        position_size    = shares,
        total_position   = total_position,
        account_fraction = account_fraction,
        reward_to_risk   = rr,
        potential_profit = profit,
        warnings         = warnings,
    )
