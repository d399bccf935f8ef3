"""Progressive overload: suggested next load for an exercise.

The suggestion is a flat 2.5% over the average weight of *every* set logged for
the (day, exercise) key so far, not over the most recent set. A single heavy or
light set therefore moves the suggestion only by its share of the history.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from workout_builder.core.constants import PROGRESSION_FACTOR, SUGGESTION_DECIMALS
from workout_builder.schemas.set_log import LoggedSet, TrendPoint


def round_half_up(value: Decimal | float, decimals: int = SUGGESTION_DECIMALS) -> float:
    """Round on the decimal representation, ties away from zero (102.45 -> 102.5)."""
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    return float(d.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP))


def suggest_next_load(sets: Sequence[LoggedSet]) -> float | None:
    """Mean logged weight x 1.025, one decimal. None when nothing has been logged."""
    if not sets:
        return None
    total = sum((Decimal(str(s.weight)) for s in sets), Decimal(0))
    avg = total / len(sets)
    return round_half_up(avg * PROGRESSION_FACTOR)


def weight_trend(sets: Sequence[LoggedSet]) -> list[TrendPoint]:
    """Points for the weight-over-sessions chart."""
    return [TrendPoint(session_index=s.session_index, weight=s.weight) for s in sets]
