"""Suggested next load: 2.5% over the average of every logged set."""

import pytest

from workout_builder.schemas.set_log import LoggedSet
from workout_builder.services.progression import round_half_up, suggest_next_load, weight_trend


def _sets(*weights: float) -> list[LoggedSet]:
    return [LoggedSet(weight=w, reps=8, session_index=i + 1) for i, w in enumerate(weights)]


def test_empty_log_has_no_suggestion():
    assert suggest_next_load([]) is None


def test_average_of_two_sessions():
    assert suggest_next_load(_sets(100, 110)) == pytest.approx(107.6, abs=0.05)


def test_single_set():
    assert suggest_next_load(_sets(100)) == pytest.approx(102.5, abs=0.05)


def test_uses_full_history_not_last_set():
    # avg 133.33 -> 136.67; the last set alone would give 205
    assert suggest_next_load(_sets(100, 100, 200)) == pytest.approx(136.7, abs=0.05)


def test_zero_weight_sets():
    assert suggest_next_load(_sets(0, 0)) == 0.0


def test_round_half_up():
    assert round_half_up(102.45) == 102.5
    assert round_half_up(102.44) == 102.4
    assert round_half_up(0.05) == 0.1


def test_weight_trend_points():
    points = weight_trend(_sets(60, 62.5))
    assert [(p.session_index, p.weight) for p in points] == [(1, 60.0), (2, 62.5)]
