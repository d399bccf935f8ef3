"""WorkoutSession: log -> timer -> persist ordering, load/save, failure handling."""

import json
from datetime import datetime, timezone

import pytest

from tests.conftest import FailingGateway
from workout_builder.core.constants import (
    ACTIVE_PROGRAM_KEY,
    HISTORY_KEY,
    SAVED_PROGRAMS_KEY,
    SET_LOG_KEY,
)
from workout_builder.core.enums import TimerStatus, Weekday
from workout_builder.core.exceptions import InvalidInputError, NotFoundError, PersistenceError
from workout_builder.schemas.program import ExercisePrescription
from workout_builder.services.persistence import InMemoryGateway, serialize_program
from workout_builder.services.program import create_program, get_day
from workout_builder.services.rest_timer import RestTimer
from workout_builder.services.session import WorkoutSession


@pytest.mark.asyncio
async def test_load_seeds_default_program(timer):
    session = await WorkoutSession.load(InMemoryGateway(), timer)
    assert session.program.name == "My Program"
    assert session.saved_program_names() == []
    assert len(session.set_log) == 0


@pytest.mark.asyncio
async def test_log_set_starts_timer_and_persists(session, gateway, scheduler):
    entry = await session.log_set("Monday", "Bench Press", "100", "5")
    assert entry.session_index == 1
    assert session.timer.status == TimerStatus.COUNTING
    assert session.timer.remaining_seconds == 60
    stored = json.loads(gateway.data[SET_LOG_KEY])
    assert stored == [
        {"day": "Monday", "exercise": "Bench Press", "sets": [{"weight": 100.0, "reps": 5, "session_index": 1}]}
    ]


@pytest.mark.asyncio
async def test_log_set_uses_configured_rest(session):
    session.set_rest_duration(90)
    await session.log_set("Monday", "Bench Press", 100, 5)
    assert session.timer.remaining_seconds == 90


@pytest.mark.asyncio
async def test_suggestion_recomputed_after_each_set(session):
    assert session.suggestion("Monday", "Bench Press") is None
    await session.log_set("Monday", "Bench Press", 100, 5)
    await session.log_set("Monday", "Bench Press", 110, 5)
    assert session.suggestion("Monday", "Bench Press") == pytest.approx(107.6, abs=0.05)
    assert [p.weight for p in session.trend("Monday", "Bench Press")] == [100.0, 110.0]


@pytest.mark.asyncio
async def test_invalid_set_changes_nothing(session, gateway):
    with pytest.raises(InvalidInputError):
        await session.log_set("Monday", "Bench Press", "abc", 5)
    assert session.sets("Monday", "Bench Press") == []
    assert session.timer.status == TimerStatus.IDLE
    assert SET_LOG_KEY not in gateway.data


@pytest.mark.asyncio
async def test_failed_write_keeps_memory_state():
    session = WorkoutSession(FailingGateway(), RestTimer())
    with pytest.raises(PersistenceError):
        await session.log_set("Monday", "Bench Press", 100, 5)
    assert len(session.sets("Monday", "Bench Press")) == 1
    with pytest.raises(PersistenceError):
        await session.finish_workout("Monday")
    assert len(session.history) == 1


@pytest.mark.asyncio
async def test_edit_program_persists_active(session, gateway):
    await session.add_exercise("Monday", ExercisePrescription(name="Face Pull", target_sets=3, target_reps="15"))
    assert "Face Pull" in get_day(session.program, "Monday").exercise_names()
    assert "Face Pull" in gateway.data[ACTIVE_PROGRAM_KEY]
    await session.remove_exercise("Monday", "Face Pull")
    assert "Face Pull" not in gateway.data[ACTIVE_PROGRAM_KEY]


@pytest.mark.asyncio
async def test_add_exercise_to_missing_day(session):
    program = create_program("Mon only", [{"day": "Monday", "exercises": [{"name": "Squat"}]}])
    await session.replace_program(program)
    with pytest.raises(NotFoundError):
        await session.add_exercise("Friday", ExercisePrescription(name="Deadlift"))
    assert session.program == program


@pytest.mark.asyncio
async def test_save_and_load_programs(session, gateway):
    await session.save_program()
    await session.rename_program("Deload Week")
    await session.save_program()
    assert session.saved_program_names() == ["Deload Week", "My Program"]
    assert SAVED_PROGRAMS_KEY in gateway.data

    loaded = await session.load_program("My Program")
    assert loaded.name == "My Program"
    assert session.program == loaded


@pytest.mark.asyncio
async def test_save_under_same_name_overwrites(session):
    await session.save_program("Block A")
    await session.remove_exercise("Monday", "Bench Press")
    await session.save_program("Block A")
    assert session.saved_program_names() == ["Block A"]
    reloaded = await session.load_program("Block A")
    assert "Bench Press" not in get_day(reloaded, "Monday").exercise_names()


@pytest.mark.asyncio
async def test_load_unknown_program(session):
    with pytest.raises(NotFoundError):
        await session.load_program("Nope")
    assert session.program.name == "My Program"


@pytest.mark.asyncio
async def test_finish_workout_records_active_program(session, gateway):
    entry = await session.finish_workout("Monday", now=datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert entry.program_name == "My Program"
    assert HISTORY_KEY in gateway.data
    assert session.export_history_csv() == "Date,Program,Day\n2024-01-01T00:00:00Z,My Program,Monday"


@pytest.mark.asyncio
async def test_state_survives_reload(gateway, timer):
    first = WorkoutSession(gateway, timer)
    await first.rename_program("Strength")
    await first.save_program()
    await first.log_set("Tuesday", "Back Squat", 120, 5)
    await first.finish_workout("Tuesday")

    second = await WorkoutSession.load(gateway, RestTimer())
    assert second.program == first.program
    assert second.saved_program_names() == ["Strength"]
    assert second.sets("Tuesday", "Back Squat") == first.sets("Tuesday", "Back Squat")
    assert second.history.entries == first.history.entries
    assert second.timer.status == TimerStatus.IDLE


@pytest.mark.asyncio
async def test_load_reads_active_program(timer):
    program = create_program("Stored", [{"day": "Monday", "exercises": [{"name": "Squat"}]}])
    gateway = InMemoryGateway({ACTIVE_PROGRAM_KEY: serialize_program(program)})
    session = await WorkoutSession.load(gateway, timer)
    assert session.program == program


@pytest.mark.asyncio
async def test_corrupt_stored_history_is_a_storage_error(timer):
    gateway = InMemoryGateway({HISTORY_KEY: "not json"})
    with pytest.raises(PersistenceError, match="workout history"):
        await WorkoutSession.load(gateway, timer)
    assert gateway.data[HISTORY_KEY] == "not json"


@pytest.mark.asyncio
async def test_set_log_day_normalized_to_program_day(session):
    await session.log_set(Weekday.WEDNESDAY, "Zone 2 walk/jog", 0, 1)
    assert len(session.sets("Wednesday", "Zone 2 walk/jog")) == 1
    with pytest.raises(InvalidInputError):
        await session.log_set("Funday", "Bench Press", 100, 5)
    assert session.timer.status == TimerStatus.COUNTING
    assert len(session.set_log) == 1
