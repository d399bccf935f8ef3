from datetime import datetime, timezone

import pytest
import pytest_asyncio

from workout_builder.core.config import Settings
from workout_builder.core.exceptions import PersistenceError
from workout_builder.db.session import build_engine, build_session_maker, create_schema
from workout_builder.schemas.history import CompletedWorkoutEntry
from workout_builder.services.persistence import (
    InMemoryGateway,
    SqlGateway,
    deserialize_history,
    deserialize_program,
    deserialize_programs,
    deserialize_set_log,
    serialize_history,
    serialize_program,
    serialize_programs,
    serialize_set_log,
)
from workout_builder.services.program import create_program, default_program
from workout_builder.services.set_log import SetLog


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'kv.db'}"))
    yield engine
    await engine.dispose()


def test_program_round_trip():
    p = default_program()
    assert deserialize_program(serialize_program(p)) == p


def test_program_with_rest_day_round_trip():
    p = create_program(
        "Minimal",
        [
            {"day": "Monday", "exercises": [{"name": "Plank", "target_sets": 3, "target_reps": "45 s"}]},
            {"day": "Sunday", "rest_day": True},
        ],
    )
    assert deserialize_program(serialize_program(p)) == p


def test_saved_programs_round_trip():
    a = default_program()
    b = create_program("B", [{"day": "Friday", "exercises": [{"name": "Deadlift"}]}])
    saved = {a.name: a, b.name: b}
    assert deserialize_programs(serialize_programs(saved)) == saved


def test_history_round_trip():
    entries = [
        CompletedWorkoutEntry(
            timestamp=datetime(2024, 1, 1, 9, 15, tzinfo=timezone.utc),
            program_name="My Program",
            day="Monday",
        )
    ]
    assert deserialize_history(serialize_history(entries)) == entries


def test_set_log_round_trip():
    log = SetLog()
    log.log_set("Monday", "Bench Press", 100, 5)
    log.log_set("Monday", "Bench Press", 102.5, 5)
    log.log_set("Friday", "Deadlift", 140, 3)
    restored = deserialize_set_log(serialize_set_log(log))
    assert restored == log
    assert restored.log_set("Monday", "Bench Press", 105, 5).session_index == 3


def test_malformed_document_is_a_storage_error():
    with pytest.raises(PersistenceError):
        deserialize_program('{"name": "X", "days": [{"day": "Monday"}, {"day": "Monday"}]}')
    with pytest.raises(PersistenceError):
        deserialize_history("not json")


@pytest.mark.asyncio
async def test_in_memory_gateway():
    gw = InMemoryGateway()
    assert await gw.get("savedProgram") is None
    await gw.set("savedProgram", "{}")
    assert await gw.get("savedProgram") == "{}"


@pytest.mark.asyncio
async def test_sql_gateway_insert_and_overwrite(engine):
    await create_schema(engine)
    gw = SqlGateway(build_session_maker(engine))
    assert await gw.get("workoutHistory") is None
    await gw.set("workoutHistory", "[]")
    await gw.set("workoutHistory", '[{"x": 1}]')
    assert await gw.get("workoutHistory") == '[{"x": 1}]'


@pytest.mark.asyncio
async def test_sql_gateway_program_round_trip(engine):
    await create_schema(engine)
    gw = SqlGateway(build_session_maker(engine))
    p = default_program()
    await gw.set("savedProgram", serialize_program(p))
    assert deserialize_program(await gw.get("savedProgram")) == p


@pytest.mark.asyncio
async def test_sql_gateway_errors_become_persistence_error(engine):
    # no schema created: the table does not exist
    gw = SqlGateway(build_session_maker(engine))
    with pytest.raises(PersistenceError):
        await gw.get("savedProgram")
    with pytest.raises(PersistenceError):
        await gw.set("savedProgram", "{}")
