"""Persistence gateway: a durable string-keyed store plus the JSON codecs for each key.

The engine reads every key once at start-up and writes the affected key after
each mutation. Gateways only move text; what the text means is decided here.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from workout_builder.core.exceptions import PersistenceError
from workout_builder.models.kv_entry import KeyValueEntry
from workout_builder.schemas.history import CompletedWorkoutEntry
from workout_builder.schemas.program import Program
from workout_builder.schemas.set_log import SetLogRecord
from workout_builder.services.set_log import SetLog


class PersistenceGateway(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class InMemoryGateway:
    """Dict-backed gateway for tests and throwaway sessions."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value


class SqlGateway:
    """Gateway over the kv_entries table. Driver errors surface as PersistenceError."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def get(self, key: str) -> str | None:
        try:
            async with self._session_maker() as session:
                result = await session.execute(
                    select(KeyValueEntry.value).where(KeyValueEntry.key == key)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not read {key!r}") from e

    async def set(self, key: str, value: str) -> None:
        try:
            async with self._session_maker() as session:
                async with session.begin():
                    entry = await session.get(KeyValueEntry, key)
                    if entry:
                        entry.value = value
                    else:
                        session.add(KeyValueEntry(key=key, value=value))
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not write {key!r}") from e


# ---- Codecs ----

_program_adapter = TypeAdapter(Program)
_programs_adapter = TypeAdapter(dict[str, Program])
_history_adapter = TypeAdapter(list[CompletedWorkoutEntry])
_set_log_adapter = TypeAdapter(list[SetLogRecord])


def _decode(adapter: TypeAdapter, text: str, what: str):
    try:
        return adapter.validate_json(text)
    except PydanticValidationError as e:
        raise PersistenceError(f"Stored {what} is malformed: {e.error_count()} error(s)") from e


def serialize_program(program: Program) -> str:
    return program.model_dump_json()


def deserialize_program(text: str) -> Program:
    return _decode(_program_adapter, text, "program")


def serialize_programs(programs: dict[str, Program]) -> str:
    return _programs_adapter.dump_json(programs).decode()


def deserialize_programs(text: str) -> dict[str, Program]:
    return _decode(_programs_adapter, text, "program collection")


def serialize_history(entries: list[CompletedWorkoutEntry]) -> str:
    return _history_adapter.dump_json(entries).decode()


def deserialize_history(text: str) -> list[CompletedWorkoutEntry]:
    return _decode(_history_adapter, text, "workout history")


def serialize_set_log(log: SetLog) -> str:
    return _set_log_adapter.dump_json(log.to_records()).decode()


def deserialize_set_log(text: str) -> SetLog:
    return SetLog.from_records(_decode(_set_log_adapter, text, "set log"))
