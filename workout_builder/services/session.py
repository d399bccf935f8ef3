"""WorkoutSession: the single owner of one user's engine state.

Holds the active program, the saved program collection, the set log, the
completed-workout history and the rest timer. Every mutation follows the same
order under one lock: validate, change memory, persist the affected key(s).
A failed write raises PersistenceError but the in-memory change stays; the
session remains the source of truth and the next successful write catches up.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from workout_builder.core.constants import (
    ACTIVE_PROGRAM_KEY,
    HISTORY_KEY,
    SAVED_PROGRAMS_KEY,
    SET_LOG_KEY,
)
from workout_builder.core.enums import Weekday
from workout_builder.core.exceptions import NotFoundError, PersistenceError
from workout_builder.schemas.history import CompletedWorkoutEntry
from workout_builder.schemas.program import ExercisePrescription, Program
from workout_builder.schemas.set_log import LoggedSet, TrendPoint
from workout_builder.schemas.timer import RestTimerRead
from workout_builder.services import program as program_ops
from workout_builder.services.history import WorkoutHistory
from workout_builder.services.persistence import (
    PersistenceGateway,
    deserialize_history,
    deserialize_program,
    deserialize_programs,
    deserialize_set_log,
    serialize_history,
    serialize_program,
    serialize_programs,
    serialize_set_log,
)
from workout_builder.services.progression import suggest_next_load, weight_trend
from workout_builder.services.rest_timer import RestTimer
from workout_builder.services.set_log import SetLog

logger = logging.getLogger(__name__)


class WorkoutSession:
    def __init__(
        self,
        gateway: PersistenceGateway,
        timer: RestTimer,
        program: Program | None = None,
        saved_programs: dict[str, Program] | None = None,
        set_log: SetLog | None = None,
        history: WorkoutHistory | None = None,
    ) -> None:
        self.gateway = gateway
        self.timer = timer
        self._program = program or program_ops.default_program()
        self._saved: dict[str, Program] = dict(saved_programs or {})
        self.set_log = set_log or SetLog()
        self.history = history or WorkoutHistory()
        self._lock = asyncio.Lock()

    @classmethod
    async def load(cls, gateway: PersistenceGateway, timer: RestTimer) -> "WorkoutSession":
        """
        Read all keys; seed the default program when nothing has been saved yet.
        A stored document that cannot be decoded raises PersistenceError and is
        left untouched in storage.
        """
        raw_program = await gateway.get(ACTIVE_PROGRAM_KEY)
        raw_saved = await gateway.get(SAVED_PROGRAMS_KEY)
        raw_log = await gateway.get(SET_LOG_KEY)
        raw_history = await gateway.get(HISTORY_KEY)
        try:
            session = cls(
                gateway,
                timer,
                program=deserialize_program(raw_program) if raw_program else None,
                saved_programs=deserialize_programs(raw_saved) if raw_saved else None,
                set_log=deserialize_set_log(raw_log) if raw_log else None,
                history=WorkoutHistory(deserialize_history(raw_history)) if raw_history else None,
            )
        except PersistenceError as e:
            logger.error("Could not load stored state: %s", e)
            raise
        logger.info(
            "Session loaded: program=%r, %d saved, %d sets, %d finished workouts",
            session.program.name,
            len(session._saved),
            len(session.set_log),
            len(session.history),
        )
        return session

    # ---- Persistence ----

    async def _persist(self, *keys: str) -> None:
        encoders = {
            ACTIVE_PROGRAM_KEY: lambda: serialize_program(self._program),
            SAVED_PROGRAMS_KEY: lambda: serialize_programs(self._saved),
            SET_LOG_KEY: lambda: serialize_set_log(self.set_log),
            HISTORY_KEY: lambda: serialize_history(self.history.entries),
        }
        for key in keys:
            try:
                await self.gateway.set(key, encoders[key]())
            except PersistenceError:
                logger.warning("Write of %r failed; keeping in-memory state", key)
                raise

    # ---- Programs ----

    @property
    def program(self) -> Program:
        return self._program

    def saved_program_names(self) -> list[str]:
        return sorted(self._saved)

    async def replace_program(self, program: Program) -> Program:
        async with self._lock:
            self._program = program
            await self._persist(ACTIVE_PROGRAM_KEY)
            return self._program

    async def rename_program(self, name: str) -> Program:
        async with self._lock:
            self._program = program_ops.rename_program(self._program, name)
            await self._persist(ACTIVE_PROGRAM_KEY)
            return self._program

    async def add_exercise(self, day: str, prescription: ExercisePrescription) -> Program:
        async with self._lock:
            program_ops.get_day(self._program, day)
            self._program = program_ops.add_exercise(self._program, day, prescription)
            await self._persist(ACTIVE_PROGRAM_KEY)
            return self._program

    async def remove_exercise(self, day: str, exercise_name: str) -> Program:
        async with self._lock:
            self._program = program_ops.remove_exercise(self._program, day, exercise_name)
            await self._persist(ACTIVE_PROGRAM_KEY)
            return self._program

    async def save_program(self, name: str | None = None) -> Program:
        """Store the active program under its name (or a new one); same name overwrites."""
        async with self._lock:
            if name:
                self._program = program_ops.rename_program(self._program, name)
            self._saved[self._program.name] = self._program
            logger.info("Program saved: %r", self._program.name)
            await self._persist(ACTIVE_PROGRAM_KEY, SAVED_PROGRAMS_KEY)
            return self._program

    async def load_program(self, name: str) -> Program:
        async with self._lock:
            if name not in self._saved:
                raise NotFoundError(f"No saved program named {name!r}")
            self._program = self._saved[name]
            logger.info("Program loaded: %r", name)
            await self._persist(ACTIVE_PROGRAM_KEY)
            return self._program

    # ---- Sets & progression ----

    async def log_set(
        self,
        day: Weekday | str,
        exercise_name: str,
        weight: float | int | str,
        reps: int | float | str,
    ) -> LoggedSet:
        """Append a set, restart the rest timer with the configured duration, persist the log."""
        async with self._lock:
            entry = self.set_log.log_set(day, exercise_name, weight, reps)
            self.timer.start()
            logger.info(
                "Set logged: %s / %s #%d (%s x %d)",
                day,
                exercise_name,
                entry.session_index,
                entry.weight,
                entry.reps,
            )
            await self._persist(SET_LOG_KEY)
            return entry

    def sets(self, day: str, exercise_name: str) -> list[LoggedSet]:
        return self.set_log.sets_for(day, exercise_name)

    def suggestion(self, day: str, exercise_name: str) -> float | None:
        return suggest_next_load(self.set_log.sets_for(day, exercise_name))

    def trend(self, day: str, exercise_name: str) -> list[TrendPoint]:
        return weight_trend(self.set_log.sets_for(day, exercise_name))

    # ---- Rest timer ----

    def set_rest_duration(self, seconds: int) -> RestTimerRead:
        self.timer.configure(seconds)
        return self.timer.state()

    # ---- History ----

    async def finish_workout(self, day: str, now: datetime | None = None) -> CompletedWorkoutEntry:
        async with self._lock:
            entry = self.history.finish_workout(self._program.name, day, now=now)
            await self._persist(HISTORY_KEY)
            return entry

    def export_history_csv(self) -> str:
        return self.history.export_csv()
