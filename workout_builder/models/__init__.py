"""ORM models - import all so Base.metadata is complete for migrations."""

from workout_builder.models.kv_entry import KeyValueEntry

__all__ = ["KeyValueEntry"]
