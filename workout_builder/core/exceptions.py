"""Domain errors. Every one leaves the store it was raised from unchanged."""


class WorkoutBuilderError(Exception):
    """Base for all engine errors."""


class ValidationError(WorkoutBuilderError):
    """Malformed program (duplicate days, empty training day, bad fields)."""


class InvalidInputError(WorkoutBuilderError):
    """Non-numeric or out-of-range weight/reps/duration."""


class NotFoundError(WorkoutBuilderError):
    """Unknown saved program name or day."""


class PersistenceError(WorkoutBuilderError):
    """The storage gateway failed to read or write.

    In-memory state is still authoritative when this is raised.
    """
