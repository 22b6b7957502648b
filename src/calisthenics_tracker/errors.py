"""Error types raised by the workout engine and its stores."""


class TrackerError(Exception):
    """Base class for calisthenics-tracker errors."""


class NoActiveExercisesError(TrackerError):
    """A muscle chain (or one of its exercise classes) has no usable exercises."""

    def __init__(self, muscle_chain: str, exercise_class: str | None = None):
        self.muscle_chain = muscle_chain
        self.exercise_class = exercise_class
        if exercise_class:
            message = f"No active exercises for {muscle_chain} / {exercise_class}"
        else:
            message = f"No active exercises for {muscle_chain}"
        super().__init__(message)


class RecordNotFoundError(TrackerError):
    """A referenced session, progress or settings record does not exist."""

    def __init__(self, kind: str, record_id: int | None = None):
        self.kind = kind
        self.record_id = record_id
        if record_id is None:
            message = f"No {kind} record found"
        else:
            message = f"{kind} {record_id} not found"
        super().__init__(message)


class ValidationError(TrackerError):
    """Malformed input, e.g. an effort rating outside 1-3."""
