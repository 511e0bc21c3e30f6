"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""

from typing import List, Optional


class InvalidSpecError(ValueError):
    """A RepRangeSpec failed validation.

    Raised by the progression engine when the target rep range is malformed
    (min_reps above max_reps, no sets, ...). Fatal to the single call: the
    caller must fix the rep range before retrying.
    """

    def __init__(self, spec: object, problems: List[str]):
        self.spec = spec
        self.problems = list(problems)
        super().__init__(f"Invalid rep range spec: {'; '.join(self.problems)}")


class ExerciseNotFoundError(LookupError):
    """No rep ranges are configured for the requested exercise."""

    def __init__(self, exercise_id: str, message: Optional[str] = None):
        self.exercise_id = exercise_id
        super().__init__(message or f"No rep ranges configured for exercise '{exercise_id}'")


class HistoryStoreError(RuntimeError):
    """The history store could not be read or written."""

    pass
