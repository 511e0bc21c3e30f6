"""
Progression Engine for next-workout recommendations.

Given an exercise's logged history and the rep range for the user's goal,
this module computes the next session's prescription:

- Top of the rep range reached: add ~2.5% weight and restart at min reps
- Below the rep range: keep the weight and build reps back up
- Inside the rep range: keep the weight and the reps

The engine is a pure function over its inputs. Fetching history and rep
ranges is the caller's job (see ProgressionService).
"""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from application.exceptions import InvalidSpecError
from domain.models import (
    Recommendation,
    RecommendationAction,
    RepRangeSpec,
    SetRecord,
    WeightUnit,
)


FIRST_LOG_MESSAGE = "Log your first set to get a recommendation."
INCREASE_WEIGHT_MESSAGE = (
    "Great work! You hit the top of your rep range. "
    "Increase the weight to {load} and aim for {reps} reps."
)
BUILD_REPS_MESSAGE = (
    "Build up reps before increasing weight: stay at {load} "
    "and aim for {reps} reps."
)
HOLD_MESSAGE = (
    "Keep the weight at {load} and aim for {reps} reps. "
    "Reach {max_reps} reps to earn a weight increase."
)


# =============================================================================
# Policy
# =============================================================================


@dataclass(frozen=True)
class ProgressionPolicy:
    """
    Weight-increase rule applied when the top of the rep range is reached.

    Attributes:
        increase_ratio: Fraction of the last weight to add (0.025 = 2.5%)
        increment_step: Smallest practical plate jump; increases round to it
        minimum_increment: Increase used when the ratio rounds to zero
    """
    increase_ratio: float = 0.025
    increment_step: float = 0.5
    minimum_increment: float = 1.0

    def __post_init__(self):
        if self.increase_ratio < 0:
            raise ValueError("increase_ratio must not be negative")
        if self.increment_step <= 0:
            raise ValueError("increment_step must be positive")
        if self.minimum_increment <= 0:
            raise ValueError("minimum_increment must be positive")


DEFAULT_POLICY = ProgressionPolicy()


# =============================================================================
# Helpers
# =============================================================================


def _dec(value: float) -> Decimal:
    return Decimal(str(value))


def round_to_increment(value: float, step: float) -> float:
    """
    Round a value to the nearest multiple of step, halves rounding up.

    Args:
        value: Value to round
        step: Increment to round to (e.g., 0.5)

    Returns:
        Rounded value
    """
    step_d = _dec(step)
    units = (_dec(value) / step_d).to_integral_value(rounding=ROUND_HALF_UP)
    return float(units * step_d)


def weight_increment(weight: float, policy: ProgressionPolicy = DEFAULT_POLICY) -> float:
    """
    Compute how much weight to add after a session at the top of the range.

    Args:
        weight: Last session's weight
        policy: Increase rule

    Returns:
        Increment, always > 0
    """
    raw = float(_dec(weight) * _dec(policy.increase_ratio))
    increment = round_to_increment(raw, policy.increment_step)
    if increment <= 0:
        return policy.minimum_increment
    return increment


def validate_rep_range(target: RepRangeSpec) -> None:
    """
    Check a RepRangeSpec for internal consistency.

    Raises:
        InvalidSpecError: Listing every problem found
    """
    problems: List[str] = []
    if target.min_reps < 1:
        problems.append(f"min_reps must be at least 1 (got {target.min_reps})")
    if target.min_reps > target.max_reps:
        problems.append(
            f"min_reps ({target.min_reps}) must not exceed max_reps ({target.max_reps})"
        )
    if target.sets < 1:
        problems.append(f"sets must be at least 1 (got {target.sets})")
    if target.rest_seconds < 0:
        problems.append(f"rest_seconds must not be negative (got {target.rest_seconds})")
    if problems:
        raise InvalidSpecError(target, problems)


def sort_history(history: Iterable[SetRecord]) -> List[SetRecord]:
    """Return history oldest first. Records with equal dates keep their input order."""
    return sorted(history, key=lambda record: record.date)


def _format_load(weight: float, unit: WeightUnit) -> str:
    if unit == WeightUnit.BODYWEIGHT:
        return "bodyweight" if weight == 0 else f"bodyweight + {weight:g}"
    return f"{weight:g} {unit.value}"


# =============================================================================
# Engine
# =============================================================================


def compute_next_workout(
    history: Iterable[SetRecord],
    target: RepRangeSpec,
    policy: ProgressionPolicy = DEFAULT_POLICY,
) -> Recommendation:
    """
    Compute the next recommended session for one exercise.

    Args:
        history: Logged records for the exercise, in any order
        target: Rep range for the user's active goal
        policy: Weight-increase rule

    Returns:
        Recommendation with weight/reps/sets and a coaching message. With no
        history, the numeric fields are None and the message asks the user
        to log a first set.

    Raises:
        InvalidSpecError: target is malformed
    """
    validate_rep_range(target)

    ordered = sort_history(history)
    if not ordered:
        return Recommendation(message=FIRST_LOG_MESSAGE, action=RecommendationAction.FIRST_LOG)

    last = ordered[-1]
    unit = last.weight_unit

    if last.reps >= target.max_reps:
        action = RecommendationAction.INCREASE_WEIGHT
        weight = float(_dec(last.weight) + _dec(weight_increment(last.weight, policy)))
        reps = target.min_reps
        template = INCREASE_WEIGHT_MESSAGE
    elif last.reps < target.min_reps:
        action = RecommendationAction.BUILD_REPS
        weight = last.weight
        reps = target.min_reps
        template = BUILD_REPS_MESSAGE
    else:
        action = RecommendationAction.HOLD
        weight = last.weight
        reps = min(max(last.reps, target.min_reps), target.max_reps)
        template = HOLD_MESSAGE

    message = template.format(
        load=_format_load(weight, unit),
        reps=reps,
        max_reps=target.max_reps,
    )

    return Recommendation(
        weight=weight,
        reps=reps,
        sets=target.sets,
        message=message,
        action=action,
        weight_unit=unit,
        rest_seconds=target.rest_seconds,
    )
