import pathlib
from typing import Iterator, List, Optional, Sequence

import yaml

from application.exceptions import ExerciseNotFoundError
from domain.models import Goal, RepRangeSpec, WeightUnit

ROOT = pathlib.Path(__file__).resolve().parents[2]

CATALOG_PATH = ROOT / "shared/dictionaries/rep_ranges.yaml"

CAT = yaml.safe_load(CATALOG_PATH.read_text())


def all_exercise_ids() -> Iterator[str]:
    for item in CAT:
        yield item["id"]


def lookup(exercise_id: str) -> Optional[dict]:
    return next((c for c in CAT if c["id"] == exercise_id), None)


def rep_ranges_for(exercise_id: str) -> List[RepRangeSpec]:
    entry = lookup(exercise_id)
    if entry is None:
        return []
    return [RepRangeSpec(**r) for r in entry.get("rep_ranges", [])]


def weight_unit_for(exercise_id: str) -> WeightUnit:
    entry = lookup(exercise_id) or {}
    return WeightUnit(entry.get("weight_unit", WeightUnit.LBS.value))


def select_rep_range(ranges: Sequence[RepRangeSpec], goal: Goal, exercise_id: str = "") -> RepRangeSpec:
    """Pick the range for a goal, falling back to the first configured range."""
    if not ranges:
        raise ExerciseNotFoundError(exercise_id)
    goal = Goal(goal)
    return next((r for r in ranges if r.goal == goal), ranges[0])
