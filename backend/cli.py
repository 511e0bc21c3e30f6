import json
import argparse
import sys

from pydantic import ValidationError

from application.exceptions import ExerciseNotFoundError, InvalidSpecError
from backend.core.progression_engine import compute_next_workout
from backend.settings import get_settings
from domain.models import Goal, RepRangeSpec, SetRecord, WeightUnit
from infrastructure.catalog_repository import CatalogRepRangeRepository

DEFAULT_EXERCISE_ID = "cli"


def build_parser():
    parser = argparse.ArgumentParser(description="Recommend the next workout from a logged history")
    commands = parser.add_subparsers(dest="command", required=True)

    recommend = commands.add_parser("recommend", help="Compute the next session for one exercise")
    recommend.add_argument("history", help="JSON file holding a list of logged sets")
    recommend.add_argument("--goal", default=Goal.HYPERTROPHY.value, choices=[g.value for g in Goal])
    recommend.add_argument("--exercise-id", help="Look up the rep range in the exercise catalog")
    recommend.add_argument("--min-reps", type=int, help="Bottom of the rep range")
    recommend.add_argument("--max-reps", type=int, help="Top of the rep range")
    recommend.add_argument("--sets", type=int, default=3, help="Prescribed sets (default: 3)")
    recommend.add_argument("--rest-seconds", type=int, default=60, help="Rest between sets (default: 60)")
    recommend.add_argument("-o", "--output", help="Output JSON file path (default: stdout)")
    return parser


def load_history(path, exercise_id=None, weight_unit=WeightUnit.LBS):
    with open(path, 'r') as f:
        rows = json.load(f)

    if not isinstance(rows, list):
        raise ValueError("History file must contain a JSON list of sets")

    records = []
    for i, row in enumerate(rows, start=1):
        if not isinstance(row, dict):
            raise ValueError(f"Set {i} must be a JSON object")
        if exercise_id is None:
            # Without an explicit id, the first set decides which exercise the file is for
            exercise_id = row.get("exercise_id", DEFAULT_EXERCISE_ID)
        if row.get("exercise_id", exercise_id) != exercise_id:
            raise ValueError(
                f"Set {i} is for exercise '{row['exercise_id']}', expected '{exercise_id}'"
            )
        records.append(SetRecord(**{"exercise_id": exercise_id, "weight_unit": weight_unit, **row}))

    return records


def resolve_target(args):
    goal = Goal(args.goal)
    if args.min_reps is not None and args.max_reps is not None:
        return RepRangeSpec(
            goal=goal,
            min_reps=args.min_reps,
            max_reps=args.max_reps,
            sets=args.sets,
            rest_seconds=args.rest_seconds,
        )
    return CatalogRepRangeRepository().get_rep_range_spec(args.exercise_id, goal)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.exercise_id is None and (args.min_reps is None or args.max_reps is None):
        parser.error("give --exercise-id, or both --min-reps and --max-reps")

    try:
        # Resolve the goal's rep range
        target = resolve_target(args)

        # Load logged sets
        if args.exercise_id:
            unit = CatalogRepRangeRepository().get_weight_unit(args.exercise_id)
        else:
            unit = WeightUnit.LBS
        history = load_history(args.history, args.exercise_id, unit)

        recommendation = compute_next_workout(history, target, get_settings().progression_policy())
        output = recommendation.model_dump_json(indent=2)

        # Output result
        if args.output:
            with open(args.output, 'w') as f:
                f.write(output)
        else:
            print(output)

    except FileNotFoundError:
        print(f"Error: File not found: {args.history}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: Invalid set record: {e}", file=sys.stderr)
        sys.exit(1)
    except (InvalidSpecError, ExerciseNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
