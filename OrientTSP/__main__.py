from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from typing import Any, Iterable, List, Tuple

from OrientTSP.core import TravellingSalesman
from OrientTSP.orientations import ORIENTATION_STRATEGIES, get_orientation_strategy
from OrientTSP.solvers.base import DEFAULT_SEED, OrientationError, TSPConfig


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="orienttsp",
        description="Order points, segments, polylines or polygons into a short travel path.",
    )
    parser.add_argument("input", type=pathlib.Path, help="JSON file with the elements to order.")
    parser.add_argument(
        "--kind",
        choices=sorted(ORIENTATION_STRATEGIES.keys()),
        help="Geometry of the elements (default: the file's 'kind', else 'segment').",
    )
    parser.add_argument(
        "--start",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        help="Fixed starting point of the path (default: the file's 'start', if any).",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed of the insertion order.")
    parser.add_argument("--output", type=pathlib.Path, help="Write the result JSON here instead of stdout.")
    parser.add_argument("--plot", type=pathlib.Path, help="Also render the path to this image file.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser.parse_args(raw_args)


def load_problem(path: pathlib.Path) -> Tuple[List[Any], str | None, List[float] | None]:
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if isinstance(data, list):
        return data, None, None
    if not isinstance(data, dict) or "elements" not in data:
        raise ValueError("Input must be a list of elements or an object with an 'elements' list.")
    return list(data["elements"]), data.get("kind"), data.get("start")


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        geometries, file_kind, file_start = load_problem(args.input)
        strategy = get_orientation_strategy(args.kind or file_kind or "segment")
    except (OSError, ValueError, KeyError) as exc:
        print(f"orienttsp: error: {exc}", file=sys.stderr)
        return 2
    starting_point = args.start if args.start is not None else file_start

    def get_orientations(index: int):
        return strategy(geometries[index])

    tsp = TravellingSalesman(get_orientations, TSPConfig(seed=args.seed))
    try:
        result = tsp.find_path(range(len(geometries)), starting_point)
    except (OrientationError, ValueError) as exc:
        print(f"orienttsp: error: {exc}", file=sys.stderr)
        return 2

    payload = json.dumps(
        {"order": result.elements, "orientations": result.orientations, "cost": result.cost, "seed": args.seed},
        indent=2,
    )
    try:
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(payload + "\n", encoding="utf-8")
        else:
            print(payload)

        if args.plot:
            from OrientTSP.plotting import save_path_plot

            save_path_plot(result, get_orientations, args.plot, starting_point)
            logging.getLogger(__name__).info("Saved figure to %s", args.plot)
    except OSError as exc:
        print(f"orienttsp: error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
