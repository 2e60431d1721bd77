"""
CPM Scheduler
=============

Command line entry point for Critical Path Method scheduling.
"""

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from cpm.domain.errors import CPMError
from cpm.examples.simple_project import create_sample_project
from cpm.services.scheduler import compute_schedule
from cpm.utils.console import (
    format_adjacency_matrix,
    format_report,
    read_project_interactively,
)
from cpm.utils.parsing import resolve_edges
from cpm.utils.serialization import load_project, write_schedule_json
from cpm.visualization.gantt import create_gantt_chart
from cpm.visualization.network import create_network_diagram


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="cpm", description="Critical Path Method scheduling"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=str, help="JSON project file to schedule")
    source.add_argument(
        "--interactive", action="store_true", help="Enter the project on the console"
    )
    source.add_argument(
        "--example", action="store_true", help="Run the example project"
    )

    parser.add_argument(
        "--json-out", type=str, default=None, help="Write the schedule as JSON"
    )
    parser.add_argument(
        "--detailed",
        action="store_true",
        help="Include time windows in the JSON output",
    )
    parser.add_argument(
        "--diagram", type=str, default=None, help="Save a network diagram (PNG)"
    )
    parser.add_argument(
        "--gantt", type=str, default=None, help="Save a Gantt chart (PNG)"
    )
    parser.add_argument(
        "--layout",
        choices=["layered", "spring", "circular", "shell"],
        default="layered",
        help="Network diagram layout",
    )
    parser.add_argument(
        "--matrix", action="store_true", help="Print the adjacency matrix"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    return parser


def _configure_logging(verbosity):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _load_schedule(args):
    if args.example:
        return create_sample_project(verbose=False)

    if args.interactive:
        print("=== CPM (activities on nodes) ===\n")
        activities, predecessor_map = read_project_interactively()
        edges = resolve_edges(predecessor_map, [a.label for a in activities])
    else:
        activities, edges = load_project(args.input)

    return compute_schedule(activities, edges)


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        schedule = _load_schedule(args)
    except (CPMError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.matrix:
        print("Adjacency matrix:")
        print(format_adjacency_matrix(schedule.graph))
        print()

    print(format_report(schedule))

    if args.json_out:
        write_schedule_json(schedule, args.json_out, detailed=args.detailed)
        print(f"Schedule written to {args.json_out}")

    if args.diagram:
        fig = create_network_diagram(
            schedule, filename=args.diagram, show=False, layout=args.layout
        )
        plt.close(fig)
        print(f"Network diagram saved to {args.diagram}")

    if args.gantt:
        fig = create_gantt_chart(schedule, filename=args.gantt, show=False)
        plt.close(fig)
        print(f"Gantt chart saved to {args.gantt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
