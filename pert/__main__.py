"""
PERT Scheduler
==============

Command line interface: analyse a project file, or the built-in example.
"""

import argparse
import logging
import sys

from .domain.task import PERTError
from .examples.simple_project import create_sample_project
from .services.analysis import analyze
from .utils.reader import read_project_file
from .utils.report import format_graph, format_report

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="PERT project scheduling")
    parser.add_argument(
        "input",
        nargs="?",
        help="Project file (N M, M edges 'u v w', N durations). "
        "Runs the built-in example when omitted.",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Use recursive depth-first search for the topological sort",
    )
    parser.add_argument(
        "--network", type=str, help="Save a network diagram to this file"
    )
    parser.add_argument("--gantt", type=str, help="Save a Gantt chart to this file")
    parser.add_argument(
        "--print-graph",
        action="store_true",
        help="Print the parsed precedence graph before the schedule",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.input:
            graph, durations = read_project_file(args.input)
        else:
            logger.info("No input file given, running the example project")
            graph, durations = create_sample_project()
        result = analyze(graph, durations, recursive=args.recursive)
    except (OSError, PERTError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.print_graph:
        print(format_graph(graph))

    print(format_report(result, graph))

    if result.is_dag and (args.network or args.gantt):
        # Charts are only written to files, never shown
        import matplotlib

        matplotlib.use("Agg")
        from .visualization.gantt import create_gantt_chart
        from .visualization.network import create_network_diagram

        if args.network:
            create_network_diagram(result, args.network, show=False)
            print(f"Network diagram saved to {args.network}")
        if args.gantt:
            create_gantt_chart(result, args.gantt, show=False)
            print(f"Gantt chart saved to {args.gantt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
