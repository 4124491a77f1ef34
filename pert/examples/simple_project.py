from pert.services.analysis import analyze
from pert.utils.reader import read_project
from pert.utils.report import format_report

# 10 tasks, 13 precedence constraints, then one duration per task
SAMPLE_PROJECT = (
    "10 13   1 2 1   2 4 1   2 5 1   3 5 1   3 6 1   4 7 1   5 7 1   5 8 1"
    "   6 8 1   6 9 1   7 10 1   8 10 1   9 10 1      0 3 2 3 2 1 3 2 4 1"
)


def create_sample_project():
    """Return the (graph, durations) pair of the built-in example."""
    return read_project(SAMPLE_PROJECT)


if __name__ == "__main__":
    graph, durations = create_sample_project()
    print(format_report(analyze(graph, durations), graph))
