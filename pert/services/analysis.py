import logging
from enum import Enum
from typing import List, Optional, Sequence, Union

from ..domain.graph import GraphError, ProjectGraph
from ..domain.task import (
    PERTError,
    ScheduleTable,
    TaskTimes,
    validate_duration,
    validate_durations,
)
from ..utils.graph import (
    CycleError,
    backward_pass,
    compute_slack,
    find_critical_path,
    forward_pass,
    topological_order,
)

logger = logging.getLogger(__name__)


class AnalysisState(Enum):
    """
    Enum representing the lifecycle of a PERT analysis.
    """

    CONSTRUCTED = "constructed"
    PRIMED = "primed"
    ANALYZED = "analyzed"
    REJECTED = "rejected"


class AnalysisStateError(PERTError):
    """Raised when an operation is not valid in the current analysis state."""

    pass


class NotDAG:
    """
    Result of analysing a graph that contains a cycle.

    No schedule exists for such a graph, so this result exposes no per-task
    values. It is falsy, which lets callers write ``if not result``.
    """

    is_dag = False

    def __init__(self, cycle: Sequence[int]):
        self.cycle = list(cycle)

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, NotDAG):
            return NotImplemented
        return self.cycle == other.cycle

    def __repr__(self) -> str:
        return f"NotDAG(cycle={self.cycle})"


class PERT:
    """
    PERT analysis of a project graph.

    Lifecycle: durations are set on a freshly constructed analysis, then
    ``run()`` either schedules the project (ANALYZED) or finds a cycle
    (REJECTED). Queries are only answered once analysed.
    """

    is_dag = True

    def __init__(self, graph: ProjectGraph, recursive: bool = False):
        """
        Args:
            graph: The precedence graph to analyse
            recursive: Use recursive DFS for the topological sort
        """
        if graph is None:
            raise GraphError("Graph cannot be None")

        self.graph = graph
        self.recursive = recursive
        self._durations: List[Optional[int]] = [None] * graph.size()
        self._state = AnalysisState.CONSTRUCTED

        # Filled in by run()
        self._table = None
        self._order = None
        self._completion_time = None
        self.cycle = None

    @property
    def state(self) -> AnalysisState:
        return self._state

    def set_duration(self, u: int, duration: int) -> "PERT":
        """
        Set the duration of a single task.

        The analysis becomes primed once every task has a duration.

        Returns:
            self: For method chaining
        """
        self._require(AnalysisState.CONSTRUCTED, AnalysisState.PRIMED)
        self._check_vertex(u)
        validate_duration(u, duration)

        self._durations[u] = duration
        if None not in self._durations:
            self._state = AnalysisState.PRIMED
        return self

    def set_durations(self, durations: Sequence[int]) -> "PERT":
        """
        Set all task durations at once, in vertex index order.

        Returns:
            self: For method chaining

        Raises:
            TaskError: If the count does not match the vertex count or a
                duration is negative or not an integer
        """
        self._require(AnalysisState.CONSTRUCTED, AnalysisState.PRIMED)
        self._durations = validate_durations(durations, self.graph.size())
        self._state = AnalysisState.PRIMED
        return self

    def run(self) -> bool:
        """
        Schedule the project.

        Returns:
            bool: True if the graph is a DAG and the schedule was computed,
            False if the graph contains a cycle
        """
        self._require(AnalysisState.PRIMED)

        try:
            order = topological_order(self.graph, recursive=self.recursive)
        except CycleError as e:
            self.cycle = e.cycle
            self._state = AnalysisState.REJECTED
            logger.warning("No schedule: %s", e)
            return False

        table = ScheduleTable(self._durations)
        completion_time = forward_pass(self.graph, order, table)
        backward_pass(self.graph, order, table, completion_time)
        compute_slack(table)

        self._table = table
        self._order = order
        self._completion_time = completion_time
        self._state = AnalysisState.ANALYZED

        logger.info(
            "Scheduled %d tasks: completion time %d, %d critical",
            len(table),
            completion_time,
            self.num_critical(),
        )
        return True

    def _require(self, *states):
        if self._state not in states:
            expected = " or ".join(s.value for s in states)
            raise AnalysisStateError(
                f"Analysis is {self._state.value}, expected {expected}"
            )

    def _check_vertex(self, u):
        if isinstance(u, bool) or not isinstance(u, int):
            raise TypeError(f"Vertex must be an integer index, got {u!r}")
        if not 0 <= u < self.graph.size():
            raise IndexError(
                f"Vertex {u} is out of range for a graph of size {self.graph.size()}"
            )

    def _task(self, u) -> TaskTimes:
        self._require(AnalysisState.ANALYZED)
        self._check_vertex(u)
        return self._table[u]

    # The following methods are valid after a successful run().

    def es(self, u: int) -> int:
        """Earliest start of u."""
        return self._task(u).early_start

    def ef(self, u: int) -> int:
        """Earliest finish of u."""
        return self._task(u).early_finish

    def ls(self, u: int) -> int:
        """Latest start of u."""
        return self._task(u).late_start

    def lf(self, u: int) -> int:
        """Latest finish of u."""
        return self._task(u).late_finish

    def ec(self, u: int) -> int:
        """Earliest time at which task u can be completed."""
        return self.ef(u)

    def lc(self, u: int) -> int:
        """Latest completion time of u that does not delay the project."""
        return self.lf(u)

    def slack(self, u: int) -> int:
        return self._task(u).slack

    def critical(self, u: int) -> bool:
        """Is u a critical task?"""
        return self._task(u).is_critical

    def num_critical(self) -> int:
        """Number of critical tasks."""
        self._require(AnalysisState.ANALYZED)
        return sum(1 for task in self._table if task.is_critical)

    def critical_path(self) -> int:
        """Length of a critical path, i.e. the project completion time."""
        self._require(AnalysisState.ANALYZED)
        return self._completion_time

    def critical_tasks(self) -> List[int]:
        """Indices of all critical tasks, in vertex order."""
        self._require(AnalysisState.ANALYZED)
        return [task.vertex for task in self._table if task.is_critical]

    def critical_path_tasks(self) -> List[int]:
        """One critical path, from a start task to an end task."""
        self._require(AnalysisState.ANALYZED)
        return find_critical_path(self.graph, self._order, self._table)

    def topological_order(self) -> List[int]:
        """The task order used by the analysis."""
        self._require(AnalysisState.ANALYZED)
        return list(self._order)

    def schedule(self) -> List[TaskTimes]:
        """Copies of the schedule records, in vertex order."""
        self._require(AnalysisState.ANALYZED)
        return self._table.snapshot()

    def __repr__(self) -> str:
        return f"PERT(graph={self.graph!r}, state={self._state.value})"


def analyze(
    graph: ProjectGraph, durations: Sequence[int], recursive: bool = False
) -> Union[PERT, NotDAG]:
    """
    Run a PERT analysis on graph.

    Args:
        graph: The precedence graph
        durations: Task durations in vertex index order
        recursive: Use recursive DFS for the topological sort

    Returns:
        PERT: The analysed schedule, or
        NotDAG: If the graph contains a cycle

    Raises:
        GraphError: If graph is None
        TaskError: If the durations do not fit the graph
    """
    analysis = PERT(graph, recursive=recursive).set_durations(durations)
    if analysis.run():
        return analysis
    return NotDAG(analysis.cycle)
