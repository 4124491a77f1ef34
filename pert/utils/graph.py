import logging
from collections import deque

from ..domain.task import PERTError

logger = logging.getLogger(__name__)


class CycleError(PERTError):
    """Raised by the topological sort when the graph is not a DAG."""

    def __init__(self, cycle):
        self.cycle = list(cycle)
        super().__init__(
            "Precedence graph contains a cycle: "
            + " -> ".join(str(u) for u in self.cycle)
        )


class TraversalDepthError(PERTError):
    """Raised when the recursive sort runs past the interpreter recursion limit."""

    pass


def topological_order(graph, recursive=False):
    """
    Order the vertices of graph so that every edge goes from earlier to later.

    Depth-first search marks each vertex explored when first reached and keeps
    it on-stack while its descendants are being visited. Reaching a successor
    that is still on-stack means a back edge, i.e. a cycle. A vertex is
    prepended to the result once all its out-edges are done, so the result
    is reverse finish order.

    Args:
        graph: A ProjectGraph
        recursive: Use the recursive DFS instead of the explicit work stack.
            The recursive variant is bounded by the interpreter recursion
            limit and fails on long chains.

    Returns:
        list: Vertex indices in topological order

    Raises:
        CycleError: If the graph contains a cycle (self-loops included)
        TraversalDepthError: If the recursive variant runs too deep
    """
    if recursive:
        return _recursive_dfs_order(graph)
    return _iterative_dfs_order(graph)


def _iterative_dfs_order(graph):
    explored = [False] * graph.size()
    on_stack = [False] * graph.size()
    finish_order = deque()

    for root in graph:
        if explored[root]:
            continue

        explored[root] = True
        on_stack[root] = True
        # Each frame keeps its own out-edge iterator so a vertex resumes where it left off
        stack = [(root, iter(graph.out_edges(root)))]

        while stack:
            u, edges = stack[-1]
            for edge in edges:
                v = edge.to_vertex
                if on_stack[v]:
                    path = [frame[0] for frame in stack]
                    raise CycleError(path[path.index(v):] + [v])
                if not explored[v]:
                    explored[v] = True
                    on_stack[v] = True
                    stack.append((v, iter(graph.out_edges(v))))
                    break
            else:
                # All out-edges done
                stack.pop()
                on_stack[u] = False
                finish_order.appendleft(u)

    return list(finish_order)


def _recursive_dfs_order(graph):
    explored = [False] * graph.size()
    on_stack = [False] * graph.size()
    path = []
    finish_order = deque()

    def visit(u):
        explored[u] = True
        on_stack[u] = True
        path.append(u)

        for edge in graph.out_edges(u):
            v = edge.to_vertex
            if on_stack[v]:
                raise CycleError(path[path.index(v):] + [v])
            if not explored[v]:
                visit(v)

        path.pop()
        on_stack[u] = False
        finish_order.appendleft(u)

    try:
        for u in graph:
            if not explored[u]:
                visit(u)
    except RecursionError:
        raise TraversalDepthError(
            f"Recursive depth-first search exceeded the recursion limit after "
            f"{len(path)} nested tasks; use the iterative sort (recursive=False) "
            f"for long dependency chains"
        ) from None

    return list(finish_order)


def forward_pass(graph, order, table):
    """
    Calculate early start and early finish times.

    Returns:
        int: Project completion time (maximum early finish, 0 if empty)
    """
    for u in order:
        task = table[u]

        # Start tasks have no predecessors and begin at time 0
        task.early_start = max(
            (table[edge.from_vertex].early_finish for edge in graph.in_edges(u)),
            default=0,
        )
        task.early_finish = task.early_start + task.duration

    completion_time = table.project_completion_time()
    logger.debug(
        "Forward pass over %d tasks, completion time %d", len(order), completion_time
    )
    return completion_time


def backward_pass(graph, order, table, completion_time):
    """Calculate late start and late finish times"""
    # Seeding every task makes end tasks finish at completion_time
    for task in table:
        task.late_finish = completion_time

    for u in reversed(order):
        task = table[u]
        for edge in graph.out_edges(u):
            successor = table[edge.to_vertex]
            if successor.late_start < task.late_finish:
                task.late_finish = successor.late_start
        task.late_start = task.late_finish - task.duration

    logger.debug("Backward pass over %d tasks", len(order))
    return table


def compute_slack(table):
    """Derive slack (LF - EF) for every task"""
    for task in table:
        task.slack = task.late_finish - task.early_finish
    return table


def find_critical_path(graph, order, table):
    """
    Find one longest path through the schedule.

    Starts at the first zero-slack start task in topological order and keeps
    following a zero-slack successor whose early start equals the current
    early finish until an end task is reached.

    Returns:
        list: Vertex indices from a start task to an end task, empty if the
        graph has no vertices
    """
    start = next(
        (u for u in order if not graph.in_edges(u) and table[u].is_critical), None
    )
    if start is None:
        return []

    path = [start]
    u = start
    while True:
        following = next(
            (
                edge.to_vertex
                for edge in graph.out_edges(u)
                if table[edge.to_vertex].is_critical
                and table[edge.to_vertex].early_start == table[u].early_finish
            ),
            None,
        )
        if following is None:
            break
        path.append(following)
        u = following

    return path
