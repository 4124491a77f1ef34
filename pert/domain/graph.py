import logging
from typing import Any, Hashable, Iterable, Iterator, List, NamedTuple, Optional, Tuple

import networkx as nx

from .task import PERTError

logger = logging.getLogger(__name__)


class GraphError(PERTError):
    """Exception raised for errors in the ProjectGraph class."""

    pass


class Edge(NamedTuple):
    """A precedence constraint: ``from_vertex`` must finish before ``to_vertex`` starts."""

    from_vertex: int
    to_vertex: int


class ProjectGraph:
    """
    Directed precedence graph with a fixed vertex set ``0..N-1``.

    The graph is backed by a ``networkx.DiGraph``. Vertices are plain integer
    indices, so per-vertex data can be kept in parallel lists indexed by vertex.
    Iteration over vertices and over the in/out edges of a vertex follows
    insertion order, which makes every traversal deterministic.
    """

    def __init__(self, size: int, edges: Optional[Iterable[Tuple[int, int]]] = None):
        """
        Initialize a graph with ``size`` vertices.

        Args:
            size: Number of vertices; vertex indices are 0..size-1
            edges: Optional iterable of (from, to) index pairs

        Raises:
            GraphError: If size is not a non-negative integer or an edge
                endpoint is out of range
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise GraphError("Graph size must be a non-negative integer")

        self._graph = nx.DiGraph()
        self._graph.add_nodes_from(range(size))

        if edges:
            for u, v in edges:
                self.add_edge(u, v)

    @classmethod
    def from_networkx(cls, graph: nx.DiGraph) -> "ProjectGraph":
        """
        Build a ProjectGraph from an arbitrary networkx DiGraph.

        Nodes are renumbered densely in the graph's node iteration order. The
        original node is kept as the ``label`` attribute of each vertex.

        Args:
            graph: A directed networkx graph with any hashable nodes

        Returns:
            ProjectGraph: The relabelled graph
        """
        if not graph.is_directed():
            raise GraphError("Project graphs must be directed")

        index = {node: i for i, node in enumerate(graph.nodes())}
        project = cls(len(index))
        for node, i in index.items():
            project._graph.nodes[i]["label"] = node
        for u, v in graph.edges():
            project.add_edge(index[u], index[v])
        logger.debug("Converted networkx graph into %r", project)
        return project

    def add_edge(self, u: int, v: int) -> "ProjectGraph":
        """
        Add the precedence constraint u -> v.

        Duplicate edges collapse into one. Self-loops are accepted; they make
        the graph cyclic.

        Returns:
            self: For method chaining
        """
        self._check_vertex(u)
        self._check_vertex(v)
        self._graph.add_edge(u, v)
        return self

    def _check_vertex(self, u: Any):
        if isinstance(u, bool) or not isinstance(u, int) or not 0 <= u < self.size():
            raise GraphError(f"Vertex {u!r} is out of range for a graph of size {self.size()}")

    def size(self) -> int:
        """Number of vertices."""
        return self._graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.size()))

    def in_edges(self, u: int) -> List[Edge]:
        """Edges entering u, i.e. one per immediate predecessor."""
        return [Edge(p, u) for p in self._graph.predecessors(u)]

    def out_edges(self, u: int) -> List[Edge]:
        """Edges leaving u, i.e. one per immediate successor."""
        return [Edge(u, s) for s in self._graph.successors(u)]

    def edges(self) -> List[Edge]:
        return [Edge(u, v) for u, v in self._graph.edges()]

    def label(self, u: int) -> Hashable:
        """
        Display label of a vertex.

        Graphs built from networkx keep their original node; otherwise the
        label is the 1-based vertex number used in input files.
        """
        self._check_vertex(u)
        return self._graph.nodes[u].get("label", u + 1)

    def to_networkx(self) -> nx.DiGraph:
        """Return a copy of the underlying networkx graph."""
        return self._graph.copy()

    def __repr__(self) -> str:
        return f"ProjectGraph(size={self.size()}, edges={self.number_of_edges()})"
