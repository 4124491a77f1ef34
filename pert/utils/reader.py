"""
Reader for the plain-text project format.

The format is a whitespace separated stream of integers::

    N M
    u1 v1 w1
    ...
    uM vM wM
    d1 d2 ... dN

``N`` vertices and ``M`` edges, one ``u v w`` triple per edge with 1-based
vertex numbers, followed by one duration per vertex. The edge weight ``w``
is read but not used: durations belong to tasks, edges only express
precedence.
"""

import logging
import re

from ..domain.graph import ProjectGraph
from ..domain.task import PERTError

logger = logging.getLogger(__name__)

# ASCII decimal integers, optionally negative
INTEGER_TOKEN = re.compile(r"-?[0-9]+")


class InputFormatError(PERTError, ValueError):
    """Raised for malformed project input."""

    pass


class _Tokens:
    def __init__(self, text):
        self._tokens = text.split()
        self._position = 0

    def next_int(self, what):
        if self._position >= len(self._tokens):
            raise InputFormatError(
                f"Unexpected end of input at token {self._position + 1}: expected {what}"
            )
        token = self._tokens[self._position]
        self._position += 1
        if not INTEGER_TOKEN.fullmatch(token):
            raise InputFormatError(
                f"Token {self._position} ({token!r}) is not an integer: expected {what}"
            )
        return int(token)

    def remaining(self):
        return len(self._tokens) - self._position


def read_project(text):
    """
    Parse a project description.

    Args:
        text: The input in the format described in the module docstring

    Returns:
        tuple: (ProjectGraph, list of durations)

    Raises:
        InputFormatError: If the input is malformed
    """
    tokens = _Tokens(text)

    size = tokens.next_int("vertex count")
    edge_count = tokens.next_int("edge count")
    if size < 0 or edge_count < 0:
        raise InputFormatError("Vertex and edge counts cannot be negative")

    # Check the token count before allocating the graph
    expected = 3 * edge_count + size
    if tokens.remaining() < expected:
        raise InputFormatError(
            f"Input declares {size} vertices and {edge_count} edges, which needs "
            f"{expected} more tokens, but only {tokens.remaining()} remain"
        )

    graph = ProjectGraph(size)
    for i in range(1, edge_count + 1):
        u = tokens.next_int(f"source vertex of edge {i}")
        v = tokens.next_int(f"target vertex of edge {i}")
        tokens.next_int(f"weight of edge {i}")

        for vertex in (u, v):
            if not 1 <= vertex <= size:
                raise InputFormatError(
                    f"Edge {i} refers to vertex {vertex}, valid vertices are 1..{size}"
                )
        graph.add_edge(u - 1, v - 1)

    durations = []
    for vertex in range(1, size + 1):
        duration = tokens.next_int(f"duration of vertex {vertex}")
        if duration < 0:
            raise InputFormatError(f"Duration of vertex {vertex} cannot be negative")
        durations.append(duration)

    if tokens.remaining():
        logger.warning("Ignoring %d trailing tokens", tokens.remaining())

    logger.debug("Read %r", graph)
    return graph, durations


def read_project_file(path):
    """Read a project description from a file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise InputFormatError(f"{path} is not valid UTF-8 text: {e}")
    return read_project(text)
