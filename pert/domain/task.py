from typing import Any, Dict, Iterator, List, Sequence


class PERTError(Exception):
    """Base class for errors raised by the PERT scheduler."""

    pass


class TaskError(PERTError):
    """Exception raised for invalid task durations."""

    pass


class TaskTimes:
    """
    Schedule record of a single task.

    Holds the task duration together with the values computed by the forward
    pass (ES, EF), the backward pass (LS, LF) and the slack derived from them.
    """

    __slots__ = (
        "vertex",
        "duration",
        "early_start",
        "early_finish",
        "late_start",
        "late_finish",
        "slack",
    )

    def __init__(self, vertex: int, duration: int):
        self.vertex = vertex
        self.duration = duration

        # Schedule attributes
        self.early_start = 0
        self.early_finish = duration
        self.late_start = None
        self.late_finish = None
        self.slack = None

    @property
    def is_critical(self) -> bool:
        """A task is critical when it has no slack."""
        return self.slack == 0

    def copy(self) -> "TaskTimes":
        clone = TaskTimes(self.vertex, self.duration)
        for name in self.__slots__:
            setattr(clone, name, getattr(self, name))
        return clone

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the record to a dictionary representation.

        Returns:
            dict: Dictionary representation of the record
        """
        return {
            "vertex": self.vertex,
            "duration": self.duration,
            "early_start": self.early_start,
            "early_finish": self.early_finish,
            "late_start": self.late_start,
            "late_finish": self.late_finish,
            "slack": self.slack,
            "critical": self.is_critical,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, TaskTimes):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (
            f"TaskTimes(vertex={self.vertex}, duration={self.duration}, "
            f"ES={self.early_start}, EF={self.early_finish}, "
            f"LS={self.late_start}, LF={self.late_finish}, slack={self.slack})"
        )


def validate_durations(durations: Sequence[int], size: int) -> List[int]:
    """
    Check a duration list against the vertex count of a graph.

    Args:
        durations: One duration per vertex, in vertex index order
        size: Number of vertices of the graph

    Returns:
        list: The durations as a new list

    Raises:
        TaskError: If the count does not match or a duration is not a
            non-negative integer
    """
    if durations is None:
        raise TaskError("Durations cannot be None")

    durations = list(durations)
    if len(durations) != size:
        raise TaskError(
            f"Expected {size} durations (one per vertex), got {len(durations)}"
        )

    for vertex, duration in enumerate(durations):
        validate_duration(vertex, duration)

    return durations


def validate_duration(vertex: int, duration: int) -> int:
    """Check that the duration of one task is a non-negative integer."""
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise TaskError(
            f"Duration of vertex {vertex} must be an integer, got {duration!r}"
        )
    if duration < 0:
        raise TaskError(f"Duration of vertex {vertex} cannot be negative")
    return duration


class ScheduleTable:
    """
    Per-vertex attribute store.

    A list of TaskTimes records indexed by the dense vertex index of the
    graph being analysed.
    """

    def __init__(self, durations: Sequence[int]):
        self._records = [
            TaskTimes(vertex, duration) for vertex, duration in enumerate(durations)
        ]

    def __getitem__(self, vertex: int) -> TaskTimes:
        if vertex < 0:
            # Negative indices would silently wrap around
            raise IndexError(f"Vertex {vertex} is out of range")
        return self._records[vertex]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TaskTimes]:
        return iter(self._records)

    def project_completion_time(self) -> int:
        """Maximum early finish over all tasks, 0 for an empty table."""
        return max((record.early_finish for record in self._records), default=0)

    def snapshot(self) -> List[TaskTimes]:
        return [record.copy() for record in self._records]
