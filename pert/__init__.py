"""
PERT Scheduler
==============

PERT (Program Evaluation and Review Technique) analysis of task precedence
graphs: earliest and latest start/finish times, slack, critical tasks and
project completion time.

Available modules:
- domain.graph: ProjectGraph, the precedence graph adapter
- domain.task: per-task schedule records and errors
- services.analysis: the PERT analysis and the analyze() factory
- utils.graph: topological sort, forward and backward passes
- utils.reader: reader for the plain-text project format
- visualization: network diagram and Gantt chart
"""

from pert.domain.graph import Edge, GraphError, ProjectGraph
from pert.domain.task import PERTError, TaskError, TaskTimes
from pert.services.analysis import (
    PERT,
    AnalysisState,
    AnalysisStateError,
    NotDAG,
    analyze,
)
from pert.utils.graph import CycleError, TraversalDepthError
from pert.utils.reader import InputFormatError, read_project, read_project_file

__all__ = [
    "Edge",
    "GraphError",
    "ProjectGraph",
    "PERTError",
    "TaskError",
    "TaskTimes",
    "PERT",
    "AnalysisState",
    "AnalysisStateError",
    "NotDAG",
    "analyze",
    "CycleError",
    "TraversalDepthError",
    "InputFormatError",
    "read_project",
    "read_project_file",
]
