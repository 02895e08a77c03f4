"""
Task scheduler package.

Simulates First-Come First-Served and Round Robin CPU scheduling over a set
of tasks, producing per-task metrics, aggregate statistics and a timeline of
execution blocks for Gantt charts. A small command-line interface renders
the results in the terminal.
"""

from .errors import EmptyTaskSet, InvalidQuantum, InvalidTask, SchedulingError
from .models import FCFS, IDLE, Aggregates, ExecutionBlock, RoundRobin, ScheduleResult, Task
from .scheduler import schedule

__all__ = [
    "Aggregates",
    "EmptyTaskSet",
    "ExecutionBlock",
    "FCFS",
    "IDLE",
    "InvalidQuantum",
    "InvalidTask",
    "RoundRobin",
    "ScheduleResult",
    "SchedulingError",
    "Task",
    "schedule",
]
