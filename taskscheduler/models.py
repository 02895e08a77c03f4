from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

# Marker used by replay and charts for instants where no task holds the CPU.
IDLE = None


@dataclass
class Task:
    """
    One schedulable unit. Result fields stay ``None`` until the task's
    remaining time reaches zero.
    """

    id: str
    arrival_time: int
    burst_time: int
    remaining_time: int = field(init=False)
    completion_time: Optional[int] = field(default=None, init=False)
    turnaround_time: Optional[int] = field(default=None, init=False)
    waiting_time: Optional[int] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.remaining_time = self.burst_time

    def reset(self) -> None:
        self.remaining_time = self.burst_time
        self.completion_time = None
        self.turnaround_time = None
        self.waiting_time = None

    def complete(self, clock: int) -> None:
        self.completion_time = clock
        self.turnaround_time = clock - self.arrival_time
        self.waiting_time = self.turnaround_time - self.burst_time

    @property
    def finished(self) -> bool:
        return self.completion_time is not None


@dataclass(frozen=True)
class ExecutionBlock:
    """
    One contiguous, uninterrupted CPU allocation in the Gantt chart.
    """

    task_id: str
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


Timeline = Tuple[ExecutionBlock, ...]


@dataclass(frozen=True)
class Aggregates:
    avg_turnaround: float
    avg_waiting: float
    throughput: float
    makespan: int
    cpu_busy_time: int
    cpu_utilization: float


@dataclass(frozen=True)
class FCFS:
    @property
    def name(self) -> str:
        return "FCFS"


@dataclass(frozen=True)
class RoundRobin:
    """
    Round Robin with a fixed quantum.

    ``arrivals_first`` picks how a task that arrives exactly when a slice ends
    is ordered against the task that was just preempted: True queues the
    arrival ahead of it, False re-queues the preempted task first.
    """

    quantum: int
    arrivals_first: bool = True

    @property
    def name(self) -> str:
        return "Round Robin"


Policy = Union[FCFS, RoundRobin]

POLICY_NAMES = ("fcfs", "rr")


def is_int(value) -> bool:
    # bool is an int subclass but never a valid time or quantum.
    return isinstance(value, int) and not isinstance(value, bool)


def policy_from_name(name: str, quantum: Optional[int] = None) -> Policy:
    """
    Map a command-line policy name to a Policy value.
    """
    key = name.lower()
    if key == "fcfs":
        return FCFS()
    if key == "rr":
        if quantum is None:
            raise ValueError("Round Robin requires a quantum (use --quantum)")
        return RoundRobin(quantum=quantum)
    raise ValueError(f"Unknown policy '{name}' (use fcfs or rr)")


@dataclass
class ScheduleResult:
    policy: Policy
    tasks: List[Task] = field(default_factory=list)
    timeline: Timeline = ()
    aggregates: Optional[Aggregates] = None
