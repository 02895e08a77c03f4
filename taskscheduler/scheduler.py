from __future__ import annotations

import logging
from typing import List

from .algorithms import run_fcfs, run_rr
from .errors import EmptyTaskSet, InvalidQuantum, InvalidTask
from .metrics import compute_aggregates
from .models import FCFS, Policy, RoundRobin, ScheduleResult, Task, is_int

logger = logging.getLogger(__name__)


def validate(tasks: List[Task], policy: Policy) -> None:
    """
    Reject input that cannot be scheduled. Nothing is mutated.
    """
    if not tasks:
        raise EmptyTaskSet()

    for t in tasks:
        if not is_int(t.arrival_time) or t.arrival_time < 0:
            raise InvalidTask(t.id, f"arrival time must be an integer >= 0, got {t.arrival_time!r}")
        if not is_int(t.burst_time) or t.burst_time <= 0:
            raise InvalidTask(t.id, f"burst time must be an integer > 0, got {t.burst_time!r}")

    if isinstance(policy, RoundRobin):
        if not is_int(policy.quantum) or policy.quantum < 1:
            raise InvalidQuantum(policy.quantum)
    elif not isinstance(policy, FCFS):
        raise TypeError(f"Unsupported policy: {policy!r}")


def reset_tasks(tasks: List[Task]) -> None:
    for t in tasks:
        t.reset()


def schedule(tasks: List[Task], policy: Policy) -> ScheduleResult:
    """
    Run ``policy`` over ``tasks`` and return the annotated tasks, the
    timeline and the aggregate metrics.

    The tasks are validated, then reset to their initial state, so the same
    list can be scheduled repeatedly under different policies.
    """
    validate(tasks, policy)
    reset_tasks(tasks)

    if isinstance(policy, RoundRobin):
        timeline = run_rr(tasks, policy.quantum, arrivals_first=policy.arrivals_first)
    else:
        timeline = run_fcfs(tasks)

    aggregates = compute_aggregates(tasks, timeline)
    logger.info(
        "%s scheduled %d tasks: makespan=%d avg_waiting=%.2f avg_turnaround=%.2f",
        policy.name,
        len(tasks),
        aggregates.makespan,
        aggregates.avg_waiting,
        aggregates.avg_turnaround,
    )
    return ScheduleResult(policy=policy, tasks=list(tasks), timeline=timeline, aggregates=aggregates)
