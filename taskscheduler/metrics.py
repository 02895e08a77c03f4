from __future__ import annotations

from typing import List, Optional

from .errors import EmptyTaskSet, SchedulingError
from .models import Aggregates, Task, Timeline


def compute_aggregates(tasks: List[Task], timeline: Optional[Timeline] = None) -> Aggregates:
    """
    Compute averages, throughput and CPU utilization for finished tasks.

    Busy time is taken from the timeline when one is given, otherwise from
    the burst times (the two agree for any correct schedule).
    """
    if not tasks:
        raise EmptyTaskSet()

    unfinished = [t.id for t in tasks if not t.finished]
    if unfinished:
        raise SchedulingError(f"Tasks have not been scheduled: {', '.join(unfinished)}")

    n = len(tasks)
    makespan = max(t.completion_time for t in tasks)
    if timeline is not None:
        cpu_busy_time = sum(block.duration for block in timeline)
    else:
        cpu_busy_time = sum(t.burst_time for t in tasks)

    return Aggregates(
        avg_turnaround=sum(t.turnaround_time for t in tasks) / n,
        avg_waiting=sum(t.waiting_time for t in tasks) / n,
        throughput=n / makespan,
        makespan=makespan,
        cpu_busy_time=cpu_busy_time,
        cpu_utilization=cpu_busy_time / makespan,
    )
