from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List

from .errors import InvalidQuantum
from .models import ExecutionBlock, Task, Timeline, is_int

logger = logging.getLogger(__name__)


def _by_arrival(tasks: List[Task]) -> List[Task]:
    # sorted() is stable, so equal arrivals keep their input order.
    return sorted(tasks, key=lambda t: t.arrival_time)


def run_fcfs(tasks: List[Task]) -> Timeline:
    """
    First-Come First-Served (non-preemptive) scheduling.

    Each task runs to completion in arrival order and yields exactly one block.
    """
    time = 0
    timeline: List[ExecutionBlock] = []

    for t in _by_arrival(tasks):
        if time < t.arrival_time:
            logger.debug("CPU idle from %d to %d", time, t.arrival_time)
            time = t.arrival_time

        start = time
        time += t.burst_time
        timeline.append(ExecutionBlock(task_id=t.id, start=start, end=time))

        t.remaining_time = 0
        t.complete(time)
        logger.debug("%s ran [%d, %d) and completed", t.id, start, time)

    return tuple(timeline)


def run_rr(tasks: List[Task], quantum: int, arrivals_first: bool = True) -> Timeline:
    """
    Round Robin scheduling with a fixed time quantum.

    The ready queue is FIFO. When a slice ends, tasks that arrived up to the
    current clock are queued before the preempted task goes back to the tail,
    unless ``arrivals_first`` is False, in which case the preempted task is
    re-queued first.
    """
    if not is_int(quantum) or quantum < 1:
        raise InvalidQuantum(quantum)

    pending = _by_arrival(tasks)
    n = len(pending)
    index = 0  # next task in ``pending`` that has not been queued yet

    time = 0
    completed = 0
    timeline: List[ExecutionBlock] = []
    ready: Deque[Task] = deque()

    def enqueue_arrivals(current_time: int) -> None:
        nonlocal index
        while index < n and pending[index].arrival_time <= current_time:
            ready.append(pending[index])
            index += 1

    enqueue_arrivals(time)

    while completed < n:
        if not ready:
            # Jump to the next arrival if the CPU is idle
            next_arrival = pending[index].arrival_time
            logger.debug("CPU idle from %d to %d", time, next_arrival)
            time = next_arrival
            enqueue_arrivals(time)
            continue

        p = ready.popleft()
        run_time = min(p.remaining_time, quantum)
        start = time
        time += run_time
        p.remaining_time -= run_time
        timeline.append(ExecutionBlock(task_id=p.id, start=start, end=time))
        logger.debug("%s ran [%d, %d), %d remaining", p.id, start, time, p.remaining_time)

        if p.remaining_time > 0:
            if arrivals_first:
                enqueue_arrivals(time)
                ready.append(p)
            else:
                ready.append(p)
                enqueue_arrivals(time)
        else:
            enqueue_arrivals(time)
            p.complete(time)
            completed += 1
            logger.debug("%s completed at %d", p.id, time)

    return tuple(timeline)

