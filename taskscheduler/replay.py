from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .models import IDLE, Timeline


@dataclass(frozen=True)
class Frame:
    """
    State of the CPU during one time unit ``[time, time + 1)``.

    ``progress`` counts the units of the current block elapsed so far,
    including this one; it is 0 while the CPU is idle.
    """

    time: int
    task_id: Optional[str]
    progress: int


class ReplayCursor:
    """
    Step through a finished timeline one time unit at a time.

    The cursor only reads the timeline; callers drive it at whatever pace
    they like and may drop it at any point.
    """

    def __init__(self, timeline: Timeline):
        self._blocks = tuple(sorted(timeline, key=lambda b: (b.start, b.end)))
        self.makespan = self._blocks[-1].end if self._blocks else 0
        self.time = 0
        self._index = 0

    @property
    def done(self) -> bool:
        return self.time >= self.makespan

    def reset(self) -> None:
        self.time = 0
        self._index = 0

    def running_at(self, t: int) -> Optional[str]:
        for block in self._blocks:
            if block.start <= t < block.end:
                return block.task_id
            if block.start > t:
                break
        return IDLE

    def step(self) -> Frame:
        if self.done:
            raise IndexError("Replay has reached the end of the timeline")

        while self._index < len(self._blocks) and self._blocks[self._index].end <= self.time:
            self._index += 1

        block = self._blocks[self._index]
        if block.start <= self.time:
            frame = Frame(time=self.time, task_id=block.task_id, progress=self.time - block.start + 1)
        else:
            frame = Frame(time=self.time, task_id=IDLE, progress=0)

        self.time += 1
        return frame

    def __iter__(self) -> Iterator[Frame]:
        while not self.done:
            yield self.step()
