from __future__ import annotations


class SchedulingError(ValueError):
    """Base class for rejected scheduling input."""


class EmptyTaskSet(SchedulingError):
    def __init__(self) -> None:
        super().__init__("Cannot schedule an empty task set")


class InvalidQuantum(SchedulingError):
    def __init__(self, quantum) -> None:
        super().__init__(f"Round Robin requires a positive integer quantum, got {quantum!r}")
        self.quantum = quantum


class InvalidTask(SchedulingError):
    def __init__(self, task_id, reason: str) -> None:
        super().__init__(f"Invalid task {task_id!r}: {reason}")
        self.task_id = task_id
        self.reason = reason
