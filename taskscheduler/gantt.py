from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import IDLE, Timeline


@dataclass(frozen=True)
class Segment:
    """
    A block or idle gap mapped onto character columns.
    """

    task_id: Optional[str]
    start: int
    end: int
    column: int
    width: int


def scale_blocks(timeline: Timeline, width: Optional[int] = None) -> List[Segment]:
    """
    Lay out blocks and idle gaps left to right, ``width / makespan`` columns
    per time unit (one column per unit when ``width`` is None). Every segment
    gets at least one column.
    """
    if not timeline:
        return []

    blocks = sorted(timeline, key=lambda b: (b.start, b.end))
    makespan = blocks[-1].end
    unit = 1.0 if width is None else width / makespan

    segments: List[Segment] = []
    column = 0
    last_time = 0

    def add(task_id: Optional[str], start: int, end: int) -> None:
        nonlocal column
        cols = max(1, int(end * unit) - int(start * unit))
        segments.append(Segment(task_id=task_id, start=start, end=end, column=column, width=cols))
        column += cols

    for block in blocks:
        if block.start > last_time:
            add(IDLE, last_time, block.start)
        add(block.task_id, block.start, block.end)
        last_time = block.end

    return segments


def _time_marks(segments: List[Segment]) -> str:
    total = segments[-1].column + segments[-1].width
    marks = [" "] * (total + 6)
    next_free = 0

    points = [(s.column, s.start) for s in segments]
    points.append((total + 1, segments[-1].end))

    for col, t in points:
        label = str(t)
        # Skip marks that would run into the previous one.
        if col < next_free:
            continue
        marks[col : col + len(label)] = label
        next_free = col + len(label) + 1

    return "".join(marks).rstrip()


def render_gantt(timeline: Timeline, width: Optional[int] = None) -> str:
    """
    Plain-text Gantt chart: bar, task labels and time marks at every
    transition. Idle gaps are drawn with dots.
    """
    segments = scale_blocks(timeline, width)
    if not segments:
        return "(no execution)"

    line = "|"
    labels = " "
    for seg in segments:
        if seg.task_id is IDLE:
            line += "." * seg.width
            labels += " " * seg.width
        else:
            line += "=" * seg.width
            labels += seg.task_id[: seg.width].ljust(seg.width)
    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels.rstrip(),
            _time_marks(segments),
        ]
    )


def build_rich_gantt(timeline: Timeline, width: Optional[int] = None) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    segments = scale_blocks(timeline, width)
    if not segments:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    id_to_color: Dict[str, str] = {}

    def task_color(task_id: str) -> str:
        if task_id not in id_to_color:
            idx = len(id_to_color) % len(colors)
            id_to_color[task_id] = colors[idx]
        return id_to_color[task_id]

    bar = Text()
    labels = Text()

    for seg in segments:
        if seg.task_id is IDLE:
            bar.append("·" * seg.width, style="dim")
            labels.append(" " * seg.width)
            continue

        bar.append(" " * seg.width, style=f"on {task_color(seg.task_id)}")
        labels.append(seg.task_id[: seg.width].ljust(seg.width), style="bold")

    table = Table.grid(padding=(0, 0))
    table.add_row(bar)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, _time_marks(segments)
