from __future__ import annotations

import csv
import json
import re
from pathlib import Path
from typing import List

from .models import Task


def load_workload(path: str | Path) -> List[Task]:
    """
    Load a workload from a JSON or CSV file into a list of Task objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[Task]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("JSON workload must be a list of task objects")

    return [_task_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Task]:
    tasks: List[Task] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            tasks.append(_task_from_mapping(row))
    return tasks


def _task_from_mapping(mapping) -> Task:
    try:
        # "pid" is accepted for workloads written for process-oriented tools.
        raw_id = mapping["id"] if "id" in mapping else mapping["pid"]
        task_id = str(raw_id).strip()
        arrival_time = int(mapping["arrival_time"])
        burst_time = int(mapping["burst_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid task entry: {mapping!r}") from exc

    if not task_id:
        raise ValueError(f"Task entry has an empty id: {mapping!r}")

    return Task(task_id, arrival_time=arrival_time, burst_time=burst_time)


def parse_task_spec(spec: str) -> Task:
    """
    Parse an inline descriptor such as ``P1:0:5`` or ``P1,0,5``
    (id, arrival time, burst time).
    """
    parts = [p.strip() for p in re.split(r"[:,]", spec)]
    if len(parts) != 3:
        raise ValueError(f"Task must look like ID:ARRIVAL:BURST, got {spec!r}")

    task_id, arrival, burst = parts
    return _task_from_mapping({"id": task_id, "arrival_time": arrival, "burst_time": burst})
