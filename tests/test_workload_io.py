from pathlib import Path

import pytest

from taskscheduler.workload_io import load_workload, parse_task_spec
from taskscheduler.models import Task


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"id":"A","arrival_time":0,"burst_time":3},'
                 '{"id":"B","arrival_time":1,"burst_time":2}]')
    tasks = load_workload(p)
    assert isinstance(tasks[0], Task)
    assert tasks[1].arrival_time == 1
    assert tasks[1].remaining_time == 2
    assert tasks[1].completion_time is None


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\nA,0,3\nB,1,2\n")
    tasks = load_workload(p)
    assert [t.id for t in tasks] == ["A", "B"]
    assert tasks[0].burst_time == 3


def test_rejects_non_numeric_time(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("id,arrival_time,burst_time\nA,soon,3\n")
    with pytest.raises(ValueError, match="Invalid task entry"):
        load_workload(p)


def test_rejects_empty_id(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"id":"  ","arrival_time":0,"burst_time":3}]')
    with pytest.raises(ValueError, match="empty id"):
        load_workload(p)


def test_rejects_unknown_format(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("A 0 3")
    with pytest.raises(ValueError, match="Unsupported"):
        load_workload(p)


def test_rejects_non_list_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('{"id":"A","arrival_time":0,"burst_time":3}')
    with pytest.raises(ValueError):
        load_workload(p)


def test_parse_task_spec():
    t = parse_task_spec("P1:2:5")
    assert (t.id, t.arrival_time, t.burst_time) == ("P1", 2, 5)
    assert parse_task_spec("P2, 0, 4").burst_time == 4
    with pytest.raises(ValueError):
        parse_task_spec("P1:2")
