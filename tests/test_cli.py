import json
from pathlib import Path

import pytest

from taskscheduler.cli import build_parser, main

TASKS = ["-t", "P1:0:5", "-t", "P2:1:3", "-t", "P3:2:8"]


def test_run_fcfs_plain(capsys):
    assert main(["run", "-p", "fcfs", "--plain", *TASKS]) == 0
    out = capsys.readouterr().out
    assert "Gantt Chart:" in out
    assert "8.67" in out
    assert "3.33" in out
    assert "0.1875" in out


def test_run_rr_from_workload(tmp_path: Path, capsys):
    p = tmp_path / "w.json"
    p.write_text(json.dumps([
        {"id": "P1", "arrival_time": 0, "burst_time": 5},
        {"id": "P2", "arrival_time": 1, "burst_time": 3},
        {"id": "P3", "arrival_time": 2, "burst_time": 8},
    ]))
    assert main(["run", "-p", "rr", "-q", "2", "-w", str(p)]) == 0
    out = capsys.readouterr().out
    assert "Round Robin" in out
    assert "Quantum:" in out


def test_run_with_step_replay(capsys):
    assert main(["run", "-p", "fcfs", "--step", "--step-delay", "0", "-t", "A:1:2"]) == 0
    out = capsys.readouterr().out
    assert "t= 0: idle" in out
    assert "t= 2: A" in out


def test_compare(capsys):
    assert main(["compare", "-q", "2", *TASKS]) == 0
    out = capsys.readouterr().out
    assert "FCFS" in out
    assert "Round Robin" in out


def test_invalid_quantum_reports_error(capsys):
    assert main(["run", "-p", "rr", "-q", "0", "-t", "P1:0:5"]) == 1
    assert "Error" in capsys.readouterr().out


def test_invalid_task_reports_error(capsys):
    assert main(["run", "-p", "fcfs", "-t", "P1:x:5"]) == 1
    assert "Invalid task entry" in capsys.readouterr().out


def test_missing_workload_file(tmp_path: Path, capsys):
    assert main(["run", "-p", "fcfs", "-w", str(tmp_path / "nope.json")]) == 1


def test_parser_requires_task_source():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["run", "-p", "fcfs"])


def test_parser_rejects_unknown_policy():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["run", "-p", "sjf", "-t", "A:0:1"])
