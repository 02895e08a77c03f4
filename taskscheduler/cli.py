from __future__ import annotations

import argparse
import logging
import time
from typing import List

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .errors import SchedulingError
from .gantt import build_rich_gantt, render_gantt
from .models import FCFS, IDLE, POLICY_NAMES, RoundRobin, ScheduleResult, Task, policy_from_name
from .replay import ReplayCursor
from .scheduler import schedule
from .workload_io import load_workload, parse_task_spec

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2
DEFAULT_WIDTH = 60
DEFAULT_STEP_DELAY = 0.3


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--workload",
        "-w",
        help="Path to JSON or CSV workload file.",
    )
    source.add_argument(
        "--task",
        "-t",
        action="append",
        metavar="ID:ARRIVAL:BURST",
        help="Inline task descriptor; repeat for several tasks.",
    )
    parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum for round-robin (ignored by FCFS, default: {DEFAULT_QUANTUM}).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-scheduler",
        description="CPU scheduling simulator (FCFS, Round Robin).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every dispatch decision.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Schedule a set of tasks with one policy.")
    run_parser.add_argument(
        "--policy",
        "-p",
        required=True,
        choices=POLICY_NAMES,
        help="Policy to use (fcfs, rr).",
    )
    _add_input_arguments(run_parser)
    run_parser.add_argument(
        "--step",
        action="store_true",
        help="Replay the schedule one time unit at a time in the terminal.",
    )
    run_parser.add_argument(
        "--step-delay",
        type=float,
        default=DEFAULT_STEP_DELAY,
        help=f"Seconds to wait between steps when --step is used (default: {DEFAULT_STEP_DELAY}).",
    )
    run_parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Gantt chart width in columns (default: {DEFAULT_WIDTH}).",
    )
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print a plain-text Gantt chart instead of a colored one.",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run FCFS and Round Robin on the same tasks and compare average metrics.",
    )
    _add_input_arguments(compare_parser)

    return parser


def _load_tasks(args: argparse.Namespace) -> List[Task]:
    if args.workload:
        return load_workload(args.workload)
    return [parse_task_spec(spec) for spec in args.task]


def _print_result(result: ScheduleResult, console: Console, width: int, plain: bool) -> None:
    console.print(f"[bold]Policy:[/bold] {result.policy.name}")
    if isinstance(result.policy, RoundRobin):
        console.print(f"[bold]Quantum:[/bold] {result.policy.quantum}")

    console.print()

    if plain:
        console.print(render_gantt(result.timeline, width=width), markup=False, highlight=False)
    else:
        panel, time_marks = build_rich_gantt(result.timeline, width=width)
        console.print(panel)
        if time_marks:
            console.print(time_marks, highlight=False)

    console.print()

    headers = ["ID", "Arrive", "Burst", "Complete", "Wait", "Turnaround"]

    task_table = Table(title="Per-task metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        task_table.add_column(h, justify="center" if h == "ID" else "right")

    for t in result.tasks:
        task_table.add_row(
            t.id,
            str(t.arrival_time),
            str(t.burst_time),
            str(t.completion_time),
            str(t.waiting_time),
            str(t.turnaround_time),
        )

    console.print(task_table)
    console.print()

    agg = result.aggregates
    sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Avg turnaround", f"{agg.avg_turnaround:.2f}")
    sys_table.add_row("Avg waiting", f"{agg.avg_waiting:.2f}")
    sys_table.add_row("Throughput (tasks/time)", f"{agg.throughput:.4f}")
    sys_table.add_row("Makespan", str(agg.makespan))
    sys_table.add_row("CPU utilization", f"{agg.cpu_utilization * 100:.1f}%")

    console.print(sys_table)


def _animate_result(result: ScheduleResult, console: Console, delay: float) -> None:
    """
    Simple time-stepped textual replay of the computed schedule.
    """
    cursor = ReplayCursor(result.timeline)
    console.print(f"[bold]Simulating {result.policy.name}[/bold] (duration {cursor.makespan} time units)")
    console.print("[dim]Press Ctrl+C to skip animation.[/dim]")

    for frame in cursor:
        if frame.task_id is IDLE:
            console.print(f"t={frame.time:2d}: [dim]idle[/dim]")
        else:
            bar = "█" * frame.progress
            console.print(f"t={frame.time:2d}: {frame.task_id} [green]{bar}[/green]")
        time.sleep(delay)


def _run_compare(tasks: List[Task], quantum: int, console: Console) -> None:
    summary_table = Table(title="Policy comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Policy")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Throughput", justify="right")
    summary_table.add_column("Blocks", justify="right")

    for policy in (FCFS(), RoundRobin(quantum=quantum)):
        result = schedule(tasks, policy)
        agg = result.aggregates
        summary_table.add_row(
            policy.name,
            str(policy.quantum) if isinstance(policy, RoundRobin) else "",
            f"{agg.avg_waiting:.2f}",
            f"{agg.avg_turnaround:.2f}",
            f"{agg.throughput:.4f}",
            str(len(result.timeline)),
        )

    console.print(summary_table)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    console = Console()

    try:
        tasks = _load_tasks(args)

        if args.command == "run":
            policy = policy_from_name(args.policy, quantum=args.quantum)
            result = schedule(tasks, policy)
            if args.step:
                try:
                    _animate_result(result, console, delay=args.step_delay)
                except KeyboardInterrupt:
                    console.print("[yellow]Animation skipped.[/yellow]")
            _print_result(result, console, width=args.width, plain=args.plain)
            return 0

        if args.command == "compare":
            _run_compare(tasks, args.quantum, console)
            return 0
    except (SchedulingError, ValueError, OSError) as exc:
        logger.debug("Run failed", exc_info=True)
        console.print(Text(f"Error: {exc}", style="red"))
        return 1

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
