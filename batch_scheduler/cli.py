from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .algorithms import ALGORITHMS, run_algorithm, schedule_fifo, schedule_rr, schedule_sjf
from .gantt import build_rich_gantt, render_gantt
from .generator import generate_batch
from .metrics import compare_results, summarize_result
from .models import JobRecord, ScheduleResult
from .settings import settings
from .workload_io import load_workload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="batch-scheduler",
        description="Batch job scheduling simulator (FIFO, SJF, Round Robin).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=settings.LOG_LEVEL.upper(),
        help=f"Logging level (default: {settings.LOG_LEVEL}).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser(
        "demo",
        help="Generate a random batch and compare FIFO, SJF and Round Robin at several quanta.",
    )
    demo_parser.add_argument(
        "--jobs",
        "-n",
        type=int,
        default=settings.JOB_COUNT,
        help=f"Number of jobs; sizes are drawn from [1, jobs] (default: {settings.JOB_COUNT}).",
    )
    demo_parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=settings.SEED,
        help="Seed for the batch generator (default: unseeded).",
    )
    demo_parser.add_argument(
        "--quanta",
        "-q",
        type=int,
        nargs="+",
        default=list(settings.QUANTA),
        help=f"Round Robin quanta to sweep (default: {' '.join(map(str, settings.QUANTA))}).",
    )
    demo_parser.add_argument(
        "--show-jobs",
        action="store_true",
        help="Print the generated job sizes.",
    )

    run_parser = subparsers.add_parser("run", help="Run one scheduling algorithm on a workload file.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        choices=sorted(ALGORITHMS),
        help="Algorithm to use.",
    )
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    run_parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=None,
        help=f"Time quantum for round-robin (default: {settings.DEFAULT_QUANTUM}; ignored by FIFO and SJF).",
    )
    run_parser.add_argument(
        "--gantt",
        action="store_true",
        help="Draw a Gantt chart of the schedule.",
    )
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Draw the Gantt chart as plain text (for logs and non-colour terminals).",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run FIFO, SJF and Round Robin on the same workload and compare metrics.",
    )
    compare_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    compare_parser.add_argument(
        "--quanta",
        "-q",
        type=int,
        nargs="+",
        default=list(settings.QUANTA),
        help="Round Robin quanta to include.",
    )

    return parser


def _configure_logging(level: str, console: Console) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _run_policies(jobs: Sequence[JobRecord], quanta: Sequence[int]) -> List[ScheduleResult]:
    """
    FIFO and SJF once, then Round Robin for each quantum. Every call copies
    the batch, so all results describe the same jobs.
    """
    results = [schedule_fifo(jobs), schedule_sjf(jobs)]
    for q in quanta:
        results.append(schedule_rr(jobs, q))
    return results


def _comparison_table(results: Sequence[ScheduleResult], title: str) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Algorithm")
    table.add_column("Quantum", justify="right")
    table.add_column("Total time", justify="right")
    table.add_column("Avg turnaround", justify="right")
    table.add_column("Avg waiting", justify="right")

    for row in compare_results(results):
        table.add_row(
            row["algorithm"],
            "" if row["quantum"] is None else str(row["quantum"]),
            str(row["total_time"]),
            str(row["avg_turnaround"]),
            f"{row['avg_waiting']:.2f}",
        )
    return table


def _print_result(result: ScheduleResult, console: Console, show_gantt: bool = False, plain: bool = False) -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm}")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    console.print()

    if show_gantt and plain:
        console.print(render_gantt(result.timeline), markup=False, highlight=False)
        console.print()
    elif show_gantt:
        panel, time_marks = build_rich_gantt(result.timeline)
        console.print(panel)
        if time_marks:
            console.print(time_marks)
        console.print()

    job_table = Table(title="Per-job metrics (completion order)", box=box.SIMPLE_HEAVY)
    for h in ["Job", "Requested", "Turnaround", "Wait"]:
        job_table.add_column(h, justify="center" if h == "Job" else "right")

    for m in result.jobs:
        job_table.add_row(m.job_id, str(m.requested_time), str(m.turnaround_time), str(m.waiting_time))

    console.print(job_table)
    console.print()

    summary = summarize_result(result)
    sys_table = Table(title="Batch metrics", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Total processing time", str(summary["total_time"]))
    sys_table.add_row("Avg turnaround", str(summary["avg_turnaround"]))
    sys_table.add_row("Avg turnaround (exact)", f"{summary['avg_turnaround_exact']:.2f}")
    sys_table.add_row("Avg waiting", f"{summary['avg_waiting']:.2f}")
    sys_table.add_row("Throughput (jobs/time)", f"{summary['throughput']:.3f}")

    console.print(sys_table)


def _dispatch(args: argparse.Namespace, console: Console) -> int:
    if args.command == "demo":
        jobs = generate_batch(args.jobs, seed=args.seed)
        if args.show_jobs:
            console.print("[bold]Job sizes:[/bold] " + " ".join(str(j.requested_time) for j in jobs))
        results = _run_policies(jobs, args.quanta)
        console.print(_comparison_table(results, title=f"Processing {len(jobs)} random jobs"))
        return 0

    if args.command == "run":
        jobs = load_workload(Path(args.workload))
        quantum = args.quantum
        if args.algorithm == "rr" and quantum is None:
            quantum = settings.DEFAULT_QUANTUM
        result = run_algorithm(args.algorithm, jobs, quantum=quantum)
        _print_result(result, console, show_gantt=args.gantt, plain=args.plain)
        return 0

    if args.command == "compare":
        workload_path = Path(args.workload)
        jobs = load_workload(workload_path)
        results = _run_policies(jobs, args.quanta)
        console.print(_comparison_table(results, title=f"Algorithm comparison: {workload_path}"))
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()

    try:
        _configure_logging(args.log_level, console)
        return _dispatch(args, console)
    except (ValueError, OSError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"[red]Error: {exc}[/red]")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
