from __future__ import annotations

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice


def _merge_slices(slices: List[ScheduledSlice]) -> List[ScheduledSlice]:
    """
    Sort slices by time and join back-to-back slices of the same job, which
    round-robin produces once a single job is left in the queue.
    """
    merged: List[ScheduledSlice] = []
    for sl in sorted(slices, key=lambda s: (s.start_time, s.end_time)):
        last = merged[-1] if merged else None
        if last is not None and last.job_id == sl.job_id and last.end_time == sl.start_time:
            merged[-1] = ScheduledSlice(job_id=last.job_id, start_time=last.start_time, end_time=sl.end_time)
        else:
            merged.append(sl)
    return merged


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart renderer.
    """
    if not slices:
        return "(no execution)"

    line = "|"
    labels = ""
    time_marks = "0"

    for sl in _merge_slices(slices):
        width = max(1, sl.end_time - sl.start_time)
        line += "=" * width
        labels += sl.job_id[:width].ljust(width)
        time_marks += f"{sl.end_time:>3}"

    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels,
            time_marks,
        ]
    )


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not slices:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    job_to_color: Dict[str, str] = {}

    def job_color(job_id: str) -> str:
        if job_id not in job_to_color:
            idx = len(job_to_color) % len(colors)
            job_to_color[job_id] = colors[idx]
        return job_to_color[job_id]

    timeline = Text()
    labels = Text()
    time_marks = "0"

    for sl in _merge_slices(slices):
        width = max(1, sl.end_time - sl.start_time)

        timeline.append(" " * width, style=f"on {job_color(sl.job_id)}")
        labels.append(sl.job_id[:width].ljust(width), style="bold")
        time_marks += f"{sl.end_time:>3}"

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, time_marks
