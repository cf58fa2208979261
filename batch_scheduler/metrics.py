from __future__ import annotations

from typing import Dict, Iterable, List

from .errors import EmptyBatchError
from .models import ScheduleResult


def average_turnaround(total: int, count: int) -> int:
    """
    Average turnaround with truncating integer division, matching the
    reported figures exactly.
    """
    if count <= 0:
        raise EmptyBatchError()
    return total // count


def summarize_result(result: ScheduleResult) -> Dict[str, float]:
    """
    Return the headline metrics plus exact averages for quick comparison.
    """
    n = len(result.jobs)
    if n == 0:
        raise EmptyBatchError()

    return {
        "total_time": result.total_time,
        "avg_turnaround": result.avg_turnaround,
        "avg_turnaround_exact": sum(m.turnaround_time for m in result.jobs) / n,
        "avg_waiting": sum(m.waiting_time for m in result.jobs) / n,
        "throughput": n / result.total_time if result.total_time > 0 else 0.0,
    }


def compare_results(results: Iterable[ScheduleResult]) -> List[dict]:
    rows = []
    for result in results:
        row = {"algorithm": result.algorithm, "quantum": result.quantum}
        row.update(summarize_result(result))
        rows.append(row)
    return rows
