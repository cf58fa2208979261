from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .errors import InvalidJobDurationError


@dataclass
class JobRecord:
    """
    One job in a batch. Every job arrives at time zero, so its turnaround is
    simply the batch time at which it completes.
    """

    requested_time: int
    job_id: Optional[str] = None
    remaining_time: int = field(init=False)
    turnaround_time: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        t = self.requested_time
        if isinstance(t, bool) or not isinstance(t, int) or t <= 0:
            raise InvalidJobDurationError(t)
        self.remaining_time = t

    @property
    def is_complete(self) -> bool:
        return self.remaining_time == 0

    def run_for(self, quantum: int) -> int:
        """
        Service the job for at most `quantum` units and return the units used.
        """
        used = min(self.remaining_time, quantum)
        self.remaining_time -= used
        return used

    def copy(self) -> JobRecord:
        clone = JobRecord(self.requested_time, job_id=self.job_id)
        clone.remaining_time = self.remaining_time
        clone.turnaround_time = self.turnaround_time
        return clone


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a job in the Gantt chart.
    """

    job_id: str
    start_time: int
    end_time: int


@dataclass
class JobMetrics:
    job_id: str
    index: int  # position in the input batch
    requested_time: int
    turnaround_time: int
    waiting_time: int


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    total_time: int
    avg_turnaround: int
    jobs: List[JobMetrics] = field(default_factory=list)  # completion order
    timeline: List[ScheduledSlice] = field(default_factory=list)

    @property
    def turnarounds(self) -> List[int]:
        """Per-job turnaround times in input order."""
        return [m.turnaround_time for m in sorted(self.jobs, key=lambda m: m.index)]

    @property
    def completion_order(self) -> List[str]:
        return [m.job_id for m in self.jobs]

    def as_tuple(self) -> Tuple[int, int]:
        return self.total_time, self.avg_turnaround


def make_batch(times: Iterable[int]) -> List[JobRecord]:
    """
    Build a labelled batch (J1, J2, ...) from requested processing times.
    """
    return [JobRecord(t, job_id=f"J{i}") for i, t in enumerate(times, start=1)]
