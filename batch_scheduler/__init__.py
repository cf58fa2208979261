"""
Batch scheduler package.

Simulates FIFO, round-robin and shortest-job-first scheduling over a fixed
batch of jobs and compares total processing time and average turnaround.
"""

from .algorithms import ALGORITHMS, run_algorithm, schedule_fifo, schedule_rr, schedule_sjf
from .errors import EmptyBatchError, InvalidJobDurationError, InvalidQuantumError, SchedulingError
from .models import JobRecord, ScheduleResult, make_batch

__all__ = [
    "ALGORITHMS",
    "EmptyBatchError",
    "InvalidJobDurationError",
    "InvalidQuantumError",
    "JobRecord",
    "ScheduleResult",
    "SchedulingError",
    "cli",
    "make_batch",
    "run_algorithm",
    "schedule_fifo",
    "schedule_rr",
    "schedule_sjf",
]
