from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List

from .errors import InvalidJobDurationError
from .models import JobRecord


def load_workload(path: str | Path) -> List[JobRecord]:
    """
    Load a batch from a JSON or CSV file into a list of JobRecord objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[JobRecord]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("JSON workload must be a list of job sizes or job objects")

    return [_job_from_entry(entry, i) for i, entry in enumerate(raw, start=1)]


def _load_csv(path: Path) -> List[JobRecord]:
    jobs: List[JobRecord] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for i, row in enumerate(reader, start=1):
            jobs.append(_job_from_entry(row, i))
    return jobs


def _job_from_entry(entry, position: int) -> JobRecord:
    # A bare number is shorthand for {"requested_time": n}.
    mapping = entry if isinstance(entry, dict) else {"requested_time": entry}

    try:
        raw = mapping["requested_time"]
    except KeyError as exc:
        raise ValueError(f"Invalid job entry: {entry!r}") from exc

    # JSON true and 2.7 are not job sizes; 2.0 is.
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise InvalidJobDurationError(raw)

    try:
        requested_time = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid job entry: {entry!r}") from exc

    job_id = mapping.get("job_id")
    if job_id in (None, ""):
        job_id = f"J{position}"

    return JobRecord(requested_time, job_id=str(job_id))
