"""
Configuration defaults for the command-line driver, read with
pydantic-settings.

Every field can be overridden with a BATCH_SCHEDULER_-prefixed environment
variable (e.g. BATCH_SCHEDULER_JOB_COUNT=500) or a .env file in the working
directory. List values are given as JSON: BATCH_SCHEDULER_QUANTA='[8, 4, 2]'.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Batch ───────────────────────────────────────────────────
    JOB_COUNT: int = 100              # jobs per generated batch; sizes drawn from [1, JOB_COUNT]
    SEED: Optional[int] = None        # None = unseeded batch

    # ── Round Robin ─────────────────────────────────────────────
    QUANTA: List[int] = [20, 15, 10, 5]  # quanta swept by `demo` and `compare`
    DEFAULT_QUANTUM: int = 2             # used by `run --algorithm rr` without --quantum

    # ── App ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "WARNING"

    model_config = {
        "env_prefix": "BATCH_SCHEDULER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
