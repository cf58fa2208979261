from __future__ import annotations


class SchedulingError(ValueError):
    """Base class for invalid input to the scheduling policies."""


class EmptyBatchError(SchedulingError):
    def __init__(self, message: str = "Cannot schedule an empty batch of jobs") -> None:
        super().__init__(message)


class InvalidQuantumError(SchedulingError):
    def __init__(self, quantum) -> None:
        super().__init__(f"Round Robin requires a positive integer quantum, got {quantum!r}")
        self.quantum = quantum


class InvalidJobDurationError(SchedulingError):
    def __init__(self, requested_time) -> None:
        super().__init__(f"Job requested time must be a positive integer, got {requested_time!r}")
        self.requested_time = requested_time
