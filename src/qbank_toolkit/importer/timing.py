"""
Module: importer.timing

Purpose:
    Phase timing for the import pipeline (decode, extract, normalise) so
    slow workbooks and documents can be spotted in the logs.

Key Classes:
    - TimingLog: Collects phase durations for one import

Key Functions:
    - timed_phase: Context manager for timing code blocks

Used By:
    - importer.pipeline: Main import orchestrator
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator


@dataclass
class TimingLog:
    """
    Timing metrics for one import.

    A phase timed twice (e.g. one parse per sheet) accumulates.

    Example:
        >>> log = TimingLog()
        >>> log.log_phase("decode", 0.012)
        >>> log.total
        0.012
    """
    phases: Dict[str, float] = field(default_factory=dict)

    def log_phase(self, phase: str, duration: float) -> None:
        """Add ``duration`` seconds to ``phase``."""
        self.phases[phase] = self.phases.get(phase, 0.0) + duration

    @property
    def total(self) -> float:
        return sum(self.phases.values())

    def summary(self) -> str:
        """Generate a one-line timing summary."""
        parts = [f"{phase}={duration:.3f}s" for phase, duration in self.phases.items()]
        return f"total={self.total:.3f}s " + " ".join(parts) if parts else "total=0.000s"

    def to_dict(self) -> Dict[str, float]:
        return dict(self.phases)


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """
    Context manager for timing a pipeline phase.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "decode"):
        ...     sheets = load_workbook_bytes(data)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        log.log_phase(phase, time.perf_counter() - start)
