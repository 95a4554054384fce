from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

"""Aggregated result of one generation run (feeds the SUMMARY line)."""


@dataclass(frozen=True)
class GenerationResult:
    total_rows: int  # rows counted in the first pass
    generated: int  # documents written (counter - 1)
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_rows_per_sec: float
    output_files: list[Path] = field(default_factory=list)
