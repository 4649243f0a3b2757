"""
Timing of evaluation stages
"""

import time
import logging
from typing import Dict, List, Optional
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class StageMetrics:
    """Timing for a single stage"""
    start_time: float
    end_time: float = 0
    duration: float = 0


def format_duration(duration: float) -> str:
    """Format a duration in seconds with a readable unit"""
    if duration < 0.001:
        return f"{duration*1_000_000:.2f}μs"
    elif duration < 1.0:
        return f"{duration*1_000:.2f}ms"
    return f"{duration:.3f}s"


class PerformanceTracker:
    """Records how long each stage of an evaluation takes"""

    def __init__(self, name: str = ""):
        """Initialize tracker

        Args:
            name: Optional name, used as a suffix of the logger name
        """
        self.name = name
        self.stages: Dict[str, StageMetrics] = {}
        self.current_stage: Optional[str] = None
        self.logger = logging.getLogger(f"performance_tracker.{name}" if name else "performance_tracker")

    @contextmanager
    def track_stage(self, stage_name: str):
        """Context manager timing the enclosed block as stage_name"""
        self.current_stage = stage_name
        self.stages[stage_name] = StageMetrics(start_time=time.perf_counter())
        try:
            yield
        finally:
            metrics = self.stages[stage_name]
            metrics.end_time = time.perf_counter()
            metrics.duration = metrics.end_time - metrics.start_time
            self.logger.debug(f"Completed stage: {stage_name} - Duration: {format_duration(metrics.duration)}")
            if self.current_stage == stage_name:
                self.current_stage = None

    def get_stage_duration(self, stage_name: str) -> float:
        """Duration of a stage in seconds, 0 if it was never tracked"""
        if stage_name in self.stages:
            return self.stages[stage_name].duration
        return 0

    def get_all_metrics(self) -> Dict[str, float]:
        return {name: metrics.duration for name, metrics in self.stages.items()}

    def reset(self):
        self.stages.clear()
        self.current_stage = None

    def summary_lines(self) -> List[str]:
        """Rows of stage name, duration and share of the total, slowest first"""
        total = sum(self.get_all_metrics().values())
        ranked = sorted(self.get_all_metrics().items(), key=lambda item: item[1], reverse=True)

        lines = []
        for stage_name, duration in ranked + [("Total", total)]:
            share = duration / total * 100 if total > 0 else 0
            lines.append(f"{stage_name:<30}{format_duration(duration):>12}{share:>7.1f}%")
        return lines

    def log_summary(self):
        if not self.stages:
            self.logger.info("No performance metrics recorded")
            return

        title = f"Stage timings ({self.name})" if self.name else "Stage timings"
        self.logger.info("\n".join([title] + self.summary_lines()))
