"""
Solution Context Module - Shared context for strategy execution.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .problem import Problem


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing the problem and progress
    reporting.

    Attributes:
        problem: Problem to solve
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    problem: 'Problem'
    start_time: float = field(default_factory=time.perf_counter)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.perf_counter() - self.start_time
