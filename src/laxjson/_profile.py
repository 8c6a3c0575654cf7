"""
Hot path profiling for the rewriter.

Switched on by LAXJSON_PROFILE at import time. Every profiled call adds its
duration to the totals of its hot path; rewrite calls also add the byte
counts and edit counters of the run, so the totals show both where time goes
and how much lenient syntax the documents carried.
"""

import os
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from laxjson._rewriter import Rewriter
    from laxjson._rewriter import RewriteStats

PROFILE_HOT_PATHS = __debug__ and "LAXJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings and edit counters for one hot path."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    bytes_in: int = 0
    bytes_out: int = 0
    comments_removed: int = 0
    trailing_commas_removed: int = 0
    bare_keys_quoted: int = 0

    def record_call(
        self, duration_ns: int, stats: "RewriteStats | None" = None
    ) -> None:
        """Adds one call, with the edit summary of its run when known."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        if stats is None:
            return

        self.bytes_in += stats.input_size
        self.bytes_out += stats.output_size
        self.comments_removed += stats.comments_removed
        self.trailing_commas_removed += stats.trailing_commas_removed
        self.bare_keys_quoted += stats.bare_keys_quoted

    @property
    def edits(self) -> int:
        return (
            self.comments_removed
            + self.trailing_commas_removed
            + self.bare_keys_quoted
        )

    def bytes_per_second(self) -> float:
        """Input throughput over all recorded calls."""
        if not self.total_time_ns:
            return 0.0
        return self.bytes_in * 1_000_000_000 / self.total_time_ns


_hot_path_stats: dict[str, HotPathStats] = {}


class RecordingProfile:
    """
    Times one call and files it under its hot path name.

    The caller hands over the finished rewriter through record() so the
    edit counters are only computed while profiling.
    """

    def __init__(self, func_name: str) -> None:
        self.func_name = func_name
        self.start_time = 0
        self.rewriter: "Rewriter | None" = None

    def record(self, rewriter: "Rewriter") -> None:
        self.rewriter = rewriter

    def __enter__(self) -> "RecordingProfile":
        self.start_time = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        duration = time.perf_counter_ns() - self.start_time
        stats = self.rewriter.stats() if self.rewriter else None
        entry = _hot_path_stats.setdefault(
            self.func_name, HotPathStats(self.func_name)
        )
        entry.record_call(duration, stats)


class NullProfile:
    """Stand-in for RecordingProfile when profiling is off."""

    def __init__(self, func_name: str) -> None:
        pass

    def record(self, rewriter: "Rewriter") -> None:
        pass

    def __enter__(self) -> "NullProfile":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        pass


ProfileContext = RecordingProfile if PROFILE_HOT_PATHS else NullProfile


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns current profiling statistics."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    """Clears profiling statistics."""
    _hot_path_stats.clear()
