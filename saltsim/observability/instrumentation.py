#!filepath: saltsim/observability/instrumentation.py
from __future__ import annotations

import time
from collections import OrderedDict
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass, field
from typing import Dict, Iterator

from saltsim import logs


@dataclass
class Instrumentation:
    """
    Leaf-only wall-clock timing for replay runs.

    Rules:
    1. timeline only holds leaf scopes (record=True), in completion order
    2. record=False scopes only bound wall time, no side effects
    3. a leaf timed twice keeps its latest duration
    4. nothing here logs on the hot path
    """

    enabled: bool = True
    # timeline: OrderedDict[leaf_name, elapsed_seconds]
    timeline: Dict[str, float] = field(default_factory=OrderedDict)

    @contextmanager
    def timer(self, name: str, *, record: bool = True) -> Iterator[None]:
        if not self.enabled:
            yield
            return

        started = time.perf_counter()
        try:
            yield
        finally:
            if record:
                self.timeline[name] = time.perf_counter() - started

    def generate_timeline_report(self, label: str) -> None:
        logs.info(f"[Timeline] ===== Replay timeline for {label} =====")

        total = 0.0
        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s")
            total += sec

        logs.info(f"[Timeline] Total{'':<27} {total:>8.3f}s")


class NoOpInstrumentation:
    """Used when instrumentation is disabled."""

    def timer(self, name: str, *, record: bool = True):
        return nullcontext()
