"""结果管理：收集探测结果并生成扫描汇总"""
import time
from typing import Iterable, Optional

from ..models import ProbeOutcome, ProbeResult, ScanSummary


class ResultManager:
    def __init__(self):
        self._results = []
        self._started = None

    def start(self):
        self._started = time.monotonic()

    def add(self, items: Iterable[ProbeResult]):
        for it in items:
            self._results.append(it)

    def count(self, outcome: ProbeOutcome) -> int:
        return sum(1 for r in self._results if r.outcome is outcome)

    def get_live(self):
        return sorted({r.candidate for r in self._results if r.is_live})

    def summary(self, domain: str, elapsed: Optional[float] = None) -> ScanSummary:
        if elapsed is None:
            elapsed = time.monotonic() - self._started if self._started is not None else 0.0
        return ScanSummary(
            domain=domain,
            live=tuple(self.get_live()),
            live_count=self.count(ProbeOutcome.LIVE),
            dead_count=self.count(ProbeOutcome.DEAD),
            errored_count=self.count(ProbeOutcome.ERRORED),
            elapsed=elapsed,
        )

    def clear(self):
        self._results.clear()
        self._started = None
