# -*- coding: utf-8 -*-
"""
数据模型模块
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional, Tuple


class ProbeOutcome(Enum):
    """探测结果标签"""
    LIVE = "live"
    DEAD = "dead"
    ERRORED = "errored"


class ScanState(Enum):
    """扫描状态机"""
    IDLE = "idle"
    CANDIDATES_ASSEMBLED = "candidates_assembled"
    PROBING = "probing"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass(frozen=True)
class ProbeResult:
    """单个候选的探测结果，创建后不再修改"""
    candidate: str
    outcome: ProbeOutcome
    detail: str = ""

    @property
    def is_live(self) -> bool:
        return self.outcome is ProbeOutcome.LIVE


@dataclass(frozen=True)
class ScanSummary:
    """一次扫描的汇总"""
    domain: str
    live: Tuple[str, ...] = ()
    live_count: int = 0
    dead_count: int = 0
    errored_count: int = 0
    elapsed: float = 0.0

    @property
    def total(self) -> int:
        return self.live_count + self.dead_count + self.errored_count

    def to_dict(self) -> Dict:
        """转换为字典，便于导出JSON"""
        result_dict = asdict(self)
        result_dict['live'] = list(self.live)
        result_dict['total'] = self.total
        result_dict['elapsed'] = round(self.elapsed, 3)
        return result_dict


@dataclass(frozen=True)
class ArchiveRecord:
    """Wayback 返回的一条URL以及从中提取的子域名（提取失败为None）"""
    url: str
    subdomain: Optional[str] = None


@dataclass
class ExtractionResult:
    """子域名提取结果"""
    subdomains: List[str] = field(default_factory=list)
    processed: int = 0
    skipped: int = 0
