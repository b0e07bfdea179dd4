# -*- coding: utf-8 -*-
"""
subkrek包 - 子域名扫描工具

结合字典爆破和 Wayback Machine 历史URL发现子域名，
再用有界并发的 TCP 探测验证每个候选是否存活。

使用方法：
```python
from subkrek import Config, ScanCoordinator

scanner = ScanCoordinator.from_config(Config(), use_wayback=True)
summary = await scanner.run('example.com')
print(summary.live)
```
"""

# 导入主要模块
from .core import CandidateBuilder, Config, ResultManager, ScanCoordinator, WordlistManager
from .engines import BaseEngine, BruteEngine, ProbeEngine, ProbeObserver, WaybackEngine
from .models import ArchiveRecord, ExtractionResult, ProbeOutcome, ProbeResult, ScanState, ScanSummary
from .errors import (
    SubkrekError,
    InputError,
    SourceError,
    HarvestError,
    ProbeError,
)

# 版本信息
__version__ = '1.0.0'

# 导出列表
__all__ = [
    # 调度
    'ScanCoordinator',
    'Config',
    'ResultManager',
    # 候选来源
    'WordlistManager',
    'CandidateBuilder',
    'BaseEngine',
    'BruteEngine',
    'WaybackEngine',
    # 探测
    'ProbeEngine',
    'ProbeObserver',
    # 数据模型
    'ArchiveRecord',
    'ExtractionResult',
    'ProbeOutcome',
    'ProbeResult',
    'ScanState',
    'ScanSummary',
    # 异常
    'SubkrekError',
    'InputError',
    'SourceError',
    'HarvestError',
    'ProbeError',
]
