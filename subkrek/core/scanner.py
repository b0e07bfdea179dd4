# -*- coding: utf-8 -*-
"""
扫描调度器

状态流转：IDLE -> CANDIDATES_ASSEMBLED -> PROBING -> COMPLETE，
候选集为空时进入 FAILED 并抛出 EmptyCandidateSet，不会进入探测阶段。
整个流程不做重试，也不支持中途取消；需要限制总时长时由调用方在外层加超时。
"""

import asyncio
import inspect
from typing import Iterable, List, Optional

from ..engines.probe_engine import ProbeEngine
from ..errors import EmptyCandidateSet, HarvestError, InvalidConcurrency, InvalidDomain, SourceError
from ..models import ScanState, ScanSummary
from ..utils.helpers import normalize_domain
from ..utils.logger import get_logger
from .candidates import CandidateBuilder
from .result_manager import ResultManager

logger = get_logger(__name__)

DEFAULT_CONCURRENCY = 50


class ScanCoordinator:
    """子域名扫描调度器。

    engines 中可以混合同步引擎（search(target) 同步方法）
    和异步引擎（async def search(target)），同步引擎放到线程池中执行。
    """

    def __init__(self, config=None, engines: List[object] = None,
                 probe_engine: Optional[ProbeEngine] = None):
        self.config = config
        self.engines = engines or []
        self.probe_engine = probe_engine or self._default_probe_engine(config)
        self.builder = CandidateBuilder()
        self.state = ScanState.IDLE

        self._concurrency = DEFAULT_CONCURRENCY
        if config is not None:
            self._concurrency = config.get('concurrency', self._concurrency)

    @staticmethod
    def _default_probe_engine(config) -> ProbeEngine:
        if config is None:
            return ProbeEngine()
        return ProbeEngine(
            port=config.get('port', 80),
            timeout=config.get('timeout', 5),
            nameservers=config.get('nameservers'),
        )

    @classmethod
    def from_config(cls, config, wordlists=None, use_wayback: bool = False,
                    probe_engine: Optional[ProbeEngine] = None) -> 'ScanCoordinator':
        """按配置组装字典引擎和（可选的）Wayback 引擎"""
        from ..engines.brute_engine import BruteEngine
        from ..engines.wayback_engine import WaybackEngine

        coordinator = cls(config, probe_engine=probe_engine)
        coordinator.register_engine(BruteEngine(
            wordlists=wordlists if wordlists else config.get('wordlists'),
            base_directory=config.wordlist_dir,
            extension=config.get('wordlist_extension', '.txt'),
        ))
        if use_wayback:
            coordinator.register_engine(WaybackEngine(
                endpoint=config.get('wayback.endpoint'),
                timeout=config.get('wayback.timeout', 30),
            ))
        return coordinator

    def register_engine(self, engine):
        self.engines.append(engine)

    async def _call_engine(self, engine, target: str):
        search = engine.search
        if inspect.iscoroutinefunction(search):
            return await search(target)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, search, target)

    async def assemble(self, domain: str) -> List[str]:
        """运行所有候选来源并合并为一个候选列表。

        Wayback 失败只记录警告；字典错误在字典是唯一来源时向上抛出。
        """
        names = []
        for engine in self.engines:
            engine_name = getattr(engine, 'name', engine.__class__.__name__)
            try:
                found = await self._call_engine(engine, domain)
            except HarvestError as e:
                logger.warning("Wayback 收集失败，继续使用其他来源: %s", e)
                continue
            except SourceError as e:
                if len(self.engines) == 1:
                    self.state = ScanState.FAILED
                    raise
                logger.warning("字典加载失败，继续使用其他来源: %s", e)
                continue
            found = list(found or [])
            logger.info("%s 引擎提供了 %d 个候选", engine_name, len(found))
            names.extend(found)

        candidates = self.builder.build(domain, names)
        self.state = ScanState.CANDIDATES_ASSEMBLED
        return candidates

    async def scan_candidates(self, domain: str, candidates: Iterable[str],
                              concurrency: Optional[int] = None) -> ScanSummary:
        """探测给定的候选集合并返回汇总"""
        candidates = list(candidates)
        if not candidates:
            self.state = ScanState.FAILED
            logger.warning("没有可扫描的子域名")
            raise EmptyCandidateSet(domain)

        concurrency = self._concurrency if concurrency is None else concurrency
        if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
            self.state = ScanState.FAILED
            raise InvalidConcurrency(concurrency)

        rm = ResultManager()
        rm.start()
        self.state = ScanState.PROBING
        results = await self.probe_engine.probe_all(candidates, concurrency)
        rm.add(results)
        summary = rm.summary(domain)
        self.state = ScanState.COMPLETE

        logger.info("扫描完成: 存活 %d，无效 %d，出错 %d，耗时 %.2fs",
                    summary.live_count, summary.dead_count, summary.errored_count,
                    summary.elapsed)
        return summary

    async def run(self, target: str, concurrency: Optional[int] = None) -> ScanSummary:
        """完整扫描：规范化域名 -> 组装候选 -> 探测 -> 汇总"""
        self.state = ScanState.IDLE
        try:
            domain = normalize_domain(target)
        except InvalidDomain:
            self.state = ScanState.FAILED
            raise

        logger.info("目标域名: %s", domain)
        candidates = await self.assemble(domain)
        return await self.scan_candidates(domain, candidates, concurrency)

    def close(self):
        for engine in self.engines:
            close = getattr(engine, 'close', None)
            if close is not None:
                close()
