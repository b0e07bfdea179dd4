# -*- coding: utf-8 -*-
"""
探测引擎

对每个候选发起一次有超时限制的 TCP 连接，并用信号量限制同时进行的探测数量。

结果分类：
- 连接成功，或连接被拒绝（主机存在但端口关闭） -> LIVE
- 超时、域名无法解析、主机/网络不可达 -> DEAD
- 候选格式错误或其他异常 -> ERRORED
"""

import asyncio
import errno
import socket
from typing import Iterable, List, Optional

from ..errors import InvalidConcurrency, MalformedCandidate, NameResolutionError
from ..models import ProbeOutcome, ProbeResult
from ..utils.connector import TcpConnector
from ..utils.dns_resolver import AsyncResolver
from ..utils.helpers import is_valid_hostname
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PORT = 80
DEFAULT_TIMEOUT = 5.0

UNREACHABLE_ERRNOS = {
    errno.EHOSTUNREACH,
    errno.ENETUNREACH,
    errno.EHOSTDOWN,
    errno.EADDRNOTAVAIL,
}


class ProbeObserver:
    """探测进度观察者，默认什么都不做。界面层继承后按需重写。"""

    def on_start(self, total: int):
        pass

    def on_result(self, result: ProbeResult, completed: int, total: int):
        pass

    def on_finish(self, completed: int):
        pass


class ProbeEngine:
    """有界并发的存活探测。

    connector 需要提供 ``async connect(host, port)``，连接失败时抛出异常；
    不传时使用 aiodns 解析 + asyncio 建立连接的 TcpConnector。
    """

    def __init__(self, connector=None, port: int = DEFAULT_PORT,
                 timeout: float = DEFAULT_TIMEOUT, observer: Optional[ProbeObserver] = None,
                 nameservers=None):
        self.connector = connector or TcpConnector(resolver=AsyncResolver(nameservers))
        self.port = port
        self.timeout = timeout
        self.observer = observer or ProbeObserver()
        self._completed = 0

    @property
    def completed(self) -> int:
        """已完成的探测数，只增不减"""
        return self._completed

    def classify(self, candidate: str, exc: BaseException) -> ProbeResult:
        """把连接异常映射为探测结果"""
        if isinstance(exc, ConnectionRefusedError):
            return ProbeResult(candidate, ProbeOutcome.LIVE, 'connection refused')
        # 3.11 之前系统级连接超时抛出内置 TimeoutError，与 asyncio.TimeoutError 不同
        if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
            return ProbeResult(candidate, ProbeOutcome.DEAD, 'timeout')
        if isinstance(exc, (NameResolutionError, socket.gaierror)):
            return ProbeResult(candidate, ProbeOutcome.DEAD, 'unresolvable')
        if isinstance(exc, OSError) and exc.errno in UNREACHABLE_ERRNOS:
            return ProbeResult(candidate, ProbeOutcome.DEAD, 'unreachable')
        return ProbeResult(candidate, ProbeOutcome.ERRORED, f'{exc.__class__.__name__}: {exc}')

    async def probe(self, candidate: str) -> ProbeResult:
        """探测单个候选"""
        if not isinstance(candidate, str) or not is_valid_hostname(candidate):
            error = MalformedCandidate(candidate)
            return ProbeResult(str(candidate), ProbeOutcome.ERRORED, str(error))

        try:
            await asyncio.wait_for(self.connector.connect(candidate, self.port), self.timeout)
        except Exception as e:
            result = self.classify(candidate, e)
            if result.outcome is ProbeOutcome.ERRORED:
                logger.debug("探测 %s 出错: %s", candidate, result.detail)
            return result
        return ProbeResult(candidate, ProbeOutcome.LIVE, 'connected')

    async def _bounded_probe(self, candidate: str, sem: asyncio.Semaphore, total: int) -> ProbeResult:
        async with sem:
            result = await self.probe(candidate)
        self._completed += 1
        self.observer.on_result(result, self._completed, total)
        return result

    async def probe_all(self, candidates: Iterable[str], concurrency: int) -> List[ProbeResult]:
        """并发探测所有候选，同时进行的探测不超过 concurrency 个。

        每个候选返回一个结果，顺序为完成顺序。
        """
        if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
            raise InvalidConcurrency(concurrency)

        candidates = list(candidates)
        total = len(candidates)
        self._completed = 0
        self.observer.on_start(total)
        logger.info("开始探测 %d 个候选，并发数 %d，端口 %d", total, concurrency, self.port)

        sem = asyncio.Semaphore(concurrency)
        tasks = [asyncio.ensure_future(self._bounded_probe(c, sem, total)) for c in candidates]

        results = []
        try:
            for finished in asyncio.as_completed(tasks):
                results.append(await finished)
        finally:
            # 观察者抛出异常时，不留下仍在运行的探测
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        self.observer.on_finish(self._completed)
        return results
