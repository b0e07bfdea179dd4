# -*- coding: utf-8 -*-
"""测试共用的假连接器"""

import asyncio

import pytest


class FakeConnector:
    """记录每次连接的时间窗口；behaviour 把主机名映射到要抛出的异常"""

    def __init__(self, behaviour=None, delay=0.0, delays=None):
        self.behaviour = behaviour or {}
        self.delay = delay
        self.delays = delays or {}
        self.calls = []
        self.windows = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def connect(self, host, port):
        loop = asyncio.get_running_loop()
        self.calls.append((host, port))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        start = loop.time()
        try:
            await asyncio.sleep(self.delays.get(host, self.delay))
            exc = self.behaviour.get(host)
            if exc is not None:
                raise exc
        finally:
            self.in_flight -= 1
            self.windows.append((start, loop.time()))


@pytest.fixture
def make_connector():
    return FakeConnector


@pytest.fixture
def write_wordlist(tmp_path):
    def _write(name, content, directory=None):
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path
    return _write
