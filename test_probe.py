# -*- coding: utf-8 -*-
"""探测引擎：结果分类与并发上限"""

import asyncio
import errno
import socket

import pytest

from subkrek.engines.probe_engine import ProbeEngine, ProbeObserver
from subkrek.errors import InvalidConcurrency, NameResolutionError
from subkrek.models import ProbeOutcome


def probe_all(engine, candidates, concurrency):
    return asyncio.run(engine.probe_all(candidates, concurrency))


def outcomes(results):
    return {r.candidate: r.outcome for r in results}


def test_success_and_refused_are_live(make_connector):
    connector = make_connector({'closed.example.com': ConnectionRefusedError()})
    engine = ProbeEngine(connector=connector)
    results = probe_all(engine, ['open.example.com', 'closed.example.com'], 2)

    assert outcomes(results) == {
        'open.example.com': ProbeOutcome.LIVE,
        'closed.example.com': ProbeOutcome.LIVE,
    }
    assert all(port == 80 for _, port in connector.calls)


def test_timeout_is_dead(make_connector):
    connector = make_connector(delays={'slow.example.com': 10})
    engine = ProbeEngine(connector=connector, timeout=0.05)
    result = asyncio.run(engine.probe('slow.example.com'))

    assert result.outcome is ProbeOutcome.DEAD
    assert result.detail == 'timeout'


@pytest.mark.parametrize('exc', [
    NameResolutionError('gone.example.com'),
    socket.gaierror(socket.EAI_NONAME, 'Name or service not known'),
    OSError(errno.EHOSTUNREACH, 'No route to host'),
    OSError(errno.ENETUNREACH, 'Network is unreachable'),
    asyncio.TimeoutError(),
    OSError(errno.ETIMEDOUT, 'Connection timed out'),
])
def test_unresolvable_or_unreachable_is_dead(make_connector, exc):
    engine = ProbeEngine(connector=make_connector({'gone.example.com': exc}))
    result = asyncio.run(engine.probe('gone.example.com'))
    assert result.outcome is ProbeOutcome.DEAD


@pytest.mark.parametrize('exc', [
    RuntimeError('transport exploded'),
    OSError(errno.EMFILE, 'Too many open files'),
    ValueError('bad'),
])
def test_unexpected_failure_is_errored(make_connector, exc):
    engine = ProbeEngine(connector=make_connector({'odd.example.com': exc}))
    result = asyncio.run(engine.probe('odd.example.com'))

    assert result.outcome is ProbeOutcome.ERRORED
    assert exc.__class__.__name__ in result.detail


@pytest.mark.parametrize('candidate', [
    'bad..example.com', '-x.example.com', 'a' * 64 + '.com', '', 'www.example.com\n',
])
def test_malformed_candidate_is_errored_without_connecting(make_connector, candidate):
    connector = make_connector()
    engine = ProbeEngine(connector=connector)
    result = asyncio.run(engine.probe(candidate))

    assert result.outcome is ProbeOutcome.ERRORED
    assert connector.calls == []


def test_cardinality_is_preserved(make_connector):
    candidates = [f'h{i}.example.com' for i in range(25)]
    behaviour = {
        'h3.example.com': ConnectionRefusedError(),
        'h4.example.com': NameResolutionError('h4.example.com'),
        'h5.example.com': RuntimeError('boom'),
    }
    engine = ProbeEngine(connector=make_connector(behaviour))
    results = probe_all(engine, candidates + ['bad..example.com'], 4)

    assert len(results) == len(candidates) + 1
    assert sorted(r.candidate for r in results) == sorted(candidates + ['bad..example.com'])
    by_name = outcomes(results)
    assert by_name['h3.example.com'] is ProbeOutcome.LIVE
    assert by_name['h4.example.com'] is ProbeOutcome.DEAD
    assert by_name['h5.example.com'] is ProbeOutcome.ERRORED
    assert by_name['bad..example.com'] is ProbeOutcome.ERRORED


def test_concurrency_one_is_sequential(make_connector):
    connector = make_connector(delay=0.01)
    engine = ProbeEngine(connector=connector)
    probe_all(engine, [f'h{i}.example.com' for i in range(6)], 1)

    assert connector.max_in_flight == 1
    windows = sorted(connector.windows)
    for (_, end), (next_start, _) in zip(windows, windows[1:]):
        assert end <= next_start


def test_concurrency_bound_is_respected(make_connector):
    connector = make_connector(delay=0.01)
    engine = ProbeEngine(connector=connector)
    probe_all(engine, [f'h{i}.example.com' for i in range(30)], 3)

    assert connector.max_in_flight == 3
    assert len(connector.calls) == 30


@pytest.mark.parametrize('concurrency', [0, -1, 1.5, True])
def test_invalid_concurrency(make_connector, concurrency):
    engine = ProbeEngine(connector=make_connector())
    with pytest.raises(InvalidConcurrency):
        probe_all(engine, ['www.example.com'], concurrency)


class RecordingObserver(ProbeObserver):
    def __init__(self):
        self.total = None
        self.seen = []
        self.finished = None

    def on_start(self, total):
        self.total = total

    def on_result(self, result, completed, total):
        self.seen.append((result.candidate, completed, total))

    def on_finish(self, completed):
        self.finished = completed


def test_progress_is_reported_through_observer(make_connector):
    observer = RecordingObserver()
    engine = ProbeEngine(connector=make_connector(), observer=observer)
    candidates = [f'h{i}.example.com' for i in range(5)]
    probe_all(engine, candidates, 2)

    assert observer.total == 5
    assert [completed for _, completed, _ in observer.seen] == [1, 2, 3, 4, 5]
    assert {name for name, _, _ in observer.seen} == set(candidates)
    assert observer.finished == 5
    assert engine.completed == 5


def test_custom_port_is_used(make_connector):
    connector = make_connector()
    engine = ProbeEngine(connector=connector, port=8443)
    asyncio.run(engine.probe('www.example.com'))
    assert connector.calls == [('www.example.com', 8443)]


class FailingObserver(ProbeObserver):
    def on_result(self, result, completed, total):
        raise RuntimeError('display broke')


def test_observer_failure_leaves_no_pending_tasks(make_connector):
    connector = make_connector(delay=0.01)
    engine = ProbeEngine(connector=connector, observer=FailingObserver())

    async def _run():
        with pytest.raises(RuntimeError, match='display broke'):
            await engine.probe_all([f'h{i}.example.com' for i in range(10)], 2)
        return [t for t in asyncio.all_tasks() if t is not asyncio.current_task()]

    assert asyncio.run(_run()) == []
    assert len(connector.calls) < 10
    assert connector.in_flight == 0
