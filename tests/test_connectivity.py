import asyncio

import httpx
import pytest
import respx
from httpx import Response

from app.schemas.state import ConnectivityState
from app.services.connectivity import ConnectivityMonitor, ConnectivityObserver


PROBE_URL = "https://probe.example.com/generate_204"


def test_publish_same_state_is_not_a_change():
    observer = ConnectivityObserver()
    observer.publish(ConnectivityState.UNAVAILABLE)
    assert observer.state == ConnectivityState.UNAVAILABLE

    observer.publish(ConnectivityState.AVAILABLE)
    assert observer.state == ConnectivityState.AVAILABLE


@pytest.mark.asyncio
async def test_subscribe_yields_current_then_changes():
    observer = ConnectivityObserver()
    updates = observer.subscribe()

    assert await anext(updates) == ConnectivityState.UNAVAILABLE

    pending = asyncio.ensure_future(anext(updates))
    await asyncio.sleep(0)
    assert not pending.done()

    observer.publish(ConnectivityState.AVAILABLE)
    assert await asyncio.wait_for(pending, timeout=1) == ConnectivityState.AVAILABLE

    await updates.aclose()


@pytest.mark.asyncio
async def test_subscribe_skips_flip_back_to_same_value():
    observer = ConnectivityObserver(ConnectivityState.AVAILABLE)
    updates = observer.subscribe()
    assert await anext(updates) == ConnectivityState.AVAILABLE

    pending = asyncio.ensure_future(anext(updates))
    await asyncio.sleep(0)
    observer.publish(ConnectivityState.UNAVAILABLE)
    observer.publish(ConnectivityState.AVAILABLE)
    await asyncio.sleep(0)
    assert not pending.done()

    observer.publish(ConnectivityState.UNAVAILABLE)
    assert await asyncio.wait_for(pending, timeout=1) == ConnectivityState.UNAVAILABLE

    await updates.aclose()


@pytest.mark.asyncio
async def test_check_once_available():
    observer = ConnectivityObserver()
    with respx.mock:
        respx.head(PROBE_URL).mock(return_value=Response(204))

        async with httpx.AsyncClient() as client:
            monitor = ConnectivityMonitor(observer, client, probe_url=PROBE_URL, interval_seconds=30)
            assert await monitor.check_once() == ConnectivityState.AVAILABLE

    assert observer.state == ConnectivityState.AVAILABLE


@pytest.mark.asyncio
async def test_check_once_unavailable_on_network_error():
    observer = ConnectivityObserver(ConnectivityState.AVAILABLE)
    with respx.mock:
        respx.head(PROBE_URL).mock(side_effect=httpx.ConnectError("no route to host"))

        async with httpx.AsyncClient() as client:
            monitor = ConnectivityMonitor(observer, client, probe_url=PROBE_URL, interval_seconds=30)
            assert await monitor.check_once() == ConnectivityState.UNAVAILABLE

    assert observer.state == ConnectivityState.UNAVAILABLE


@pytest.mark.asyncio
async def test_monitor_polls_until_stopped():
    observer = ConnectivityObserver()
    with respx.mock:
        outcomes = [Response(204), httpx.ConnectTimeout("slow")]

        def probe(request):
            if not outcomes:
                return Response(204)
            outcome = outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        route = respx.head(PROBE_URL).mock(side_effect=probe)

        async with httpx.AsyncClient() as client:
            monitor = ConnectivityMonitor(observer, client, probe_url=PROBE_URL, interval_seconds=0.01)
            seen = []

            async def collect():
                async for state in observer.subscribe():
                    seen.append(state)
                    if len(seen) == 4:
                        return

            collector = asyncio.ensure_future(collect())
            monitor.start()
            await asyncio.wait_for(collector, timeout=1)
            await monitor.stop()

        assert route.call_count >= 3

    assert seen == [
        ConnectivityState.UNAVAILABLE,
        ConnectivityState.AVAILABLE,
        ConnectivityState.UNAVAILABLE,
        ConnectivityState.AVAILABLE,
    ]


@pytest.mark.asyncio
async def test_malformed_probe_url_reports_unavailable_and_stops_cleanly():
    observer = ConnectivityObserver(ConnectivityState.AVAILABLE)

    async with httpx.AsyncClient() as client:
        monitor = ConnectivityMonitor(observer, client, probe_url="http://[::1", interval_seconds=0.01)
        monitor.start()
        for _ in range(50):
            if observer.state == ConnectivityState.UNAVAILABLE:
                break
            await asyncio.sleep(0.01)

        assert observer.state == ConnectivityState.UNAVAILABLE
        assert not monitor._task.done()

        await monitor.stop()
