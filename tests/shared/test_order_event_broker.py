# -*- coding: utf-8 -*-
"""
tests/shared/test_order_event_broker.py

Broker pub/sub en memoria por proyecto.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest

from ordertrack.shared.events import OrderEventBroker


@pytest.mark.asyncio
async def test_publish_reaches_only_project_subscribers():
    broker = OrderEventBroker()
    q1 = broker.subscribe(1)
    q1b = broker.subscribe(1)
    q2 = broker.subscribe(2)

    delivered = broker.publish(1, {"type": "order.created"})

    assert delivered == 2
    assert q1.get_nowait() == {"type": "order.created"}
    assert q1b.get_nowait() == {"type": "order.created"}
    assert q2.empty()
    assert broker.subscriber_count() == 3


@pytest.mark.asyncio
async def test_publish_without_subscribers():
    assert OrderEventBroker().publish(9, {"type": "x"}) == 0


@pytest.mark.asyncio
async def test_full_queue_drops_event_for_that_subscriber(caplog):
    broker = OrderEventBroker(queue_size=1)
    slow = broker.subscribe(1)
    broker.publish(1, {"type": "a"})

    with caplog.at_level("WARNING"):
        delivered = broker.publish(1, {"type": "b"})

    assert delivered == 0
    assert slow.qsize() == 1
    assert slow.get_nowait() == {"type": "a"}
    assert "order_event_dropped" in caplog.text


@pytest.mark.asyncio
async def test_subscription_context_always_unsubscribes():
    broker = OrderEventBroker()

    with pytest.raises(RuntimeError):
        async with broker.subscription(5) as queue:
            assert broker.subscriber_count(5) == 1
            broker.publish(5, {"type": "x"})
            assert queue.qsize() == 1
            raise RuntimeError("cliente desconectado")

    assert broker.subscriber_count(5) == 0


def test_unsubscribe_unknown_is_noop():
    broker = OrderEventBroker()
    q = broker.subscribe(1)
    broker.unsubscribe(2, q)
    broker.unsubscribe(1, q)
    broker.unsubscribe(1, q)
    assert broker.subscriber_count(1) == 0

# Fin del archivo tests/shared/test_order_event_broker.py
