"""Tests for discovery/memory.py."""

import pytest
from watchlayer.discovery.memory import InMemoryMetricsCatalog
from watchlayer.discovery.models import ListMetricsRequest, MetricsPage


@pytest.mark.asyncio
async def test_in_memory_catalog_returns_page_for_token(queue_page):
    catalog = InMemoryMetricsCatalog()
    catalog.add_page(None, queue_page("Queue-1", next_token="t1"))
    catalog.add_page("t1", queue_page("Queue-2"))

    first = await catalog.list_metrics(ListMetricsRequest(metric_name="ApproximateAgeOfOldestMessage"))
    second = await catalog.list_metrics(
        ListMetricsRequest(metric_name="ApproximateAgeOfOldestMessage", next_token="t1")
    )

    assert first.next_token == "t1"
    assert second.descriptors[0].dimension("QueueName") == "Queue-2"
    assert catalog.call_count == 2
    assert [r.next_token for r in catalog.requests] == [None, "t1"]


@pytest.mark.asyncio
async def test_in_memory_catalog_unknown_token_raises():
    catalog = InMemoryMetricsCatalog({None: MetricsPage()})

    with pytest.raises(KeyError):
        await catalog.list_metrics(
            ListMetricsRequest(metric_name="ApproximateAgeOfOldestMessage", next_token="stale")
        )
