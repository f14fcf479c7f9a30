"""
Continuation-token pagination over the metrics catalog.

The walk ends only when the provider returns an empty or absent token. No page
cap is enforced; termination is trusted to the metrics API.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import structlog

from watchlayer.discovery.metrics import MetricsCapability
from watchlayer.discovery.models import ListMetricsRequest, MetricDescriptor, MetricsPage

logger = structlog.get_logger()


class MetricPaginator:
    """Fetch every page of the metrics catalog for one metric name."""

    def __init__(self, metrics: MetricsCapability, *, namespace: str | None = None) -> None:
        self._metrics = metrics
        self._namespace = namespace

    async def iter_pages(self, metric_name: str) -> AsyncGenerator[MetricsPage, None]:
        """
        Yield pages in the order the provider returns them.

        Each request echoes the previous response's token verbatim, so pages
        are fetched strictly one after another.
        """
        if not metric_name:
            raise ValueError("metric_name must be a non-empty string")

        next_token: str | None = None
        pages_seen = 0
        while True:
            request = ListMetricsRequest(
                metric_name=metric_name,
                namespace=self._namespace,
                next_token=next_token,
            )
            page = await self._metrics.list_metrics(request)
            pages_seen += 1
            logger.debug(
                "metrics_page_fetched",
                metric_name=metric_name,
                page=pages_seen,
                descriptors=len(page.descriptors),
                has_next=not page.is_last,
            )
            yield page
            if page.is_last:
                break
            next_token = page.next_token

    async def fetch_all(self, metric_name: str) -> list[MetricDescriptor]:
        """Return all descriptors for ``metric_name`` across every page."""
        descriptors: list[MetricDescriptor] = []
        pages = 0
        async for page in self.iter_pages(metric_name):
            pages += 1
            descriptors.extend(page.descriptors)

        logger.debug(
            "metrics_pagination_complete",
            metric_name=metric_name,
            pages=pages,
            descriptors=len(descriptors),
        )
        return descriptors
