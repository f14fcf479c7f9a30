from __future__ import annotations

from watchlayer.discovery.models import ListMetricsRequest, MetricsPage


class InMemoryMetricsCatalog:
    """Canned metrics catalog for local development.

    Pages are keyed by the continuation token that requests them; the first
    page is registered under ``None``.
    """

    def __init__(self, pages: dict[str | None, MetricsPage] | None = None) -> None:
        self._pages: dict[str | None, MetricsPage] = dict(pages or {})
        self.requests: list[ListMetricsRequest] = []

    def add_page(self, token: str | None, page: MetricsPage) -> None:
        self._pages[token] = page

    async def list_metrics(self, request: ListMetricsRequest) -> MetricsPage:
        self.requests.append(request)
        return self._pages[request.next_token]

    @property
    def call_count(self) -> int:
        return len(self.requests)
