from __future__ import annotations

from contextlib import AsyncExitStack
from typing import Any, Protocol

import aioboto3

from watchlayer.config import Settings
from watchlayer.discovery.models import ListMetricsRequest, MetricsPage


class MetricsCapability(Protocol):
    """Anything that can return one page of the metrics catalog."""

    async def list_metrics(self, request: ListMetricsRequest) -> MetricsPage: ...


class CloudWatchMetrics:
    """List metrics from CloudWatch.

    Used as an async context manager, one client serves every page of a walk;
    otherwise each call opens its own client. Errors raised by botocore
    (throttling, auth, network) are not caught here.
    """

    def __init__(
        self,
        region: str = "us-east-1",
        *,
        endpoint_url: str | None = None,
        profile_name: str | None = None,
    ) -> None:
        self.region = region
        self.endpoint_url = endpoint_url
        self.profile_name = profile_name
        self._client: Any = None
        self._stack: AsyncExitStack | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> CloudWatchMetrics:
        return cls(
            settings.aws_region,
            endpoint_url=settings.aws_endpoint_url,
            profile_name=settings.aws_profile,
        )

    def _session(self) -> aioboto3.Session:
        return aioboto3.Session(region_name=self.region, profile_name=self.profile_name)

    async def __aenter__(self) -> CloudWatchMetrics:
        stack = AsyncExitStack()
        self._client = await stack.enter_async_context(
            self._session().client("cloudwatch", endpoint_url=self.endpoint_url)
        )
        self._stack = stack
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        stack, self._stack, self._client = self._stack, None, None
        if stack is not None:
            await stack.aclose()

    async def list_metrics(self, request: ListMetricsRequest) -> MetricsPage:
        if self._client is not None:
            response = await self._client.list_metrics(**request.to_api_kwargs())
            return MetricsPage.from_api(response)

        session = self._session()
        async with session.client("cloudwatch", endpoint_url=self.endpoint_url) as client:
            response = await client.list_metrics(**request.to_api_kwargs())
        return MetricsPage.from_api(response)
