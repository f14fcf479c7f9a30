"""Root test configuration."""

import logging

import pytest
import structlog
from watchlayer.discovery.memory import InMemoryMetricsCatalog
from watchlayer.discovery.models import Dimension, MetricDescriptor, MetricsPage


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def _queue_page(*names: str, next_token: str | None = None) -> MetricsPage:
    return MetricsPage(
        descriptors=tuple(
            MetricDescriptor(
                metric_name="ApproximateAgeOfOldestMessage",
                dimensions=(Dimension(name="QueueName", value=name),),
                namespace="AWS/SQS",
            )
            for name in names
        ),
        next_token=next_token,
    )


@pytest.fixture
def queue_page():
    """Factory for a page of SQS queue descriptors."""
    return _queue_page


@pytest.fixture
def four_page_catalog() -> InMemoryMetricsCatalog:
    """Four single-queue pages chained by token-1, token-2 and token-3."""
    return InMemoryMetricsCatalog(
        {
            None: _queue_page("Queue-1", next_token="token-1"),
            "token-1": _queue_page("Queue-2", next_token="token-2"),
            "token-2": _queue_page("Queue-3", next_token="token-3"),
            "token-3": _queue_page("Queue-4_error"),
        }
    )
