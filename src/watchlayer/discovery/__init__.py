"""
Resource discovery for watchlayer.

Enumerates cloud resources by listing the metrics they publish, following the
catalog's continuation token to the end and keying resources by the value of
their identifying dimension.
"""

from .classifier import ERROR_QUEUE_SUFFIX, is_error_queue
from .memory import InMemoryMetricsCatalog
from .metrics import CloudWatchMetrics, MetricsCapability
from .models import (
    Dimension,
    ListMetricsRequest,
    MetricDescriptor,
    MetricsPage,
    Resource,
    ResourceSet,
)
from .paginator import MetricPaginator
from .resource_types import RESOURCE_TYPES, SQS_QUEUE, ResourceType, get_resource_type
from .source import ResourceSource, queue_source

__all__ = [
    'CloudWatchMetrics',
    'Dimension',
    'ERROR_QUEUE_SUFFIX',
    'InMemoryMetricsCatalog',
    'ListMetricsRequest',
    'MetricDescriptor',
    'MetricPaginator',
    'MetricsCapability',
    'MetricsPage',
    'RESOURCE_TYPES',
    'Resource',
    'ResourceSet',
    'ResourceSource',
    'ResourceType',
    'SQS_QUEUE',
    'get_resource_type',
    'is_error_queue',
    'queue_source',
]
