"""
Resource discovery from the metrics catalog.

A ``ResourceSource`` turns the metric descriptors listed for one resource type
into resource objects keyed by name.
"""

from __future__ import annotations

import structlog

from watchlayer.core.errors import MalformedDescriptorError
from watchlayer.discovery.metrics import MetricsCapability
from watchlayer.discovery.models import MetricDescriptor, Resource, ResourceSet
from watchlayer.discovery.paginator import MetricPaginator
from watchlayer.discovery.resource_types import SQS_QUEUE, ResourceType

logger = structlog.get_logger()


class ResourceSource:
    """Discover resources of one type through their metrics."""

    def __init__(self, resource_type: ResourceType, metrics: MetricsCapability) -> None:
        """
        Initialize the source.

        Args:
            resource_type: Metric name, identifying dimension and classifier
                for the kind of resource to discover
            metrics: Metrics catalog capability used for every page fetch
        """
        self.resource_type = resource_type
        self._paginator = MetricPaginator(metrics, namespace=resource_type.namespace)

    async def discover_all(self) -> ResourceSet:
        """
        Discover every resource of this type.

        Later descriptors for an already-seen name replace the earlier
        resource. Returns an empty mapping when the catalog lists nothing.

        Raises:
            MalformedDescriptorError: A descriptor lacks the identifying
                dimension or belongs to a different metric. Nothing is returned.
        """
        rtype = self.resource_type
        logger.info(
            "resource_discovery_started",
            kind=rtype.kind,
            metric_name=rtype.metric_name,
        )

        descriptors = await self._paginator.fetch_all(rtype.metric_name)

        resources: ResourceSet = {}
        for descriptor in descriptors:
            resource = self._to_resource(descriptor)
            resources[resource.name] = resource

        logger.info(
            "resource_discovery_complete",
            kind=rtype.kind,
            descriptors=len(descriptors),
            resources=len(resources),
            error_variants=sum(1 for r in resources.values() if r.is_error_variant),
        )
        return resources

    async def discover_one(self, name: str) -> Resource | None:
        """
        Find a single resource by name.

        Runs the full discovery walk; the catalog has no per-name filter for
        the identifying dimension. Returns None when the name is not present.
        """
        resource = (await self.discover_all()).get(name)
        if resource is None:
            logger.info("resource_not_found", kind=self.resource_type.kind, name=name)
        return resource

    async def list_names(self) -> list[str]:
        """Names of all discovered resources, in discovery order."""
        return list(await self.discover_all())

    def _to_resource(self, descriptor: MetricDescriptor) -> Resource:
        rtype = self.resource_type
        name = descriptor.dimension(rtype.dimension_name)

        if descriptor.metric_name != rtype.metric_name or not name:
            logger.error(
                "malformed_metric_descriptor",
                kind=rtype.kind,
                metric_name=descriptor.metric_name,
                dimensions=descriptor.dimension_names,
            )
            raise MalformedDescriptorError(
                f"Metric descriptor has no usable '{rtype.dimension_name}' dimension",
                details={
                    "metric_name": descriptor.metric_name,
                    "dimensions": ",".join(descriptor.dimension_names),
                },
            )

        return Resource(
            name=name,
            kind=rtype.kind,
            is_error_variant=rtype.classify(name),
        )


def queue_source(metrics: MetricsCapability) -> ResourceSource:
    """Build the SQS queue source."""
    return ResourceSource(SQS_QUEUE, metrics)
