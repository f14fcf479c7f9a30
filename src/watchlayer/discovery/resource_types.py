"""
Resource-type descriptors.

A resource type is the small set of constants that lets the generic source
discover one kind of resource from the metrics catalog: which metric to list,
which dimension holds the resource name, and how to classify that name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from watchlayer.core.errors import ConfigurationError
from watchlayer.discovery.classifier import is_error_queue


@dataclass(frozen=True)
class ResourceType:
    """Discovery constants for one kind of cloud resource."""

    kind: str
    metric_name: str
    dimension_name: str
    namespace: str | None
    classifier: Callable[[str], bool]

    def classify(self, name: str) -> bool:
        return self.classifier(name)


SQS_QUEUE = ResourceType(
    kind="sqs_queue",
    metric_name="ApproximateAgeOfOldestMessage",
    dimension_name="QueueName",
    namespace="AWS/SQS",
    classifier=is_error_queue,
)

RESOURCE_TYPES: dict[str, ResourceType] = {
    SQS_QUEUE.kind: SQS_QUEUE,
}


def get_resource_type(kind: str) -> ResourceType:
    """Look up a registered resource type by kind."""
    try:
        return RESOURCE_TYPES[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown resource kind '{kind}'",
            details={"available": ", ".join(sorted(RESOURCE_TYPES))},
        ) from None
