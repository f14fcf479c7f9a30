"""
Data models for metrics-catalog resource discovery.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Dimension:
    """A single name/value dimension attached to a metric."""

    name: str
    value: str


@dataclass(frozen=True)
class MetricDescriptor:
    """One metric entry returned by the metrics catalog."""

    metric_name: str
    dimensions: tuple[Dimension, ...] = ()
    namespace: str | None = None

    def dimension(self, name: str) -> str | None:
        """Return the value of the first dimension called ``name``, if any."""
        for dim in self.dimensions:
            if dim.name == name:
                return dim.value
        return None

    @property
    def dimension_names(self) -> list[str]:
        return [dim.name for dim in self.dimensions]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> MetricDescriptor:
        """Build a descriptor from a CloudWatch ``Metrics[]`` entry."""
        return cls(
            metric_name=data.get("MetricName", ""),
            dimensions=tuple(
                Dimension(name=d["Name"], value=d["Value"]) for d in data.get("Dimensions", [])
            ),
            namespace=data.get("Namespace"),
        )


@dataclass(frozen=True)
class ListMetricsRequest:
    """Request for one page of the metrics catalog."""

    metric_name: str
    namespace: str | None = None
    next_token: str | None = None

    def to_api_kwargs(self) -> dict[str, str]:
        kwargs = {"MetricName": self.metric_name}
        if self.namespace:
            kwargs["Namespace"] = self.namespace
        if self.next_token:
            kwargs["NextToken"] = self.next_token
        return kwargs


@dataclass(frozen=True)
class MetricsPage:
    """A batch of descriptors plus the continuation token for the next batch."""

    descriptors: tuple[MetricDescriptor, ...] = ()
    next_token: str | None = None

    @property
    def is_last(self) -> bool:
        return not self.next_token

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> MetricsPage:
        """Parse a CloudWatch ``ListMetrics`` response."""
        return cls(
            descriptors=tuple(MetricDescriptor.from_api(m) for m in data.get("Metrics", [])),
            next_token=data.get("NextToken") or None,
        )


@dataclass(frozen=True)
class Resource:
    """A resource discovered through its metrics."""

    name: str
    kind: str
    is_error_variant: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "is_error_variant": self.is_error_variant,
        }


ResourceSet = dict[str, Resource]
