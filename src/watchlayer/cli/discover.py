"""
CLI command for resource discovery.

Commands:
    watchlayer discover                      - List discovered queues
    watchlayer discover --name orders        - Show one queue
    watchlayer discover --format json        - Output as JSON
"""

from __future__ import annotations

import argparse
import asyncio
from contextlib import nullcontext

from botocore.exceptions import BotoCoreError, ClientError

from watchlayer.cli.ux import console, error, print_table, success, warning
from watchlayer.config import Settings, get_settings
from watchlayer.core.errors import (
    ExitCode,
    ProviderError,
    WarningResult,
    WatchlayerError,
    format_error_message,
    main_with_error_handling,
)
from watchlayer.discovery.metrics import CloudWatchMetrics, MetricsCapability
from watchlayer.discovery.models import Resource, ResourceSet
from watchlayer.discovery.resource_types import get_resource_type
from watchlayer.discovery.source import ResourceSource
from watchlayer.logging import bind_context


@main_with_error_handling()
def discover_command(
    name: str | None = None,
    kind: str | None = None,
    output_format: str = "table",
    settings: Settings | None = None,
    metrics: MetricsCapability | None = None,
) -> int:
    """
    Discover resources from the metrics catalog and print them.

    Exit codes:
        0 - Success
        1 - Requested resource not found
        10 - Unknown resource kind
        11 - Metrics catalog call failed
        12 - Malformed metric descriptor

    Args:
        name: Show only this resource
        kind: Resource kind to discover (default from settings)
        output_format: Output format ("table" or "json")
        settings: Settings to use instead of the environment
        metrics: Metrics capability to use instead of CloudWatch

    Returns:
        Exit code
    """
    settings = settings or get_settings()

    try:
        resource_type = get_resource_type(kind or settings.resource_kind)
        with bind_context(command="discover", kind=resource_type.kind, region=settings.aws_region) as log:
            if metrics is None:
                metrics = CloudWatchMetrics.from_settings(settings)
            try:
                found = asyncio.run(_discover(ResourceSource(resource_type, metrics), metrics, name))
            except (BotoCoreError, ClientError) as exc:
                raise ProviderError(
                    "Metrics catalog request failed",
                    details={"kind": resource_type.kind, "error": str(exc)},
                ) from exc

            if name is not None and found is None:
                warning(f"No {resource_type.kind} named '{name}' was found")
                raise WarningResult("Resource not found", details={"name": name})
            log.info("discover_command_complete", name=name, output_format=output_format)
    except WarningResult:
        raise
    except WatchlayerError as exc:
        error(format_error_message(exc))
        raise

    if name is not None:
        _print_resource(found, output_format)
    else:
        _print_resources(resource_type.kind, found, output_format)
    return ExitCode.SUCCESS


async def _discover(
    source: ResourceSource,
    metrics: MetricsCapability,
    name: str | None,
) -> Resource | ResourceSet | None:
    # One CloudWatch client for the whole walk
    scope = metrics if isinstance(metrics, CloudWatchMetrics) else nullcontext()
    async with scope:
        if name is not None:
            return await source.discover_one(name)
        return await source.discover_all()


def _print_resource(resource: Resource, output_format: str) -> None:
    if output_format == "json":
        console.print_json(data=resource.to_dict())
        return
    print_table(
        title=resource.kind,
        columns=["Name", "Error queue"],
        rows=[[resource.name, "yes" if resource.is_error_variant else "no"]],
    )


def _print_resources(kind: str, resources: ResourceSet, output_format: str) -> None:
    if output_format == "json":
        console.print_json(
            data={"kind": kind, "resources": [r.to_dict() for r in resources.values()]}
        )
        return

    if not resources:
        warning(f"No {kind} resources discovered")
        return

    print_table(
        title=kind,
        columns=["Name", "Error queue"],
        rows=[[r.name, "yes" if r.is_error_variant else "no"] for r in resources.values()],
    )
    errors = sum(1 for r in resources.values() if r.is_error_variant)
    success(f"Discovered {len(resources)} resources ({errors} error queues)")


def register_discover_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register discover subcommand parser."""
    parser = subparsers.add_parser(
        "discover",
        help="Discover resources from the CloudWatch metrics catalog",
    )
    parser.add_argument("--name", help="Show only the resource with this name")
    parser.add_argument(
        "--kind",
        help="Resource kind to discover (or set WATCHLAYER_RESOURCE_KIND)",
    )
    parser.add_argument(
        "--format",
        "-f",
        dest="output_format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument("--region", help="AWS region (or set WATCHLAYER_AWS_REGION)")
    parser.add_argument(
        "--endpoint-url",
        help="CloudWatch endpoint URL (or set WATCHLAYER_AWS_ENDPOINT_URL)",
    )
    parser.add_argument("--profile", help="AWS profile (or set WATCHLAYER_AWS_PROFILE)")


def handle_discover_command(args: argparse.Namespace) -> int:
    """Handle discover command from CLI args."""
    overrides = {
        "aws_region": getattr(args, "region", None),
        "aws_endpoint_url": getattr(args, "endpoint_url", None),
        "aws_profile": getattr(args, "profile", None),
    }
    settings = get_settings().model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )
    return discover_command(
        name=getattr(args, "name", None),
        kind=getattr(args, "kind", None),
        output_format=getattr(args, "output_format", "table"),
        settings=settings,
    )
