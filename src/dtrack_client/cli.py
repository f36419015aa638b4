"""
Command line entry point for the Dependency-Track client.

This module configures logging and exposes a small set of commands for
inspecting a server, cloning projects and waiting on events.
"""

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar
from uuid import UUID

import click
import structlog
from pydantic import ValidationError

from . import __version__
from .client import DTrackClient
from .config import Settings
from .exceptions import DTrackError
from .models import ProjectCloneRequest

T = TypeVar("T")


def _add_client_version(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    event_dict.setdefault("client_version", __version__)
    return event_dict


def _renderer(log_format: str) -> Any:
    """Pick the final renderer; console colors only on a terminal."""
    if log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(settings: Settings) -> None:
    """Configure structured logging for the client and its HTTP stack."""
    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    logging.getLogger("dtrack_client").setLevel(settings.log_level)

    # httpx logs every request at INFO
    http_level = logging.DEBUG if settings.log_level == "DEBUG" else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(http_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _add_client_version,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(settings.log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _run(
    ctx: click.Context, action: Callable[[DTrackClient], Awaitable[T]]
) -> T:
    """Run an async action against a client built from the CLI settings."""
    settings: Settings = ctx.obj["settings"]

    async def runner() -> T:
        async with DTrackClient.from_settings(settings) as client:
            return await action(client)

    try:
        return asyncio.run(runner())
    except DTrackError as e:
        raise click.ClickException(str(e)) from e


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, sort_keys=True))


@click.group()
@click.version_option(version=__version__, prog_name="dtrack-client")
@click.option("--url", envvar="DTRACK_BASE_URL", help="Dependency-Track server URL")
@click.option("--api-key", envvar="DTRACK_API_KEY", help="API key")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context, url: str | None, api_key: str | None, debug: bool
) -> None:
    """Dependency-Track API client."""
    ctx.ensure_object(dict)

    overrides: dict[str, Any] = {}
    if url:
        overrides["base_url"] = url
    if api_key:
        overrides["api_key"] = api_key
    if debug:
        overrides["log_level"] = "DEBUG"

    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    setup_logging(settings)
    ctx.obj["settings"] = settings


@cli.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show the server version."""
    about = _run(ctx, lambda client: client.about.get())
    _echo_json(about.to_payload())


@cli.group()
def project() -> None:
    """Project commands."""


@project.command("latest")
@click.argument("name")
@click.pass_context
def project_latest(ctx: click.Context, name: str) -> None:
    """Show the latest version of project NAME."""
    latest = _run(ctx, lambda client: client.project.latest(name))
    _echo_json(latest.to_payload())


@project.command("clone")
@click.argument("project_uuid", type=click.UUID)
@click.argument("version")
@click.option("--make-latest", is_flag=True, help="Flag the clone as latest")
@click.option("--include-tags", is_flag=True, help="Copy tags")
@click.option("--include-properties", is_flag=True, help="Copy properties")
@click.option("--include-components", is_flag=True, help="Copy components")
@click.option("--include-services", is_flag=True, help="Copy services")
@click.option("--include-audit-history", is_flag=True, help="Copy audit history")
@click.option("--include-acl", is_flag=True, help="Copy access control list")
@click.option(
    "--include-policy-violations", is_flag=True, help="Copy policy violations"
)
@click.option("--wait", is_flag=True, help="Wait for the clone to finish")
@click.option("--timeout", type=float, default=None, help="Wait deadline in seconds")
@click.pass_context
def project_clone(
    ctx: click.Context,
    project_uuid: UUID,
    version: str,
    make_latest: bool,
    include_tags: bool,
    include_properties: bool,
    include_components: bool,
    include_services: bool,
    include_audit_history: bool,
    include_acl: bool,
    include_policy_violations: bool,
    wait: bool,
    timeout: float | None,
) -> None:
    """Clone PROJECT_UUID into VERSION."""
    settings: Settings = ctx.obj["settings"]
    request = ProjectCloneRequest(
        project_uuid=project_uuid,
        version=version,
        include_tags=include_tags,
        include_properties=include_properties,
        include_components=include_components,
        include_services=include_services,
        include_audit_history=include_audit_history,
        include_acl=include_acl,
        include_policy_violations=include_policy_violations,
        make_clone_latest=True if make_latest else None,
    )

    async def clone(client: DTrackClient) -> str:
        if not wait:
            return await client.project.clone(request)
        return await client.project.clone_and_wait(
            request,
            timeout=timeout if timeout is not None else settings.wait_timeout,
            interval=settings.wait_interval,
        )

    token = _run(ctx, clone)
    click.echo(token)


@cli.group()
def event() -> None:
    """Event commands."""


@event.command("status")
@click.argument("token")
@click.pass_context
def event_status(ctx: click.Context, token: str) -> None:
    """Show whether the event TOKEN is still being processed."""
    processing = _run(ctx, lambda client: client.event.is_being_processed(token))
    click.echo("processing" if processing else "done")


@event.command("wait")
@click.argument("token")
@click.option("--timeout", type=float, default=None, help="Deadline in seconds")
@click.option("--interval", type=float, default=None, help="Delay between checks")
@click.pass_context
def event_wait(
    ctx: click.Context, token: str, timeout: float | None, interval: float | None
) -> None:
    """Wait until the event TOKEN is no longer being processed."""
    settings: Settings = ctx.obj["settings"]
    wait_config = settings.wait_config

    result = _run(
        ctx,
        lambda client: client.event.wait(
            token,
            timeout=timeout if timeout is not None else wait_config.timeout,
            interval=interval if interval is not None else wait_config.interval,
        ),
    )
    click.echo(f"done after {result.checks} checks")


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
