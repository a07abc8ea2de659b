"""Server management commands."""

import subprocess
import sys

import click

from conduit_service.cli.utils import error, info, success, warning
from conduit_service.core.settings import get_app_settings

APP_PATH = "conduit_service.app.main:app"


def build_uvicorn_command(
    host: str,
    port: int,
    *,
    reload: bool,
    workers: int,
    log_level: str,
) -> list[str]:
    """Assemble the uvicorn argv for the API application."""
    cmd = [
        "uvicorn",
        APP_PATH,
        "--host",
        host,
        "--port",
        str(port),
        "--log-level",
        log_level,
    ]
    if reload:
        cmd.append("--reload")
    else:
        cmd.extend(["--workers", str(workers)])
    return cmd


@click.group(name="server")
def server() -> None:
    """Server management commands."""


@server.command()
@click.option("--host", default=None, help="Host to bind (default: APP_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind (default: APP_PORT)")
@click.option(
    "--reload/--no-reload",
    default=True,
    help="Enable auto-reload on code changes",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (ignored with --reload)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["critical", "error", "warning", "info", "debug", "trace"]),
    help="Uvicorn log level",
)
def run(
    host: str | None,
    port: int | None,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Run the API server with uvicorn."""
    settings = get_app_settings()
    host = host or settings.host
    port = port or settings.port

    if reload and workers > 1:
        warning("--reload is incompatible with --workers > 1. Setting workers to 1.")
        workers = 1

    info(f"Server will run at: http://{host}:{port}{settings.api_prefix}/articles")
    info(f"Environment: {settings.environment}")

    cmd = build_uvicorn_command(
        host, port, reload=reload, workers=workers, log_level=log_level
    )
    success("Starting uvicorn...")
    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        info("Shutting down server...")
    except (OSError, subprocess.CalledProcessError) as e:
        error(f"Failed to start server: {e}")
        sys.exit(1)
