"""Web CLI commands."""

import click
import uvicorn
from cidadania_legal.providers.config import ConfigProvider


@click.group(name="web")
def web_group() -> None:
    """Manage the web interface."""
    pass


@web_group.command(name="serve")
@click.option("--host", default=None, help="Host to bind to. Defaults to WEB_HOST.")
@click.option("--port", default=None, type=int, help="Port to bind to. Defaults to WEB_PORT.")
@click.option("--reload", is_flag=True, help="Enable auto-reload.")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool) -> None:
    """Start the web server.

    Visitor sessions live in the server's memory, so a single process
    serves every visitor. The global --log-level, when given, takes
    precedence over LOG_LEVEL for the server logs too.

    Args:
        ctx: The Click context object.
        host: Host to bind to.
        port: Port to bind to.
        reload: Enable auto-reload.
    """
    config = ConfigProvider.get_config()
    if host is None:
        host = config.WEB_HOST
    if port is None:
        port = config.WEB_PORT
    log_level = getattr(ctx.obj, "log_level", None) or config.LOG_LEVEL

    click.secho(f"Serving Cidadania Legal on http://{host}:{port}", fg="green")
    uvicorn.run(
        "cidadania_legal.web.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level.lower(),
    )
