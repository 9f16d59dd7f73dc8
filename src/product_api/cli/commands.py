"""Operational commands for the Product API."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.product_api.runtime.context import get_config

console = Console()


def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (defaults to app.host)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (defaults to app.port)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold]Product API[/bold]\n"
            f"Environment: [cyan]{config.app.environment}[/cyan]\n"
            f"Listening on: [cyan]http://{bind_host}:{bind_port}{config.app.api_prefix}[/cyan]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.product_api.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )


def init_db() -> None:
    """Create the product table if it does not exist."""
    from src.product_api.runtime.init_db import init_db as _init_db

    _init_db()
    console.print("[green]Database initialized.[/green]")


def check_db() -> None:
    """Check database connectivity and print pool status."""
    from src.product_api.core.services import DbSessionService

    service = DbSessionService()
    healthy = service.health_check()

    table = Table(title="Database")
    table.add_column("Check")
    table.add_column("Value")
    table.add_row("status", "[green]healthy[/green]" if healthy else "[red]unhealthy[/red]")
    for key, value in service.get_pool_status().items():
        table.add_row(key, str(value))
    console.print(table)
    service.dispose()

    if not healthy:
        raise typer.Exit(1)
