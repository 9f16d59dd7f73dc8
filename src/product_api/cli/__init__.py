"""Main CLI application module."""

import typer

from .commands import check_db, init_db, serve

app = typer.Typer(
    help="Product API - serve the HTTP API and manage its database",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("serve")(serve)
app.command("init-db")(init_db)
app.command("check-db")(check_db)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
