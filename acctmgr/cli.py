"""CLI entry point for acctmgr."""

import typer

from acctmgr.commands.admin import init_command
from acctmgr.commands.run import run_command

app = typer.Typer(
    name="acctmgr",
    help="Account Management System - view, credit and debit a single balance",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Account Management System - view, credit and debit a single balance."""
    if ctx.invoked_subcommand is None:
        run_command()


@app.command(name="run")
def run(
    opening_balance: str = typer.Option(None, "--opening-balance", help="Starting balance (default: 1000.00)"),
    config: str = typer.Option(None, "--config", "-c", help="Config file (default: ~/.config/acctmgr/config.toml)"),
    log_level: str = typer.Option(None, "--log-level", help="Log level written to stderr (default: WARNING)"),
) -> None:
    """Start the interactive account menu."""
    run_command(opening_balance, config, log_level)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the default configuration file."""
    init_command(force)


if __name__ == "__main__":
    app()
