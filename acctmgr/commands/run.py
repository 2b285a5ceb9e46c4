"""Run command: start an interactive ledger session."""

import logging
import sys
import tomllib
from pathlib import Path

from rich.console import Console

from acctmgr.commands.session import run_session
from acctmgr.config import get_log_level, get_opening_balance, load_config, parse_opening_balance
from acctmgr.domain.amounts import format_money
from acctmgr.domain.operations import AccountOperations
from acctmgr.logging_config import setup_logging
from acctmgr.store.ledger import LedgerStore

logger = logging.getLogger(__name__)

console = Console()


def run_command(
    opening_balance: str | None = None,
    config_path: str | None = None,
    log_level: str | None = None,
) -> None:
    """Start a session on a fresh ledger.

    Command line options take precedence over the configuration file.
    """
    try:
        config = load_config(Path(config_path).expanduser() if config_path else None)
        setup_logging(log_level or get_log_level(config))

        if opening_balance is not None:
            balance = parse_opening_balance(opening_balance)
        else:
            balance = get_opening_balance(config)

    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read config: {e}[/red]", style="bold")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    logger.debug("Starting session with opening balance %s", format_money(balance))
    operations = AccountOperations(LedgerStore(balance))
    run_session(operations)
