"""Interactive menu session for the account ledger."""

import logging
import sys
from enum import Enum

import typer
from rich.console import Console

from acctmgr.domain.operations import AccountOperations, OperationKind, OperationResult

logger = logging.getLogger(__name__)

console = Console(highlight=False)

MENU_LINES = (
    "--------------------------------",
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    "--------------------------------",
)

CHOICE_PROMPT = "Enter your choice (1-4)"
AMOUNT_PROMPTS = {
    OperationKind.CREDIT: "Enter credit amount",
    OperationKind.DEBIT: "Enter debit amount",
}
INVALID_CHOICE_MESSAGE = "Invalid choice, please select 1-4."
GOODBYE_MESSAGE = "Exiting the program. Goodbye!"


class MenuChoice(Enum):
    """Menu entries keyed by the text the user types."""

    VIEW = "1"
    CREDIT = "2"
    DEBIT = "3"
    EXIT = "4"


MENU_OPERATIONS = {
    MenuChoice.VIEW: OperationKind.VIEW,
    MenuChoice.CREDIT: OperationKind.CREDIT,
    MenuChoice.DEBIT: OperationKind.DEBIT,
}


def say(message: str) -> None:
    """Print a literal line, with no rich markup interpretation."""
    console.print(message, markup=False)


def display_menu() -> None:
    for line in MENU_LINES:
        say(line)


def parse_choice(raw: str) -> MenuChoice | None:
    """Map a raw menu entry to a MenuChoice.

    Args:
        raw: Line typed by the user.

    Returns:
        The matching MenuChoice, or None if the entry is not 1-4.
    """
    try:
        return MenuChoice(raw.strip())
    except ValueError:
        return None


def prompt_line(text: str) -> str:
    """Prompt for a line of input; an empty line is returned as ''."""
    result: str = typer.prompt(text, type=str, default="", show_default=False)
    return result


def run_operation(operations: AccountOperations, kind: OperationKind) -> OperationResult:
    """Prompt for an amount when needed and run one operation."""
    if kind is OperationKind.VIEW:
        return operations.view()

    raw_amount = prompt_line(AMOUNT_PROMPTS[kind])
    return operations.process(kind, raw_amount)


def handle_choice(operations: AccountOperations, raw_choice: str) -> bool:
    """Handle one menu entry.

    Args:
        operations: Account operations bound to the session's ledger.
        raw_choice: Line typed at the menu prompt.

    Returns:
        True to keep looping, False when the user chose to exit.
    """
    choice = parse_choice(raw_choice)

    if choice is None:
        say(INVALID_CHOICE_MESSAGE)
        return True

    if choice is MenuChoice.EXIT:
        return False

    result = run_operation(operations, MENU_OPERATIONS[choice])
    say(result.message)
    return True


def run_session(operations: AccountOperations) -> None:
    """Show the menu and process choices until the user exits."""
    continue_flag = True

    try:
        while continue_flag:
            display_menu()
            raw_choice = prompt_line(CHOICE_PROMPT)
            continue_flag = handle_choice(operations, raw_choice)
    except OSError:
        logger.exception("Console I/O failed")
        console.print("[red]An error occurred, exiting[/red]", style="bold")
        sys.exit(1)

    say(GOODBYE_MESSAGE)
