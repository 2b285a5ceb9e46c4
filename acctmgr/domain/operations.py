"""Account operations: validation and application of view, credit and debit.

This module contains the business rules for the ledger:
- Amounts are parsed and rounded to cents before any check
- A credit may not push the balance above the maximum
- A debit may not take more than the current balance
- A rejected operation never writes to the store

Rejections are ordinary outcomes carried by OperationResult, not exceptions.
All monetary amounts are in cents (Money type).
"""

import logging
from dataclasses import dataclass
from enum import Enum

from acctmgr.domain.amounts import format_money, parse_amount
from acctmgr.domain.models import MAXIMUM_BALANCE, MINIMUM_BALANCE, Money
from acctmgr.store.ledger import LedgerStore

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid amount. Please enter a positive number."
OVERFLOW_MESSAGE = "Error: Balance would exceed maximum allowed value of $999,999.99"
INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for this debit."


class OperationKind(Enum):
    """The three operations a ledger supports."""

    VIEW = "view"
    CREDIT = "credit"
    DEBIT = "debit"


class Outcome(Enum):
    """Tagged outcome of an operation."""

    VIEWED = "viewed"
    CREDITED = "credited"
    DEBITED = "debited"
    REJECTED_OVERFLOW = "rejected_overflow"
    REJECTED_INSUFFICIENT_FUNDS = "rejected_insufficient_funds"
    REJECTED_INVALID_INPUT = "rejected_invalid_input"


@dataclass(frozen=True)
class OperationResult:
    """Immutable result of a ledger operation.

    balance is the ledger balance after the operation, which is the
    unchanged balance when the operation was rejected.
    """

    outcome: Outcome
    balance: Money
    message: str
    amount: Money | None = None

    @property
    def accepted(self) -> bool:
        return self.outcome in (Outcome.VIEWED, Outcome.CREDITED, Outcome.DEBITED)


def view_result(balance: Money) -> OperationResult:
    """Build the result of viewing a balance."""
    return OperationResult(
        outcome=Outcome.VIEWED,
        balance=balance,
        message=f"Current balance: {format_money(balance)}",
    )


def invalid_input_result(balance: Money) -> OperationResult:
    """Build the result of an amount that could not be parsed."""
    return OperationResult(
        outcome=Outcome.REJECTED_INVALID_INPUT,
        balance=balance,
        message=INVALID_INPUT_MESSAGE,
    )


def apply_credit(balance: Money, amount: Money, maximum: Money = MAXIMUM_BALANCE) -> OperationResult:
    """Calculate the result of crediting an amount.

    Args:
        balance: Current balance in cents.
        amount: Non-negative amount to credit in cents.
        maximum: Largest balance allowed in cents.

    Returns:
        CREDITED with the new balance, or REJECTED_OVERFLOW with the
        balance unchanged.
    """
    new_balance = Money(balance + amount)

    if new_balance > maximum:
        return OperationResult(
            outcome=Outcome.REJECTED_OVERFLOW,
            balance=balance,
            message=OVERFLOW_MESSAGE,
            amount=amount,
        )

    return OperationResult(
        outcome=Outcome.CREDITED,
        balance=new_balance,
        message=f"Amount credited. New balance: {format_money(new_balance)}",
        amount=amount,
    )


def apply_debit(balance: Money, amount: Money) -> OperationResult:
    """Calculate the result of debiting an amount.

    Debiting the whole balance is allowed and leaves exactly zero.

    Args:
        balance: Current balance in cents.
        amount: Non-negative amount to debit in cents.

    Returns:
        DEBITED with the new balance, or REJECTED_INSUFFICIENT_FUNDS with
        the balance unchanged.
    """
    if balance - amount < MINIMUM_BALANCE:
        return OperationResult(
            outcome=Outcome.REJECTED_INSUFFICIENT_FUNDS,
            balance=balance,
            message=INSUFFICIENT_FUNDS_MESSAGE,
            amount=amount,
        )

    new_balance = Money(balance - amount)
    return OperationResult(
        outcome=Outcome.DEBITED,
        balance=new_balance,
        message=f"Amount debited. New balance: {format_money(new_balance)}",
        amount=amount,
    )


class AccountOperations:
    """Applies view, credit and debit requests to one ledger store.

    The operations never perform I/O: they take an already obtained raw
    amount string and return an OperationResult. The store is written only
    after every check has passed.
    """

    def __init__(self, store: LedgerStore, maximum: Money = MAXIMUM_BALANCE) -> None:
        self.store = store
        self.maximum = maximum

    def view(self) -> OperationResult:
        return view_result(self.store.read())

    def credit(self, raw_input: str) -> OperationResult:
        balance = self.store.read()

        amount = parse_amount(raw_input)
        if amount is None:
            logger.info("Rejected credit: invalid amount %r", raw_input)
            return invalid_input_result(balance)

        result = apply_credit(balance, amount, self.maximum)
        if result.accepted:
            self.store.write(result.balance)
            logger.debug("Credited %s, balance now %s", format_money(amount), format_money(result.balance))
        else:
            logger.info("Rejected credit of %s: balance would exceed maximum", format_money(amount))
        return result

    def debit(self, raw_input: str) -> OperationResult:
        balance = self.store.read()

        amount = parse_amount(raw_input)
        if amount is None:
            logger.info("Rejected debit: invalid amount %r", raw_input)
            return invalid_input_result(balance)

        result = apply_debit(balance, amount)
        if result.accepted:
            self.store.write(result.balance)
            logger.debug("Debited %s, balance now %s", format_money(amount), format_money(result.balance))
        else:
            logger.info("Rejected debit of %s: insufficient funds", format_money(amount))
        return result

    def process(self, kind: OperationKind, raw_input: str | None = None) -> OperationResult:
        """Dispatch a tagged request.

        Args:
            kind: Operation to perform.
            raw_input: Amount string, required for CREDIT and DEBIT.

        Returns:
            Result of the operation.

        Raises:
            ValueError: If an amount is missing for CREDIT or DEBIT.
        """
        if kind is OperationKind.VIEW:
            return self.view()

        if raw_input is None:
            raise ValueError(f"{kind.value} requires an amount")

        if kind is OperationKind.CREDIT:
            return self.credit(raw_input)
        return self.debit(raw_input)
