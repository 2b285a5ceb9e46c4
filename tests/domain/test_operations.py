"""Tests for acctmgr.domain.operations."""

import pytest

from acctmgr.domain.models import MAXIMUM_BALANCE, Money
from acctmgr.domain.operations import (
    AccountOperations,
    OperationKind,
    Outcome,
    apply_credit,
    apply_debit,
)
from acctmgr.store.ledger import LedgerStore


def make_operations(balance: int = 100000) -> AccountOperations:
    return AccountOperations(LedgerStore(Money(balance)))


class TestApplyCredit:
    """Tests for apply_credit."""

    def test_credit_within_maximum(self) -> None:
        """Should add the amount."""
        result = apply_credit(Money(100000), Money(5000))
        assert result.outcome is Outcome.CREDITED
        assert result.balance == Money(105000)
        assert result.amount == Money(5000)

    def test_credit_up_to_exact_maximum(self) -> None:
        """Should allow reaching the maximum exactly."""
        result = apply_credit(Money(100000), Money(99899999))
        assert result.outcome is Outcome.CREDITED
        assert result.balance == MAXIMUM_BALANCE

    def test_credit_past_maximum(self) -> None:
        """Should reject and keep the balance."""
        result = apply_credit(Money(100000), Money(99900000))
        assert result.outcome is Outcome.REJECTED_OVERFLOW
        assert result.balance == Money(100000)
        assert not result.accepted

    def test_custom_maximum(self) -> None:
        """Should honour a lower maximum."""
        result = apply_credit(Money(900), Money(200), maximum=Money(1000))
        assert result.outcome is Outcome.REJECTED_OVERFLOW


class TestApplyDebit:
    """Tests for apply_debit."""

    def test_debit_with_sufficient_funds(self) -> None:
        """Should subtract the amount."""
        result = apply_debit(Money(100000), Money(20000))
        assert result.outcome is Outcome.DEBITED
        assert result.balance == Money(80000)

    def test_debit_whole_balance(self) -> None:
        """Should allow debiting the full balance down to zero."""
        result = apply_debit(Money(100000), Money(100000))
        assert result.outcome is Outcome.DEBITED
        assert result.balance == Money(0)

    def test_debit_more_than_balance(self) -> None:
        """Should reject and keep the balance."""
        result = apply_debit(Money(0), Money(1))
        assert result.outcome is Outcome.REJECTED_INSUFFICIENT_FUNDS
        assert result.balance == Money(0)


class TestView:
    """Tests for AccountOperations.view."""

    def test_view_fresh_ledger(self) -> None:
        """Should report the opening balance."""
        result = make_operations().view()
        assert result.outcome is Outcome.VIEWED
        assert result.balance == Money(100000)
        assert result.message == "Current balance: 1000.00"

    def test_view_never_changes_balance(self) -> None:
        """Should be idempotent."""
        operations = make_operations(12345)
        for _ in range(5):
            operations.view()
        assert operations.store.read() == Money(12345)


class TestCredit:
    """Tests for AccountOperations.credit."""

    def test_credit_fresh_ledger(self) -> None:
        """Should credit 50.00 onto 1000.00."""
        operations = make_operations()
        result = operations.credit("50.00")
        assert result.outcome is Outcome.CREDITED
        assert result.message == "Amount credited. New balance: 1050.00"
        assert operations.store.read() == Money(105000)

    def test_credit_to_maximum(self) -> None:
        """Should accept 998999.99 from 1000.00."""
        operations = make_operations()
        result = operations.credit("998999.99")
        assert result.accepted
        assert result.message == "Amount credited. New balance: 999999.99"
        assert operations.store.read() == MAXIMUM_BALANCE

    def test_credit_past_maximum(self) -> None:
        """Should reject 999000.00 from 1000.00 and leave the store alone."""
        operations = make_operations()
        result = operations.credit("999000.00")
        assert result.outcome is Outcome.REJECTED_OVERFLOW
        assert result.message == "Error: Balance would exceed maximum allowed value of $999,999.99"
        assert operations.store.read() == Money(100000)

    def test_credit_rounds_amount(self) -> None:
        """Should store the rounded amount."""
        operations = make_operations()
        operations.credit("1.005")
        assert operations.store.read() == Money(100101)

    @pytest.mark.parametrize("raw", ["abc", "", "-5"])
    def test_credit_invalid_input(self, raw: str) -> None:
        """Should reject invalid amounts without writing."""
        operations = make_operations()
        result = operations.credit(raw)
        assert result.outcome is Outcome.REJECTED_INVALID_INPUT
        assert result.message == "Invalid amount. Please enter a positive number."
        assert result.amount is None
        assert operations.store.read() == Money(100000)


class TestDebit:
    """Tests for AccountOperations.debit."""

    def test_debit_whole_balance(self) -> None:
        """Should debit 1000.00 from 1000.00 to exactly zero."""
        operations = make_operations()
        result = operations.debit("1000.00")
        assert result.outcome is Outcome.DEBITED
        assert result.message == "Amount debited. New balance: 0.00"
        assert operations.store.read() == Money(0)

    def test_debit_insufficient_funds(self) -> None:
        """Should reject 600.00 from 500.00."""
        operations = make_operations(50000)
        result = operations.debit("600.00")
        assert result.outcome is Outcome.REJECTED_INSUFFICIENT_FUNDS
        assert result.message == "Insufficient funds for this debit."
        assert operations.store.read() == Money(50000)

    def test_debit_from_zero(self) -> None:
        """Should reject 0.01 from 0.00."""
        operations = make_operations(0)
        result = operations.debit("0.01")
        assert result.outcome is Outcome.REJECTED_INSUFFICIENT_FUNDS
        assert operations.store.read() == Money(0)

    def test_debit_invalid_input(self) -> None:
        """Should reject non-numeric amounts without writing."""
        operations = make_operations()
        result = operations.debit("ten")
        assert result.outcome is Outcome.REJECTED_INVALID_INPUT
        assert operations.store.read() == Money(100000)


class TestSequences:
    """Tests for several operations against one ledger."""

    def test_credit_debit_credit(self) -> None:
        """Should end at 1200.00."""
        operations = make_operations()
        operations.credit("100.00")
        operations.debit("200.00")
        result = operations.credit("300.00")
        assert result.balance == Money(120000)
        assert operations.store.read() == Money(120000)

    def test_failed_debit_then_credit_enables_debit(self) -> None:
        """Should recover after a rejection."""
        operations = make_operations(10000)
        assert not operations.debit("150.00").accepted
        assert operations.credit("50.00").accepted
        assert operations.debit("150.00").accepted
        assert operations.store.read() == Money(0)

    def test_ledgers_are_independent(self) -> None:
        """Should not share state between stores."""
        first = make_operations()
        second = make_operations()
        first.credit("500.00")
        assert second.view().balance == Money(100000)


class TestProcess:
    """Tests for AccountOperations.process."""

    def test_dispatches_each_kind(self) -> None:
        """Should route tagged requests."""
        operations = make_operations()
        assert operations.process(OperationKind.VIEW).outcome is Outcome.VIEWED
        assert operations.process(OperationKind.CREDIT, "10").outcome is Outcome.CREDITED
        assert operations.process(OperationKind.DEBIT, "10").outcome is Outcome.DEBITED

    def test_missing_amount(self) -> None:
        """Should raise when a credit or debit has no amount."""
        with pytest.raises(ValueError, match="credit requires an amount"):
            make_operations().process(OperationKind.CREDIT)
