"""Data Transfer Objects — plain containers handed from handlers to the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from recordbook.domain.exceptions import ErrorKind


@dataclass(frozen=True)
class TransactionOutcomeDTO:
    """Output: what happened to one transaction during a finance run."""

    transaction_id: int
    channel_message: str
    account_message: str
    applied: bool
    error: ErrorKind | None = None


@dataclass(frozen=True)
class FinanceRunDTO:

    account_number: str
    opening_balance: Decimal
    closing_balance: Decimal
    outcomes: list[TransactionOutcomeDTO]
