"""Finance domain: transactions, payment channels and accounts.

Payment channels and account types are closed sets, so each is an Enum
whose members carry their own behaviour instead of a class hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from recordbook.domain.exceptions import ErrorKind, ValidationError
from recordbook.domain.result import Result


@dataclass(frozen=True)
class Transaction:

    id: int
    date: datetime
    amount: Decimal
    category: str

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Transaction amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount <= Decimal("0"):
            raise ValidationError(
                f"Transaction amount must be positive, got {self.amount}"
            )


class PaymentChannel(Enum):
    BANK_TRANSFER = "BANK_TRANSFER"
    MOBILE_MONEY = "MOBILE_MONEY"
    CRYPTO_WALLET = "CRYPTO_WALLET"

    def process(self, transaction: Transaction) -> str:
        """Describe how this channel handled *transaction*."""
        label, verb = _CHANNEL_WORDING[self]
        return (
            f"[{label}] {verb} {transaction.amount:.2f} "
            f"for {transaction.category}"
        )


_CHANNEL_WORDING: dict[PaymentChannel, tuple[str, str]] = {
    PaymentChannel.BANK_TRANSFER: ("Bank Transfer", "Processed"),
    PaymentChannel.MOBILE_MONEY: ("Mobile Money", "Sent"),
    PaymentChannel.CRYPTO_WALLET: ("Crypto Wallet", "Received"),
}


class AccountType(Enum):
    STANDARD = "STANDARD"
    SAVINGS = "SAVINGS"


@dataclass
class Account:
    """A bank account whose balance moves as transactions are applied.

    STANDARD accounts always deduct and may go negative.  SAVINGS
    accounts refuse any transaction larger than the current balance.
    """

    account_number: str
    balance: Decimal
    account_type: AccountType = AccountType.STANDARD

    def apply_transaction(self, transaction: Transaction) -> Result[Decimal]:
        """Deduct *transaction* from the balance.

        Returns the new balance, or an INSUFFICIENT_FUNDS failure when a
        savings account cannot cover the amount.
        """
        if self.account_type == AccountType.SAVINGS:
            if transaction.amount > self.balance:
                return Result.failure(ErrorKind.INSUFFICIENT_FUNDS, "Insufficient funds")
            self.balance -= transaction.amount
            return Result.success(
                self.balance,
                f"Transaction successful. Updated balance: {self.balance:.2f}",
            )

        self.balance -= transaction.amount
        return Result.success(
            self.balance, f"Transaction applied. New balance: {self.balance:.2f}"
        )
