"""Application service: Process Transactions use case.

Each transaction is sent through its payment channel, applied to the
account and recorded.  A rejected transaction (insufficient funds on a
savings account) is still recorded; only the balance is left alone.
"""

from __future__ import annotations

import logging

from recordbook.application.dto import FinanceRunDTO, TransactionOutcomeDTO
from recordbook.domain.exceptions import DomainException
from recordbook.domain.model.finance import Account, PaymentChannel, Transaction
from recordbook.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class FinanceHandler:

    def __init__(self, account: Account, transaction_repo: Repository[Transaction]) -> None:
        self._account = account
        self._transaction_repo = transaction_repo

    @property
    def account(self) -> Account:
        return self._account

    def process(self, transaction: Transaction, channel: PaymentChannel) -> TransactionOutcomeDTO:
        """Record, process and apply a single transaction.

        Recording comes first so a duplicate ID fails before the balance
        moves.  A transaction that cannot be recorded comes back as a
        failed outcome with no channel message.
        """
        try:
            self._transaction_repo.add(transaction)
        except DomainException as exc:
            logger.warning("Transaction %d rejected: %s", transaction.id, exc)
            return TransactionOutcomeDTO(
                transaction_id=transaction.id,
                channel_message="",
                account_message=str(exc),
                applied=False,
                error=exc.kind,
            )

        channel_message = channel.process(transaction)
        result = self._account.apply_transaction(transaction)

        if not result.ok:
            logger.warning(
                "Transaction %d not applied to %s: %s",
                transaction.id, self._account.account_number, result.message,
            )
        return TransactionOutcomeDTO(
            transaction_id=transaction.id,
            channel_message=channel_message,
            account_message=result.message,
            applied=result.ok,
            error=result.error,
        )

    def run(self, batch: list[tuple[Transaction, PaymentChannel]]) -> FinanceRunDTO:
        opening = self._account.balance
        outcomes = [self.process(txn, channel) for txn, channel in batch]
        logger.info(
            "Processed %d transactions on %s", len(outcomes), self._account.account_number
        )
        return FinanceRunDTO(
            account_number=self._account.account_number,
            opening_balance=opening,
            closing_balance=self._account.balance,
            outcomes=outcomes,
        )

    def transactions(self) -> list[Transaction]:
        return self._transaction_repo.list_all()
