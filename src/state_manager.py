import logging
from typing import Dict, List, Optional

from models import ClientAccount

logger = logging.getLogger(__name__)


class AccountStore:
    """Client accounts keyed by client id. Accounts are never removed."""

    def __init__(self):
        self._accounts: Dict[int, ClientAccount] = {}

    def get(self, client_id: int) -> Optional[ClientAccount]:
        return self._accounts.get(client_id)

    def get_or_create(self, client_id: int) -> ClientAccount:
        """Get existing account or create new one with zero balances."""
        account = self._accounts.get(client_id)
        if account is None:
            account = ClientAccount(client_id=client_id)
            self._accounts[client_id] = account
            logger.debug(f"Client created with id: {client_id}")
        return account

    def contains(self, client_id: int) -> bool:
        return client_id in self._accounts

    def sorted_accounts(self) -> List[ClientAccount]:
        """Return all accounts in ascending client id order (for final output)."""
        return [self._accounts[client_id] for client_id in sorted(self._accounts)]

    def __len__(self) -> int:
        return len(self._accounts)


class TransactionLedger:
    """
    Original amounts of deposits and withdrawals, keyed by transaction id.
    Dispute, resolve and chargeback look their amount up here.
    """

    def __init__(self):
        self._amounts: Dict[int, int] = {}

    def record(self, transaction_id: int, amount: int) -> None:
        self._amounts[transaction_id] = amount
        logger.debug(f"Transaction added: {transaction_id}")

    def lookup(self, transaction_id: int) -> Optional[int]:
        return self._amounts.get(transaction_id)

    def contains(self, transaction_id: int) -> bool:
        return transaction_id in self._amounts

    def __len__(self) -> int:
        return len(self._amounts)


class StateManager:
    """
    Owns all mutable state for one replay: the account store and the
    transaction ledger. Created empty, discarded with the engine.
    """

    def __init__(self):
        self.accounts = AccountStore()
        self.ledger = TransactionLedger()

    def get_or_create_account(self, client_id: int) -> ClientAccount:
        return self.accounts.get_or_create(client_id)

    def get_all_accounts(self) -> List[ClientAccount]:
        return self.accounts.sorted_accounts()
