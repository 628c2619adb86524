import logging
from typing import Optional, assert_never

from models import ActionType, ClientAccount, LedgerEvent, ProcessingResult, TransitionResult
from state_manager import StateManager

logger = logging.getLogger(__name__)

LOOKUP_ACTIONS = frozenset({ActionType.DISPUTE, ActionType.CHARGEBACK, ActionType.RESOLVE})


def apply_event(account: ClientAccount, action_type: ActionType, amount: Optional[int]) -> TransitionResult:
    """Dispatch one action to the matching account transition. A missing amount counts as zero."""
    value = amount if amount is not None else 0

    match action_type:
        case ActionType.WITHDRAWAL:
            return account.withdraw(value)
        case ActionType.DEPOSIT:
            return account.deposit(value)
        case ActionType.DISPUTE:
            return account.dispute(value)
        case ActionType.CHARGEBACK:
            return account.chargeback(value)
        case ActionType.RESOLVE:
            return account.resolve(value)
        case _:
            assert_never(action_type)


class TransactionProcessor:
    """
    Applies events to accounts held in a StateManager.

    Dispute, resolve and chargeback carry no amount of their own; the amount
    of the referenced deposit or withdrawal is taken from the ledger instead.
    Populating the ledger is the caller's job.
    """

    def __init__(self, state: StateManager):
        self._state = state

    @staticmethod
    def needs_transaction_lookup(action_type: ActionType) -> bool:
        return action_type in LOOKUP_ACTIONS

    def is_invalid_lookup_event(self, event: LedgerEvent) -> bool:
        """True for a dispute-family event whose transaction was never recorded."""
        return self.needs_transaction_lookup(event.action_type) and not self._state.ledger.contains(
            event.transaction_id
        )

    def process_event(self, event: LedgerEvent) -> ProcessingResult:
        """
        Process a single event.

        Returns:
            SUCCESS: The transition was applied
            REJECTED: A guard failed, the account is unchanged
            UNKNOWN_TRANSACTION: Lookup-required event with no ledger entry, dropped
        """
        account = self._state.get_or_create_account(event.client_id)

        if self.needs_transaction_lookup(event.action_type):
            original_amount = self._state.ledger.lookup(event.transaction_id)
            if original_amount is None:
                logger.info(f"Non existing transaction for: {event}")
                return ProcessingResult.UNKNOWN_TRANSACTION

            event = LedgerEvent(
                action_type=event.action_type,
                client_id=event.client_id,
                transaction_id=event.transaction_id,
                amount=original_amount,
            )
            logger.debug(f"Amount resolved from ledger: {event}")
        else:
            logger.debug(f"Event consumed: {event}")

        result = apply_event(account, event.action_type, event.amount)
        if not result.applied:
            logger.info(
                f"Client {account.client_id}: cannot {event.action_type.value} {event.amount} "
                f"(tx {event.transaction_id}): {result.value}"
            )
            return ProcessingResult.REJECTED

        return ProcessingResult.SUCCESS
