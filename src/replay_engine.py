import logging
from typing import Iterable, List

from models import ClientAccount, LedgerEvent, ProcessingResult, ProcessingStats
from record_source import read_events
from state_manager import StateManager
from transaction_processor import TransactionProcessor

logger = logging.getLogger(__name__)


class ReplayEngine:
    """
    Replays an ordered event stream against client accounts.
    Events are applied one at a time, in source order.
    """

    def __init__(self):
        self._state = StateManager()
        self._processor = TransactionProcessor(self._state)
        self._stats = ProcessingStats()

    @property
    def state(self) -> StateManager:
        return self._state

    @property
    def stats(self) -> ProcessingStats:
        return self._stats

    def process_file(self, filepath: str) -> List[ClientAccount]:
        """Process CSV file and return final account states."""
        logger.info(f"Replaying events from {filepath}")
        return self.run(read_events(filepath, on_malformed=self._stats.record_malformed))

    def run(self, events: Iterable[LedgerEvent]) -> List[ClientAccount]:
        """Apply every event and return accounts in ascending client id order."""
        for event in events:
            self._replay_event(event)

        logger.info(f"Replay complete: {self._stats}")
        return self._state.get_all_accounts()

    def _replay_event(self, event: LedgerEvent) -> None:
        if self._processor.is_invalid_lookup_event(event):
            logger.debug(f"No transaction exists in lookup for: {event}")
            self._stats.record(ProcessingResult.UNKNOWN_TRANSACTION)
            return

        result = self._processor.process_event(event)
        self._stats.record(result)

        # Only deposits and withdrawals are recorded, whether or not they applied.
        if not self._processor.needs_transaction_lookup(event.action_type):
            self._state.ledger.record(
                event.transaction_id,
                event.amount if event.amount is not None else 0,
            )
