from dataclasses import dataclass
from enum import Enum
from typing import Optional


CLIENT_ID_MAX = 0xFFFF
TRANSACTION_ID_MIN = -(2 ** 31)
TRANSACTION_ID_MAX = 2 ** 31 - 1


class ActionType(Enum):
    WITHDRAWAL = "withdrawal"
    DEPOSIT = "deposit"
    DISPUTE = "dispute"
    CHARGEBACK = "chargeback"
    RESOLVE = "resolve"


class TransitionResult(Enum):
    APPLIED = "applied"
    ACCOUNT_LOCKED = "account_locked"
    INSUFFICIENT_AVAILABLE = "insufficient_available"
    INSUFFICIENT_HELD = "insufficient_held"

    @property
    def applied(self) -> bool:
        return self is TransitionResult.APPLIED


class ProcessingResult(Enum):
    SUCCESS = "success"
    REJECTED = "rejected"
    UNKNOWN_TRANSACTION = "unknown_transaction"


@dataclass(frozen=True)
class LedgerEvent:
    """A single input event. Amounts are fixed-point integers (1/10000 units)."""

    action_type: ActionType
    client_id: int
    transaction_id: int
    amount: Optional[int] = None

    def __repr__(self) -> str:
        return f"LedgerEvent({self.action_type.value}, client={self.client_id}, tx={self.transaction_id}, amount={self.amount})"


@dataclass
class ClientAccount:
    """
    Balances for one client, in fixed-point units.

    Every transition checks its guard before touching state, so a rejected
    transition leaves the account exactly as it was.
    """

    client_id: int
    available: int = 0
    held: int = 0
    locked: bool = False

    @property
    def total(self) -> int:
        return self.available + self.held

    def deposit(self, amount: int) -> TransitionResult:
        if self.locked:
            return TransitionResult.ACCOUNT_LOCKED

        self.available += amount
        return TransitionResult.APPLIED

    def withdraw(self, amount: int) -> TransitionResult:
        if self.locked:
            return TransitionResult.ACCOUNT_LOCKED

        # held funds are not withdrawable
        if amount > self.available:
            return TransitionResult.INSUFFICIENT_AVAILABLE

        self.available -= amount
        return TransitionResult.APPLIED

    def dispute(self, amount: int) -> TransitionResult:
        # Lock does not apply here: a locked account can still be disputed.
        if amount > self.available:
            return TransitionResult.INSUFFICIENT_AVAILABLE

        self.available -= amount
        self.held += amount
        return TransitionResult.APPLIED

    def resolve(self, amount: int) -> TransitionResult:
        if self.held == 0 or amount > self.held:
            return TransitionResult.INSUFFICIENT_HELD

        self.held -= amount
        self.available += amount
        self.locked = False
        return TransitionResult.APPLIED

    def chargeback(self, amount: int) -> TransitionResult:
        if self.held == 0 or amount > self.held:
            return TransitionResult.INSUFFICIENT_HELD

        self.held -= amount
        self.locked = True
        return TransitionResult.APPLIED


class ProcessingStats:
    """Counters for a single replay run."""

    def __init__(self):
        self.processed = 0
        self.rejected = 0
        self.unknown_transaction = 0
        self.malformed = 0

    def record(self, result: ProcessingResult) -> None:
        if result == ProcessingResult.SUCCESS:
            self.processed += 1
        elif result == ProcessingResult.REJECTED:
            self.rejected += 1
        elif result == ProcessingResult.UNKNOWN_TRANSACTION:
            self.unknown_transaction += 1

    def record_malformed(self) -> None:
        self.malformed += 1

    def __repr__(self) -> str:
        return (
            f"ProcessingStats(processed={self.processed}, rejected={self.rejected}, "
            f"unknown_transaction={self.unknown_transaction}, malformed={self.malformed})"
        )
