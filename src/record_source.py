import csv
import logging
from typing import Callable, Dict, Iterator, Optional

from amount_codec import to_fixed_point
from models import CLIENT_ID_MAX, TRANSACTION_ID_MAX, TRANSACTION_ID_MIN, ActionType, LedgerEvent

logger = logging.getLogger(__name__)


def _parse_int(text: str) -> int:
    # int() would also accept digit separators such as "1_000"
    if "_" in text:
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def parse_csv_row(row: Dict[Optional[str], Optional[str]]) -> Optional[LedgerEvent]:
    """Parse CSV row into LedgerEvent. Returns None for malformed rows."""
    try:
        normalized = {
            k.strip(): (v or "").strip()
            for k, v in row.items()
            if isinstance(k, str)
        }

        action_type_str = normalized["type"].lower()
        client_id = _parse_int(normalized["client"])
        transaction_id = _parse_int(normalized["tx"])

        if not 0 <= client_id <= CLIENT_ID_MAX:
            raise ValueError(f"client id out of range: {client_id}")
        if not TRANSACTION_ID_MIN <= transaction_id <= TRANSACTION_ID_MAX:
            raise ValueError(f"transaction id out of range: {transaction_id}")

        amount = None
        amount_str = normalized.get("amount", "")
        if amount_str:
            amount = to_fixed_point(amount_str)

        return LedgerEvent(
            action_type=ActionType(action_type_str),
            client_id=client_id,
            transaction_id=transaction_id,
            amount=amount,
        )
    except (KeyError, ValueError) as e:
        logger.warning(f"Failed to parse row {row}: {e}")
        return None


def read_events(filepath: str, on_malformed: Optional[Callable[[], None]] = None) -> Iterator[LedgerEvent]:
    """
    Lazily read LedgerEvents from a CSV file with a type,client,tx,amount header.
    Malformed rows are skipped; on_malformed is called once per skipped row.
    Undecodable bytes become U+FFFD, so the affected row fails to parse.
    """
    with open(filepath, "r", newline="", encoding="utf-8", errors="replace") as f:
        reader = csv.DictReader(f)
        for row in reader:
            event = parse_csv_row(row)
            if event is None:
                if on_malformed is not None:
                    on_malformed()
                continue
            yield event
