import sys
from typing import Iterable, Iterator, Optional, TextIO

from amount_codec import format_amount
from models import ClientAccount

SNAPSHOT_HEADER = "client,available,held,total,locked"


def format_account_row(account: ClientAccount) -> str:
    return (
        f"{account.client_id},"
        f"{format_amount(account.available)},"
        f"{format_amount(account.held)},"
        f"{format_amount(account.total)},"
        f"{str(account.locked).lower()}"
    )


def render_snapshot(accounts: Iterable[ClientAccount]) -> Iterator[str]:
    """Yield the header line followed by one line per account, in the given order."""
    yield SNAPSHOT_HEADER
    for account in accounts:
        yield format_account_row(account)


def write_snapshot(accounts: Iterable[ClientAccount], stream: Optional[TextIO] = None) -> None:
    if stream is None:
        stream = sys.stdout
    for line in render_snapshot(accounts):
        print(line, file=stream)
