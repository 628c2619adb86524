import logging
import os
import sys

from replay_engine import ReplayEngine
from report import write_snapshot

LOG_LEVEL_ENV = "LEDGER_LOG_LEVEL"


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: python main.py <input.csv>", file=sys.stderr)
        return 1

    configure_logging()

    filepath = args[0]
    engine = ReplayEngine()
    try:
        accounts = engine.process_file(filepath)
    except FileNotFoundError:
        print(f"File does not exist: {filepath}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read {filepath}: {e.strerror or e}", file=sys.stderr)
        return 1

    write_snapshot(accounts, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
