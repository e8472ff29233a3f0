"""Receipt trail on disk: one JSON receipt per line, never rewritten.

Two locks are involved:
    - append() holds flock on the trail itself while it checks and writes
    - session() holds flock on a sidecar ``<trail>.lock`` for as long as a
      caller needs read, replay and append to happen as one step

A store that has been replayed knows how many receipts it saw
(expected_count). Appending to a trail that has grown since is refused, so a
stale writer can never hand out an id someone else already used.
"""
import fcntl
import json
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

from ..constants import DEFAULT_LEDGER_PATH
from ..core.receipt import StopRule


def _count_lines(f) -> int:
    f.seek(0)
    return sum(1 for line in f if line.strip())


class LedgerStore:
    """Append-only receipt trail backed by a JSONL file.

    Attributes:
        path: Path to the JSONL file
        expected_count: Receipts this handle has seen, or None if it never
            replayed the trail (appends are then unchecked)
    """

    def __init__(self, path: str = DEFAULT_LEDGER_PATH):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)
        self.expected_count: int | None = None

    @property
    def lock_path(self) -> Path:
        return self.path.with_name(self.path.name + ".lock")

    @contextmanager
    def session(self) -> Iterator["LedgerStore"]:
        """Hold the trail exclusively until the block exits.

        Other processes entering session() on the same path wait here.
        """
        with open(self.lock_path, "a") as lock:
            fcntl.flock(lock.fileno(), fcntl.LOCK_EX)
            try:
                yield self
            finally:
                fcntl.flock(lock.fileno(), fcntl.LOCK_UN)

    def append(self, receipt: dict) -> str:
        """Append receipt to the trail.

        Returns:
            receipt_id (the payload_hash)

        Raises:
            StopRule: If the trail no longer holds expected_count receipts
        """
        line = json.dumps(receipt, sort_keys=True) + "\n"

        with open(self.path, "a+") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                if self.expected_count is not None:
                    found = _count_lines(f)
                    if found != self.expected_count:
                        raise StopRule(
                            f"Stale trail handle: replayed {self.expected_count} "
                            f"receipts, {self.path} now has {found}"
                        )
                f.write(line)
                f.flush()
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

        if self.expected_count is not None:
            self.expected_count += 1
        return receipt.get("payload_hash", "")

    def read_all(self) -> list[dict]:
        """Every receipt, in append order."""
        with open(self.path, "r") as f:
            return [json.loads(line) for line in f if line.strip()]

    def query(self, predicate: Callable[[dict], bool]) -> list[dict]:
        return [r for r in self.read_all() if predicate(r)]

    def count(self) -> int:
        return len(self.read_all())
