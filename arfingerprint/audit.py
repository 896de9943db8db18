"""JSONL audit trail for fingerprint runs."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Iterator, Optional


class AuditLogger:
    """Minimal JSONL audit logger.

    Constructed without a path it discards every record, so callers never
    need to check whether auditing is enabled.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path
        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def log(self, level: str = "INFO", **fields: Any) -> None:
        if self.path is None:
            return
        record = {"ts": time.time(), "level": level, **fields}
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, sort_keys=True) + "\n")


def read_events(path: Path) -> Iterator[Dict[str, Any]]:
    """Yield the records of an audit log in write order."""
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            if line.strip():
                yield json.loads(line)


__all__ = ["AuditLogger", "read_events"]
