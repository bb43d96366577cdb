"""Trace log recording conversion events."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List


@dataclass
class TraceLog:
    """Append timestamped conversion events to a log file."""

    path: Path
    events: List[str] = field(default_factory=list)

    def log(self, message: str) -> None:
        timestamp = datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
        entry = f"{timestamp} | {message}"
        self.events.append(entry)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(entry + "\n")
