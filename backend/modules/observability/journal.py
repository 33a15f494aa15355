"""
modules/observability/journal.py
---------------------------------
Per-session record of what a visitor did on the explorer page.

Every PageController transition (load, marker click, close, add to trip,
view more, dispose) becomes one line in  logs/<session_id>.jsonl :

    {"at": "2024-05-01T09:30:00+00:00", "session_id": "3f2c...",
     "event": "marker_click", "state": "selected", "attraction_id": 2}

Enabled for HTTP sessions by INTERACTION_LOG_ENABLED.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import IO

# backend/logs
_DEFAULT_DIR: Path = Path(__file__).resolve().parents[2] / "logs"


class InteractionJournal:
    """Append-only JSONL journal, one file per explorer session."""

    def __init__(self, directory: Path | str | None = None) -> None:
        self.directory = Path(directory) if directory else _DEFAULT_DIR
        self._lock = threading.Lock()
        self._files: dict[str, IO[str]] = {}

    def path_for(self, session_id: str) -> Path:
        return self.directory / f"{session_id}.jsonl"

    def append(self, session_id: str, event: str, fields: dict) -> None:
        entry = {
            "at": datetime.now(timezone.utc).isoformat(),
            "session_id": session_id,
            "event": event,
            **fields,
        }
        line = json.dumps(entry, default=str, ensure_ascii=False)

        with self._lock:
            out = self._files.get(session_id)
            if out is None:
                self.directory.mkdir(parents=True, exist_ok=True)
                out = self.path_for(session_id).open("a", encoding="utf-8")
                self._files[session_id] = out
            out.write(line + "\n")
            out.flush()

    def entries(self, session_id: str) -> list[dict]:
        """Everything journaled for `session_id`, oldest first."""
        path = self.path_for(session_id)
        if not path.exists():
            return []
        with path.open(encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]

    def close(self, session_id: str | None = None) -> None:
        """Release the file for one session, or for all of them."""
        with self._lock:
            if session_id is not None:
                targets = [self._files.pop(session_id)] if session_id in self._files else []
            else:
                targets = list(self._files.values())
                self._files.clear()
        for out in targets:
            out.close()
