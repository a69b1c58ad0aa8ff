"""
Prediction history sinks.

The assessment service appends one HistoryEntry per scored condition. Where
entries end up is up to the caller; two sinks ship here:

    InMemoryHistory  – a plain list, for tests and embedding
    JsonFileHistory  – the whole list stored as one JSON blob
"""
from __future__ import annotations

import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Protocol, Union

from pydantic import TypeAdapter, ValidationError

from riskcheck import config
from riskcheck.models import HistoryEntry
from riskcheck.utils import HistoryError, get_logger

logger = get_logger(__name__)

_ENTRY_LIST = TypeAdapter(List[HistoryEntry])


class HistorySink(Protocol):
    """Append-only store of past predictions."""

    def append(self, entry: HistoryEntry) -> None: ...

    def entries(self) -> List[HistoryEntry]: ...


class IdGenerator:
    """
    Millisecond-epoch ids that never repeat or go backwards.

    Two predictions in the same millisecond get consecutive ids.
    """

    def __init__(self, clock: Callable[[], float] = time.time, last: int = 0):
        self._clock = clock
        self._last = last

    def __call__(self) -> int:
        candidate = int(self._clock() * 1000)
        self._last = candidate if candidate > self._last else self._last + 1
        return self._last


def make_entry(
    entry_id: int,
    condition_name: str,
    score: int,
    tier: str,
    measurements: Mapping[str, Any],
    timestamp: Optional[datetime] = None,
) -> HistoryEntry:
    return HistoryEntry(
        id=entry_id,
        condition_name=condition_name,
        score=score,
        tier=tier,
        measurements=dict(measurements),
        timestamp=timestamp or datetime.now(timezone.utc),
    )


class InMemoryHistory:

    def __init__(self):
        self._entries: List[HistoryEntry] = []

    def append(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class JsonFileHistory:
    """
    History kept in a single JSON file.

    Every append loads the full list, adds the entry and writes the list
    back. A missing file is an empty history.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path or config.HISTORY_PATH)

    def entries(self) -> List[HistoryEntry]:
        if not self.path.exists():
            return []
        try:
            return _ENTRY_LIST.validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as exc:
            raise HistoryError(
                f"Could not load history: {exc}",
                location=str(self.path),
            ) from exc

    def append(self, entry: HistoryEntry) -> None:
        history = self.entries()
        history.append(entry)
        # Write beside the target, then swap it in; a failed write leaves the
        # previous file untouched.
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(_ENTRY_LIST.dump_json(history, indent=2))
            tmp_path.replace(self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise HistoryError(
                f"Could not save history: {exc}",
                location=str(self.path),
            ) from exc
        logger.debug(f"JsonFileHistory: {len(history)} entries saved to {self.path}")
