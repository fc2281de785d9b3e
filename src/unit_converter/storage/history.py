"""Bounded conversion history persisted as comma-separated lines."""

from __future__ import annotations

import csv
import logging
from collections import deque
from pathlib import Path
from typing import Deque, Iterator, List, Optional

from ..errors import StorageUnavailable
from ..formatting import format_timestamp
from ..records import ConversionRecord

logger = logging.getLogger(__name__)

MAX_HISTORY = 100
CSV_HEADER = ("From", "To", "Value", "Result", "Timestamp")


class HistoryStore:
    """Append-only ring of :class:`ConversionRecord` entries.

    When full, appending drops the oldest entry. With a ``path`` the whole log
    is rewritten after every mutation; ``path=None`` keeps it in memory only.
    """

    def __init__(self, path: Optional[Path] = None, *, max_entries: int = MAX_HISTORY) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive.")
        self.path = Path(path) if path is not None else None
        self.max_entries = max_entries
        self._entries: Deque[ConversionRecord] = deque(maxlen=max_entries)

    def load(self) -> int:
        """Read the history file; a missing or unreadable file means no history."""

        self._entries.clear()
        if self.path is None:
            return 0
        try:
            # undecodable bytes become U+FFFD and fail the line check below
            with self.path.open("r", encoding="utf-8", errors="replace") as fh:
                lines = fh.readlines()
        except FileNotFoundError:
            return 0
        except OSError as exc:
            logger.debug("Ignoring unreadable history file %s (%s).", self.path, exc)
            return 0
        skipped = 0
        for line in lines:
            if not line.strip():
                continue
            record = ConversionRecord.from_line(line)
            if record is None:
                skipped += 1
                continue
            self._entries.append(record)
        if skipped:
            logger.warning("Skipped %d malformed history line(s) in %s.", skipped, self.path)
        return len(self._entries)

    def append(self, record: ConversionRecord) -> ConversionRecord:
        """Add *record*; raises :class:`StorageUnavailable` if it cannot be persisted.

        The entry stays in memory even when the write fails.
        """

        self._entries.append(record)
        self.save()
        return record

    def record(self, source: str, target: str, value: float, result: float) -> ConversionRecord:
        return self.append(ConversionRecord(source=source, target=target, value=value, result=result))

    def clear(self) -> None:
        self._entries.clear()
        self.save()

    def save(self) -> None:
        if self.path is None:
            return
        try:
            with self.path.open("w", encoding="utf-8") as fh:
                for entry in self._entries:
                    fh.write(entry.to_line() + "\n")
        except OSError as exc:
            raise StorageUnavailable(self.path, "write history to") from exc

    def export_csv(self, destination: Path) -> Path:
        destination = Path(destination)
        try:
            with destination.open("w", encoding="utf-8", newline="") as fh:
                writer = csv.writer(fh, lineterminator="\n")
                writer.writerow(CSV_HEADER)
                for entry in self._entries:
                    writer.writerow(
                        [
                            entry.source,
                            entry.target,
                            f"{entry.value:.8g}",
                            f"{entry.result:.8g}",
                            format_timestamp(entry.timestamp),
                        ]
                    )
        except OSError as exc:
            raise StorageUnavailable(destination, "export history to") from exc
        logger.info("Exported %d history entries to %s.", len(self._entries), destination)
        return destination

    def entries(self) -> List[ConversionRecord]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ConversionRecord]:
        return iter(self._entries)


__all__ = ["CSV_HEADER", "MAX_HISTORY", "HistoryStore"]
