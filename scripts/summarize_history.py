"""Summarize a conversion history file and export it as CSV."""

from __future__ import annotations

import argparse
import json
from collections import Counter
from pathlib import Path
from typing import Iterable

from unit_converter.records import ConversionRecord
from unit_converter.storage import HistoryStore


def summarize(entries: Iterable[ConversionRecord]) -> dict:
    entries = list(entries)
    if not entries:
        return {}
    pairs = Counter(f"{entry.source}->{entry.target}" for entry in entries)
    timestamps = [entry.timestamp for entry in entries]
    return {
        "count": len(entries),
        "distinct_pairs": len(pairs),
        "most_common": pairs.most_common(5),
        "first_timestamp": min(timestamps),
        "last_timestamp": max(timestamps),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("history", type=Path, nargs="?", default=Path("conversion_history.txt"))
    parser.add_argument("--csv", type=Path, default=Path("conversion_history.csv"))
    options = parser.parse_args()

    store = HistoryStore(options.history)
    if not store.load():
        raise SystemExit(f"No history entries in {options.history}.")
    print(json.dumps(summarize(store), indent=2))
    store.export_csv(options.csv)
    print(f"Exported {len(store)} entries to {options.csv}")


if __name__ == "__main__":
    main()
