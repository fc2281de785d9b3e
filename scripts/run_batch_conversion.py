"""Convert a demo set of quantities and write the results as JSON."""

from __future__ import annotations

import json
from pathlib import Path

from unit_converter import ConverterApp, ConverterConfig, format_number

REQUESTS = [
    "1000 m to km",
    "1 hp to W",
    "100000 Pa to bar",
    "98.6 F to C",
    "3 ft to cm",
    "1 GB to MB",
    "60 mph to km/h",
]

SERIES = {
    "values": [0.0, 25.0, 37.0, 100.0],
    "from": "C",
    "to": "F",
}


def main() -> None:
    app = ConverterApp(config=ConverterConfig(history_path=None, favorites_path=None))
    summary = []
    for phrase in REQUESTS:
        outcome = app.convert_phrase(phrase, record=False)
        summary.append(
            {
                "request": phrase,
                "value": outcome.value,
                "from": outcome.source.symbol,
                "result": outcome.result,
                "to": outcome.target.symbol,
                "category": outcome.source.category,
            }
        )

    series = app.convert_batch(SERIES["values"], SERIES["from"], SERIES["to"], record=False)
    for outcome in series:
        summary.append(
            {
                "request": f"{outcome.value} {SERIES['from']} to {SERIES['to']}",
                "value": outcome.value,
                "from": outcome.source.symbol,
                "result": outcome.result,
                "to": outcome.target.symbol,
                "category": outcome.source.category,
            }
        )

    output_path = Path("results/batch_conversions.json")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(summary, indent=2), encoding="utf-8")
    print(f"Wrote {output_path} with {len(summary)} entries.")
    for entry in summary:
        print(f"- {format_number(entry['value'])} {entry['from']} = {format_number(entry['result'])} {entry['to']}")


if __name__ == "__main__":  # pragma: no cover - manual script
    main()
