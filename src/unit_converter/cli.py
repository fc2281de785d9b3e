"""Command-line entry point: ``unit-converter <value> <from> <to>``."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .app import ConverterApp
from .catalog import ALL_CATEGORIES
from .config import ConverterConfig
from .errors import ConverterError, InvalidValue
from .formatting import format_number, format_table
from .logging_utils import configure_logging
from .shell import InteractiveShell
from .units import parse_value

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unit-converter",
        description="Convert a value between measurement units. Without arguments, start the interactive menu.",
    )
    parser.add_argument("args", nargs="*", metavar="ARG", help="VALUE FROM TO, e.g. 1000 m km")
    parser.add_argument("-c", "--category", default=ALL_CATEGORIES, help="restrict unit lookup to one category")
    parser.add_argument("--list", action="store_true", help="list categories and their units")
    parser.add_argument("--info", metavar="UNIT", help="show details about a unit")
    parser.add_argument("--history-file", type=Path, help="history file location")
    parser.add_argument("--favorites-file", type=Path, help="favorites file location")
    parser.add_argument("--no-history", action="store_true", help="do not read or write the history file")
    parser.add_argument("--log-level", help="logging level (default: WARNING)")
    return parser


def _config_from_args(options: argparse.Namespace) -> ConverterConfig:
    config = ConverterConfig.from_env()
    if options.history_file is not None:
        config = replace(config, history_path=options.history_file)
    if options.favorites_file is not None:
        config = replace(config, favorites_path=options.favorites_file)
    if options.no_history:
        config = replace(config, history_path=None)
    if options.log_level:
        config = replace(config, log_level=options.log_level.upper())
    return config


def _print_catalog(app: ConverterApp, category: str) -> None:
    categories = app.catalog.categories() if category == ALL_CATEGORIES else (category,)
    for name in categories:
        print(f"\n=== {name} ===\n")
        rows = [(unit.name, unit.symbol, ", ".join(unit.aliases)) for unit in app.catalog.units_in(name)]
        print(format_table(("Unit", "Symbol", "Aliases"), rows, (22, 10, 30)))


def _print_info(app: ConverterApp, token: str) -> int:
    unit = app.catalog.find(token) or app.resolver.resolve(token)
    if unit is None:
        print(f"Error: Unit '{token}' not found.", file=sys.stderr)
        return 1
    print(f"Name: {unit.name}")
    print(f"Symbol: {unit.symbol}")
    print(f"Category: {unit.category}")
    if unit.description:
        print(f"Description: {unit.description}")
    if unit.aliases:
        print(f"Aliases: {', '.join(unit.aliases)}")
    return 0


def _is_negative_value(token: str) -> bool:
    if not token.startswith("-"):
        return False
    try:
        parse_value(token)
    except InvalidValue:
        return False
    return True


def _split_negative_values(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate tokens like ``-1e3`` that argparse would mistake for options."""

    values: List[str] = []
    rest: List[str] = []
    for token in argv:
        (values if _is_negative_value(token) else rest).append(token)
    return values, rest


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    negatives, remaining = _split_negative_values(sys.argv[1:] if argv is None else argv)
    options = parser.parse_args(remaining)
    # VALUE is the only positional that can be negative
    positional: List[str] = negatives + options.args
    if positional and len(positional) != 3:
        parser.error("expected exactly three arguments: VALUE FROM TO")

    config = _config_from_args(options)
    try:
        configure_logging(config.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    app = ConverterApp(config=config)
    category = app.catalog.find_category(options.category)
    if category is None:
        parser.error(f"unknown category '{options.category}'")

    if options.list:
        _print_catalog(app, category)
        return 0
    if options.info:
        return _print_info(app, options.info)
    if not positional:
        InteractiveShell(app).run()
        return 0

    raw_value, from_token, to_token = positional
    try:
        value = parse_value(raw_value)
    except InvalidValue as exc:
        parser.error(str(exc))
    try:
        outcome = app.convert(value, from_token, to_token, category, record=config.history_path is not None)
    except ConverterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    logger.debug("Converted %s %s to %s in %s.", value, from_token, to_token, outcome.source.category)
    print(
        f"{format_number(outcome.value)} {outcome.source.symbol} = "
        f"{format_number(outcome.result)} {outcome.target.symbol}"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
