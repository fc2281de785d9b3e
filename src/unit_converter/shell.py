"""Keyboard-driven menu interface."""

from __future__ import annotations

from typing import Callable, List, Optional

from .app import ConversionResult, ConverterApp
from .catalog import ALL_CATEGORIES
from .errors import ConverterError, InvalidValue, StorageUnavailable
from .formatting import format_number, format_result, format_table, format_timestamp
from .records import UnitRecord
from .units import parse_quantity, parse_value

MAX_BATCH_VALUES = 100
CLEAR_SEQUENCE = "\033[2J\033[H"

HELP_TEXT = """Features:
1. Multiple unit categories
2. Favorites for frequently used conversions
3. Quick conversions such as '3 ft to cm'
4. Batch conversion of many values at once
5. Conversion history with CSV export
6. Unit information display
7. Metric prefixes on values ('2 kft' is 2000 ft)

Tips:
- Use unit symbols (e.g. 'km' for kilometer) or aliases ('metre')
- Symbols are case-insensitive except b (bit) and B (byte)
- Very large or small results are shown in scientific notation"""


class InteractiveShell:
    """Menu loop over a :class:`ConverterApp`.

    ``input_fn`` and ``output`` default to the terminal; tests pass scripted
    replacements. End of input leaves the loop like choosing Quit.
    """

    def __init__(
        self,
        app: ConverterApp,
        *,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.app = app
        self.input_fn = input_fn
        self.output = output
        self.max_attempts = app.config.max_attempts
        categories = list(app.catalog.categories())
        self._menu: List[tuple] = [(name, self._category_action(name)) for name in categories]
        self._menu.extend(
            [
                ("Favorites", self.show_favorites),
                ("Quick Conversion", self.quick_conversion),
                ("Batch Conversion", self.batch_conversion),
                ("History", self.show_history),
                ("Unit Info", self.unit_info),
                ("Help", self.show_help),
            ]
        )

    # ------------------------------------------------------------------ main loop
    def run(self) -> None:
        while True:
            try:
                self._clear()
                self._header("Ultimate Unit Converter")
                self.output("Select a category:\n")
                for index, (label, _) in enumerate(self._menu, 1):
                    self.output(f"{index:2d}. {label}")
                self.output(f"{len(self._menu) + 1:2d}. Quit\n")
                choice = self._ask("Enter your choice: ").strip()
                if choice.lower() in {"q", "quit", "exit", str(len(self._menu) + 1)}:
                    break
                action = self._menu_action(choice)
                if action is None:
                    self._error("Invalid choice!")
                    continue
                action()
            except (EOFError, KeyboardInterrupt):
                self.output("")
                break
        self.output("Goodbye!")

    # ------------------------------------------------------------------ conversions
    def handle_conversion(self, category: str) -> Optional[ConversionResult]:
        """Prompt for value+unit and target unit within *category*, then convert."""

        self.show_category(category)
        quantity = self._retry(
            "Enter value and unit (e.g. '10 km', '2 kft'): ",
            lambda text: parse_quantity(text, self.app.resolver, category),
        )
        if quantity is None:
            return None
        value, source_token = quantity
        source = self.app.resolver.require(source_token, category)
        target = self._retry("Convert to: ", lambda text: self.app.resolver.require(text, category))
        if target is None:
            return None
        return self._convert_and_show(value, source.symbol, target.symbol, category)

    def quick_conversion(self) -> Optional[ConversionResult]:
        self._header("Quick Conversion")
        self.output("Type a phrase like '3 ft to cm' or '100 F -> C'.")
        return self._retry("Convert: ", self._show_phrase)

    def batch_conversion(self) -> List[ConversionResult]:
        self._header("Batch Conversion Mode")
        self.output("Enter values to convert (one per line, empty line to finish):")
        values: List[float] = []
        while len(values) < MAX_BATCH_VALUES:
            line = self._ask("").strip()
            if not line:
                break
            try:
                values.append(parse_value(line))
            except InvalidValue:
                self._error("Invalid number! Skipping...")
        if not values:
            self._error("No values entered!")
            return []
        source = self._retry("\nConvert from: ", lambda text: self.app.resolver.require(text))
        if source is None:
            return []
        target = self._retry(
            "Convert to: ",
            lambda text: self.app.engine.resolve_pair(source.symbol, text, source.category)[1],
        )
        if target is None:
            return []
        outcomes = self.app.convert_batch(values, source.symbol, target.symbol, source.category)
        self.output("\nResults:")
        for outcome in outcomes:
            self.output(format_result(outcome.value, source.symbol, outcome.result, target.symbol))
        if any(outcome.recorded is None for outcome in outcomes):
            self._error("History could not be saved.")
        return outcomes

    # ------------------------------------------------------------------ screens
    def show_category(self, category: str) -> None:
        self._clear()
        self._header(category)
        self.output("Available units:\n")
        rows = [(unit.name, unit.symbol, unit.description) for unit in self.app.catalog.units_in(category)]
        self.output(format_table(("Unit", "Symbol", "Description"), rows, (22, 10, 40)))
        self.output("")

    def show_history(self) -> None:
        self._clear()
        self._header("Conversion History")
        history = self.app.history
        if not len(history):
            self._error("No conversion history available!")
            return
        rows = [
            (
                index,
                entry.source,
                entry.target,
                format_number(entry.value),
                format_number(entry.result),
                format_timestamp(entry.timestamp),
            )
            for index, entry in enumerate(history, 1)
        ]
        self.output(format_table(("No.", "From", "To", "Value", "Result", "Time"), rows, (5, 10, 10, 14, 14, 20)))
        self.output("\nOptions:\n1. Clear history\n2. Export to CSV\n3. Return to menu")
        choice = self._ask("\nEnter your choice: ").strip()
        try:
            if choice == "1":
                history.clear()
                self.output("History cleared!")
            elif choice == "2":
                path = history.export_csv(self.app.config.csv_path)
                self.output(f"History exported to {path}")
            elif choice != "3":
                self._error("Invalid choice!")
        except StorageUnavailable as exc:
            self._error(str(exc))

    def show_favorites(self) -> None:
        self._clear()
        self._header("Favorites")
        self.output("Options:\n1. View/Manage existing favorites\n2. Add new favorite\n3. Return to main menu")
        choice = self._ask("\nEnter your choice (1-3): ").strip()
        try:
            if choice == "1":
                self._manage_favorites()
            elif choice == "2":
                category = self._ask("\nEnter category: ")
                source = self._ask("Enter source unit: ")
                target = self._ask("Enter target unit: ")
                self.app.favorites.add(source, target, category)
                self.output("Favorite added successfully!")
            elif choice != "3":
                self._error("Invalid choice!")
        except ConverterError as exc:
            self._error(str(exc))

    def unit_info(self, token: Optional[str] = None) -> Optional[UnitRecord]:
        if token is None:
            token = self._ask("Unit name or symbol: ")
        unit = self.app.catalog.find(token) or self.app.resolver.resolve(token)
        if unit is None:
            self._error("Unit not found")
            return None
        self.output("\nUnit Information:")
        self.output(f"Name: {unit.name}")
        self.output(f"Symbol: {unit.symbol}")
        self.output(f"Category: {unit.category}")
        if unit.description:
            self.output(f"Description: {unit.description}")
        if unit.aliases:
            self.output(f"Aliases: {', '.join(unit.aliases)}")
        return unit

    def show_help(self) -> None:
        self._clear()
        self._header("Help")
        self.output(HELP_TEXT)

    # ------------------------------------------------------------------ favorites
    def _manage_favorites(self) -> None:
        favorites = self.app.favorites
        if not len(favorites):
            self._error("No favorites added yet!")
            return
        rows = [(index, entry.label(), entry.category) for index, entry in enumerate(favorites, 1)]
        self.output(format_table(("No.", "Conversion", "Category"), rows, (5, 25, 18)))
        self.output("Actions: [U]se [R]emove [I]nfo [E]dit")
        selection = self._ask("\nEnter number and action (e.g. '1U' to use the first favorite): ").strip()
        number, action = selection[:-1].strip(), selection[-1:].upper()
        if not number.isdigit() or not 1 <= int(number) <= len(favorites):
            self._error("Invalid favorite number!")
            return
        index = int(number) - 1
        favorite = favorites.get(index)
        if action == "U":
            self._use_favorite(favorite.source, favorite.target, favorite.category)
        elif action == "R":
            favorites.remove(index)
            self.output("Favorite removed successfully!")
        elif action == "I":
            self.unit_info(favorite.source)
            self.unit_info(favorite.target)
        elif action == "E":
            self._edit_favorite(index)
        else:
            self._error("Invalid action!")

    def _use_favorite(self, source: str, target: str, category: str) -> Optional[ConversionResult]:
        self._header(f"{source} -> {target}")
        value = self._retry("Enter value: ", parse_value)
        if value is None:
            return None
        return self._convert_and_show(value, source, target, category)

    def _edit_favorite(self, index: int) -> None:
        self.output(
            "\nEdit Favorite Conversion:\n1. Change source unit\n2. Change target unit\n3. Change category\n4. Cancel"
        )
        choice = self._ask("Enter your choice (1-4): ").strip()
        fields = {"1": ("source", "Enter new source unit: "), "2": ("target", "Enter new target unit: ")}
        if choice in fields:
            name, prompt = fields[choice]
            self.app.favorites.edit(index, **{name: self._ask(prompt)})
        elif choice == "3":
            self.app.favorites.edit(index, category=self._ask("Enter new category: "))
        elif choice == "4":
            return
        else:
            self._error("Invalid choice!")
            return
        self.output("Favorite updated successfully!")

    # ------------------------------------------------------------------ helpers
    def _convert_and_show(self, value: float, source: str, target: str, scope: str) -> Optional[ConversionResult]:
        try:
            outcome = self.app.convert(value, source, target, scope)
        except ConverterError as exc:
            self._error(str(exc))
            return None
        self.output(
            "\nResult: " + format_result(outcome.value, outcome.source.symbol, outcome.result, outcome.target.symbol)
        )
        if outcome.recorded is None:
            self._error("History could not be saved.")
        return outcome

    def _show_phrase(self, phrase: str) -> ConversionResult:
        outcome = self.app.convert_phrase(phrase)
        self.output(
            "\nResult: " + format_result(outcome.value, outcome.source.symbol, outcome.result, outcome.target.symbol)
        )
        if outcome.recorded is None:
            self._error("History could not be saved.")
        return outcome

    def _retry(self, prompt: str, attempt: Callable[[str], object]):
        """Call *attempt* on fresh input until it succeeds or attempts run out."""

        for _ in range(self.max_attempts):
            text = self._ask(prompt)
            try:
                return attempt(text)
            except ConverterError as exc:
                self._error(str(exc))
        self._error("Too many failed attempts. Returning to menu.")
        return None

    def _menu_action(self, choice: str):
        if choice.isdigit() and 1 <= int(choice) <= len(self._menu):
            return self._menu[int(choice) - 1][1]
        category = self.app.catalog.find_category(choice) if choice else None
        if category is not None and category != ALL_CATEGORIES:
            return self._category_action(category)
        return None

    def _category_action(self, category: str) -> Callable[[], Optional[ConversionResult]]:
        return lambda: self.handle_conversion(category)

    def _ask(self, prompt: str) -> str:
        return self.input_fn(prompt)

    def _header(self, title: str) -> None:
        self.output(f"\n=== {title} ===\n")

    def _error(self, message: str) -> None:
        self.output(f"Error: {message}")

    def _clear(self) -> None:
        if self.app.config.clear_screen:
            self.output(CLEAR_SEQUENCE)


__all__ = ["InteractiveShell", "HELP_TEXT"]
