import pytest

from unit_converter import ConverterApp, ConverterConfig
from unit_converter.shell import InteractiveShell


def scripted(answers):
    remaining = iter(answers)

    def _input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.fixture
def app(tmp_path):
    config = ConverterConfig(
        history_path=tmp_path / "history.txt",
        favorites_path=tmp_path / "favorites.txt",
        csv_path=tmp_path / "history.csv",
    )
    return ConverterApp(config=config)


def make_shell(app, answers):
    lines = []
    shell = InteractiveShell(app, input_fn=scripted(answers), output=lines.append)
    return shell, lines


def test_category_conversion_shows_result(app):
    shell, lines = make_shell(app, ["1000 m", "km"])

    outcome = shell.handle_conversion("Length")

    assert outcome.result == 1.0
    assert "\nResult: 1000 m = 1 km" in lines
    assert app.history.entries()[-1].target == "km"


def test_prefixed_input_in_category(app):
    shell, _ = make_shell(app, ["2 kft", "m"])

    outcome = shell.handle_conversion("Length")

    assert outcome.value == 2000.0
    assert outcome.result == pytest.approx(609.6)


def test_retries_are_bounded(app):
    shell, lines = make_shell(app, ["10 xyz", "abc", "5 kg"])

    assert shell.handle_conversion("Length") is None
    assert sum(line.startswith("Error:") for line in lines) == 4
    assert "Error: Too many failed attempts. Returning to menu." in lines
    assert len(app.history) == 0


def test_main_menu_runs_category_and_quits(app):
    shell, lines = make_shell(app, ["1", "1000 m", "km", "quit"])

    shell.run()

    assert len(app.history) == 1
    assert lines[-1] == "Goodbye!"


def test_main_menu_accepts_category_names_and_ends_on_eof(app):
    shell, lines = make_shell(app, ["temperature", "100 C", "F"])

    shell.run()

    assert app.history.entries()[-1].result == pytest.approx(212.0)
    assert lines[-1] == "Goodbye!"


def test_invalid_menu_choice(app):
    shell, lines = make_shell(app, ["99", "q"])

    shell.run()

    assert "Error: Invalid choice!" in lines


def test_batch_conversion_skips_bad_numbers(app):
    shell, lines = make_shell(app, ["1", "2", "oops", "3", "", "m", "cm"])

    outcomes = shell.batch_conversion()

    assert [outcome.result for outcome in outcomes] == pytest.approx([100.0, 200.0, 300.0])
    assert "Error: Invalid number! Skipping..." in lines
    assert len(app.history) == 3


def test_quick_conversion(app):
    shell, lines = make_shell(app, ["3 ft to in"])

    outcome = shell.quick_conversion()

    assert outcome.result == pytest.approx(36.0)
    assert any(line.startswith("\nResult: 3 ft = 36 in") for line in lines)


def test_add_and_use_favorite(app):
    shell, lines = make_shell(app, ["2", "length", "m", "km"])
    shell.show_favorites()
    assert "Favorite added successfully!" in lines

    shell, lines = make_shell(app, ["1", "1U", "500"])
    shell.show_favorites()

    assert app.history.entries()[-1].result == 0.5


def test_edit_favorite_rejects_invalid_category(app):
    app.favorites.add("m", "km", "Length")
    shell, lines = make_shell(app, ["1", "1E", "3", "Mass"])

    shell.show_favorites()

    assert any(line.startswith("Error: Unknown unit 'm'") for line in lines)
    assert app.favorites.get(0).category == "Length"


def test_remove_favorite(app):
    app.favorites.add("m", "km", "Length")
    shell, lines = make_shell(app, ["1", "1R"])

    shell.show_favorites()

    assert len(app.favorites) == 0
    assert "Favorite removed successfully!" in lines


def test_history_export_and_clear(app):
    app.convert(1, "km", "m")
    shell, lines = make_shell(app, ["2"])
    shell.show_history()

    assert app.config.csv_path.exists()
    assert app.config.csv_path.read_text(encoding="utf-8").startswith("From,To,Value,Result,Timestamp")

    shell, lines = make_shell(app, ["1"])
    shell.show_history()
    assert len(app.history) == 0
    assert "History cleared!" in lines


def test_unit_info_by_alias(app):
    shell, lines = make_shell(app, ["metre"])

    unit = shell.unit_info()

    assert unit.name == "Meter"
    assert "Name: Meter" in lines
    assert "Aliases: metre, meter" in lines
