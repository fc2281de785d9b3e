import pytest

from unit_converter.cli import main


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("DATA_DIR", "HISTORY_FILE", "FAVORITES_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(f"UNIT_CONVERTER_{name}", raising=False)


def test_direct_conversion(capsys):
    assert main(["1000", "m", "km", "--no-history"]) == 0
    assert capsys.readouterr().out.strip() == "1000 m = 1 km"


def test_direct_conversion_records_history(tmp_path, capsys):
    history = tmp_path / "h.txt"

    assert main(["1", "hp", "W", "--history-file", str(history)]) == 0

    assert capsys.readouterr().out.strip() == "1 hp = 745.7 W"
    assert history.read_text(encoding="utf-8").startswith("hp,W,1.0,745.7,")


def test_negative_temperature(capsys):
    assert main(["-40", "C", "F", "--no-history"]) == 0
    assert capsys.readouterr().out.strip() == "-40 C = -40 F"


def test_negative_exponent_value(capsys):
    assert main(["-1e3", "m", "km", "--no-history"]) == 0
    assert capsys.readouterr().out.strip() == "-1000 m = -1 km"

    assert main(["--no-history", "-2.5e-1", "km", "m"]) == 0
    assert capsys.readouterr().out.strip() == "-0.25 km = -250 m"


def test_category_option(capsys):
    assert main(["1", "KB", "B", "--category", "data", "--no-history"]) == 0
    assert capsys.readouterr().out.strip() == "1 KB = 1000 B"


def test_bad_arity_prints_usage(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["1", "m"])
    assert excinfo.value.code == 2
    assert "usage" in capsys.readouterr().err


def test_unparseable_value(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["abc", "m", "km", "--no-history"])
    assert excinfo.value.code == 2
    assert "abc" in capsys.readouterr().err


def test_unknown_unit_exits_nonzero(capsys):
    assert main(["1", "xyz", "m", "--no-history"]) == 1
    assert "Unknown unit 'xyz'" in capsys.readouterr().err


def test_incompatible_units_exit_nonzero(capsys):
    assert main(["1", "m", "kg", "--no-history"]) == 1
    assert "Cannot convert" in capsys.readouterr().err


def test_list_and_info(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "=== Length ===" in out
    assert "=== Pressure ===" in out

    assert main(["--info", "km"]) == 0
    assert "Name: Kilometer" in capsys.readouterr().out

    assert main(["--info", "zork"]) == 1
