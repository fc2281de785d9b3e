import itertools
import logging

import numpy as np
import pytest

from unit_converter import ConversionEngine, UnitCatalog, UnitRecord, UnitResolver, build_default_catalog
from unit_converter.errors import IncompatibleUnits, UnknownUnit


def make_engine():
    return ConversionEngine(UnitResolver(build_default_catalog()))


def test_factor_consistency():
    engine = make_engine()

    assert engine.convert(1000, "m", "km") == 1.0
    assert engine.convert(1, "km", "m") == 1000.0


def test_reference_conversions():
    engine = make_engine()

    assert engine.convert(1, "hp", "W") == 745.7
    assert engine.convert(100000, "Pa", "bar") == 1.0
    assert engine.convert(1, "ft", "in") == pytest.approx(12.0)
    assert engine.convert(1, "mi", "km") == pytest.approx(1.609344)
    assert engine.convert(1, "lb", "oz") == pytest.approx(16.0)
    assert engine.convert(1, "week", "day") == pytest.approx(7.0)
    assert engine.convert(1, "gal", "qt") == pytest.approx(4.0)
    assert engine.convert(1, "m/s", "km/h") == pytest.approx(3.6)
    assert engine.convert(1, "kt", "km/h") == pytest.approx(1.852)
    assert engine.convert(1, "kWh", "J") == pytest.approx(3600000.0)
    assert engine.convert(1, "psi", "Pa") == pytest.approx(6894.76, rel=1e-5)
    assert engine.convert(1, "acre", "m2") == pytest.approx(4046.86, rel=1e-5)


def test_temperature_fixed_points():
    engine = make_engine()

    assert engine.convert(0, "C", "F") == 32
    assert engine.convert(0, "C", "K") == 273.15
    assert engine.convert(32, "F", "C") == 0
    assert engine.convert(273.15, "K", "C") == 0
    assert engine.convert(-40, "C", "F") == -40
    assert engine.convert(212, "F", "K") == pytest.approx(373.15)


def test_temperature_accepts_physically_absurd_values():
    engine = make_engine()

    assert engine.convert(-500, "C", "K") == pytest.approx(-226.85)


def test_identity_is_exact_for_every_unit():
    engine = make_engine()
    for unit in engine.resolver.catalog.all_units():
        for value in (0.1, -7.3, 1234.5678):
            assert engine.convert(value, unit.symbol, unit.symbol, unit.category) == value


def test_round_trip_for_every_linear_pair():
    engine = make_engine()
    catalog = engine.resolver.catalog
    for category in catalog.categories():
        members = catalog.units_in(category)
        if members[0].is_temperature:
            continue
        for first, second in itertools.permutations(members, 2):
            for value in (1.0, -3.5, 0.001, 98765.4321):
                there = engine.convert(value, first.symbol, second.symbol, category)
                back = engine.convert(there, second.symbol, first.symbol, category)
                assert back == pytest.approx(value, rel=1e-9)


def test_storage_scope_selects_convention():
    engine = make_engine()

    assert engine.convert(1024, "B", "KB", "Digital Storage") == 1.0
    assert engine.convert(1, "KB", "B", "Data") == 1000.0
    assert engine.convert(1, "KB", "B") == 1024.0
    assert engine.convert(1, "B", "b") == 8.0


def test_unknown_unit_names_the_token():
    engine = make_engine()

    with pytest.raises(UnknownUnit) as excinfo:
        engine.convert(1, "xyz", "m")
    assert excinfo.value.token == "xyz"
    assert "xyz" in str(excinfo.value)

    with pytest.raises(UnknownUnit) as excinfo:
        engine.convert(1, "m", "furlongs")
    assert excinfo.value.token == "furlongs"

    with pytest.raises(UnknownUnit):
        engine.convert(1, "kg", "g", "Length")


def test_incompatible_units_are_rejected():
    engine = make_engine()

    with pytest.raises(IncompatibleUnits):
        engine.convert(1, "m", "kg")
    with pytest.raises(IncompatibleUnits):
        engine.convert(1, "C", "m")


def test_large_values_warn_but_still_convert(caplog):
    engine = make_engine()

    with caplog.at_level(logging.WARNING, logger="unit_converter.engine"):
        result = engine.convert(2e15, "m", "km")

    assert result == pytest.approx(2e12)
    assert any("precision" in record.getMessage() for record in caplog.records)


def test_convert_many_matches_scalar_path():
    engine = make_engine()
    values = [0.0, 25.0, 100.0, -40.0]

    fahrenheit = engine.convert_many(values, "C", "F")
    assert isinstance(fahrenheit, np.ndarray)
    assert fahrenheit.tolist() == pytest.approx([32.0, 77.0, 212.0, -40.0])

    meters = engine.convert_many([1, 2.5], "km", "m")
    assert meters.tolist() == pytest.approx([1000.0, 2500.0])

    same = engine.convert_many(values, "K", "K")
    assert same.tolist() == values


def test_target_prefers_source_category_under_all_scope():
    catalog = UnitCatalog(
        [
            UnitRecord("Meter", "m", 1.0, "Length"),
            UnitRecord("Point", "pt", 0.0003527777778, "Length"),
            UnitRecord("Milliliter", "ml", 1.0, "Cooking"),
            UnitRecord("Pint", "pt", 473.176473, "Cooking"),
        ],
        ["Length", "Cooking"],
    )
    engine = ConversionEngine(UnitResolver(catalog))

    source, target = engine.resolve_pair("ml", "pt")
    assert (source.category, target.name) == ("Cooking", "Pint")
    assert engine.convert(473.176473, "ml", "pt") == pytest.approx(1.0)

    assert engine.resolve_pair("m", "pt")[1].name == "Point"
    assert engine.resolve_pair("m", "pt", "Length")[1].name == "Point"
    with pytest.raises(UnknownUnit):
        engine.convert(1, "ml", "pt", "Length")
