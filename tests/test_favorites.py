import pytest

from unit_converter import UnitResolver, build_default_catalog
from unit_converter.errors import UnknownCategory, UnknownUnit
from unit_converter.storage import FavoritesFull, FavoritesStore


def make_store(path=None, **kwargs):
    return FavoritesStore(UnitResolver(build_default_catalog()), path, **kwargs)


def test_add_validates_units_within_category(tmp_path):
    store = make_store(tmp_path / "favorites.txt")

    favorite = store.add("KM", "mi", "length")
    assert (favorite.source, favorite.target, favorite.category) == ("km", "mi", "Length")

    with pytest.raises(UnknownUnit):
        store.add("kg", "mi", "Length")
    with pytest.raises(UnknownCategory):
        store.add("m", "km", "Luminosity")
    with pytest.raises(UnknownCategory):
        store.add("m", "km", "All")
    assert len(store) == 1


def test_favorites_round_trip_through_file(tmp_path):
    path = tmp_path / "favorites.txt"
    store = make_store(path)
    store.add("m", "ft", "Length")
    store.add("C", "F", "Temperature")

    assert path.read_text(encoding="utf-8") == "m,ft,Length\nC,F,Temperature\n"

    reloaded = make_store(path)
    assert reloaded.load() == 2
    assert reloaded.entries() == store.entries()


def test_load_skips_undecodable_lines(tmp_path):
    path = tmp_path / "favorites.txt"
    path.write_bytes(b"\xff\xfe\nm,ft,Length\n")

    store = make_store(path)

    assert store.load() == 1
    assert store.get(0).label() == "m -> ft"


def test_edit_revalidates_before_committing(tmp_path):
    store = make_store(tmp_path / "favorites.txt")
    store.add("m", "km", "Length")

    with pytest.raises(UnknownUnit):
        store.edit(0, category="Mass")
    assert store.get(0).category == "Length"

    edited = store.edit(0, source="cm")
    assert (edited.source, edited.target) == ("cm", "km")

    moved = store.edit(0, source="g", target="kg", category="Mass")
    assert moved.category == "Mass"
    assert (tmp_path / "favorites.txt").read_text(encoding="utf-8") == "g,kg,Mass\n"


def test_remove_and_index_errors():
    store = make_store()
    store.add("m", "km", "Length")
    store.add("s", "min", "Time")

    removed = store.remove(0)
    assert removed.source == "m"
    assert [entry.source for entry in store] == ["s"]
    with pytest.raises(IndexError):
        store.remove(5)


def test_favorites_limit():
    store = make_store(max_entries=2)
    store.add("m", "km", "Length")
    store.add("g", "kg", "Mass")

    with pytest.raises(FavoritesFull):
        store.add("s", "hr", "Time")
