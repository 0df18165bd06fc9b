import json
import os
import stat

import pytest

from catalog.core.errors import StorageError
from catalog.models.places_model import Review
from catalog.repos.places_store import PlacesStore

from conftest import make_place


def test_missing_file_loads_empty(store, places_file):
    assert not places_file.exists()
    assert store.load() == []


@pytest.mark.parametrize("content", ["", "   \n", "null"])
def test_empty_or_null_file_loads_empty(store, places_file, content):
    places_file.write_text(content, encoding="utf-8")
    assert store.load() == []


@pytest.mark.parametrize("content", ["[{\"name\": ", "{\"name\": \"Cafe\"}", "[{\"description\": \"no name\"}]"])
def test_undecodable_file_loads_empty(store, places_file, content):
    places_file.write_text(content, encoding="utf-8")
    assert store.load() == []


def test_unreadable_storage_raises(tmp_path):
    # A directory in place of the file cannot be opened for reading
    store = PlacesStore(tmp_path)
    with pytest.raises(StorageError):
        store.load()


def test_round_trip_preserves_order_and_fields(store):
    places = [
        make_place("Cafe", reviews=[Review(text="great coffee", rating=5), Review(text="meh", rating=2)]),
        make_place("Park", description="big", category="outdoors"),
        make_place("Музей", description="старый", category="culture"),
    ]
    store.save(places)
    assert store.load() == places


def test_save_writes_field_tagged_records(store, places_file):
    store.save([make_place("Cafe", reviews=[Review(text="ok", rating=3)])])
    data = json.loads(places_file.read_text(encoding="utf-8"))
    assert data == [{
        "name": "Cafe",
        "description": "nice",
        "category": "food",
        "reviews": [{"text": "ok", "rating": 3}],
    }]


def test_save_overwrites_previous_snapshot(store):
    store.save([make_place("Cafe"), make_place("Park")])
    store.save([make_place("Park")])
    assert [p.name for p in store.load()] == ["Park"]
    assert not any(p.name.endswith(".tmp") for p in store.path.parent.iterdir())


def test_loads_snapshot_with_null_reviews(store, places_file):
    places_file.write_text(
        '[{"name":"Cafe","description":"nice","category":"food","reviews":null}]\n',
        encoding="utf-8",
    )
    assert store.load() == [make_place("Cafe")]


def test_save_failure_raises_storage_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = PlacesStore(blocker / "places.json")
    with pytest.raises(StorageError):
        store.save([make_place("Cafe")])


def test_invalid_utf8_loads_empty(store, places_file):
    places_file.write_bytes(b'[{"name":"\xff\xfe"}]')
    assert store.load() == []


def test_non_ascii_text_is_written_verbatim(store, places_file):
    store.save([make_place("Музей", description="старый", reviews=[Review(text="café", rating=5)])])
    raw = places_file.read_bytes()
    assert "Музей".encode("utf-8") in raw
    assert "café".encode("utf-8") in raw
    assert b"\\u" not in raw


def test_save_keeps_existing_file_mode(store, places_file):
    places_file.write_text("[]", encoding="utf-8")
    places_file.chmod(0o644)

    store.save([make_place("Cafe")])

    assert stat.S_IMODE(places_file.stat().st_mode) == 0o644


def test_new_snapshot_uses_umask_default(store, places_file):
    umask = os.umask(0o022)
    try:
        store.save([make_place("Cafe")])
    finally:
        os.umask(umask)

    assert stat.S_IMODE(places_file.stat().st_mode) == 0o644
