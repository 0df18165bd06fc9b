import os
import tempfile

# Keep test log files out of the working tree; must run before catalog is imported
os.environ.setdefault("LOG_DIRECTORY", tempfile.mkdtemp(prefix="catalog-logs-"))

import pytest
from fastapi.testclient import TestClient

from catalog.core.config import Settings
from catalog.app_factory import create_app
from catalog.models.places_model import Place, Review
from catalog.repos.places_store import PlacesStore
from catalog.services.Places_service import PlaceRegistry


def make_place(name, description="nice", category="food", reviews=None):
    return Place(name=name, description=description, category=category, reviews=reviews or [])


@pytest.fixture
def places_file(tmp_path):
    return tmp_path / "places.json"


@pytest.fixture
def store(places_file):
    return PlacesStore(places_file)


@pytest.fixture
def registry(store):
    return PlaceRegistry(store)


@pytest.fixture
def seeded_registry(store):
    store.save([
        make_place("Cafe", reviews=[Review(text="great coffee", rating=5)]),
        make_place("Park", description="big", category="outdoors"),
    ])
    return PlaceRegistry(store)


@pytest.fixture
def client(places_file):
    app = create_app(Settings(PLACES_FILE=str(places_file)))
    with TestClient(app) as test_client:
        yield test_client
