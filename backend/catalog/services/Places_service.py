import logging
import threading

from catalog.core.errors import ConflictError, NotFoundError, ValidationError
from catalog.core.logger import logs
from catalog.models.places_model import Place
from catalog.repos.places_store import PlacesStore

class PlaceRegistry:
    """
    Ordered, in-memory collection of places backed by a PlacesStore.

    A place's id is its current position in the collection, so deleting a
    place shifts the id of every place after it. Every mutation is followed
    by a full save; if the save fails the mutation is undone.
    """

    def __init__(self, store: PlacesStore):
        self.store = store
        self._lock = threading.Lock()
        self._places: list[Place] = store.load()

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._places)

    def list_places(self) -> list[Place]:
        with self._lock:
            return [place.model_copy(deep=True) for place in self._places]

    def create(self, candidate: Place) -> int:
        """Append a place with a name not yet in use. Returns its id."""
        with self._lock:
            if any(place.name == candidate.name for place in self._places):
                logs.log(logging.WARNING, f"Place '{candidate.name}' already exists")
                raise ConflictError("a place with this name already exists")

            self._places.append(candidate.model_copy(deep=True))
            try:
                self.store.save(self._places)
            except Exception:
                self._places.pop()
                raise

            place_id = len(self._places) - 1
            logs.log(logging.INFO, f"Created place '{candidate.name}' with id {place_id}")
            return place_id

    def update_description(self, place_id: int, description: str | None) -> None:
        with self._lock:
            place = self._places[self._check_id(place_id)]
            if not description:
                raise ValidationError("description is required")

            previous = place.description
            place.description = description
            try:
                self.store.save(self._places)
            except Exception:
                place.description = previous
                raise

            logs.log(logging.INFO, f"Updated description of place {place_id} ('{place.name}')")

    def delete(self, place_id: int) -> None:
        with self._lock:
            index = self._check_id(place_id)
            removed = self._places.pop(index)
            try:
                self.store.save(self._places)
            except Exception:
                self._places.insert(index, removed)
                raise

            logs.log(logging.INFO, f"Deleted place {place_id} ('{removed.name}')")

    def _check_id(self, place_id: int) -> int:
        if place_id < 0 or place_id >= len(self._places):
            raise NotFoundError("place not found")
        return place_id
