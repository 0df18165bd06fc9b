import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Request

from catalog.core.errors import ValidationError
from catalog.models.places_model import Place, MessageResponse
from catalog.services.Places_service import PlaceRegistry

router = APIRouter()

ID_PATTERN = re.compile(r"[+-]?[0-9]+")

def parse_place_id(raw: str) -> int:
    """Convert a path segment into a positional place id."""
    value = raw.strip()
    if not ID_PATTERN.fullmatch(value):
        raise ValidationError("invalid place id")
    try:
        return int(value)
    except ValueError:
        # Past the interpreter's integer string conversion limit
        raise ValidationError("invalid place id") from None

# --- Dependency Injection ---
def get_registry(request: Request) -> PlaceRegistry:
    return request.app.state.registry

@router.post("/places", response_model=MessageResponse)
def create_place(place: Place, registry: PlaceRegistry = Depends(get_registry)):
    registry.create(place)
    return MessageResponse(message="place created")

@router.get("/places", response_model=List[Place])
def list_places(registry: PlaceRegistry = Depends(get_registry)):
    return registry.list_places()

@router.put("/places/{place_id}", response_model=MessageResponse)
def update_place_description(
    place_id: str,
    description: Optional[str] = None,
    registry: PlaceRegistry = Depends(get_registry)
):
    registry.update_description(parse_place_id(place_id), description)
    return MessageResponse(message="description updated")

@router.delete("/places/{place_id}", response_model=MessageResponse)
def delete_place(place_id: str, registry: PlaceRegistry = Depends(get_registry)):
    registry.delete(parse_place_id(place_id))
    return MessageResponse(message="place deleted")
