from pydantic import BaseModel, StrictInt, StrictStr, field_validator
from typing import List

class Review(BaseModel):
    text: StrictStr
    rating: StrictInt

class Place(BaseModel):
    name: StrictStr
    description: StrictStr = ""
    category: StrictStr = ""
    reviews: List[Review] = []

    @field_validator("reviews", mode="before")
    @classmethod
    def null_reviews_as_empty(cls, value):
        # Older snapshots store an empty review list as null
        return [] if value is None else value

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str
    service: str
    places: int
