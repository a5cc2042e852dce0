# mflix_api/models/movie.py

from pydantic import BaseModel, ConfigDict, Field


class MovieCreate(BaseModel):
    """
    Request body for creating a movie. Only title, director and year are
    required; any other field is stored as sent.
    """
    model_config = ConfigDict(extra="allow")

    title: str = Field(..., min_length=1, description="Movie title.")
    director: str = Field(..., min_length=1, description="Director name.")
    # strict: booleans, numeric strings and floats are rejected, not coerced
    year: int = Field(..., strict=True, gt=0, description="Year of release.")
