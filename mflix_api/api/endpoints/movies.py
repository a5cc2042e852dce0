# mflix_api/api/endpoints/movies.py

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from mflix_api.api.deps import get_movie_service
from mflix_api.models.envelope import Envelope, envelope_response
from mflix_api.models.movie import MovieCreate
from mflix_api.services.movie_service import MovieService

router = APIRouter()

ID_ERRORS = {
    400: {"model": Envelope, "description": "Malformed movie ID"},
    404: {"model": Envelope, "description": "Movie not found"},
}


@router.get(
    "",  # GET /api/movies
    response_model=Envelope,
    summary="List Movies",
    description="Retrieve up to 10 movies in storage order.",
)
async def list_movies(movie_service: MovieService = Depends(get_movie_service)):
    movies = await movie_service.list_movies()
    return envelope_response(status.HTTP_200_OK, data={"movies": movies})


@router.post(
    "",  # POST /api/movies
    response_model=Envelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Movie",
    description="Insert a movie. title, director and year are required.",
    responses={400: {"model": Envelope, "description": "Missing required fields"}},
)
async def create_movie(
    movie_in: MovieCreate,
    movie_service: MovieService = Depends(get_movie_service),
):
    inserted_id = await movie_service.create(movie_in.model_dump())
    return envelope_response(
        status.HTTP_201_CREATED, message="Movie created", data={"insertedId": inserted_id}
    )


@router.get(
    "/{movie_id}",  # GET /api/movies/{movie_id}
    response_model=Envelope,
    summary="Get Movie",
    responses=ID_ERRORS,
)
async def get_movie(movie_id: str, movie_service: MovieService = Depends(get_movie_service)):
    movie = await movie_service.get_by_id(movie_id)
    return envelope_response(status.HTTP_200_OK, data={"movie": movie})


@router.put(
    "/{movie_id}",  # PUT /api/movies/{movie_id}
    response_model=Envelope,
    summary="Update Movie",
    description="Merge the given fields into the movie and return the updated document.",
    responses=ID_ERRORS,
)
async def update_movie(
    movie_id: str,
    changes: Dict[str, Any] = Body(...),
    movie_service: MovieService = Depends(get_movie_service),
):
    movie = await movie_service.update(movie_id, changes)
    return envelope_response(status.HTTP_200_OK, message="Movie updated", data={"movie": movie})


@router.delete(
    "/{movie_id}",  # DELETE /api/movies/{movie_id}
    response_model=Envelope,
    summary="Delete Movie",
    responses=ID_ERRORS,
)
async def delete_movie(movie_id: str, movie_service: MovieService = Depends(get_movie_service)):
    await movie_service.delete(movie_id)
    return envelope_response(status.HTTP_200_OK, message="Movie deleted")
