# mflix_api/api/endpoints/theaters.py

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from mflix_api.api.deps import get_theater_service
from mflix_api.models.envelope import Envelope, envelope_response
from mflix_api.services.theater_service import TheaterService

router = APIRouter()

ID_ERRORS = {
    400: {"model": Envelope, "description": "Malformed theater ID"},
    404: {"model": Envelope, "description": "Theater not found"},
}


@router.get("", response_model=Envelope, summary="List Theaters")
async def list_theaters(theater_service: TheaterService = Depends(get_theater_service)):
    theaters = await theater_service.list_theaters()
    return envelope_response(status.HTTP_200_OK, data={"theaters": theaters})


@router.post(
    "",
    response_model=Envelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Theater",
    description="Insert a theater. The body is stored as sent.",
)
async def create_theater(
    theater_in: Dict[str, Any] = Body(...),
    theater_service: TheaterService = Depends(get_theater_service),
):
    inserted_id = await theater_service.create(theater_in)
    return envelope_response(
        status.HTTP_201_CREATED, message="Theater created", data={"insertedId": inserted_id}
    )


@router.get("/{theater_id}", response_model=Envelope, summary="Get Theater", responses=ID_ERRORS)
async def get_theater(theater_id: str, theater_service: TheaterService = Depends(get_theater_service)):
    theater = await theater_service.get_by_id(theater_id)
    return envelope_response(status.HTTP_200_OK, data={"theater": theater})


@router.put("/{theater_id}", response_model=Envelope, summary="Update Theater", responses=ID_ERRORS)
async def update_theater(
    theater_id: str,
    changes: Dict[str, Any] = Body(...),
    theater_service: TheaterService = Depends(get_theater_service),
):
    theater = await theater_service.update(theater_id, changes)
    return envelope_response(status.HTTP_200_OK, message="Theater updated", data={"theater": theater})


@router.delete("/{theater_id}", response_model=Envelope, summary="Delete Theater", responses=ID_ERRORS)
async def delete_theater(theater_id: str, theater_service: TheaterService = Depends(get_theater_service)):
    await theater_service.delete(theater_id)
    return envelope_response(status.HTTP_200_OK, message="Theater deleted")
