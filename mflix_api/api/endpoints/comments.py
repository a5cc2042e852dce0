# mflix_api/api/endpoints/comments.py
# Mounted under /api/movies/{movie_id}/comments

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from mflix_api.api.deps import get_comment_service
from mflix_api.models.envelope import Envelope, envelope_response
from mflix_api.services.comment_service import CommentService

router = APIRouter()

ID_ERRORS = {
    400: {"model": Envelope, "description": "Malformed movie or comment ID"},
    404: {"model": Envelope, "description": "Comment not found"},
}


@router.get(
    "",
    response_model=Envelope,
    summary="List Movie Comments",
    description="Retrieve every comment of a movie. A movie without comments yields 404.",
    responses={
        400: {"model": Envelope, "description": "Malformed movie ID"},
        404: {"model": Envelope, "description": "No comments for this movie"},
    },
)
async def list_comments(movie_id: str, comment_service: CommentService = Depends(get_comment_service)):
    comments = await comment_service.list_by_movie(movie_id)
    return envelope_response(status.HTTP_200_OK, data={"comments": comments})


@router.post(
    "",
    response_model=Envelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Comment",
    description="Store a comment for the movie. The body is not validated.",
    responses={400: {"model": Envelope, "description": "Malformed movie ID"}},
)
async def create_comment(
    movie_id: str,
    comment_in: Dict[str, Any] = Body(...),
    comment_service: CommentService = Depends(get_comment_service),
):
    inserted_id = await comment_service.create_for_movie(movie_id, comment_in)
    return envelope_response(
        status.HTTP_201_CREATED, message="Comment created", data={"insertedId": inserted_id}
    )


@router.get("/{comment_id}", response_model=Envelope, summary="Get Comment", responses=ID_ERRORS)
async def get_comment(
    movie_id: str,
    comment_id: str,
    comment_service: CommentService = Depends(get_comment_service),
):
    comment_service.check_movie_id(movie_id)
    comment = await comment_service.get_by_id(comment_id)
    return envelope_response(status.HTTP_200_OK, data={"comment": comment})


@router.put("/{comment_id}", response_model=Envelope, summary="Update Comment", responses=ID_ERRORS)
async def update_comment(
    movie_id: str,
    comment_id: str,
    changes: Dict[str, Any] = Body(...),
    comment_service: CommentService = Depends(get_comment_service),
):
    comment_service.check_movie_id(movie_id)
    comment = await comment_service.update(comment_id, changes)
    return envelope_response(status.HTTP_200_OK, message="Comment updated", data={"comment": comment})


@router.delete("/{comment_id}", response_model=Envelope, summary="Delete Comment", responses=ID_ERRORS)
async def delete_comment(
    movie_id: str,
    comment_id: str,
    comment_service: CommentService = Depends(get_comment_service),
):
    comment_service.check_movie_id(movie_id)
    await comment_service.delete(comment_id)
    return envelope_response(status.HTTP_200_OK, message="Comment deleted")
