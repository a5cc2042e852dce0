from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from mflix_api.api.deps import get_auth_service
from mflix_api.core.config import settings
from mflix_api.models.auth import Credentials, TokenPair
from mflix_api.models.envelope import Envelope, envelope_response
from mflix_api.services.auth_service import AuthService

router = APIRouter()

ACCESS_COOKIE = "token"
REFRESH_COOKIE = "refreshToken"


def set_token_cookies(response: JSONResponse, tokens: TokenPair) -> JSONResponse:
    """Attaches both tokens as HttpOnly cookies scoped to the whole site."""
    response.set_cookie(
        ACCESS_COOKIE,
        tokens.access_token,
        max_age=tokens.access_max_age,
        path="/",
        httponly=True,
        secure=settings.COOKIE_SECURE,
    )
    response.set_cookie(
        REFRESH_COOKIE,
        tokens.refresh_token,
        max_age=tokens.refresh_max_age,
        path="/",
        httponly=True,
        secure=settings.COOKIE_SECURE,
    )
    return response


@router.post(
    "/login",
    response_model=Envelope,
    summary="User Login",
    description="Authenticates a user and sets the access and refresh token cookies.",
    responses={
        400: {"model": Envelope, "description": "Missing username or password"},
        401: {"model": Envelope, "description": "Invalid username or password"},
    }
)
async def login_user(
    credentials: Credentials,
    auth_service: AuthService = Depends(get_auth_service),
):
    tokens = await auth_service.login_user(credentials)
    response = envelope_response(
        status.HTTP_200_OK, message="Authenticated", data={"jwt": tokens.access_token}
    )
    return set_token_cookies(response, tokens)


@router.post(
    "/signup",
    response_model=Envelope,
    status_code=status.HTTP_201_CREATED,
    summary="Register New User",
    description="Creates an account in the in-memory store and logs it in.",
    responses={
        400: {"model": Envelope, "description": "User already exists or invalid input"},
    }
)
async def signup_user(
    credentials: Credentials,
    auth_service: AuthService = Depends(get_auth_service),
):
    tokens = await auth_service.register_user(credentials)
    response = envelope_response(
        status.HTTP_201_CREATED,
        message="User registered successfully",
        data={"username": credentials.username},
    )
    return set_token_cookies(response, tokens)
