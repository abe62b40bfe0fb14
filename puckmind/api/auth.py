"""Authentication API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from puckmind.api.dependencies import get_current_principal, get_store
from puckmind.errors import Conflict, NotFound, Unauthorized
from puckmind.schemas.auth import AuthResponse, SignupResponse, UserLogin, UserResponse
from puckmind.services.auth import Principal, authenticate_user, create_access_token, create_user
from puckmind.services.validation import validate_signup_fields
from puckmind.stores.base import Store

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    payload: Annotated[dict[str, Any], Body()],
    store: Annotated[Store, Depends(get_store)],
):
    """Register a new player."""
    fields = validate_signup_fields(payload)

    # Check if user already exists
    if store.get_user_by_email(fields["email"]):
        raise Conflict("User with this email already exists")

    user = create_user(store, fields)

    return SignupResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    store: Annotated[Store, Depends(get_store)],
):
    """Login with email and password."""
    user = authenticate_user(store, credentials.email, credentials.password)

    if not user:
        raise Unauthorized("Incorrect email or password")

    access_token = create_access_token(user.id, user.email)

    return AuthResponse(
        access_token=access_token,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
def get_me(
    principal: Annotated[Principal, Depends(get_current_principal)],
    store: Annotated[Store, Depends(get_store)],
):
    """Get current user information."""
    user = store.get_user(principal.id)
    if user is None:
        raise NotFound("User not found")
    return UserResponse.model_validate(user)
