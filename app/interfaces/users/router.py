"""
FastAPI router for the users bounded context.

Routes only bind the path, the raw JSON body and the request path,
then delegate to UserResource. Validation and error mapping live
in the resource, so bodies are accepted as untyped JSON here.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from app.interfaces.users.dependencies import get_user_resource
from app.interfaces.users.resource import UserResource
from app.interfaces.users.schemas import UserApiDto
from app.shared.errors.api_error import ApiError
from app.shared.security.rate_limiting import DEFAULT_RATE_LIMIT, limiter

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/{user_id}",
    response_model=UserApiDto,
    responses={404: {"model": ApiError}, 500: {"model": ApiError}},
    summary="Get a user",
    description="Return the user with the given id.",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
def find_user(
    user_id: str,
    request: Request,
    resource: UserResource = Depends(get_user_resource),
) -> Response:
    """Look up one user by id."""
    return resource.find_by_id(user_id, path=request.url.path)


@router.get(
    "",
    response_model=list[UserApiDto],
    responses={500: {"model": ApiError}},
    summary="List users",
    description="Return every user in store order.",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
def list_users(
    request: Request,
    resource: UserResource = Depends(get_user_resource),
) -> Response:
    """List all users."""
    return resource.find_all(path=request.url.path)


@router.post(
    "",
    status_code=201,
    response_model=UserApiDto,
    responses={400: {"model": ApiError}, 500: {"model": ApiError}},
    summary="Create a user",
    description="Create a user. The id is assigned by the server and must not be sent.",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
def create_user(
    request: Request,
    payload: Any = Body(default=None),
    resource: UserResource = Depends(get_user_resource),
) -> Response:
    """Create a user from the JSON body."""
    return resource.create(payload, path=request.url.path)


@router.put(
    "",
    response_model=UserApiDto,
    responses={
        400: {"model": ApiError},
        404: {"model": ApiError},
        500: {"model": ApiError},
    },
    summary="Update a user",
    description="Replace the user identified by the body's id.",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
def update_user(
    request: Request,
    payload: Any = Body(default=None),
    resource: UserResource = Depends(get_user_resource),
) -> Response:
    """Update a user from the JSON body."""
    return resource.update(payload, path=request.url.path)


@router.delete(
    "/{user_id}",
    status_code=204,
    response_class=Response,
    responses={500: {"model": ApiError}},
    summary="Delete a user",
    description="Delete the user with the given id. Unknown ids also return 204.",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
def delete_user(
    user_id: str,
    request: Request,
    resource: UserResource = Depends(get_user_resource),
) -> Response:
    """Delete one user by id."""
    return resource.delete(user_id, path=request.url.path)
