"""User account API endpoints."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import AuthResponse
from ..core.schemas.common import ApiResponse, ErrorResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(
    prefix="/user",
    tags=["users"],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)


@router.post(
    "/signup", response_model=ApiResponse[AuthResponse], status_code=status.HTTP_201_CREATED
)
async def signup(
    request: Request,
    payload: Any = Body(None),
    session: AsyncSession = Depends(get_db_session),
):
    """Register a new user."""
    auth_service = AuthService(session, request.app.state.settings)
    user = await auth_service.register(payload)
    return ApiResponse[AuthResponse](message="User registered successfully!", data=user)


@router.post("/login", response_model=ApiResponse[AuthResponse])
async def login(
    request: Request,
    payload: Any = Body(None),
    session: AsyncSession = Depends(get_db_session),
):
    """Login user and get a bearer token."""
    auth_service = AuthService(session, request.app.state.settings)
    user = await auth_service.login(payload)
    return ApiResponse[AuthResponse](message="User logged in successfully!", data=user)


@router.delete("/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    request: Request,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete the current account and its notes."""
    auth_service = AuthService(session, request.app.state.settings)
    await auth_service.delete_account(current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
