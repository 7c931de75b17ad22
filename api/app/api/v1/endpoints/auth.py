from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlmodel import Session
from typing import Optional
from app.api.deps import bearer_scheme, get_current_user
from app.core.database import get_session
from app.models.models import User
from app.schemas.auth import LoginRequest, RegisterRequest, AuthResponse, LoginResponse, UserResponse
from app.services.user_service import register_user, authenticate, create_session, revoke_session

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    session: Session = Depends(get_session)
):
    """Login with email and password; returns a bearer token."""
    user = authenticate(session, login_data.email, login_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    user_session = create_session(session, user)
    return LoginResponse(
        user=UserResponse.model_validate(user),
        message="Login successful",
        access_token=user_session.token,
        expires_at=user_session.expires_at
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    register_data: RegisterRequest,
    session: Session = Depends(get_session)
):
    """Register a new user."""
    try:
        new_user = register_user(session, register_data.email, register_data.password)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        ) from e

    return AuthResponse(
        user=UserResponse.model_validate(new_user),
        message="Registration successful"
    )


@router.post("/logout")
async def logout(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session)
):
    """Revoke the token used for this request."""
    revoke_session(session, credentials.credentials)
    return {"success": True, "message": "Logged out"}


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(get_current_user)):
    """The signed-in user."""
    return UserResponse.model_validate(user)
