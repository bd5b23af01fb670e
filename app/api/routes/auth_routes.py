"""
Authentication Routes

POST /auth/register - Register new user and get JWT token
POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
"""

from fastapi import APIRouter, Depends

from app.core.auth import (
    hash_password, verify_password, create_access_token, get_current_user, get_user_service
)
from app.core.exceptions import InvalidCredentials
from app.services.user_service import UserService, serialize_user
from app.schemas.schemas import RegisterRequest, LoginRequest, AuthResponse, MeResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(request: RegisterRequest, users: UserService = Depends(get_user_service)):
    """
    Register a new user account.

    The returned token can be used right away to post jobs.
    """
    user = users.create(request.name, request.email, hash_password(request.password))
    token = create_access_token(data={"sub": str(user["_id"])})
    return {"message": "User registered successfully", "token": token, "user": serialize_user(user)}


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, users: UserService = Depends(get_user_service)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = users.get_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise InvalidCredentials("Invalid email or password")

    token = create_access_token(data={"sub": str(user["_id"])})
    return {"message": "Login successful", "token": token, "user": serialize_user(user)}


@router.get("/me", response_model=MeResponse)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return {"user": user}
