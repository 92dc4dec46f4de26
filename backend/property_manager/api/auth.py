"""
Auth API routes - Property Manager
Login, logout and profile for the built-in accounts.
"""
import logging

from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel

from property_manager.api.deps import require_user
from property_manager.services.auth_service import authenticate_user, create_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    email: str
    password: str


@router.post("/login")
async def login(req: LoginRequest):
    """Authenticate and return a JWT token with the user's profile."""
    user = authenticate_user(req.email, req.password)
    if not user:
        logger.info(f"[AUTH] Failed login for {req.email}")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    logger.info(f"[AUTH] {req.email} logged in")
    return {
        "user": user,
        "token": create_token(user),
        "message": "Login successful",
    }


@router.post("/logout")
async def logout():
    """Tokens are stateless; the client discards its copy."""
    return {"message": "Logout successful"}


@router.get("/profile")
async def profile(user: dict = Depends(require_user)):
    """Return the user identified by the bearer token."""
    return {"user": user}
