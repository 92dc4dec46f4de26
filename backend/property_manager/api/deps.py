"""
Request-scoped dependencies shared by the routers.
"""
from fastapi import Depends, Header, HTTPException
from typing import Optional

from property_manager.config import get_settings
from property_manager.db.store import RecordStore
from property_manager.services.auth_service import get_user, verify_token


def get_store() -> RecordStore:
    """Record store rooted at the configured data directory."""
    return RecordStore(get_settings().data_dir)


async def get_current_user(authorization: Optional[str] = Header(None)) -> Optional[dict]:
    """Dependency: extract and verify JWT from Authorization header.
    Returns None if no token is sent. Raises 401 if the token is invalid/expired."""
    if not authorization:
        return None

    # Accept "Bearer <token>" format
    token = authorization
    if token.startswith("Bearer "):
        token = token[7:]

    payload = verify_token(token)
    if not payload:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    user = get_user(payload.get("sub"))
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


async def require_user(user: Optional[dict] = Depends(get_current_user)) -> dict:
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user
