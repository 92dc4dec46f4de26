"""
Authentication Service - Property Manager
JWT-based auth with bcrypt password hashing for the built-in demo accounts.
"""
import time
import bcrypt
import jwt
from typing import Optional, Dict, Any, List

from property_manager.config import get_settings

JWT_ALGORITHM = "HS256"


def _hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


_DEMO_ACCOUNTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "email": "admin@propertymanager.com",
        "password": "admin123",
        "firstName": "John",
        "lastName": "Admin",
        "role": "ADMIN",
        "company": "Property Management Co.",
        "phone": "(555) 123-4567",
        "isActive": True,
    },
    {
        "id": "2",
        "email": "manager@propertymanager.com",
        "password": "manager123",
        "firstName": "Sarah",
        "lastName": "Manager",
        "role": "MANAGER",
        "company": "Property Management Co.",
        "phone": "(555) 987-6543",
        "isActive": True,
    },
    {
        "id": "3",
        "email": "staff@propertymanager.com",
        "password": "staff123",
        "firstName": "Mike",
        "lastName": "Staff",
        "role": "STAFF",
        "company": "Property Management Co.",
        "phone": "(555) 555-1234",
        "isActive": True,
    },
]

# User registry keyed by email; only bcrypt digests are kept
USERS: Dict[str, Dict[str, Any]] = {
    account["email"]: {
        **{k: v for k, v in account.items() if k != "password"},
        "password_hash": _hash(account["password"]),
    }
    for account in _DEMO_ACCOUNTS
}


def public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """User info safe to return to clients."""
    return {k: v for k, v in user.items() if k != "password_hash"}


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against a bcrypt hash."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def authenticate_user(email: str, password: str) -> Optional[Dict[str, Any]]:
    """Authenticate a user. Returns public user info or None."""
    user = USERS.get(email)
    if not user or not user.get("isActive"):
        return None
    if not verify_password(password, user["password_hash"]):
        return None
    return public_user(user)


def get_user(email: str) -> Optional[Dict[str, Any]]:
    user = USERS.get(email)
    return public_user(user) if user else None


def create_token(user_info: Dict[str, Any]) -> str:
    """Create a JWT token for an authenticated user."""
    settings = get_settings()
    now = int(time.time())
    payload = {
        "sub": user_info["email"],
        "uid": user_info["id"],
        "role": user_info["role"],
        "iat": now,
        "exp": now + settings.jwt_expiration_seconds,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=JWT_ALGORITHM)


def verify_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify a JWT token. Returns decoded payload or None."""
    try:
        return jwt.decode(token, get_settings().jwt_secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
