"""FastAPI dependency — JWT auth for protected routes."""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.application.services.auth_service import Identity, authenticate
from app.core.exceptions import UnauthorizedException

security = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Identity:
    """Extract and validate the caller's identity from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Unauthorized. No token.")
    return authenticate(credentials.credentials)
