# app/core/auth.py

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from app.core.config import settings
from app.core.jwt import decode_session_token
from app.core.oauth2 import bearer_scheme


def require_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
):
    # Pass-through until AUTH_REQUIRED is switched on for the deployment
    if not settings.AUTH_REQUIRED:
        return None

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing session",
        )

    payload = decode_session_token(credentials.credentials)

    if payload is None or payload.get("sub") is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing session",
        )

    return payload
