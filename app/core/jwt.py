from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from app.core.config import settings

SESSION_EXPIRE_MINUTES = 60


def create_session_token(data: dict, expires_delta: timedelta | None = None):
    to_encode = data.copy()

    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=SESSION_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "type": "session"})

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )

def decode_session_token(token: str):
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
        
        # Ensure the token type is "session"
        if payload.get("type") != "session":
            return None
        
        return payload
    
    except JWTError:
        return None
