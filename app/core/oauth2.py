from fastapi.security import HTTPBearer

# Reads "Authorization: Bearer <token>"; a missing header is handled in require_session
bearer_scheme = HTTPBearer(auto_error=False)
