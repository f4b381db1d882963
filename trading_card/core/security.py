from fastapi.security import HTTPAuthorizationCredentials
from fastapi.security import HTTPBearer


# Non-bearer or empty Authorization headers resolve to None.
bearer_scheme = HTTPBearer(auto_error=False)


def extract_optional_bearer_token(
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    """Return the caller's personal GitHub token, if one was sent."""

    if credentials is None:
        return None
    return credentials.credentials.strip() or None
