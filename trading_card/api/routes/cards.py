from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials

from trading_card.api.schemas.card import CardResponse
from trading_card.api.schemas.card import ProfileResponse
from trading_card.core.security import bearer_scheme
from trading_card.core.security import extract_optional_bearer_token
from trading_card.services.card_service import GitHubAPIError
from trading_card.services.card_service import GitHubUserNotFoundError
from trading_card.services.card_service import InvalidGitHubTokenError
from trading_card.services.card_service import InvalidYearError
from trading_card.services.card_service import MissingGitHubTokenError
from trading_card.services.card_service import get_card_data
from trading_card.services.card_service import get_profile_data
from trading_card.settings import Settings


router = APIRouter()


def get_settings() -> Settings:
    return Settings()


def _github_token(
    credentials: HTTPAuthorizationCredentials | None, settings: Settings
) -> str | None:
    return extract_optional_bearer_token(credentials) or settings.github_token


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return a liveness response for health checks."""

    return {"status": "ok"}


@router.get("/users/{username}", response_model=ProfileResponse)
def get_user_profile(
    username: str,
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> dict[str, object]:
    """Return profile metadata and the years a card can be generated for."""

    token = _github_token(credentials, settings)

    try:
        return get_profile_data(
            username=username.strip(),
            token=token,
            api_base_url=settings.github_api_base_url,
        )
    except GitHubUserNotFoundError as exc:
        raise HTTPException(status_code=404, detail="User not found") from exc
    except InvalidGitHubTokenError as exc:
        raise HTTPException(status_code=401, detail="GitHub token is invalid") from exc
    except GitHubAPIError as exc:
        raise HTTPException(
            status_code=502, detail="GitHub API request failed"
        ) from exc


@router.get("/cards/{username}", response_model=CardResponse)
def get_trading_card(
    username: str,
    year: int | None = Query(default=None),
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> dict[str, object]:
    """Return the trading card payload for a user and calendar year."""

    token = _github_token(credentials, settings)

    try:
        return get_card_data(
            username=username.strip(),
            year=year,
            token=token,
            api_base_url=settings.github_api_base_url,
            graphql_url=settings.github_graphql_url,
        )
    except InvalidYearError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except GitHubUserNotFoundError as exc:
        raise HTTPException(status_code=404, detail="User not found") from exc
    except InvalidGitHubTokenError as exc:
        raise HTTPException(status_code=401, detail="GitHub token is invalid") from exc
    except MissingGitHubTokenError as exc:
        raise HTTPException(
            status_code=401, detail="GitHub token is required"
        ) from exc
    except GitHubAPIError as exc:
        raise HTTPException(
            status_code=502, detail="GitHub API request failed"
        ) from exc
