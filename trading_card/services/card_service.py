import logging
from collections.abc import Callable
from datetime import date
from typing import TypeVar

import httpx

from trading_card.github_api import GitHubTokenMissing
from trading_card.github_api import GitHubUserNotFound
from trading_card.github_api import fetch_user_profile
from trading_card.github_api import fetch_year_activity
from trading_card.metrics.card_metrics import compute_card_metrics
from trading_card.metrics.colors import tint_pair
from trading_card.models import CardPalette
from trading_card.models import DominantLanguage
from trading_card.models import GitHubProfile
from trading_card.models import RarityTier

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GitHubUserNotFoundError(Exception):
    """Raised when GitHub has no user with the requested login."""


class InvalidGitHubTokenError(Exception):
    """Raised when GitHub rejects the provided token."""


class MissingGitHubTokenError(Exception):
    """Raised when no GitHub token is configured or supplied."""


class GitHubAPIError(Exception):
    """Raised when GitHub requests fail for other reasons."""


class InvalidYearError(Exception):
    """Raised when a card is requested for a year the profile cannot cover."""


def available_years(profile: GitHubProfile, today: date | None = None) -> list[int]:
    """Years from account creation up to the current one, newest first."""

    current_year = (today or date.today()).year
    first_year = min(profile.created_at.year, current_year)
    return list(range(current_year, first_year - 1, -1))


def card_palette(
    language: DominantLanguage | None, rarity: RarityTier
) -> CardPalette:
    """Tints of the language color, or of the rarity color as a fallback."""

    if language is not None:
        try:
            return tint_pair(language.color)
        except ValueError:
            logger.warning("Unusable color %r for %s", language.color, language.name)
    return tint_pair(rarity.color)


def _call_github(username: str, request: Callable[[], T]) -> T:
    try:
        return request()
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        if status_code == 404:
            raise GitHubUserNotFoundError(username) from exc
        if status_code in {401, 403}:
            raise InvalidGitHubTokenError from exc
        logger.warning("GitHub responded %s for %s", status_code, username)
        raise GitHubAPIError from exc
    except GitHubUserNotFound as exc:
        raise GitHubUserNotFoundError(username) from exc
    except GitHubTokenMissing as exc:
        raise MissingGitHubTokenError from exc
    except Exception as exc:
        logger.exception("GitHub request failed for %s", username)
        raise GitHubAPIError from exc


def get_profile_data(
    username: str,
    token: str | None,
    api_base_url: str,
) -> dict[str, object]:
    """Build the profile payload with the years a card can be made for."""

    profile = _call_github(
        username,
        lambda: fetch_user_profile(
            username=username, token=token, api_base_url=api_base_url
        ),
    )
    return {
        "profile": profile,
        "available_years": available_years(profile),
    }


def get_card_data(
    username: str,
    year: int | None,
    token: str | None,
    api_base_url: str,
    graphql_url: str,
) -> dict[str, object]:
    """Fetch a user's activity for one year and derive the card payload."""

    profile = _call_github(
        username,
        lambda: fetch_user_profile(
            username=username, token=token, api_base_url=api_base_url
        ),
    )

    years = available_years(profile)
    selected_year = years[0] if year is None else year
    if selected_year not in years:
        raise InvalidYearError(
            f"year must be between {years[-1]} and {years[0]}"
        )

    snapshot = _call_github(
        username,
        lambda: fetch_year_activity(
            username=profile.login,
            year=selected_year,
            token=token,
            graphql_url=graphql_url,
        ),
    )

    metrics = compute_card_metrics(snapshot, selected_year)
    language = metrics.dominant_language
    logger.info(
        "Built %s card for %s: %s active days, language %s",
        selected_year,
        profile.login,
        metrics.active_days,
        language.name if language else None,
    )

    return {
        "profile": profile,
        "year": selected_year,
        "totals": snapshot.totals,
        "active_days": metrics.active_days,
        "activity_percent": metrics.activity_percent,
        "rarity": metrics.rarity,
        "dominant_language": language,
        "palette": card_palette(language, metrics.rarity),
    }
