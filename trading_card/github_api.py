from collections.abc import Mapping
from datetime import date
from datetime import datetime
from typing import Any

import httpx

from trading_card.models import ActivitySnapshot
from trading_card.models import ContributionDay
from trading_card.models import ContributionTotals
from trading_card.models import ContributionWeek
from trading_card.models import GitHubProfile
from trading_card.models import LanguageInfo
from trading_card.models import RepositoryCommit


class GitHubUserNotFound(Exception):
    """Raised when GitHub has no user with the requested login."""


class GitHubTokenMissing(Exception):
    """Raised when a GraphQL request is attempted without a token."""


USER_AGENT = "github-trading-card"

YEAR_ACTIVITY_QUERY = """
query($login: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $login) {
    contributionsCollection(from: $from, to: $to) {
      totalCommitContributions
      totalPullRequestContributions
      totalIssueContributions
      totalPullRequestReviewContributions
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
          }
        }
      }
      commitContributionsByRepository(maxRepositories: 100) {
        repository {
          nameWithOwner
          languages(first: 1, orderBy: {field: SIZE, direction: DESC}) {
            nodes {
              name
              color
            }
          }
        }
      }
    }
  }
}
"""


def _headers(token: str | None) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github+json",
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _non_negative_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)


def parse_github_datetime(raw_value: str) -> datetime:
    return datetime.fromisoformat(raw_value.replace("Z", "+00:00"))


def fetch_user_profile(
    username: str,
    token: str | None,
    api_base_url: str,
) -> GitHubProfile:
    """Fetch public profile data for a user from GitHub REST API."""

    response = httpx.get(
        f"{api_base_url.rstrip('/')}/users/{username}",
        headers=_headers(token),
        timeout=15.0,
    )
    response.raise_for_status()

    payload: Any = response.json()
    if not isinstance(payload, Mapping):
        raise ValueError("GitHub user response is invalid")

    raw_login = payload.get("login")
    raw_created_at = payload.get("created_at")
    if not isinstance(raw_login, str) or not raw_login:
        raise ValueError("GitHub user response is missing required fields")
    if not isinstance(raw_created_at, str):
        raise ValueError("GitHub user response is missing required fields")

    return GitHubProfile(
        login=raw_login,
        name=_optional_str(payload.get("name")),
        avatar_url=_optional_str(payload.get("avatar_url")),
        bio=_optional_str(payload.get("bio")),
        public_repos=_non_negative_int(payload.get("public_repos")),
        followers=_non_negative_int(payload.get("followers")),
        following=_non_negative_int(payload.get("following")),
        created_at=parse_github_datetime(raw_created_at),
        location=_optional_str(payload.get("location")),
        company=_optional_str(payload.get("company")),
    )


def parse_repository_commits(raw_items: Any) -> tuple[RepositoryCommit, ...]:
    """Build repository records from `commitContributionsByRepository`."""

    if not isinstance(raw_items, list):
        return ()

    repositories: list[RepositoryCommit] = []
    for item in raw_items:
        if not isinstance(item, Mapping):
            continue
        repository = item.get("repository")
        if not isinstance(repository, Mapping):
            continue
        name = repository.get("nameWithOwner")
        if not isinstance(name, str) or not name:
            continue

        language = None
        languages = repository.get("languages")
        nodes = languages.get("nodes") if isinstance(languages, Mapping) else None
        if isinstance(nodes, list) and nodes and isinstance(nodes[0], Mapping):
            raw_name = nodes[0].get("name")
            if isinstance(raw_name, str) and raw_name:
                language = LanguageInfo(
                    name=raw_name, color=_optional_str(nodes[0].get("color"))
                )

        repositories.append(RepositoryCommit(repository=name, language=language))

    return tuple(repositories)


def parse_contribution_weeks(raw_weeks: Any) -> tuple[ContributionWeek, ...]:
    """Build calendar weeks, skipping malformed days."""

    if not isinstance(raw_weeks, list):
        return ()

    weeks: list[ContributionWeek] = []
    for week in raw_weeks:
        if not isinstance(week, Mapping):
            continue
        contribution_days = week.get("contributionDays")
        if not isinstance(contribution_days, list):
            continue

        days: list[ContributionDay] = []
        for item in contribution_days:
            if not isinstance(item, Mapping):
                continue
            raw_date = item.get("date")
            raw_count = item.get("contributionCount")
            if not isinstance(raw_date, str) or not isinstance(raw_count, int):
                continue
            try:
                parsed_day = date.fromisoformat(raw_date)
            except ValueError:
                continue
            days.append(ContributionDay(date=parsed_day, count=max(raw_count, 0)))

        weeks.append(ContributionWeek(days=tuple(days)))

    return tuple(weeks)


def fetch_year_activity(
    username: str,
    year: int,
    token: str | None,
    graphql_url: str,
) -> ActivitySnapshot:
    """Fetch one calendar year of contribution data from GitHub GraphQL API.

    Raises:
        GitHubUserNotFound: If GitHub has no user with this login.
        GitHubTokenMissing: If no token is available.
        ValueError: If the response is malformed.
    """

    if not token:
        raise GitHubTokenMissing("GITHUB_TOKEN is required for GraphQL requests")

    variables = {
        "login": username,
        "from": f"{year}-01-01T00:00:00Z",
        "to": f"{year}-12-31T23:59:59Z",
    }
    headers = _headers(token)
    headers["Content-Type"] = "application/json"

    response = httpx.post(
        graphql_url,
        json={"query": YEAR_ACTIVITY_QUERY, "variables": variables},
        headers=headers,
        timeout=20.0,
    )
    response.raise_for_status()

    payload = response.json()
    if not isinstance(payload, Mapping):
        raise ValueError("GitHub GraphQL response is invalid")

    data = payload.get("data")
    user = data.get("user") if isinstance(data, Mapping) else None

    errors = payload.get("errors")
    if errors:
        if user is None and _is_not_found(errors):
            raise GitHubUserNotFound(username)
        raise ValueError("GitHub GraphQL returned errors")

    if not isinstance(data, Mapping):
        raise ValueError("GitHub GraphQL data is missing")
    if not isinstance(user, Mapping):
        raise GitHubUserNotFound(username)

    collection = user.get("contributionsCollection")
    if not isinstance(collection, Mapping):
        collection = {}
    calendar = collection.get("contributionCalendar")
    if not isinstance(calendar, Mapping):
        calendar = {}

    return ActivitySnapshot(
        username=username,
        year=year,
        repositories=parse_repository_commits(
            collection.get("commitContributionsByRepository")
        ),
        weeks=parse_contribution_weeks(calendar.get("weeks")),
        totals=ContributionTotals(
            commits=_non_negative_int(collection.get("totalCommitContributions")),
            pull_requests=_non_negative_int(
                collection.get("totalPullRequestContributions")
            ),
            issues=_non_negative_int(collection.get("totalIssueContributions")),
            reviews=_non_negative_int(
                collection.get("totalPullRequestReviewContributions")
            ),
            contributions=_non_negative_int(calendar.get("totalContributions")),
        ),
    )


def _is_not_found(errors: Any) -> bool:
    if not isinstance(errors, list):
        return False
    return any(
        isinstance(error, Mapping) and error.get("type") == "NOT_FOUND"
        for error in errors
    )
