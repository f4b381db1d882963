from datetime import date
from datetime import datetime

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class LanguageInfo(FrozenModel):
    """Primary language of a repository as reported by GitHub."""

    name: str
    color: str | None = None


class RepositoryCommit(FrozenModel):
    """A repository the user committed to during the snapshot year."""

    repository: str
    language: LanguageInfo | None = None


class ContributionDay(FrozenModel):
    date: date
    count: int = Field(ge=0)


class ContributionWeek(FrozenModel):
    days: tuple[ContributionDay, ...] = ()


class ContributionTotals(FrozenModel):
    commits: int = Field(default=0, ge=0)
    pull_requests: int = Field(default=0, ge=0)
    issues: int = Field(default=0, ge=0)
    reviews: int = Field(default=0, ge=0)
    contributions: int = Field(default=0, ge=0)


class ActivitySnapshot(FrozenModel):
    """One profile's contribution data for one calendar year."""

    username: str
    year: int
    repositories: tuple[RepositoryCommit, ...] = ()
    weeks: tuple[ContributionWeek, ...] = ()
    totals: ContributionTotals = ContributionTotals()


class GitHubProfile(FrozenModel):
    login: str
    name: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: datetime
    location: str | None = None
    company: str | None = None


class DominantLanguage(FrozenModel):
    """Most used language of the year and how to draw its icon.

    `is_special_case` marks Java, which the icon catalog does not list; the
    presentation layer ships its own artwork for it.
    """

    name: str
    color: str
    is_special_case: bool = False
    icon_key: str | None = None


class RarityTier(FrozenModel):
    name: str
    color: str
    min_percent: float


class CardPalette(FrozenModel):
    light: str
    medium: str


class CardMetrics(FrozenModel):
    """Derived metrics for one (profile, year) card."""

    dominant_language: DominantLanguage | None
    active_days: int = Field(ge=0)
    activity_percent: float
    rarity: RarityTier
