from datetime import datetime

from pydantic import BaseModel


class ProfileSchema(BaseModel):
    """Public GitHub profile fields shown on the card."""

    login: str
    name: str | None
    avatar_url: str | None
    bio: str | None
    public_repos: int
    followers: int
    following: int
    created_at: datetime
    location: str | None
    company: str | None


class ProfileResponse(BaseModel):
    """Profile lookup payload with the years a card can be generated for."""

    profile: ProfileSchema
    available_years: list[int]


class TotalsSchema(BaseModel):
    commits: int
    pull_requests: int
    issues: int
    reviews: int
    contributions: int


class RaritySchema(BaseModel):
    name: str
    color: str
    min_percent: float


class LanguageSchema(BaseModel):
    name: str
    color: str
    is_special_case: bool
    icon_key: str | None


class PaletteSchema(BaseModel):
    light: str
    medium: str


class CardResponse(BaseModel):
    """Trading card payload for one user and year."""

    profile: ProfileSchema
    year: int
    totals: TotalsSchema
    active_days: int
    activity_percent: float
    rarity: RaritySchema
    dominant_language: LanguageSchema | None
    palette: PaletteSchema
