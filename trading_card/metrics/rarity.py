import calendar

from trading_card.models import RarityTier

# Ordered by descending threshold; Common is the catch-all floor.
RARITY_TIERS: tuple[RarityTier, ...] = (
    RarityTier(name="Legendary", color="#ffd700", min_percent=75),
    RarityTier(name="Epic", color="#9b59b6", min_percent=50),
    RarityTier(name="Rare", color="#3498db", min_percent=25),
    RarityTier(name="Uncommon", color="#2ecc71", min_percent=10),
    RarityTier(name="Common", color="#95a5a6", min_percent=0),
)


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def activity_percent(active_days: int, year: int) -> float:
    """Share of the year's days that were active, in percent."""

    return max(active_days, 0) / days_in_year(year) * 100


def classify_rarity(active_days: int, year: int) -> RarityTier:
    """Map an active-day count to a rarity tier for the given year."""

    percent = activity_percent(active_days, year)
    for tier in RARITY_TIERS:
        if tier.min_percent <= percent:
            return tier
    return RARITY_TIERS[-1]
