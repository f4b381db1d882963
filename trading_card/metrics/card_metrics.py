from trading_card.metrics.activity import count_active_days
from trading_card.metrics.icon_catalog import DEFAULT_ICON_CATALOG
from trading_card.metrics.icon_catalog import IconCatalog
from trading_card.metrics.language import resolve_dominant_language
from trading_card.metrics.rarity import activity_percent
from trading_card.metrics.rarity import classify_rarity
from trading_card.models import ActivitySnapshot
from trading_card.models import CardMetrics


def compute_card_metrics(
    snapshot: ActivitySnapshot,
    year: int,
    catalog: IconCatalog = DEFAULT_ICON_CATALOG,
) -> CardMetrics:
    """Derive the card metrics for one profile and year."""

    active_days = count_active_days(snapshot)
    return CardMetrics(
        dominant_language=resolve_dominant_language(snapshot, year, catalog),
        active_days=active_days,
        activity_percent=round(activity_percent(active_days, year), 2),
        rarity=classify_rarity(active_days, year),
    )
