import random
from datetime import date

from trading_card.metrics.activity import count_active_days
from trading_card.models import ActivitySnapshot
from trading_card.models import ContributionDay
from trading_card.models import ContributionWeek


def test_empty_calendar_has_no_active_days() -> None:
    """Missing calendar counts as empty."""

    snapshot = ActivitySnapshot(username="octocat", year=2023)

    assert count_active_days(snapshot) == 0


def test_all_zero_calendar_has_no_active_days(snapshot_factory) -> None:
    assert count_active_days(snapshot_factory(year=2023, active_days=0)) == 0


def test_leap_year_with_every_day_active_counts_366(snapshot_factory) -> None:
    snapshot = snapshot_factory(year=2024, active_days=366)

    assert count_active_days(snapshot) == 366


def test_count_only_includes_days_with_contributions(snapshot_factory) -> None:
    snapshot = snapshot_factory(year=2023, active_days=120)

    assert count_active_days(snapshot) == 120


def test_week_order_does_not_change_count(snapshot_factory) -> None:
    """Shuffling weeks keeps the same count."""

    snapshot = snapshot_factory(year=2023, active_days=200)
    weeks = list(snapshot.weeks)
    random.Random(7).shuffle(weeks)
    shuffled = snapshot.model_copy(update={"weeks": tuple(weeks)})

    assert count_active_days(shuffled) == count_active_days(snapshot) == 200


def test_repeated_date_is_counted_once() -> None:
    """Active days are distinct calendar dates."""

    day = ContributionDay(date=date(2023, 3, 1), count=4)
    snapshot = ActivitySnapshot(
        username="octocat",
        year=2023,
        weeks=(
            ContributionWeek(days=(day,)),
            ContributionWeek(
                days=(day, ContributionDay(date=date(2023, 3, 2), count=0))
            ),
        ),
    )

    assert count_active_days(snapshot) == 1
