from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Mapping
from datetime import date
from datetime import timedelta

import pytest

from trading_card.models import ActivitySnapshot
from trading_card.models import ContributionDay
from trading_card.models import ContributionWeek
from trading_card.models import LanguageInfo
from trading_card.models import RepositoryCommit


def build_weeks(year: int, counts: Mapping[date, int]) -> tuple[ContributionWeek, ...]:
    """Lay out every day of `year` in Sunday-first weeks like GitHub does."""

    weeks: list[ContributionWeek] = []
    current: list[ContributionDay] = []
    day = date(year, 1, 1)
    while day.year == year:
        if current and day.weekday() == 6:
            weeks.append(ContributionWeek(days=tuple(current)))
            current = []
        current.append(ContributionDay(date=day, count=counts.get(day, 0)))
        day += timedelta(days=1)
    if current:
        weeks.append(ContributionWeek(days=tuple(current)))
    return tuple(weeks)


def build_repositories(
    languages: Iterable[tuple[str, str | None] | None],
) -> tuple[RepositoryCommit, ...]:
    repositories = []
    for index, language in enumerate(languages):
        info = None
        if language is not None:
            info = LanguageInfo(name=language[0], color=language[1])
        repositories.append(
            RepositoryCommit(repository=f"octocat/repo-{index}", language=info)
        )
    return tuple(repositories)


@pytest.fixture
def snapshot_factory() -> Callable[..., ActivitySnapshot]:
    def factory(
        year: int = 2023,
        languages: Iterable[tuple[str, str | None] | None] = (),
        active_days: int = 0,
    ) -> ActivitySnapshot:
        start = date(year, 1, 1)
        counts = {start + timedelta(days=offset): 1 for offset in range(active_days)}
        return ActivitySnapshot(
            username="octocat",
            year=year,
            repositories=build_repositories(languages),
            weeks=build_weeks(year, counts),
        )

    return factory
