from trading_card.models import ActivitySnapshot


def count_active_days(snapshot: ActivitySnapshot) -> int:
    """Count distinct calendar days with at least one contribution."""

    active_dates = {
        day.date for week in snapshot.weeks for day in week.days if day.count > 0
    }
    return len(active_dates)
