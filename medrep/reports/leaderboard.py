import datetime
import logging
from collections import Counter
from dataclasses import dataclass

from django.db.models import TextChoices
from django.utils.timezone import localdate

from medrep.store.client import get_store
from medrep.users.models import UserRole
from medrep.utils.exceptions import ValidationError
from medrep.visits.models import VisitStatus

logger = logging.getLogger(__name__)


class LeaderboardWindow(TextChoices):
    ALL = "all", "All time"
    WEEKLY = "weekly", "Last 7 days"
    DAILY = "daily", "Today"

    def get_date_range(self, today: datetime.date):
        match self:
            case LeaderboardWindow.ALL:
                return None, None
            case LeaderboardWindow.WEEKLY:
                return today - datetime.timedelta(days=6), today
            case LeaderboardWindow.DAILY:
                return today, today


@dataclass
class RepresentativePerformance:
    representative_id: int
    name: str
    visit_count: int
    ordered_quantity: int


def get_leaderboard(window=LeaderboardWindow.ALL, today=None, include_facility_visits=False, store=None):
    """Rank every representative by approved visits in the window.

    Representatives without a single visit are still listed with zero.
    Equal visit counts keep the order representatives were fetched in.
    """
    try:
        window = LeaderboardWindow(window)
    except ValueError:
        raise ValidationError(f"Unknown leaderboard window: {window}", window=window)
    store = get_store(store)
    start, end = window.get_date_range(today or localdate())

    representatives = store.query("user_accounts", filters={"role": UserRole.REPRESENTATIVE}, fields=["id", "name"])
    visit_filters = {"status": VisitStatus.approved}
    if start:
        visit_filters["date__gte"] = start
    if end:
        visit_filters["date__lte"] = end

    collections = ["visits", "facility_visits"] if include_facility_visits else ["visits"]
    visit_counts, quantities = Counter(), Counter()
    for collection in collections:
        for visit in store.query(
            collection, filters=visit_filters, joins=["order_lines"], fields=["id", "submitted_by_id"]
        ):
            visit_counts[visit["submitted_by_id"]] += 1
            quantities[visit["submitted_by_id"]] += sum(line["quantity"] for line in visit["order_lines"])

    performance = [
        RepresentativePerformance(
            representative_id=representative["id"],
            name=representative["name"],
            visit_count=visit_counts[representative["id"]],
            ordered_quantity=quantities[representative["id"]],
        )
        for representative in representatives
    ]
    performance.sort(key=lambda entry: entry.visit_count, reverse=True)
    logger.debug("Leaderboard %s from %s to %s: %s representatives", window, start, end, len(performance))
    return performance
