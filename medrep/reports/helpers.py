import datetime
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import assert_never

from django.conf import settings
from django.db.models import TextChoices
from django.utils.timezone import localdate

from medrep.store.client import get_store
from medrep.store.names import lookup_names, resolve_name
from medrep.users.models import UserRole
from medrep.utils.datetime import get_last_month_starts, is_within
from medrep.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
DASHBOARD_TREND_MONTHS = 6
RECENT_VISITS_LIMIT = 5


class ReportVariant(TextChoices):
    VISITS = "visits", "Doctor Visits"
    FACILITY_VISITS = "facility_visits", "Facility Visits"

    @property
    def counterparty(self):
        """(foreign key column, collection) of the doctor or facility visited."""
        match self:
            case ReportVariant.VISITS:
                return "doctor_id", "doctors"
            case ReportVariant.FACILITY_VISITS:
                return "facility_id", "facilities"
            case _:
                assert_never(self)


@dataclass
class ReportFilters:
    representative_id: int | None = None
    doctor_id: int | None = None
    medicine_id: int | None = None
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    search: str | None = None


@dataclass
class MedicineQuantity:
    medicine_id: int
    medicine_name: str
    quantity: int


@dataclass
class ReportRow:
    id: int
    date: datetime.date
    status: str
    notes: str | None
    representative_id: int
    representative_name: str
    counterparty_id: int
    counterparty_name: str
    medicines: list[MedicineQuantity] = field(default_factory=list)

    @property
    def total_quantity(self):
        return sum(medicine.quantity for medicine in self.medicines)

    @property
    def medicine_summary(self):
        match len(self.medicines):
            case 0:
                return "No medicines ordered"
            case 1:
                medicine = self.medicines[0]
                return f"{medicine.medicine_name} ({medicine.quantity})"
            case count:
                return f"{count} medicines"

    def matches_search(self, term):
        term = term.lower()
        haystack = [self.date.isoformat(), self.status, self.counterparty_name]
        haystack.extend(medicine.medicine_name for medicine in self.medicines)
        return any(term in value.lower() for value in haystack if value)


@dataclass
class ReportPage:
    rows: list[ReportRow]
    total_rows: int
    page: int
    page_size: int

    @property
    def total_pages(self):
        return max(1, -(-self.total_rows // self.page_size))


def get_report(
    role,
    actor_id,
    filters: ReportFilters | None = None,
    page=1,
    page_size=10,
    variant=ReportVariant.VISITS,
    store=None,
) -> ReportPage:
    """One page of the visit (or facility visit) report as seen by ``actor_id``.

    Administrators see every representative's records and can narrow them by
    representative, doctor, medicine and date range. Representatives only
    ever see their own records and narrow them with a free text search.
    Rows are newest first with ties broken by the newest id, so repeated calls
    with the same arguments return the same page.
    """
    filters = filters or ReportFilters()
    role, variant = _validate_report_request(role, filters, page, page_size, variant)
    rows = _filtered_rows(get_store(store), role, actor_id, filters, variant)
    start = (page - 1) * page_size
    return ReportPage(rows=rows[start : start + page_size], total_rows=len(rows), page=page, page_size=page_size)


def get_report_rows(role, actor_id, filters=None, variant=ReportVariant.VISITS, store=None) -> list[ReportRow]:
    """Every row of the filtered report, for exports."""
    filters = filters or ReportFilters()
    role, variant = _validate_report_request(role, filters, 1, settings.REPORT_PAGE_SIZE_OPTIONS[0], variant)
    return _filtered_rows(get_store(store), role, actor_id, filters, variant)


def _validate_report_request(role, filters, page, page_size, variant):
    if role not in UserRole.values:
        raise ValidationError(f"Unknown role: {role}", role=role)
    if variant not in ReportVariant.values:
        raise ValidationError(f"Unknown report: {variant}", variant=variant)
    if not isinstance(page, int) or page < 1:
        raise ValidationError("Page numbers start at 1.", page=page)
    if page_size not in settings.REPORT_PAGE_SIZE_OPTIONS:
        raise ValidationError(
            f"Page size must be one of {settings.REPORT_PAGE_SIZE_OPTIONS}.", page_size=page_size
        )
    if filters.start_date and filters.end_date and filters.start_date > filters.end_date:
        raise ValidationError("The start date must not be after the end date.")
    variant = ReportVariant(variant)
    if filters.doctor_id is not None and variant != ReportVariant.VISITS:
        raise ValidationError("Facility visit reports cannot be filtered by doctor.")
    return UserRole(role), variant


def _filtered_rows(store, role, actor_id, filters, variant):
    rows = _build_rows(store, variant, _scope(role, actor_id, filters))
    match role:
        case UserRole.ADMIN:
            return [row for row in rows if _matches_admin_filters(row, filters)]
        case UserRole.REPRESENTATIVE:
            search = (filters.search or "").strip()
            if search:
                return [row for row in rows if row.matches_search(search)]
            return rows


def _scope(role, actor_id, filters):
    if role == UserRole.REPRESENTATIVE:
        return {"submitted_by_id": actor_id}
    if filters.representative_id is not None:
        return {"submitted_by_id": filters.representative_id}
    return {}


def _build_rows(store, variant, scope):
    counterparty_key, counterparty_collection = variant.counterparty
    records = store.query(variant.value, filters=scope, joins=["order_lines"], order_by=["-date", "-id"])

    representative_names = lookup_names(store, "user_accounts", [r["submitted_by_id"] for r in records])
    counterparty_names = lookup_names(store, counterparty_collection, [r[counterparty_key] for r in records])
    medicine_names = lookup_names(
        store, "medicines", [line["medicine_id"] for r in records for line in r["order_lines"]]
    )

    return [
        ReportRow(
            id=record["id"],
            date=record["date"],
            status=record["status"],
            notes=record["notes"],
            representative_id=record["submitted_by_id"],
            representative_name=resolve_name(
                representative_names, record["submitted_by_id"], NOT_AVAILABLE, collection="user_accounts"
            ),
            counterparty_id=record[counterparty_key],
            counterparty_name=resolve_name(
                counterparty_names, record[counterparty_key], NOT_AVAILABLE, collection=counterparty_collection
            ),
            medicines=[
                MedicineQuantity(
                    medicine_id=line["medicine_id"],
                    medicine_name=resolve_name(
                        medicine_names, line["medicine_id"], NOT_AVAILABLE, collection="medicines"
                    ),
                    quantity=line["quantity"],
                )
                for line in record["order_lines"]
            ],
        )
        for record in records
    ]


def _matches_admin_filters(row, filters):
    if filters.doctor_id is not None and row.counterparty_id != filters.doctor_id:
        return False
    if filters.medicine_id is not None and not any(m.medicine_id == filters.medicine_id for m in row.medicines):
        return False
    return is_within(row.date, filters.start_date, filters.end_date)


def get_dashboard_stats(today=None, store=None):
    """Headline counts and the recent monthly visit trend for administrators."""
    store = get_store(store)
    today = today or localdate()
    months = get_last_month_starts(today, DASHBOARD_TREND_MONTHS)
    visits = store.query(
        "visits",
        filters={"date__gte": months[0], "date__lte": today},
        joins=["order_lines"],
        fields=["id", "date"],
    )
    return {
        "total_representatives": store.count("user_accounts", {"role": UserRole.REPRESENTATIVE}),
        "total_doctors": store.count("doctors"),
        "total_visits": store.count("visits"),
        "total_facilities": store.count("facilities"),
        "visit_trend": _monthly_trend(visits, months),
    }


def get_representative_summary(representative_id, today=None, store=None):
    """What a representative sees on their own dashboard."""
    store = get_store(store)
    today = today or localdate()
    visits = store.query(
        "visits",
        filters={"submitted_by_id": representative_id},
        joins=["order_lines"],
        order_by=["-date", "-id"],
    )
    this_month = [v for v in visits if (v["date"].year, v["date"].month) == (today.year, today.month)]
    recent = visits[:RECENT_VISITS_LIMIT]
    doctor_names = lookup_names(store, "doctors", [v["doctor_id"] for v in recent])
    months = get_last_month_starts(today, DASHBOARD_TREND_MONTHS)
    return {
        "monthly_visits": len(this_month),
        "monthly_quantity": sum(_ordered_quantity(v) for v in this_month),
        "unique_doctors": len({v["doctor_id"] for v in visits}),
        "recent_visits": [
            {
                "id": visit["id"],
                "date": visit["date"],
                "status": visit["status"],
                "doctor_name": resolve_name(doctor_names, visit["doctor_id"], NOT_AVAILABLE, collection="doctors"),
                "total_quantity": _ordered_quantity(visit),
            }
            for visit in recent
        ],
        "visit_trend": _monthly_trend([v for v in visits if v["date"] >= months[0]], months),
    }


def get_filter_options(representative_id=None, store=None):
    """Choices for the administrator's report filters.

    With a representative selected, doctors and medicines are narrowed to
    the ones that representative has visited or ordered.
    """
    store = get_store(store)
    representatives = store.query(
        "user_accounts", filters={"role": UserRole.REPRESENTATIVE}, fields=["id", "name"], order_by=["name", "id"]
    )
    doctor_filters, medicine_filters = {}, {}
    if representative_id is not None:
        visits = store.query(
            "visits", filters={"submitted_by_id": representative_id}, joins=["order_lines"], fields=["id", "doctor_id"]
        )
        doctor_filters = {"pk__in": sorted({v["doctor_id"] for v in visits})}
        medicine_filters = {"pk__in": sorted({line["medicine_id"] for v in visits for line in v["order_lines"]})}
    by_name = {"fields": ["id", "name"], "order_by": ["name", "id"]}
    return {
        "representatives": representatives,
        "doctors": store.query("doctors", filters=doctor_filters, **by_name),
        "medicines": store.query("medicines", filters=medicine_filters, **by_name),
    }


def _ordered_quantity(record):
    return sum(line["quantity"] for line in record["order_lines"])


def _monthly_trend(visits, months):
    totals = defaultdict(lambda: {"visits": 0, "quantity": 0})
    for visit in visits:
        key = (visit["date"].year, visit["date"].month)
        totals[key]["visits"] += 1
        totals[key]["quantity"] += _ordered_quantity(visit)
    return [
        {"month": month.strftime("%b %Y"), **totals[(month.year, month.month)]}
        for month in months
    ]
