import datetime
import logging
from dataclasses import dataclass, field
from typing import assert_never

from django.utils.timezone import localdate

from medrep.approvals.transitions import ApprovalKind, parse_kind
from medrep.store.client import get_store
from medrep.store.names import lookup_names, resolve_name
from medrep.users.models import UserRole, UserStatus
from medrep.utils.datetime import display_date
from medrep.visits.models import VisitStatus

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"


@dataclass
class PendingVisit:
    id: int
    name: str
    date: str | None
    doctor_name: str
    kind: ApprovalKind = field(default=ApprovalKind.VISIT, init=False)


@dataclass
class PendingFacilityVisit:
    id: int
    name: str
    date: str | None
    facility_id: int
    facility_name: str
    kind: ApprovalKind = field(default=ApprovalKind.FACILITY_VISIT, init=False)


@dataclass
class PendingDoctor:
    id: int
    name: str
    date: str | None
    specialization: str
    hospital: str
    kind: ApprovalKind = field(default=ApprovalKind.DOCTOR, init=False)


@dataclass
class PendingUserAccount:
    id: int
    name: str
    date: str | None
    email: str
    kind: ApprovalKind = field(default=ApprovalKind.USER_ACCOUNT, init=False)


PendingApprovalItem = PendingVisit | PendingFacilityVisit | PendingDoctor | PendingUserAccount


def list_pending(store=None) -> list[PendingApprovalItem]:
    """Everything waiting on an administrator, visits first, accounts last."""
    store = get_store(store)
    visits = store.query("visits", filters={"status": VisitStatus.pending})
    facility_visits = store.query("facility_visits", filters={"status": VisitStatus.pending})
    doctors = store.query("doctors", filters={"is_verified": False})
    accounts = store.query(
        "user_accounts", filters={"role": UserRole.REPRESENTATIVE, "status": UserStatus.PENDING}
    )

    representative_names = lookup_names(
        store, "user_accounts", [v["submitted_by_id"] for v in visits + facility_visits]
    )
    doctor_names = lookup_names(store, "doctors", [v["doctor_id"] for v in visits])
    facility_names = lookup_names(store, "facilities", [v["facility_id"] for v in facility_visits])

    def representative(record):
        return resolve_name(
            representative_names, record["submitted_by_id"], UNKNOWN, collection="user_accounts", warn=False
        )

    items: list[PendingApprovalItem] = []
    items.extend(
        PendingVisit(
            id=visit["id"],
            name=representative(visit),
            date=display_date(visit["date"]),
            doctor_name=resolve_name(doctor_names, visit["doctor_id"], UNKNOWN, collection="doctors", warn=False),
        )
        for visit in visits
    )
    items.extend(
        PendingFacilityVisit(
            id=visit["id"],
            name=representative(visit),
            date=display_date(visit["date"]),
            facility_id=visit["facility_id"],
            facility_name=resolve_name(
                facility_names, visit["facility_id"], UNKNOWN, collection="facilities", warn=False
            ),
        )
        for visit in facility_visits
    )
    items.extend(
        PendingDoctor(
            id=doctor["id"],
            name=doctor["name"],
            date=display_date(_as_date(doctor["date_created"])),
            specialization=doctor["specialization"],
            hospital=doctor["hospital"],
        )
        for doctor in doctors
    )
    items.extend(
        PendingUserAccount(
            id=account["id"],
            name=account["name"] or UNKNOWN,
            date=display_date(_as_date(account["date_joined"])),
            email=account["email"],
        )
        for account in accounts
    )
    logger.debug(
        "Pending approvals: %s visits, %s facility visits, %s doctors, %s accounts",
        len(visits),
        len(facility_visits),
        len(doctors),
        len(accounts),
    )
    return items


def view_detail(kind, pk, store=None) -> dict:
    """Fetch one pending record with everything an administrator needs to decide on it.

    Visits come back with the representative and counterparty names and
    their order lines, each with its medicine name. Names that cannot be
    resolved are shown as "N/A". Doctors and accounts are returned as stored.
    """
    kind = parse_kind(kind)
    store = get_store(store)
    match kind:
        case ApprovalKind.VISIT:
            record = store.get("visits", pk, joins=["order_lines"])
            counterparty_names = lookup_names(store, "doctors", [record["doctor_id"]])
            counterparty_name = resolve_name(
                counterparty_names, record["doctor_id"], NOT_AVAILABLE, collection="doctors"
            )
            detail = _visit_detail(store, record, counterparty_name)
        case ApprovalKind.FACILITY_VISIT:
            record = store.get("facility_visits", pk, joins=["order_lines"])
            counterparty_names = lookup_names(store, "facilities", [record["facility_id"]])
            counterparty_name = resolve_name(
                counterparty_names, record["facility_id"], NOT_AVAILABLE, collection="facilities"
            )
            detail = _visit_detail(store, record, counterparty_name)
        case ApprovalKind.DOCTOR | ApprovalKind.USER_ACCOUNT:
            detail = store.get(kind.collection, pk)
        case _:
            assert_never(kind)
    detail["kind"] = kind
    return detail


def _visit_detail(store, record, counterparty_name):
    representative_names = lookup_names(store, "user_accounts", [record["submitted_by_id"]])
    medicine_names = lookup_names(store, "medicines", [line["medicine_id"] for line in record["order_lines"]])
    return {
        **record,
        "date": display_date(record["date"]),
        "representative_name": resolve_name(
            representative_names, record["submitted_by_id"], NOT_AVAILABLE, collection="user_accounts"
        ),
        "counterparty_name": counterparty_name,
        "order_lines": [
            {
                "medicine_id": line["medicine_id"],
                "medicine_name": resolve_name(
                    medicine_names, line["medicine_id"], NOT_AVAILABLE, collection="medicines"
                ),
                "quantity": line["quantity"],
            }
            for line in record["order_lines"]
        ],
    }


def _as_date(value):
    if isinstance(value, datetime.datetime):
        return localdate(value)
    return value
