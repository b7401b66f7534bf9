import logging
from contextlib import contextmanager
from typing import assert_never

from django.db.models import TextChoices

from medrep.store.client import get_store
from medrep.users.models import UserRole, UserStatus
from medrep.utils.exceptions import ConflictError, ValidationError
from medrep.utils.lock import try_cache_lock
from medrep.visits.models import VisitStatus

logger = logging.getLogger(__name__)


class ApprovalKind(TextChoices):
    VISIT = "visit", "Visit"
    FACILITY_VISIT = "facility_visit", "Facility Visit"
    DOCTOR = "doctor", "Doctor"
    USER_ACCOUNT = "user_account", "User Account"

    @property
    def collection(self):
        match self:
            case ApprovalKind.VISIT:
                return "visits"
            case ApprovalKind.FACILITY_VISIT:
                return "facility_visits"
            case ApprovalKind.DOCTOR:
                return "doctors"
            case ApprovalKind.USER_ACCOUNT:
                return "user_accounts"
            case _:
                assert_never(self)


def approve(kind, pk, store=None):
    """Move a pending record to its approved state.

    Raises ConflictError when the record has already left the pending state
    (or another approval of it is in flight) and NotFoundError when it is gone.
    """
    kind = parse_kind(kind)
    store = get_store(store)
    with _entity_lock(kind, pk):
        match kind:
            case ApprovalKind.VISIT | ApprovalKind.FACILITY_VISIT:
                store.update(
                    kind.collection,
                    pk,
                    {"status": VisitStatus.approved},
                    expected={"status": VisitStatus.pending},
                )
            case ApprovalKind.DOCTOR:
                store.update(kind.collection, pk, {"is_verified": True}, expected={"is_verified": False})
            case ApprovalKind.USER_ACCOUNT:
                store.update(
                    kind.collection,
                    pk,
                    {"status": UserStatus.ACTIVE},
                    expected={"status": UserStatus.PENDING, "role": UserRole.REPRESENTATIVE},
                )
            case _:
                assert_never(kind)
    logger.info("Approved %s %s", kind, pk)


def reject(kind, pk, store=None):
    """Reject a pending record. Unverified doctors are deleted outright."""
    kind = parse_kind(kind)
    store = get_store(store)
    with _entity_lock(kind, pk):
        match kind:
            case ApprovalKind.VISIT | ApprovalKind.FACILITY_VISIT:
                store.update(
                    kind.collection,
                    pk,
                    {"status": VisitStatus.rejected},
                    expected={"status": VisitStatus.pending},
                )
            case ApprovalKind.DOCTOR:
                store.delete(kind.collection, pk, expected={"is_verified": False})
            case ApprovalKind.USER_ACCOUNT:
                store.update(
                    kind.collection,
                    pk,
                    {"status": UserStatus.REJECTED},
                    expected={"status": UserStatus.PENDING, "role": UserRole.REPRESENTATIVE},
                )
            case _:
                assert_never(kind)
    logger.info("Rejected %s %s", kind, pk)


def toggle_representative_active(pk, store=None):
    """Flip a representative between active and inactive, returning the new status."""
    store = get_store(store)
    with _entity_lock(ApprovalKind.USER_ACCOUNT, pk):
        account = store.get("user_accounts", pk)
        if account["role"] != UserRole.REPRESENTATIVE:
            raise ValidationError("Only representative accounts can be activated or deactivated.", pk=pk)
        match account["status"]:
            case UserStatus.ACTIVE:
                new_status = UserStatus.INACTIVE
            case UserStatus.INACTIVE:
                new_status = UserStatus.ACTIVE
            case _:
                raise ValidationError(
                    f"A {account['status']} account cannot be activated or deactivated.",
                    pk=pk,
                    status=account["status"],
                )
        store.update(
            "user_accounts",
            pk,
            {"status": new_status},
            expected={"status": account["status"], "role": UserRole.REPRESENTATIVE},
        )
    logger.info("Representative %s is now %s", pk, new_status)
    return new_status


def parse_kind(kind):
    try:
        return ApprovalKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown approval kind: {kind}", kind=kind)


@contextmanager
def _entity_lock(kind, pk):
    key = f"approval:{kind}:{pk}"
    with try_cache_lock(key) as acquired:
        if not acquired:
            raise ConflictError("Another change to this record is in progress.", key=key)
        yield
