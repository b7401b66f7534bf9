import datetime
import logging
from dataclasses import dataclass

from django.db import transaction

from medrep.catalog.helpers import find_or_add_doctor
from medrep.catalog.models import Doctor, Facility, Medicine
from medrep.users.models import User
from medrep.utils.exceptions import NotFoundError, ValidationError
from medrep.visits.models import FacilityOrderLine, FacilityVisit, OrderLine, Visit, VisitStatus

logger = logging.getLogger(__name__)


@dataclass
class OrderItem:
    medicine_id: int
    quantity: int


@dataclass
class NewDoctor:
    name: str
    specialization: str
    hospital: str
    address: str = ""


def submit_visit(
    submitted_by: User,
    date: datetime.date,
    orders: list[OrderItem],
    doctor_id: int | None = None,
    new_doctor: NewDoctor | None = None,
    notes: str | None = None,
) -> Visit:
    """Record a doctor visit and its orders, waiting for administrator approval.

    Exactly one of ``doctor_id`` or ``new_doctor`` is expected. A new doctor is
    matched against existing doctors by name, specialization and hospital and
    is only created (unverified) when there is no match.
    """
    _check_can_submit(submitted_by)
    if (doctor_id is None) == (new_doctor is None):
        raise ValidationError("Choose an existing doctor or describe a new one.")
    medicines = _check_orders(orders)

    with transaction.atomic():
        if new_doctor is not None:
            doctor, created = find_or_add_doctor(
                submitted_by,
                new_doctor.name,
                new_doctor.specialization,
                new_doctor.hospital,
                address=new_doctor.address,
            )
            if created:
                logger.info("Visit by user %s added new doctor %s", submitted_by.pk, doctor.pk)
        else:
            doctor = Doctor.objects.filter(pk=doctor_id).first()
            if doctor is None:
                raise NotFoundError(f"Doctor {doctor_id} does not exist.", doctor_id=doctor_id)
        visit = Visit.objects.create(
            submitted_by=submitted_by, doctor=doctor, date=date, notes=notes, status=VisitStatus.pending
        )
        OrderLine.objects.bulk_create(
            [OrderLine(visit=visit, medicine=medicines[item.medicine_id], quantity=item.quantity) for item in orders]
        )
    logger.info("Visit %s submitted by user %s with %s order lines", visit.pk, submitted_by.pk, len(orders))
    return visit


def submit_facility_visit(
    submitted_by: User,
    date: datetime.date,
    facility_id: int,
    orders: list[OrderItem],
    notes: str | None = None,
) -> FacilityVisit:
    _check_can_submit(submitted_by)
    medicines = _check_orders(orders)
    facility = Facility.objects.filter(pk=facility_id).first()
    if facility is None:
        raise NotFoundError(f"Facility {facility_id} does not exist.", facility_id=facility_id)

    with transaction.atomic():
        facility_visit = FacilityVisit.objects.create(
            submitted_by=submitted_by, facility=facility, date=date, notes=notes, status=VisitStatus.pending
        )
        FacilityOrderLine.objects.bulk_create(
            [
                FacilityOrderLine(
                    facility_visit=facility_visit, medicine=medicines[item.medicine_id], quantity=item.quantity
                )
                for item in orders
            ]
        )
    logger.info(
        "Facility visit %s submitted by user %s with %s order lines",
        facility_visit.pk,
        submitted_by.pk,
        len(orders),
    )
    return facility_visit


def _check_can_submit(user: User):
    if not user.can_submit_visits:
        raise ValidationError("Only active medical representatives can submit visits.", user_id=user.pk)


def _check_orders(orders: list[OrderItem]) -> dict[int, Medicine]:
    if not orders:
        raise ValidationError("A visit needs at least one medicine order.")
    for item in orders:
        if item.quantity is None or item.quantity <= 0:
            raise ValidationError("Order quantities must be positive.", medicine_id=item.medicine_id)
    medicine_ids = {item.medicine_id for item in orders}
    medicines = Medicine.objects.in_bulk(medicine_ids)
    missing = medicine_ids - set(medicines)
    if missing:
        raise NotFoundError(f"Unknown medicines: {sorted(missing)}", medicine_ids=sorted(missing))
    return medicines
