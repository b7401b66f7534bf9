import datetime

import pytest

from medrep.catalog.models import Doctor
from medrep.catalog.tests.factories import MedicineFactory
from medrep.users.models import UserStatus
from medrep.users.tests.factories import RepresentativeFactory
from medrep.utils.exceptions import NotFoundError, ValidationError
from medrep.visits.helpers import NewDoctor, OrderItem, submit_facility_visit, submit_visit
from medrep.visits.models import VisitStatus

VISIT_DATE = datetime.date(2024, 1, 10)


@pytest.mark.django_db
def test_submit_visit(representative, doctor, medicine):
    other = MedicineFactory(name="Paracetamol")
    visit = submit_visit(
        representative,
        VISIT_DATE,
        [OrderItem(medicine.pk, 10), OrderItem(other.pk, 5)],
        doctor_id=doctor.pk,
        notes="Interested in samples",
    )
    assert visit.status == VisitStatus.pending
    assert visit.submitted_by == representative
    assert visit.doctor == doctor
    assert visit.total_quantity == 15
    assert [(line.medicine.name, line.quantity) for line in visit.order_lines.all()] == [
        ("Amoxicillin", 10),
        ("Paracetamol", 5),
    ]


@pytest.mark.django_db
def test_submit_visit_with_new_doctor(representative, medicine):
    visit = submit_visit(
        representative,
        VISIT_DATE,
        [OrderItem(medicine.pk, 3)],
        new_doctor=NewDoctor(name="Dr. New", specialization="ENT", hospital="Mercy"),
    )
    assert visit.doctor.name == "Dr. New"
    assert not visit.doctor.is_verified
    assert visit.doctor.added_by == representative

    again = submit_visit(
        representative,
        VISIT_DATE,
        [OrderItem(medicine.pk, 1)],
        new_doctor=NewDoctor(name="Dr. New", specialization="ENT", hospital="Mercy"),
    )
    assert again.doctor == visit.doctor
    assert Doctor.objects.filter(name="Dr. New").count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize("status", [UserStatus.INACTIVE, UserStatus.PENDING, UserStatus.REJECTED])
def test_only_active_representatives_submit(status, doctor, medicine):
    rep = RepresentativeFactory(status=status)
    with pytest.raises(ValidationError):
        submit_visit(rep, VISIT_DATE, [OrderItem(medicine.pk, 1)], doctor_id=doctor.pk)


@pytest.mark.django_db
def test_admin_cannot_submit(administrator, doctor, medicine):
    with pytest.raises(ValidationError):
        submit_visit(administrator, VISIT_DATE, [OrderItem(medicine.pk, 1)], doctor_id=doctor.pk)


@pytest.mark.django_db
@pytest.mark.parametrize("quantity", [0, -4])
def test_quantity_must_be_positive(representative, doctor, medicine, quantity):
    with pytest.raises(ValidationError):
        submit_visit(representative, VISIT_DATE, [OrderItem(medicine.pk, quantity)], doctor_id=doctor.pk)


@pytest.mark.django_db
def test_visit_needs_an_order(representative, doctor):
    with pytest.raises(ValidationError):
        submit_visit(representative, VISIT_DATE, [], doctor_id=doctor.pk)


@pytest.mark.django_db
def test_visit_needs_exactly_one_doctor(representative, doctor, medicine):
    with pytest.raises(ValidationError):
        submit_visit(representative, VISIT_DATE, [OrderItem(medicine.pk, 1)])
    with pytest.raises(ValidationError):
        submit_visit(
            representative,
            VISIT_DATE,
            [OrderItem(medicine.pk, 1)],
            doctor_id=doctor.pk,
            new_doctor=NewDoctor(name="Dr. New", specialization="ENT", hospital="Mercy"),
        )


@pytest.mark.django_db
def test_unknown_medicine(representative, doctor):
    with pytest.raises(NotFoundError):
        submit_visit(representative, VISIT_DATE, [OrderItem(999999, 1)], doctor_id=doctor.pk)


@pytest.mark.django_db
def test_unknown_doctor_creates_nothing(representative, medicine):
    with pytest.raises(NotFoundError):
        submit_visit(representative, VISIT_DATE, [OrderItem(medicine.pk, 1)], doctor_id=999999)
    assert not representative.visit_set.exists()


@pytest.mark.django_db
def test_submit_facility_visit(representative, facility, medicine):
    facility_visit = submit_facility_visit(representative, VISIT_DATE, facility.pk, [OrderItem(medicine.pk, 7)])
    assert facility_visit.status == VisitStatus.pending
    assert facility_visit.facility == facility
    assert facility_visit.total_quantity == 7


@pytest.mark.django_db
def test_submit_facility_visit_unknown_facility(representative, medicine):
    with pytest.raises(NotFoundError):
        submit_facility_visit(representative, VISIT_DATE, 999999, [OrderItem(medicine.pk, 7)])
