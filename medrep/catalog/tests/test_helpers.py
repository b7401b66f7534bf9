import pytest

from medrep.catalog.helpers import add_doctor, find_or_add_doctor
from medrep.catalog.models import Doctor
from medrep.utils.exceptions import ValidationError


@pytest.mark.django_db
def test_doctor_added_by_admin_is_verified(administrator):
    doctor = add_doctor(administrator, "Dr. Rao", "Cardiology", "General Hospital")
    assert doctor.is_verified
    assert doctor.added_by == administrator


@pytest.mark.django_db
def test_doctor_added_by_representative_waits_for_approval(representative):
    doctor = add_doctor(representative, "Dr. Rao", "Cardiology", "General Hospital", phone="555-0100")
    assert not doctor.is_verified
    assert doctor.phone == "555-0100"


@pytest.mark.django_db
def test_doctor_needs_a_name(representative):
    with pytest.raises(ValidationError):
        add_doctor(representative, "", "Cardiology", "General Hospital")


@pytest.mark.django_db
def test_find_or_add_doctor_reuses_match(representative, administrator):
    existing = add_doctor(administrator, "Dr. Rao", "Cardiology", "General Hospital")
    doctor, created = find_or_add_doctor(representative, "Dr. Rao", "Cardiology", "General Hospital")
    assert doctor == existing
    assert not created

    other, created = find_or_add_doctor(representative, "Dr. Rao", "Cardiology", "Mercy Hospital")
    assert created
    assert not other.is_verified
    assert Doctor.objects.count() == 2
