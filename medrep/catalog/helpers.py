import logging

from medrep.catalog.models import Doctor
from medrep.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


def add_doctor(added_by, name, specialization, hospital, address="", email=None, phone=None):
    """Doctors added by an administrator are trusted; anyone else's wait for approval."""
    if not name:
        raise ValidationError("A doctor needs a name.")
    doctor = Doctor.objects.create(
        name=name,
        specialization=specialization,
        hospital=hospital,
        address=address,
        email=email,
        phone=phone,
        added_by=added_by,
        is_verified=added_by.is_admin,
    )
    logger.info("Doctor %s added by user %s (verified=%s)", doctor.pk, added_by.pk, doctor.is_verified)
    return doctor


def find_or_add_doctor(added_by, name, specialization, hospital, address=""):
    """Reuse a doctor already on file with the same name, specialization and hospital."""
    existing = Doctor.objects.filter(name=name, specialization=specialization, hospital=hospital).first()
    if existing:
        return existing, False
    return add_doctor(added_by, name, specialization, hospital, address=address), True
