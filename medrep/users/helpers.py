import logging

from django.db import IntegrityError, transaction

from medrep.users.models import User, UserRole, UserStatus
from medrep.utils.exceptions import ConflictError, ValidationError

logger = logging.getLogger(__name__)


def register_representative(email, name, password, region=None):
    """Self-registration: always a representative, always awaiting approval."""
    user = _create(email, name, password, role=UserRole.REPRESENTATIVE, status=UserStatus.PENDING, region=region)
    logger.info("Representative %s registered and is pending approval", user.pk)
    return user


def create_account(email, name, password, role=UserRole.REPRESENTATIVE, region=None):
    """Accounts created by an administrator skip the approval queue."""
    if role not in UserRole.values:
        raise ValidationError(f"Unknown role: {role}")
    user = _create(email, name, password, role=role, status=UserStatus.ACTIVE, region=region)
    logger.info("Account %s created with role %s", user.pk, role)
    return user


def _create(email, name, password, **fields):
    if not email:
        raise ValidationError("An email address is required.")
    try:
        with transaction.atomic():
            return User.objects.create_user(email=email, password=password, name=name, **fields)
    except IntegrityError:
        raise ConflictError("A user with that email already exists.", email=email)
