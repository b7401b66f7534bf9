import pytest

from medrep.users.helpers import create_account, register_representative
from medrep.users.models import UserRole, UserStatus
from medrep.utils.exceptions import ConflictError, ValidationError


@pytest.mark.django_db
def test_register_representative_is_pending():
    user = register_representative("new@example.com", "New Rep", "s3cret-pass", region="North")
    assert user.role == UserRole.REPRESENTATIVE
    assert user.status == UserStatus.PENDING
    assert user.region == "North"
    assert user.check_password("s3cret-pass")
    assert not user.can_sign_in


@pytest.mark.django_db
@pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.REPRESENTATIVE])
def test_create_account_is_active(role):
    user = create_account("made@example.com", "Made By Admin", "s3cret-pass", role=role)
    assert user.status == UserStatus.ACTIVE
    assert user.role == role


@pytest.mark.django_db
def test_create_account_unknown_role():
    with pytest.raises(ValidationError):
        create_account("made@example.com", "Someone", "s3cret-pass", role="superhero")


@pytest.mark.django_db
def test_duplicate_email():
    register_representative("dup@example.com", "First", "s3cret-pass")
    with pytest.raises(ConflictError):
        register_representative("dup@example.com", "Second", "s3cret-pass")


@pytest.mark.django_db
def test_email_required():
    with pytest.raises(ValidationError):
        register_representative("", "Nobody", "s3cret-pass")
