import pytest

from medrep.users.models import User, UserRole, UserStatus


@pytest.mark.django_db
def test_admin_creates_active_account(administrator_client):
    response = administrator_client.post(
        "/api/users/",
        {"email": "new.rep@example.com", "name": "New Rep", "password": "s3cret-pass", "region": "North"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == UserStatus.ACTIVE
    assert data["role"] == UserRole.REPRESENTATIVE
    assert "password" not in data
    assert User.objects.get(email="new.rep@example.com").check_password("s3cret-pass")


@pytest.mark.django_db
def test_admin_creates_admin_account(administrator_client):
    response = administrator_client.post(
        "/api/users/",
        {"email": "second.admin@example.com", "name": "Second Admin", "password": "s3cret-pass", "role": "admin"},
    )
    assert response.status_code == 201
    assert response.json()["role"] == UserRole.ADMIN


@pytest.mark.django_db
def test_duplicate_email_conflicts(administrator_client, representative):
    response = administrator_client.post(
        "/api/users/", {"email": representative.email, "name": "Copy", "password": "s3cret-pass"}
    )
    assert response.status_code == 409


@pytest.mark.django_db
def test_representative_cannot_create_accounts(representative_client):
    response = representative_client.post(
        "/api/users/", {"email": "new.rep@example.com", "name": "New Rep", "password": "s3cret-pass"}
    )
    assert response.status_code == 403
    assert not User.objects.filter(email="new.rep@example.com").exists()


@pytest.mark.django_db
def test_registration_waits_for_approval(api_client):
    response = api_client.post(
        "/api/users/register/", {"email": "self@example.com", "name": "Self Made", "password": "s3cret-pass"}
    )
    assert response.status_code == 201
    assert response.json()["status"] == UserStatus.PENDING
    assert response.json()["role"] == UserRole.REPRESENTATIVE


@pytest.mark.django_db
def test_registration_ignores_requested_role(api_client):
    response = api_client.post(
        "/api/users/register/",
        {"email": "sneaky@example.com", "name": "Sneaky", "password": "s3cret-pass", "role": "admin"},
    )
    assert response.status_code == 201
    assert User.objects.get(email="sneaky@example.com").role == UserRole.REPRESENTATIVE


@pytest.mark.django_db
def test_registration_short_password(api_client):
    response = api_client.post(
        "/api/users/register/", {"email": "self@example.com", "name": "Self Made", "password": "short"}
    )
    assert response.status_code == 400
