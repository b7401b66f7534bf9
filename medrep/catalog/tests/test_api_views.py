import pytest

from medrep.catalog.models import Doctor


@pytest.mark.django_db
def test_add_doctor_as_representative(representative_client, representative):
    response = representative_client.post(
        "/api/doctors/",
        {"name": "Dr. Rao", "specialization": "Cardiology", "hospital": "General Hospital"},
        format="json",
    )
    assert response.status_code == 201
    assert response.json()["is_verified"] is False
    assert Doctor.objects.get(pk=response.json()["id"]).added_by == representative


@pytest.mark.django_db
def test_add_doctor_as_admin_is_verified(administrator_client):
    response = administrator_client.post(
        "/api/doctors/",
        {"name": "Dr. Rao", "specialization": "Cardiology", "hospital": "General Hospital", "is_verified": False},
        format="json",
    )
    assert response.status_code == 201
    assert response.json()["is_verified"] is True


@pytest.mark.django_db
def test_add_doctor_requires_login(api_client):
    response = api_client.post("/api/doctors/", {"name": "Dr. Rao"}, format="json")
    assert response.status_code in (401, 403)


@pytest.mark.django_db
def test_add_doctor_missing_fields(representative_client):
    response = representative_client.post("/api/doctors/", {"name": "Dr. Rao"}, format="json")
    assert response.status_code == 400
