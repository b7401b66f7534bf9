import pytest

from medrep.catalog.models import Doctor
from medrep.catalog.tests.factories import UnverifiedDoctorFactory
from medrep.users.models import UserStatus
from medrep.visits.models import VisitStatus
from medrep.visits.tests.factories import OrderLineFactory, VisitFactory


@pytest.mark.django_db
def test_pending_list(administrator_client, representative):
    visit = VisitFactory(submitted_by=representative)
    doctor = UnverifiedDoctorFactory(name="Dr. Maybe")

    response = administrator_client.get("/api/approvals/")

    assert response.status_code == 200
    data = response.json()
    assert [(item["kind"], item["id"]) for item in data] == [("visit", visit.pk), ("doctor", doctor.pk)]
    assert data[0]["name"] == "Riya Rep"
    assert "email" not in data[0]


@pytest.mark.django_db
def test_pending_list_is_admin_only(representative_client):
    response = representative_client.get("/api/approvals/")
    assert response.status_code == 403


@pytest.mark.django_db
def test_detail(administrator_client, representative):
    visit = VisitFactory(submitted_by=representative)
    OrderLineFactory(visit=visit, quantity=3)
    response = administrator_client.get(f"/api/approvals/visit/{visit.pk}/")
    assert response.status_code == 200
    assert response.json()["representative_name"] == "Riya Rep"
    assert response.json()["order_lines"][0]["quantity"] == 3


@pytest.mark.django_db
def test_approve_and_repeat(administrator_client):
    visit = VisitFactory()
    response = administrator_client.post(f"/api/approvals/visit/{visit.pk}/approve/")
    assert response.status_code == 200
    visit.refresh_from_db()
    assert visit.status == VisitStatus.approved

    response = administrator_client.post(f"/api/approvals/visit/{visit.pk}/approve/")
    assert response.status_code == 409
    assert "detail" in response.json()


@pytest.mark.django_db
def test_reject_doctor_then_detail_is_gone(administrator_client):
    doctor = UnverifiedDoctorFactory()
    response = administrator_client.post(f"/api/approvals/doctor/{doctor.pk}/reject/")
    assert response.status_code == 200
    assert not Doctor.objects.filter(pk=doctor.pk).exists()

    assert administrator_client.get(f"/api/approvals/doctor/{doctor.pk}/").status_code == 404
    assert administrator_client.post(f"/api/approvals/doctor/{doctor.pk}/reject/").status_code == 404


@pytest.mark.django_db
def test_unknown_kind(administrator_client):
    response = administrator_client.post("/api/approvals/medicine/1/approve/")
    assert response.status_code == 400


@pytest.mark.django_db
def test_representative_cannot_approve(representative_client):
    visit = VisitFactory()
    response = representative_client.post(f"/api/approvals/visit/{visit.pk}/approve/")
    assert response.status_code == 403
    visit.refresh_from_db()
    assert visit.status == VisitStatus.pending


@pytest.mark.django_db
def test_toggle_active(administrator_client, representative):
    response = administrator_client.post(f"/api/users/{representative.pk}/toggle-active/")
    assert response.status_code == 200
    assert response.json() == {"id": representative.pk, "status": UserStatus.INACTIVE}


@pytest.mark.django_db
def test_toggle_pending_refused(administrator_client, pending_representative):
    response = administrator_client.post(f"/api/users/{pending_representative.pk}/toggle-active/")
    assert response.status_code == 400
