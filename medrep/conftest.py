import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from medrep.catalog.models import Medicine
from medrep.catalog.tests.factories import DoctorFactory, FacilityFactory, MedicineFactory
from medrep.store.client import EntityStore
from medrep.users.models import User
from medrep.users.tests.factories import AdminFactory, PendingRepresentativeFactory, RepresentativeFactory


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def administrator(db) -> User:
    return AdminFactory(name="Ada Admin")


@pytest.fixture
def representative(db) -> User:
    return RepresentativeFactory(name="Riya Rep")


@pytest.fixture
def pending_representative(db) -> User:
    return PendingRepresentativeFactory(name="Paul Pending")


@pytest.fixture
def doctor(db):
    return DoctorFactory(name="Dr. Smith")


@pytest.fixture
def facility(db):
    return FacilityFactory(name="City Pharmacy")


@pytest.fixture
def medicine(db) -> Medicine:
    return MedicineFactory(name="Amoxicillin")


@pytest.fixture
def administrator_client(api_client, administrator) -> APIClient:
    api_client.force_authenticate(administrator)
    return api_client


@pytest.fixture
def representative_client(api_client, representative) -> APIClient:
    api_client.force_authenticate(representative)
    return api_client
