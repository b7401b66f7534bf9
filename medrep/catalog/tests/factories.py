from factory import Faker, SubFactory
from factory.django import DjangoModelFactory

from medrep.users.tests.factories import AdminFactory


class DoctorFactory(DjangoModelFactory):
    name = Faker("name")
    specialization = Faker("job")
    hospital = Faker("company")
    address = Faker("address")
    added_by = SubFactory(AdminFactory)
    is_verified = True

    class Meta:
        model = "catalog.Doctor"


class UnverifiedDoctorFactory(DoctorFactory):
    added_by = SubFactory("medrep.users.tests.factories.RepresentativeFactory")
    is_verified = False


class FacilityFactory(DjangoModelFactory):
    name = Faker("company")
    area = Faker("city")

    class Meta:
        model = "catalog.Facility"


class MedicineFactory(DjangoModelFactory):
    name = Faker("word")
    category = Faker("word")
    type = "tablet"

    class Meta:
        model = "catalog.Medicine"
