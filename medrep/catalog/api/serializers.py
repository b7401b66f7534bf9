from rest_framework import serializers

from medrep.catalog.models import Doctor


class DoctorSerializer(serializers.ModelSerializer):
    class Meta:
        model = Doctor
        fields = ["id", "name", "specialization", "hospital", "address", "email", "phone", "is_verified"]
        read_only_fields = ["id", "is_verified"]
