from rest_framework import serializers

from medrep.visits.models import FacilityOrderLine, FacilityVisit, OrderLine, Visit


class OrderItemSerializer(serializers.Serializer):
    medicine_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1)


class NewDoctorSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    specialization = serializers.CharField(max_length=255)
    hospital = serializers.CharField(max_length=255)
    address = serializers.CharField(max_length=500, required=False, allow_blank=True, default="")


class VisitSubmissionSerializer(serializers.Serializer):
    date = serializers.DateField()
    doctor_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    new_doctor = NewDoctorSerializer(required=False, allow_null=True, default=None)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    orders = OrderItemSerializer(many=True, allow_empty=False)


class FacilityVisitSubmissionSerializer(serializers.Serializer):
    date = serializers.DateField()
    facility_id = serializers.IntegerField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    orders = OrderItemSerializer(many=True, allow_empty=False)


class OrderLineSerializer(serializers.ModelSerializer):
    medicine_name = serializers.CharField(source="medicine.name", read_only=True)

    class Meta:
        model = OrderLine
        fields = ["id", "medicine_id", "medicine_name", "quantity"]


class FacilityOrderLineSerializer(OrderLineSerializer):
    class Meta(OrderLineSerializer.Meta):
        model = FacilityOrderLine


class VisitSerializer(serializers.ModelSerializer):
    order_lines = OrderLineSerializer(many=True, read_only=True)

    class Meta:
        model = Visit
        fields = ["id", "submitted_by_id", "doctor_id", "date", "notes", "status", "order_lines"]


class FacilityVisitSerializer(serializers.ModelSerializer):
    order_lines = FacilityOrderLineSerializer(many=True, read_only=True)

    class Meta:
        model = FacilityVisit
        fields = ["id", "submitted_by_id", "facility_id", "date", "notes", "status", "order_lines"]
