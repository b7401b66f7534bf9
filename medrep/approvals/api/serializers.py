from rest_framework import serializers

from medrep.approvals.transitions import ApprovalKind


class PendingApprovalSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    kind = serializers.ChoiceField(choices=ApprovalKind.choices)
    name = serializers.CharField()
    date = serializers.CharField(allow_null=True)
    doctor_name = serializers.CharField(required=False)
    facility_id = serializers.IntegerField(required=False)
    facility_name = serializers.CharField(required=False)
    specialization = serializers.CharField(required=False)
    hospital = serializers.CharField(required=False)
    email = serializers.EmailField(required=False)


class ToggleActiveResultSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    status = serializers.CharField()
