from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from medrep.users.permissions import IsRepresentative
from medrep.visits.api.serializers import (
    FacilityVisitSerializer,
    FacilityVisitSubmissionSerializer,
    VisitSerializer,
    VisitSubmissionSerializer,
)
from medrep.visits.helpers import NewDoctor, OrderItem, submit_facility_visit, submit_visit


class VisitCreateView(APIView):
    permission_classes = [IsRepresentative]

    def post(self, request, *args, **kwargs):
        serializer = VisitSubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        new_doctor = data.get("new_doctor")
        visit = submit_visit(
            request.user,
            date=data["date"],
            orders=[OrderItem(**order) for order in data["orders"]],
            doctor_id=data.get("doctor_id"),
            new_doctor=NewDoctor(**new_doctor) if new_doctor else None,
            notes=data.get("notes"),
        )
        return Response(VisitSerializer(visit).data, status=status.HTTP_201_CREATED)


class FacilityVisitCreateView(APIView):
    permission_classes = [IsRepresentative]

    def post(self, request, *args, **kwargs):
        serializer = FacilityVisitSubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        facility_visit = submit_facility_visit(
            request.user,
            date=data["date"],
            facility_id=data["facility_id"],
            orders=[OrderItem(**order) for order in data["orders"]],
            notes=data.get("notes"),
        )
        return Response(FacilityVisitSerializer(facility_visit).data, status=status.HTTP_201_CREATED)
