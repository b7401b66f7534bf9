from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from medrep.catalog.api.serializers import DoctorSerializer
from medrep.catalog.helpers import add_doctor


class DoctorCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, *args, **kwargs):
        serializer = DoctorSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        doctor = add_doctor(request.user, **serializer.validated_data)
        return Response(DoctorSerializer(doctor).data, status=status.HTTP_201_CREATED)
