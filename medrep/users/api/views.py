from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from medrep.users.api.serializers import AccountCreateSerializer, RegistrationSerializer, UserSerializer
from medrep.users.helpers import create_account, register_representative
from medrep.users.permissions import IsAdministrator


class RegistrationView(APIView):
    """Self sign-up for medical representatives. The account waits for approval."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = register_representative(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class AccountCreateView(APIView):
    permission_classes = [IsAdministrator]

    def post(self, request, *args, **kwargs):
        serializer = AccountCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = create_account(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)
