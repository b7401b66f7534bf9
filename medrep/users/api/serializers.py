from rest_framework import serializers

from medrep.users.models import User, UserRole


class RegistrationSerializer(serializers.Serializer):
    email = serializers.EmailField()
    name = serializers.CharField(max_length=255)
    password = serializers.CharField(write_only=True, min_length=8, style={"input_type": "password"})
    region = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)


class AccountCreateSerializer(RegistrationSerializer):
    role = serializers.ChoiceField(choices=UserRole.choices, default=UserRole.REPRESENTATIVE)


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email", "name", "role", "status", "region"]
        read_only_fields = fields
