from rest_framework import serializers

from apps.users.serializers import UserReadSerializer


class RegisterRequestSerializer(serializers.Serializer):
    # Field rules live in apps.users.validators and run in the service.
    name = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.CharField(required=False, allow_blank=True, default="")
    password = serializers.CharField(
        write_only=True, required=False, allow_blank=True, trim_whitespace=False, default=""
    )


class TokenPairSerializer(serializers.Serializer):
    access = serializers.CharField()
    refresh = serializers.CharField()


class RegisterResponseSerializer(serializers.Serializer):
    user = UserReadSerializer()
    tokens = TokenPairSerializer()
