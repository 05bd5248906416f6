from drf_spectacular.utils import OpenApiExample, extend_schema_serializer
from rest_framework import serializers


class ErrorDetailSerializer(serializers.Serializer):
    code = serializers.CharField(help_text="Machine readable code, e.g. INVALID_REQUEST")
    message = serializers.CharField()
    status = serializers.IntegerField()
    details = serializers.JSONField(required=False)
    hint = serializers.CharField(required=False, allow_blank=True)


@extend_schema_serializer(
    examples=[
        OpenApiExample(
            "Business rule rejected",
            value={"error": {"code": "INVALID_REQUEST", "message": "Cart is empty", "status": 400}},
        ),
        OpenApiExample(
            "Missing cart",
            value={"error": {"code": "NOT_FOUND", "message": "User does not have a cart", "status": 404}},
        ),
    ]
)
class ErrorResponseSerializer(serializers.Serializer):
    error = ErrorDetailSerializer()
