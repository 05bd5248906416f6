from rest_framework import serializers

from .validators import validate_address


class UserReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()
    walletMoney = serializers.DecimalField(
        source="wallet_money", max_digits=12, decimal_places=2, coerce_to_string=False
    )
    address = serializers.CharField()
    dateJoined = serializers.CharField(source="date_joined", allow_null=True)


class AddressSerializer(serializers.Serializer):
    address = serializers.CharField(trim_whitespace=False)

    def validate_address(self, value: str) -> str:
        return validate_address(value)


class UserQuerySerializer(serializers.Serializer):
    q = serializers.ChoiceField(choices=["address"], required=False)
