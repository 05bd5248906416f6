from rest_framework import serializers

from apps.catalog.serializers import ProductReadSerializer

# Keeps quantity * cost (cost has 8 integer digits) well inside ``total``.
MAX_QUANTITY = 10_000


class CartItemSerializer(serializers.Serializer):
    # Snapshot fields match the catalog product shape.
    product = ProductReadSerializer()
    quantity = serializers.IntegerField()


class CartReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    email = serializers.EmailField()
    paymentOption = serializers.CharField(source="payment_option")
    cartItems = CartItemSerializer(many=True, source="items")
    total = serializers.DecimalField(max_digits=24, decimal_places=2, coerce_to_string=False)


class CartItemAddSerializer(serializers.Serializer):
    productId = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)


class CartItemUpdateSerializer(serializers.Serializer):
    productId = serializers.IntegerField(min_value=1)
    # Zero or less removes the item.
    quantity = serializers.IntegerField(max_value=MAX_QUANTITY)
