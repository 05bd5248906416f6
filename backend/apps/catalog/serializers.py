from rest_framework import serializers


class ProductReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    category = serializers.CharField()
    cost = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)
    rating = serializers.IntegerField()
    image = serializers.CharField(allow_blank=True)


class ProductListQuerySerializer(serializers.Serializer):
    category = serializers.CharField(required=False, allow_blank=False)


class ProductSearchQuerySerializer(serializers.Serializer):
    value = serializers.CharField(required=False, allow_blank=True, default="")
