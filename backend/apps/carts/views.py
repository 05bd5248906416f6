from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_cart_service
from .dtos import CartItemRemoved
from .serializers import (
    CartItemAddSerializer,
    CartItemUpdateSerializer,
    CartReadSerializer,
)

logger = get_logger(__name__).bind(component="carts", layer="view")


@extend_schema(tags=["Cart"])
class CartView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(
        summary="Get the caller's cart",
        responses={
            200: CartReadSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        dto = self.service.get_cart_by_user(request.user)
        return Response(CartReadSerializer(dto).data)

    @extend_schema(
        summary="Add a product to the cart",
        description="Creates the cart on first use. A product can only be added once.",
        request=CartItemAddSerializer,
        responses={
            201: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            500: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartItemAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        dto = self.service.add_product_to_cart(request.user, data["productId"], data["quantity"])
        self.log.info("Product added via API", user_id=request.user.id, product_id=data["productId"])
        return Response(CartReadSerializer(dto).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Change the quantity of a product in the cart",
        description="Returns the cart, or 204 with no body when the quantity removes the product.",
        request=CartItemUpdateSerializer,
        responses={
            200: CartReadSerializer,
            204: None,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = self.service.update_product_in_cart(
            request.user, data["productId"], data["quantity"]
        )
        if isinstance(result, CartItemRemoved):
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(CartReadSerializer(result.cart).data)


@extend_schema(tags=["Cart"])
class CartItemDetailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CartItemDetailView")

    @extend_schema(
        summary="Remove a product from the cart",
        responses={
            200: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, product_id: int):
        dto = self.service.delete_product_from_cart(request.user, product_id)
        self.log.info("Product removed via API", user_id=request.user.id, product_id=product_id)
        return Response(CartReadSerializer(dto).data)


@extend_schema(tags=["Cart"])
class CheckoutView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_cart_service()
    log = logger.bind(view="CheckoutView")

    @extend_schema(
        summary="Check out the cart",
        description="Debits the wallet by the cart total and empties the cart.",
        request=None,
        responses={
            204: None,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        self.service.checkout(request.user)
        self.log.info("Checkout via API", user_id=request.user.id)
        return Response(status=status.HTTP_204_NO_CONTENT)
