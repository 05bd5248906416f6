from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.exceptions import NotFoundError
from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_product_service
from .serializers import (
    ProductListQuerySerializer,
    ProductReadSerializer,
    ProductSearchQuerySerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="Cached results may be served.",
        parameters=[
            OpenApiParameter("category", str, OpenApiParameter.QUERY, required=False),
        ],
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        query = ProductListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        category = query.validated_data.get("category")
        self.log.debug("Handling product list request", category=category)
        dtos = self.service.list_products(category=category)
        return Response(ProductReadSerializer(dtos, many=True).data)


@extend_schema(tags=["Catalog"])
class ProductSearchView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_product_service()

    @extend_schema(
        summary="Search products by name or category",
        parameters=[
            OpenApiParameter("value", str, OpenApiParameter.QUERY, required=False),
        ],
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        query = ProductSearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        dtos = self.service.search_products(query.validated_data["value"])
        return Response(ProductReadSerializer(dtos, many=True).data)


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        summary="Get product",
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: int):
        dto = self.service.get_product(product_id)
        if dto is None:
            self.log.info("Product not found", product_id=product_id)
            raise NotFoundError("Product not found", details={"id": str(product_id)})
        return Response(ProductReadSerializer(dto).data)
