from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_user_service
from .serializers import AddressSerializer, UserQuerySerializer, UserReadSerializer

logger = get_logger(__name__).bind(component="users", layer="view")


@extend_schema(tags=["Users"])
class UserDetailView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_user_service()
    log = logger.bind(view="UserDetailView")

    @extend_schema(
        summary="Get own user profile",
        description="Returns the caller's profile, or only `{address}` when `?q=address` is given.",
        parameters=[
            OpenApiParameter("q", str, OpenApiParameter.QUERY, required=False, enum=["address"]),
        ],
        responses={
            200: UserReadSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, user_id: int):
        query = UserQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        actor_id = getattr(request.user, "id", None)
        if query.validated_data.get("q") == "address":
            return Response(self.service.get_address(user_id, actor_id=actor_id))
        dto = self.service.get_user(user_id, actor_id=actor_id)
        return Response(UserReadSerializer(dto).data)

    @extend_schema(
        summary="Set shipping address",
        request=AddressSerializer,
        responses={
            200: AddressSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            403: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, user_id: int):
        serializer = AddressSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        actor_id = getattr(request.user, "id", None)
        self.log.info("Updating address via API", user_id=user_id, actor_id=actor_id)
        payload = self.service.set_address(
            user_id, serializer.validated_data["address"], actor_id=actor_id
        )
        return Response(payload)
