from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import (
    ApplicationError,
    InternalError,
    InvalidRequestError,
    NotFoundError,
    global_exception_handler,
)

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_application_error_returns_structured_response():
    request = factory.get("/api/cart/")
    exc = ApplicationError(
        "FORBIDDEN",
        "User not authorized to access this resource",
        status_code=status.HTTP_403_FORBIDDEN,
        details={"userId": "7"},
    )
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert payload["code"] == "FORBIDDEN"
    assert payload["message"] == "User not authorized to access this resource"
    assert payload["details"] == {"userId": "7"}


def test_not_found_error_maps_to_404():
    request = factory.get("/api/cart/")
    response = global_exception_handler(
        NotFoundError("User does not have a cart"), _context(request)
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data["error"]["code"] == "NOT_FOUND"
    assert response.data["error"]["message"] == "User does not have a cart"


def test_invalid_request_error_maps_to_400():
    request = factory.post("/api/cart/checkout/")
    response = global_exception_handler(InvalidRequestError("Cart is empty"), _context(request))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data["error"]["code"] == "INVALID_REQUEST"
    assert response.data["error"]["message"] == "Cart is empty"


def test_internal_error_keeps_its_message():
    request = factory.post("/api/cart/")
    response = global_exception_handler(InternalError("Failed to create cart"), _context(request))
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.data["error"]["code"] == "SERVER_ERROR"
    assert response.data["error"]["message"] == "Failed to create cart"


def test_validation_error_preserves_details():
    request = factory.post("/api/cart/", data={})
    exc = ValidationError({"productId": ["This field is required."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {"productId": ["This field is required."]}


def test_not_authenticated_maps_to_unauthorized():
    request = factory.get("/api/cart/")
    response = global_exception_handler(NotAuthenticated(), _context(request))
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.data["error"]["code"] == "UNAUTHORIZED"


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/cart/")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload
