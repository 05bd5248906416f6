from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from django.core.exceptions import (
    PermissionDenied as DjangoPermissionDenied,
    ValidationError as DjangoValidationError,
)
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    PermissionDenied,
    Throttled,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

GENERIC_SERVER_MESSAGE = "Something went wrong"


class ApplicationError(Exception):
    """
    Domain-level error raised from services and views.

    Args:
        code: Machine readable error code (``NOT_FOUND``, ``INVALID_REQUEST`` ...).
        message: Human readable explanation, returned to the client verbatim.
        status_code: Explicit HTTP status; derived from ``code`` when omitted.
        details: Optional structured details for clients.
        hint: Optional remediation hint.
    """

    default_code = "SERVER_ERROR"
    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        code: Optional[str],
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        hint: Optional[str] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.hint = hint
        self.headers = headers

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            self.details,
            http_status=self.status_code,
            hint=self.hint,
            headers=self.headers,
        )


class NotFoundError(ApplicationError):
    """A resource the caller relies on (cart, user, product) does not exist."""

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(
            "NOT_FOUND", message, status_code=status.HTTP_404_NOT_FOUND, details=details
        )


class InvalidRequestError(ApplicationError):
    """A business rule rejected the request."""

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(
            "INVALID_REQUEST",
            message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class InternalError(ApplicationError):
    """Persistence reported no result where one was required."""

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(
            "SERVER_ERROR",
            message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
        )


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Convert every exception escaping a DRF view into the JSON error envelope."""

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        response = exc.to_response()
        if response.status_code >= 500:
            bound_logger.error(
                "Application error", code=exc.code, status=response.status_code, error=exc.message
            )
        else:
            bound_logger.info(
                "Handled application error", code=exc.code, status=response.status_code
            )
        return response

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(_normalize_django_validation_error(exc))

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        GENERIC_SERVER_MESSAGE,
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view is not None:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _from_drf_exception(exc: Exception, response: Response, bound_logger) -> Response:
    status_code = response.status_code
    code, message, details = _normalize_payload(exc, response.data, status_code)
    if status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)
    headers = dict(response.headers) if getattr(response, "headers", None) else None
    return error_response(code, message, details, http_status=status_code, headers=headers)


def _normalize_django_validation_error(exc: DjangoValidationError):
    if hasattr(exc, "message_dict"):
        return exc.message_dict
    return list(exc.messages)


def _normalize_payload(
    exc: Exception, payload: Any, status_code: int
) -> Tuple[str, str, Optional[Any]]:
    if isinstance(exc, (ValidationError, ParseError)):
        fallback = "Validation failed" if isinstance(exc, ValidationError) else "Malformed request"
        return "VALIDATION_ERROR", _extract_message(payload, fallback, status_code), payload
    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        return "UNAUTHORIZED", _extract_message(payload, "Authentication required", status_code), None
    if isinstance(exc, (PermissionDenied, DjangoPermissionDenied)):
        return (
            "FORBIDDEN",
            _extract_message(payload, "You do not have permission to perform this action", status_code),
            None,
        )
    if isinstance(exc, (NotFound, Http404)):
        return "NOT_FOUND", _extract_message(payload, "Resource not found", status_code), None
    if isinstance(exc, MethodNotAllowed):
        return "METHOD_NOT_ALLOWED", _extract_message(payload, "Method not allowed", status_code), None
    if isinstance(exc, Throttled):
        wait = getattr(exc, "wait", None)
        return (
            "TOO_MANY_REQUESTS",
            _extract_message(payload, "Request was throttled", status_code),
            {"retryAfter": wait} if wait is not None else None,
        )
    if status_code >= 500:
        return "SERVER_ERROR", GENERIC_SERVER_MESSAGE, None
    details = payload if isinstance(payload, (dict, list)) and payload else None
    return "INVALID_REQUEST", _extract_message(payload, "Request failed", status_code), details


def _extract_message(payload: Any, fallback: str, status_code: int) -> str:
    if status_code >= 500:
        return GENERIC_SERVER_MESSAGE
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("detail"), str):
        return payload["detail"]
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return payload[0]
    return fallback


__all__ = [
    "ApplicationError",
    "InternalError",
    "InvalidRequestError",
    "NotFoundError",
    "global_exception_handler",
]
