"""
Response envelope helpers shared by every API of the marketplace.
"""
from django.core.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework import status
from rest_framework.views import APIView
from typing import Any, Dict, List, Optional


def create_standardized_response(
    success: bool,
    data: Optional[Any] = None,
    message: Optional[str] = None,
    error: Optional[str] = None,
    errors: Optional[Dict[str, List[str]]] = None,
    status_code: int = status.HTTP_200_OK
) -> Response:
    """
    Create a standardized API response format.

    Args:
        success: Boolean indicating if the request was successful
        data: Response data (optional)
        message: Success or info message (optional)
        error: Error message for failed requests (optional)
        errors: Field-specific validation errors (optional)
        status_code: HTTP status code

    Returns:
        Response object with standardized format
    """
    response_data = {"success": success}

    if data is not None:
        response_data["data"] = data

    if message:
        response_data["message"] = message

    if error:
        response_data["error"] = error

    if errors:
        response_data["errors"] = errors

    return Response(response_data, status=status_code)


def success_response(
    data: Optional[Any] = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK
) -> Response:
    """Create a successful response."""
    return create_standardized_response(
        success=True,
        data=data,
        message=message,
        status_code=status_code
    )


def error_response(
    error: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    errors: Optional[Dict[str, List[str]]] = None
) -> Response:
    """Create an error response."""
    return create_standardized_response(
        success=False,
        error=error,
        errors=errors,
        status_code=status_code
    )


def validation_error_response(
    errors: Dict[str, List[str]],
    status_code: int = status.HTTP_400_BAD_REQUEST
) -> Response:
    """Create a validation error response."""
    return create_standardized_response(
        success=False,
        error="Validation failed",
        errors=errors,
        status_code=status_code
    )


def django_validation_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Flatten a django ValidationError into the ``errors`` mapping of the envelope."""
    if hasattr(exc, 'error_dict'):
        return {field: [str(m) for m in messages] for field, messages in exc.message_dict.items()}
    return {'non_field_errors': [str(m) for m in exc.messages]}


def business_error_response(
    exc: ValidationError,
    status_code: int = status.HTTP_400_BAD_REQUEST
) -> Response:
    """Translate a business rule violation raised by a service into an error response."""
    errors = django_validation_errors(exc)
    first = next(iter(errors.values()), ["Request could not be processed"])
    return error_response(first[0], status_code, errors=errors)


class StandardizedAPIView(APIView):
    """
    Base APIView class that provides standardized response methods.
    """

    def success_response(
        self,
        data: Optional[Any] = None,
        message: Optional[str] = None,
        status_code: int = status.HTTP_200_OK
    ) -> Response:
        return success_response(data=data, message=message, status_code=status_code)

    def error_response(
        self,
        error: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        errors: Optional[Dict[str, List[str]]] = None
    ) -> Response:
        return error_response(error=error, status_code=status_code, errors=errors)

    def validation_error_response(
        self,
        errors: Dict[str, List[str]],
        status_code: int = status.HTTP_400_BAD_REQUEST
    ) -> Response:
        return validation_error_response(errors=errors, status_code=status_code)


class StandardizedResponseMixin:
    """Mixin to standardize responses for DRF generic views."""

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return success_response(
            data=serializer.data,
            message=f"Retrieved {len(serializer.data)} items"
        )

    def retrieve(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance)
        return success_response(
            data=serializer.data,
            message="Retrieved successfully"
        )
