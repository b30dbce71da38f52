"""
Domain errors and the project-wide DRF exception handler.

Every failure leaves the API as {"error": ..., "code": ...}, plus "errors" /
"warnings" lists when the error carries them.
"""

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger("branchlink.errors")


class DomainError(exceptions.APIException):
    """Base class for business-rule failures raised by the services."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request could not be processed."
    default_code = "domain_error"

    def __init__(self, detail=None, code=None, errors=None, warnings=None):
        super().__init__(detail, code)
        self.errors = list(errors or [])
        self.warnings = list(warnings or [])


class InvalidInput(DomainError):
    default_detail = "Invalid input."
    default_code = "invalid_input"


class EligibilityMismatch(DomainError):
    default_detail = (
        "Some shipments do not exist, are not at the origin branch, or have incorrect status."
    )
    default_code = "eligibility_mismatch"


class InvalidState(DomainError):
    default_detail = "Operation not allowed in the current state."
    default_code = "invalid_state"


class TierResolutionError(DomainError):
    default_detail = "No weight tier matches this weight."
    default_code = "tier_resolution_error"


class ZoneAssignmentError(DomainError):
    default_detail = "Zone assignment error."
    default_code = "zone_assignment_error"


class Forbidden(DomainError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to perform this action."
    default_code = "forbidden"


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."
    default_code = "not_found"


class Conflict(DomainError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


def _error_code(exc):
    codes = exc.get_codes()
    if isinstance(codes, str):
        return codes
    return exc.default_code


def api_exception_handler(exc, context):
    """Render every exception in the {"error", "code"} envelope."""
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", type(view).__name__ if view else "request")
        set_rollback()
        return Response(
            {"error": "Internal server error.", "code": "internal_error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "error":  "Invalid input.",
            "code":   "invalid_input",
            "errors": exc.detail,
        }
        return response

    payload = {"error": str(exc.detail), "code": _error_code(exc)}
    if isinstance(exc, DomainError):
        if exc.errors:
            payload["errors"] = exc.errors
        if exc.warnings:
            payload["warnings"] = exc.warnings
    response.data = payload
    return response
