import logging

from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = _("The resource already exists.")
    default_code = "conflict"


def exception_handler(exc, context):
    """
    DRF's handler for API exceptions; anything else is an infrastructure
    failure that is logged in full and reported without internal detail.
    """
    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}")
    set_rollback()
    return Response(
        {"detail": "Internal server error."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
