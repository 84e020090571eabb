import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class RemoteStoreError(APIException):
    """The hosted store could not complete a request.

    Raised for transport failures, non-2xx answers and undecodable bodies.
    Reads absorb it; writes let it through so the caller can ask the user
    to retry.
    """
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'Remote store request failed. Please try again.'
    default_code = 'remote_error'

    def __init__(self, detail=None, *, upstream_status=None):
        super().__init__(detail)
        self.upstream_status = upstream_status


class StoreParseError(ValueError):
    """A local store payload is not a JSON list of records."""


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('unhandled error in %s', context.get('view'))
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    if isinstance(exc, ValidationError):
        code = 'validation_error'
        detail = resp.data
    else:
        code = getattr(exc, 'default_code', None) or 'api_error'
        if isinstance(resp.data, dict):
            detail = resp.data.get('detail') or resp.data
        else:
            detail = str(resp.data)
    return Response({'ok': False, 'error': {'code': code, 'message': detail}}, status=resp.status_code)
