import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class StringAnalyserError(APIException):
    """
    Base for the service's error outcomes.

    Keyword arguments beyond ``detail``/``code`` are merged into the error
    body, e.g. the interpreted query echo of the natural language filter.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request.'

    def __init__(self, detail=None, code=None, **extra):
        super().__init__(detail, code)
        self.extra = extra


class MissingOrInvalidInput(StringAnalyserError):
    default_detail = 'Invalid request body or missing "value" field'
    default_code = 'missing_input'


class InvalidValueType(MissingOrInvalidInput):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = 'Invalid data type for "value" (must be string)'
    default_code = 'invalid_type'


class InvalidQuery(StringAnalyserError):
    default_detail = 'Invalid query parameter values or types'
    default_code = 'invalid_query'


class StringConflict(StringAnalyserError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'String already exists in the system'
    default_code = 'conflict'


class StringNotFound(StringAnalyserError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'String does not exist in the system'
    default_code = 'not_found'


class UnparsableQuery(StringAnalyserError):
    default_detail = 'Unable to parse natural language query'
    default_code = 'unparsable_query'


class ConflictingFilters(StringAnalyserError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = 'Query parsed but resulted in conflicting filters'
    default_code = 'conflicting_filters'


def api_exception_handler(exc, context):
    """
    Render every error as ``{"error": message}``.

    Anything DRF does not know how to handle is logged and reported as a
    bare internal server error.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception("Unhandled error in %s: %s", view.__class__.__name__ if view else 'view', exc)
        return Response({'error': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    data = response.data
    if isinstance(data, dict) and 'detail' in data:
        payload = {'error': str(data['detail'])}
    else:
        payload = {'error': 'Invalid request.', 'details': data}

    if isinstance(exc, StringAnalyserError):
        payload.update(exc.extra)

    response.data = payload
    return response
