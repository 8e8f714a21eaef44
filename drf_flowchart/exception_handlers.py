import logging

from rest_framework import status
from rest_framework.views import exception_handler, set_rollback

from .objects import Document, Error
from .response import Response
from .serializers import DocumentSerializer, ErrorSerializer

logger = logging.getLogger(__name__)


def flowchart_exception_handler(exc, context):
    return ExceptionHandler.handle(exc, context)


class ExceptionHandler:
    """
    Converts various Exception types into JSON error reponses.
    This functionality requires an entry to the REST_FRAMEWORK settings
    dictionary in settings.py:
    'EXCEPTION_HANDLER': 'drf_flowchart.exception_handlers.flowchart_exception_handler'
    """

    @classmethod
    def handle(cls, exc, context):
        """
        Dispatches an exception to the handler named after its class, or after
        one of its base classes, falling back to the REST framework default

        :param drf_flowchart.exception_handlers.ExceptionHandler cls: This class
        :param Exception exc: An Exception object
        :param dict context: The view context associated with the exception
        :return: An error Response, or None if the exception is not handled
        :rtype: drf_flowchart.response.Response
        """

        # check for specific handlers for the exc class
        handler_function_name = "handle_{}".format(exc.__class__.__name__.lower())

        if hasattr(cls, handler_function_name):
            return getattr(cls, handler_function_name)(exc, context)

        for base_class in exc.__class__.__bases__:
            handler_function_name = "handle_{}".format(base_class.__name__.lower())
            if hasattr(cls, handler_function_name):
                return getattr(cls, handler_function_name)(exc, context)

        # Call REST framework's default handler
        response = exception_handler(exc, context)

        if response:
            error = Error(
                status_code=getattr(response, "status_code", 500),
                detail=response.data["detail"],
            )
            return cls.error_response([error], response.status_code)

        return None

    @staticmethod
    def error_response(errors, status_code):
        doc = DocumentSerializer(Document())
        doc.instance.errors = ErrorSerializer(errors, many=True).data
        return Response(doc.data, status=status_code)

    @classmethod
    def handle_error(cls, exc, context):
        """
        Retrieves an error Response from an Error exception, using the status
        code carried by the exception

        :param drf_flowchart.exception_handlers.ExceptionHandler cls: This class
        :param drf_flowchart.objects.Error exc: An Exception object
        :param dict context: The view context associated with the exception
        :return: An error Response
        :rtype: drf_flowchart.response.Response
        """
        del context
        status_code = getattr(exc, "status_code", status.HTTP_400_BAD_REQUEST)
        if status_code == status.HTTP_409_CONFLICT:
            logger.warning("Rejected write: %s", exc.detail)
        return cls.error_response([exc], status_code)

    @classmethod
    def handle_apiexception(cls, exc, context):
        """
        Retrieves a 400 error Response from an APIException exception

        :param drf_flowchart.exception_handlers.ExceptionHandler cls: This class
        :param rest_framework.exceptions.APIException exc: An Exception object
        :param dict context: The view context associated with the exception
        :return: A 400 error Response
        :rtype: drf_flowchart.response.Response
        """
        del context

        detail = getattr(exc, "detail", str(exc))
        status_code = getattr(exc, "status_code", status.HTTP_400_BAD_REQUEST)

        if isinstance(detail, dict):
            # this is for cases where a ValidationError is thrown
            # which has a dict as the detail
            return cls.error_response(Error.parse_validation_errors(detail), status_code)

        error = Error(detail=detail, status_code=status_code)
        return cls.error_response([error], status_code)

    @classmethod
    def handle_validationerror(cls, exc, context):
        """
        Retrieves a 400 error Response from a DRF or Django ValidationError

        :param drf_flowchart.exception_handlers.ExceptionHandler cls: This class
        :param django.core.exceptions.ValidationError exc: An Exception object
        :param dict context: The view context associated with the exception
        :return: A 400 error Response
        :rtype: drf_flowchart.response.Response
        """

        return cls.handle_apiexception(exc, context)

    @classmethod
    def handle_integrityerror(cls, exc, context):
        """
        Retrieves a 409 error Response from a constraint violation raised by
        the database
        """
        del context
        set_rollback()
        logger.warning("Store rejected write: %s", exc)
        error = Error(
            detail=str(exc),
            status_code=status.HTTP_409_CONFLICT,
            code="integrity_error",
        )
        return cls.error_response([error], status.HTTP_409_CONFLICT)

    @classmethod
    def handle_databaseerror(cls, exc, context):
        """
        Retrieves a 500 error Response from any other database failure
        """
        del context
        set_rollback()
        logger.error("Store error", exc_info=exc)
        error = Error(
            detail=str(exc),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code="store_error",
        )
        return cls.error_response([error], status.HTTP_500_INTERNAL_SERVER_ERROR)
