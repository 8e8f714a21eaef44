from rest_framework import status
from rest_framework.exceptions import APIException


class Document(object):
    """
    The root object of every JSON response body.

    ...

    Attributes
    ----------
    data : dict, list or str
        The document's primary data
    errors: list
        a list of serialized error objects
    meta: dict
        non-standard meta-information about the response
    """

    def __init__(self, **kwargs):
        """
        Set local variables from keyword arguments

        :param drf_flowchart.objects.Document self: This object
        :param dict|list|str data: The document's primary data
        :param list errors: a list of serialized error objects
        :param dict meta: non-standard meta-information
        """

        self.data = kwargs.get('data', {})
        self.errors = kwargs.get('errors', [])
        self.meta = kwargs.get('meta', {})


class Error(APIException):
    """
    The root error object of a JSON response
    """

    def __init__(self, detail, **kwargs):
        """
        Builds an error node of a JSON response

        :param drf_flowchart.objects.Error self: This object
        :param string detail: An error message
        :param int status_code: An error message's status code
        :param string code: An application-specific error code, expressed as a string value
        :param string title: A short, human-readable summary of the problem
        :param dict source: A dictionary containing references to the source of the error
        :param dict meta: a meta dictionary containing non-standard meta-information
        """

        self.detail = detail
        self.status_code = kwargs.get('status_code', status.HTTP_400_BAD_REQUEST)
        self.code = kwargs.get('code', {})
        self.title = kwargs.get('title', {})
        self.source = kwargs.get('source', {})
        self.meta = kwargs.get('meta', {})
        super().__init__(detail)

    @staticmethod
    def parse_validation_errors(error_dict):
        """
        A simple helper factory that parses the standard output from
        Serializer.errors (dict) and returns an array of Error objects

        :param dict error_dict: A dictionary of error messages and codes
        :return: A list of errors
        :rtype: list
        """

        error_list = []

        for (attribute, errors) in error_dict.items():
            if isinstance(errors, str):
                errors = [errors]
            for error in errors:
                error_list.append(Error(
                    source={'pointer': "/{}".format(attribute)},
                    detail=error,
                    status_code=status.HTTP_400_BAD_REQUEST
                ))

        return error_list


class NotFoundError(Error):
    """
    A lookup by id matched no record
    """

    def __init__(self, detail="Not found.", **kwargs):
        kwargs.setdefault('status_code', status.HTTP_404_NOT_FOUND)
        kwargs.setdefault('code', 'not_found')
        super().__init__(detail, **kwargs)


class ForeignKeyError(Error):
    """
    A link refers to a node that does not exist
    """

    def __init__(self, detail, **kwargs):
        kwargs.setdefault('status_code', status.HTTP_409_CONFLICT)
        kwargs.setdefault('code', 'foreign_key_violation')
        kwargs.setdefault('title', 'Foreign key violation')
        super().__init__(detail, **kwargs)
