from contextlib import contextmanager

from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction
from django.db.models.query import QuerySet

from rest_framework.viewsets import GenericViewSet
from rest_framework.exceptions import ParseError

from . import defaults
from .response import Response
from .objects import Document, NotFoundError
from .serializers import DocumentSerializer, ErrorSerializer
from . import mixins


class ViewSet(GenericViewSet):
    """
    Subclass base Django Rest Framework's GenericViewSet, wrapping every
    response in a document and reading from an injectable database alias

    Attributes
    ----------
    serializer_class = NodeSerializer
    collection = Node.objects.all()
    using = "replica"
    """

    lookup_field = "pk"
    lookup_value_regex = "[0-9]+"
    collection = None
    using = None
    validate_http_methods = ["POST", "PUT", "PATCH"]

    @property
    def view_name_prefix(self):
        if hasattr(self, "serializer_class") and self.serializer_class:
            return self.serializer_class.Meta.model.__name__
        return ""

    def get_database(self):
        """
        Resolve the database alias this view reads from and writes to.

        :param ViewSet self: This object
        :return: A database alias
        :rtype: string
        """

        if self.using:
            return self.using
        return getattr(settings, "FLOWCHART_DATABASE", defaults.FLOWCHART_DATABASE)

    def get_queryset(self):
        """
        Return the queryset that will be used to retrieve the object that this
        view will display.

        :param ViewSet self: This object
        :return: A collection of model objects
        """

        return self.get_collection(self.request)

    def get_collection(self, request):
        """
        Re-evaluate a collection on each request

        :param ViewSet self: This object
        :param rest_framework.request.Request request: A client request
        :return QuerySet collection: The model objects this view works on
        """

        collection = self.collection
        if collection is None:
            collection = self.serializer_class.Meta.model.objects.all()
        if isinstance(collection, QuerySet):
            # Ensure queryset is re-evaluated on each request.
            collection = collection.using(self.get_database())

        return collection

    def get_resource(self, request, pk):
        """
        Retrieve a resource by primary identifier

        :param ViewSet self: This object
        :param rest_framework.request.Request request: A client request
        :param pk: The ID of the resource
        :return: A model object
        :raises NotFoundError: if no resource has this ID
        """

        try:
            return self.get_collection(request).get(pk=pk)
        except ObjectDoesNotExist:
            raise NotFoundError(
                detail="{} {} not found.".format(self.view_name_prefix, pk),
                source={"parameter": "id"},
            )

    def check_integrity(self, validated_data):
        """
        Hook run before a write, after field validation. Raise an Error to
        reject the write.

        :param ViewSet self: This object
        :param dict validated_data: The fields about to be written
        """

        return None

    @contextmanager
    def atomic_write(self):
        """
        Run the integrity check and the write it guards in one transaction.

        :param ViewSet self: This object
        """

        with transaction.atomic(using=self.get_database()):
            yield

    def get_view_name(self):
        name = self.view_name_prefix
        if self.suffix:
            name += " " + self.suffix
        return name

    def initial(self, *args, **kwargs):
        """
        Initialize this Viewset, validating the request body.

        :param ViewSet self: This object
        """

        super(ViewSet, self).initial(*args, **kwargs)

        if self.request.method in self.validate_http_methods:
            self.validate_request_body(self.request.data)

        # Initialize document
        # This is just a convenience so you can
        # build up the document as you process
        # the request.
        self.document = DocumentSerializer(Document())

    def validate_request_body(self, request_data):
        """
        Validate the body of a client request, ensuring it is a JSON object.

        :param ViewSet self: This object
        :param request_data: The parsed request body
        :raises ParseError: if validation fails
        """

        if not isinstance(request_data, dict):
            raise ParseError("The request body must be a JSON object.")

    def error_response(self, errors, status=400):
        """
        Build an error response from a list of errors and a status code.

        :param ViewSet self: This object
        :param list errors: A list of errors
        :param int status: HTTP status code
        :return Response response: A json response
        """

        return Response(
            DocumentSerializer(
                Document(errors=ErrorSerializer(errors, many=True).data)
            ).data,
            status=status,
        )


class ReadWriteViewSet(
    mixins.ListMixin,
    mixins.CreateMixin,
    mixins.RetrieveMixin,
    mixins.UpdateMixin,
    mixins.DestroyMixin,
    ViewSet,
):
    """
    Create a viewset for a readable and writeable endpoint.
    """

    pass
