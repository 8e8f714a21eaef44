import logging

from django.utils import timezone

from rest_framework import status

from .response import Response
from .objects import Error

logger = logging.getLogger(__name__)


def get_context(context):
    if context is None:
        context = {}
    if not isinstance(context, dict):
        raise TypeError("The argument `context` must be a dict instance")
    return context


class ListMixin:
    """
    Override base view behavior: build a response for a list endpoint
    """

    def list(self, request, *args, context=None, **kwargs):
        collection = self.get_collection(request)

        serializer = self.serializer_class(
            collection,
            many=True,
            context={"request": request, **get_context(context)},
        )

        self.document.instance.data = serializer.data

        return Response(self.document.data)


class CreateMixin:
    """
    Override base view behavior for a create endpoint
    """

    def create(self, request, context=None):
        serializer = self.serializer_class(
            data=request.data,
            context={"request": request, **get_context(context)},
        )

        if not serializer.is_valid():
            return self.error_response(Error.parse_validation_errors(serializer.errors))

        with self.atomic_write():
            self.check_integrity(serializer.validated_data)
            resource = serializer.Meta.model(**serializer.validated_data)
            resource.save(using=self.get_database())

        serializer.instance = resource
        self.document.instance.data = serializer.data

        return Response(
            self.document.data,
            status=status.HTTP_201_CREATED,
            context={"resource": resource},
        )


class RetrieveMixin:
    """
    Override base view behavior for retrieve endpoints
    """

    def retrieve(self, request, pk, context=None):
        resource = self.get_resource(request, pk)

        serializer = self.serializer_class(
            resource,
            context={"request": request, **get_context(context)},
        )

        self.document.instance.data = serializer.data

        return Response(self.document.data, context={"resource": resource})


class UpdateMixin:
    """
    Override base view behavior for update endpoints.

    Only the supplied fields are overwritten. The response is an
    acknowledgement, not the updated resource, and is sent whether or not a
    record matched.
    """

    def update(self, request, pk, context=None):
        serializer = self.serializer_class(
            data=request.data,
            partial=True,
            context={"request": request, **get_context(context)},
        )

        if not serializer.is_valid():
            return self.error_response(Error.parse_validation_errors(serializer.errors))

        with self.atomic_write():
            self.check_integrity(serializer.validated_data)
            updated = (
                self.get_collection(request)
                .filter(pk=pk)
                .update(updated_at=timezone.now(), **serializer.validated_data)
            )
        if not updated:
            logger.info("Update of %s %s matched no record", self.view_name_prefix, pk)

        return Response.acknowledge()


class DestroyMixin:
    """
    Override base view behavior for delete endpoints
    """

    def destroy(self, request, pk):
        deleted, _ = self.get_collection(request).filter(pk=pk).delete()
        if not deleted:
            logger.info("Delete of %s %s matched no record", self.view_name_prefix, pk)

        return Response(status=status.HTTP_204_NO_CONTENT)
