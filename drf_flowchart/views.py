from contextlib import contextmanager

from django.db import IntegrityError

from rest_framework.views import APIView

from .graph import GraphExporter
from .models import Link, Node
from .negotiation import FirstRendererNegotiation
from .objects import ForeignKeyError, NotFoundError
from .renderers import GraphRenderer, JSONRenderer
from .response import Response
from .serializers import LinkSerializer, NodeSerializer
from .mixins import ListMixin
from .viewsets import ReadWriteViewSet, ViewSet


class NodeViewSet(ReadWriteViewSet):
    serializer_class = NodeSerializer


class LinkViewSet(ReadWriteViewSet):
    serializer_class = LinkSerializer

    # request field name -> validated attribute
    references = (("fromId", "from_node_id"), ("toId", "to_node_id"))

    def check_integrity(self, validated_data):
        nodes = Node.objects.using(self.get_database())
        for field, attribute in self.references:
            if attribute not in validated_data:
                continue
            node_id = validated_data[attribute]
            if not nodes.filter(pk=node_id).exists():
                raise ForeignKeyError(
                    detail="Node {} does not exist.".format(node_id),
                    source={"pointer": "/{}".format(field)},
                )

    @contextmanager
    def atomic_write(self):
        # A node deleted after the check surfaces from the store
        try:
            with super().atomic_write():
                yield
        except IntegrityError as exc:
            raise ForeignKeyError(detail="A linked node does not exist.") from exc


class NodeLinksViewSet(ListMixin, ViewSet):
    """
    Lists the links attached to one node, nested under /nodes/:id.
    `node_field` is the link column matched against the node id.
    """

    serializer_class = LinkSerializer
    node_field = None

    def get_collection(self, request):
        node_pk = self.kwargs["node_pk"]
        if not Node.objects.using(self.get_database()).filter(pk=node_pk).exists():
            raise NotFoundError(
                detail="Node {} not found.".format(node_pk),
                source={"parameter": "id"},
            )
        return Link.objects.using(self.get_database()).filter(
            **{self.node_field: node_pk}
        )


class PreviousLinksViewSet(NodeLinksViewSet):
    node_field = "from_node_id"


class NextLinksViewSet(NodeLinksViewSet):
    node_field = "to_node_id"


class GraphView(APIView):
    """
    Serves the whole graph as a plain text flowchart description.
    """

    renderer_classes = (GraphRenderer,)
    content_negotiation_class = FirstRendererNegotiation
    using = None
    exporter_class = GraphExporter

    def get(self, request, *args, **kwargs):
        exporter = self.exporter_class(using=self.using)
        return Response(exporter.export())

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)

        # Errors are reported as JSON documents like everywhere else
        if isinstance(response, Response) and not response.ok:
            response.accepted_renderer = JSONRenderer()
            response.accepted_media_type = JSONRenderer.media_type

        return response
