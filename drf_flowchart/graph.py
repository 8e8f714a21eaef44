"""
Flowchart export.

Renders every node and link as a line-oriented diagram description::

    graph TD;
    1[Start];
    2[Review];
    1 --> 2;
"""
import logging

from django.conf import settings
from django.db import transaction

from . import defaults
from .models import Link, Node

logger = logging.getLogger(__name__)


def render_graph(nodes, links, direction=defaults.FLOWCHART_GRAPH_DIRECTION):
    """
    Build a graph document from nodes and links.

    :param nodes: Objects with `id` and `name`
    :param links: Objects with `from_node_id` and `to_node_id`
    :param string direction: Direction token of the header line
    :return: The graph document, one `\\n`-terminated line per statement
    :rtype: string
    """

    lines = ["graph {};".format(direction)]
    lines.extend("{}[{}];".format(node.id, node.name) for node in nodes)
    lines.extend(
        "{} --> {};".format(link.from_node_id, link.to_node_id) for link in links
    )
    return "".join(line + "\n" for line in lines)


class GraphExporter:
    """
    Reads all nodes, then all links, and renders them.

    With `atomic` set both reads share one transaction. How consistent that
    makes them depends on the database's isolation level. Without it a write
    landing between the two reads can produce an edge to a node missing from
    the document.
    """

    def __init__(self, using=None, direction=None, atomic=None):
        if using is None:
            using = getattr(settings, "FLOWCHART_DATABASE", defaults.FLOWCHART_DATABASE)
        if direction is None:
            direction = getattr(
                settings,
                "FLOWCHART_GRAPH_DIRECTION",
                defaults.FLOWCHART_GRAPH_DIRECTION,
            )
        if atomic is None:
            atomic = getattr(
                settings, "FLOWCHART_ATOMIC_EXPORT", defaults.FLOWCHART_ATOMIC_EXPORT
            )
        self.using = using
        self.direction = direction
        self.atomic = atomic

    def read(self):
        nodes = list(Node.objects.using(self.using).all())
        links = list(Link.objects.using(self.using).all())
        return nodes, links

    def export(self):
        if self.atomic:
            with transaction.atomic(using=self.using):
                nodes, links = self.read()
        else:
            nodes, links = self.read()

        logger.debug("Exporting graph of %d nodes and %d links", len(nodes), len(links))
        return render_graph(nodes, links, self.direction)
