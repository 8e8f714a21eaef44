from django.test import TestCase

from drf_flowchart.models import Link, Node


class NodeTestCase(TestCase):
    def test_str(self):
        self.assertEqual(str(Node(name="Start")), "Start")

    def test_timestamps_are_set(self):
        node = Node.objects.create(name="Start")
        self.assertIsNotNone(node.created_at)
        self.assertIsNotNone(node.updated_at)

    def test_table_names(self):
        self.assertEqual(Node._meta.db_table, "nodes")
        self.assertEqual(Link._meta.db_table, "links")


class LinkTestCase(TestCase):
    def setUp(self):
        self.start = Node.objects.create(name="Start")
        self.end = Node.objects.create(name="End")

    def test_str(self):
        link = Link(from_node=self.start, to_node=self.end)
        self.assertEqual(str(link), "{} --> {}".format(self.start.pk, self.end.pk))

    def test_related_names(self):
        link = Link.objects.create(from_node=self.start, to_node=self.end)
        self.assertEqual(list(self.start.previous_links.all()), [link])
        self.assertEqual(list(self.end.next_links.all()), [link])

    def test_deleting_either_endpoint_cascades(self):
        """
        Every node with dependent links takes them along when deleted
        """
        Link.objects.create(from_node=self.start, to_node=self.end)
        Link.objects.create(from_node=self.end, to_node=self.start)
        Link.objects.create(from_node=self.end, to_node=self.end)

        self.start.delete()
        self.assertEqual(Link.objects.count(), 1)

        self.end.delete()
        self.assertEqual(Link.objects.count(), 0)
