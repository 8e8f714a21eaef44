from django.test import SimpleTestCase

from drf_flowchart.renderers import GraphRenderer, JSONRenderer


class JSONRendererTestCase(SimpleTestCase):

    def test_media_type(self):
        self.assertEqual(JSONRenderer.media_type, "application/json")
        self.assertEqual(JSONRenderer.format, "json")

    def test_render(self):
        self.assertEqual(
            JSONRenderer().render({"data": "success"}), b'{"data":"success"}'
        )


class GraphRendererTestCase(SimpleTestCase):

    def test_render_text(self):
        self.assertEqual(
            GraphRenderer().render("graph TD;\n1[Ä];\n"),
            "graph TD;\n1[Ä];\n".encode("utf-8"),
        )

    def test_render_bytes(self):
        self.assertEqual(GraphRenderer().render(b"graph TD;\n"), b"graph TD;\n")

    def test_render_none(self):
        self.assertEqual(GraphRenderer().render(None), b"")
