from rest_framework import renderers
from . import response


class JSONRenderer(renderers.JSONRenderer):
    """
    Set media type and format.
    This functionality requires an entry to the REST_FRAMEWORK settings
    dictionary in settings.py:
    'DEFAULT_RENDERER_CLASSES': (
        'drf_flowchart.renderers.JSONRenderer',
    ),
    """

    media_type = response.CONTENT_TYPE
    format = response.FORMAT


class GraphRenderer(renderers.BaseRenderer):
    """
    Writes a graph document out as-is.
    """

    media_type = "text/plain"
    format = "txt"
    charset = "utf-8"

    def render(self, data, accepted_media_type=None, renderer_context=None):
        if data is None:
            return b""
        if isinstance(data, bytes):
            return data
        return str(data).encode(self.charset)
