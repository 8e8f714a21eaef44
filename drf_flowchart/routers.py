from rest_framework.routers import DefaultRouter

from .views import GraphView


class Router(DefaultRouter):
    """
    Registers viewsets under the basename declared by their serializer and
    serves the graph document at the API root.
    """

    APIRootView = GraphView
    include_format_suffixes = False

    def get_api_root_view(self, api_urls=None):
        return self.APIRootView.as_view()

    def register(self, viewset):  # noqa
        basename = getattr(
            viewset.serializer_class.Meta,
            "basename",
            viewset.serializer_class.Meta.model._meta.db_table,
        )
        super().register(basename, viewset, basename)
