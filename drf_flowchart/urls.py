from rest_framework_nested.routers import NestedSimpleRouter

from .routers import Router
from .views import LinkViewSet, NextLinksViewSet, NodeViewSet, PreviousLinksViewSet

router = Router(trailing_slash=False)
router.register(NodeViewSet)
router.register(LinkViewSet)

node_router = NestedSimpleRouter(router, r"nodes", lookup="node", trailing_slash=False)
node_router.register(
    r"previous_links", PreviousLinksViewSet, basename="node-previous-links"
)
node_router.register(r"next_links", NextLinksViewSet, basename="node-next-links")

urlpatterns = router.urls + node_router.urls
