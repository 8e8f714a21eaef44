from .objects import DocumentSerializer, ErrorSerializer
from .resources import LinkSerializer, NodeSerializer

__all__ = [
    "DocumentSerializer",
    "ErrorSerializer",
    "LinkSerializer",
    "NodeSerializer",
]
