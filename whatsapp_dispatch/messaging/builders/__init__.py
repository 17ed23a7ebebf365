"""
Provider request builders.

One builder per provider; build_request dispatches on the provider and the
builder dispatches on the message intent.
"""

from .base_builder import BaseRequestBuilder
from .evolution_builder import EvolutionRequestBuilder
from .factory import build_request, get_request_builder
from .official_builder import OfficialRequestBuilder
from .zapi_builder import ZApiRequestBuilder

__all__ = [
    "BaseRequestBuilder",
    "OfficialRequestBuilder",
    "ZApiRequestBuilder",
    "EvolutionRequestBuilder",
    "build_request",
    "get_request_builder",
]
