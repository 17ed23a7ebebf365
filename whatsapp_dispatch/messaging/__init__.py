"""
whatsapp-dispatch messaging components.

Request builders for every provider, the message parameter and request
models, and the aiohttp transport.

Usage:
    from whatsapp_dispatch.messaging import build_request, AiohttpTransport

    request = build_request("official", credentials, "5511999999999", "text", {"message": "hi"})
    response = await AiohttpTransport(session).send(request)
"""

from .builders import (
    BaseRequestBuilder,
    EvolutionRequestBuilder,
    OfficialRequestBuilder,
    ZApiRequestBuilder,
    build_request,
    get_request_builder,
)
from .client import AiohttpTransport
from .models import RequestDescriptor

__all__ = [
    "BaseRequestBuilder",
    "OfficialRequestBuilder",
    "ZApiRequestBuilder",
    "EvolutionRequestBuilder",
    "build_request",
    "get_request_builder",
    "AiohttpTransport",
    "RequestDescriptor",
]
