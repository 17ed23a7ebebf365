"""
whatsapp-dispatch - WhatsApp provider dispatch for workflow automation

Maps text, media and interactive list messages onto the request shapes of
Meta's WhatsApp Business API, Z-API and Evolution API.

Clean Import Interface:
- Nodes and the single-message helper at top level
- Builders, models and transport under whatsapp_dispatch.messaging
"""

from .core.config.settings import settings
from .domain.errors import (
    DispatchError,
    MalformedInputError,
    MissingConfigurationError,
    TransportError,
    UnknownProviderError,
)
from .domain.services.provider_registry import select_credentials
from .messaging.builders.factory import build_request
from .nodes import WhatsAppConfigNode, WhatsAppSendMessageNode, send_message
from .schemas.core.types import ApiProvider, MessageType

__version__ = settings.version

__all__ = [
    "ApiProvider",
    "MessageType",
    "select_credentials",
    "build_request",
    "send_message",
    "WhatsAppConfigNode",
    "WhatsAppSendMessageNode",
    "DispatchError",
    "MissingConfigurationError",
    "UnknownProviderError",
    "MalformedInputError",
    "TransportError",
]
