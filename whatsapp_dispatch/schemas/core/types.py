"""
Closed enumerations shared by the registry, the builders and the nodes.

Values are the identifiers used on the wire between the configuration node
and the send node, so they must stay stable.
"""

from enum import Enum


class ApiProvider(str, Enum):
    """Supported WhatsApp API providers."""

    OFFICIAL = "official"  # Meta WhatsApp Business (Cloud) API
    ZAPI = "zapi"
    EVOLUTION = "evolution"

    @classmethod
    def values(cls) -> list[str]:
        """Return all provider identifiers."""
        return [provider.value for provider in cls]


class MessageType(str, Enum):
    """Message intents supported by the send node."""

    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"
    AUDIO = "audio"
    VIDEO = "video"
    BUTTON_LIST = "buttonList"

    @property
    def is_media(self) -> bool:
        """Whether this intent carries a media URL."""
        return self in MEDIA_MESSAGE_TYPES

    @property
    def supports_caption(self) -> bool:
        """Whether a caption may accompany this intent."""
        return self in CAPTIONED_MESSAGE_TYPES


MEDIA_MESSAGE_TYPES = frozenset(
    {MessageType.IMAGE, MessageType.DOCUMENT, MessageType.AUDIO, MessageType.VIDEO}
)
CAPTIONED_MESSAGE_TYPES = frozenset(
    {MessageType.IMAGE, MessageType.VIDEO, MessageType.DOCUMENT}
)


class ErrorCode(str, Enum):
    """Error codes attached to dispatch errors."""

    MISSING_CONFIGURATION = "missing_configuration"
    UNKNOWN_PROVIDER = "unknown_provider"
    MALFORMED_INPUT = "malformed_input"
    TRANSPORT_ERROR = "transport_error"
