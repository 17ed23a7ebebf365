"""
Host-facing nodes.

WhatsAppConfigNode selects the provider and its credentials;
WhatsAppSendMessageNode sends one message per item through an injected
transport.
"""

from .config_node import WhatsAppConfigNode
from .descriptions import (
    WHATSAPP_API_CREDENTIAL,
    WHATSAPP_CONFIG_NODE,
    WHATSAPP_SEND_MESSAGE_NODE,
)
from .parameters import per_item_parameters, static_parameters
from .send_node import WhatsAppSendMessageNode, send_message

__all__ = [
    "WhatsAppConfigNode",
    "WhatsAppSendMessageNode",
    "send_message",
    "static_parameters",
    "per_item_parameters",
    "WHATSAPP_API_CREDENTIAL",
    "WHATSAPP_CONFIG_NODE",
    "WHATSAPP_SEND_MESSAGE_NODE",
]
