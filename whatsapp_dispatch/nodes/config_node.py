"""
WhatsApp Config node.

Attaches the selected provider and that provider's credentials to every
passing item under ``whatsappConfig``, where the send node picks them up.
"""

from typing import Any

from whatsapp_dispatch.core.logging.logger import get_logger
from whatsapp_dispatch.domain.errors import DispatchError
from whatsapp_dispatch.domain.interfaces.credential_store_interface import (
    ICredentialStore,
)
from whatsapp_dispatch.domain.services.provider_registry import build_whatsapp_config
from whatsapp_dispatch.nodes.descriptions import WHATSAPP_CONFIG_NODE
from whatsapp_dispatch.nodes.parameters import ParameterResolver

CONFIG_KEY = "whatsappConfig"


class WhatsAppConfigNode:
    """Select a provider and filter its credentials onto each item."""

    description = WHATSAPP_CONFIG_NODE

    def __init__(self, credential_store: ICredentialStore):
        """Initialize node with the host's credential store.

        Args:
            credential_store: Read-only source of the credential bag
        """
        self.credential_store = credential_store
        self.logger = get_logger(__name__)

    def execute(
        self, items: list[dict[str, Any]], get_parameter: ParameterResolver
    ) -> list[dict[str, Any]]:
        """Return the items with ``whatsappConfig`` merged in.

        Raises:
            UnknownProviderError: If an item resolves to an unknown provider
        """
        default_provider = self.description.get_property("apiProvider").default
        results: list[dict[str, Any]] = []

        for item_index, item in enumerate(items):
            api_provider = get_parameter("apiProvider", item_index, default_provider)
            credentials = self.credential_store.get_credentials()
            try:
                config = build_whatsapp_config(api_provider, credentials)
            except DispatchError as e:
                e.item_index = item_index
                self.logger.bind(item_index=item_index).error(e.message)
                raise

            results.append({**item, CONFIG_KEY: config.to_item_value()})

        self.logger.debug(f"Configured {len(results)} item(s)")
        return results
