"""
WhatsApp Send Message node.

Processes input items one at a time: reads the configuration attached by
the WhatsApp Config node, resolves the message parameters, builds the
provider request and awaits the transport before moving to the next item.
Sends are not transactional; an abort leaves earlier sends in place.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from whatsapp_dispatch.core.logging.context import clear_item_context, set_item_context
from whatsapp_dispatch.core.logging.logger import get_logger
from whatsapp_dispatch.domain.errors import DispatchError, MissingConfigurationError
from whatsapp_dispatch.domain.interfaces.transport_interface import ITransport
from whatsapp_dispatch.domain.services.provider_registry import resolve_provider
from whatsapp_dispatch.messaging.builders.factory import build_request
from whatsapp_dispatch.messaging.models.message_models import resolve_message_type
from whatsapp_dispatch.messaging.models.request_models import (
    assemble_record,
    error_record,
)
from whatsapp_dispatch.nodes.config_node import CONFIG_KEY
from whatsapp_dispatch.nodes.descriptions import (
    WHATSAPP_SEND_MESSAGE_NODE,
    intent_parameters,
)
from whatsapp_dispatch.nodes.parameters import ParameterResolver
from whatsapp_dispatch.schemas.core.types import ApiProvider, MessageType

logger = get_logger(__name__)


async def send_message(
    transport: ITransport,
    provider: ApiProvider | str,
    credentials: BaseModel | Mapping[str, Any],
    phone_number: str,
    message_type: MessageType | str,
    params: Mapping[str, Any],
) -> Any:
    """Build and send one message, returning the provider's raw response.

    Raises:
        UnknownProviderError: Before any network call
        MalformedInputError: Before any network call
        TransportError: When the transport fails
    """
    request = build_request(provider, credentials, phone_number, message_type, params)
    try:
        return await transport.send(request)
    except DispatchError as e:
        if e.provider is None:
            e.provider = resolve_provider(provider).value
        raise


class WhatsAppSendMessageNode:
    """Send one WhatsApp message per input item."""

    description = WHATSAPP_SEND_MESSAGE_NODE

    def __init__(self, transport: ITransport, continue_on_fail: bool = False):
        """Initialize node with its transport.

        Args:
            transport: HTTP collaborator used for every send
            continue_on_fail: Record failures as ``{"error": ...}`` items and
                keep going instead of aborting the batch
        """
        self.transport = transport
        self.continue_on_fail = continue_on_fail
        self.logger = logger

    async def execute(
        self, items: list[dict[str, Any]], get_parameter: ParameterResolver
    ) -> list[dict[str, Any]]:
        """Send every item in order and return one result per item.

        Raises:
            DispatchError: The first failure (with ``item_index`` set) when
                continue_on_fail is off
        """
        results: list[dict[str, Any]] = []
        try:
            for item_index, item in enumerate(items):
                clear_item_context()
                set_item_context(item_index=item_index)
                try:
                    results.append(
                        await self._process_item(item_index, item, get_parameter)
                    )
                except Exception as e:
                    if isinstance(e, DispatchError):
                        e.item_index = item_index
                    if self.continue_on_fail:
                        self.logger.warning(f"Item {item_index} failed: {e}")
                        results.append(error_record(e))
                        continue
                    if isinstance(e, DispatchError):
                        self.logger.error(f"Aborting batch: {e.to_dict()}")
                    else:
                        self.logger.error(f"Item {item_index} failed, aborting: {e}")
                    raise
        finally:
            clear_item_context()

        return results

    async def _process_item(
        self,
        item_index: int,
        item: dict[str, Any],
        get_parameter: ParameterResolver,
    ) -> dict[str, Any]:
        config = item.get(CONFIG_KEY)
        if not isinstance(config, Mapping) or not config.get("apiProvider"):
            raise MissingConfigurationError()

        provider = resolve_provider(config["apiProvider"])
        set_item_context(api_provider=provider.value)

        phone_number = get_parameter("phoneNumber", item_index, "")
        phone_number = "" if phone_number is None else str(phone_number)
        message_type = resolve_message_type(
            get_parameter("messageType", item_index, MessageType.TEXT.value)
        )
        params = {
            name: value
            for name in intent_parameters(message_type)
            if (value := get_parameter(name, item_index, None)) is not None
        }

        self.logger.info(f"Sending {message_type.value} message to {phone_number}")
        response = await send_message(
            self.transport,
            provider,
            config.get("credentials") or {},
            phone_number,
            message_type,
            params,
        )

        return assemble_record(
            item, response, phone_number, message_type.value, provider.value
        )
