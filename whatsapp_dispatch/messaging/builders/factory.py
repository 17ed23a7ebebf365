"""Factory selecting the request builder for a provider."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from whatsapp_dispatch.domain.services.provider_registry import resolve_provider
from whatsapp_dispatch.messaging.builders.base_builder import BaseRequestBuilder
from whatsapp_dispatch.messaging.builders.evolution_builder import (
    EvolutionRequestBuilder,
)
from whatsapp_dispatch.messaging.builders.official_builder import (
    OfficialRequestBuilder,
)
from whatsapp_dispatch.messaging.builders.zapi_builder import ZApiRequestBuilder
from whatsapp_dispatch.messaging.models.request_models import RequestDescriptor
from whatsapp_dispatch.schemas.core.types import ApiProvider, MessageType

# Provider -> builder class
_BUILDERS: dict[ApiProvider, type[BaseRequestBuilder]] = {
    ApiProvider.OFFICIAL: OfficialRequestBuilder,
    ApiProvider.ZAPI: ZApiRequestBuilder,
    ApiProvider.EVOLUTION: EvolutionRequestBuilder,
}


def get_request_builder(
    provider: ApiProvider | str,
    credentials: BaseModel | Mapping[str, Any],
) -> BaseRequestBuilder:
    """Return the builder for a provider, bound to its credentials.

    Raises:
        UnknownProviderError: If the provider is not supported
    """
    return _BUILDERS[resolve_provider(provider)](credentials)


def build_request(
    provider: ApiProvider | str,
    credentials: BaseModel | Mapping[str, Any],
    phone_number: str,
    message_type: MessageType | str,
    params: Mapping[str, Any],
) -> RequestDescriptor:
    """Build the request descriptor for one message.

    Args:
        provider: Provider identifier
        credentials: Provider credentials as selected by the registry
        phone_number: Recipient with country code, digits only
        message_type: Message intent
        params: Intent parameters keyed by host parameter name

    Returns:
        RequestDescriptor ready for the transport

    Raises:
        UnknownProviderError: If the provider is not supported
        MalformedInputError: If the intent or its parameters are invalid
    """
    builder = get_request_builder(provider, credentials)
    return builder.build(phone_number, message_type, params)
