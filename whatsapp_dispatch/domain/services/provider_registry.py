"""
Provider registry: known providers and their credential fields.

Projects the superset credential bag onto the fields a single provider needs,
so that no provider ever receives another provider's secrets.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from whatsapp_dispatch.core.logging.logger import get_logger
from whatsapp_dispatch.domain.errors import MalformedInputError, UnknownProviderError
from whatsapp_dispatch.domain.models.credentials import (
    CredentialBag,
    EvolutionCredentials,
    OfficialCredentials,
    ProviderCredentials,
    WhatsAppConfig,
    ZApiCredentials,
)
from whatsapp_dispatch.schemas.core.types import ApiProvider

logger = get_logger(__name__)


def _official(bag: CredentialBag) -> OfficialCredentials:
    return OfficialCredentials(
        access_token=bag.official_access_token,
        phone_number_id=bag.official_phone_number_id,
        business_account_id=bag.official_business_account_id,
    )


def _zapi(bag: CredentialBag) -> ZApiCredentials:
    return ZApiCredentials(
        instance_id=bag.zapi_instance_id,
        token=bag.zapi_token,
        client_token=bag.zapi_client_token,
        base_url=bag.zapi_base_url,
    )


def _evolution(bag: CredentialBag) -> EvolutionCredentials:
    return EvolutionCredentials(
        base_url=bag.evolution_base_url,
        api_key=bag.evolution_api_key,
        instance_name=bag.evolution_instance_name,
    )


_PROJECTIONS = {
    ApiProvider.OFFICIAL: (OfficialCredentials, _official),
    ApiProvider.ZAPI: (ZApiCredentials, _zapi),
    ApiProvider.EVOLUTION: (EvolutionCredentials, _evolution),
}


def resolve_provider(provider: Any) -> ApiProvider:
    """
    Validate a provider identifier against the closed enumeration.

    Args:
        provider: Provider identifier (string or ApiProvider)

    Returns:
        The matching ApiProvider

    Raises:
        UnknownProviderError: If the identifier is not a known provider
    """
    if isinstance(provider, ApiProvider):
        return provider
    try:
        return ApiProvider(provider)
    except ValueError as e:
        logger.warning(
            f"Rejected provider {provider!r}, expected one of {ApiProvider.values()}"
        )
        raise UnknownProviderError(provider) from e


def provider_fields(provider: ApiProvider | str) -> list[str]:
    """Return the credential field names emitted for a provider."""
    model, _ = _PROJECTIONS[resolve_provider(provider)]
    return [field.alias or name for name, field in model.model_fields.items()]


def _as_bag(raw_credentials: CredentialBag | Mapping[str, Any]) -> CredentialBag:
    if isinstance(raw_credentials, CredentialBag):
        return raw_credentials
    try:
        return CredentialBag.model_validate(dict(raw_credentials))
    except ValidationError as e:
        raise MalformedInputError(
            f"Invalid credential values: {e.errors()[0]['msg']}", field="credentials"
        ) from e


def select_provider_credentials(
    provider: ApiProvider | str,
    raw_credentials: CredentialBag | Mapping[str, Any],
) -> ProviderCredentials:
    """Project the credential bag onto a provider's credential model."""
    resolved = resolve_provider(provider)
    _, projection = _PROJECTIONS[resolved]
    return projection(_as_bag(raw_credentials))


def select_credentials(
    provider: ApiProvider | str,
    raw_credentials: CredentialBag | Mapping[str, Any],
) -> dict[str, str]:
    """
    Project the credential bag onto the fields of a single provider.

    Args:
        provider: Provider identifier
        raw_credentials: CredentialBag, or a mapping keyed by the bag's
            field names (officialAccessToken, zapiToken, ...)

    Returns:
        Provider credentials keyed by camelCase names, e.g.
        {"accessToken", "phoneNumberId", "businessAccountId"} for official

    Raises:
        UnknownProviderError: If the provider is unknown
    """
    credentials = select_provider_credentials(provider, raw_credentials)
    return credentials.model_dump(by_alias=True)


def build_whatsapp_config(
    provider: ApiProvider | str,
    raw_credentials: CredentialBag | Mapping[str, Any],
) -> WhatsAppConfig:
    """Build the configuration object the send node expects on each item."""
    resolved = resolve_provider(provider)
    credentials = select_credentials(resolved, raw_credentials)
    logger.debug(
        f"Selected {resolved.value} credentials: {sorted(credentials.keys())}"
    )
    return WhatsAppConfig(api_provider=resolved.value, credentials=credentials)
