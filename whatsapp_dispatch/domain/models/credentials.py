"""
Credential models for the three WhatsApp API providers.

CredentialBag mirrors the host's credential type: one flat record holding the
fields of every provider, named with a provider prefix. The per-provider
models are what the registry emits and what the request builders consume.
Field contents are never validated here; an empty token is the remote API's
problem and surfaces as a transport error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from whatsapp_dispatch.core.config.settings import settings


class _CredentialModel(BaseModel):
    """Shared configuration for credential models."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        """Treat missing host values (None) as empty strings."""
        return "" if v is None else v


class CredentialBag(_CredentialModel):
    """Superset of every provider's credential fields."""

    # WhatsApp Official API (Meta)
    official_access_token: str = Field("", alias="officialAccessToken")
    official_phone_number_id: str = Field("", alias="officialPhoneNumberId")
    official_business_account_id: str = Field("", alias="officialBusinessAccountId")

    # Z-API
    zapi_instance_id: str = Field("", alias="zapiInstanceId")
    zapi_token: str = Field("", alias="zapiToken")
    zapi_client_token: str = Field("", alias="zapiClientToken")
    zapi_base_url: str = Field(
        default_factory=lambda: settings.zapi_default_base_url, alias="zapiBaseUrl"
    )

    # Evolution API
    evolution_base_url: str = Field("", alias="evolutionBaseUrl")
    evolution_api_key: str = Field("", alias="evolutionApiKey")
    evolution_instance_name: str = Field("", alias="evolutionInstanceName")


class OfficialCredentials(_CredentialModel):
    """Credentials for Meta's WhatsApp Business API."""

    access_token: str = Field("", alias="accessToken")
    phone_number_id: str = Field("", alias="phoneNumberId")
    business_account_id: str = Field("", alias="businessAccountId")


class ZApiCredentials(_CredentialModel):
    """Credentials for Z-API."""

    instance_id: str = Field("", alias="instanceId")
    token: str = Field("", alias="token")
    client_token: str = Field("", alias="clientToken")
    base_url: str = Field("", alias="baseUrl")


class EvolutionCredentials(_CredentialModel):
    """Credentials for Evolution API."""

    base_url: str = Field("", alias="baseUrl")
    api_key: str = Field("", alias="apiKey")
    instance_name: str = Field("", alias="instanceName")


ProviderCredentials = OfficialCredentials | ZApiCredentials | EvolutionCredentials


class WhatsAppConfig(BaseModel):
    """Configuration attached to every item by the configuration node."""

    model_config = ConfigDict(populate_by_name=True)

    api_provider: str = Field(..., alias="apiProvider")
    credentials: dict[str, Any] = Field(default_factory=dict)

    def to_item_value(self) -> dict[str, Any]:
        """Serialize with the camelCase keys the send node reads back."""
        return self.model_dump(by_alias=True)
