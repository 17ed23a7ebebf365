"""
Credential stores for the WhatsApp credential bag.

EnvCredentialStore reads the bag from environment variables for local runs;
StaticCredentialStore wraps a mapping handed over by the host.
"""

import os
from collections.abc import Mapping
from typing import Any

from whatsapp_dispatch.domain.interfaces.credential_store_interface import (
    ICredentialStore,
)
from whatsapp_dispatch.domain.models.credentials import CredentialBag

# Credential bag field -> environment variable
ENV_VARIABLES: dict[str, str] = {
    "officialAccessToken": "WHATSAPP_OFFICIAL_ACCESS_TOKEN",
    "officialPhoneNumberId": "WHATSAPP_OFFICIAL_PHONE_NUMBER_ID",
    "officialBusinessAccountId": "WHATSAPP_OFFICIAL_BUSINESS_ACCOUNT_ID",
    "zapiInstanceId": "WHATSAPP_ZAPI_INSTANCE_ID",
    "zapiToken": "WHATSAPP_ZAPI_TOKEN",
    "zapiClientToken": "WHATSAPP_ZAPI_CLIENT_TOKEN",
    "zapiBaseUrl": "WHATSAPP_ZAPI_BASE_URL",
    "evolutionBaseUrl": "WHATSAPP_EVOLUTION_BASE_URL",
    "evolutionApiKey": "WHATSAPP_EVOLUTION_API_KEY",
    "evolutionInstanceName": "WHATSAPP_EVOLUTION_INSTANCE_NAME",
}


class EnvCredentialStore(ICredentialStore):
    """Read the credential bag from environment variables.

    Unset variables are left out so the bag's defaults apply (notably the
    Z-API base URL).
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    def get_credentials(self) -> CredentialBag:
        values = {
            field: self._environ[variable]
            for field, variable in ENV_VARIABLES.items()
            if variable in self._environ
        }
        return CredentialBag.model_validate(values)


class StaticCredentialStore(ICredentialStore):
    """Serve a credential bag supplied by the host."""

    def __init__(self, credentials: CredentialBag | Mapping[str, Any]):
        if isinstance(credentials, CredentialBag):
            self._credentials = credentials
        else:
            self._credentials = CredentialBag.model_validate(dict(credentials))

    def get_credentials(self) -> CredentialBag:
        return self._credentials
