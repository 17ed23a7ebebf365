"""Domain services: provider registry and credential stores."""

from .credential_store import EnvCredentialStore, StaticCredentialStore
from .provider_registry import (
    build_whatsapp_config,
    provider_fields,
    resolve_provider,
    select_credentials,
)

__all__ = [
    "EnvCredentialStore",
    "StaticCredentialStore",
    "build_whatsapp_config",
    "provider_fields",
    "resolve_provider",
    "select_credentials",
]
