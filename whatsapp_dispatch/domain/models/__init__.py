"""Domain models."""

from .credentials import (
    CredentialBag,
    EvolutionCredentials,
    OfficialCredentials,
    WhatsAppConfig,
    ZApiCredentials,
)

__all__ = [
    "CredentialBag",
    "OfficialCredentials",
    "ZApiCredentials",
    "EvolutionCredentials",
    "WhatsAppConfig",
]
