"""
Domain layer for whatsapp-dispatch.

Contains the error taxonomy, credential models, the provider registry and
the contracts that infrastructure implementations must satisfy.
"""

from .errors import (
    DispatchError,
    MalformedInputError,
    MissingConfigurationError,
    TransportError,
    UnknownProviderError,
)
from .interfaces import ICredentialStore, ITransport

__all__ = [
    "DispatchError",
    "MissingConfigurationError",
    "UnknownProviderError",
    "MalformedInputError",
    "TransportError",
    "ICredentialStore",
    "ITransport",
]
