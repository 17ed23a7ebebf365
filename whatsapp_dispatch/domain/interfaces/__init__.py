"""
Domain interfaces.

Defines the contracts that infrastructure layer must implement.
"""

from .credential_store_interface import ICredentialStore
from .transport_interface import ITransport

__all__ = ["ICredentialStore", "ITransport"]
