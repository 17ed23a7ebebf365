"""
Credential store interface.

Stores are read-only from this package's point of view: the host owns the
secrets, the dispatch layer only reads the credential bag.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whatsapp_dispatch.domain.models.credentials import CredentialBag


class ICredentialStore(ABC):
    """Read-only access to the WhatsApp credential bag."""

    @abstractmethod
    def get_credentials(self) -> "CredentialBag":
        """Return the credential bag holding every provider's fields."""
        pass
