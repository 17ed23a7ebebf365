"""
Transport interface for sending built requests.

The dispatch layer never opens connections itself; a transport is injected
into the send node and invoked once per input item.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from whatsapp_dispatch.messaging.models.request_models import RequestDescriptor


class ITransport(ABC):
    """
    Contract for the HTTP collaborator.

    Implementations perform TLS, follow redirects per provider convention and
    surface non-2xx responses as TransportError carrying status and body.
    """

    @abstractmethod
    async def send(self, request: "RequestDescriptor") -> Any:
        """Send a request descriptor and return the decoded response.

        Args:
            request: Fully resolved method, URL, headers and JSON body

        Returns:
            Decoded JSON response (or raw text when the body is not JSON)

        Raises:
            TransportError: For non-2xx responses and network failures
        """
        pass
