"""
aiohttp transport for built WhatsApp requests.

Key Design Decisions:
- Pure dependency injection (the caller owns the aiohttp session)
- One POST per descriptor, no retries
- Non-2xx responses and network failures surface as TransportError
"""

import asyncio
import json
from typing import Any
from urllib.parse import urlsplit

import aiohttp

from whatsapp_dispatch.core.config.settings import settings
from whatsapp_dispatch.core.logging.logger import get_logger
from whatsapp_dispatch.domain.errors import TransportError
from whatsapp_dispatch.domain.interfaces.transport_interface import ITransport
from whatsapp_dispatch.messaging.models.request_models import RequestDescriptor


def _decode_body(text: str) -> Any:
    """Decode a JSON response body, falling back to the raw text."""
    if not text:
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


class AiohttpTransport(ITransport):
    """Send request descriptors through a shared aiohttp session."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        timeout_seconds: float = settings.http_timeout_seconds,
        logger: Any | None = None,
    ):
        """Initialize transport with dependency injection.

        Args:
            session: aiohttp session managed by the host
            timeout_seconds: Total timeout for each request
            logger: Pre-configured logger instance
        """
        self.session = session
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.logger = logger or get_logger(__name__)

    async def send(self, request: RequestDescriptor) -> Any:
        host = urlsplit(request.url).netloc
        self.logger.debug(f"Sending {request.method} request to {host}")

        try:
            async with self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                json=request.body,
                timeout=self.timeout,
            ) as response:
                # Error pages are not always UTF-8
                data = _decode_body(await response.text(errors="replace"))
                status = response.status

        except asyncio.TimeoutError as e:
            self.logger.error(f"Request to {host} timed out")
            raise TransportError(f"Request to {host} timed out") from e
        except aiohttp.ClientError as e:
            self.logger.error(f"Network error for {host}: {e}")
            raise TransportError(f"Network error for {host}: {e}") from e

        if not 200 <= status < 300:
            if status == 401:
                self.logger.error(
                    f"🚨 Authentication FAILED for {host} - 401 Unauthorized. "
                    "Check the credentials selected in the WhatsApp Config node."
                )
            else:
                self.logger.error(f"HTTP error from {host}: {status} - {data}")
            raise TransportError(
                f"Request failed with status code {status}", status=status, body=data
            )

        self.logger.debug(f"Response from {host}: {data}")
        return data
