"""
Error taxonomy for the dispatch layer.

Every error is attributed to a single input item. The send node fills in
``item_index`` before re-raising or converting the error into an error record.
None of these errors are retried by this package.
"""

from typing import Any

from whatsapp_dispatch.schemas.core.types import ErrorCode


class DispatchError(Exception):
    """Base exception for dispatch-related errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        provider: str | None = None,
        item_index: int | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.provider = provider
        self.item_index = item_index
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for logging or operator display."""
        return {
            "error": self.message,
            "error_code": self.error_code.value,
            "provider": self.provider,
            "item_index": self.item_index,
        }


class MissingConfigurationError(DispatchError):
    """Raised when an item carries no upstream configuration or no provider."""

    def __init__(self, message: str | None = None, item_index: int | None = None):
        super().__init__(
            message
            or "WhatsApp configuration not found. "
            "Please add a WhatsApp Config node before this node.",
            ErrorCode.MISSING_CONFIGURATION,
            item_index=item_index,
        )


class UnknownProviderError(DispatchError):
    """Raised when a provider identifier is outside the closed enumeration."""

    def __init__(self, provider: Any, item_index: int | None = None):
        super().__init__(
            f"Unknown API provider: {provider}",
            ErrorCode.UNKNOWN_PROVIDER,
            provider=str(provider),
            item_index=item_index,
        )


class MalformedInputError(DispatchError):
    """Raised when message parameters fail local parsing or validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        provider: str | None = None,
        item_index: int | None = None,
    ):
        self.field = field
        super().__init__(
            message,
            ErrorCode.MALFORMED_INPUT,
            provider=provider,
            item_index=item_index,
        )


class TransportError(DispatchError):
    """Raised when the remote API answers non-2xx or the network call fails."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        body: Any = None,
        provider: str | None = None,
        item_index: int | None = None,
    ):
        self.status = status
        self.body = body
        super().__init__(
            message,
            ErrorCode.TRANSPORT_ERROR,
            provider=provider,
            item_index=item_index,
        )
