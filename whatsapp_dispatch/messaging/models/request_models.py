"""
Request and result models.

A RequestDescriptor is built once per send and handed straight to the
transport; it is never cached or reused.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field

JSON_CONTENT_TYPE = "application/json"


class RequestDescriptor(BaseModel):
    """Fully resolved outbound HTTP request."""

    method: Literal["POST"] = "POST"
    url: str = Field(..., description="Absolute endpoint URL")
    headers: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] = Field(default_factory=dict, description="JSON body")


def assemble_record(
    item: Mapping[str, Any],
    message_response: Any,
    sent_to: str,
    message_type: str,
    api_provider: str,
) -> dict[str, Any]:
    """Build the caller-visible result for one sent item.

    The original item fields are kept; the four result keys overwrite any
    item field of the same name.
    """
    return {
        **item,
        "messageResponse": message_response,
        "sentTo": sent_to,
        "messageType": message_type,
        "apiProvider": api_provider,
    }


def error_record(error: Exception) -> dict[str, Any]:
    """Build the result for a failed item in continue-on-fail mode."""
    return {"error": str(error)}
