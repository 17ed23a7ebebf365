"""Message parameter, request and result models."""

from .message_models import (
    ButtonListParams,
    ListRow,
    ListSection,
    MediaMessageParams,
    TextMessageParams,
    parse_message_params,
    resolve_message_type,
)
from .request_models import RequestDescriptor, assemble_record, error_record

__all__ = [
    "ButtonListParams",
    "ListRow",
    "ListSection",
    "MediaMessageParams",
    "TextMessageParams",
    "parse_message_params",
    "resolve_message_type",
    "RequestDescriptor",
    "assemble_record",
    "error_record",
]
