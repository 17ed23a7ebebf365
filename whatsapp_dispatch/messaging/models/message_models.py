"""
Message intent parameter models.

Pydantic schemas for the parameters of each message intent. Parameters are
identical for every provider; the builders decide how they land on the wire.

Supported intents:
1. text - a plain text message
2. image / document / audio / video - a media URL with optional caption
3. buttonList - an interactive list with sections and rows
"""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from whatsapp_dispatch.domain.errors import MalformedInputError
from whatsapp_dispatch.schemas.core.types import MessageType


class _ParamsModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


def _none_as_empty(v):
    return "" if v is None else v


class TextMessageParams(_ParamsModel):
    """Parameters for the text intent."""

    message: str = Field(..., description="Text message to send")


class MediaMessageParams(_ParamsModel):
    """Parameters shared by the image, document, audio and video intents.

    caption is ignored for audio; filename is only used for documents.
    """

    media_url: str = Field(..., alias="mediaUrl", description="URL of the media file")
    caption: str = Field("", description="Optional caption for the media")
    filename: str = Field("", description="Optional filename for documents")

    @field_validator("caption", "filename", mode="before")
    @classmethod
    def empty_optionals(cls, v):
        return _none_as_empty(v)


class ListRow(_ParamsModel):
    """Row within a list section."""

    id: str = Field(..., description="Row identifier returned on selection")
    title: str = Field(..., description="Row title")
    description: str = Field("", description="Optional row description")

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, v):
        return _none_as_empty(v)


class ListSection(_ParamsModel):
    """Section within a list message."""

    title: str = Field(..., description="Section title")
    rows: list[ListRow] = Field(default_factory=list)


class ButtonListParams(_ParamsModel):
    """Parameters for the buttonList intent."""

    list_title: str = Field(..., alias="listTitle")
    button_text: str = Field(..., alias="buttonText")
    list_sections: list[ListSection] = Field(..., alias="listSections")
    list_description: str = Field("", alias="listDescription")
    footer_text: str = Field("", alias="footerText")

    @field_validator("list_description", "footer_text", mode="before")
    @classmethod
    def empty_optionals(cls, v):
        return _none_as_empty(v)

    @field_validator("list_sections", mode="before")
    @classmethod
    def parse_sections(cls, v):
        """Accept sections as a JSON string, the way the host delivers them."""
        if isinstance(v, str):
            try:
                v = json.loads(v)
            except json.JSONDecodeError as e:
                raise ValueError(f"listSections is not valid JSON: {e.msg}") from e
        if not isinstance(v, list):
            raise ValueError("listSections must be a list of sections")
        return v

    def iter_rows(self):
        """Yield every row across every section, in order."""
        for section in self.list_sections:
            yield from section.rows


MessageParams = TextMessageParams | MediaMessageParams | ButtonListParams


def resolve_message_type(message_type: Any) -> MessageType:
    """
    Validate a message intent against the closed enumeration.

    Raises:
        MalformedInputError: If the intent is unknown
    """
    if isinstance(message_type, MessageType):
        return message_type
    try:
        return MessageType(message_type)
    except ValueError as e:
        raise MalformedInputError(
            f"Unsupported message type: {message_type}", field="messageType"
        ) from e


def parse_message_params(
    message_type: MessageType | str, params: Mapping[str, Any]
) -> MessageParams:
    """
    Validate raw intent parameters into the intent's model.

    Args:
        message_type: Message intent
        params: Raw parameters keyed by host parameter name

    Returns:
        TextMessageParams, MediaMessageParams or ButtonListParams

    Raises:
        MalformedInputError: If the intent is unknown or parameters are invalid
    """
    intent = resolve_message_type(message_type)
    if intent == MessageType.TEXT:
        model = TextMessageParams
    elif intent == MessageType.BUTTON_LIST:
        model = ButtonListParams
    else:
        model = MediaMessageParams

    try:
        return model.model_validate(dict(params))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise MalformedInputError(
            f"Invalid parameters for '{intent.value}' message: "
            f"{field}: {first['msg']}",
            field=field,
        ) from e
