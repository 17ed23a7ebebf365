"""
Declarative host schema for the credential type and both nodes.

The host runtime renders these descriptions (field labels, options and
visibility rules); the send node also reads them to decide which
parameters belong to a message intent.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from whatsapp_dispatch.core.config.settings import settings
from whatsapp_dispatch.schemas.core.types import ApiProvider, MessageType


class PropertyOption(BaseModel):
    """One choice of an ``options`` property."""

    name: str
    value: str
    description: str | None = None


class DisplayOptions(BaseModel):
    """Visibility rule: show the property when every listed parameter matches."""

    show: dict[str, list[str]] = Field(default_factory=dict)

    def matches(self, values: Mapping[str, Any]) -> bool:
        return all(values.get(name) in allowed for name, allowed in self.show.items())


class NodeProperty(BaseModel):
    """A single field rendered by the host."""

    display_name: str
    name: str
    type: str = "string"
    default: Any = ""
    required: bool = False
    description: str | None = None
    placeholder: str | None = None
    password: bool = False
    rows: int | None = None
    options: list[PropertyOption] = Field(default_factory=list)
    display_options: DisplayOptions | None = None

    def is_visible(self, values: Mapping[str, Any]) -> bool:
        """Whether the host shows this property for the given parameter values."""
        return self.display_options is None or self.display_options.matches(values)


class CredentialTypeDescription(BaseModel):
    """Credential type holding every provider's secrets."""

    name: str
    display_name: str
    documentation_url: str
    properties: list[NodeProperty]


class NodeDescription(BaseModel):
    """Node metadata and parameters."""

    display_name: str
    name: str
    group: list[str]
    version: int = 1
    description: str
    credentials: list[str] = Field(default_factory=list)
    usable_as_tool: bool = False
    properties: list[NodeProperty]

    def get_property(self, name: str) -> NodeProperty:
        for prop in self.properties:
            if prop.name == name:
                return prop
        raise KeyError(name)

    def visible_parameters(self, values: Mapping[str, Any]) -> list[str]:
        """Names of the non-notice parameters visible for the given values."""
        return [
            prop.name
            for prop in self.properties
            if prop.type != "notice" and prop.is_visible(values)
        ]


def _show(**conditions: list[str]) -> DisplayOptions:
    return DisplayOptions(show=conditions)


WHATSAPP_API_CREDENTIAL = CredentialTypeDescription(
    name="whatsAppApi",
    display_name="WhatsApp API",
    documentation_url="https://developers.facebook.com/docs/whatsapp",
    properties=[
        NodeProperty(
            display_name="Info",
            name="notice",
            type="notice",
            default="Configure one or more WhatsApp API providers below. You only "
            "need to fill in the credentials for the provider(s) you plan to use.",
        ),
        # WhatsApp Official API
        NodeProperty(
            display_name="Access Token",
            name="officialAccessToken",
            password=True,
            description="Access token for WhatsApp Official API (Meta)",
        ),
        NodeProperty(
            display_name="Phone Number ID",
            name="officialPhoneNumberId",
            description="Phone number ID from WhatsApp Business API",
        ),
        NodeProperty(
            display_name="Business Account ID",
            name="officialBusinessAccountId",
            description="WhatsApp Business Account ID",
        ),
        # Z-API
        NodeProperty(
            display_name="Instance ID",
            name="zapiInstanceId",
            description="Z-API Instance ID",
        ),
        NodeProperty(
            display_name="API Token",
            name="zapiToken",
            password=True,
            description="Z-API authentication token",
        ),
        NodeProperty(
            display_name="Client Token",
            name="zapiClientToken",
            password=True,
            description="Z-API client token",
        ),
        NodeProperty(
            display_name="Base URL",
            name="zapiBaseUrl",
            default=settings.zapi_default_base_url,
            description="Z-API base URL",
        ),
        # Evolution API
        NodeProperty(
            display_name="Base URL",
            name="evolutionBaseUrl",
            placeholder="https://your-evolution-api.com",
            description="Evolution API base URL",
        ),
        NodeProperty(
            display_name="API Key",
            name="evolutionApiKey",
            password=True,
            description="Evolution API key for authentication",
        ),
        NodeProperty(
            display_name="Instance Name",
            name="evolutionInstanceName",
            description="Evolution API instance name",
        ),
    ],
)


WHATSAPP_CONFIG_NODE = NodeDescription(
    display_name="WhatsApp Config",
    name="whatsAppConfig",
    group=["transform"],
    description="Configure which WhatsApp API to use in the workflow",
    credentials=[WHATSAPP_API_CREDENTIAL.name],
    properties=[
        NodeProperty(
            display_name="API Provider",
            name="apiProvider",
            type="options",
            default=ApiProvider.OFFICIAL.value,
            description="Select which API provider to use for WhatsApp messages",
            options=[
                PropertyOption(
                    name="WhatsApp Official API (Meta)",
                    value=ApiProvider.OFFICIAL.value,
                    description="Use WhatsApp Business API from Meta",
                ),
                PropertyOption(
                    name="Z-API",
                    value=ApiProvider.ZAPI.value,
                    description="Use Z-API service",
                ),
                PropertyOption(
                    name="Evolution API",
                    value=ApiProvider.EVOLUTION.value,
                    description="Use Evolution API",
                ),
            ],
        ),
    ],
)


_MEDIA = [t.value for t in MessageType if t.is_media]
_CAPTIONED = [t.value for t in MessageType if t.supports_caption]
_LIST = [MessageType.BUTTON_LIST.value]

WHATSAPP_SEND_MESSAGE_NODE = NodeDescription(
    display_name="WhatsApp Send Message",
    name="whatsAppSendMessage",
    group=["output"],
    description="Send WhatsApp messages using configured API provider",
    usable_as_tool=True,
    properties=[
        NodeProperty(
            display_name="Phone Number",
            name="phoneNumber",
            required=True,
            placeholder="5511999999999",
            description="Recipient phone number with country code (no + or spaces)",
        ),
        NodeProperty(
            display_name="Message Type",
            name="messageType",
            type="options",
            default=MessageType.TEXT.value,
            description="Type of message to send",
            options=[
                PropertyOption(name="Audio", value="audio", description="Send an audio file"),
                PropertyOption(
                    name="Button List",
                    value="buttonList",
                    description="Send an interactive list of options",
                ),
                PropertyOption(name="Document", value="document", description="Send a document"),
                PropertyOption(name="Image", value="image", description="Send an image"),
                PropertyOption(name="Text", value="text", description="Send a text message"),
                PropertyOption(name="Video", value="video", description="Send a video"),
            ],
        ),
        # Text message options
        NodeProperty(
            display_name="Message",
            name="message",
            required=True,
            rows=4,
            description="Text message to send",
            display_options=_show(messageType=[MessageType.TEXT.value]),
        ),
        # Media options (image, document, audio, video)
        NodeProperty(
            display_name="Media URL",
            name="mediaUrl",
            required=True,
            description="URL of the media file to send",
            display_options=_show(messageType=_MEDIA),
        ),
        NodeProperty(
            display_name="Caption",
            name="caption",
            rows=2,
            description="Optional caption for the media",
            display_options=_show(messageType=_CAPTIONED),
        ),
        NodeProperty(
            display_name="Filename",
            name="filename",
            description="Optional filename for the document",
            display_options=_show(messageType=[MessageType.DOCUMENT.value]),
        ),
        # Button list options
        NodeProperty(
            display_name="List Title",
            name="listTitle",
            required=True,
            description="Title of the list message",
            display_options=_show(messageType=_LIST),
        ),
        NodeProperty(
            display_name="List Description",
            name="listDescription",
            rows=2,
            description="Optional text shown in the message body",
            display_options=_show(messageType=_LIST),
        ),
        NodeProperty(
            display_name="Button Text",
            name="buttonText",
            required=True,
            placeholder="See options",
            description="Text of the button that opens the list",
            display_options=_show(messageType=_LIST),
        ),
        NodeProperty(
            display_name="List Sections",
            name="listSections",
            type="json",
            required=True,
            default='[{"title": "Section", "rows": [{"id": "1", "title": "Option"}]}]',
            description="Sections as JSON: [{title, rows: [{id, title, description}]}]",
            display_options=_show(messageType=_LIST),
        ),
        NodeProperty(
            display_name="Footer Text",
            name="footerText",
            description="Optional footer text",
            display_options=_show(messageType=_LIST),
        ),
    ],
)

# Parameters resolved by the send node itself rather than passed to a builder
SEND_NODE_ROUTING_PARAMETERS = frozenset({"phoneNumber", "messageType"})


def intent_parameters(message_type: MessageType | str) -> list[str]:
    """Parameter names the send node reads for a message intent."""
    value = message_type.value if isinstance(message_type, MessageType) else message_type
    return [
        name
        for name in WHATSAPP_SEND_MESSAGE_NODE.visible_parameters({"messageType": value})
        if name not in SEND_NODE_ROUTING_PARAMETERS
    ]
