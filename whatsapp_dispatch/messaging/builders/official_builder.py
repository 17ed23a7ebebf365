"""
Request builder for Meta's WhatsApp Business (Cloud) API.

All intents post to the phone number's messages endpoint; the intent only
changes the body. Authentication is a bearer token.
"""

from collections.abc import Mapping
from typing import Any

from whatsapp_dispatch.core.config.settings import settings
from whatsapp_dispatch.domain.models.credentials import OfficialCredentials
from whatsapp_dispatch.messaging.builders.base_builder import BaseRequestBuilder
from whatsapp_dispatch.messaging.models.message_models import (
    ButtonListParams,
    MediaMessageParams,
    TextMessageParams,
)
from whatsapp_dispatch.messaging.models.request_models import (
    JSON_CONTENT_TYPE,
    RequestDescriptor,
)
from whatsapp_dispatch.schemas.core.types import ApiProvider, MessageType


class OfficialRequestBuilder(BaseRequestBuilder):
    """Builds requests for https://graph.facebook.com/{version}/{phone_id}/messages."""

    provider = ApiProvider.OFFICIAL
    credentials_model = OfficialCredentials

    def __init__(
        self,
        credentials: OfficialCredentials | Mapping[str, Any],
        api_version: str = settings.official_api_version,
        base_url: str = settings.official_base_url,
    ):
        """Initialize builder with credentials and Graph API location.

        Args:
            credentials: accessToken / phoneNumberId / businessAccountId
            api_version: Graph API version, e.g. "v18.0"
            base_url: Graph API base URL
        """
        super().__init__(credentials)
        self.api_version = api_version
        self.base_url = base_url.rstrip("/")

    def get_messages_url(self) -> str:
        """Build URL for sending messages."""
        return (
            f"{self.base_url}/{self.api_version}/"
            f"{self.credentials.phone_number_id}/messages"
        )

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.credentials.access_token}",
            "Content-Type": JSON_CONTENT_TYPE,
        }

    def _base_body(self, phone_number: str, message_type: str) -> dict[str, Any]:
        return {
            "messaging_product": "whatsapp",
            "to": phone_number,
            "type": message_type,
        }

    def build_text(
        self, phone_number: str, message_type: MessageType, params: TextMessageParams
    ) -> RequestDescriptor:
        body = self._base_body(phone_number, "text")
        body["text"] = {"body": params.message}
        return self._request(self.get_messages_url(), body)

    def build_media(
        self, phone_number: str, message_type: MessageType, params: MediaMessageParams
    ) -> RequestDescriptor:
        media_object: dict[str, Any] = {"link": params.media_url}

        caption = self._caption_for(message_type, params.caption)
        if caption:
            media_object["caption"] = caption

        if message_type == MessageType.DOCUMENT and params.filename:
            media_object["filename"] = params.filename

        body = self._base_body(phone_number, message_type.value)
        body[message_type.value] = media_object
        return self._request(self.get_messages_url(), body)

    def build_button_list(
        self, phone_number: str, message_type: MessageType, params: ButtonListParams
    ) -> RequestDescriptor:
        interactive: dict[str, Any] = {
            "type": "list",
            "body": {"text": params.list_description or params.list_title},
            "action": {
                "button": params.button_text,
                "sections": [
                    {
                        "title": section.title,
                        "rows": [
                            {
                                "id": row.id,
                                "title": row.title,
                                "description": row.description,
                            }
                            for row in section.rows
                        ],
                    }
                    for section in params.list_sections
                ],
            },
        }

        # The title moves to the header only when a description takes the body
        if params.list_title and params.list_description:
            interactive["header"] = {"type": "text", "text": params.list_title}

        if params.footer_text:
            interactive["footer"] = {"text": params.footer_text}

        body = self._base_body(phone_number, "interactive")
        body["interactive"] = interactive
        return self._request(self.get_messages_url(), body)
