"""
Request builder for Z-API.

Every intent has its own endpoint under the instance/token path. Z-API has
no sections or row descriptions in its button lists, so list rows are
flattened into a single ordered button sequence.
"""

from whatsapp_dispatch.domain.models.credentials import ZApiCredentials
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

ENDPOINTS: dict[MessageType, str] = {
    MessageType.TEXT: "send-text",
    MessageType.IMAGE: "send-image",
    MessageType.DOCUMENT: "send-document",
    MessageType.AUDIO: "send-audio",
    MessageType.VIDEO: "send-video",
    MessageType.BUTTON_LIST: "send-button-list",
}


class ZApiRequestBuilder(BaseRequestBuilder):
    """Builds requests for {baseUrl}/instances/{instanceId}/token/{token}/..."""

    provider = ApiProvider.ZAPI
    credentials_model = ZApiCredentials

    def get_endpoint_url(self, message_type: MessageType) -> str:
        """Build URL for the intent's endpoint."""
        base_url = self.credentials.base_url.rstrip("/")
        return (
            f"{base_url}/instances/{self.credentials.instance_id}"
            f"/token/{self.credentials.token}/{ENDPOINTS[message_type]}"
        )

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": JSON_CONTENT_TYPE,
            "Client-Token": self.credentials.client_token,
        }

    def build_text(
        self, phone_number: str, message_type: MessageType, params: TextMessageParams
    ) -> RequestDescriptor:
        body = {"phone": phone_number, "message": params.message}
        return self._request(self.get_endpoint_url(message_type), body)

    def build_media(
        self, phone_number: str, message_type: MessageType, params: MediaMessageParams
    ) -> RequestDescriptor:
        body = {"phone": phone_number, message_type.value: params.media_url}

        caption = self._caption_for(message_type, params.caption)
        if caption:
            body["caption"] = caption

        return self._request(self.get_endpoint_url(message_type), body)

    def build_button_list(
        self, phone_number: str, message_type: MessageType, params: ButtonListParams
    ) -> RequestDescriptor:
        buttons = [{"id": row.id, "label": row.title} for row in params.iter_rows()]
        body = {
            "phone": phone_number,
            "message": params.list_title,
            "buttonList": {"buttons": buttons},
        }
        return self._request(self.get_endpoint_url(message_type), body)
