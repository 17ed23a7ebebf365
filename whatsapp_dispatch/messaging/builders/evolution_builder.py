"""
Request builder for Evolution API (v2 flat payloads).

Text goes to sendText, every media intent to sendMedia and lists to sendList,
all scoped by the instance name at the end of the path. Evolution needs an
explicit mimetype and file name for media, so fixed values are sent per
intent.
"""

from whatsapp_dispatch.domain.models.credentials import EvolutionCredentials
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

MIME_TYPES: dict[MessageType, str] = {
    MessageType.IMAGE: "image/png",
    MessageType.DOCUMENT: "application/pdf",
    MessageType.AUDIO: "audio/mp3",
    MessageType.VIDEO: "video/mp4",
}

DEFAULT_FILE_NAMES: dict[MessageType, str] = {
    MessageType.IMAGE: "file.png",
    MessageType.DOCUMENT: "document.pdf",
    MessageType.AUDIO: "file.mp3",
    MessageType.VIDEO: "file.mp4",
}


class EvolutionRequestBuilder(BaseRequestBuilder):
    """Builds requests for {baseUrl}/message/{action}/{instanceName}."""

    provider = ApiProvider.EVOLUTION
    credentials_model = EvolutionCredentials

    def get_action_url(self, action: str) -> str:
        """Build URL for a message action (sendText, sendMedia, sendList)."""
        base_url = self.credentials.base_url.rstrip("/")
        return f"{base_url}/message/{action}/{self.credentials.instance_name}"

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": JSON_CONTENT_TYPE,
            "apikey": self.credentials.api_key,
        }

    def build_text(
        self, phone_number: str, message_type: MessageType, params: TextMessageParams
    ) -> RequestDescriptor:
        body = {"number": phone_number, "text": params.message}
        return self._request(self.get_action_url("sendText"), body)

    def build_media(
        self, phone_number: str, message_type: MessageType, params: MediaMessageParams
    ) -> RequestDescriptor:
        if message_type == MessageType.DOCUMENT and params.filename:
            file_name = params.filename
        else:
            file_name = DEFAULT_FILE_NAMES[message_type]

        body = {
            "number": phone_number,
            "mediatype": message_type.value,
            "mimetype": MIME_TYPES[message_type],
            "media": params.media_url,
            "caption": self._caption_for(message_type, params.caption) or "",
            "fileName": file_name,
        }
        return self._request(self.get_action_url("sendMedia"), body)

    def build_button_list(
        self, phone_number: str, message_type: MessageType, params: ButtonListParams
    ) -> RequestDescriptor:
        body = {
            "number": phone_number,
            "title": params.list_title,
            "description": params.list_description or params.list_title,
            "buttonText": params.button_text,
            "footerText": params.footer_text,
            "values": [
                {
                    "title": section.title,
                    "rows": [
                        {
                            "title": row.title,
                            "description": row.description,
                            "rowId": row.id,
                        }
                        for row in section.rows
                    ],
                }
                for section in params.list_sections
            ],
        }
        return self._request(self.get_action_url("sendList"), body)
