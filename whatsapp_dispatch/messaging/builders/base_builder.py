"""
Base request builder shared by the provider variants.

Each provider gets one builder class. The base class resolves the message
intent, validates the intent parameters and dispatches to the variant's
text, media or list method. Building never touches the network; invalid
input fails here, before any transport is involved.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError

from whatsapp_dispatch.core.logging.logger import get_logger
from whatsapp_dispatch.domain.errors import MalformedInputError
from whatsapp_dispatch.messaging.models.message_models import (
    ButtonListParams,
    MediaMessageParams,
    TextMessageParams,
    parse_message_params,
    resolve_message_type,
)
from whatsapp_dispatch.messaging.models.request_models import RequestDescriptor
from whatsapp_dispatch.schemas.core.types import ApiProvider, MessageType


class BaseRequestBuilder(ABC):
    """
    Provider-specific request builder.

    Subclasses set ``provider`` and ``credentials_model`` and implement the
    three intent families. ``build`` is the only public entry point.
    """

    provider: ClassVar[ApiProvider]
    credentials_model: ClassVar[type[BaseModel]]

    def __init__(self, credentials: BaseModel | Mapping[str, Any]):
        """Initialize builder with provider credentials.

        Args:
            credentials: Provider credential model, or the camelCase mapping
                produced by the provider registry
        """
        self.logger = get_logger(__name__)
        if isinstance(credentials, self.credentials_model):
            self.credentials = credentials
        elif credentials is None or isinstance(credentials, Mapping):
            try:
                self.credentials = self.credentials_model.model_validate(
                    dict(credentials or {})
                )
            except ValidationError as e:
                raise self._invalid_credentials(e.errors()[0]["msg"]) from e
        else:
            raise self._invalid_credentials("expected a mapping")

    def _invalid_credentials(self, reason: str) -> MalformedInputError:
        return MalformedInputError(
            f"Invalid {self.provider.value} credentials: {reason}",
            field="credentials",
            provider=self.provider.value,
        )

    def _intent_handlers(
        self,
    ) -> dict[MessageType, Callable[[str, MessageType, Any], RequestDescriptor]]:
        return {
            MessageType.TEXT: self.build_text,
            MessageType.IMAGE: self.build_media,
            MessageType.DOCUMENT: self.build_media,
            MessageType.AUDIO: self.build_media,
            MessageType.VIDEO: self.build_media,
            MessageType.BUTTON_LIST: self.build_button_list,
        }

    def build(
        self,
        phone_number: str,
        message_type: MessageType | str,
        params: Mapping[str, Any],
    ) -> RequestDescriptor:
        """Build the request descriptor for one message.

        Args:
            phone_number: Recipient with country code, digits only
            message_type: Message intent
            params: Intent parameters keyed by host parameter name

        Returns:
            RequestDescriptor ready for the transport

        Raises:
            MalformedInputError: If the intent is unknown or parameters invalid
        """
        try:
            intent = resolve_message_type(message_type)
            parsed = parse_message_params(intent, params)
        except MalformedInputError as e:
            e.provider = self.provider.value
            self.logger.warning(f"Rejected {message_type} message: {e.message}")
            raise

        request = self._intent_handlers()[intent](phone_number, intent, parsed)
        self.logger.debug(f"Built {intent.value} request for {request.url}")
        return request

    @abstractmethod
    def headers(self) -> dict[str, str]:
        """HTTP headers carrying this provider's authentication."""
        pass

    @abstractmethod
    def build_text(
        self, phone_number: str, message_type: MessageType, params: TextMessageParams
    ) -> RequestDescriptor:
        pass

    @abstractmethod
    def build_media(
        self, phone_number: str, message_type: MessageType, params: MediaMessageParams
    ) -> RequestDescriptor:
        pass

    @abstractmethod
    def build_button_list(
        self, phone_number: str, message_type: MessageType, params: ButtonListParams
    ) -> RequestDescriptor:
        pass

    def _request(self, url: str, body: dict[str, Any]) -> RequestDescriptor:
        return RequestDescriptor(method="POST", url=url, headers=self.headers(), body=body)

    @staticmethod
    def _caption_for(message_type: MessageType, caption: str) -> str | None:
        """Caption to send, or None when it must be left out."""
        if caption and message_type.supports_caption:
            return caption
        return None
