"""Tests for the WhatsApp Send Message node."""

import logging

import pytest

from whatsapp_dispatch.core.logging.context import get_context_info
from whatsapp_dispatch.domain.errors import (
    MalformedInputError,
    MissingConfigurationError,
    TransportError,
    UnknownProviderError,
)
from whatsapp_dispatch.domain.services.provider_registry import select_credentials
from whatsapp_dispatch.messaging.models.request_models import RequestDescriptor
from whatsapp_dispatch.nodes.config_node import CONFIG_KEY
from whatsapp_dispatch.nodes.parameters import per_item_parameters, static_parameters
from whatsapp_dispatch.nodes.send_node import WhatsAppSendMessageNode, send_message


def _configured(provider: str, raw_credentials: dict, **fields) -> dict:
    return {
        **fields,
        CONFIG_KEY: {
            "apiProvider": provider,
            "credentials": select_credentials(provider, raw_credentials),
        },
    }


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_builds_and_sends(self, mock_transport):
        response = await send_message(
            mock_transport,
            "official",
            {"accessToken": "T", "phoneNumberId": "123"},
            "5511999999999",
            "text",
            {"message": "hi"},
        )

        assert response == {"messages": [{"id": "wamid.1"}]}
        request = mock_transport.send.await_args.args[0]
        assert isinstance(request, RequestDescriptor)
        assert request.url == "https://graph.facebook.com/v18.0/123/messages"
        assert request.body["text"] == {"body": "hi"}

    @pytest.mark.asyncio
    async def test_unknown_provider_never_reaches_transport(self, mock_transport):
        with pytest.raises(UnknownProviderError):
            await send_message(mock_transport, "twilio", {}, "1", "text", {"message": "x"})

        mock_transport.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_sections_never_reach_transport(
        self, mock_transport, zapi_credentials, list_params
    ):
        list_params["listSections"] = "not json"

        with pytest.raises(MalformedInputError):
            await send_message(
                mock_transport, "zapi", zapi_credentials, "1", "buttonList", list_params
            )

        mock_transport.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_transport_error_attributed_to_provider(
        self, mock_transport, evolution_credentials
    ):
        mock_transport.send.side_effect = TransportError(
            "Request failed with status code 500", status=500
        )

        with pytest.raises(TransportError) as exc_info:
            await send_message(
                mock_transport,
                "evolution",
                evolution_credentials,
                "1",
                "text",
                {"message": "hi"},
            )

        assert exc_info.value.provider == "evolution"


class TestWhatsAppSendMessageNode:
    @pytest.mark.asyncio
    async def test_sends_each_item_in_order(self, mock_transport, raw_credentials):
        items = [
            _configured("zapi", raw_credentials, orderId=1),
            _configured("zapi", raw_credentials, orderId=2),
        ]
        get_parameter = per_item_parameters(
            [
                {"phoneNumber": "5511000000001", "messageType": "text", "message": "a"},
                {"phoneNumber": "5511000000002", "messageType": "text", "message": "b"},
            ]
        )
        node = WhatsAppSendMessageNode(mock_transport)

        results = await node.execute(items, get_parameter)

        sent = [call.args[0].body for call in mock_transport.send.await_args_list]
        assert sent == [
            {"phone": "5511000000001", "message": "a"},
            {"phone": "5511000000002", "message": "b"},
        ]
        assert results[0]["orderId"] == 1
        assert results[1]["sentTo"] == "5511000000002"
        assert results[1]["messageType"] == "text"
        assert results[1]["apiProvider"] == "zapi"
        assert results[1]["messageResponse"] == {"messages": [{"id": "wamid.1"}]}
        assert CONFIG_KEY in results[0]

    @pytest.mark.asyncio
    async def test_only_intent_parameters_are_passed(
        self, mock_transport, raw_credentials
    ):
        get_parameter = static_parameters(
            {
                "phoneNumber": "1",
                "messageType": "audio",
                "mediaUrl": "https://x/a.mp3",
                "caption": "ignored",
                "message": "also ignored",
            }
        )
        node = WhatsAppSendMessageNode(mock_transport)

        await node.execute([_configured("official", raw_credentials)], get_parameter)

        request = mock_transport.send.await_args.args[0]
        assert request.body["audio"] == {"link": "https://x/a.mp3"}

    @pytest.mark.asyncio
    async def test_message_type_defaults_to_text(self, mock_transport, raw_credentials):
        node = WhatsAppSendMessageNode(mock_transport)

        results = await node.execute(
            [_configured("evolution", raw_credentials)],
            static_parameters({"phoneNumber": "1", "message": "hello"}),
        )

        assert results[0]["messageType"] == "text"
        assert mock_transport.send.await_args.args[0].body == {
            "number": "1",
            "text": "hello",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "item",
        [{}, {CONFIG_KEY: None}, {CONFIG_KEY: {"credentials": {}}}, {CONFIG_KEY: "x"}],
    )
    async def test_missing_configuration(self, mock_transport, item):
        node = WhatsAppSendMessageNode(mock_transport)

        with pytest.raises(MissingConfigurationError) as exc_info:
            await node.execute(
                [item], static_parameters({"phoneNumber": "1", "message": "hi"})
            )

        assert exc_info.value.item_index == 0
        assert "WhatsApp Config node" in str(exc_info.value)
        mock_transport.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_provider_in_config(self, mock_transport):
        node = WhatsAppSendMessageNode(mock_transport)
        items = [{CONFIG_KEY: {"apiProvider": "twilio", "credentials": {}}}]

        with pytest.raises(UnknownProviderError):
            await node.execute(items, static_parameters({"message": "hi"}))

        mock_transport.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_aborts_on_first_failure(self, mock_transport, raw_credentials):
        mock_transport.send.side_effect = [
            {"ok": True},
            TransportError("Request failed with status code 401", status=401),
            {"ok": True},
        ]
        items = [_configured("zapi", raw_credentials) for _ in range(3)]
        node = WhatsAppSendMessageNode(mock_transport)

        with pytest.raises(TransportError) as exc_info:
            await node.execute(
                items, static_parameters({"phoneNumber": "1", "message": "hi"})
            )

        assert exc_info.value.item_index == 1
        assert exc_info.value.provider == "zapi"
        assert mock_transport.send.await_count == 2

    @pytest.mark.asyncio
    async def test_continue_on_fail_records_errors(self, mock_transport, raw_credentials):
        mock_transport.send.side_effect = [
            {"ok": 1},
            TransportError("Request failed with status code 500", status=500),
            {"ok": 3},
        ]
        items = [
            _configured("official", raw_credentials),
            _configured("official", raw_credentials),
            {"orphan": True},
            _configured("official", raw_credentials),
        ]
        node = WhatsAppSendMessageNode(mock_transport, continue_on_fail=True)

        results = await node.execute(
            items, static_parameters({"phoneNumber": "1", "message": "hi"})
        )

        assert len(results) == 4
        assert results[0]["messageResponse"] == {"ok": 1}
        assert results[1] == {"error": "Request failed with status code 500"}
        assert results[2] == {
            "error": "WhatsApp configuration not found. "
            "Please add a WhatsApp Config node before this node."
        }
        assert results[3]["messageResponse"] == {"ok": 3}

    @pytest.mark.asyncio
    async def test_continue_on_fail_records_malformed_input(
        self, mock_transport, raw_credentials
    ):
        node = WhatsAppSendMessageNode(mock_transport, continue_on_fail=True)

        results = await node.execute(
            [_configured("evolution", raw_credentials)],
            static_parameters(
                {"phoneNumber": "1", "messageType": "buttonList", "listSections": "{"}
            ),
        )

        assert list(results[0]) == ["error"]
        mock_transport.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_item_context_cleared(self, mock_transport, raw_credentials):
        node = WhatsAppSendMessageNode(mock_transport)

        await node.execute(
            [_configured("zapi", raw_credentials)],
            static_parameters({"phoneNumber": "1", "message": "hi"}),
        )

        assert get_context_info() == {"api_provider": None, "item_index": None}

    @pytest.mark.asyncio
    async def test_empty_input(self, mock_transport):
        node = WhatsAppSendMessageNode(mock_transport)

        assert await node.execute([], static_parameters({})) == []
        mock_transport.send.assert_not_awaited()


class TestSendNodeInputHandling:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "credentials", [{"accessToken": ["x"]}, {"phoneNumberId": {"id": 1}}, "token"]
    )
    async def test_invalid_credentials_abort_with_item_index(
        self, mock_transport, credentials
    ):
        items = [{CONFIG_KEY: {"apiProvider": "official", "credentials": credentials}}]
        node = WhatsAppSendMessageNode(mock_transport)

        with pytest.raises(MalformedInputError) as exc_info:
            await node.execute(
                items, static_parameters({"phoneNumber": "1", "message": "hi"})
            )

        assert exc_info.value.field == "credentials"
        assert exc_info.value.provider == "official"
        assert exc_info.value.item_index == 0
        mock_transport.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_credentials_recorded_in_continue_mode(self, mock_transport):
        items = [{CONFIG_KEY: {"apiProvider": "zapi", "credentials": {"token": [1]}}}]
        node = WhatsAppSendMessageNode(mock_transport, continue_on_fail=True)

        results = await node.execute(
            items, static_parameters({"phoneNumber": "1", "message": "hi"})
        )

        assert results[0]["error"].startswith("Invalid zapi credentials:")

    @pytest.mark.asyncio
    async def test_unresolved_phone_number_is_empty(
        self, mock_transport, raw_credentials
    ):
        node = WhatsAppSendMessageNode(mock_transport)

        results = await node.execute(
            [_configured("zapi", raw_credentials)],
            static_parameters({"phoneNumber": None, "message": "hi"}),
        )

        assert results[0]["sentTo"] == ""
        assert mock_transport.send.await_args.args[0].body["phone"] == ""

    @pytest.mark.asyncio
    async def test_abort_logs_error_details(self, mock_transport, caplog):
        node = WhatsAppSendMessageNode(mock_transport)

        with caplog.at_level(logging.ERROR, logger="whatsapp_dispatch.nodes.send_node"):
            with pytest.raises(MissingConfigurationError):
                await node.execute([{}], static_parameters({}))

        assert "'error_code': 'missing_configuration'" in caplog.text
        assert "'item_index': 0" in caplog.text
