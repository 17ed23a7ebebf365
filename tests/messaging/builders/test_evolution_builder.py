"""Tests for the Evolution API request builder."""

import pytest

from whatsapp_dispatch.messaging.builders.evolution_builder import (
    EvolutionRequestBuilder,
)


@pytest.fixture
def builder(evolution_credentials) -> EvolutionRequestBuilder:
    return EvolutionRequestBuilder(evolution_credentials)


class TestEvolutionRequests:
    def test_text(self, builder):
        request = builder.build("5511999999999", "text", {"message": "hi"})

        assert request.method == "POST"
        assert request.url == "https://evo.example.com/message/sendText/main"
        assert request.headers == {
            "Content-Type": "application/json",
            "apikey": "evo-key",
        }
        assert request.body == {"number": "5511999999999", "text": "hi"}

    def test_trailing_slash_on_base_url(self, evolution_credentials):
        evolution_credentials["baseUrl"] = "https://evo.example.com/"
        builder = EvolutionRequestBuilder(evolution_credentials)

        request = builder.build("1", "text", {"message": "hi"})

        assert request.url == "https://evo.example.com/message/sendText/main"

    @pytest.mark.parametrize(
        "message_type,mimetype,file_name",
        [
            ("image", "image/png", "file.png"),
            ("document", "application/pdf", "document.pdf"),
            ("audio", "audio/mp3", "file.mp3"),
            ("video", "video/mp4", "file.mp4"),
        ],
    )
    def test_media_defaults(self, builder, message_type, mimetype, file_name):
        request = builder.build(
            "5511999999999", message_type, {"mediaUrl": "https://x/f"}
        )

        assert request.url == "https://evo.example.com/message/sendMedia/main"
        assert request.body == {
            "number": "5511999999999",
            "mediatype": message_type,
            "mimetype": mimetype,
            "media": "https://x/f",
            "caption": "",
            "fileName": file_name,
        }

    def test_document_filename_overrides_default(self, builder):
        request = builder.build(
            "1", "document", {"mediaUrl": "https://x/f", "filename": "invoice.pdf"}
        )

        assert request.body["fileName"] == "invoice.pdf"

    def test_filename_ignored_for_image(self, builder):
        request = builder.build(
            "1", "image", {"mediaUrl": "https://x/f", "filename": "custom.png"}
        )

        assert request.body["fileName"] == "file.png"

    def test_caption_rules(self, builder):
        video = builder.build("1", "video", {"mediaUrl": "https://x/f", "caption": "c"})
        audio = builder.build("1", "audio", {"mediaUrl": "https://x/f", "caption": "c"})

        assert video.body["caption"] == "c"
        assert audio.body["caption"] == ""


class TestEvolutionButtonList:
    def test_list_payload(self, builder, list_params):
        request = builder.build("5511999999999", "buttonList", list_params)

        assert request.url == "https://evo.example.com/message/sendList/main"
        assert request.body == {
            "number": "5511999999999",
            "title": "Menu",
            "description": "Pick one",
            "buttonText": "Options",
            "footerText": "Thanks",
            "values": [
                {
                    "title": "Pizzas",
                    "rows": [
                        {
                            "title": "Margherita",
                            "description": "Tomato, basil",
                            "rowId": "p1",
                        },
                        {"title": "Pepperoni", "description": "Spicy", "rowId": "p2"},
                    ],
                },
                {
                    "title": "Drinks",
                    "rows": [{"title": "Water", "description": "", "rowId": "d1"}],
                },
            ],
        }

    def test_description_falls_back_to_title(self, builder, list_params):
        list_params["listDescription"] = ""

        request = builder.build("1", "buttonList", list_params)

        assert request.body["description"] == "Menu"
