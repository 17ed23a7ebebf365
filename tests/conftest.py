"""
Pytest configuration and common fixtures for whatsapp-dispatch tests.

Provides credential bags, provider credentials, list sections and a mock
transport shared by all test modules.
"""

import json
from unittest.mock import AsyncMock

import pytest

from whatsapp_dispatch.domain.interfaces.transport_interface import ITransport


@pytest.fixture
def raw_credentials() -> dict[str, str]:
    """Credential bag with every provider's fields filled in."""
    return {
        "officialAccessToken": "official-token",
        "officialPhoneNumberId": "1234567890",
        "officialBusinessAccountId": "998877",
        "zapiInstanceId": "inst-1",
        "zapiToken": "zapi-token",
        "zapiClientToken": "zapi-client",
        "zapiBaseUrl": "https://api.z-api.io",
        "evolutionBaseUrl": "https://evo.example.com",
        "evolutionApiKey": "evo-key",
        "evolutionInstanceName": "main",
    }


@pytest.fixture
def official_credentials() -> dict[str, str]:
    return {
        "accessToken": "official-token",
        "phoneNumberId": "1234567890",
        "businessAccountId": "998877",
    }


@pytest.fixture
def zapi_credentials() -> dict[str, str]:
    return {
        "instanceId": "inst-1",
        "token": "zapi-token",
        "clientToken": "zapi-client",
        "baseUrl": "https://api.z-api.io",
    }


@pytest.fixture
def evolution_credentials() -> dict[str, str]:
    return {
        "baseUrl": "https://evo.example.com",
        "apiKey": "evo-key",
        "instanceName": "main",
    }


@pytest.fixture
def credentials_by_provider(
    official_credentials, zapi_credentials, evolution_credentials
) -> dict[str, dict[str, str]]:
    return {
        "official": official_credentials,
        "zapi": zapi_credentials,
        "evolution": evolution_credentials,
    }


@pytest.fixture
def list_sections() -> list[dict]:
    """Two sections with 2 and 1 rows; the last row has no description."""
    return [
        {
            "title": "Pizzas",
            "rows": [
                {"id": "p1", "title": "Margherita", "description": "Tomato, basil"},
                {"id": "p2", "title": "Pepperoni", "description": "Spicy"},
            ],
        },
        {
            "title": "Drinks",
            "rows": [{"id": "d1", "title": "Water"}],
        },
    ]


@pytest.fixture
def list_params(list_sections) -> dict:
    """buttonList parameters as the host delivers them (sections as JSON)."""
    return {
        "listTitle": "Menu",
        "listDescription": "Pick one",
        "buttonText": "Options",
        "listSections": json.dumps(list_sections),
        "footerText": "Thanks",
    }


@pytest.fixture
def intent_params(list_params) -> dict[str, dict]:
    """Valid parameters for every message intent."""
    return {
        "text": {"message": "hi"},
        "image": {"mediaUrl": "https://cdn.example.com/a.png", "caption": "look"},
        "document": {
            "mediaUrl": "https://cdn.example.com/a.pdf",
            "caption": "report",
            "filename": "report.pdf",
        },
        "audio": {"mediaUrl": "https://cdn.example.com/a.mp3"},
        "video": {"mediaUrl": "https://cdn.example.com/a.mp4", "caption": "clip"},
        "buttonList": list_params,
    }


@pytest.fixture
def mock_transport():
    """Transport double returning a canned provider response."""
    transport = AsyncMock(spec=ITransport)
    transport.send.return_value = {"messages": [{"id": "wamid.1"}]}
    return transport
