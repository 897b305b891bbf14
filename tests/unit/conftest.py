"""Shared test fixtures for RaDixpert unit tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from radixpert.config import Settings

TEST_API_KEY = "sk-test-key"


@pytest.fixture
def test_settings():
    """Settings with a credential and a deterministic endpoint."""
    return Settings(
        openai_api_key=TEST_API_KEY,
        openai_base_url="https://api.openai.com/v1",
        report_model="gpt-4o",
        report_max_tokens=1500,
        report_temperature=0.2,
        chat_service_url="http://chat.test/radiology-ai-chat",
    )


@pytest.fixture
def mock_chat_service():
    """AsyncMock of ChatServiceClient answering with a fixed reply."""
    service = AsyncMock()
    service.reply.return_value = "cardiomegaly is enlargement of the heart."
    return service


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def mock_vision_client():
    """AsyncMock of VisionClient with a configured credential."""
    client = AsyncMock()
    client.api_key = TEST_API_KEY
    client.complete.return_value = "# Radiology Report\n\n## Findings\nClear lungs."
    return client
