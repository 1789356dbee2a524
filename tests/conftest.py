"""Configuração do pytest para o projeto pendo_profile_sync."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from tests.fakes.fake_http import RecordingTransport  # noqa: E402


@pytest.fixture
def transport() -> RecordingTransport:
    """Transport httpx gravando requests, 200 por padrão."""
    return RecordingTransport()


@pytest.fixture
def track_settings() -> dict[str, str]:
    return {
        "pendoTrackEventSecretKey": "track-secret",
        "personasSpaceId": "spa_123",
        "profileApiToken": "profile-token",
    }


@pytest.fixture
def metadata_settings() -> dict[str, str]:
    return {
        "pendoIntegrationKey": "integration-key",
        "personasSpaceId": "spa_123",
        "profileApiToken": "profile-token",
    }
