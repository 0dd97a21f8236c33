"""Configuração do pytest para o adapter de DMs do Twitter."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ e a raiz ao PYTHONPATH para permitir imports absolutos
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config.settings import TwitterSettings  # noqa: E402


@pytest.fixture
def twitter_settings() -> TwitterSettings:
    """Settings completas para testes."""
    return TwitterSettings(
        consumer_key="ck",
        consumer_secret="cs",
        access_token="999-token",
        access_token_secret="ats",
        owner_id="999",
        webhook_processing_mode="inline",
    )
