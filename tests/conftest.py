import pytest

from backend.config import Settings


@pytest.fixture
def settings():
    return Settings(
        api_key="sk_test_key",
        environment="staging",
        chain_id="solana",
        token_mint="MINT",
    )


@pytest.fixture
def unconfigured_settings():
    return Settings(api_key=None, chain_id="solana", token_mint="MINT")
