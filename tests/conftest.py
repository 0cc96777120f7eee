"""Shared fixtures for rfoxkit tests."""

from __future__ import annotations

import pytest

from rfoxkit.dispatcher import MintDispatcher
from rfoxkit.models.collection import CollectionVariant
from rfoxkit.models.config import ApiConfig, KitConfig

from tests.mocks import MockAuthorizer, MockLedger, MockResolver

# Well-known development key (first Hardhat/Anvil account); never funded on mainnet
TEST_SECRET = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
COLLECTION_ID = "drop-123"
API_BASE = "https://api.test.local"


def make_test_config(**overrides) -> KitConfig:
    """Build a KitConfig suitable for testing."""
    defaults = dict(
        rpc_url="http://127.0.0.1:8545",
        chain_id=31337,
        contract_address=CONTRACT_ADDRESS,
        collection_id=COLLECTION_ID,
        variant=CollectionVariant.SINGLE_STANDARD,
        api=ApiConfig(base_url=API_BASE, dev_base_url="https://api-dev.test.local", timeout=5),
        wallet_secret=TEST_SECRET,
    )
    defaults.update(overrides)
    return KitConfig(**defaults)


@pytest.fixture
def test_config():
    """Default KitConfig for tests."""
    return make_test_config()


@pytest.fixture
def mock_ledger():
    return MockLedger()


@pytest.fixture
def mock_resolver():
    return MockResolver()


@pytest.fixture
def mock_authorizer():
    return MockAuthorizer()


@pytest.fixture
def dispatcher(mock_ledger, mock_resolver, mock_authorizer):
    """MintDispatcher wired to mocks, with a frozen clock."""
    return MintDispatcher(
        mock_ledger,
        TEST_ADDRESS,
        resolver=mock_resolver,
        authorizer=mock_authorizer,
        clock=lambda: 150.0,
    )
