"""CLI commands through click's test runner."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from rfoxkit import cli as cli_module
from rfoxkit.kit import RfoxKit

from tests.conftest import CONTRACT_ADDRESS, TEST_SECRET
from tests.mocks import TX_HASH, MockLedger

CONFIG_TOML = f"""
[network]
rpc_url = "http://127.0.0.1:8545"
chain_id = 31337

[collection]
contract_address = "{CONTRACT_ADDRESS}"
collection_id = "drop-123"
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SECRET", "RPC_URL", "CONTRACT_ADDRESS", "COLLECTION_ID", "VARIANT", "ASSET_ID", "DEV"):
        monkeypatch.delenv(f"RFOXKIT_{name}", raising=False)


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "rfoxkit.toml"
    path.write_text(CONFIG_TOML)
    return str(path)


@pytest.fixture
def ledger(monkeypatch):
    """Route every kit the CLI builds to one MockLedger."""
    mock = MockLedger(sale_start=0)

    class _Kit(RfoxKit):
        def __init__(self, cfg, **kwargs):
            super().__init__(cfg, ledger=mock, **kwargs)

    monkeypatch.setattr(cli_module, "RfoxKit", _Kit)
    return mock


def test_status_shows_configuration(config_path):
    result = CliRunner().invoke(cli_module.cli, ["-c", config_path, "status"])

    assert result.exit_code == 0
    assert CONTRACT_ADDRESS in result.output
    assert "drop-123" in result.output
    assert "Secret:     (not set)" in result.output


def test_status_masks_secret(config_path, monkeypatch):
    monkeypatch.setenv("RFOXKIT_SECRET", TEST_SECRET)
    result = CliRunner().invoke(cli_module.cli, ["-c", config_path, "status"])

    assert "***configured***" in result.output
    assert TEST_SECRET not in result.output


def test_info_requires_collection(tmp_path):
    result = CliRunner().invoke(cli_module.cli, ["-c", str(tmp_path / "none.toml"), "info"])
    assert result.exit_code == 1


def test_mint_requires_secret(config_path):
    result = CliRunner().invoke(cli_module.cli, ["-c", config_path, "mint", "1", "--yes"])
    assert result.exit_code == 1


def test_info_reads_collection(config_path, ledger):
    result = CliRunner().invoke(cli_module.cli, ["-c", config_path, "info"])

    assert result.exit_code == 0, result.output
    assert "Supply:     10 / 1000" in result.output
    assert "Phase:      public" in result.output
    assert ledger.closed


def test_mint_submits_after_confirmation(config_path, ledger, monkeypatch):
    monkeypatch.setenv("RFOXKIT_SECRET", TEST_SECRET)
    result = CliRunner().invoke(cli_module.cli, ["-c", config_path, "mint", "2"], input="y\n")

    assert result.exit_code == 0, result.output
    assert ledger.public_calls == [(2, 2 * ledger.public_price, None)]
    assert TX_HASH in result.output


def test_mint_aborted_at_prompt(config_path, ledger, monkeypatch):
    monkeypatch.setenv("RFOXKIT_SECRET", TEST_SECRET)
    result = CliRunner().invoke(cli_module.cli, ["-c", config_path, "mint", "2"], input="n\n")

    assert result.exit_code != 0
    assert ledger.submit_count == 0


def test_mint_failure_exits_nonzero(config_path, ledger, monkeypatch):
    monkeypatch.setenv("RFOXKIT_SECRET", TEST_SECRET)
    ledger.submit_error = RuntimeError("execution reverted: Exceed the limit")

    result = CliRunner().invoke(cli_module.cli, ["-c", config_path, "mint", "1", "-y"])

    assert result.exit_code == 1
    assert "You reach max minted NFTs per address." in result.output


def test_video_minted(config_path, ledger, monkeypatch):
    monkeypatch.setenv("RFOXKIT_VARIANT", "rfoxtv")
    ledger.used_external_ids = {"video-1"}

    result = CliRunner().invoke(cli_module.cli, ["-c", config_path, "video-minted", "video-1"])

    assert result.exit_code == 0, result.output
    assert "video-1: minted" in result.output
