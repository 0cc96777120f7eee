"""Configuration models for the kit."""

from __future__ import annotations

from dataclasses import dataclass, field

from rfoxkit.models.collection import CollectionVariant

# Backend hosts are deployment specific; set [api] base_url in the config file.
API_ENDPOINT = ""
API_ENDPOINT_DEV = ""


@dataclass(frozen=True)
class NetworkInfo:
    """Known EVM network."""

    chain_id: int
    name: str
    rpc_url: str
    explorer_url: str
    currency_symbol: str = "ETH"
    decimals: int = 18


NETWORKS: dict[int, NetworkInfo] = {
    1: NetworkInfo(
        chain_id=1,
        name="mainnet",
        rpc_url="https://ethereum-rpc.publicnode.com",
        explorer_url="https://etherscan.io",
    ),
    11155111: NetworkInfo(
        chain_id=11155111,
        name="sepolia",
        rpc_url="https://ethereum-sepolia-rpc.publicnode.com",
        explorer_url="https://sepolia.etherscan.io",
    ),
}


@dataclass
class ApiConfig:
    """Backend proof/signing service endpoints."""

    base_url: str = API_ENDPOINT
    dev_base_url: str = API_ENDPOINT_DEV
    timeout: int = 30  # seconds per request


@dataclass
class KitConfig:
    """Complete client configuration."""

    # Kit
    dev: bool = False
    log_level: str = "info"

    # Network
    network: str = "mainnet"
    rpc_url: str = ""  # falls back to NETWORKS[chain_id].rpc_url
    chain_id: int = 1

    # Collection
    contract_address: str = ""
    collection_id: str = ""
    variant: CollectionVariant = CollectionVariant.SINGLE_STANDARD
    asset_id: str | None = None  # token id (multi-token) or video id (video asset)
    whitelist_url: str = ""  # published address list, multi-token whitelisted only

    # Backend services
    api: ApiConfig = field(default_factory=ApiConfig)

    # Wallet
    wallet_secret: str = ""  # loaded from env var RFOXKIT_SECRET

    @property
    def api_base_url(self) -> str:
        return self.api.dev_base_url if self.dev else self.api.base_url

    @property
    def effective_rpc_url(self) -> str:
        if self.rpc_url:
            return self.rpc_url
        known = NETWORKS.get(self.chain_id)
        return known.rpc_url if known else ""
