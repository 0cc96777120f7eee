"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from rfoxkit.models.collection import CollectionVariant
from rfoxkit.models.config import ApiConfig, KitConfig

_TRUTHY = {"1", "true", "yes", "on"}


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "RFOXKIT_",
) -> KitConfig:
    """Load kit configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (RFOXKIT_SECRET, etc.)
        2. TOML config file
        3. Defaults from KitConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = KitConfig()

    # ── Kit section ────────────────────────────────────────
    kit = raw.get("kit", {})
    if "dev" in kit:
        cfg.dev = bool(kit["dev"])
    if v := kit.get("log_level"):
        cfg.log_level = str(v)

    # ── Network section ────────────────────────────────────
    network = raw.get("network", {})
    if v := network.get("network"):
        cfg.network = str(v)
    if v := network.get("rpc_url"):
        cfg.rpc_url = str(v)
    if v := network.get("chain_id"):
        cfg.chain_id = int(v)

    # ── Collection section ─────────────────────────────────
    collection = raw.get("collection", {})
    if v := collection.get("contract_address"):
        cfg.contract_address = str(v)
    if v := collection.get("collection_id"):
        cfg.collection_id = str(v)
    if v := collection.get("variant"):
        cfg.variant = CollectionVariant(v)
    if (v := collection.get("asset_id")) is not None:
        cfg.asset_id = str(v)
    if v := collection.get("whitelist_url"):
        cfg.whitelist_url = str(v)

    # ── API section ────────────────────────────────────────
    api = raw.get("api", {})
    defaults = ApiConfig()
    cfg.api = ApiConfig(
        base_url=api.get("base_url", defaults.base_url),
        dev_base_url=api.get("dev_base_url", defaults.dev_base_url),
        timeout=int(api.get("timeout", defaults.timeout)),
    )

    # ── Wallet section ─────────────────────────────────────
    wallet = raw.get("wallet", {})
    if v := wallet.get("secret"):
        cfg.wallet_secret = str(v)

    # ── Environment variable overrides (highest priority) ──
    if secret := os.environ.get(f"{env_prefix}SECRET"):
        cfg.wallet_secret = secret
    if rpc := os.environ.get(f"{env_prefix}RPC_URL"):
        cfg.rpc_url = rpc
    if address := os.environ.get(f"{env_prefix}CONTRACT_ADDRESS"):
        cfg.contract_address = address
    if collection_id := os.environ.get(f"{env_prefix}COLLECTION_ID"):
        cfg.collection_id = collection_id
    if variant := os.environ.get(f"{env_prefix}VARIANT"):
        cfg.variant = CollectionVariant(variant)
    if asset_id := os.environ.get(f"{env_prefix}ASSET_ID"):
        cfg.asset_id = asset_id
    if dev := os.environ.get(f"{env_prefix}DEV"):
        cfg.dev = dev.strip().lower() in _TRUTHY

    return cfg
