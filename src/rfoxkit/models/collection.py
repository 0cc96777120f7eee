"""Collection descriptor models - one frozen snapshot per population."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class CollectionVariant(str, Enum):
    """Supported contract shapes."""

    SINGLE_STANDARD = "standard"
    SINGLE_WHITELISTED = "whitelist"
    SINGLE_BOT_GUARDED = "botprevention"
    VIDEO_ASSET = "rfoxtv"
    MULTI_STANDARD = "erc1155"
    MULTI_WHITELISTED = "erc1155whitelist"

    @property
    def is_multi_token(self) -> bool:
        return self in (CollectionVariant.MULTI_STANDARD, CollectionVariant.MULTI_WHITELISTED)

    @property
    def has_presale(self) -> bool:
        return self in (
            CollectionVariant.SINGLE_WHITELISTED,
            CollectionVariant.SINGLE_BOT_GUARDED,
            CollectionVariant.MULTI_WHITELISTED,
        )


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VideoAssetDescriptor:
    """Video-asset mint: unbounded supply, one token per transaction."""

    public_price: int  # wei
    variant: CollectionVariant = CollectionVariant.VIDEO_ASSET
    max_supply: int = 0
    current_supply: int = 0
    max_per_tx_public: int = 1


@dataclass(frozen=True)
class SingleTokenDescriptor:
    """Single-token collection without a presale phase."""

    max_supply: int
    current_supply: int
    sale_start: int  # unix seconds
    public_price: int  # wei
    max_per_tx_public: int
    variant: CollectionVariant = CollectionVariant.SINGLE_STANDARD


@dataclass(frozen=True)
class PresaleSingleTokenDescriptor:
    """Single-token collection with an allow-listed presale (whitelisted or bot-guarded)."""

    max_supply: int
    current_supply: int
    sale_start: int
    public_sale_start: int
    public_price: int
    presale_price: int
    max_per_tx_public: int
    max_per_tx_presale: int
    variant: CollectionVariant = CollectionVariant.SINGLE_WHITELISTED


@dataclass(frozen=True)
class MultiTokenDescriptor:
    """One token of a multi-token collection, scoped by asset_id."""

    asset_id: int
    max_supply: int
    current_supply: int
    sale_start: int
    sale_end: int
    public_price: int
    max_per_tx_public: int
    active: bool
    variant: CollectionVariant = CollectionVariant.MULTI_STANDARD


@dataclass(frozen=True)
class PresaleMultiTokenDescriptor:
    """One token of a whitelisted multi-token collection."""

    asset_id: int
    max_supply: int
    current_supply: int
    sale_start: int
    sale_end: int
    public_sale_start: int
    public_price: int
    presale_price: int
    max_per_tx_public: int
    max_per_tx_presale: int
    active: bool
    merkle_root: str = ""  # hex, as published in the presale record
    variant: CollectionVariant = CollectionVariant.MULTI_WHITELISTED


CollectionDescriptor = Union[
    VideoAssetDescriptor,
    SingleTokenDescriptor,
    PresaleSingleTokenDescriptor,
    MultiTokenDescriptor,
    PresaleMultiTokenDescriptor,
]


def descriptor_asset_id(descriptor: CollectionDescriptor) -> int | None:
    """Token id the descriptor is scoped to, or None for single-token shapes."""
    if isinstance(descriptor, (MultiTokenDescriptor, PresaleMultiTokenDescriptor)):
        return descriptor.asset_id
    return None
