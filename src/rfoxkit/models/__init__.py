"""Data models for rfoxkit."""

from rfoxkit.models.collection import (
    CollectionDescriptor,
    CollectionVariant,
    MultiTokenDescriptor,
    PresaleMultiTokenDescriptor,
    PresaleSingleTokenDescriptor,
    SingleTokenDescriptor,
    VideoAssetDescriptor,
)
from rfoxkit.models.eligibility import EligibilitySnapshot, Phase
from rfoxkit.models.records import (
    MintAuthorization,
    MintReceipt,
    MintResult,
    PresaleRecord,
    SaleWindow,
    TokenRecord,
)
from rfoxkit.models.config import ApiConfig, KitConfig, NetworkInfo, NETWORKS

__all__ = [
    "CollectionDescriptor", "CollectionVariant",
    "MultiTokenDescriptor", "PresaleMultiTokenDescriptor",
    "PresaleSingleTokenDescriptor", "SingleTokenDescriptor", "VideoAssetDescriptor",
    "EligibilitySnapshot", "Phase",
    "MintAuthorization", "MintReceipt", "MintResult",
    "PresaleRecord", "SaleWindow", "TokenRecord",
    "ApiConfig", "KitConfig", "NetworkInfo", "NETWORKS",
]
