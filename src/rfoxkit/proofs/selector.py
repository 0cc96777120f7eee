"""Picks the proof strategy for a collection variant, once, at construction."""

from __future__ import annotations

import httpx

from rfoxkit.errors import CollectionNotReady
from rfoxkit.interfaces.proof import ProofResolver
from rfoxkit.models.collection import CollectionVariant
from rfoxkit.proofs.local import LocalMerkleProofResolver
from rfoxkit.proofs.remote import RemoteProofResolver


def select_resolver(
    variant: CollectionVariant,
    api_base_url: str,
    collection_id: str,
    whitelist_url: str = "",
    timeout: int = 30,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProofResolver | None:
    """Single-token presale collections use the remote service, multi-token the
    published list. Variants without a presale get no resolver."""
    if variant in (CollectionVariant.SINGLE_WHITELISTED, CollectionVariant.SINGLE_BOT_GUARDED):
        return RemoteProofResolver(api_base_url, collection_id, timeout, transport)

    if variant is CollectionVariant.MULTI_WHITELISTED:
        if not whitelist_url:
            raise CollectionNotReady("Whitelist URL is not configured for this collection.")
        return LocalMerkleProofResolver(whitelist_url, timeout, transport)

    return None
