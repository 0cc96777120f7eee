"""Collection descriptor population from the ledger contract."""

from __future__ import annotations

import logging

from rfoxkit.errors import AssetIdRequired
from rfoxkit.interfaces.ledger import LedgerContract
from rfoxkit.models.collection import (
    CollectionDescriptor,
    CollectionVariant,
    MultiTokenDescriptor,
    PresaleMultiTokenDescriptor,
    PresaleSingleTokenDescriptor,
    SingleTokenDescriptor,
    VideoAssetDescriptor,
)
from rfoxkit.models.eligibility import Phase

log = logging.getLogger(__name__)


async def load_descriptor(
    ledger: LedgerContract,
    variant: CollectionVariant,
    asset_id: int | None = None,
) -> CollectionDescriptor:
    """Read the facts for one collection variant into an immutable snapshot.

    Reads run one after another; the first failing read propagates.
    """
    if variant.is_multi_token and asset_id is None:
        raise AssetIdRequired()

    if variant is CollectionVariant.VIDEO_ASSET:
        descriptor: CollectionDescriptor = VideoAssetDescriptor(
            public_price=await ledger.price_of(Phase.PUBLIC),
        )
    elif variant.is_multi_token:
        descriptor = await _load_multi_token(ledger, variant, asset_id)  # type: ignore[arg-type]
    else:
        descriptor = await _load_single_token(ledger, variant)

    _check_invariants(descriptor)
    log.info("Loaded %s descriptor: %s", variant.value, descriptor)
    return descriptor


async def _load_single_token(
    ledger: LedgerContract, variant: CollectionVariant
) -> CollectionDescriptor:
    max_supply = await ledger.max_supply()
    current_supply = await ledger.total_supply()
    window = await ledger.sale_window()
    public_price = await ledger.price_of(Phase.PUBLIC)
    max_per_tx_public = await ledger.per_tx_limit(Phase.PUBLIC)

    if not variant.has_presale:
        return SingleTokenDescriptor(
            max_supply=max_supply,
            current_supply=current_supply,
            sale_start=window.sale_start,
            public_price=public_price,
            max_per_tx_public=max_per_tx_public,
            variant=variant,
        )

    return PresaleSingleTokenDescriptor(
        max_supply=max_supply,
        current_supply=current_supply,
        sale_start=window.sale_start,
        public_sale_start=window.public_sale_start,
        public_price=public_price,
        presale_price=await ledger.price_of(Phase.PRESALE),
        max_per_tx_public=max_per_tx_public,
        max_per_tx_presale=await ledger.per_tx_limit(Phase.PRESALE),
        variant=variant,
    )


async def _load_multi_token(
    ledger: LedgerContract, variant: CollectionVariant, asset_id: int
) -> CollectionDescriptor:
    token = await ledger.token_record(asset_id)
    current_supply = await ledger.total_supply(asset_id)

    if variant is CollectionVariant.MULTI_STANDARD:
        return MultiTokenDescriptor(
            asset_id=asset_id,
            max_supply=token.max_supply,
            current_supply=current_supply,
            sale_start=token.sale_start,
            sale_end=token.sale_end,
            public_price=token.price,
            max_per_tx_public=token.max_per_tx,
            active=token.active,
        )

    presale = await ledger.presale_record(asset_id)
    return PresaleMultiTokenDescriptor(
        asset_id=asset_id,
        max_supply=token.max_supply,
        current_supply=current_supply,
        sale_start=token.sale_start,
        sale_end=token.sale_end,
        public_sale_start=presale.public_sale_start,
        public_price=token.price,
        presale_price=presale.price,
        max_per_tx_public=token.max_per_tx,
        max_per_tx_presale=presale.max_per_address,
        active=token.active,
        merkle_root=presale.merkle_root,
    )


def _check_invariants(descriptor: CollectionDescriptor) -> None:
    """Log descriptor facts that contradict each other. The chain stays authoritative."""
    if descriptor.max_supply > 0 and descriptor.current_supply > descriptor.max_supply:
        log.warning(
            "Current supply %d exceeds max supply %d",
            descriptor.current_supply, descriptor.max_supply,
        )
    sale_start = getattr(descriptor, "sale_start", 0)
    public_sale_start = getattr(descriptor, "public_sale_start", 0)
    if sale_start and public_sale_start and sale_start > public_sale_start:
        log.warning(
            "Presale starts (%d) after public sale (%d)", sale_start, public_sale_start,
        )
