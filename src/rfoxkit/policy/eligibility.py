"""Eligibility evaluator - sale phase, unit price and per-tx limit from a descriptor.

Everything here is pure: no I/O, no clock reads. Callers pass ``now``.
"""

from __future__ import annotations

from rfoxkit.models.collection import (
    CollectionDescriptor,
    MultiTokenDescriptor,
    PresaleMultiTokenDescriptor,
    PresaleSingleTokenDescriptor,
    SingleTokenDescriptor,
    VideoAssetDescriptor,
)
from rfoxkit.models.eligibility import EligibilitySnapshot, Phase

VIDEO_ASSET_PER_TX_LIMIT = 1


def clamp_quantity(requested: int, limit: int) -> int:
    """Clamp a requested quantity to the per-transaction limit."""
    return min(requested, limit)


def _in_window(start: int, end: int, now: int) -> bool:
    """start <= now < end, where end == 0 means no end."""
    if now < start:
        return False
    return end == 0 or now < end


def _snapshot(
    phase: Phase,
    public_price: int,
    max_per_tx_public: int,
    presale_price: int | None = None,
    max_per_tx_presale: int | None = None,
) -> EligibilitySnapshot:
    if phase is Phase.PRESALE:
        return EligibilitySnapshot(
            phase=phase, unit_price=presale_price, per_tx_limit=max_per_tx_presale or 0,
        )
    if phase is Phase.PUBLIC:
        return EligibilitySnapshot(
            phase=phase, unit_price=public_price, per_tx_limit=max_per_tx_public,
        )
    return EligibilitySnapshot(phase=Phase.CLOSED, unit_price=None, per_tx_limit=max_per_tx_public)


def _presale_split(now: int, public_sale_start: int) -> Phase:
    """Inside an open sale: presale until the public sale starts."""
    return Phase.PRESALE if now < public_sale_start else Phase.PUBLIC


def evaluate(descriptor: CollectionDescriptor, now: int) -> EligibilitySnapshot:
    """Determine the sale phase and the price/limit that apply at ``now``."""
    if isinstance(descriptor, VideoAssetDescriptor):
        return EligibilitySnapshot(
            phase=Phase.PUBLIC,
            unit_price=descriptor.public_price,
            per_tx_limit=VIDEO_ASSET_PER_TX_LIMIT,
        )

    if isinstance(descriptor, SingleTokenDescriptor):
        # No presale concept: binary closed/public
        phase = Phase.PUBLIC if now >= descriptor.sale_start else Phase.CLOSED
        return _snapshot(phase, descriptor.public_price, descriptor.max_per_tx_public)

    if isinstance(descriptor, PresaleSingleTokenDescriptor):
        # Presale is "started but public not yet", never an independent flag
        if now >= descriptor.public_sale_start:
            phase = Phase.PUBLIC
        elif now >= descriptor.sale_start:
            phase = Phase.PRESALE
        else:
            phase = Phase.CLOSED
        return _snapshot(
            phase,
            descriptor.public_price,
            descriptor.max_per_tx_public,
            descriptor.presale_price,
            descriptor.max_per_tx_presale,
        )

    if isinstance(descriptor, MultiTokenDescriptor):
        open_ = descriptor.active and _in_window(descriptor.sale_start, descriptor.sale_end, now)
        phase = Phase.PUBLIC if open_ else Phase.CLOSED
        return _snapshot(phase, descriptor.public_price, descriptor.max_per_tx_public)

    if isinstance(descriptor, PresaleMultiTokenDescriptor):
        if descriptor.active and _in_window(descriptor.sale_start, descriptor.sale_end, now):
            phase = _presale_split(now, descriptor.public_sale_start)
        else:
            phase = Phase.CLOSED
        return _snapshot(
            phase,
            descriptor.public_price,
            descriptor.max_per_tx_public,
            descriptor.presale_price,
            descriptor.max_per_tx_presale,
        )

    raise TypeError(f"Unknown collection descriptor: {type(descriptor).__name__}")
