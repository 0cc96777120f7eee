"""Mint dispatcher - turns one mint request into one settled transaction."""

from __future__ import annotations

import logging
import time
from typing import Callable

from rfoxkit.errors import (
    AssetIdRequired,
    InvalidQuantity,
    LimitExceeded,
    NotWhitelisted,
    ProofSigningFailed,
    SaleNotActive,
    UnknownLedgerFailure,
    UnsupportedVariant,
    WalletUnavailable,
    translate_error,
)
from rfoxkit.interfaces.ledger import LedgerContract
from rfoxkit.interfaces.proof import ProofResolver
from rfoxkit.interfaces.signing import MintAuthorizer
from rfoxkit.models.collection import (
    CollectionDescriptor,
    VideoAssetDescriptor,
    descriptor_asset_id,
)
from rfoxkit.models.eligibility import Phase
from rfoxkit.models.records import MintAuthorization, MintResult
from rfoxkit.policy.eligibility import clamp_quantity, evaluate

log = logging.getLogger(__name__)

# Phrases the signing service uses when the collection is not a video-asset contract
_VARIANT_MISMATCH_HINTS = ("contract type", "not supported")


class MintDispatcher:
    """Runs the per-attempt state machine.

    evaluate -> clamp -> limit check -> sale check -> price -> proof or
    authorization -> submit -> settle. Each step awaits the previous one.
    Every failure is translated and reported in the MintResult; nothing
    raises out of mint() except task cancellation.
    """

    def __init__(
        self,
        ledger: LedgerContract,
        wallet_address: str | None,
        resolver: ProofResolver | None = None,
        authorizer: MintAuthorizer | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ledger = ledger
        self._wallet_address = wallet_address
        self._resolver = resolver
        self._authorizer = authorizer
        self._clock = clock

    async def mint(
        self,
        descriptor: CollectionDescriptor,
        quantity: int,
        now: int | None = None,
        video_asset_id: str | None = None,
    ) -> MintResult:
        phase: Phase | None = None
        clamped = 0
        amount = 0

        try:
            if quantity < 1:
                raise InvalidQuantity()

            snapshot = evaluate(descriptor, int(self._clock()) if now is None else now)
            phase = snapshot.phase

            # 1. Clamp, then 2. compare against the same phase limit
            clamped = clamp_quantity(quantity, snapshot.per_tx_limit)
            if clamped > snapshot.per_tx_limit:
                raise LimitExceeded(
                    f"You can't mint more than {snapshot.per_tx_limit} tokens in this transaction"
                )

            # 3. Sale check
            if phase is Phase.CLOSED or snapshot.unit_price is None:
                raise SaleNotActive("Collection is not on sale")

            # Open phase with a zero limit
            if clamped < 1:
                raise LimitExceeded(
                    f"You can't mint more than {snapshot.per_tx_limit} tokens in this transaction"
                )

            # 4. Exact integer amount
            amount = snapshot.unit_price * clamped

            # 5. Submit
            log.info(
                "Minting %d (requested %d) in %s phase for %d wei",
                clamped, quantity, phase.value, amount,
            )
            tx_hash = await self._submit(descriptor, phase, clamped, amount, video_asset_id)

            # 6. Settle
            receipt = await self._ledger.wait_for_receipt(tx_hash)
            if receipt.status != 1:
                raise UnknownLedgerFailure(f"Transaction {tx_hash} reverted")

        except Exception as exc:
            return self._failure(exc, clamped, amount, phase)

        log.info(
            "Mint settled: %d token(s), tx=%s block=%s",
            clamped, receipt.tx_hash[:16], receipt.block_number,
        )
        return MintResult(
            success=True,
            quantity=clamped,
            amount=amount,
            phase=phase.value,
            receipt=receipt,
        )

    async def _submit(
        self,
        descriptor: CollectionDescriptor,
        phase: Phase,
        quantity: int,
        amount: int,
        video_asset_id: str | None,
    ) -> str:
        if isinstance(descriptor, VideoAssetDescriptor):
            return await self._mint_video_asset(quantity, amount, video_asset_id)

        asset_id = descriptor_asset_id(descriptor)

        if phase is Phase.PRESALE:
            proof = await self._resolve_proof()
            return await self._ledger.mint_presale(quantity, proof, amount, asset_id)

        return await self._ledger.mint_public(quantity, amount, asset_id)

    async def _resolve_proof(self) -> list[str]:
        if self._resolver is None:
            raise UnsupportedVariant("Collection does not support preSale")

        proof = await self._resolver.resolve_proof(self._wallet_address)
        if not proof:
            raise NotWhitelisted("Your wallet is not part of presale.")
        return proof

    async def _mint_video_asset(
        self, quantity: int, amount: int, video_asset_id: str | None
    ) -> str:
        if not video_asset_id:
            raise AssetIdRequired()
        if not self._wallet_address:
            raise WalletUnavailable()
        if self._authorizer is None:
            raise UnsupportedVariant()

        auth = await self._authorizer.authorize(self._wallet_address, video_asset_id)
        if not isinstance(auth, MintAuthorization):
            if any(hint in auth.lower() for hint in _VARIANT_MISMATCH_HINTS):
                raise UnsupportedVariant()
            raise ProofSigningFailed()

        return await self._ledger.mint_guarded(
            self._wallet_address,
            quantity,
            auth.external_ids,
            auth.salt,
            auth.signature,
            amount,
        )

    def _failure(
        self, exc: Exception, quantity: int, amount: int, phase: Phase | None
    ) -> MintResult:
        translated = translate_error(exc)
        if translated is None:
            log.info("Mint cancelled by wallet holder")
            return MintResult(
                success=False,
                quantity=quantity,
                amount=amount,
                phase=phase.value if phase else None,
                cancelled=True,
            )

        log.error("Mint failed (%s): %s", translated.category.value, translated.message)
        return MintResult(
            success=False,
            quantity=quantity,
            amount=amount,
            phase=phase.value if phase else None,
            error=translated.message,
            category=translated.category.value,
        )
