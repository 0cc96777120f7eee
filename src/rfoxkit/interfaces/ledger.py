"""LedgerContract protocol - read and write entry points of one collection contract."""

from __future__ import annotations

from typing import Protocol

from rfoxkit.models.eligibility import Phase
from rfoxkit.models.records import MintReceipt, PresaleRecord, SaleWindow, TokenRecord


class LedgerContract(Protocol):
    """Opaque contract-call capability for one collection.

    Write methods submit a transaction and return its hash; settlement is a
    separate await via wait_for_receipt().
    """

    # ── Reads ──────────────────────────────────────────────

    async def price_of(self, phase: Phase) -> int:
        """Unit price in wei for the given phase."""
        ...

    async def max_supply(self) -> int:
        ...

    async def total_supply(self, asset_id: int | None = None) -> int:
        """Minted count, collection-wide or for one token."""
        ...

    async def sale_window(self) -> SaleWindow:
        ...

    async def per_tx_limit(self, phase: Phase) -> int:
        ...

    async def token_record(self, asset_id: int) -> TokenRecord:
        ...

    async def presale_record(self, asset_id: int) -> PresaleRecord:
        ...

    async def is_external_id_used(self, external_id: str) -> bool:
        """Whether a video asset has already been minted."""
        ...

    async def wallet_balance(self, address: str) -> int:
        """Native balance in wei."""
        ...

    # ── Writes ─────────────────────────────────────────────

    async def mint_public(
        self, quantity: int, amount: int, asset_id: int | None = None
    ) -> str:
        ...

    async def mint_presale(
        self, quantity: int, proof: list[str], amount: int, asset_id: int | None = None
    ) -> str:
        ...

    async def mint_guarded(
        self,
        wallet: str,
        quantity: int,
        external_ids: list[str],
        salt: str,
        signature: str,
        amount: int,
    ) -> str:
        ...

    async def wait_for_receipt(self, tx_hash: str) -> MintReceipt:
        """Block until the transaction settles."""
        ...
