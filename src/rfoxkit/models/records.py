"""Ledger read records and mint operation results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SaleWindow:
    """Single-token sale timing. 0 means not applicable."""

    sale_start: int
    public_sale_start: int = 0


@dataclass(frozen=True)
class TokenRecord:
    """On-chain sale record for one token of a multi-token collection."""

    token_id: int
    max_per_tx: int
    price: int  # wei
    max_supply: int
    sale_start: int
    sale_end: int
    sale_token: str  # zero address for native currency
    active: bool


@dataclass(frozen=True)
class PresaleRecord:
    """On-chain presale record for one token of a whitelisted multi-token collection."""

    public_sale_start: int
    max_per_address: int
    price: int  # wei
    merkle_root: str  # hex


@dataclass(frozen=True)
class MintAuthorization:
    """Signed minting authorization issued by the backend for a video asset."""

    external_ids: list[str]
    salt: str
    signature: str


@dataclass(frozen=True)
class MintReceipt:
    """Settled transaction receipt."""

    tx_hash: str
    status: int  # 1 success, 0 reverted
    block_number: int | None = None
    gas_used: int | None = None


@dataclass
class MintResult:
    """Outcome of one mint attempt.

    Exactly one of: success with a receipt, a translated failure
    (error + category), or a silently cancelled attempt.
    """

    success: bool
    quantity: int = 0
    amount: int = 0  # wei
    phase: str | None = None
    receipt: MintReceipt | None = None
    error: str | None = None
    category: str | None = None
    cancelled: bool = False

    @property
    def tx_hash(self) -> str | None:
        return self.receipt.tx_hash if self.receipt else None
