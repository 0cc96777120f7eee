"""Mock implementations of all external-facing components."""

from __future__ import annotations

from rfoxkit.models.eligibility import Phase
from rfoxkit.models.records import (
    MintAuthorization,
    MintReceipt,
    PresaleRecord,
    SaleWindow,
    TokenRecord,
)

TX_HASH = "0x" + "ab" * 32


class MockLedger:
    """Implements LedgerContract protocol. Reads return configured values,
    writes are recorded and answered with a fixed transaction hash."""

    def __init__(
        self,
        public_price: int = 10**17,
        presale_price: int = 5 * 10**16,
        max_supply: int = 1000,
        current_supply: int = 10,
        sale_start: int = 100,
        public_sale_start: int = 200,
        max_per_tx_public: int = 5,
        max_per_tx_presale: int = 2,
        token: TokenRecord | None = None,
        presale: PresaleRecord | None = None,
        used_external_ids: set[str] | None = None,
        balance: int = 10**18,
        receipt_status: int = 1,
        submit_error: Exception | None = None,
        read_error: Exception | None = None,
    ) -> None:
        self.public_price = public_price
        self.presale_price = presale_price
        self._max_supply = max_supply
        self.current_supply = current_supply
        self.sale_start = sale_start
        self.public_sale_start = public_sale_start
        self.max_per_tx_public = max_per_tx_public
        self.max_per_tx_presale = max_per_tx_presale
        self.token = token
        self.presale = presale
        self.used_external_ids = used_external_ids or set()
        self.balance = balance
        self.receipt_status = receipt_status
        self.submit_error = submit_error
        self.read_error = read_error

        self.reads: list[str] = []
        self.public_calls: list[tuple[int, int, int | None]] = []
        self.presale_calls: list[tuple[int, list[str], int, int | None]] = []
        self.guarded_calls: list[tuple] = []
        self.receipt_calls: list[str] = []
        self.closed = False

    def _read(self, name: str) -> None:
        self.reads.append(name)
        if self.read_error is not None:
            raise self.read_error

    # ── Reads ──────────────────────────────────────────────

    async def price_of(self, phase: Phase) -> int:
        self._read(f"price_of:{phase.value}")
        return self.presale_price if phase is Phase.PRESALE else self.public_price

    async def max_supply(self) -> int:
        self._read("max_supply")
        return self._max_supply

    async def total_supply(self, asset_id: int | None = None) -> int:
        self._read("total_supply")
        return self.current_supply

    async def sale_window(self) -> SaleWindow:
        self._read("sale_window")
        return SaleWindow(sale_start=self.sale_start, public_sale_start=self.public_sale_start)

    async def per_tx_limit(self, phase: Phase) -> int:
        self._read(f"per_tx_limit:{phase.value}")
        return self.max_per_tx_presale if phase is Phase.PRESALE else self.max_per_tx_public

    async def token_record(self, asset_id: int) -> TokenRecord:
        self._read("token_record")
        assert self.token is not None, "MockLedger has no token record configured"
        return self.token

    async def presale_record(self, asset_id: int) -> PresaleRecord:
        self._read("presale_record")
        assert self.presale is not None, "MockLedger has no presale record configured"
        return self.presale

    async def is_external_id_used(self, external_id: str) -> bool:
        self._read("is_external_id_used")
        return external_id in self.used_external_ids

    async def wallet_balance(self, address: str) -> int:
        self._read("wallet_balance")
        return self.balance

    # ── Writes ─────────────────────────────────────────────

    def _submit(self) -> str:
        if self.submit_error is not None:
            raise self.submit_error
        return TX_HASH

    async def mint_public(self, quantity: int, amount: int, asset_id: int | None = None) -> str:
        self.public_calls.append((quantity, amount, asset_id))
        return self._submit()

    async def mint_presale(
        self, quantity: int, proof: list[str], amount: int, asset_id: int | None = None
    ) -> str:
        self.presale_calls.append((quantity, list(proof), amount, asset_id))
        return self._submit()

    async def mint_guarded(
        self,
        wallet: str,
        quantity: int,
        external_ids: list[str],
        salt: str,
        signature: str,
        amount: int,
    ) -> str:
        self.guarded_calls.append((wallet, quantity, list(external_ids), salt, signature, amount))
        return self._submit()

    async def wait_for_receipt(self, tx_hash: str) -> MintReceipt:
        self.receipt_calls.append(tx_hash)
        return MintReceipt(tx_hash=tx_hash, status=self.receipt_status, block_number=42, gas_used=21000)

    async def close(self) -> None:
        self.closed = True

    @property
    def submit_count(self) -> int:
        return len(self.public_calls) + len(self.presale_calls) + len(self.guarded_calls)


class MockResolver:
    """Implements ProofResolver protocol."""

    def __init__(self, proof: list[str] | None = None, error: Exception | None = None) -> None:
        self.proof = proof if proof is not None else ["0x" + "11" * 32, "0x" + "22" * 32]
        self._error = error
        self.calls: list[str | None] = []

    async def resolve_proof(self, wallet_address: str | None) -> list[str]:
        self.calls.append(wallet_address)
        if self._error is not None:
            raise self._error
        return list(self.proof)


class MockAuthorizer:
    """Implements MintAuthorizer protocol."""

    def __init__(self, refusal: str | None = None) -> None:
        self._refusal = refusal
        self.calls: list[tuple[str, str]] = []

    async def authorize(self, wallet_address: str, asset_id: str) -> MintAuthorization | str:
        self.calls.append((wallet_address, asset_id))
        if self._refusal is not None:
            return self._refusal
        return MintAuthorization(
            external_ids=[asset_id],
            salt="0x2a",
            signature="0x" + "cd" * 65,
        )


class RpcError(Exception):
    """Stand-in for a provider error carrying a JSON-RPC error dict."""

    def __init__(self, code, message: str, data=None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data
