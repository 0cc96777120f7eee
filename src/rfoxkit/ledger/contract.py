"""web3.py ledger contract - read and mint entry points for one collection."""

from __future__ import annotations

import logging
from typing import Any

from eth_account.signers.local import LocalAccount
from web3 import AsyncHTTPProvider, AsyncWeb3

from rfoxkit.errors import UnsupportedVariant, WalletUnavailable, WrongNetwork
from rfoxkit.ledger.abis import ABIS
from rfoxkit.models.collection import CollectionVariant
from rfoxkit.models.eligibility import Phase
from rfoxkit.models.records import MintReceipt, PresaleRecord, SaleWindow, TokenRecord

log = logging.getLogger(__name__)

DEFAULT_RECEIPT_TIMEOUT = 240  # seconds


def format_bytes32_string(text: str) -> bytes:
    """UTF-8 encode and right-pad to 32 bytes, keeping a trailing NUL."""
    encoded = text.encode("utf-8")
    if len(encoded) > 31:
        raise ValueError(f"bytes32 string must be less than 32 bytes: {text!r}")
    return encoded.ljust(32, b"\x00")


def _to_bytes32(value: str) -> bytes:
    """Hex bytes32 values pass through, anything else is packed as a string."""
    if value.startswith("0x") and len(value) == 66:
        return bytes.fromhex(value[2:])
    return format_bytes32_string(value)


def _hex_bytes(value: str) -> bytes:
    return bytes.fromhex(value[2:] if value.startswith("0x") else value)


def _parse_uint(value: str) -> int:
    """0x-prefixed hex or decimal; decimal may carry leading zeros."""
    value = value.strip()
    if value[:2].lower() == "0x":
        return int(value, 16)
    return int(value)


class Web3LedgerContract:
    """Ledger contract over EVM JSON-RPC.

    The ABI is picked once from the collection variant. Reads are plain
    eth_call; writes are built, signed locally with the configured account,
    and sent raw. Reads that do not exist on the variant's contract raise
    UnsupportedVariant.
    """

    def __init__(
        self,
        rpc_url: str,
        contract_address: str,
        variant: CollectionVariant,
        account: LocalAccount | None = None,
        chain_id: int | None = None,
        receipt_timeout: int = DEFAULT_RECEIPT_TIMEOUT,
        w3: AsyncWeb3 | None = None,
    ) -> None:
        self._w3 = w3 or AsyncWeb3(AsyncHTTPProvider(rpc_url))
        self._variant = variant
        self._account = account
        self._chain_id = chain_id
        self._receipt_timeout = receipt_timeout
        self._contract = self._w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(contract_address),
            abi=ABIS[variant],
        )

    @property
    def wallet_address(self) -> str | None:
        return self._account.address if self._account else None

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        try:
            await self._w3.provider.disconnect()
        except Exception as exc:
            log.debug("Provider disconnect failed: %s", exc)

    def _require(self, *variants: CollectionVariant) -> None:
        if self._variant not in variants:
            raise UnsupportedVariant(
                f"Not available on {self._variant.value} contracts"
            )

    def _require_single_token(self) -> None:
        self._require(
            CollectionVariant.SINGLE_STANDARD,
            CollectionVariant.SINGLE_WHITELISTED,
            CollectionVariant.SINGLE_BOT_GUARDED,
        )

    async def _call(self, name: str, *args: Any) -> Any:
        return await getattr(self._contract.functions, name)(*args).call()

    # ── Reads ──────────────────────────────────────────────

    async def price_of(self, phase: Phase) -> int:
        if self._variant is CollectionVariant.VIDEO_ASSET:
            return int(await self._call("tokenPrice"))
        self._require_single_token()
        if phase is Phase.PRESALE:
            self._require(CollectionVariant.SINGLE_WHITELISTED, CollectionVariant.SINGLE_BOT_GUARDED)
            return int(await self._call("TOKEN_PRICE_PRESALE"))
        return int(await self._call("TOKEN_PRICE"))

    async def max_supply(self) -> int:
        self._require_single_token()
        return int(await self._call("MAX_NFT"))

    async def total_supply(self, asset_id: int | None = None) -> int:
        if self._variant.is_multi_token:
            if asset_id is None:
                raise UnsupportedVariant("Multi-token supply is tracked per token id")
            return int(await self._call("totalSupply", asset_id))
        self._require_single_token()
        return int(await self._call("totalSupply"))

    async def sale_window(self) -> SaleWindow:
        self._require_single_token()
        sale_start = int(await self._call("saleStartTime"))
        if not self._variant.has_presale:
            return SaleWindow(sale_start=sale_start)
        return SaleWindow(
            sale_start=sale_start,
            public_sale_start=int(await self._call("publicSaleStartTime")),
        )

    async def per_tx_limit(self, phase: Phase) -> int:
        self._require_single_token()
        if phase is Phase.PRESALE:
            return int(await self._call("maxMintedPresalePerAddress"))
        return int(await self._call("maxTokensPerTransaction"))

    async def token_record(self, asset_id: int) -> TokenRecord:
        self._require(CollectionVariant.MULTI_STANDARD, CollectionVariant.MULTI_WHITELISTED)
        raw = await self._call("dataTokens", asset_id)
        return TokenRecord(
            token_id=int(raw[0]),
            max_per_tx=int(raw[1]),
            price=int(raw[2]),
            max_supply=int(raw[3]),
            sale_start=int(raw[4]),
            sale_end=int(raw[5]),
            sale_token=str(raw[6]),
            active=bool(raw[7]),
        )

    async def presale_record(self, asset_id: int) -> PresaleRecord:
        self._require(CollectionVariant.MULTI_WHITELISTED)
        raw = await self._call("dataTokenPresales", asset_id)
        return PresaleRecord(
            public_sale_start=int(raw[0]),
            max_per_address=int(raw[1]),
            price=int(raw[2]),
            merkle_root="0x" + bytes(raw[3]).hex(),
        )

    async def is_external_id_used(self, external_id: str) -> bool:
        self._require(CollectionVariant.VIDEO_ASSET)
        return bool(await self._call("usedExternalID", format_bytes32_string(external_id)))

    async def wallet_balance(self, address: str) -> int:
        return int(await self._w3.eth.get_balance(AsyncWeb3.to_checksum_address(address)))

    # ── Writes ─────────────────────────────────────────────

    async def _transact(self, name: str, args: tuple, value: int) -> str:
        if self._account is None:
            raise WalletUnavailable("No provider found")

        if self._chain_id is not None:
            connected = await self._w3.eth.chain_id
            if connected != self._chain_id:
                log.error("Connected to chain %d, expected %d", connected, self._chain_id)
                raise WrongNetwork()

        sender = self._account.address
        fn = getattr(self._contract.functions, name)(*args)
        tx = await fn.build_transaction({
            "from": sender,
            "value": value,
            "nonce": await self._w3.eth.get_transaction_count(sender),
        })
        signed = self._account.sign_transaction(tx)
        tx_hash = AsyncWeb3.to_hex(await self._w3.eth.send_raw_transaction(signed.raw_transaction))

        log.info("Submitted %s (value=%d wei, tx=%s)", name, value, tx_hash[:16])
        return tx_hash

    async def mint_public(
        self, quantity: int, amount: int, asset_id: int | None = None
    ) -> str:
        if self._variant.is_multi_token:
            return await self._transact("buyNFTsPublic", (asset_id, quantity), amount)
        self._require_single_token()
        return await self._transact("buyNFTsPublic", (quantity,), amount)

    async def mint_presale(
        self, quantity: int, proof: list[str], amount: int, asset_id: int | None = None
    ) -> str:
        proof_bytes = [_hex_bytes(p) for p in proof]
        if self._variant is CollectionVariant.MULTI_WHITELISTED:
            return await self._transact("buyNFTsPresale", (asset_id, quantity, proof_bytes), amount)
        self._require(CollectionVariant.SINGLE_WHITELISTED, CollectionVariant.SINGLE_BOT_GUARDED)
        return await self._transact("buyNFTsPresale", (quantity, proof_bytes), amount)

    async def mint_guarded(
        self,
        wallet: str,
        quantity: int,
        external_ids: list[str],
        salt: str,
        signature: str,
        amount: int,
    ) -> str:
        self._require(CollectionVariant.VIDEO_ASSET)
        args = (
            AsyncWeb3.to_checksum_address(wallet),
            quantity,
            [_to_bytes32(e) for e in external_ids],
            _parse_uint(salt),
            _hex_bytes(signature),
        )
        return await self._transact("safeMint", args, amount)

    async def wait_for_receipt(self, tx_hash: str) -> MintReceipt:
        receipt = await self._w3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=self._receipt_timeout,
        )
        return MintReceipt(
            tx_hash=AsyncWeb3.to_hex(receipt["transactionHash"]),
            status=int(receipt["status"]),
            block_number=receipt.get("blockNumber"),
            gas_used=receipt.get("gasUsed"),
        )
