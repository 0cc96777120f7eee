"""RfoxKit - wires ledger, proof strategy and dispatcher for one collection."""

from __future__ import annotations

import logging
import time

import httpx
from eth_account import Account
from eth_account.signers.local import LocalAccount

from rfoxkit.collection.loader import load_descriptor
from rfoxkit.dispatcher import MintDispatcher
from rfoxkit.errors import (
    AssetIdRequired,
    CollectionNotReady,
    RfoxKitError,
    translate_error,
)
from rfoxkit.interfaces.ledger import LedgerContract
from rfoxkit.ledger.contract import Web3LedgerContract
from rfoxkit.models.collection import CollectionDescriptor, CollectionVariant
from rfoxkit.models.config import KitConfig
from rfoxkit.models.eligibility import EligibilitySnapshot
from rfoxkit.models.records import MintResult
from rfoxkit.policy.eligibility import evaluate
from rfoxkit.proofs.selector import select_resolver
from rfoxkit.services.signing import SignedMintClient

log = logging.getLogger(__name__)


class RfoxKit:
    """Mint client for one collection and one wallet.

    The descriptor is an immutable snapshot. initialize() and select_asset()
    replace it; do not call them while a mint() is in flight.
    """

    def __init__(
        self,
        cfg: KitConfig,
        ledger: LedgerContract | None = None,
        account: LocalAccount | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not cfg.contract_address or not cfg.collection_id:
            raise CollectionNotReady()

        self._cfg = cfg
        self._asset_id = cfg.asset_id
        self.variant: CollectionVariant = cfg.variant

        if account is None and cfg.wallet_secret:
            account = Account.from_key(cfg.wallet_secret)
        self.account = account
        self.wallet_address: str | None = account.address if account else None

        self.ledger: LedgerContract = ledger or Web3LedgerContract(
            rpc_url=cfg.effective_rpc_url,
            contract_address=cfg.contract_address,
            variant=cfg.variant,
            account=account,
            chain_id=cfg.chain_id,
        )
        self.resolver = select_resolver(
            cfg.variant,
            api_base_url=cfg.api_base_url,
            collection_id=cfg.collection_id,
            whitelist_url=cfg.whitelist_url,
            timeout=cfg.api.timeout,
            transport=transport,
        )
        self.authorizer = None
        if cfg.variant is CollectionVariant.VIDEO_ASSET:
            self.authorizer = SignedMintClient(cfg.api_base_url, cfg.api.timeout, transport)

        self.dispatcher = MintDispatcher(
            self.ledger, self.wallet_address, self.resolver, self.authorizer,
        )
        self.descriptor: CollectionDescriptor | None = None

    @classmethod
    async def create(cls, cfg: KitConfig, **kwargs) -> RfoxKit | None:
        """Build and populate a kit. Returns None if the wallet holder cancelled.

        Any other failure is raised as a translated RfoxKitError.
        """
        try:
            kit = cls(cfg, **kwargs)
            await kit.initialize()
            return kit
        except Exception as exc:
            translated = translate_error(exc)
            if translated is None:
                return None
            if translated is exc:
                raise
            raise translated from exc

    @property
    def asset_id(self) -> str | None:
        return self._asset_id

    def _token_id(self) -> int | None:
        if not self.variant.is_multi_token:
            return None
        if self._asset_id is None or self._asset_id == "":
            raise AssetIdRequired()
        try:
            return int(self._asset_id)
        except ValueError:
            raise AssetIdRequired(f"Token id must be an integer, got {self._asset_id!r}") from None

    async def initialize(self) -> CollectionDescriptor:
        """Populate the descriptor from the ledger."""
        log.info(
            "Initializing %s collection %s at %s (wallet=%s)",
            self.variant.value,
            self._cfg.collection_id,
            self._cfg.contract_address,
            self.wallet_address[:10] if self.wallet_address else "none",
        )
        self.descriptor = await load_descriptor(self.ledger, self.variant, self._token_id())
        return self.descriptor

    async def select_asset(self, asset_id: str | int) -> CollectionDescriptor | None:
        """Switch the active token (or video). Multi-token collections re-populate."""
        self._asset_id = str(asset_id)
        if self.variant.is_multi_token:
            return await self.initialize()
        return self.descriptor

    def _require_descriptor(self) -> CollectionDescriptor:
        if self.descriptor is None:
            raise CollectionNotReady("Collection details have not been loaded.")
        return self.descriptor

    def eligibility(self, now: int | None = None) -> EligibilitySnapshot:
        return evaluate(self._require_descriptor(), int(time.time()) if now is None else now)

    async def resolve_proof(self) -> list[str]:
        """Presale proof for the connected wallet. Empty means not eligible."""
        if self.resolver is None:
            return []
        return await self.resolver.resolve_proof(self.wallet_address)

    async def mint(self, quantity: int, now: int | None = None) -> MintResult:
        """Run one mint attempt. Never raises for ledger or policy failures."""
        if self.descriptor is None:
            err: RfoxKitError = CollectionNotReady("Collection details have not been loaded.")
            return MintResult(success=False, error=err.message, category=err.category.value)
        return await self.dispatcher.mint(
            self.descriptor, quantity, now=now, video_asset_id=self._asset_id,
        )

    async def is_video_minted(self, video_id: str) -> bool:
        return await self.ledger.is_external_id_used(video_id)

    async def wallet_balance(self) -> int | None:
        if not self.wallet_address:
            return None
        return await self.ledger.wallet_balance(self.wallet_address)

    async def close(self) -> None:
        close = getattr(self.ledger, "close", None)
        if close is not None:
            await close()
