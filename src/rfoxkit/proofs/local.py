"""Local Merkle proof resolver - builds the tree from a published address list."""

from __future__ import annotations

import logging

import httpx

from rfoxkit.proofs.merkle import MerkleTree, hash_address

log = logging.getLogger(__name__)


class LocalMerkleProofResolver:
    """Computes the presale inclusion proof on the client.

    The allow-list is fetched fresh on every call; the tree is rebuilt each
    time because the list may change between attempts.
    """

    def __init__(
        self,
        whitelist_url: str,
        timeout: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._whitelist_url = whitelist_url
        self._timeout = timeout
        self._transport = transport

    async def fetch_addresses(self) -> list[str]:
        """GET the published list. Transport and HTTP errors propagate."""
        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            resp = await client.get(self._whitelist_url)
            resp.raise_for_status()
            data = resp.json()

        if not isinstance(data, list):
            raise ValueError(
                f"Whitelist at {self._whitelist_url} is not a JSON array of addresses"
            )
        return [str(entry) for entry in data]

    async def build_tree(self) -> MerkleTree:
        addresses = await self.fetch_addresses()

        leaves = []
        for address in addresses:
            try:
                leaves.append(hash_address(address))
            except ValueError:
                log.warning("Skipping malformed whitelist entry: %r", address)

        tree = MerkleTree(leaves)
        if len(tree) < 2:
            log.warning(
                "Whitelist has %d usable address(es); single-entry lists yield empty proofs",
                len(tree),
            )
        log.debug("Built whitelist tree: %d leaves, root %s", len(tree), tree.hex_root)
        return tree

    async def resolve_proof(self, wallet_address: str | None) -> list[str]:
        """Inclusion path for the wallet, or [] when the wallet is not listed."""
        if not wallet_address:
            return []

        try:
            leaf = hash_address(wallet_address)
        except ValueError:
            log.warning("Wallet address is not hex: %r", wallet_address)
            return []

        tree = await self.build_tree()
        proof = tree.get_hex_proof(leaf)
        if not proof:
            log.info("Wallet %s is not on the whitelist", wallet_address[:10])
        return proof
