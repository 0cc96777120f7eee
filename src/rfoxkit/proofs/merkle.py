"""Keccak-256 Merkle tree with pairwise-sorted hashing.

Compatible with OpenZeppelin's ``MerkleProof.verify``: each parent is
keccak256 of its two children concatenated in ascending byte order, and an
unpaired node at the end of a layer is promoted unchanged. Leaves are sorted
and de-duplicated first, so the root does not depend on list order.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable

from eth_utils import keccak


def hash_address(address: str) -> bytes:
    """Leaf hash for a wallet address: keccak256 of the address bytes.

    Matches ``keccak256(abi.encodePacked(msg.sender))`` for 20-byte
    addresses. Raises ValueError for strings that are not hex.
    """
    return keccak(hexstr=address.strip())


def hash_pair(a: bytes, b: bytes) -> bytes:
    if a <= b:
        return keccak(a + b)
    return keccak(b + a)


def _to_hex(value: bytes) -> str:
    return "0x" + value.hex()


def _from_hex(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return bytes.fromhex(value[2:] if value.startswith("0x") else value)


class MerkleTree:
    """Binary hash tree over a set of leaf hashes."""

    def __init__(self, leaves: Iterable[bytes]) -> None:
        self._layers: list[list[bytes]] = [sorted(set(leaves))]
        while len(self._layers[-1]) > 1:
            self._layers.append(self._next_layer(self._layers[-1]))

    @classmethod
    def from_addresses(cls, addresses: Iterable[str]) -> MerkleTree:
        return cls(hash_address(a) for a in addresses)

    @staticmethod
    def _next_layer(layer: list[bytes]) -> list[bytes]:
        parents = []
        for i in range(0, len(layer), 2):
            if i + 1 < len(layer):
                parents.append(hash_pair(layer[i], layer[i + 1]))
            else:
                parents.append(layer[i])
        return parents

    def __len__(self) -> int:
        return len(self._layers[0])

    def __contains__(self, leaf: object) -> bool:
        return self._index_of(leaf) is not None  # type: ignore[arg-type]

    @property
    def root(self) -> bytes:
        if not self._layers[0]:
            return b""
        return self._layers[-1][0]

    @property
    def hex_root(self) -> str:
        return _to_hex(self.root) if self.root else ""

    def _index_of(self, leaf: bytes) -> int | None:
        leaves = self._layers[0]
        i = bisect_left(leaves, leaf)
        if i < len(leaves) and leaves[i] == leaf:
            return i
        return None

    def get_proof(self, leaf: bytes) -> list[bytes]:
        """Sibling hashes from the leaf up to the root. Empty if the leaf is absent."""
        index = self._index_of(leaf)
        if index is None:
            return []

        proof: list[bytes] = []
        for layer in self._layers[:-1]:
            sibling = index ^ 1
            if sibling < len(layer):
                proof.append(layer[sibling])
            index //= 2
        return proof

    def get_hex_proof(self, leaf: bytes) -> list[str]:
        return [_to_hex(p) for p in self.get_proof(leaf)]

    @staticmethod
    def verify(proof: Iterable[str | bytes], leaf: bytes, root: str | bytes) -> bool:
        """Fold the proof onto the leaf and compare with the root."""
        computed = leaf
        for sibling in proof:
            computed = hash_pair(computed, _from_hex(sibling))
        return computed == _from_hex(root)
