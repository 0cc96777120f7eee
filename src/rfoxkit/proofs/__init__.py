"""Presale proof strategies: remote allow-list service and local Merkle tree."""

from rfoxkit.proofs.local import LocalMerkleProofResolver
from rfoxkit.proofs.merkle import MerkleTree, hash_address
from rfoxkit.proofs.remote import RemoteProofResolver
from rfoxkit.proofs.selector import select_resolver

__all__ = [
    "LocalMerkleProofResolver",
    "MerkleTree",
    "RemoteProofResolver",
    "hash_address",
    "select_resolver",
]
