"""Backend service clients."""

from rfoxkit.services.signing import SignedMintClient

__all__ = ["SignedMintClient"]
