"""ProofResolver protocol - obtains a presale inclusion proof for a wallet."""

from __future__ import annotations

from typing import Protocol


class ProofResolver(Protocol):
    """Returns the proof for a wallet, or an empty list when it is not eligible."""

    async def resolve_proof(self, wallet_address: str | None) -> list[str]:
        ...
