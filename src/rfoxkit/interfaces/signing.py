"""MintAuthorizer protocol - signed minting authorization for video assets."""

from __future__ import annotations

from typing import Protocol

from rfoxkit.models.records import MintAuthorization


class MintAuthorizer(Protocol):
    """Backend service that signs a video-asset mint for one wallet."""

    async def authorize(self, wallet_address: str, asset_id: str) -> MintAuthorization | str:
        """Return the authorization, or the service's message when it refuses."""
        ...
