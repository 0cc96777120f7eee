"""Signed-mint authorization client for video-asset collections."""

from __future__ import annotations

import logging

import httpx

from rfoxkit.models.records import MintAuthorization

log = logging.getLogger(__name__)


class SignedMintClient:
    """Requests a backend-signed mint authorization.

    ``GET /rfoxtv/signedMessage/{wallet}/{asset_id}`` answers with
    ``{externalId, salt, signature}`` or with ``{message}`` when the backend
    refuses to sign.
    """

    def __init__(
        self,
        api_base_url: str,
        timeout: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = api_base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _url(self, wallet_address: str, asset_id: str) -> str:
        return f"{self._base_url}/rfoxtv/signedMessage/{wallet_address}/{asset_id}"

    async def authorize(self, wallet_address: str, asset_id: str) -> MintAuthorization | str:
        """Return the authorization, or the backend's refusal message."""
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            resp = await client.get(self._url(wallet_address, asset_id))
            if resp.status_code >= 500:
                resp.raise_for_status()
            payload = resp.json()

        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected signing service payload: {payload!r}")

        if payload.get("message"):
            log.warning(
                "Signing refused for %s asset %s: %s",
                wallet_address[:10], asset_id, payload["message"],
            )
            return str(payload["message"])

        external_ids = payload.get("externalId") or []
        if isinstance(external_ids, str):
            external_ids = [external_ids]

        return MintAuthorization(
            external_ids=[str(e) for e in external_ids],
            salt=str(payload.get("salt", "")),
            signature=str(payload.get("signature", "")),
        )
