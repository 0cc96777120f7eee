"""Remote proof resolver - asks the collection's allow-list service for a proof."""

from __future__ import annotations

import logging

import httpx

log = logging.getLogger(__name__)


class RemoteProofResolver:
    """Fetches presale proofs from ``POST /drops/list/{collection_id}``.

    Any response below HTTP 500 is a payload. A ``message`` field in it means
    the wallet is not eligible, which is a normal outcome and yields an empty
    proof. Server errors and connection failures raise.
    """

    def __init__(
        self,
        api_base_url: str,
        collection_id: str,
        timeout: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = api_base_url.rstrip("/")
        self._collection_id = collection_id
        self._timeout = timeout
        self._transport = transport

    def _url(self) -> str:
        return f"{self._base_url}/drops/list/{self._collection_id}"

    async def resolve_proof(self, wallet_address: str | None) -> list[str]:
        if not wallet_address:
            return []

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            resp = await client.post(self._url(), json={"wallet": wallet_address})
            if resp.status_code >= 500:
                resp.raise_for_status()
            payload = resp.json()

        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected proof service payload: {payload!r}")

        if payload.get("message"):
            log.info(
                "Wallet %s not eligible for presale of %s: %s",
                wallet_address[:10], self._collection_id, payload["message"],
            )
            return []

        return [str(h) for h in payload.get("proof") or []]
