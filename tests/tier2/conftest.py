"""Tier 2 fixtures: local HTTP backend serving allow-lists and mint signatures."""

from __future__ import annotations

import pytest
from aiohttp import web

from rfoxkit.proofs.merkle import MerkleTree, hash_address

from tests.conftest import COLLECTION_ID, TEST_ADDRESS

BACKEND_PORT = 9311
BACKEND_URL = f"http://127.0.0.1:{BACKEND_PORT}"

WHITELIST = [
    TEST_ADDRESS,
    "0x70997970C51812dc3A010C7d01b50e0d17dc79C8",
    "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC",
    "0x90F79bf6EB2c4f870365E785982E1f101E93b906",
]


@pytest.fixture
def backend_state():
    """Mutable backend data; tests edit it between requests."""
    return {
        "whitelist": list(WHITELIST),
        "signed_videos": {"video-1"},
        "requests": [],
    }


@pytest.fixture
async def backend(backend_state):
    """Local server mimicking the collection backend.

    GET  /whitelist.json                       published allow-list
    POST /drops/list/{collection_id}           proof for a wallet
    GET  /rfoxtv/signedMessage/{wallet}/{id}   mint authorization
    GET  /broken/whitelist.json                always 503
    """

    async def handle_whitelist(request):
        backend_state["requests"].append(request.path)
        return web.json_response(backend_state["whitelist"])

    async def handle_proof(request):
        backend_state["requests"].append(request.path)
        if request.match_info["collection_id"] != COLLECTION_ID:
            return web.json_response({"message": "Collection not found"}, status=404)
        body = await request.json()
        tree = MerkleTree.from_addresses(backend_state["whitelist"])
        wallet = body.get("wallet", "")
        if wallet not in backend_state["whitelist"]:
            return web.json_response({"message": "Wallet is not in the whitelist"}, status=400)
        return web.json_response({"proof": tree.get_hex_proof(hash_address(wallet))})

    async def handle_signed(request):
        backend_state["requests"].append(request.path)
        video_id = request.match_info["video_id"]
        if video_id not in backend_state["signed_videos"]:
            return web.json_response({"message": "Video is not available for minting"}, status=400)
        return web.json_response({
            "externalId": video_id,
            "salt": "77",
            "signature": "0x" + "ef" * 65,
        })

    async def handle_broken(request):
        return web.Response(status=503)

    app = web.Application()
    app.router.add_get("/whitelist.json", handle_whitelist)
    app.router.add_post("/drops/list/{collection_id}", handle_proof)
    app.router.add_get("/rfoxtv/signedMessage/{wallet}/{video_id}", handle_signed)
    app.router.add_get("/broken/whitelist.json", handle_broken)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", BACKEND_PORT)
    await site.start()
    yield BACKEND_URL
    await runner.cleanup()
