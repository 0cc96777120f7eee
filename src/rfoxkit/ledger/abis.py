"""ABI fragments for each collection contract family.

Only the entry points the kit calls are listed.
"""

from __future__ import annotations

from typing import Any

from rfoxkit.models.collection import CollectionVariant


def _fn(
    name: str,
    inputs: list[tuple[str, str]] | None = None,
    outputs: list[tuple[str, str]] | None = None,
    mutability: str = "view",
) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "stateMutability": mutability,
        "inputs": [{"name": n, "type": t} for n, t in inputs or []],
        "outputs": [{"name": n, "type": t} for n, t in outputs or []],
    }


_UINT = [("", "uint256")]

SINGLE_STANDARD_ABI = [
    _fn("TOKEN_PRICE", outputs=_UINT),
    _fn("MAX_NFT", outputs=_UINT),
    _fn("maxTokensPerTransaction", outputs=_UINT),
    _fn("totalSupply", outputs=_UINT),
    _fn("saleStartTime", outputs=_UINT),
    _fn("buyNFTsPublic", [("_numOfTokens", "uint256")], mutability="payable"),
]

SINGLE_PRESALE_ABI = SINGLE_STANDARD_ABI + [
    _fn("TOKEN_PRICE_PRESALE", outputs=_UINT),
    _fn("maxMintedPresalePerAddress", outputs=_UINT),
    _fn("publicSaleStartTime", outputs=_UINT),
    _fn(
        "buyNFTsPresale",
        [("_numOfTokens", "uint256"), ("_proof", "bytes32[]")],
        mutability="payable",
    ),
]

VIDEO_ASSET_ABI = [
    _fn("tokenPrice", outputs=_UINT),
    _fn("usedExternalID", [("", "bytes32")], [("", "bool")]),
    _fn(
        "safeMint",
        [
            ("to", "address"),
            ("quantity", "uint256"),
            ("externalIds", "bytes32[]"),
            ("salt", "uint256"),
            ("signature", "bytes"),
        ],
        mutability="payable",
    ),
]

MULTI_STANDARD_ABI = [
    _fn(
        "dataTokens",
        [("", "uint256")],
        [
            ("tokenID", "uint256"),
            ("maxTokensPerTransaction", "uint256"),
            ("tokenPrice", "uint256"),
            ("maxSupply", "uint256"),
            ("saleStartTime", "uint256"),
            ("saleEndTime", "uint256"),
            ("saleToken", "address"),
            ("active", "bool"),
        ],
    ),
    _fn("totalSupply", [("id", "uint256")], _UINT),
    _fn(
        "buyNFTsPublic",
        [("tokenId", "uint256"), ("amount", "uint256")],
        mutability="payable",
    ),
]

MULTI_PRESALE_ABI = MULTI_STANDARD_ABI + [
    _fn(
        "dataTokenPresales",
        [("", "uint256")],
        [
            ("publicSaleStartTime", "uint256"),
            ("maxMintedPresalePerAddress", "uint256"),
            ("tokenPricePresale", "uint256"),
            ("merkleRoot", "bytes32"),
        ],
    ),
    _fn(
        "buyNFTsPresale",
        [("tokenId", "uint256"), ("amount", "uint256"), ("proof", "bytes32[]")],
        mutability="payable",
    ),
]

ABIS: dict[CollectionVariant, list[dict[str, Any]]] = {
    CollectionVariant.SINGLE_STANDARD: SINGLE_STANDARD_ABI,
    CollectionVariant.SINGLE_WHITELISTED: SINGLE_PRESALE_ABI,
    CollectionVariant.SINGLE_BOT_GUARDED: SINGLE_PRESALE_ABI,
    CollectionVariant.VIDEO_ASSET: VIDEO_ASSET_ABI,
    CollectionVariant.MULTI_STANDARD: MULTI_STANDARD_ABI,
    CollectionVariant.MULTI_WHITELISTED: MULTI_PRESALE_ABI,
}
