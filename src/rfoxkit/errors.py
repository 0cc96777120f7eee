"""Error taxonomy and ledger/provider failure translation."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from web3.exceptions import BadFunctionCallOutput

log = logging.getLogger(__name__)

# JSON-RPC "internal error" envelope; the real failure sits in its data field.
# https://eips.ethereum.org/EIPS/eip-1474#error-codes
_ENVELOPE_CODE = -32603
_CALL_EXCEPTION = "CALL_EXCEPTION"
_DEFAULT_MESSAGE = "Something went wrong."


class FailureCategory(str, Enum):
    COLLECTION_NOT_READY = "collection_not_ready"
    ASSET_ID_REQUIRED = "asset_id_required"
    INVALID_QUANTITY = "invalid_quantity"
    SALE_NOT_ACTIVE = "sale_not_active"
    LIMIT_EXCEEDED = "limit_exceeded"
    NOT_WHITELISTED = "not_whitelisted"
    UNSUPPORTED_VARIANT = "unsupported_variant"
    PROOF_SIGNING_FAILED = "proof_signing_failed"
    WALLET_UNAVAILABLE = "wallet_unavailable"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    WRONG_NETWORK = "wrong_network"
    USER_CANCELLED = "user_cancelled"
    UNKNOWN = "unknown"


class RfoxKitError(Exception):
    """Base class for every failure surfaced by the kit."""

    category = FailureCategory.UNKNOWN
    default_message = _DEFAULT_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class CollectionNotReady(RfoxKitError):
    category = FailureCategory.COLLECTION_NOT_READY
    default_message = "Collection is not ready yet."


class AssetIdRequired(RfoxKitError):
    category = FailureCategory.ASSET_ID_REQUIRED
    default_message = "An asset id is required for this collection."


class InvalidQuantity(RfoxKitError):
    category = FailureCategory.INVALID_QUANTITY
    default_message = "Quantity must be at least 1."


class SaleNotActive(RfoxKitError):
    category = FailureCategory.SALE_NOT_ACTIVE
    default_message = "Sale has not been started."


class LimitExceeded(RfoxKitError):
    category = FailureCategory.LIMIT_EXCEEDED
    default_message = "You reach max minted NFTs per address."


class NotWhitelisted(RfoxKitError):
    category = FailureCategory.NOT_WHITELISTED
    default_message = "You are not in the whitelist."


class UnsupportedVariant(RfoxKitError):
    category = FailureCategory.UNSUPPORTED_VARIANT
    default_message = "This is not supported contract type."


class ProofSigningFailed(RfoxKitError):
    category = FailureCategory.PROOF_SIGNING_FAILED
    default_message = "There is a problem while signing your video for minting."


class WalletUnavailable(RfoxKitError):
    category = FailureCategory.WALLET_UNAVAILABLE
    default_message = (
        "Please install the MetaMask extension. If you are on mobile, "
        "open your MetaMask app and browse to this page."
    )


class InsufficientFunds(RfoxKitError):
    category = FailureCategory.INSUFFICIENT_FUNDS
    default_message = "Your wallet does not have enough balance."


class WrongNetwork(RfoxKitError):
    category = FailureCategory.WRONG_NETWORK
    default_message = "Please make sure you are connected to the right network."


class UserCancelled(RfoxKitError):
    """The wallet holder declined; absorbed, never reported."""

    category = FailureCategory.USER_CANCELLED
    default_message = "User rejected."


class UnknownLedgerFailure(RfoxKitError):
    category = FailureCategory.UNKNOWN


# Ordered: earlier entries win when substrings overlap.
_MESSAGE_RULES: list[tuple[tuple[str, ...], type[RfoxKitError]]] = [
    (("missing provider", "no provider found"), WalletUnavailable),
    (("insufficient funds",), InsufficientFunds),
    (("unauthorized to join the presale",), NotWhitelisted),
    (("exceed the limit",), LimitExceeded),
    (("sale has not been started",), SaleNotActive),
]

_CANCEL_PHRASES = frozenset({
    "user rejected",
    "user closed modal",
    "user denied account authorization",
    "accounts received is empty",
})


def _failure_fields(failure: Any) -> tuple[Any, str, Any]:
    """Pull (code, message, data) out of an exception or JSON-RPC error dict.

    web3 raises provider errors either with an RPC error dict as the first
    argument or with an ``rpc_response`` attribute holding the full response.
    """
    if isinstance(failure, dict):
        return failure.get("code"), str(failure.get("message") or ""), failure.get("data")

    rpc_response = getattr(failure, "rpc_response", None)
    if isinstance(rpc_response, dict) and isinstance(rpc_response.get("error"), dict):
        return _failure_fields(rpc_response["error"])

    args = getattr(failure, "args", ())
    if args and isinstance(args[0], dict):
        return _failure_fields(args[0])

    code = getattr(failure, "code", None)
    data = getattr(failure, "data", None)
    message = getattr(failure, "message", None)
    if not isinstance(message, str):
        message = str(failure)
    return code, message, data


def translate_error(failure: BaseException | dict) -> RfoxKitError | None:
    """Map a captured failure to one user-presentable RfoxKitError.

    Returns None when the wallet holder cancelled; the caller reports nothing.
    Unrecognized failures come back as UnknownLedgerFailure with the original
    message verbatim.
    """
    if isinstance(failure, UserCancelled):
        return None
    if isinstance(failure, RfoxKitError):
        return failure

    code, message, data = _failure_fields(failure)
    if code == _ENVELOPE_CODE and data is not None:
        code, message, data = _failure_fields(data)

    # An empty message is still reported as a generic failure, never absorbed
    # like a cancellation.
    msg = message or _DEFAULT_MESSAGE
    lowered = msg.lower()

    for needles, error_cls in _MESSAGE_RULES:
        if any(needle in lowered for needle in needles):
            return error_cls()

    if code == _CALL_EXCEPTION or isinstance(failure, BadFunctionCallOutput):
        return WrongNetwork()

    if lowered in _CANCEL_PHRASES:
        log.info("Wallet holder cancelled: %s", msg)
        return None

    return UnknownLedgerFailure(msg)
