"""EVM ledger contract adapter."""

from rfoxkit.ledger.abis import ABIS
from rfoxkit.ledger.contract import Web3LedgerContract, format_bytes32_string

__all__ = ["ABIS", "Web3LedgerContract", "format_bytes32_string"]
