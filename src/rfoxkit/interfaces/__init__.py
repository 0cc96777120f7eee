"""Protocol interfaces for all rfoxkit collaborators."""

from rfoxkit.interfaces.ledger import LedgerContract
from rfoxkit.interfaces.proof import ProofResolver
from rfoxkit.interfaces.signing import MintAuthorizer

__all__ = ["LedgerContract", "ProofResolver", "MintAuthorizer"]
