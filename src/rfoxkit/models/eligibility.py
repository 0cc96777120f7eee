"""Eligibility snapshot - derived per mint attempt, never persisted."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    """Sale phase of a collection at a given instant."""

    CLOSED = "closed"
    PRESALE = "presale"  # allow-listed wallets only
    PUBLIC = "public"


@dataclass(frozen=True)
class EligibilitySnapshot:
    """What a mint attempt may do right now."""

    phase: Phase
    unit_price: int | None  # wei; None while closed
    per_tx_limit: int

    @property
    def is_open(self) -> bool:
        return self.phase is not Phase.CLOSED
