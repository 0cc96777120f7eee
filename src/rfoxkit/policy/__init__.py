"""Mint policy - pure eligibility evaluation."""

from rfoxkit.policy.eligibility import clamp_quantity, evaluate

__all__ = ["clamp_quantity", "evaluate"]
