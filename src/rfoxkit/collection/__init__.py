"""Collection descriptor population."""

from rfoxkit.collection.loader import load_descriptor

__all__ = ["load_descriptor"]
