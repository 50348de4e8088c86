from __future__ import annotations


class CompoundTokenizationError(ValueError):
    """Invalid argument given to a split, join or conversion."""
