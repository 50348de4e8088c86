from __future__ import annotations

from .errors import CompoundTokenizationError
from .registry import (
    BUILT_INS,
    CAMEL_CASE,
    CONSTANT_CASE,
    DOT_CASE,
    KEBAB_CASE,
    PASCAL_CASE,
    SNAKE_CASE,
    get_tokenization,
)
from .tokenization import CompoundTokenization, is_dromedary_case, is_pascal_case

__all__ = [
    "CompoundTokenization",
    "CompoundTokenizationError",
    "CAMEL_CASE",
    "PASCAL_CASE",
    "KEBAB_CASE",
    "SNAKE_CASE",
    "DOT_CASE",
    "CONSTANT_CASE",
    "BUILT_INS",
    "get_tokenization",
    "is_dromedary_case",
    "is_pascal_case",
]
