from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from .logger import logger
from .strategies import JoinStrategy, SplitStrategy
from .tokenization import CompoundTokenization
from .transforms import capitalize, decapitalize, uppercase

CAMEL_CASE = CompoundTokenization(
    "camelCase",
    SplitStrategy.case_transition(),
    JoinStrategy(other_segments=capitalize),
)

PASCAL_CASE = CompoundTokenization(
    "PascalCase",
    SplitStrategy.case_transition(first_segment=decapitalize),
    JoinStrategy(first_segment=capitalize, other_segments=capitalize),
)

KEBAB_CASE = CompoundTokenization(
    "kebab-case", SplitStrategy.delimited("-"), JoinStrategy(delimiter="-")
)

SNAKE_CASE = CompoundTokenization(
    "snake_case", SplitStrategy.delimited("_"), JoinStrategy(delimiter="_")
)

DOT_CASE = CompoundTokenization(
    "dot.case", SplitStrategy.delimited("."), JoinStrategy(delimiter=".")
)

CONSTANT_CASE = SNAKE_CASE.named_with_added_segment_transformation(
    "CONSTANT_CASE", uppercase
)

BUILT_INS: Mapping[str, CompoundTokenization] = MappingProxyType(
    {
        t.name: t
        for t in (CAMEL_CASE, PASCAL_CASE, KEBAB_CASE, SNAKE_CASE, DOT_CASE, CONSTANT_CASE)
    }
)

_SEPARATORS = re.compile(r"[\s_.\-]+")


def _lookup_key(name: str) -> str:
    key = _SEPARATORS.sub("", name).lower()
    if key.endswith("case") and len(key) > len("case"):
        key = key[: -len("case")]
    return key


_BY_KEY: Mapping[str, CompoundTokenization] = MappingProxyType(
    {
        **{_lookup_key(name): t for name, t in BUILT_INS.items()},
        "uppercamel": PASCAL_CASE,
        "lowercamel": CAMEL_CASE,
        "dromedary": CAMEL_CASE,
        "screamingsnake": CONSTANT_CASE,
        "uppersnake": CONSTANT_CASE,
    }
)


def get_tokenization(name: str) -> CompoundTokenization:
    """
    Look up a built-in tokenization by name, ignoring case, separators and a
    trailing "case": "camelCase", "camel", "Kebab-Case" and "CONSTANT" all resolve.
    """
    found = _BY_KEY.get(_lookup_key(name))
    if found is None:
        logger.reject(
            f"Unknown tokenization {name!r}; expected one of {', '.join(BUILT_INS)}"
        )
    return found


__all__ = [
    "CAMEL_CASE",
    "PASCAL_CASE",
    "KEBAB_CASE",
    "SNAKE_CASE",
    "DOT_CASE",
    "CONSTANT_CASE",
    "BUILT_INS",
    "get_tokenization",
]
