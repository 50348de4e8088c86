"""Per-segment string transforms applied when segments are joined."""

from __future__ import annotations

from typing import Callable

SegmentTransform = Callable[[str], str]


def identity(segment: str) -> str:
    return segment


def capitalize(segment: str) -> str:
    """Uppercase the first character, leaving the rest untouched.

    Unlike ``str.capitalize`` the remaining characters keep their case, so
    ``"url"`` becomes ``"Url"`` but ``"cDlibrary"`` becomes ``"CDlibrary"``.
    """
    if not segment:
        return segment
    return segment[0].upper() + segment[1:]


def decapitalize(segment: str) -> str:
    """Lowercase the first character unless the segment starts with an acronym.

    A segment whose first two characters are both uppercase is returned as is:
    ``"Url"`` becomes ``"url"`` and ``"X"`` becomes ``"x"``, while ``"URL"`` and
    ``"CDlibrary"`` are kept.
    """
    if not segment:
        return segment
    if len(segment) > 1 and segment[0].isupper() and segment[1].isupper():
        return segment
    return segment[0].lower() + segment[1:]


def uppercase(segment: str) -> str:
    return segment.upper()


def lowercase(segment: str) -> str:
    return segment.lower()


def compose(*transforms: SegmentTransform) -> SegmentTransform:
    """Chain transforms left to right; no transforms gives ``identity``."""
    if not transforms:
        return identity
    if len(transforms) == 1:
        return transforms[0]

    def composed(segment: str) -> str:
        for transform in transforms:
            segment = transform(segment)
        return segment

    return composed


__all__ = [
    "SegmentTransform",
    "identity",
    "capitalize",
    "decapitalize",
    "uppercase",
    "lowercase",
    "compose",
]
