from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, NoReturn, Optional

from .logger import logger
from .transforms import SegmentTransform, compose, decapitalize, identity


class SplitKind(str, Enum):
    CASE_TRANSITION = "case-transition"
    DELIMITER = "delimiter"


def split_case_transitions(text: str) -> list[str]:
    """Split before every uppercase character that follows a lowercase one.

    An uppercase run followed by lowercase characters is never split, so
    ``"URLconverter"`` is a single segment while ``"oldUrl"`` is two.
    """
    if not text:
        return []
    segments: list[str] = []
    start = 0
    for i in range(1, len(text)):
        if text[i - 1].islower() and text[i].isupper():
            segments.append(text[start:i])
            start = i
    segments.append(text[start:])
    return segments


def split_delimited(text: str, delimiter: str) -> list[str]:
    # leading, trailing and doubled delimiters keep their empty segments
    if not text:
        return []
    return text.split(delimiter)


def _validate_delimiter(delimiter: Optional[str]) -> None:
    if delimiter is not None and len(delimiter) != 1:
        logger.reject(f"Delimiter must be a single character, got {delimiter!r}")


@dataclass(frozen=True)
class SplitStrategy:
    kind: SplitKind
    delimiter: Optional[str] = None
    first_segment: SegmentTransform = identity

    def __post_init__(self):
        if self.kind is SplitKind.DELIMITER and self.delimiter is None:
            logger.reject("Delimiter splitting requires a delimiter")
        if self.kind is SplitKind.CASE_TRANSITION and self.delimiter is not None:
            logger.reject("Case-transition splitting does not take a delimiter")
        _validate_delimiter(self.delimiter)

    @classmethod
    def case_transition(
        cls, first_segment: SegmentTransform = identity
    ) -> "SplitStrategy":
        return cls(SplitKind.CASE_TRANSITION, first_segment=first_segment)

    @classmethod
    def delimited(cls, delimiter: str) -> "SplitStrategy":
        return cls(SplitKind.DELIMITER, delimiter=delimiter)

    def __call__(self, text: str) -> list[str]:
        if self.kind is SplitKind.DELIMITER:
            return split_delimited(text, self.delimiter)  # type: ignore[arg-type]
        segments = split_case_transitions(text)
        return [
            self.first_segment(segment) if i == 0 else decapitalize(segment)
            for i, segment in enumerate(segments)
        ]


@dataclass(frozen=True)
class JoinStrategy:
    """Reassemble segments, optionally separated by a delimiter.

    Each segment first goes through ``transforms`` in order, then through the
    case rule for its position: ``first_segment`` for index 0 and
    ``other_segments`` for the rest. With a delimiter, a transformed segment
    that already contains it is rejected.
    """

    delimiter: Optional[str] = None
    first_segment: SegmentTransform = identity
    other_segments: SegmentTransform = identity
    transforms: tuple[SegmentTransform, ...] = ()

    def __post_init__(self):
        _validate_delimiter(self.delimiter)

    def with_transform(self, transform: SegmentTransform) -> "JoinStrategy":
        return replace(self, transforms=self.transforms + (transform,))

    def render(self, index: int, segment: str) -> str:
        segment = compose(*self.transforms)(segment)
        case = self.first_segment if index == 0 else self.other_segments
        return case(segment)

    def __call__(
        self,
        segments: Iterable[str],
        *,
        reject: Optional[Callable[[str], NoReturn]] = None,
        check_delimiter: bool = True,
    ) -> str:
        """
        Join ``segments``. Unless ``check_delimiter`` is off, a segment that would
        carry the delimiter is handed to ``reject``, or rejected through the logger.
        """
        rendered: list[str] = []
        for index, segment in enumerate(segments):
            out = self.render(index, segment)
            if check_delimiter and self.delimiter is not None and self.delimiter in out:
                if reject is not None:
                    reject(segment)
                logger.reject(
                    f"Segment {segment!r} must not contain delimiter {self.delimiter!r}"
                )
            rendered.append(out)
        return (self.delimiter or "").join(rendered)


__all__ = [
    "SplitKind",
    "SplitStrategy",
    "JoinStrategy",
    "split_case_transitions",
    "split_delimited",
]
