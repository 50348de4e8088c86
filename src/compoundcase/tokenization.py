"""Compound identifier tokenizations.

A :class:`CompoundTokenization` pairs a split strategy, which breaks an
identifier such as ``"oldUrlConverter"`` into segments, with a join strategy,
which reassembles segments under the same naming convention. Converting
between conventions splits under the source and joins under the target, so
``CAMEL_CASE.to(SNAKE_CASE, "oldUrlConverter")`` gives ``"old_url_converter"``.

Tokenizations are immutable and may be shared freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, NoReturn

from .logger import logger
from .strategies import JoinStrategy, SplitKind, SplitStrategy
from .transforms import SegmentTransform


@dataclass(frozen=True)
class CompoundTokenization:
    name: str
    splitter: SplitStrategy
    joiner: JoinStrategy

    def __str__(self) -> str:
        return self.name

    @property
    def delimiter(self) -> str | None:
        return self.joiner.delimiter

    def split(self, text: str) -> list[str]:
        """Split ``text`` into its segments; empty text has no segments."""
        segments = self.splitter(text)
        logger.trace("%s split %r -> %r", self.name, text, segments)
        return segments

    def join(self, segments: Iterable[str]) -> str:
        """
        Join ``segments`` into a single identifier.
        Raises CompoundTokenizationError if a segment already contains this
        tokenization's delimiter, since it would split into extra segments later.
        """

        def reject(segment: str) -> NoReturn:
            logger.reject(
                f"{self.name} segment {segment!r} must not already use "
                f"{self.name} delimiter {self.delimiter!r}"
            )

        return self.joiner(segments, reject=reject)

    def to(self, target: "CompoundTokenization", text: str) -> str:
        """
        Convert ``text`` from this tokenization to ``target``.
        Segments split by a delimiter pass through unchecked, so
        ``KEBAB_CASE.to(SNAKE_CASE, "foo_bar")`` stays ``"foo_bar"``; segments
        split on case transitions must not hold the target delimiter.
        """
        segments = self.split(text)

        def reject(segment: str) -> NoReturn:
            logger.reject(
                f"{target.name} segments, split from {self.name}, must not already "
                f"use {target.name} delimiter {target.delimiter!r}: {segment!r}"
            )

        result = target.joiner(
            segments,
            reject=reject,
            check_delimiter=self.splitter.kind is not SplitKind.DELIMITER,
        )
        logger.trace("%s -> %s: %r -> %r", self.name, target.name, text, result)
        return result

    def named_with_added_segment_transformation(
        self, name: str, transform: SegmentTransform
    ) -> "CompoundTokenization":
        """
        Derive a tokenization that splits like this one but runs ``transform``
        on every segment when joining, after any transforms already present and
        before the position-dependent case rule. This tokenization is unchanged.
        The name must differ from this one and from every built-in.
        """
        from . import registry

        # BUILT_INS is still unset while the registry derives CONSTANT_CASE
        taken = {self.name, *getattr(registry, "BUILT_INS", ())}
        if not name or name in taken:
            logger.reject(f"Derived tokenization name {name!r} is empty or already in use")
        return replace(self, name=name, joiner=self.joiner.with_transform(transform))

    def to_camel_case(self, text: str) -> str:
        from .registry import CAMEL_CASE

        return self.to(CAMEL_CASE, text)

    def to_pascal_case(self, text: str) -> str:
        from .registry import PASCAL_CASE

        return self.to(PASCAL_CASE, text)

    def to_kebab_case(self, text: str) -> str:
        from .registry import KEBAB_CASE

        return self.to(KEBAB_CASE, text)

    def to_snake_case(self, text: str) -> str:
        from .registry import SNAKE_CASE

        return self.to(SNAKE_CASE, text)

    def to_dot_case(self, text: str) -> str:
        from .registry import DOT_CASE

        return self.to(DOT_CASE, text)

    def to_constant_case(self, text: str) -> str:
        from .registry import CONSTANT_CASE

        return self.to(CONSTANT_CASE, text)


def _first_character(text: str, check: str) -> str:
    if not text:
        logger.reject(f"Cannot determine whether an empty string is {check}")
    return text[0]


def is_dromedary_case(text: str) -> bool:
    """True if camelCase ``text`` starts lowercase, as in ``fooBar``."""
    return _first_character(text, "dromedary case").islower()


def is_pascal_case(text: str) -> bool:
    """True if camelCase ``text`` starts uppercase, as in ``FooBar``."""
    return _first_character(text, "Pascal case").isupper()


__all__ = ["CompoundTokenization", "is_dromedary_case", "is_pascal_case"]
