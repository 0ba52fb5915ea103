"""Tag pairs and the tag section.

::

    <tag-section> ::= <tag-pair> <tag-section>
                  ::= <empty>
    <tag-pair>    ::= [ <tag-name> <tag-value> ]
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pgnkit.grammar.base import expect_char, peek, skip_whitespace
from pgnkit.grammar.tokens import QuotedString, Symbol


@dataclass(frozen=True, slots=True)
class TagPair:
    """``[Name "value"]``"""

    name: str
    value: str

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return peek(text, pos) == "["

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[TagPair, int]:
        pos = expect_char(text, pos, "[", "tag pair")
        pos = skip_whitespace(text, pos)
        name, pos = Symbol.parse(text, pos)
        pos = skip_whitespace(text, pos)
        value, pos = QuotedString.parse(text, pos)
        pos = skip_whitespace(text, pos)
        pos = expect_char(text, pos, "]", "tag pair")
        return cls(name.value, value.value), pos


@dataclass(frozen=True, slots=True)
class TagSection:
    """Tag pairs in input order. Duplicate names are kept."""

    pairs: tuple[TagPair, ...] = ()

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[TagPair]:
        return iter(self.pairs)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Value of the first tag called *name*."""
        for pair in self.pairs:
            if pair.name == name:
                return pair.value
        return default

    def as_dict(self) -> dict[str, str]:
        """Name → value; on duplicates the first occurrence wins."""
        headers: dict[str, str] = {}
        for pair in self.pairs:
            headers.setdefault(pair.name, pair.value)
        return headers

    @classmethod
    def check_start(cls, text: str, pos: int) -> bool:
        return TagPair.check_start(text, pos)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[TagSection, int]:
        """Parse consecutive tag pairs; trailing whitespace is consumed."""
        pairs: list[TagPair] = []
        while TagPair.check_start(text, pos):
            pair, pos = TagPair.parse(text, pos)
            pairs.append(pair)
            pos = skip_whitespace(text, pos)
        return cls(tuple(pairs)), pos
