"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_VARIATION_DEPTH = 64


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Knobs that tighten or loosen the grammar.

    Args:
        max_variation_depth: Deepest allowed nesting of recursive variations.
        strict_termination: Reject movetext without a termination marker
            instead of treating the game as unterminated.
        strict_san: Reject move symbols that are not valid SAN instead of
            keeping them as raw symbols.
    """

    max_variation_depth: int = DEFAULT_MAX_VARIATION_DEPTH
    strict_termination: bool = False
    strict_san: bool = False

    def __post_init__(self) -> None:
        if self.max_variation_depth < 0:
            raise ValueError("max_variation_depth must be non-negative")

    @classmethod
    def strict(cls, max_variation_depth: int = DEFAULT_MAX_VARIATION_DEPTH) -> ParseOptions:
        return cls(
            max_variation_depth=max_variation_depth,
            strict_termination=True,
            strict_san=True,
        )


DEFAULT_OPTIONS = ParseOptions()
