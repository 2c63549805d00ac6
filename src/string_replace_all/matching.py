"""Locate non-overlapping pattern occurrences in a text."""

from collections.abc import Callable, Iterator

from .pattern import LiteralPattern, Pattern, PatternLike, RegexPattern, as_pattern
from .spans import MatchSpan


def _iter_literal(text: str, pattern: LiteralPattern) -> Iterator[MatchSpan]:
    """
    Scan left to right for the literal, resuming after each hit.

    An empty literal yields nothing: replacing "nothing" everywhere is not
    a meaningful substitution.
    """
    needle = pattern.text
    if not needle:
        return

    width = len(needle)
    position = text.find(needle)
    while position != -1:
        yield MatchSpan(position, position + width)
        position = text.find(needle, position + width)


def _iter_regex(text: str, pattern: RegexPattern) -> Iterator[MatchSpan]:
    """Delegate to the engine's own left-to-right, non-overlapping scan."""
    for match in pattern.compiled.finditer(text):
        start, end = match.span()
        yield MatchSpan(start, end)


# Dispatch map from pattern variant to its matcher
MATCHERS: dict[type, Callable[[str, Pattern], Iterator[MatchSpan]]] = {
    LiteralPattern: _iter_literal,
    RegexPattern: _iter_regex,
}


def iter_matches(text: str, pattern: PatternLike) -> Iterator[MatchSpan]:
    """
    Lazily yield match spans for `pattern` in `text`, in ascending order.

    Args:
        text: The text to search.
        pattern: A `Pattern` variant, a plain string, or a compiled regex.

    Returns:
        An iterator of sorted, non-overlapping `MatchSpan` objects.

    """
    resolved = as_pattern(pattern)
    return MATCHERS[type(resolved)](text, resolved)


def find_matches(text: str, pattern: PatternLike) -> list[MatchSpan]:
    """
    Return every non-overlapping match span of `pattern` in `text`.

    Absence of the pattern is not an error; the result is simply empty.

    Examples:
        >>> find_matches("aaaa", "aa")
        [MatchSpan(start=0, end=2), MatchSpan(start=2, end=4)]
        >>> find_matches("hello", "xyz")
        []

    """
    return list(iter_matches(text, pattern))
