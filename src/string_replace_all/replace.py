"""
Public replace-all entry points.

`replace_all` wires the matcher to the substitution engine. The other
functions build on it:

- replace_all_with_count(): same result plus the number of replacements
- string_replace_all(): normalising variant that merges repeated replacements
- string_replace_all_with_count(): the same, plus the number of replacements
- collapse_repeats(): the merging step on its own
"""

import regex

from .matching import find_matches
from .pattern import LiteralPattern, PatternLike, RegexPattern, as_pattern
from .substitution import substitute


def replace_all(text: str, pattern: PatternLike, replacement: str) -> str:
    """
    Replace all occurrences of a pattern with the given replacement.

    Args:
        text: The original text, left unchanged.
        pattern: The pattern to search for, which can be either:
            - A string for exact, case-sensitive matching.
            - A compiled regular expression (``regex`` or ``re``).
        replacement: The literal text that replaces each occurrence.

    Returns:
        A new string with all occurrences replaced.

    Examples:
        >>> replace_all("I think Ruth's dog is cuter than your dog!", "dog", "monkey")
        "I think Ruth's monkey is cuter than your monkey!"
        >>> replace_all("I think Ruth's dog is cuter than your dog!", regex.compile("(?i)Dog"), "ferret")
        "I think Ruth's ferret is cuter than your ferret!"

    """
    return substitute(text, find_matches(text, pattern), replacement)


def replace_all_with_count(text: str, pattern: PatternLike, replacement: str) -> tuple[str, int]:
    """Like `replace_all`, but also return how many matches were replaced."""
    matches = find_matches(text, pattern)
    return substitute(text, matches, replacement), len(matches)


def collapse_repeats(text: str, fragment: str) -> str:
    """
    Merge consecutive copies of `fragment` into a single copy.

    Examples:
        >>> collapse_repeats("a--b---c", "-")
        'a-b-c'

    """
    if not fragment:
        return text
    runs = RegexPattern(regex.compile(f"(?:{regex.escape(fragment)})+"))
    return replace_all(text, runs, fragment)


def string_replace_all(text: str, pattern: PatternLike, replacement: str) -> str:
    """
    Replace all occurrences of `pattern`, then merge adjacent replacements.

    This works as follows:
    - A literal pattern that is empty or equal to `replacement` leaves the
      text unchanged.
    - Otherwise every occurrence is replaced, as with `replace_all`.
    - Consecutive copies of a non-empty `replacement` are then collapsed into
      one, so runs of matches do not produce duplicated output.

    Examples:
        >>> string_replace_all("Hello        world!", "  ", " ")
        'Hello world!'
        >>> string_replace_all("Replace * special ** characters!", "*", "-")
        'Replace - special - characters!'

    """
    return string_replace_all_with_count(text, pattern, replacement)[0]


def string_replace_all_with_count(text: str, pattern: PatternLike, replacement: str) -> tuple[str, int]:
    """
    Like `string_replace_all`, but also return how many matches were replaced.

    The count is taken before merging, and is 0 when a literal pattern
    short-circuits (empty, or equal to `replacement`).
    """
    resolved = as_pattern(pattern)
    if isinstance(resolved, LiteralPattern) and resolved.text in ("", replacement):
        return text, 0

    result, count = replace_all_with_count(text, resolved, replacement)
    return collapse_repeats(result, replacement), count
