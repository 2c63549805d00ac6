"""
Pattern variants understood by the matcher.

A pattern is either a literal substring or an already compiled regular
expression. Both live behind the single `Pattern` alias so that callers can
hand any of them to `find_matches` or `replace_all` without branching.

Usage example:
    >>> as_pattern("dog")
    LiteralPattern(text='dog')
    >>> as_pattern(regex.compile("(?i)dog")).compiled.pattern
    '(?i)dog'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

import regex

# Compiled objects from both engines share the `finditer` / `span()` contract.
COMPILED_TYPES: tuple[type, ...] = (regex.Pattern, re.Pattern)


@dataclass(frozen=True)
class LiteralPattern:
    """A fixed substring, matched verbatim and case-sensitively."""

    text: str


@dataclass(frozen=True)
class RegexPattern:
    """
    A compiled regular expression supplied by the caller.

    Attributes:
        compiled: A `regex.Pattern` (or `re.Pattern`). Compilation and its
            errors belong to the regex engine, never to this package.

    """

    compiled: Any

    def __post_init__(self) -> None:
        """Reject objects that are not compiled patterns."""
        if not isinstance(self.compiled, COMPILED_TYPES):
            msg = f"RegexPattern expects a compiled pattern, got {type(self.compiled).__name__}"
            raise TypeError(msg)


Pattern = Union[LiteralPattern, RegexPattern]
"""The closed set of pattern variants."""

PatternLike = Union[Pattern, str, "regex.Pattern[str]", "re.Pattern[str]"]
"""Anything `as_pattern` can turn into a `Pattern`."""


def as_pattern(value: PatternLike) -> Pattern:
    """
    Coerce a string, compiled regex, or existing pattern into a `Pattern`.

    Raises:
        TypeError: If the value is none of the supported kinds.

    """
    if isinstance(value, (LiteralPattern, RegexPattern)):
        return value
    if isinstance(value, str):
        return LiteralPattern(value)
    if isinstance(value, COMPILED_TYPES):
        return RegexPattern(value)
    msg = f"Unsupported pattern type: {type(value).__name__}"
    raise TypeError(msg)


def compile_pattern(
    source: str,
    *,
    ignore_case: bool = False,
    multiline: bool = False,
    dotall: bool = False,
) -> RegexPattern:
    """
    Compile `source` with the `regex` library and wrap it as a `RegexPattern`.

    Invalid syntax surfaces as `regex.error`, unchanged.
    """
    flags = 0
    if ignore_case:
        flags |= regex.IGNORECASE
    if multiline:
        flags |= regex.MULTILINE
    if dotall:
        flags |= regex.DOTALL
    return RegexPattern(regex.compile(source, flags))
