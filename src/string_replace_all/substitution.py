"""Build the output text from match spans in a single linear pass."""

from collections.abc import Iterable

from .spans import MatchSpan, check_spans


def substitute(text: str, matches: Iterable[MatchSpan], replacement: str) -> str:
    """
    Replace every span in `matches` with `replacement`.

    Unmatched gaps are copied verbatim; the replacement is injected at each
    match boundary. With no matches the output equals the input.

    Args:
        text: The original text. Never modified.
        matches: Sorted, non-overlapping spans over `text`. May be a lazy
            iterator such as the one returned by `iter_matches`.
        replacement: Literal text inserted for each match (may be empty).

    Returns:
        The substituted text. Its length is
        ``len(text) - total_length(matches) + len(replacement) * len(matches)``.

    Raises:
        ValueError: If `matches` is not a valid span sequence for `text`.

    """
    spans = list(matches)
    check_spans(spans, len(text))

    parts: list[str] = []
    cursor = 0
    for span in spans:
        parts.append(text[cursor : span.start])
        parts.append(replacement)
        cursor = span.end
    parts.append(text[cursor:])

    return "".join(parts)
