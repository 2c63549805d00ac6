"""
Match span value type and helpers over span sequences.

A span is a half-open range [start, end) over the code points of a text.
Sequences handed to the substitution engine must be sorted and
non-overlapping; zero-length spans are allowed and mark empty matches.

Usage example:
    >>> spans = [MatchSpan(0, 3), MatchSpan(3, 3), MatchSpan(5, 8)]
    >>> check_spans(spans, text_length=8)
    >>> total_length(spans)
    6
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchSpan:
    """A single match location [start, end) in the input text."""

    start: int
    end: int

    @property
    def length(self) -> int:
        """Number of code points covered by the span."""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """Check if the span is a zero-length (empty) match."""
        return self.start == self.end

    def extract(self, text: str) -> str:
        """Return the slice of `text` covered by the span."""
        return text[self.start : self.end]


def check_spans(spans: Sequence[MatchSpan], text_length: int) -> None:
    """
    Validate that spans are in bounds, sorted, and non-overlapping.

    Args:
        spans: The span sequence to validate.
        text_length: Length of the text the spans refer to.

    Raises:
        ValueError: If any span is inverted, out of bounds, or overlaps
            (or precedes) the span before it.

    """
    previous_end = 0
    for index, span in enumerate(spans):
        if span.start > span.end:
            msg = f"Invalid span #{index}: start ({span.start}) cannot be greater than end ({span.end})"
            raise ValueError(msg)

        if span.start < previous_end:
            msg = f"Invalid span #{index}: start ({span.start}) precedes the end of the previous span ({previous_end})"
            raise ValueError(msg)

        if span.end > text_length:
            msg = f"Invalid span #{index}: end ({span.end}) exceeds text length ({text_length})"
            raise ValueError(msg)

        previous_end = span.end


def total_length(spans: Iterable[MatchSpan]) -> int:
    """
    Sum the lengths of the spans.

    Assumes the spans do not overlap; see `check_spans`.
    """
    return sum(span.length for span in spans)
