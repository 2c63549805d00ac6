"""string-replace-all: replace every literal or regex match with a literal string."""

import importlib.metadata

from .matching import find_matches, iter_matches
from .pattern import LiteralPattern, Pattern, RegexPattern, as_pattern, compile_pattern
from .replace import collapse_repeats, replace_all, replace_all_with_count, string_replace_all, string_replace_all_with_count
from .rules import ReplaceRule, RuleSet, load_rules
from .spans import MatchSpan
from .substitution import substitute


def _get_version() -> str:
    """
    Retrieve the package version from metadata.

    Returns:
        The version string, or a development version if not installed.

    """
    try:
        return importlib.metadata.version("string-replace-all")
    except importlib.metadata.PackageNotFoundError:
        # Fallback for when the package is not installed, e.g., in a development environment
        return "0.0.0-dev"


__version__ = _get_version()

__all__ = [
    "LiteralPattern",
    "MatchSpan",
    "Pattern",
    "RegexPattern",
    "ReplaceRule",
    "RuleSet",
    "__version__",
    "as_pattern",
    "collapse_repeats",
    "compile_pattern",
    "find_matches",
    "iter_matches",
    "load_rules",
    "replace_all",
    "replace_all_with_count",
    "string_replace_all",
    "string_replace_all_with_count",
    "substitute",
]
