"""Handles the parsing, validation and application of replace-rule files."""

import logging
from pathlib import Path
from typing import Any, Literal

import regex
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .pattern import LiteralPattern, Pattern, compile_pattern
from .replace import replace_all_with_count, string_replace_all_with_count

logger = logging.getLogger(__name__)

# Pattern truncation length for debug logging
_PATTERN_LOG_MAX_LENGTH = 50

# Separator of the "old -> new" shorthand rule form
_SHORTHAND_SEPARATOR = "->"


class ReplaceRule(BaseModel):
    """A single pattern/replacement pair, applied to the whole text."""

    pattern: str
    replacement: str = ""
    kind: Literal["literal", "regex"] = "literal"
    ignore_case: bool = False
    multiline: bool = False
    dotall: bool = False
    collapse: bool = Field(default=False, description="Merge consecutive replacements into one.")

    @model_validator(mode="after")
    def check_pattern(self) -> "ReplaceRule":
        """Validate regex syntax up front and reject flags on literal rules."""
        if self.kind == "literal":
            if self.ignore_case or self.multiline or self.dotall:
                msg = f"Regex flags are not supported on literal replace rule '{self.pattern}'"
                raise ValueError(msg)
            return self

        try:
            self.to_pattern()
        except regex.error as e:
            msg = f"Invalid regex pattern in replace rule '{self.pattern}': {e}"
            raise ValueError(msg) from e
        return self

    def to_pattern(self) -> Pattern:
        """Build the pattern variant this rule matches with."""
        if self.kind == "literal":
            return LiteralPattern(self.pattern)
        return compile_pattern(
            self.pattern,
            ignore_case=self.ignore_case,
            multiline=self.multiline,
            dotall=self.dotall,
        )

    def apply(self, text: str) -> tuple[str, int]:
        """
        Apply the rule to `text`.

        Returns:
            A tuple of (new_text, match_count).

        """
        replace = string_replace_all_with_count if self.collapse else replace_all_with_count
        return replace(text, self.to_pattern(), self.replacement)


class RuleSet(BaseModel):
    """An ordered list of replace rules; each rule sees the previous one's output."""

    rules: list[ReplaceRule] = Field(default_factory=list)

    @field_validator("rules", mode="before")
    @classmethod
    def expand_shorthand(cls, v: Any) -> Any:  # noqa: ANN401
        """Allow users to write a literal rule as a plain 'old -> new' string."""
        if not isinstance(v, list):
            return v  # Let default validation handle non-list types

        processed_rules = []
        for item in v:
            if isinstance(item, str) and _SHORTHAND_SEPARATOR in item:
                pattern, replacement = (part.strip() for part in item.split(_SHORTHAND_SEPARATOR, 1))
                processed_rules.append({"pattern": pattern, "replacement": replacement})
            else:
                processed_rules.append(item)
        return processed_rules

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuleSet":
        """
        Create a RuleSet from a mapping with a 'rules' list.

        Raises:
            ValueError: If the rules are invalid.

        """
        try:
            return cls(rules=data.get("rules") or [])
        except ValidationError as e:
            msg = f"Invalid or missing configuration: {e}"
            raise ValueError(msg) from e

    def apply(self, text: str) -> str:
        """Apply every rule in order and return the final text."""
        for index, rule in enumerate(self.rules, start=1):
            text, count = rule.apply(text)
            logger.debug(
                "[Rule %d] %s '%s' matched %d time(s).",
                index,
                rule.kind,
                rule.pattern[:_PATTERN_LOG_MAX_LENGTH],
                count,
            )
        return text


def load_rules(config_path: str | Path) -> RuleSet:
    """
    Load, parse, and validate a YAML rule file.

    Args:
        config_path: The path to the rules YAML file.

    Returns:
        A validated RuleSet.

    Raises:
        FileNotFoundError: If the rule file does not exist.
        yaml.YAMLError: If there is a syntax error in the YAML file.
        ValueError: If the configuration is invalid.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Rule file not found at: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML rule file: {e}"
        raise yaml.YAMLError(msg) from e

    if not isinstance(data, dict):
        msg = "Invalid or missing configuration: rule file must be a YAML mapping (dictionary)."
        raise ValueError(msg)

    rule_set = RuleSet.from_dict(data)
    logger.debug("Loaded %d replace rule(s) from %s", len(rule_set.rules), path)
    return rule_set
