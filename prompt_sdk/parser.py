"""Placeholder scanning, substitution and validation for prompt templates.

All functions are pure: they only read their arguments and either return a
value or raise one of the errors from :mod:`prompt_sdk.errors`.
"""

import numbers
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import Any, NamedTuple

from .errors import InvalidTemplateError, MissingVariableError


@dataclass(frozen=True)
class PlaceholderSyntax:
    """Opening and closing delimiters of a placeholder, e.g. ``{{name}}``."""

    open: str = "{{"
    close: str = "}}"

    def __post_init__(self) -> None:
        if not isinstance(self.open, str) or not self.open:
            raise ValueError("Placeholder syntax needs a non-empty opening delimiter")
        if not isinstance(self.close, str) or not self.close:
            raise ValueError("Placeholder syntax needs a non-empty closing delimiter")

    def wrap(self, name: str) -> str:
        """Return the placeholder text for ``name``."""
        return f"{self.open}{name}{self.close}"


DEFAULT_SYNTAX = PlaceholderSyntax()


class Placeholder(NamedTuple):
    """A placeholder occurrence found in a template."""

    name: str
    start: int
    end: int


@lru_cache(maxsize=32)
def _variable_pattern(syntax: PlaceholderSyntax) -> re.Pattern[str]:
    return re.compile(
        re.escape(syntax.open) + r"([A-Za-z0-9_]+)" + re.escape(syntax.close)
    )


@lru_cache(maxsize=32)
def _empty_pattern(syntax: PlaceholderSyntax) -> re.Pattern[str]:
    return re.compile(re.escape(syntax.open) + r"\s*" + re.escape(syntax.close))


def find_placeholders(
    template: str, syntax: PlaceholderSyntax = DEFAULT_SYNTAX
) -> list[Placeholder]:
    """Scan a template for placeholders, leftmost first and non-overlapping."""
    return [
        Placeholder(match.group(1), match.start(), match.end())
        for match in _variable_pattern(syntax).finditer(template)
    ]


def extract_variables(
    template: str, syntax: PlaceholderSyntax = DEFAULT_SYNTAX
) -> frozenset[str]:
    """Return the distinct variable names used in a template."""
    return frozenset(p.name for p in find_placeholders(template, syntax))


def format_value(value: Any) -> str:
    """
    Convert a render input value to the text that replaces its placeholder.

    Booleans become ``true``/``false`` and numbers are written as plain
    decimals (no exponent, no grouping separators).
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, numbers.Real):
        number = Decimal(repr(float(value)))
    else:
        return str(value)

    text = format(number, "f")
    if number.is_finite() and "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def render(
    template: str,
    inputs: Mapping[str, Any],
    required_variables: Iterable[str],
    syntax: PlaceholderSyntax = DEFAULT_SYNTAX,
) -> str:
    """
    Substitute every required variable in a template.

    Args:
        template: Template text with placeholders.
        inputs: Values keyed by variable name. Extra keys are ignored.
        required_variables: Names that must be supplied.
        syntax: Placeholder delimiters.

    Returns:
        The rendered text. Substituted values are not scanned again.

    Raises:
        MissingVariableError: If a required variable is absent or None.
    """
    values = {}
    for name in sorted(required_variables):
        value = inputs.get(name)
        if value is None:
            raise MissingVariableError(name)
        values[name] = format_value(value)

    if not values:
        return template

    def replace(match: re.Match[str]) -> str:
        return values.get(match.group(1), match.group(0))

    return _variable_pattern(syntax).sub(replace, template)


def validate(template: str, syntax: PlaceholderSyntax = DEFAULT_SYNTAX) -> None:
    """
    Check a template for syntax errors.

    Raises:
        InvalidTemplateError: If the template has an empty or
            whitespace-only placeholder.
    """
    match = _empty_pattern(syntax).search(template)
    if match:
        raise InvalidTemplateError(
            f"Invalid template: contains an empty placeholder {match.group(0)!r} "
            f"at position {match.start()}"
        )
