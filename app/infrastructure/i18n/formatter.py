"""Interpolation of caller arguments into resolved translation text.

interpolate() never raises for missing placeholders, extra arguments or
missing arguments. Placeholders that cannot be filled stay literally in
the output.
"""

import re
from typing import Any, Mapping, Sequence

from infrastructure.i18n.arguments import (
    Argument,
    CountArgument,
    NamedArgument,
    PositionalArgument,
    ScalarArgument,
    classify_argument,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# printf-style conversion, e.g. %s, %d, %05.2f, %-10s, %x, %%
_PRINTF_PATTERN = re.compile(
    r"%(?P<spec>[-+ #0]*\d*(?:\.\d+)?)(?P<conversion>[diouxXeEfFgGcrsa%])"
)


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


def substitute_legacy_count(text: str, count: Any) -> str:
    """Replace the first %d with the decimal count.

    Deprecated placeholder syntax, new templates should use {{count}}.
    """
    if "%d" not in text:
        return text
    logger.debug("legacy_count_placeholder_used", count=count)
    return text.replace("%d", _to_text(count), 1)


def substitute_positional(text: str, values: Sequence[Any]) -> str:
    """Substitute printf placeholders left to right from a sequence.

    Each conversion is rendered with Python's % operator. "%%" becomes "%".
    A conversion left without an argument, or whose argument it cannot
    format, is kept as is.

    Args:
        text: Template text.
        values: Ordered values.

    Returns:
        Interpolated text.
    """
    remaining = iter(values)

    def _replace(match: "re.Match[str]") -> str:
        conversion = match.group("conversion")
        if conversion == "%":
            return "%" if not match.group("spec") else match.group(0)
        try:
            value = next(remaining)
        except StopIteration:
            return match.group(0)
        try:
            return f"%{match.group('spec')}{conversion}" % (value,)
        except (TypeError, ValueError, OverflowError):
            return match.group(0)

    return _PRINTF_PATTERN.sub(_replace, text)


def substitute_named(text: str, values: Mapping[Any, Any]) -> str:
    """Replace every %{name} and {{name}} for each mapping entry.

    Entries are applied in mapping order. A value that itself contains
    another entry's placeholder is substituted again by that later entry.

    Args:
        text: Template text.
        values: Name -> value mapping.

    Returns:
        Interpolated text.
    """
    for name, value in values.items():
        name = re.escape(str(name))
        pattern = re.compile(r"%\{" + name + r"\}|\{\{" + name + r"\}\}")
        replacement = _to_text(value)
        text = pattern.sub(lambda _match: replacement, text)
    return text


def substitute_scalar(text: str, value: Any) -> str:
    """Replace the first %s with the value."""
    return text.replace("%s", _to_text(value), 1)


def interpolate(text: str, argument: Any = None) -> str:
    """Interpolate an argument into resolved translation text.

    Args:
        text: Resolved translation text.
        argument: An argument variant, or a raw argument classified on the fly.

    Returns:
        Interpolated text.

    Example:
        >>> interpolate("{{number}} {{adjective}} {{name}}",
        ...             {"number": 3, "adjective": "colored", "name": "toucans"})
        '3 colored toucans'
        >>> interpolate("%d files", 4)
        '4 files'
    """
    argument: Argument = classify_argument(argument)

    if isinstance(argument, CountArgument):
        if argument.legacy:
            return substitute_legacy_count(text, argument.count)
        return substitute_named(text, argument.values)
    if isinstance(argument, PositionalArgument):
        return substitute_positional(text, argument.values)
    if isinstance(argument, NamedArgument):
        return substitute_named(text, argument.values)
    if isinstance(argument, ScalarArgument):
        return substitute_scalar(text, argument.value)
    return text
