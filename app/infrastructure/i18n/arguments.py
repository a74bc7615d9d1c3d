"""Interpolation argument variants.

The argument passed to TranslationService.fetch is classified once, at the
call boundary, into one of the variants below. The formatter and the
pluralization logic dispatch on the variant instead of inspecting types.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Real
from typing import Any, Mapping, Optional, Sequence, Union


@dataclass(frozen=True)
class CountArgument:
    """A count driving pluralization.

    Built from a bare number (legacy "%d" substitution) or from a mapping
    holding a "count" entry (named substitution of every mapping entry,
    count included).

    Attributes:
        count: The count.
        values: The full mapping when the mapping form was used, else None.
    """

    count: Any
    values: Optional[Mapping[Any, Any]] = field(default=None, compare=False)

    @property
    def legacy(self) -> bool:
        """True when the count came in as a bare number."""
        return self.values is None


@dataclass(frozen=True)
class PositionalArgument:
    """An ordered sequence substituted into successive printf placeholders."""

    values: Sequence[Any]


@dataclass(frozen=True)
class NamedArgument:
    """A name -> value mapping substituted into %{name} and {{name}}."""

    values: Mapping[Any, Any] = field(compare=False)


@dataclass(frozen=True)
class ScalarArgument:
    """A single value substituted into the first %s."""

    value: Any


@dataclass(frozen=True)
class NoArgument:
    """No argument: the resolved text is returned unchanged."""


NO_ARGUMENT = NoArgument()

Argument = Union[
    CountArgument, PositionalArgument, NamedArgument, ScalarArgument, NoArgument
]

_ARGUMENT_TYPES = (
    CountArgument,
    PositionalArgument,
    NamedArgument,
    ScalarArgument,
    NoArgument,
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def _count_key(values: Mapping[Any, Any]) -> Optional[Any]:
    for name in values:
        if str(name) == "count":
            return name
    return None


def classify_argument(arg: Any) -> Argument:
    """Classify a caller-supplied argument.

    Args:
        arg: None, a number, a list/tuple, a mapping, an already classified
            variant, or any other value.

    Returns:
        The matching argument variant.

    Example:
        >>> classify_argument(4)
        CountArgument(count=4, values=None)
        >>> classify_argument(["a", 1])
        PositionalArgument(values=('a', 1))
    """
    if isinstance(arg, _ARGUMENT_TYPES):
        return arg
    if arg is None:
        return NO_ARGUMENT
    if _is_number(arg):
        return CountArgument(count=arg)
    if isinstance(arg, Mapping):
        name = _count_key(arg)
        if name is not None and arg[name] is not None:
            return CountArgument(count=arg[name], values=dict(arg))
        return NamedArgument(values=dict(arg))
    if isinstance(arg, (list, tuple)):
        return PositionalArgument(values=tuple(arg))
    return ScalarArgument(value=arg)


def argument_count(argument: Argument) -> Optional[Any]:
    """Return the pluralization count carried by an argument, if any."""
    if isinstance(argument, CountArgument):
        return argument.count
    return None
