"""Plural rules for view translations.

A plural rule maps a count to the plural-form index under which a
translation variant is stored. Index 0 is reserved for the optional
zero-form written by TranslationService.set, so ordinary plural buckets
start at 1 (the singular / "one" form).

Different languages have different numbers of plural forms:

- English: one vs. other
  Examples: 1 file, 2 files

- French: one (counts below 2) vs. other

- Polish: one, few, many
  Examples: 1 plik, 2-4 pliki, 5+ plików (but 22-24 pliki)

- Russian/Ukrainian: one, few, many
  Examples: 1, 21 / 2-4, 22-24 / 5-20, 25+

- Japanese: no plural distinction
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Callable, Dict, Optional

# Rules receive the count as given (magnitude only): fractional and
# non-finite counts included. They fall in the plural bucket.
PluralRule = Callable[[Any], int]

ONE = 1
FEW = 2
MANY = 3


def _is_integral(n: Any) -> bool:
    return math.isfinite(n) and n % 1 == 0


def _two_forms(n: Any) -> int:
    return ONE if n == 1 else FEW


def _french(n: Any) -> int:
    return ONE if 0 <= n < 2 else FEW


def _single_form(n: Any) -> int:
    return ONE


def _polish(n: Any) -> int:
    """Polish rule: one / few / many.

    few covers whole counts ending in 2-4 except 12-14; everything else
    above one (including 21, 25, 31 and fractions) is many.
    """
    if n == 1:
        return ONE
    if _is_integral(n) and 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return FEW
    return MANY


def _east_slavic(n: Any) -> int:
    if not _is_integral(n):
        return MANY
    if n % 10 == 1 and n % 100 != 11:
        return ONE
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return FEW
    return MANY


def _czech(n: Any) -> int:
    if n == 1:
        return ONE
    if _is_integral(n) and 2 <= n <= 4:
        return FEW
    return MANY


RULES: Dict[str, PluralRule] = {
    "en": _two_forms,
    "de": _two_forms,
    "nl": _two_forms,
    "es": _two_forms,
    "it": _two_forms,
    "pt": _two_forms,
    "sv": _two_forms,
    "fr": _french,
    "pl": _polish,
    "ru": _east_slavic,
    "uk": _east_slavic,
    "be": _east_slavic,
    "cs": _czech,
    "sk": _czech,
    "ja": _single_form,
    "zh": _single_form,
    "ko": _single_form,
    "tr": _single_form,
}

DEFAULT_RULE: PluralRule = _two_forms


def get_plural_rule(language_code: str) -> PluralRule:
    """Get the plural rule for a language code.

    Region subtags are ignored ("pl-PL" uses the "pl" rule). Unknown
    languages fall back to the two-form rule.

    Args:
        language_code: Language code (e.g., "en-US", "pl-PL", "ja")

    Returns:
        Plural rule callable

    Example:
        >>> get_plural_rule("pl-PL")(22)
        2
    """
    language = language_code.replace("_", "-").split("-")[0].lower()
    return RULES.get(language, DEFAULT_RULE)


def supports_language(language_code: str) -> bool:
    """Check if a dedicated plural rule exists for a language code."""
    return language_code.replace("_", "-").split("-")[0].lower() in RULES


def plural_index(rule: Optional[PluralRule], count: Any) -> int:
    """Apply a plural rule to a count.

    Without a count (or a rule) the singular form is used. Real counts
    reach the rule unchanged apart from their sign. Numeric strings are
    parsed; anything else that is not a real number is passed as NaN, which
    every built-in rule places in its plural bucket.

    Args:
        rule: Plural rule, or None
        count: Count to pluralize, or None

    Returns:
        Plural-form index (1-based, 0 is the zero-form slot)
    """
    if count is None or rule is None:
        return ONE
    if isinstance(count, str):
        try:
            count = float(count)
        except ValueError:
            count = math.nan
    elif isinstance(count, Decimal):
        if count.is_nan():
            count = math.nan
    elif not isinstance(count, Real):
        count = math.nan
    return rule(abs(count))
