"""Conversion of legacy placeholders in stored translations.

Older templates use "%d" for the pluralization count and "%{name}" for named
values. The current syntax is "{{count}}" and "{{name}}". Both still render,
see infrastructure.i18n.formatter; this helper rewrites stored records so
new templates only use the double-brace form.
"""

import re
from typing import Optional

from infrastructure.logging import get_module_logger
from infrastructure.persistence.translation_store import TranslationStore

logger = get_module_logger()

_LEGACY_NAMED = re.compile(r"%\{(.*?)\}")

_CONVERTED_ATTRIBUTES = ("text", "default_text")


def convert_legacy_text(text: Optional[str]) -> Optional[str]:
    """Rewrite legacy placeholders in one text.

    The first "%d" becomes "{{count}}", every "%{name}" becomes "{{name}}".

    Args:
        text: Stored text, or None.

    Returns:
        Converted text (None stays None).
    """
    if text is None:
        return None
    text = text.replace("%d", "{{count}}", 1)
    return _LEGACY_NAMED.sub(r"{{\1}}", text)


def convert_legacy_placeholders(
    store: TranslationStore, language_code: Optional[str] = None
) -> int:
    """Rewrite legacy placeholders in every stored record.

    Args:
        store: Translation store to convert.
        language_code: Only convert records of this locale.

    Returns:
        Number of records changed.
    """
    changed = 0
    for record in store.records(language_code=language_code):
        updates = {
            name: convert_legacy_text(getattr(record, name))
            for name in _CONVERTED_ATTRIBUTES
        }
        if all(getattr(record, name) == value for name, value in updates.items()):
            continue
        for name, value in updates.items():
            setattr(record, name, value)
        with store.transaction():
            store.save(record)
        changed += 1

    logger.info(
        "legacy_placeholders_converted",
        records_changed=changed,
        language_code=language_code,
    )
    return changed
