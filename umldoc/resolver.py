"""Resolve the entity type a raw field type refers to."""
from __future__ import annotations

import re

GENERIC_SPAN = re.compile(r"<(.*)>")
STATEMENT_TERMINATOR = ";"


def resolve(raw_type: str) -> str:
    """Return the effective type name of ``raw_type``.

    ``List<Order>;`` resolves to ``Order``. Only one level is unwrapped and the
    interior is taken as a whole, so ``Map<String, Order>`` resolves to
    ``String, Order`` and nested generics keep their inner brackets.
    """
    text = raw_type.strip()
    if text.endswith(STATEMENT_TERMINATOR):
        text = text[: -len(STATEMENT_TERMINATOR)].rstrip()
    match = GENERIC_SPAN.search(text)
    if match:
        return match.group(1)
    return text


def is_generic(raw_type: str) -> bool:
    return GENERIC_SPAN.search(raw_type) is not None
