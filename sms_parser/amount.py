from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from sms_parser.patterns import ANY_AMOUNT_PATTERN, DEBIT_PATTERNS, NUMERIC_PATTERN


def _to_amount(raw: Optional[str]) -> Optional[Decimal]:
    if not raw:
        return None
    cleaned = raw.replace(",", "")
    if not NUMERIC_PATTERN.fullmatch(cleaned):
        return None
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return None
    if amount <= 0:
        return None
    return amount


def _numeric_group(groups: Iterable[Optional[str]]) -> Optional[str]:
    for g in groups:
        if g and NUMERIC_PATTERN.fullmatch(g.replace(",", "")):
            return g
    return None


def extract_amount(body: Optional[str]) -> Optional[Decimal]:
    """
    Pull the debited amount out of an SMS body.

    Debit phrasings are tried first, in table order. A pattern that matches
    with a zero or unparsable amount does not end the search, the next
    pattern is tried. When no debit phrasing yields an amount, the first
    positive `Rs./INR/₹ <number>` anywhere in the body is used. That
    fallback can pick up an available-balance figure.
    """
    if not body:
        return None

    for pattern in DEBIT_PATTERNS:
        m = pattern.search(body)
        if not m:
            continue
        amount = _to_amount(_numeric_group(m.groups()))
        if amount is not None:
            return amount

    for m in ANY_AMOUNT_PATTERN.finditer(body):
        amount = _to_amount(m.group(2))
        if amount is not None:
            return amount

    return None
