from __future__ import annotations

import re
from typing import Optional

from sms_parser.patterns import MERCHANT_MAX_LEN, MERCHANT_MIN_LEN, MERCHANT_PATTERNS
from sms_parser.types import UNKNOWN_MERCHANT

_WHITESPACE = re.compile(r"\s+")


def extract_merchant(body: Optional[str]) -> str:
    if not body:
        return UNKNOWN_MERCHANT

    for pattern in MERCHANT_PATTERNS:
        m = pattern.search(body)
        if not m or not m.group(1):
            continue
        merchant = m.group(1).strip()
        # very short or very long captures are almost always mis-parses
        if MERCHANT_MIN_LEN < len(merchant) < MERCHANT_MAX_LEN:
            return _WHITESPACE.sub(" ", merchant)

    return UNKNOWN_MERCHANT
