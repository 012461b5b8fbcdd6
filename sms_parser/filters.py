from __future__ import annotations

import re
from typing import Iterable, Optional

from sms_parser.patterns import (
    BANK_SENDER_PATTERNS,
    CREDIT_PATTERNS,
    DEBIT_PATTERNS,
    OTP_PATTERNS,
)


def _any_match(patterns: Iterable[re.Pattern[str]], text: Optional[str]) -> bool:
    if not text:
        return False
    return any(p.search(text) for p in patterns)


def is_bank_sender(sender: Optional[str]) -> bool:
    return _any_match(BANK_SENDER_PATTERNS, sender)


def is_otp_message(body: Optional[str]) -> bool:
    return _any_match(OTP_PATTERNS, body)


def is_credit_message(body: Optional[str]) -> bool:
    return _any_match(CREDIT_PATTERNS, body)


def is_debit(body: Optional[str]) -> bool:
    return _any_match(DEBIT_PATTERNS, body)
