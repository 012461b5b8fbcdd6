"""
Pattern tables for Indian bank SMS.

All tables are tuples of compiled patterns built at import time and never
mutated afterwards, so every function in the parser can share them across
threads. Order matters: the first matching pattern wins.
"""
from __future__ import annotations

import re

_FLAGS = re.IGNORECASE

_CURRENCY = r"(Rs\.?|INR|₹)"
_NUMBER = r"([\d,]+\.?\d*)"


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, _FLAGS) for p in patterns)


BANK_SENDER_PATTERNS = _compile(
    # VM-HDFCBK, AD-ICICIB; newer DLT ids carry a trailing -S/-T/-P
    r"^[A-Z]{2}-[A-Z]{6}(?:-[A-Z])?$",
    r"HDFC|ICICI|SBI|AXIS|KOTAK|BOB|PNB|IDBI|YES|INDUS|UNION|CANARA|IDFC|RBL|FEDERAL",
)

OTP_PATTERNS = _compile(
    r"\bOTP\b",
    r"\bone[- ]?time[- ]?password\b",
    r"\bverification code\b",
    r"\b\d{4,6}\s*is\s*(your|the)\s*(OTP|code|password)\b",
    r"\b(OTP|code|password)\s*(is|:)?\s*\d{4,6}\b",
)

CREDIT_PATTERNS = _compile(
    r"\bcredited\b",
    r"\breceived\b",
    r"\bdeposit(ed)?\b",
    r"\brefund(ed)?\b",
    r"\bcashback\b",
)

# shared by is_debit() and extract_amount()
DEBIT_PATTERNS = _compile(
    rf"debited\s*(by\s*)?{_CURRENCY}\s*{_NUMBER}",
    rf"{_CURRENCY}\s*{_NUMBER}\s*debited",
    rf"spent\s*{_CURRENCY}\s*{_NUMBER}",
    rf"{_CURRENCY}\s*{_NUMBER}\s*spent",
    rf"withdrawn\s*{_CURRENCY}\s*{_NUMBER}",
    rf"payment\s*of\s*{_CURRENCY}\s*{_NUMBER}",
    rf"txn\s*of\s*{_CURRENCY}\s*{_NUMBER}",
    rf"purchase\s*of\s*{_CURRENCY}\s*{_NUMBER}",
    rf"{_CURRENCY}\s*{_NUMBER}\s*(has been|was)\s*(debited|deducted)",
    rf"{_CURRENCY}\s*{_NUMBER}\s*(transfer(?:red)?)\b",
    rf"\b(transferred)\s*{_CURRENCY}\s*{_NUMBER}",
)

ANY_AMOUNT_PATTERN = re.compile(rf"{_CURRENCY}\s*{_NUMBER}", _FLAGS)

# a capture group counts as the amount when it looks like this once commas are gone
NUMERIC_PATTERN = re.compile(r"\d+\.?\d*")

_MERCHANT_CHARS = r"[A-Za-z0-9\s&'.,-]"

MERCHANT_PATTERNS = _compile(
    rf"(?:at|to|@|for)\s+({_MERCHANT_CHARS}+?)(?:\s+on|\s+ref|\s+txn|\.|\s*$)",
    rf"transferred\s+to\s+({_MERCHANT_CHARS}+?)(?:\s+on|\s+ref|\s*$)",
    rf"paid\s+to\s+({_MERCHANT_CHARS}+?)(?:\s+on|\s+ref|\s*$)",
    r"(?:VPA|UPI\s+ID)\s+([a-z0-9@.-]+)",
)

MERCHANT_MIN_LEN = 2
MERCHANT_MAX_LEN = 50
