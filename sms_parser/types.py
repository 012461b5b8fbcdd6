from dataclasses import dataclass
from decimal import Decimal

UNKNOWN_MERCHANT = "Unknown"


@dataclass(frozen=True)
class RawMessage:
    sender: str
    body: str
    received_at: int  # ms since epoch


@dataclass(frozen=True)
class ParsedTransaction:
    amount: Decimal
    merchant: str
    timestamp: int  # ms since epoch, copied from RawMessage.received_at
    raw_text: str
