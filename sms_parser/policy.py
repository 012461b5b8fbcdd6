from __future__ import annotations

from decimal import Decimal

from sms_parser.types import ParsedTransaction

MIN_AMOUNT_THRESHOLD = Decimal("200")
MERCHANT_DEBOUNCE_MS = 5 * 60 * 1000


class NotifyPolicy:
    """
    Decides whether a parsed debit deserves a "what was this for?" prompt.

    Small amounts never prompt. A merchant that already prompted within the
    debounce window is skipped, measured on the transactions' own
    timestamps so replays behave the same as live traffic.
    """

    def __init__(
        self,
        *,
        min_amount: Decimal = MIN_AMOUNT_THRESHOLD,
        debounce_ms: int = MERCHANT_DEBOUNCE_MS,
    ) -> None:
        self._min_amount = Decimal(min_amount)
        self._debounce_ms = int(debounce_ms)
        self._last_notified: dict[str, int] = {}

    def should_notify(self, tx: ParsedTransaction) -> bool:
        if tx.amount < self._min_amount:
            return False

        key = tx.merchant.lower()
        last = self._last_notified.get(key)
        if last is not None and tx.timestamp - last < self._debounce_ms:
            return False

        self._last_notified[key] = tx.timestamp
        return True

    def forget(self, merchant: str) -> None:
        self._last_notified.pop(merchant.lower(), None)
