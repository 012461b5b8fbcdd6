from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

from sms_parser.policy import MERCHANT_DEBOUNCE_MS, MIN_AMOUNT_THRESHOLD


def _get_int(name: str, default: int) -> int:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    return int(value)


def _get_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name, "").strip().lower()
    if not value:
        return default
    return value in {"1", "true", "yes", "y", "on"}


def _get_decimal(name: str, default: Decimal) -> Decimal:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return Decimal(value)
    except InvalidOperation:
        raise ValueError(f"{name} is not a number: {value!r}") from None


@dataclass(frozen=True)
class SmsIngestConfig:
    gateway_url: str
    gateway_token: str
    gateway_verify_tls: bool
    poll_interval_seconds: int
    lookback_minutes: int
    max_messages: int
    min_notify_amount: Decimal
    merchant_debounce_seconds: int


def load_config() -> SmsIngestConfig:
    gateway_url = os.environ.get("SMS_GATEWAY_URL", "").strip()
    if not gateway_url:
        raise RuntimeError("SMS_GATEWAY_URL is required")

    return SmsIngestConfig(
        gateway_url=gateway_url.rstrip("/"),
        gateway_token=os.environ.get("SMS_GATEWAY_TOKEN", "").strip(),
        gateway_verify_tls=_get_bool("SMS_GATEWAY_VERIFY_TLS", True),
        poll_interval_seconds=_get_int("POLL_INTERVAL_SECONDS", 5),
        lookback_minutes=_get_int("SMS_LOOKBACK_MINUTES", 15),
        max_messages=_get_int("SMS_MAX_MESSAGES", 500),
        min_notify_amount=_get_decimal("MIN_NOTIFY_AMOUNT", MIN_AMOUNT_THRESHOLD),
        merchant_debounce_seconds=_get_int("MERCHANT_DEBOUNCE_SECONDS", MERCHANT_DEBOUNCE_MS // 1000),
    )
