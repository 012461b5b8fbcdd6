from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from common.logger import Logger
from sms_parser.amount import extract_amount
from sms_parser.filters import is_bank_sender, is_credit_message, is_debit, is_otp_message
from sms_parser.merchant import extract_merchant
from sms_parser.types import ParsedTransaction, RawMessage


class TransactionMatcher(Protocol):
    def match(self, msg: RawMessage) -> Optional[ParsedTransaction]:
        ...


def classify(msg: RawMessage) -> Optional[ParsedTransaction]:
    """
    Turn one SMS into a debit transaction, or None if it is not one.

    Gates run cheapest first: sender, OTP, credit, debit phrasing, amount.
    None is the only "not a transaction" signal; nothing here raises.
    """
    if not is_bank_sender(msg.sender):
        Logger.debug("Skip sms: sender=%r is not a bank", msg.sender)
        return None

    body = msg.body
    if is_otp_message(body):
        Logger.debug("Skip sms: OTP from %s", msg.sender)
        return None

    if is_credit_message(body):
        Logger.debug("Skip sms: credit from %s", msg.sender)
        return None

    if not is_debit(body):
        Logger.debug("Skip sms: no debit phrasing from %s", msg.sender)
        return None

    amount = extract_amount(body)
    if amount is None:
        Logger.debug("Skip sms: no positive amount from %s", msg.sender)
        return None

    return ParsedTransaction(
        amount=amount,
        merchant=extract_merchant(body),
        timestamp=msg.received_at,
        raw_text=body,
    )


@dataclass(frozen=True)
class DebitSmsMatcher:
    def match(self, msg: RawMessage) -> Optional[ParsedTransaction]:
        return classify(msg)
