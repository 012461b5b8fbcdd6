import unittest
from decimal import Decimal

from sms_parser.classifier import DebitSmsMatcher, classify
from sms_parser.types import ParsedTransaction, RawMessage, UNKNOWN_MERCHANT

RECEIVED_AT = 1735460000000

DEBIT_BODIES = [
    "Your a/c XX1234 debited by Rs.2500.00 at Swiggy on 29-Dec-24",
    "Rs.1,200 spent on your card at Zomato",
    "Rs.25000.00 transfer to UPI ID landlord@upi",
]


def _msg(sender: str, body: str) -> RawMessage:
    return RawMessage(sender=sender, body=body, received_at=RECEIVED_AT)


class ClassifyScenarioTest(unittest.TestCase):
    def test_card_debit_at_merchant(self) -> None:
        body = "Your a/c XX1234 debited by Rs.2500.00 at Swiggy on 29-Dec-24"
        tx = classify(_msg("HDFCBK", body))
        self.assertEqual(
            tx,
            ParsedTransaction(
                amount=Decimal("2500"),
                merchant="Swiggy",
                timestamp=RECEIVED_AT,
                raw_text=body,
            ),
        )

    def test_otp_is_dropped(self) -> None:
        self.assertIsNone(classify(_msg("VM-ICICIB", "456789 is your OTP for login")))

    def test_credit_is_dropped(self) -> None:
        self.assertIsNone(classify(_msg("SBI", "Your account credited with Rs.5000.00")))

    def test_upi_transfer(self) -> None:
        tx = classify(_msg("AXISBK", "Rs.25000.00 transfer to UPI ID landlord@upi"))
        self.assertIsNotNone(tx)
        self.assertEqual(tx.amount, Decimal("25000"))
        self.assertEqual(tx.merchant, "landlord@upi")

    def test_unknown_sender_is_dropped(self) -> None:
        for body in DEBIT_BODIES:
            with self.subTest(body=body):
                self.assertIsNone(classify(_msg("RANDOMCO", body)))

    def test_zero_amount_is_dropped(self) -> None:
        self.assertIsNone(classify(_msg("KOTAK", "spent Rs.0.00 at Store")))


class ClassifyPropertiesTest(unittest.TestCase):
    def test_otp_vetoes_debit_shaped_body(self) -> None:
        body = "Rs.500.00 debited at Amazon. OTP 123456 for txn"
        self.assertIsNone(classify(_msg("HDFCBK", body)))

    def test_credit_vetoes_bank_sender(self) -> None:
        body = "Rs.500 debited from a/c XX12 and credited to a/c XX34"
        self.assertIsNone(classify(_msg("VM-HDFCBK", body)))

    def test_no_debit_phrasing(self) -> None:
        self.assertIsNone(classify(_msg("HDFCBK", "Your balance is Rs.5000 as of today")))

    def test_bill_reminder_is_not_a_debit(self) -> None:
        body = "Your card bill is due on 05-Jan. Minimum amount to be paid Rs.1,499"
        self.assertIsNone(classify(_msg("HDFCBK", body)))

    def test_empty_input(self) -> None:
        self.assertIsNone(classify(_msg("", "")))
        self.assertIsNone(classify(_msg("HDFCBK", "")))
        self.assertIsNone(classify(_msg("", DEBIT_BODIES[0])))

    def test_unknown_merchant_still_succeeds(self) -> None:
        tx = classify(_msg("SBIINB", "Rs.1,250.00 debited from your a/c XX9876"))
        self.assertIsNotNone(tx)
        self.assertEqual(tx.amount, Decimal("1250"))
        self.assertEqual(tx.merchant, UNKNOWN_MERCHANT)

    def test_raw_text_preserved(self) -> None:
        body = "  Rs.80   spent at Chai Point.  "
        tx = classify(_msg("HDFCBK", body))
        self.assertEqual(tx.raw_text, body)
        self.assertEqual(tx.merchant, "Chai Point")

    def test_is_deterministic(self) -> None:
        msg = _msg("HDFCBK", DEBIT_BODIES[1])
        self.assertEqual(classify(msg), classify(msg))


class DebitSmsMatcherTest(unittest.TestCase):
    def test_matches_like_classify(self) -> None:
        matcher = DebitSmsMatcher()
        for body in DEBIT_BODIES:
            msg = _msg("HDFCBK", body)
            with self.subTest(body=body):
                self.assertEqual(matcher.match(msg), classify(msg))
                self.assertIsNotNone(matcher.match(msg))


if __name__ == "__main__":
    unittest.main()
