import os
import unittest
from decimal import Decimal
from unittest import mock

from sms_parser.config import load_config


class LoadConfigTest(unittest.TestCase):
    def test_gateway_url_is_required(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(RuntimeError):
                load_config()

    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {"SMS_GATEWAY_URL": "http://phone.local:8080/"}, clear=True):
            cfg = load_config()
        self.assertEqual(cfg.gateway_url, "http://phone.local:8080")
        self.assertEqual(cfg.gateway_token, "")
        self.assertTrue(cfg.gateway_verify_tls)
        self.assertEqual(cfg.poll_interval_seconds, 5)
        self.assertEqual(cfg.lookback_minutes, 15)
        self.assertEqual(cfg.max_messages, 500)
        self.assertEqual(cfg.min_notify_amount, Decimal("200"))
        self.assertEqual(cfg.merchant_debounce_seconds, 300)

    def test_overrides(self) -> None:
        env = {
            "SMS_GATEWAY_URL": "https://gw",
            "SMS_GATEWAY_TOKEN": " secret ",
            "SMS_GATEWAY_VERIFY_TLS": "no",
            "POLL_INTERVAL_SECONDS": "30",
            "MIN_NOTIFY_AMOUNT": "99.50",
            "MERCHANT_DEBOUNCE_SECONDS": "60",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            cfg = load_config()
        self.assertEqual(cfg.gateway_token, "secret")
        self.assertFalse(cfg.gateway_verify_tls)
        self.assertEqual(cfg.poll_interval_seconds, 30)
        self.assertEqual(cfg.min_notify_amount, Decimal("99.50"))
        self.assertEqual(cfg.merchant_debounce_seconds, 60)

    def test_bad_amount(self) -> None:
        env = {"SMS_GATEWAY_URL": "https://gw", "MIN_NOTIFY_AMOUNT": "lots"}
        with mock.patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ValueError):
                load_config()


if __name__ == "__main__":
    unittest.main()
